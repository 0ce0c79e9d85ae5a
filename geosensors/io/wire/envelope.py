from __future__ import annotations

"""Tagged, versioned msgpack envelope for inter-process messages.

Layout:

{
  "tag": "<heading>.<kind>",     # e.g. "gravity.spec"
  "version": 1,
  "body": {<message fields>},
}

The envelope knows nothing about message bodies; each sensor type declares its
body schema explicitly (see :mod:`geosensors.io.wire.messages`).
"""

from typing import Any, Dict, Type, TypeVar, get_args

import msgpack
from pydantic import BaseModel, ValidationError

from geosensors.contracts.choices import MessageKind
from geosensors.errors import MalformedPayload

WIRE_VERSION = 1

M = TypeVar("M", bound=BaseModel)


def pack_message(tag: str, body: BaseModel) -> bytes:
    """Serialize ``body`` under ``tag``. Fields left as None are omitted."""

    envelope = {
        "tag": tag,
        "version": WIRE_VERSION,
        "body": body.model_dump(exclude_none=True),
    }
    return msgpack.packb(envelope, use_bin_type=True)


def _unpack_envelope(payload: bytes) -> Dict[str, Any]:
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise MalformedPayload(f"payload must be bytes; got {type(payload).__name__}")
    try:
        envelope = msgpack.unpackb(bytes(payload), raw=False, strict_map_key=True)
    except (msgpack.exceptions.UnpackException, ValueError, TypeError) as e:
        raise MalformedPayload(f"payload is not a valid message: {e}") from e
    if not isinstance(envelope, dict):
        raise MalformedPayload("payload is not a message envelope")
    return envelope


def unpack_message(payload: bytes, tag: str, schema: Type[M]) -> M:
    """Parse ``payload`` as a ``tag`` message and validate its body against ``schema``.

    Either the whole message parses or :class:`MalformedPayload` is raised.
    """

    envelope = _unpack_envelope(payload)

    got_tag = envelope.get("tag")
    if got_tag != tag:
        raise MalformedPayload(f"expected a '{tag}' message; got {got_tag!r}")

    version = envelope.get("version")
    # bool is an int subclass; msgpack true must not pass as version 1
    if type(version) is not int or version != WIRE_VERSION:
        raise MalformedPayload(f"unsupported message version {version!r} (expected {WIRE_VERSION})")

    body = envelope.get("body")
    if not isinstance(body, dict):
        raise MalformedPayload(f"'{tag}' message has no body")

    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise MalformedPayload(f"'{tag}' message does not match its schema: {e}") from e


def message_tag(heading: str, kind: MessageKind) -> str:
    if kind not in get_args(MessageKind):
        raise ValueError(f"unknown message kind {kind!r}; expected one of {get_args(MessageKind)}")
    return f"{heading}.{kind}"


def decode_value(payload: bytes, tag: str, schema: Type[M]):
    """Parse a message and convert it to its in-memory value (``schema.to_value``).

    Shape errors raised while rebuilding the value are reported as
    :class:`MalformedPayload` too; nothing partially built is returned.
    """

    message = unpack_message(payload, tag, schema)
    try:
        return message.to_value()  # type: ignore[attr-defined]
    except MalformedPayload:
        raise
    except ValueError as e:
        raise MalformedPayload(f"'{tag}' message is inconsistent: {e}") from e
