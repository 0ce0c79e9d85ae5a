from .input import InputBundle, emit_input, parse_input, require_valid, validate_input

__all__ = ["InputBundle", "parse_input", "validate_input", "emit_input", "require_valid"]
