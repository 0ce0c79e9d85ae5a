"""I/O utilities.

Subpackages
-----------
- :mod:`geosensors.io.readers`: parsing adapters for location/reading tables
- :mod:`geosensors.io.export`: table writers (the storage step of re-emission)
- :mod:`geosensors.io.wire`: inter-process message encoding
"""

from .export import *  # noqa: F401,F403
from .readers import *  # noqa: F401,F403
