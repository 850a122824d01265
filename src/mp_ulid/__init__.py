"""
mp_ulid – ULID generation, parsing and ordering.

Import path convention::

    from mp_ulid import Ulid, UlidGenerator
    from mp_ulid.codec import encode, decode, compare
    from mp_ulid.kernel.errors import DecodeError, GenerationError
    from mp_ulid.testing import SequenceClock, FixedRandomSource
"""

from mp_ulid.codec import compare, decode, encode, is_valid, pack, unpack
from mp_ulid.generator import SynchronizedGenerator, UlidGenerator, new, new_string
from mp_ulid.kernel.types import Ulid

__version__ = "0.1.0"
__all__ = [
    "SynchronizedGenerator",
    "Ulid",
    "UlidGenerator",
    "__version__",
    "compare",
    "decode",
    "encode",
    "is_valid",
    "new",
    "new_string",
    "pack",
    "unpack",
]
