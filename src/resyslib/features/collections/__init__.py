# Path: `src/resyslib/features/collections/__init__.py`
# Summary: Export the map container and its errors.
# Why: Provide a stable import surface for callers and tests.

from .errors import (
    DuplicateKeyError,
    HashMapError,
    KeyNotFoundError,
    KeyValuePairNotFoundError,
)
from .hash_map import HashMap

__all__ = [
    "DuplicateKeyError",
    "HashMap",
    "HashMapError",
    "KeyNotFoundError",
    "KeyValuePairNotFoundError",
]
