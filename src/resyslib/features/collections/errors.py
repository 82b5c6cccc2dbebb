"""Exceptions raised by the collection types."""

from __future__ import annotations


class HashMapError(Exception):
    """Base class for ``HashMap`` failures."""


class DuplicateKeyError(HashMapError, ValueError):
    """Raised when inserting a key that is already present."""

    def __init__(self, key: object, existing_value: object) -> None:
        self.key = key
        self.existing_value = existing_value
        super().__init__(
            f"Existing key {key!r} found with value {existing_value!r}. "
            "Can't put a key that already exists."
        )


class KeyNotFoundError(HashMapError, KeyError):
    """Raised when a key is absent from the map."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key {self.key!r} was not found"


class KeyValuePairNotFoundError(HashMapError, KeyError):
    """Raised when a key/value pair does not match the map's current entry."""

    def __init__(self, key: object, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__((key, value))

    def __str__(self) -> str:
        return f"Key/value pair ({self.key!r}, {self.value!r}) was not found"


__all__ = [
    "DuplicateKeyError",
    "HashMapError",
    "KeyNotFoundError",
    "KeyValuePairNotFoundError",
]
