"""Summary: Java-style key/value map backed by a built-in dict.
Why: Give callers explicit failure channels for duplicate and missing keys.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Final, Generic, TypeVar, overload

from .errors import DuplicateKeyError, KeyNotFoundError, KeyValuePairNotFoundError

K = TypeVar("K")
V = TypeVar("V")

_MISSING: Final[Any] = object()


class HashMap(Generic[K, V]):
    """Store unique keys and their values using a Java ``HashMap`` vocabulary.

    Every key maps to exactly one value. Insertion order carries no meaning
    beyond what the backing ``dict`` happens to preserve.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, initial: Mapping[K, V] | Iterable[tuple[K, V]] | None = None) -> None:
        """Create a map, optionally seeded through ``put``.

        Args:
            initial: Mapping or iterable of pairs to insert. Duplicate keys
                raise ``DuplicateKeyError``.
        """
        self._dictionary: dict[K, V] = {}
        if initial is None:
            return
        pairs = initial.items() if isinstance(initial, Mapping) else initial
        for key, value in pairs:
            self.put(key, value)

    @property
    def is_empty(self) -> bool:
        """Whether the map holds no entries."""
        return self.count == 0

    @property
    def count(self) -> int:
        """Number of key/value pairs in the map."""
        return len(self._dictionary)

    def put(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``.

        Raises:
            DuplicateKeyError: If ``key`` is already present.
        """
        if key in self._dictionary:
            raise DuplicateKeyError(key, self._dictionary[key])
        self._dictionary[key] = value

    def put_pair(self, pair: tuple[K, V]) -> None:
        """Add a ``(key, value)`` pair; see ``put``."""
        key, value = pair
        self.put(key, value)

    def put_if_absent(self, key: K, value: V) -> None:
        """Add ``key`` only when it is not already in use; otherwise do nothing."""
        if key not in self._dictionary:
            self._dictionary[key] = value

    def put_if_absent_pair(self, pair: tuple[K, V]) -> None:
        key, value = pair
        self.put_if_absent(key, value)

    def get_value(self, key: K) -> V:
        """Return the value associated with ``key``.

        Raises:
            KeyNotFoundError: If ``key`` is not in the map.
        """
        try:
            return self._dictionary[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get_value_or_default(self, key: K, default_value: V) -> V:
        """Return the value for ``key``, or ``default_value`` when it is absent."""
        try:
            return self._dictionary.get(key, default_value)
        except TypeError:
            # Unhashable lookups cannot be present.
            return default_value

    def keys(self) -> list[K]:
        """Snapshot of the keys."""
        return list(self._dictionary.keys())

    def values(self) -> list[V]:
        """Snapshot of the values."""
        return list(self._dictionary.values())

    def key_value_pairs(self) -> list[tuple[K, V]]:
        """Snapshot of the ``(key, value)`` pairs."""
        return list(self._dictionary.items())

    def to_read_only_dictionary(self) -> Mapping[K, V]:
        """Return a live, read-only view of the backing store."""
        return MappingProxyType(self._dictionary)

    def to_dictionary(self) -> dict[K, V]:
        """Return the backing store itself; mutations are reflected in the map."""
        return self._dictionary

    def remove(self, key: K) -> bool:
        """Remove ``key`` and its value.

        Returns:
            bool: True if an entry was removed; False if the key was absent.
        """
        if self.contains_key(key):
            del self._dictionary[key]
            return True
        return False

    def remove_pair(self, pair: tuple[K, V]) -> bool:
        """Remove ``pair`` only when the key currently maps to an equal value.

        Raises:
            KeyValuePairNotFoundError: If the key is absent or its value differs.
        """
        key, value = pair
        if self.contains_key_value_pair(pair):
            return self.remove(key)
        raise KeyValuePairNotFoundError(key, value)

    def remove_instances_of(self, value: V) -> None:
        """Remove every entry whose value equals ``value``."""
        matching = [key for key, current in self._dictionary.items() if current == value]
        for key in matching:
            self.remove(key)

    @overload
    def replace(self, key: K, value: V, /) -> bool: ...

    @overload
    def replace(self, key: K, old_value: V, new_value: V, /) -> bool: ...

    def replace(self, key: K, value: V, new_value: V = _MISSING, /) -> bool:
        """Replace the value stored under ``key``.

        Called with two arguments the value is overwritten unconditionally.
        Called as ``replace(key, old_value, new_value)`` the value is only
        overwritten when the current value equals ``old_value``.

        Returns:
            bool: True when the value was replaced; False when ``old_value``
            did not match.

        Raises:
            KeyNotFoundError: If ``key`` is not in the map.
        """
        if key not in self._dictionary:
            raise KeyNotFoundError(key)

        if new_value is _MISSING:
            self._dictionary[key] = value
            return True

        if self._dictionary[key] != value:
            return False
        self._dictionary[key] = new_value
        return True

    def clear(self) -> None:
        self._dictionary.clear()

    def contains_key(self, key: K) -> bool:
        return key in self

    def contains_value(self, value: V) -> bool:
        return any(current == value for current in self._dictionary.values())

    def contains_key_value_pair(self, pair: tuple[K, V]) -> bool:
        """Return whether the pair's key currently maps to the pair's value.

        Raises:
            KeyValuePairNotFoundError: If the pair's key is not in the map.
        """
        key, value = pair
        if key not in self._dictionary:
            raise KeyValuePairNotFoundError(key, value)
        return self._dictionary[key] == value

    def equals(self, other: object) -> bool:
        """Return whether every entry of this map is in ``other`` with an equal value.

        Containment runs one way: ``other`` may hold extra keys. Use ``==`` for
        two-sided equality.
        """
        if not isinstance(other, HashMap):
            return False
        for key, value in self._dictionary.items():
            if not other.contains_key(key):
                return False
            if other.get_value(key) != value:
                return False
        return True

    def hash_code(self) -> int:
        """Derive a deterministic integer from the serialized entries.

        The result follows iteration order, so two equal maps filled in a
        different order may disagree. Treat it as advisory only.
        """
        serialized = "".join(f"K{key},V:{value}\n" for key, value in self._dictionary.items())
        digest = hashlib.sha256(serialized.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big", signed=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMap):
            return NotImplemented
        return self.equals(other) and other.equals(self)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._dictionary
        except TypeError:
            return False

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._dictionary!r})"


__all__ = ["HashMap"]
