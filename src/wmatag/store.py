"""
AttributeStore - ordered native key -> attribute list container.
"""

from typing import Dict, Iterator, Iterable, List, Tuple

from .attribute import Attribute, AttributeList


class AttributeStore:
    """
    Maps exact native ASF keys to ordered lists of attributes.

    Keys keep their insertion order. A key is never present with an empty
    list: appending creates the list, and inserting an empty list or erasing
    removes the key entirely.
    """

    def __init__(self):
        self._map: Dict[str, AttributeList] = {}

    def contains(self, key: str) -> bool:
        return key in self._map

    def lookup(self, key: str) -> AttributeList:
        """Return a copy of the values under key, or an empty list."""
        return list(self._map.get(key, ()))

    def insert(self, key: str, values: Iterable[Attribute]) -> None:
        """Replace the values under key."""
        values = list(values)
        if not values:
            self._map.pop(key, None)
            return
        self._map[key] = values

    def append(self, key: str, value: Attribute) -> None:
        if key in self._map:
            self._map[key].append(value)
        else:
            self._map[key] = [value]

    def erase(self, key: str) -> None:
        self._map.pop(key, None)

    def clear(self) -> None:
        self._map.clear()

    def keys(self) -> List[str]:
        return list(self._map)

    def items(self) -> Iterator[Tuple[str, AttributeList]]:
        """Iterate (key, values) pairs over a snapshot of the keys."""
        for key in list(self._map):
            yield key, list(self._map[key])

    def is_empty(self) -> bool:
        return not self._map

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeStore):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        return f"AttributeStore({self._map!r})"
