"""
PropertyMap - the canonical, multi-valued property view.
"""

from typing import Any, Iterable, List, Mapping, Optional


def _norm_key(key: Any) -> str:
    return str(key).strip().upper()


def _norm_values(values: Any) -> List[str]:
    if values is None:
        return []
    if isinstance(values, (str, bytes)):
        values = [values]
    out = []
    for v in values:
        if isinstance(v, bytes):
            out.append(v.decode('utf-8', errors='replace'))
        else:
            out.append(str(v))
    return out


class PropertyMap(dict):
    """
    Canonical key -> list of text values.

    Keys are upper-cased on every access ('title' and 'TITLE' are the same
    property) and a bare string value is treated as a one-element list.

    ``unsupported`` lists native keys that had no canonical name when the map
    was exported from a tag. It is not part of equality, so a PropertyMap
    compares equal to a plain dict with the same content.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None,
                 unsupported: Optional[Iterable[str]] = None, **kwargs: Any):
        super().__init__()
        self.unsupported: List[str] = list(unsupported or [])
        if data is not None:
            self.update(data)
            if isinstance(data, PropertyMap) and unsupported is None:
                self.unsupported = list(data.unsupported)
        if kwargs:
            self.update(kwargs)

    def __setitem__(self, key: str, values: Any) -> None:
        super().__setitem__(_norm_key(key), _norm_values(values))

    def __getitem__(self, key: str) -> List[str]:
        return super().__getitem__(_norm_key(key))

    def __delitem__(self, key: str) -> None:
        super().__delitem__(_norm_key(key))

    def __contains__(self, key: object) -> bool:
        return super().__contains__(_norm_key(key))

    def get(self, key: str, default: Any = None) -> Any:
        return super().get(_norm_key(key), default)

    def pop(self, key: str, *args: Any) -> Any:
        return super().pop(_norm_key(key), *args)

    def setdefault(self, key: str, default: Any = None) -> List[str]:
        key = _norm_key(key)
        if not super().__contains__(key):
            self[key] = default
        return super().__getitem__(key)

    def update(self, other: Any = (), **kwargs: Any) -> None:
        if hasattr(other, 'keys'):
            for key in other.keys():
                self[key] = other[key]
        else:
            for key, values in other:
                self[key] = values
        for key, values in kwargs.items():
            self[key] = values

    def copy(self) -> 'PropertyMap':
        return PropertyMap(self)

    def insert(self, key: str, values: Any) -> None:
        """Append values to key, creating it if absent."""
        key = _norm_key(key)
        if super().__contains__(key):
            super().__getitem__(key).extend(_norm_values(values))
        else:
            self[key] = values

    def first(self, key: str, default: str = '') -> str:
        """First value of key, or default."""
        values = self.get(key)
        return values[0] if values else default

    def __repr__(self) -> str:
        if self.unsupported:
            return f"PropertyMap({dict(self)!r}, unsupported={self.unsupported!r})"
        return f"PropertyMap({dict(self)!r})"
