"""
Typed ASF attribute values.

An Attribute is one value stored under a native ASF key. It remembers the
ASF type it was read or created with, so track and disc numbers can be
stored either as text or as a DWORD and still be read the same way.
"""

import enum
import logging
from typing import Any, List, Optional

import mutagen.asf as asf

from .utils import parse_int

logger = logging.getLogger(__name__)


class AttributeType(enum.IntEnum):
    """ASF attribute kinds. Values are the ASF wire type codes used by mutagen."""
    UNICODE = asf.UNICODE
    BYTEARRAY = asf.BYTEARRAY
    BOOL = asf.BOOL
    DWORD = asf.DWORD
    QWORD = asf.QWORD
    WORD = asf.WORD
    GUID = asf.GUID


NUMERIC_TYPES = frozenset({AttributeType.DWORD, AttributeType.QWORD,
                           AttributeType.WORD, AttributeType.BOOL})

_MASKS = {
    AttributeType.WORD: 0xFFFF,
    AttributeType.DWORD: 0xFFFFFFFF,
    AttributeType.QWORD: 0xFFFFFFFFFFFFFFFF,
}


class Attribute:
    """A single typed attribute value."""

    __slots__ = ('_type', '_value', 'language', 'stream')

    def __init__(self, value: Any = '', kind: AttributeType = AttributeType.UNICODE,
                 language: Optional[int] = None, stream: Optional[int] = None):
        self._type = AttributeType(kind)
        self._value = self._normalize(value, self._type)
        self.language = language
        self.stream = stream

    @staticmethod
    def _normalize(value: Any, kind: AttributeType) -> Any:
        if kind == AttributeType.UNICODE:
            return '' if value is None else str(value)
        if kind == AttributeType.BOOL:
            return bool(value)
        if kind in _MASKS:
            return parse_int(value) & _MASKS[kind]
        # BYTEARRAY / GUID
        if value is None:
            return b''
        if isinstance(value, str):
            return value.encode('utf-8')
        return bytes(value)

    # ---------- Constructors ----------
    @classmethod
    def text(cls, value: str) -> 'Attribute':
        return cls(value, AttributeType.UNICODE)

    @classmethod
    def dword(cls, value: int) -> 'Attribute':
        return cls(value, AttributeType.DWORD)

    @classmethod
    def qword(cls, value: int) -> 'Attribute':
        return cls(value, AttributeType.QWORD)

    @classmethod
    def word(cls, value: int) -> 'Attribute':
        return cls(value, AttributeType.WORD)

    @classmethod
    def boolean(cls, value: bool) -> 'Attribute':
        return cls(value, AttributeType.BOOL)

    @classmethod
    def binary(cls, value: bytes) -> 'Attribute':
        return cls(value, AttributeType.BYTEARRAY)

    @classmethod
    def coerce(cls, value: Any) -> 'Attribute':
        """
        Turn a plain Python value into an Attribute.

        str -> UNICODE, bool -> BOOL, int -> DWORD, bytes -> BYTEARRAY.
        Attributes pass through unchanged; anything else is stored as its text.
        """
        if isinstance(value, Attribute):
            return value
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.dword(value)
        if isinstance(value, (bytes, bytearray)):
            return cls.binary(bytes(value))
        return cls.text('' if value is None else str(value))

    # ---------- Accessors ----------
    @property
    def type(self) -> AttributeType:
        return self._type

    @property
    def value(self) -> Any:
        return self._value

    def is_text(self) -> bool:
        return self._type == AttributeType.UNICODE

    def is_numeric(self) -> bool:
        return self._type in NUMERIC_TYPES

    def to_string(self) -> str:
        """Text value of a UNICODE attribute; empty for every other kind."""
        if self._type == AttributeType.UNICODE:
            return self._value
        return ''

    def to_uint(self) -> int:
        """Numeric value of a DWORD/QWORD/WORD/BOOL attribute; 0 for every other kind."""
        if self._type in NUMERIC_TYPES:
            return int(self._value)
        return 0

    def to_bool(self) -> bool:
        if self._type == AttributeType.UNICODE:
            return bool(self._value)
        if self._type in NUMERIC_TYPES:
            return self._value != 0
        return len(self._value) > 0

    def to_bytes(self) -> bytes:
        if self._type in (AttributeType.BYTEARRAY, AttributeType.GUID):
            return self._value
        return b''

    def display_text(self) -> str:
        """
        Render the value for display.

        Numeric kinds become decimal text, text is returned unchanged
        (no re-formatting, so '07' stays '07'). Binary kinds render empty.
        """
        if self._type == AttributeType.UNICODE:
            return self._value
        if self._type in NUMERIC_TYPES:
            return str(int(self._value))
        return ''

    # ---------- mutagen bridge ----------
    @classmethod
    def from_asf(cls, attr: Any) -> 'Attribute':
        """Convert a mutagen ASF attribute (or a plain value) into an Attribute."""
        if not isinstance(attr, asf.ASFBaseAttribute):
            return cls.coerce(attr)
        try:
            kind = AttributeType(attr.TYPE)
        except ValueError:
            logger.debug(f"Unknown ASF attribute type {attr.TYPE!r}, keeping as text")
            return cls.text(str(attr.value))
        return cls(attr.value, kind,
                   language=getattr(attr, 'language', None),
                   stream=getattr(attr, 'stream', None))

    def to_asf(self) -> asf.ASFBaseAttribute:
        """Convert to the matching mutagen ASF attribute."""
        kwargs = {}
        if self.language is not None:
            kwargs['language'] = self.language
        if self.stream is not None:
            kwargs['stream'] = self.stream
        return asf.ASFValue(self._value, int(self._type), **kwargs)

    # ---------- Dunder ----------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._type, self._value))

    def __str__(self) -> str:
        return self.display_text()

    def __repr__(self) -> str:
        return f"Attribute({self._value!r}, {self._type.name})"


# Ordered values stored under one native key
AttributeList = List[Attribute]
