"""
AsfTag - cross-format property view over an ASF attribute store.

The five content-description fields (title, artist, copyright, comment,
rating) live in dedicated attributes of the tag. Everything else is kept in
an AttributeStore under native ASF names and translated to canonical
property names on the way in and out.
"""

import abc
import logging
from typing import Any, Iterable, Mapping, Union

from .attribute import Attribute, AttributeList
from .keys import KEY_TABLE
from .properties import PropertyMap
from .store import AttributeStore
from .utils import Config, parse_int

logger = logging.getLogger(__name__)

# Canonical keys backed by dedicated fields instead of the attribute store
SCALAR_PROPERTIES = ('TITLE', 'ARTIST', 'COMMENT', 'COPYRIGHT')

AttributeArg = Union[Attribute, str, int, bytes]


class BaseTag(abc.ABC):
    """Generic song metadata every tag format answers for."""

    @property
    @abc.abstractmethod
    def title(self) -> str: ...

    @property
    @abc.abstractmethod
    def artist(self) -> str: ...

    @property
    @abc.abstractmethod
    def album(self) -> str: ...

    @property
    @abc.abstractmethod
    def comment(self) -> str: ...

    @property
    @abc.abstractmethod
    def genre(self) -> str: ...

    @property
    @abc.abstractmethod
    def year(self) -> int: ...

    @property
    @abc.abstractmethod
    def track(self) -> int: ...

    def is_empty(self) -> bool:
        """True if none of the generic fields hold data."""
        return (not self.title and
                not self.artist and
                not self.album and
                not self.comment and
                not self.genre and
                self.year == 0 and
                self.track == 0)


class AsfTag(BaseTag):
    """ASF / WMA tag with a canonical property interface."""

    def __init__(self):
        self._title = ''
        self._artist = ''
        self._copyright = ''
        self._comment = ''
        self._rating = ''
        self._attributes = AttributeStore()

    # ---------- Dedicated fields ----------
    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value or ''

    @property
    def artist(self) -> str:
        return self._artist

    @artist.setter
    def artist(self, value: str) -> None:
        self._artist = value or ''

    @property
    def copyright(self) -> str:
        return self._copyright

    @copyright.setter
    def copyright(self, value: str) -> None:
        self._copyright = value or ''

    @property
    def comment(self) -> str:
        return self._comment

    @comment.setter
    def comment(self, value: str) -> None:
        self._comment = value or ''

    @property
    def rating(self) -> str:
        return self._rating

    @rating.setter
    def rating(self, value: str) -> None:
        self._rating = value or ''

    # ---------- Store-backed accessors ----------
    def _first_text(self, name: str) -> str:
        values = self._attributes.lookup(name)
        return values[0].to_string() if values else ''

    def _set_text(self, name: str, value: str) -> None:
        if value:
            self.set_attribute(name, Attribute.text(value))
        else:
            self.remove_item(name)

    def _set_number(self, name: str, value: int) -> None:
        # Numbers are always written as decimal text
        if value:
            self.set_attribute(name, Attribute.text(str(value)))
        else:
            self.remove_item(name)

    def _read_number(self, *names: str) -> int:
        """
        Read a number from the first present key in names.

        A numeric attribute reads its value directly, a text attribute is
        parsed; malformed text yields 0.
        """
        for name in names:
            values = self._attributes.lookup(name)
            if not values:
                continue
            attr = values[0]
            if attr.is_numeric():
                return attr.to_uint()
            return parse_int(attr.to_string())
        return 0

    @property
    def album(self) -> str:
        return self._first_text('WM/AlbumTitle')

    @album.setter
    def album(self, value: str) -> None:
        self._set_text('WM/AlbumTitle', value)

    @property
    def album_artist(self) -> str:
        return self._first_text('WM/AlbumArtist')

    @album_artist.setter
    def album_artist(self, value: str) -> None:
        self._set_text('WM/AlbumArtist', value)

    @property
    def composer(self) -> str:
        return self._first_text('WM/Composer')

    @composer.setter
    def composer(self, value: str) -> None:
        self._set_text('WM/Composer', value)

    @property
    def lyrics(self) -> str:
        return self._first_text('WM/Lyrics')

    @lyrics.setter
    def lyrics(self, value: str) -> None:
        self._set_text('WM/Lyrics', value)

    @property
    def genre(self) -> str:
        return self._first_text('WM/Genre')

    @genre.setter
    def genre(self, value: str) -> None:
        self._set_text('WM/Genre', value)

    @property
    def year(self) -> int:
        return parse_int(self._first_text('WM/Year'))

    @year.setter
    def year(self, value: int) -> None:
        self._set_number('WM/Year', value)

    @property
    def track(self) -> int:
        return self._read_number('WM/TrackNumber', 'WM/Track')

    @track.setter
    def track(self, value: int) -> None:
        self._set_number('WM/TrackNumber', value)

    @property
    def disc(self) -> int:
        return self._read_number('WM/PartOfSet', 'WM/DiscNumber', 'WM/Disc')

    @disc.setter
    def disc(self, value: int) -> None:
        self._set_number('WM/PartOfSet', value)

    # ---------- Attribute API ----------
    @property
    def attribute_list_map(self) -> AttributeStore:
        return self._attributes

    def contains(self, name: str) -> bool:
        return self._attributes.contains(name)

    def remove_item(self, name: str) -> None:
        self._attributes.erase(name)

    def attribute(self, name: str) -> AttributeList:
        """Values under name, or an empty list."""
        return self._attributes.lookup(name)

    def set_attribute(self, name: str,
                      value: Union[AttributeArg, Iterable[AttributeArg]]) -> None:
        """Replace the values under name with one value or a list of values."""
        if isinstance(value, (list, tuple)):
            self._attributes.insert(name, [Attribute.coerce(v) for v in value])
        else:
            self._attributes.insert(name, [Attribute.coerce(value)])

    def add_attribute(self, name: str, value: AttributeArg) -> None:
        """Append a value under name, creating the key if needed."""
        if self._attributes.contains(name):
            self._attributes.append(name, Attribute.coerce(value))
        else:
            self.set_attribute(name, value)

    def is_empty(self) -> bool:
        return (super().is_empty() and
                not self._copyright and
                not self._rating and
                self._attributes.is_empty())

    # ---------- Property interface ----------
    def properties(self) -> PropertyMap:
        """
        Export the tag as canonical properties.

        Dedicated fields come first (rating is never exported), then every
        attribute whose native key has a canonical name. Native keys without
        one are listed in the result's ``unsupported``.
        """
        props = PropertyMap()

        if self._title:
            props['TITLE'] = self._title
        if self._artist:
            props['ARTIST'] = self._artist
        if self._copyright:
            props['COPYRIGHT'] = self._copyright
        if self._comment:
            props['COMMENT'] = self._comment

        for name, values in self._attributes.items():
            key = KEY_TABLE.forward(name)
            if key is None:
                props.unsupported.append(name)
                continue
            for attr in values:
                # Numeric attributes (DWORD track numbers, BPM, ...) as decimal text
                props.insert(key, attr.display_text())

        if props.unsupported:
            logger.debug(f"Native keys without a canonical name: {props.unsupported}")
        return props

    def remove_unsupported_properties(self, names: Iterable[str]) -> None:
        """Erase the given native keys, typically ``properties().unsupported``."""
        for name in names:
            self._attributes.erase(name)

    def set_properties(self, props: Mapping[str, Any]) -> PropertyMap:
        """
        Replace the tag's contents with the given canonical properties.

        Keys exported before but missing (or empty) in props are cleared. Each
        known key in props overwrites its native values with text attributes;
        TITLE, ARTIST, COMMENT and COPYRIGHT go to the dedicated fields.
        Keys with no native counterpart are returned untouched.
        """
        if not isinstance(props, PropertyMap):
            props = PropertyMap(props)

        before = self.properties()
        for key in before:
            if key in props and props[key]:
                continue
            if key in SCALAR_PROPERTIES:
                self._set_scalar(key, '')
            else:
                name = KEY_TABLE.reverse(key)
                if name is not None:
                    self._attributes.erase(name)

        ignored = PropertyMap()
        for key, values in props.items():
            name = KEY_TABLE.reverse(key)
            if name is not None:
                self.remove_item(name)
                for value in values:
                    self.add_attribute(name, Attribute.text(value))
            elif key in SCALAR_PROPERTIES:
                self._set_scalar(key, Config.SCALAR_SEPARATOR.join(values))
            else:
                ignored.insert(key, values)

        if ignored:
            logger.debug(f"Ignored properties without a native key: {sorted(ignored)}")
        return ignored

    def _set_scalar(self, key: str, value: str) -> None:
        if key == 'TITLE':
            self.title = value
        elif key == 'ARTIST':
            self.artist = value
        elif key == 'COMMENT':
            self.comment = value
        elif key == 'COPYRIGHT':
            self.copyright = value

    def __repr__(self) -> str:
        return (f"AsfTag(title={self._title!r}, artist={self._artist!r}, "
                f"attributes={len(self._attributes)})")
