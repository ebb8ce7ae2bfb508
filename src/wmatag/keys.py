"""
Translation between native ASF attribute names and canonical property names.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

# Native ASF attribute name -> canonical property name.
# The spelling and case on both sides are what downstream consumers see.
KEY_TRANSLATION: Tuple[Tuple[str, str], ...] = (
    ("WM/AlbumTitle", "ALBUM"),
    ("WM/AlbumArtist", "ALBUMARTIST"),
    ("WM/Composer", "COMPOSER"),
    ("WM/Writer", "LYRICIST"),
    ("WM/Conductor", "CONDUCTOR"),
    ("WM/ModifiedBy", "REMIXER"),
    ("WM/Year", "DATE"),
    ("WM/OriginalReleaseYear", "ORIGINALDATE"),
    ("WM/Producer", "PRODUCER"),
    ("WM/ContentGroupDescription", "GROUPING"),
    ("WM/SubTitle", "SUBTITLE"),
    ("WM/SetSubTitle", "DISCSUBTITLE"),
    ("WM/TrackNumber", "TRACKNUMBER"),
    ("WM/PartOfSet", "DISCNUMBER"),
    ("WM/Genre", "GENRE"),
    ("WM/BeatsPerMinute", "BPM"),
    ("WM/Mood", "MOOD"),
    ("WM/ISRC", "ISRC"),
    ("WM/Lyrics", "LYRICS"),
    ("WM/Media", "MEDIA"),
    ("WM/Publisher", "LABEL"),
    ("WM/CatalogNo", "CATALOGNUMBER"),
    ("WM/Barcode", "BARCODE"),
    ("WM/EncodedBy", "ENCODEDBY"),
    ("WM/AlbumSortOrder", "ALBUMSORT"),
    ("WM/AlbumArtistSortOrder", "ALBUMARTISTSORT"),
    ("WM/ArtistSortOrder", "ARTISTSORT"),
    ("WM/TitleSortOrder", "TITLESORT"),
    ("WM/Script", "SCRIPT"),
    ("WM/Language", "LANGUAGE"),
    ("WM/ARTISTS", "ARTISTS"),
    ("ASIN", "ASIN"),
    ("MusicBrainz/Track Id", "MUSICBRAINZ_TRACKID"),
    ("MusicBrainz/Artist Id", "MUSICBRAINZ_ARTISTID"),
    ("MusicBrainz/Album Id", "MUSICBRAINZ_ALBUMID"),
    ("MusicBrainz/Album Artist Id", "MUSICBRAINZ_ALBUMARTISTID"),
    ("MusicBrainz/Album Release Country", "RELEASECOUNTRY"),
    ("MusicBrainz/Album Status", "RELEASESTATUS"),
    ("MusicBrainz/Album Type", "RELEASETYPE"),
    ("MusicBrainz/Release Group Id", "MUSICBRAINZ_RELEASEGROUPID"),
    ("MusicBrainz/Release Track Id", "MUSICBRAINZ_RELEASETRACKID"),
    ("MusicBrainz/Work Id", "MUSICBRAINZ_WORKID"),
    ("MusicIP/PUID", "MUSICIP_PUID"),
    ("Acoustid/Id", "ACOUSTID_ID"),
    ("Acoustid/Fingerprint", "ACOUSTID_FINGERPRINT"),
)


class KeyTranslationTable:
    """
    Read-only bidirectional map between native keys and canonical keys.

    Both directions are built once from the pair list; a key appearing twice
    on either side is rejected.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        forward = {}
        reverse = {}
        ordered = []
        for native, canonical in pairs:
            if native in forward:
                raise ValueError(f"Duplicate native key in translation table: {native!r}")
            if canonical in reverse:
                raise ValueError(f"Duplicate canonical key in translation table: {canonical!r}")
            forward[native] = canonical
            reverse[canonical] = native
            ordered.append((native, canonical))

        self._forward: Mapping[str, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, str] = MappingProxyType(reverse)
        self._pairs = tuple(ordered)

    def forward(self, native_key: str) -> Optional[str]:
        """Canonical name for a native key, or None."""
        return self._forward.get(native_key)

    def reverse(self, canonical_key: str) -> Optional[str]:
        """Native key for a canonical name, or None."""
        return self._reverse.get(canonical_key)

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return self._pairs

    def native_keys(self) -> List[str]:
        return [native for native, _ in self._pairs]

    def canonical_keys(self) -> List[str]:
        return [canonical for _, canonical in self._pairs]

    def __len__(self) -> int:
        return len(self._pairs)


KEY_TABLE = KeyTranslationTable(KEY_TRANSLATION)
