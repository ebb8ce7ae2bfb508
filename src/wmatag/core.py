"""
AsfFile - load and save AsfTag objects from ASF / WMA files.
Binary parsing and writing is done by mutagen; this module only moves
values between mutagen's tag object and an AsfTag.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Mapping, Union

import mutagen
import mutagen.asf as asf

from .attribute import Attribute
from .properties import PropertyMap
from .tag import AsfTag
from .utils import Config

logger = logging.getLogger(__name__)

# Content Description Object entries -> AsfTag dedicated fields.
# mutagen exposes them as ordinary keys of the tag object.
CONTENT_DESCRIPTION = {
    'Title': 'title',
    'Author': 'artist',
    'Copyright': 'copyright',
    'Description': 'comment',
    'Rating': 'rating',
}


class WmaTagError(Exception):
    """Base exception for wmatag errors."""
    pass

class FormatError(WmaTagError):
    """Raised when file format is unsupported or corrupted."""
    pass

class WriteError(WmaTagError):
    """Raised when saving tags back to a file fails."""
    pass


def tag_from_asf_tags(tags: Any) -> AsfTag:
    """
    Build an AsfTag from a mutagen ASFTags object (or any mapping of
    key -> list of values).
    """
    tag = AsfTag()
    if tags is None:
        return tag

    # ASFTags.keys() is unordered; as_dict() keeps first-appearance order
    mapping = tags.as_dict() if hasattr(tags, 'as_dict') else tags
    for key, values in mapping.items():
        if not isinstance(values, list):
            values = [values]
        attrs = [Attribute.from_asf(v) for v in values]

        field = CONTENT_DESCRIPTION.get(key)
        if field is not None:
            if len(attrs) > 1:
                logger.debug(f"Keeping only the first of {len(attrs)} values for {key}")
            setattr(tag, field, attrs[0].display_text() if attrs else '')
        elif attrs:
            tag.set_attribute(key, attrs)
    return tag


def tag_to_asf_tags(tag: AsfTag, tags: Any) -> None:
    """Replace the contents of a mutagen ASFTags object with the AsfTag's."""
    for key in list(tags.keys()):
        try:
            del tags[key]
        except KeyError:
            pass

    for key, field in CONTENT_DESCRIPTION.items():
        value = getattr(tag, field)
        if value:
            tags[key] = [asf.ASFUnicodeAttribute(value)]

    for name, values in tag.attribute_list_map.items():
        tags[name] = [attr.to_asf() for attr in values]


class AsfFile:
    """
    An ASF / WMA file and its tag.
    Changes made to ``tag`` are written back by ``save()``.
    """

    def __init__(self, path: Union[str, Path]):
        """Initialize AsfFile with the given audio file path."""
        self.path = Path(path)
        self.mfile = None
        self.tag = AsfTag()
        self.load_file()

    def load_file(self) -> None:
        """Load the file with mutagen and convert its tags."""
        if self.path.suffix.lower() not in Config.SUPPORTED_EXT:
            raise FormatError(f"Unsupported file extension: {self.path.suffix or '(none)'}")
        try:
            self.mfile = asf.ASF(str(self.path))
        except mutagen.MutagenError as e:
            raise FormatError(f"Unsupported file format or corrupted file: {e}") from e
        except Exception as e:
            raise FormatError(f"Failed to load file {self.path}: {e}") from e

        if self.mfile.tags is None:
            self.mfile.add_tags()
        self.tag = tag_from_asf_tags(self.mfile.tags)
        logger.debug(f"Loaded {self.path} ({len(self.tag.attribute_list_map)} attributes)")

    def properties(self) -> PropertyMap:
        return self.tag.properties()

    def set_properties(self, props: Mapping[str, Any]) -> PropertyMap:
        return self.tag.set_properties(props)

    def save(self) -> None:
        """Write the tag back to disk."""
        if self.mfile is None:
            raise WriteError(f"File not loaded: {self.path}")
        try:
            tag_to_asf_tags(self.tag, self.mfile.tags)
            self.mfile.save()
        except mutagen.MutagenError as e:
            raise WriteError(f"Failed to save {self.path}: {e}") from e
        except OSError as e:
            raise WriteError(f"Failed to save {self.path}: {e}") from e
        logger.debug(f"Saved {self.path}")

    def close(self) -> None:
        """Drop the reference to the mutagen object."""
        self.mfile = None

    def __enter__(self) -> 'AsfFile':
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @staticmethod
    @contextmanager
    def managed(path: Union[str, Path]) -> Generator['AsfFile', None, None]:
        """Context manager for AsfFile with proper resource cleanup."""
        af = None
        try:
            af = AsfFile(path)
            yield af
        except Exception as e:
            logger.error(f"Failed to process {path}: {e}")
            raise
        finally:
            if af:
                af.close()


managed_asf_file = AsfFile.managed
