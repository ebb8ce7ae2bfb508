"""
Pytest configuration and shared fixtures.
"""

import pytest
import mutagen.asf as asf

from wmatag.attribute import Attribute
from wmatag.tag import AsfTag
from wmatag.utils import Config

# ---------- Constants ----------

# Native attributes of a typical WMA file written by Windows Media Player
NATIVE_ATTRIBUTES = {
    "WM/AlbumTitle": [Attribute.text("Test Album")],
    "WM/AlbumArtist": [Attribute.text("Test Album Artist")],
    "WM/Genre": [Attribute.text("Rock"), Attribute.text("Pop")],
    "WM/TrackNumber": [Attribute.dword(5)],
    "WM/PartOfSet": [Attribute.text("1")],
    "WM/Year": [Attribute.text("2025")],
    "WM/MediaPrimaryClassID": [Attribute.text("{D1607DBC-E323-4BE2-86A1-48A42A28441E}")],
}

# ---------- Fixtures ----------

@pytest.fixture
def empty_tag():
    return AsfTag()

@pytest.fixture
def populated_tag():
    """An AsfTag with dedicated fields, translatable and untranslatable attributes."""
    tag = AsfTag()
    tag.title = "Test Title"
    tag.artist = "Test Artist"
    tag.copyright = "(C) 2025 Test Label"
    tag.comment = "Test Comment"
    tag.rating = "5"
    for name, values in NATIVE_ATTRIBUTES.items():
        tag.set_attribute(name, list(values))
    return tag

@pytest.fixture
def asf_tags():
    """An in-memory mutagen ASFTags object as read from a WMA file."""
    tags = asf.ASFTags()
    tags["Title"] = [asf.ASFUnicodeAttribute("Read Title")]
    tags["Author"] = [asf.ASFUnicodeAttribute("Read Artist")]
    tags["Copyright"] = [asf.ASFUnicodeAttribute("Read Copyright")]
    tags["Description"] = [asf.ASFUnicodeAttribute("Read Comment")]
    tags["WM/AlbumTitle"] = [asf.ASFUnicodeAttribute("Read Album")]
    tags["WM/TrackNumber"] = [asf.ASFDWordAttribute(7)]
    tags["WM/Genre"] = [asf.ASFUnicodeAttribute("Jazz"), asf.ASFUnicodeAttribute("Blues")]
    tags["WM/EncodingTime"] = [asf.ASFQWordAttribute(132000000000000000)]
    tags["IsVBR"] = [asf.ASFBoolAttribute(True)]
    return tags

@pytest.fixture(autouse=True)
def restore_config():
    """Keep Config changes made by one test from leaking into the next."""
    saved = {
        'SCALAR_SEPARATOR': Config.SCALAR_SEPARATOR,
        'DEFAULT_DELIMITER': Config.DEFAULT_DELIMITER,
        'DEFAULT_VERBOSE': Config.DEFAULT_VERBOSE,
        'SUPPORTED_EXT': set(Config.SUPPORTED_EXT),
    }
    yield
    for name, value in saved.items():
        setattr(Config, name, value)
