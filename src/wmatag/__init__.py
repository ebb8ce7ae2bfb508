"""wmatag - canonical song properties for WMA/ASF tags."""

__version__ = "0.1.0"

from .attribute import Attribute, AttributeList, AttributeType
from .store import AttributeStore
from .keys import KEY_TABLE, KEY_TRANSLATION, KeyTranslationTable
from .properties import PropertyMap
from .tag import AsfTag, BaseTag
from .core import (
    AsfFile,
    WmaTagError,
    FormatError,
    WriteError,
    managed_asf_file,
    tag_from_asf_tags,
    tag_to_asf_tags
)
from .utils import Config

__all__ = [
    "Attribute",
    "AttributeList",
    "AttributeType",
    "AttributeStore",
    "KEY_TABLE",
    "KEY_TRANSLATION",
    "KeyTranslationTable",
    "PropertyMap",
    "AsfTag",
    "BaseTag",
    "AsfFile",
    "WmaTagError",
    "FormatError",
    "WriteError",
    "managed_asf_file",
    "tag_from_asf_tags",
    "tag_to_asf_tags",
    "Config"
]
