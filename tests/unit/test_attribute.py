"""Unit tests for wmatag.attribute."""

import pytest
import mutagen.asf as asf

from wmatag.attribute import Attribute, AttributeType


class TestAttributeTypes:
    """Type discriminator and typed accessors."""

    def test_type_codes_match_mutagen(self):
        assert AttributeType.UNICODE == asf.UNICODE
        assert AttributeType.DWORD == asf.DWORD
        assert AttributeType.QWORD == asf.QWORD
        assert AttributeType.BOOL == asf.BOOL

    def test_text(self):
        attr = Attribute.text("07")
        assert attr.type is AttributeType.UNICODE
        assert attr.is_text()
        assert not attr.is_numeric()
        assert attr.to_string() == "07"
        assert attr.to_uint() == 0

    def test_dword(self):
        attr = Attribute.dword(5)
        assert attr.type is AttributeType.DWORD
        assert attr.is_numeric()
        assert attr.to_uint() == 5
        # Only UNICODE attributes have a string value
        assert attr.to_string() == ""

    def test_dword_is_masked_to_32_bits(self):
        assert Attribute.dword(2**32 + 3).to_uint() == 3
        assert Attribute.word(0x1FFFF).to_uint() == 0xFFFF

    def test_bool(self):
        assert Attribute.boolean(True).to_uint() == 1
        assert Attribute.boolean(False).to_bool() is False

    def test_binary(self):
        attr = Attribute.binary(b"\x00\x01")
        assert attr.to_bytes() == b"\x00\x01"
        assert attr.display_text() == ""
        assert attr.to_bool() is True


class TestDisplayText:
    """display_text renders numbers as decimal and leaves text alone."""

    @pytest.mark.parametrize("attr,expected", [
        (Attribute.dword(5), "5"),
        (Attribute.qword(1234567890123), "1234567890123"),
        (Attribute.word(12), "12"),
        (Attribute.text("07"), "07"),
        (Attribute.text("3/12"), "3/12"),
        (Attribute.text(""), ""),
    ])
    def test_display_text(self, attr, expected):
        assert attr.display_text() == expected
        assert str(attr) == expected


class TestCoerce:
    """Plain Python values become attributes of the matching kind."""

    def test_coerce_str(self):
        assert Attribute.coerce("x") == Attribute.text("x")

    def test_coerce_int(self):
        assert Attribute.coerce(3).type is AttributeType.DWORD

    def test_coerce_bool_before_int(self):
        assert Attribute.coerce(True).type is AttributeType.BOOL

    def test_coerce_bytes(self):
        assert Attribute.coerce(b"ab").type is AttributeType.BYTEARRAY

    def test_coerce_none(self):
        assert Attribute.coerce(None) == Attribute.text("")

    def test_coerce_passthrough(self):
        attr = Attribute.dword(1)
        assert Attribute.coerce(attr) is attr


class TestEquality:

    def test_same_kind_and_value(self):
        assert Attribute.text("5") == Attribute.text("5")

    def test_kind_matters(self):
        assert Attribute.text("5") != Attribute.dword(5)

    def test_hashable(self):
        assert len({Attribute.text("a"), Attribute.text("a"), Attribute.dword(1)}) == 2


class TestMutagenBridge:
    """Conversion to and from mutagen ASF attributes."""

    def test_from_unicode(self):
        attr = Attribute.from_asf(asf.ASFUnicodeAttribute("Title"))
        assert attr == Attribute.text("Title")

    def test_from_dword(self):
        attr = Attribute.from_asf(asf.ASFDWordAttribute(9))
        assert attr == Attribute.dword(9)

    def test_from_keeps_language_and_stream(self):
        attr = Attribute.from_asf(asf.ASFUnicodeAttribute("x", language=2, stream=1))
        assert attr.language == 2
        assert attr.stream == 1

    def test_from_plain_value(self):
        assert Attribute.from_asf("plain") == Attribute.text("plain")

    def test_to_asf(self):
        value = Attribute.dword(11).to_asf()
        assert isinstance(value, asf.ASFDWordAttribute)
        assert value.value == 11

        value = Attribute.text("abc").to_asf()
        assert isinstance(value, asf.ASFUnicodeAttribute)
        assert value.value == "abc"

    def test_round_trip_keeps_kind(self):
        for attr in (Attribute.text("a"), Attribute.dword(1), Attribute.qword(2),
                     Attribute.boolean(True)):
            assert Attribute.from_asf(attr.to_asf()) == attr
