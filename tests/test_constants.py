"""Tests for vxd.core.constants and vxd.core.syntax — documented values."""
from vxd.core import constants, syntax


class TestParserDefaults:
    def test_encoding(self):
        assert constants.DEFAULT_ENCODING == "utf-8"

    def test_flags(self):
        assert isinstance(constants.DEFAULT_STRICT_TYPES, bool)
        assert isinstance(constants.DEFAULT_WARN_ON_DEGRADE, bool)

    def test_suffix(self):
        assert constants.VXD_SUFFIX.startswith(".")


class TestSyntax:
    def test_nine_type_tags(self):
        assert syntax.TYPE_TAGS == {
            "string", "int32", "int64", "uint32", "uint64",
            "float32", "float64", "bool", "char",
        }

    def test_int_ranges_cover_integer_tags(self):
        integer_tags = syntax.TYPE_TAGS - syntax.FLOAT_TAGS - {"string", "bool", "char"}
        assert set(syntax.INT_RANGES) == integer_tags

    def test_unsigned_ranges_start_at_zero(self):
        for tag in syntax.UNSIGNED_TAGS:
            assert syntax.INT_RANGES[tag][0] == 0
