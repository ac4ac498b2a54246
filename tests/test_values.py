"""Tests for vxd.core.values — the TypedValue variant."""
import math

import pytest

from vxd.core.values import NULL, TypedValue, ValueType, to_float32


class TestTypedValue:
    def test_null_marker(self):
        assert NULL.is_null
        assert NULL.value is None
        assert NULL == TypedValue(ValueType.NULL)

    def test_null_distinct_from_empty_string(self):
        assert TypedValue.string("") != NULL

    def test_equality_includes_type(self):
        assert TypedValue.uint32(5) != TypedValue.int32(5)
        assert TypedValue.int32(5) == TypedValue.int32(5)

    def test_frozen(self):
        v = TypedValue.int32(1)
        with pytest.raises(AttributeError):
            v.value = 2

    def test_hashable(self):
        assert len({TypedValue.int32(1), TypedValue.int32(1), NULL}) == 2

    def test_to_python(self):
        assert TypedValue.bool_(True).to_python() is True
        assert NULL.to_python() is None

    def test_str(self):
        assert str(TypedValue.bool_(False)) == "false"
        assert str(TypedValue.int64(-3)) == "-3"
        assert str(NULL) == "Null"

    def test_repr(self):
        assert repr(TypedValue.int32(30)) == "Int32(30)"
        assert repr(TypedValue.string("hi")) == "String('hi')"
        assert repr(NULL) == "Null"

    def test_type_value_is_tag(self):
        assert ValueType.FLOAT32.value == "float32"
        assert ValueType("char") is ValueType.CHAR


class TestToFloat32:
    def test_exact_values_unchanged(self):
        assert to_float32(0.5) == 0.5

    def test_rounding(self):
        assert to_float32(0.1) != 0.1

    def test_overflow(self):
        assert to_float32(-1e300) == -math.inf

    def test_special(self):
        assert math.isnan(to_float32(math.nan))
        assert to_float32(math.inf) == math.inf
