"""Tests for vxd.core.errors — VxdError construction and messages."""
from vxd.core.errors import (
    ERROR_ELLIPSIS, MAX_ERROR_CONTEXT_LEN, VxdError, VxdErrorCategory,
)


class TestUnsupportedType:
    def test_without_line(self):
        err = VxdError.unsupported_type("foo")
        assert str(err) == "Unsupported type: foo"
        assert err.category is VxdErrorCategory.UNSUPPORTED_TYPE
        assert err.line_num == 0

    def test_pointer(self):
        err = VxdError.unsupported_type("foo", line="X: foo = 1;", line_num=3, start=3)
        lines = str(err).splitlines()
        assert lines[0] == "Unsupported type: foo"
        assert lines[1] == "Line 3, index 3:"
        assert lines[2] == "X: foo = 1;"
        assert lines[3] == "   ^^^"
        assert err.reason == "Unsupported type: foo"
        assert err.line_num == 3

    def test_long_prefix_truncated(self):
        line = "A" * 200 + ": foo;"
        err = VxdError.unsupported_type("foo", line=line, line_num=1, start=202)
        shown, pointer = str(err).splitlines()[2:4]
        assert shown.startswith(ERROR_ELLIPSIS)
        assert shown[pointer.index("^"):].startswith("foo")

    def test_long_suffix_truncated(self):
        line = "X: foo = " + "1" * 200 + ";"
        err = VxdError.unsupported_type("foo", line=line, line_num=1, start=3)
        shown = str(err).splitlines()[2]
        assert shown.endswith(ERROR_ELLIPSIS)
        assert len(shown) == 6 + MAX_ERROR_CONTEXT_LEN + len(ERROR_ELLIPSIS)


class TestIoError:
    def test_message(self):
        err = VxdError.io_error(OSError("disk gone"), line_num=4)
        assert err.category is VxdErrorCategory.IO
        assert "after line 4" in str(err)
        assert "disk gone" in str(err)

    def test_is_exception(self):
        assert issubclass(VxdError, Exception)
