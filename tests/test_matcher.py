"""Tests for vxd.core.matcher — declaration scanning."""
from vxd.core.matcher import Declaration, match_declarations


def _match(line, **kw):
    return list(match_declarations(line, **kw))


class TestSingleDeclaration:
    def test_with_value(self):
        decls = _match('NAME: string = "hello";')
        assert len(decls) == 1
        d = decls[0]
        assert (d.name, d.type_tag, d.raw_value) == ("NAME", "string", '"hello"')

    def test_without_value(self):
        d = _match("EMPTY: int32;")[0]
        assert d.raw_value is None

    def test_empty_value(self):
        d = _match("EMPTY: int32 = ;")[0]
        assert d.raw_value == ""

    def test_no_spaces(self):
        d = _match("AGE:int32=30;")[0]
        assert (d.name, d.type_tag, d.raw_value) == ("AGE", "int32", "30")

    def test_extra_spaces_trimmed(self):
        d = _match("   AGE   :   int32   =    30    ;   ")[0]
        assert d.raw_value == "30"

    def test_tabs(self):
        d = _match("\tPI:\tfloat64\t=\t3.14\t;")[0]
        assert d.raw_value == "3.14"

    def test_underscore_identifier(self):
        d = _match("_private_1: bool = true;")[0]
        assert d.name == "_private_1"

    def test_value_keeps_inner_spaces(self):
        d = _match('MSG: string = "hello world" ;')[0]
        assert d.raw_value == '"hello world"'

    def test_positions(self):
        d = _match("  X: foo = 1;", line_num=7)[0]
        assert d.line_num == 7
        assert d.column == 2
        assert d.tag_column == 5


class TestMultipleDeclarations:
    def test_two_on_one_line(self):
        decls = _match('A: int32 = 1; B: string = "x";')
        assert [d.name for d in decls] == ["A", "B"]
        assert decls[1].raw_value == '"x"'

    def test_adjacent_without_space(self):
        decls = _match("A:bool=true;B:bool=false;")
        assert [(d.name, d.raw_value) for d in decls] == [("A", "true"), ("B", "false")]

    def test_garbage_between(self):
        decls = _match("A: int32 = 1; ??? B: int32 = 2;")
        assert [d.name for d in decls] == ["A", "B"]

    def test_lazy(self):
        it = match_declarations("A: int32 = 1; B: int32 = 2;")
        assert next(it).name == "A"
        assert next(it).name == "B"


class TestValueText:
    def test_value_stops_at_first_terminator(self):
        decls = _match('S: string = "a;b";')
        assert decls[0].raw_value == '"a'
        assert len(decls) == 1

    def test_value_may_contain_colon_and_equals(self):
        d = _match("URL: string = http://host/?a=b;")[0]
        assert d.raw_value == "http://host/?a=b"


class TestMalformed:
    def test_empty_line(self):
        assert _match("") == []

    def test_blank_line(self):
        assert _match("    ") == []

    def test_no_colon(self):
        assert _match("NAME string = x;") == []

    def test_no_terminator(self):
        assert _match("NAME: string = x") == []

    def test_no_terminator_without_value(self):
        assert _match("NAME: string") == []

    def test_missing_type(self):
        assert _match("NAME: = 1;") == []

    def test_name_starting_with_digit_is_not_captured_whole(self):
        decls = _match("1abc: int32 = 5;")
        # leftmost search resumes inside the token
        assert [d.name for d in decls] == ["abc"]

    def test_type_followed_by_junk(self):
        assert _match("A: int32 x = 1;") == []

    def test_comment_style_line(self):
        assert _match("// just a note") == []


class TestTypeTagPolicy:
    def test_unknown_tag_captured_by_default(self):
        d = _match("X: foo = 1;")[0]
        assert d.type_tag == "foo"

    def test_unknown_tag_skipped_with_known_tags_only(self):
        assert _match("X: foo = 1;", known_tags_only=True) == []

    def test_known_tags_only_keeps_other_declarations(self):
        decls = _match("X: foo = 1; Y: int64 = 2;", known_tags_only=True)
        assert [d.name for d in decls] == ["Y"]

    def test_tag_prefix_is_not_a_tag(self):
        assert _match("A: int32x = 1;", known_tags_only=True) == []


class TestDeclarationRecord:
    def test_defaults(self):
        d = Declaration("A", "bool")
        assert d.raw_value is None
        assert d.line_num == 0
