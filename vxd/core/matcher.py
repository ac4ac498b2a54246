"""Declaration matcher — finds ``name: type [= value];`` statements in a line.

A small character scanner replaces a general-purpose regex.  Scanning is a
leftmost search: a declaration is attempted at every position, the scanner
moves one character on when the attempt fails and jumps past the terminator
when it succeeds.  Malformed regions are skipped without any report.

Grammar of one declaration::

    [ws] identifier [ws] ':' [ws] type_tag [ws] ['=' [ws] value_text] [ws] ';'

``value_text`` is everything up to the next ';' and is stored trimmed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from vxd.core.syntax import (
    ASSIGN, IDENT_CHARS, IDENT_START, TERMINATOR, TYPE_SEPARATOR, TYPE_TAGS,
)


@dataclass
class Declaration:
    """One recognised statement.

    raw_value : trimmed text after '=', or None when there is no '='
    line_num  : 1-based source line (0 when matched outside a file)
    column    : 0-based index of the name within the line
    tag_column: 0-based index of the type tag within the line
    """
    name:       str
    type_tag:   str
    raw_value:  Optional[str] = None
    line_num:   int = 0
    column:     int = 0
    tag_column: int = 0


class _Scanner:
    def __init__(self, line: str, pos: int) -> None:
        self._line = line
        self.pos   = pos

    # ------------------------------------------------------------------
    def _peek(self) -> str:
        return self._line[self.pos] if self.pos < len(self._line) else ""

    def skip_space(self) -> None:
        while self._peek().isspace():
            self.pos += 1

    def accept(self, ch: str) -> bool:
        if self._peek() == ch:
            self.pos += 1
            return True
        return False

    def read_identifier(self) -> str:
        """Return the identifier at the cursor, or '' if there is none."""
        if self._peek() not in IDENT_START:
            return ""
        start = self.pos
        self.pos += 1
        while self._peek() in IDENT_CHARS:
            self.pos += 1
        return self._line[start:self.pos]

    def read_until(self, ch: str) -> Optional[str]:
        """Consume text up to (not including) ``ch``; None if ``ch`` never occurs."""
        end = self._line.find(ch, self.pos)
        if end < 0:
            return None
        text = self._line[self.pos:end]
        self.pos = end
        return text


def _match_at(
    line: str, start: int, line_num: int, known_tags_only: bool,
) -> Optional[tuple[Declaration, int]]:
    """Try to match one declaration beginning at ``start``.

    Returns the declaration and the index just past its terminator.
    """
    sc = _Scanner(line, start)
    sc.skip_space()

    column = sc.pos
    name = sc.read_identifier()
    if not name:
        return None
    sc.skip_space()
    if not sc.accept(TYPE_SEPARATOR):
        return None
    sc.skip_space()

    tag_column = sc.pos
    type_tag = sc.read_identifier()
    if not type_tag or (known_tags_only and type_tag not in TYPE_TAGS):
        return None
    sc.skip_space()

    raw_value: Optional[str] = None
    if sc.accept(ASSIGN):
        text = sc.read_until(TERMINATOR)
        if text is None:
            return None
        raw_value = text.strip()
    sc.skip_space()
    if not sc.accept(TERMINATOR):
        return None

    decl = Declaration(name, type_tag, raw_value, line_num, column, tag_column)
    return decl, sc.pos


def match_declarations(
    line: str,
    line_num: int = 0,
    known_tags_only: bool = False,
) -> Iterator[Declaration]:
    """Yield every declaration found in ``line``, left to right.

    With ``known_tags_only`` a declaration whose type tag is not one of the
    recognised keywords is not captured at all; otherwise any
    identifier-shaped tag is captured and left for the coercer to judge.
    """
    pos = 0
    while pos < len(line):
        found = _match_at(line, pos, line_num, known_tags_only)
        if found is None:
            pos += 1
            continue
        decl, pos = found
        yield decl
