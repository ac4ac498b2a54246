"""Syntax highlighter for .vxd files."""
from PySide6.QtCore import QRegularExpression
from PySide6.QtGui import QSyntaxHighlighter, QTextCharFormat, QColor, QFont

from vxd.core.syntax import (
    TYPE_TAGS, NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL,
)

# ---------------------------------------------------------------------------
# Colour palette (VS Code Dark+ inspired)
# ---------------------------------------------------------------------------
_COL_NAME     = "#9CDCFE"   # light blue
_COL_TYPE     = "#4EC9B0"   # teal
_COL_STRING   = "#CE9178"   # orange
_COL_NUMBER   = "#B5CEA8"   # light green
_COL_KEYWORD  = "#569CD6"   # blue
_COL_PUNCT    = "#D4D4D4"   # near-white


def _fmt(color: str, bold: bool = False, italic: bool = False) -> QTextCharFormat:
    f = QTextCharFormat()
    f.setForeground(QColor(color))
    if bold:
        f.setFontWeight(QFont.Weight.Bold)
    if italic:
        f.setFontItalic(True)
    return f


def _keyword_pattern(words) -> str:
    escaped = sorted(words, key=len, reverse=True)
    return r"\b(" + "|".join(escaped) + r")\b"


class VxdSyntaxHighlighter(QSyntaxHighlighter):
    """QSyntaxHighlighter for .vxd files.  Later rules override earlier ones."""

    def __init__(self, document) -> None:
        super().__init__(document)
        self._rules: list[tuple[QRegularExpression, QTextCharFormat]] = []
        self._build_rules()

    def _build_rules(self) -> None:
        add = self._rules.append

        # 1. Punctuation
        add((QRegularExpression(r"[:=;]"), _fmt(_COL_PUNCT)))

        # 2. Numbers
        add((QRegularExpression(r"[+-]?\b\d+(\.\d+)?([eE][+-]?\d+)?\b"), _fmt(_COL_NUMBER)))

        # 3. null / true / false
        add((QRegularExpression(_keyword_pattern({NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL})),
             _fmt(_COL_KEYWORD, italic=True)))

        # 4. Declared names: identifier followed by ':'
        add((QRegularExpression(r"\b[A-Za-z_]\w*(?=\s*:)"), _fmt(_COL_NAME)))

        # 5. Type tags after ':'
        add((QRegularExpression(r"(?<=:)\s*" + _keyword_pattern(TYPE_TAGS)), _fmt(_COL_TYPE, bold=True)))

        # 6. Quoted strings (last, so nothing inside them is recoloured)
        add((QRegularExpression(r'"[^";]*"'), _fmt(_COL_STRING)))

    def highlightBlock(self, text: str) -> None:
        for pattern, fmt in self._rules:
            it = pattern.globalMatch(text)
            while it.hasNext():
                m = it.next()
                self.setFormat(m.capturedStart(), m.capturedLength(), fmt)
