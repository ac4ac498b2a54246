"""Read-only .vxd source view with line numbers and problem-line marks.

Lines holding a value that degraded to Null are tinted yellow; the line
that aborted the parse is tinted red.
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QPlainTextEdit, QTextEdit
from PySide6.QtCore import Qt, QRect, QSize
from PySide6.QtGui import QColor, QPainter, QFont, QTextCursor, QTextFormat

from vxd.gui.syntax_highlighter import VxdSyntaxHighlighter

_COL_WARN_BG  = "#3A3A00"
_COL_ERROR_BG = "#5A1D1D"


class _LineNumberArea(QWidget):
    def __init__(self, view: "SourceView") -> None:
        super().__init__(view)
        self._view = view

    def sizeHint(self) -> QSize:
        return QSize(self._view.line_number_width(), 0)

    def paintEvent(self, event) -> None:
        self._view.paint_line_numbers(event)


class SourceView(QPlainTextEdit):
    """QPlainTextEdit showing the parsed file; never editable."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._gutter = _LineNumberArea(self)
        self._warn_lines: set[int] = set()    # 1-based
        self._error_line = 0                  # 1-based, 0 = none

        font = QFont("Consolas", 11)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.setFont(font)
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.setStyleSheet("""
            QPlainTextEdit {
                background-color: #1E1E1E;
                color: #D4D4D4;
                border: none;
                selection-background-color: #264F78;
            }
        """)
        self._highlighter = VxdSyntaxHighlighter(self.document())

        self.blockCountChanged.connect(self._update_gutter_width)
        self.updateRequest.connect(self._update_gutter)
        self._update_gutter_width(0)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def show_source(self, text: str) -> None:
        self.setPlainText(text)
        self.clear_marks()

    def mark_lines(self, warn_lines: set[int], error_line: int = 0) -> None:
        self._warn_lines = set(warn_lines)
        self._error_line = error_line
        self._apply_marks()
        if error_line:
            self.goto_line(error_line)

    def clear_marks(self) -> None:
        self._warn_lines = set()
        self._error_line = 0
        self._apply_marks()

    def goto_line(self, line_num: int) -> None:
        block = self.document().findBlockByNumber(line_num - 1)
        if block.isValid():
            self.setTextCursor(QTextCursor(block))
            self.ensureCursorVisible()

    # ------------------------------------------------------------------
    # Marks
    # ------------------------------------------------------------------

    def _line_selection(self, line_num: int, color: str) -> QTextEdit.ExtraSelection | None:
        block = self.document().findBlockByNumber(line_num - 1)
        if not block.isValid():
            return None
        sel = QTextEdit.ExtraSelection()
        sel.format.setBackground(QColor(color))
        sel.format.setProperty(QTextFormat.Property.FullWidthSelection, True)
        sel.cursor = QTextCursor(block)
        sel.cursor.clearSelection()
        return sel

    def _apply_marks(self) -> None:
        marks = [(ln, _COL_WARN_BG) for ln in sorted(self._warn_lines)]
        if self._error_line:
            marks.append((self._error_line, _COL_ERROR_BG))
        extras: list[QTextEdit.ExtraSelection] = []
        for ln, color in marks:
            sel = self._line_selection(ln, color)
            if sel is not None:
                extras.append(sel)
        self.setExtraSelections(extras)

    # ------------------------------------------------------------------
    # Gutter
    # ------------------------------------------------------------------

    def line_number_width(self) -> int:
        digits = max(3, len(str(max(1, self.blockCount()))))
        return 8 + self.fontMetrics().horizontalAdvance("9") * digits

    def paint_line_numbers(self, event) -> None:
        painter = QPainter(self._gutter)
        painter.fillRect(event.rect(), QColor("#252526"))

        block = self.firstVisibleBlock()
        line_num = block.blockNumber() + 1
        top = self.blockBoundingGeometry(block).translated(self.contentOffset()).top()
        bottom = top + self.blockBoundingRect(block).height()

        while block.isValid() and top <= event.rect().bottom():
            if block.isVisible() and bottom >= event.rect().top():
                if line_num == self._error_line:
                    painter.setPen(QColor("#F44747"))
                elif line_num in self._warn_lines:
                    painter.setPen(QColor("#CE9178"))
                else:
                    painter.setPen(QColor("#858585"))
                painter.drawText(
                    0, int(top),
                    self._gutter.width() - 4,
                    self.fontMetrics().height(),
                    Qt.AlignmentFlag.AlignRight,
                    str(line_num),
                )
            block = block.next()
            top = bottom
            bottom = top + self.blockBoundingRect(block).height()
            line_num += 1

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        cr = self.contentsRect()
        self._gutter.setGeometry(QRect(cr.left(), cr.top(), self.line_number_width(), cr.height()))

    def _update_gutter_width(self, _block_count: int) -> None:
        self.setViewportMargins(self.line_number_width(), 0, 0, 0)

    def _update_gutter(self, rect: QRect, dy: int) -> None:
        if dy:
            self._gutter.scroll(0, dy)
        else:
            self._gutter.update(0, rect.y(), self._gutter.width(), rect.height())
        if rect.contains(self.viewport().rect()):
            self._update_gutter_width(0)
