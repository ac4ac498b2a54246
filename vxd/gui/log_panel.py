"""Bottom log panel — parse progress, degraded values and failures.

Accepts the same ``(level, message)`` pairs the parser's LogFn emits and
keeps a running count of warnings and errors for the header.
"""
from datetime import datetime

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QTextEdit, QPushButton, QLabel,
)
from PySide6.QtGui import QColor, QTextCharFormat, QTextCursor, QFont

from vxd.gui.styles import BUTTON

_LEVEL_COLORS: dict[str, str] = {
    "INFO":    "#D4D4D4",
    "SUCCESS": "#4EC9B0",
    "WARNING": "#CE9178",
    "ERROR":   "#F44747",
    "DEBUG":   "#858585",
}


class LogPanel(QWidget):
    """Read-only, colour-coded parse log."""

    def __init__(self) -> None:
        super().__init__()
        self._warnings = 0
        self._errors = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 4)
        layout.setSpacing(2)

        header = QHBoxLayout()
        self._title = QLabel()
        self._title.setStyleSheet("color: #CCCCCC; font-size: 12px;")
        header.addWidget(self._title)
        header.addStretch()
        clear_btn = QPushButton("クリア")
        clear_btn.setFixedWidth(56)
        clear_btn.setStyleSheet(BUTTON)
        clear_btn.clicked.connect(self.clear)
        header.addWidget(clear_btn)
        layout.addLayout(header)

        self._text = QTextEdit()
        self._text.setReadOnly(True)
        font = QFont("Consolas", 9)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self._text.setFont(font)
        self._text.setStyleSheet(
            "QTextEdit { background:#0C0C0C; color:#CCCCCC; border:none; }"
        )
        layout.addWidget(self._text)
        self._update_title()

    def log(self, level: str, message: str) -> None:
        """Append a timestamped entry; multi-line messages keep their layout."""
        level = level.upper()
        if level == "WARNING":
            self._warnings += 1
        elif level == "ERROR":
            self._errors += 1
        self._update_title()

        ts = datetime.now().strftime("%H:%M:%S")
        cursor = self._text.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)

        ts_fmt = QTextCharFormat()
        ts_fmt.setForeground(QColor("#858585"))
        cursor.setCharFormat(ts_fmt)
        cursor.insertText(f"[{ts}] ")

        msg_fmt = QTextCharFormat()
        msg_fmt.setForeground(QColor(_LEVEL_COLORS.get(level, "#D4D4D4")))
        cursor.setCharFormat(msg_fmt)
        cursor.insertText(f"[{level:7}] {message}\n")

        self._text.setTextCursor(cursor)
        self._text.ensureCursorVisible()

    def clear(self) -> None:
        self._text.clear()
        self._warnings = 0
        self._errors = 0
        self._update_title()

    def _update_title(self) -> None:
        self._title.setText(f"パースログ  (警告 {self._warnings} / エラー {self._errors})")
