"""Variable panel — the parsed name → value table.

Three columns (Name | Type | Value), sorted by name.  Null values are
shown greyed out so a reader can tell them apart from the string "Null".
A filter box narrows the rows by name.
"""
from __future__ import annotations

from typing import Mapping

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem,
    QHeaderView, QHBoxLayout, QLineEdit, QLabel,
)
from PySide6.QtGui import QColor, QFont

from vxd.core.values import TypedValue, ValueType

_DARK = """
    QTableWidget {
        background-color: #1E1E1E;
        color: #D4D4D4;
        border: none;
        gridline-color: #3C3C3C;
    }
    QTableWidget::item { padding: 2px 6px; }
    QTableWidget::item:selected { background: #264F78; }
    QHeaderView::section {
        background-color: #2D2D2D;
        color: #AAAAAA;
        border: none;
        border-bottom: 1px solid #3C3C3C;
        padding: 3px 6px;
    }
    QLineEdit {
        background: #3C3C3C; color: #CCCCCC;
        border: 1px solid #555; border-radius: 3px; padding: 2px 4px;
    }
    QLabel { color: #AAAAAA; font-size: 11px; }
"""

_COL_NAME   = "#9CDCFE"
_COL_TYPE   = "#4EC9B0"
_COL_NULL   = "#858585"

_VALUE_COLORS: dict[ValueType, str] = {
    ValueType.STRING:  "#CE9178",
    ValueType.CHAR:    "#CE9178",
    ValueType.BOOL:    "#569CD6",
    ValueType.INT32:   "#B5CEA8",
    ValueType.INT64:   "#B5CEA8",
    ValueType.UINT32:  "#B5CEA8",
    ValueType.UINT64:  "#B5CEA8",
    ValueType.FLOAT32: "#B5CEA8",
    ValueType.FLOAT64: "#B5CEA8",
}


def _value_item(value: TypedValue) -> QTableWidgetItem:
    item = QTableWidgetItem(str(value))
    item.setForeground(QColor(_VALUE_COLORS.get(value.type, _COL_NULL)))
    if value.is_null:
        font = item.font()
        font.setItalic(True)
        item.setFont(font)
    return item


class VariablePanel(QWidget):
    """A table that displays the variables of the last successful parse."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setStyleSheet(_DARK)
        self._variables: dict[str, TypedValue] = {}
        self._build_ui()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        bar = QHBoxLayout()
        self._filter = QLineEdit()
        self._filter.setPlaceholderText("変数名で絞り込み")
        self._filter.textChanged.connect(self._refresh)
        self._count = QLabel("0 件")
        bar.addWidget(self._filter)
        bar.addWidget(self._count)
        layout.addLayout(bar)

        self._table = QTableWidget(0, 3)
        self._table.setHorizontalHeaderLabels(["変数名", "型", "値"])
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Interactive)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        header.setDefaultSectionSize(140)
        self._table.verticalHeader().setVisible(False)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        mono = QFont("Consolas", 10)
        mono.setStyleHint(QFont.StyleHint.Monospace)
        self._table.setFont(mono)
        layout.addWidget(self._table)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def show_variables(self, variables: Mapping[str, TypedValue]) -> None:
        self._variables = dict(variables)
        self._refresh()

    def clear(self) -> None:
        self._variables = {}
        self._refresh()

    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        needle = self._filter.text().strip().lower()
        names = [n for n in sorted(self._variables) if needle in n.lower()]

        self._table.setRowCount(len(names))
        for row, name in enumerate(names):
            value = self._variables[name]

            name_item = QTableWidgetItem(name)
            name_item.setForeground(QColor(_COL_NAME))
            type_item = QTableWidgetItem(value.type.value)
            type_item.setForeground(QColor(_COL_NULL if value.is_null else _COL_TYPE))

            self._table.setItem(row, 0, name_item)
            self._table.setItem(row, 1, type_item)
            self._table.setItem(row, 2, _value_item(value))

        total = len(self._variables)
        shown = len(names)
        self._count.setText(f"{total} 件" if shown == total else f"{shown} / {total} 件")
