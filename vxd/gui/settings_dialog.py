"""Settings dialog — edit the [PARSER] and [VIEWER] sections of settings.ini."""
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout,
    QLineEdit, QCheckBox, QDialogButtonBox, QTabWidget, QWidget, QMessageBox,
)
from PySide6.QtCore import Qt

from vxd.core.constants import DEFAULT_ENCODING
from vxd.core.settings_manager import SettingsManager, is_known_encoding
from vxd.gui.styles import DIALOG


class SettingsDialog(QDialog):
    def __init__(self, settings: SettingsManager, parent=None) -> None:
        super().__init__(parent)
        self._s = settings
        self.setWindowTitle("設定")
        self.setMinimumWidth(420)
        self.setStyleSheet(DIALOG)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        tabs = QTabWidget()

        # ── Tab 1: Parser ───────────────────────────────────────────────
        parser_widget = QWidget()
        parser_form = QFormLayout(parser_widget)
        parser_form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self._encoding = QLineEdit(self._s.encoding)
        self._encoding.setPlaceholderText(DEFAULT_ENCODING)

        self._strict = QCheckBox()
        self._strict.setChecked(self._s.strict_types)
        self._strict.setToolTip("オフの場合、未知の型の宣言は読み飛ばされます")

        self._warn = QCheckBox()
        self._warn.setChecked(self._s.warn_on_degrade)

        parser_form.addRow("文字コード:", self._encoding)
        parser_form.addRow("未知の型をエラーにする:", self._strict)
        parser_form.addRow("Null 化した値を警告:", self._warn)
        tabs.addTab(parser_widget, "パーサー")

        # ── Tab 2: Viewer ───────────────────────────────────────────────
        viewer_widget = QWidget()
        viewer_form = QFormLayout(viewer_widget)
        viewer_form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self._files_dir = QLineEdit(str(self._s.files_dir))
        viewer_form.addRow("既定のフォルダ:", self._files_dir)
        tabs.addTab(viewer_widget, "ビューア")

        layout.addWidget(tabs)

        btns = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        btns.accepted.connect(self._save)
        btns.rejected.connect(self.reject)
        layout.addWidget(btns)

    def _save(self) -> None:
        encoding = self._encoding.text().strip() or DEFAULT_ENCODING
        if not is_known_encoding(encoding):
            QMessageBox.warning(self, "設定", f"不明な文字コードです: {encoding}")
            self._encoding.setFocus()
            return
        self._s.set("PARSER", "encoding",        encoding)
        self._s.set("PARSER", "strict_types",    str(self._strict.isChecked()).lower())
        self._s.set("PARSER", "warn_on_degrade", str(self._warn.isChecked()).lower())
        self._s.set("VIEWER", "files_dir",       self._files_dir.text().strip() or ".")
        self.accept()
