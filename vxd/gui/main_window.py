"""Main viewer window.

Central source view, variable table docked on the right, parse log docked
at the bottom.  Every open/reload runs a fresh parse; on failure the
variable table is cleared (a failed parse yields no variables) and the
offending line is marked in the source view.
"""
from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import (
    QMainWindow, QDockWidget, QLabel, QFileDialog, QMessageBox, QDialog,
)
from PySide6.QtCore import Qt, QSettings
from PySide6.QtGui import QAction, QKeySequence, QCloseEvent

from vxd.core.constants import VXD_SUFFIX
from vxd.core.errors import VxdError, VxdErrorCategory
from vxd.core.parser import VxdParser
from vxd.core.settings_manager import SettingsManager
from vxd.gui.log_panel import LogPanel
from vxd.gui.settings_dialog import SettingsDialog
from vxd.gui.source_view import SourceView
from vxd.gui.styles import MAIN_WINDOW
from vxd.gui.variable_panel import VariablePanel


class MainWindow(QMainWindow):
    def __init__(self, settings: SettingsManager, base_dir: Path) -> None:
        super().__init__()
        self._settings = settings
        self._base_dir = base_dir
        self._path: Path | None = None

        self.setWindowTitle("VXD Viewer")
        self.setMinimumSize(820, 520)
        self.setStyleSheet(MAIN_WINDOW)

        self._source = SourceView()
        self.setCentralWidget(self._source)
        self._build_variable_dock()
        self._build_log_dock()
        self._build_menu()
        self._build_statusbar()
        self._restore_geometry()

        self._log("INFO", "VXD Viewer 起動完了")

    # ================================================================
    # UI construction
    # ================================================================

    def _build_variable_dock(self) -> None:
        self._var_panel = VariablePanel()
        dock = QDockWidget("変数", self)
        dock.setAllowedAreas(
            Qt.DockWidgetArea.RightDockWidgetArea |
            Qt.DockWidgetArea.BottomDockWidgetArea
        )
        dock.setWidget(self._var_panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, dock)
        self._var_dock = dock

    def _build_log_dock(self) -> None:
        self._log_panel = LogPanel()
        dock = QDockWidget("ログ", self)
        dock.setAllowedAreas(Qt.DockWidgetArea.BottomDockWidgetArea)
        dock.setFeatures(
            QDockWidget.DockWidgetFeature.DockWidgetClosable |
            QDockWidget.DockWidgetFeature.DockWidgetMovable
        )
        dock.setWidget(self._log_panel)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, dock)
        self.resizeDocks([dock], [160], Qt.Orientation.Vertical)
        self._log_dock = dock

    def _build_menu(self) -> None:
        mb = self.menuBar()

        # ── File ────────────────────────────────────────────────────────
        file_menu = mb.addMenu("ファイル(&F)")
        a_open   = QAction("開く(&O)...",   self, shortcut=QKeySequence.StandardKey.Open)
        a_reload = QAction("再読み込み(&R)", self, shortcut=QKeySequence.StandardKey.Refresh)
        a_exit   = QAction("終了(&X)",      self, shortcut=QKeySequence("Alt+F4"))
        a_open.triggered.connect(self._open_file_dialog)
        a_reload.triggered.connect(self.reload)
        a_exit.triggered.connect(self.close)
        file_menu.addActions([a_open, a_reload])
        file_menu.addSeparator()
        file_menu.addAction(a_exit)

        # ── Tools ───────────────────────────────────────────────────────
        tools_menu = mb.addMenu("ツール(&T)")
        a_settings = QAction("設定(&O)...", self)
        a_settings.triggered.connect(self._open_settings)
        var_toggle = self._var_dock.toggleViewAction()
        var_toggle.setText("変数パネル(&V)")
        log_toggle = self._log_dock.toggleViewAction()
        log_toggle.setText("ログパネル(&L)")
        tools_menu.addActions([a_settings, var_toggle, log_toggle])

        # ── Help ────────────────────────────────────────────────────────
        help_menu = mb.addMenu("ヘルプ(&H)")
        a_about = QAction("バージョン情報(&A)", self)
        a_about.triggered.connect(self._show_about)
        help_menu.addAction(a_about)

    def _build_statusbar(self) -> None:
        self._status_label = QLabel("ファイル未選択")
        self.statusBar().addWidget(self._status_label)

    # ================================================================
    # Loading
    # ================================================================

    def open_file(self, path: Path) -> None:
        self._path = path
        self.setWindowTitle(f"VXD Viewer  —  {path.name}")
        self._settings.set("VIEWER", "last_file", str(path))
        self.reload()

    def reload(self) -> None:
        if self._path is None:
            return
        try:
            text = self._path.read_text(encoding=self._settings.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            self._source.show_source("")
            self._var_panel.clear()
            self._log("ERROR", f"読み込み失敗: {exc}")
            self._status_label.setText("読み込み失敗")
            return
        self._source.show_source(text)

        parser = VxdParser.from_settings(self._settings, log_fn=self._log)
        try:
            result = parser.parse_text(text)
        except VxdError as exc:
            self._var_panel.clear()
            if exc.category is VxdErrorCategory.UNSUPPORTED_TYPE:
                self._source.mark_lines(set(), exc.line_num)
            self._status_label.setText(f"エラー: {exc.reason}")
            return

        self._var_panel.show_variables(result.get_variables())
        self._source.mark_lines({d.line_num for d in result.diagnostics})
        self._status_label.setText(
            f"{len(result.variables)} 変数 / 警告 {len(result.diagnostics)}"
        )

    def _open_file_dialog(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "VXD ファイルを開く",
            str(self._base_dir / self._settings.files_dir),
            f"VXD Files (*{VXD_SUFFIX});;All Files (*)",
        )
        if path:
            self.open_file(Path(path))

    def _open_settings(self) -> None:
        dlg = SettingsDialog(self._settings, self)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            # Parser options may have changed
            self.reload()

    # ================================================================
    # Helpers
    # ================================================================

    def _log(self, level: str, message: str) -> None:
        self._log_panel.log(level, message)

    def _show_about(self) -> None:
        QMessageBox.about(
            self, "バージョン情報",
            "<b>VXD Viewer</b> v0.1.0<br>"
            "Python 3 + PySide6<br><br>"
            ".vxd 設定ファイルの型付き変数ビューア",
        )

    # ================================================================
    # Geometry persistence
    # ================================================================

    def _restore_geometry(self) -> None:
        qs = QSettings("VxdViewer", "MainWindow")
        geom = qs.value("geometry")
        state = qs.value("windowState")
        if geom:
            self.restoreGeometry(geom)
        else:
            self.resize(1100, 700)
        if state:
            self.restoreState(state)

    def closeEvent(self, event: QCloseEvent) -> None:
        qs = QSettings("VxdViewer", "MainWindow")
        qs.setValue("geometry",    self.saveGeometry())
        qs.setValue("windowState", self.saveState())
        event.accept()
