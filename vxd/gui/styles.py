"""Dark-theme stylesheets shared across the viewer."""

MAIN_WINDOW = """
    QMainWindow           { background: #1E1E1E; }
    QMenuBar              { background: #3C3C3C; color: #CCCCCC; }
    QMenuBar::item        { padding: 4px 10px; }
    QMenuBar::item:selected { background: #094771; }
    QMenu                 { background: #252526; color: #CCCCCC; border: 1px solid #454545; }
    QMenu::item           { padding: 4px 20px; }
    QMenu::item:selected  { background: #094771; }
    QMenu::separator      { height: 1px; background: #3C3C3C; margin: 2px 0; }
    QDockWidget::title    {
        background: #333333; color: #CCCCCC;
        padding: 4px 6px; font-size: 12px;
    }
    QDockWidget           { color: #CCCCCC; }
    QStatusBar            { background: #007ACC; color: #FFFFFF; font-size: 12px; }
    QStatusBar::item      { border: none; }
"""

BUTTON = """
    QPushButton {
        background: #3C3C3C; color: #CCCCCC;
        border: 1px solid #555; border-radius: 3px;
        padding: 2px 10px; font-size: 11px;
    }
    QPushButton:hover { background: #4A4A4A; }
"""

DIALOG = """
    QDialog, QWidget, QGroupBox {
        background-color: #252526; color: #CCCCCC;
    }
    QLineEdit {
        background: #3C3C3C; color: #CCCCCC;
        border: 1px solid #555; border-radius: 3px; padding: 3px;
    }
    QCheckBox { color: #CCCCCC; }
    QTabWidget::pane { border: 1px solid #3C3C3C; }
    QTabBar::tab { background:#2D2D2D; color:#CCCCCC; padding:5px 14px; }
    QTabBar::tab:selected { background:#252526; }
    QDialogButtonBox QPushButton {
        background:#3C3C3C; color:#CCCCCC; border:1px solid #555;
        border-radius:3px; padding:4px 14px; min-width:60px;
    }
    QDialogButtonBox QPushButton:hover { background:#4A4A4A; }
"""
