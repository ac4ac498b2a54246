"""VXD Viewer — Entry point.

    python main.py [FILE]                 open the viewer
    python main.py --print FILE [FILE…] [--lenient] [--encoding ENC]
                                          dump variables to stdout
"""
import argparse
import sys
from pathlib import Path

from vxd.core.constants import SETTINGS_FILE
from vxd.core.errors import VxdError
from vxd.core.formatting import print_variables
from vxd.core.parser import VxdParser
from vxd.core.settings_manager import SettingsManager

BASE_DIR = Path(__file__).parent


def _stderr_log(level: str, message: str) -> None:
    if level in ("WARNING", "ERROR"):
        print(f"[{level}] {message}", file=sys.stderr)


def dump(
    paths:    list[Path],
    settings: SettingsManager,
    lenient:  bool = False,
    encoding: str | None = None,
) -> int:
    """Print the variables of each file; return the process exit code."""
    parser = VxdParser(
        strict_types    = settings.strict_types and not lenient,
        warn_on_degrade = settings.warn_on_degrade,
        encoding        = encoding or settings.encoding,
        log_fn          = _stderr_log,
    )
    status = 0
    for path in paths:
        try:
            result = parser.parse_file(path)
        except VxdError:
            status = 1   # already reported through _stderr_log
            continue
        if len(paths) > 1:
            print(f"== {path}")
        print_variables(result.get_variables())
    return status


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="View typed variables of .vxd files")
    ap.add_argument("files", nargs="*", type=Path)
    ap.add_argument("--print", dest="print_only", action="store_true",
                    help="print variables instead of opening the viewer")
    ap.add_argument("--lenient", action="store_true",
                    help="skip declarations with unknown types instead of failing")
    ap.add_argument("--encoding", metavar="ENC",
                    help="text encoding of the files (default: settings.ini)")
    args, qt_args = ap.parse_known_args(argv)

    settings = SettingsManager(BASE_DIR / SETTINGS_FILE)
    if args.print_only:
        if not args.files:
            ap.error("--print needs at least one file")
        return dump(args.files, settings, lenient=args.lenient, encoding=args.encoding)

    from PySide6.QtWidgets import QApplication
    from vxd.gui.main_window import MainWindow

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("VXD Viewer")
    app.setApplicationVersion("0.1.0")
    app.setOrganizationName("VxdViewer")
    app.setStyle("Fusion")

    window = MainWindow(settings, BASE_DIR)
    start = args.files[0] if args.files else settings.last_file
    if start is not None and start.exists():
        window.open_file(start)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
