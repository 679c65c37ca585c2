import argparse
import os
import sys

from system.runtime_settings import apply_settings_to_environ, load_settings


def build_parser():
    parser = argparse.ArgumentParser(description="Word-by-word (Qt)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging in the window and reading session.",
    )
    parser.add_argument(
        "--wps",
        type=float,
        default=None,
        help="Initial playback speed in words per second (clamped to 1-15).",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Text file to load on startup.",
    )
    return parser


def prepare_qt_runtime():
    # Prevent loading Qt plugins from conda/system locations.
    for key in (
        "QT_PLUGIN_PATH",
        "QML2_IMPORT_PATH",
        "QT_QPA_PLATFORM_PLUGIN_PATH",
    ):
        os.environ.pop(key, None)


def main(argv=None):
    apply_settings_to_environ(load_settings(), override=False)
    prepare_qt_runtime()
    from qt.qt_compat import QT_API, QtWidgets
    from qt.main_window import MainWindow

    args = build_parser().parse_args(argv)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName("Word-by-word")
    app.setOrganizationName("Word-by-word")
    if args.debug:
        print(f"[qt] backend={QT_API}", file=sys.stderr)

    window = MainWindow(debug=args.debug, speed_wps=args.wps, initial_path=args.path)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
