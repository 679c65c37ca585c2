import importlib
import sys
import types

import main as main_mod
import qt.app as app_mod


def test_qt_compat_uses_pyqt6_when_requested(monkeypatch):
    monkeypatch.setenv("WORDBYWORD_QT_API", "pyqt6")

    import qt.qt_compat as qt_compat

    qt_compat = importlib.reload(qt_compat)
    assert qt_compat.QT_API == "PyQt6"


def test_parser_accepts_path_and_speed():
    args = app_mod.build_parser().parse_args(["--wps", "6", "book.txt"])

    assert args.wps == 6.0
    assert args.path == "book.txt"
    assert args.debug is False


def test_app_main_bootstrap_flow_with_stubs(monkeypatch):
    calls = {
        "loaded": False,
        "applied": False,
        "show": False,
        "window_kwargs": None,
    }

    class _DummyApp:
        def __init__(self, argv):
            self.argv = argv

        def setApplicationName(self, _name):
            return None

        def setOrganizationName(self, _name):
            return None

        def exec(self):
            return 0

    fake_qt_compat = types.ModuleType("qt.qt_compat")
    fake_qt_compat.QT_API = "PyQt6"
    fake_qt_compat.QtWidgets = types.SimpleNamespace(QApplication=_DummyApp)

    class _DummyMainWindow:
        def __init__(self, **kwargs):
            calls["window_kwargs"] = kwargs

        def show(self):
            calls["show"] = True

    fake_main_window = types.ModuleType("qt.main_window")
    fake_main_window.MainWindow = _DummyMainWindow

    monkeypatch.setitem(sys.modules, "qt.qt_compat", fake_qt_compat)
    monkeypatch.setitem(sys.modules, "qt.main_window", fake_main_window)

    def _fake_load_settings():
        calls["loaded"] = True
        return {"WORDBYWORD_TICK_MS": "16"}

    def _fake_apply_settings(settings, override=True):
        calls["applied"] = settings == {"WORDBYWORD_TICK_MS": "16"} and override is False

    monkeypatch.setattr(app_mod, "load_settings", _fake_load_settings)
    monkeypatch.setattr(app_mod, "apply_settings_to_environ", _fake_apply_settings)
    monkeypatch.setattr(app_mod, "prepare_qt_runtime", lambda: None)

    rc = app_mod.main(["--debug", "--wps", "3", "story.txt"])

    assert rc == 0
    assert calls["loaded"] is True
    assert calls["applied"] is True
    assert calls["show"] is True
    assert calls["window_kwargs"] == {"debug": True, "speed_wps": 3.0, "initial_path": "story.txt"}


def test_main_routes_to_selected_front_end(monkeypatch):
    seen = {}

    fake_qt_app = types.ModuleType("qt.app")
    fake_qt_app.main = lambda argv: seen.setdefault("qt", argv) and 0
    fake_ui_app = types.ModuleType("ui.app")
    fake_ui_app.main = lambda argv: seen.setdefault("tk", argv) and 0

    monkeypatch.setitem(sys.modules, "qt.app", fake_qt_app)
    monkeypatch.setitem(sys.modules, "ui.app", fake_ui_app)

    main_mod.main(["--ui", "tk", "--wps", "4", "book.txt"])
    main_mod.main(["book.txt"])

    assert seen["tk"] == ["--wps", "4", "book.txt"]
    assert seen["qt"] == ["book.txt"]
