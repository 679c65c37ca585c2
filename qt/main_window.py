from __future__ import annotations

from pathlib import Path

from qt.qt_compat import QtCore, QtGui, QtWidgets

from core.session import ReadingSession
from core.text_source import SourceUnreadable
from core.timeline import MAX_SPEED_WPS, MIN_SPEED_WPS, PROMPT_TEXT, clamp_speed
from qt.styles import build_qss, reading_text_style
from system.runtime_settings import (
    get_default_speed_wps,
    get_encoding,
    get_font_size,
    get_style_profile,
    get_tick_interval_ms,
    get_url_timeout_s,
)

WINDOW_WIDTH_PX = 320
WINDOW_HEIGHT_PX = 220
# Slider works in tenths of a word per second.
SLIDER_SCALE = 10
SPEED_DEBOUNCE_MS = 150
INVALID_FILE_ERROR = "The selected file could not be read. Please try again."


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, debug: bool = False, speed_wps: float | None = None, initial_path: str | None = None):
        super().__init__()
        self.debug = debug
        self.setWindowTitle("Word-by-word")
        self.resize(WINDOW_WIDTH_PX, WINDOW_HEIGHT_PX)
        self._style_profile = get_style_profile()
        self.setStyleSheet(build_qss(self._style_profile))

        start_speed = clamp_speed(speed_wps) if speed_wps is not None else get_default_speed_wps()
        self.session = ReadingSession(
            self._display_word,
            speed_wps=start_speed,
            encoding=get_encoding(),
            url_timeout=get_url_timeout_s(),
            on_state_change=self._on_playback_state,
            debug=debug,
        )
        self._pending_speed = None

        self._build_ui()
        self.reading_text.setText(PROMPT_TEXT)
        self._set_slider_speed(start_speed)

        self._speed_debounce = QtCore.QTimer(self)
        self._speed_debounce.setSingleShot(True)
        self._speed_debounce.setInterval(SPEED_DEBOUNCE_MS)
        self._speed_debounce.timeout.connect(self._apply_pending_speed)

        self._tick_timer = QtCore.QTimer(self)
        self._tick_timer.setInterval(get_tick_interval_ms())
        self._tick_timer.timeout.connect(self._on_tick)
        self._tick_timer.start()

        if initial_path:
            self.load_path(initial_path)

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][MainWindow] {message}")

    def _build_ui(self):
        root = QtWidgets.QWidget()
        root.setObjectName("RootWindow")
        self.setCentralWidget(root)
        grid = QtWidgets.QGridLayout(root)
        grid.setContentsMargins(10, 10, 10, 10)
        grid.setHorizontalSpacing(5)
        grid.setVerticalSpacing(5)

        source_row = QtWidgets.QHBoxLayout()
        source_row.setSpacing(5)
        self.select_file_btn = QtWidgets.QPushButton("Select file...")
        self.select_file_btn.clicked.connect(self.choose_file)
        source_row.addWidget(self.select_file_btn, 1)
        self.open_url_btn = QtWidgets.QPushButton("Open URL...")
        self.open_url_btn.clicked.connect(self.choose_url)
        source_row.addWidget(self.open_url_btn, 0)
        grid.addLayout(source_row, 0, 0, 1, 3)

        self.source_label = QtWidgets.QLabel("")
        self.source_label.setObjectName("SourceLabel")
        self.source_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        grid.addWidget(self.source_label, 1, 0, 1, 3)

        self.reading_text = QtWidgets.QLabel("")
        self.reading_text.setObjectName("ReadingText")
        self.reading_text.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.reading_text.setStyleSheet(reading_text_style(self._style_profile, get_font_size()))
        self.reading_text.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding
        )
        grid.addWidget(self.reading_text, 2, 0, 1, 3)
        grid.setRowStretch(2, 1)

        self.speed_slider = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        self.speed_slider.setRange(int(MIN_SPEED_WPS * SLIDER_SCALE), int(MAX_SPEED_WPS * SLIDER_SCALE))
        self.speed_slider.setSingleStep(1)
        self.speed_slider.setPageStep(SLIDER_SCALE)
        self.speed_slider.valueChanged.connect(self._on_slider_changed)
        grid.addWidget(self.speed_slider, 3, 0, 1, 3)

        self.speed_label = QtWidgets.QLabel("Playback speed")
        self.speed_label.setObjectName("SpeedLabel")
        self.speed_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignHCenter | QtCore.Qt.AlignmentFlag.AlignTop)
        grid.addWidget(self.speed_label, 4, 0, 1, 3)

        self.stop_btn = QtWidgets.QPushButton("Stop")
        self.stop_btn.clicked.connect(self.session.stop)
        grid.addWidget(self.stop_btn, 5, 0)
        self.pause_btn = QtWidgets.QPushButton("Pause")
        self.pause_btn.clicked.connect(self.session.pause)
        grid.addWidget(self.pause_btn, 5, 1)
        self.start_btn = QtWidgets.QPushButton("Start reading")
        self.start_btn.setObjectName("StartButton")
        self.start_btn.clicked.connect(self.session.play)
        grid.addWidget(self.start_btn, 5, 2)

        self._space_shortcut = QtGui.QShortcut(QtGui.QKeySequence(QtCore.Qt.Key.Key_Space), self)
        self._space_shortcut.activated.connect(self.session.toggle_play)
        self._update_transport_buttons()

    def _display_word(self, text: str):
        self.reading_text.setText(text)

    def _on_tick(self):
        self.session.tick()

    def _on_playback_state(self, state: dict):
        self.debug_log(f"Playback state: {state}")
        if hasattr(self, "start_btn"):
            self._update_transport_buttons()

    def _update_transport_buttons(self):
        state = self.session.transport_state()
        self.start_btn.setEnabled(state["start"])
        self.pause_btn.setEnabled(state["pause"])
        self.stop_btn.setEnabled(state["stop"])

    def _set_slider_speed(self, wps: float):
        blocked = self.speed_slider.blockSignals(True)
        self.speed_slider.setValue(int(round(wps * SLIDER_SCALE)))
        self.speed_slider.blockSignals(blocked)
        self._update_speed_label(wps)

    def _update_speed_label(self, wps: float):
        self.speed_label.setText(f"Playback speed: {wps:.1f} words/s")

    def _on_slider_changed(self, value: int):
        wps = clamp_speed(float(value) / SLIDER_SCALE)
        self._update_speed_label(wps)
        self._pending_speed = wps
        self._speed_debounce.start()

    def _apply_pending_speed(self):
        if self._pending_speed is None:
            return
        wps = self._pending_speed
        self._pending_speed = None
        try:
            self.session.update_speed(wps)
        except SourceUnreadable as exc:
            self._show_source_error(exc)

    def choose_file(self):
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self,
            "Select source text file",
            "",
            "Text files (*.txt);;All files (*)",
        )
        if path:
            self.load_path(path)

    def choose_url(self):
        url, ok = QtWidgets.QInputDialog.getText(self, "Open URL", "Text URL:")
        url = (url or "").strip()
        if ok and url:
            self.load_url(url)

    def load_path(self, path: str) -> bool:
        self.debug_log(f"Loading file: {path}")
        try:
            self.session.select_file(path)
        except SourceUnreadable as exc:
            self._show_source_error(exc)
            return False
        self.source_label.setText(Path(path).name)
        return True

    def load_url(self, url: str) -> bool:
        self.debug_log(f"Loading URL: {url}")
        try:
            self.session.select_url(url)
        except SourceUnreadable as exc:
            self._show_source_error(exc)
            return False
        self.source_label.setText(url)
        return True

    def _show_source_error(self, exc: SourceUnreadable):
        self.debug_log(f"Source unreadable: {exc}")
        QtWidgets.QMessageBox.critical(self, "Word-by-word", INVALID_FILE_ERROR)

    def closeEvent(self, event):
        self._tick_timer.stop()
        self.session.stop()
        super().closeEvent(event)
