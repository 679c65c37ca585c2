import argparse
import sys
from pathlib import Path
from tkinter import filedialog, messagebox

import customtkinter as ctk

from core.session import ReadingSession
from core.text_source import SourceUnreadable
from core.timeline import MAX_SPEED_WPS, MIN_SPEED_WPS, PROMPT_TEXT, clamp_speed
from system.runtime_settings import (
    apply_settings_to_environ,
    get_default_speed_wps,
    get_encoding,
    get_font_size,
    get_url_timeout_s,
    load_settings,
)
from ui.theme import PALETTE, RADIUS, SPACING, accent_button_style, frame_style, neutral_button_style

INVALID_FILE_ERROR = "The selected file could not be read. Please try again."
SPEED_DEBOUNCE_MS = 150


def configure_dpi_awareness():
    if not sys.platform.startswith("win"):
        return
    try:
        import ctypes

        ctypes.windll.shcore.SetProcessDpiAwareness(2)
    except Exception:
        try:
            ctypes.windll.user32.SetProcessDPIAware()
        except Exception:
            pass


class App(ctk.CTk):
    def __init__(self, debug=False, speed_wps=None, initial_path=None):
        super().__init__()
        self.debug = debug
        self.title("Word-by-word")
        self.geometry("360x240")

        start_speed = clamp_speed(speed_wps) if speed_wps is not None else get_default_speed_wps()
        self.session = ReadingSession(
            self.display_word,
            speed_wps=start_speed,
            encoding=get_encoding(),
            url_timeout=get_url_timeout_s(),
            on_state_change=self._on_playback_state,
            debug=debug,
        )
        self._tick_after = None
        self._speed_after = None

        self.grid_columnconfigure((0, 1, 2), weight=1)
        self.grid_rowconfigure(2, weight=1)

        self.select_file_button = ctk.CTkButton(
            self, text="Select file...", command=self.choose_file, **neutral_button_style()
        )
        self.select_file_button.grid(
            row=0, column=0, columnspan=2, sticky="ew", padx=(SPACING["outer"], 4), pady=(SPACING["outer"], 0)
        )
        self.open_url_button = ctk.CTkButton(
            self, text="Open URL...", command=self.choose_url, **neutral_button_style()
        )
        self.open_url_button.grid(
            row=0, column=2, sticky="ew", padx=(4, SPACING["outer"]), pady=(SPACING["outer"], 0)
        )

        self.source_label = ctk.CTkLabel(self, text="", text_color=PALETTE["muted_text"], font=ctk.CTkFont(size=12))
        self.source_label.grid(row=1, column=0, columnspan=3, sticky="ew", padx=SPACING["outer"])

        self.reading_frame = ctk.CTkFrame(self, **frame_style(PALETTE["panel"], RADIUS["card"]))
        self.reading_frame.grid(
            row=2, column=0, columnspan=3, sticky="nsew", padx=SPACING["outer"], pady=SPACING["compact"]
        )
        self.reading_text = ctk.CTkLabel(
            self.reading_frame,
            text=PROMPT_TEXT,
            text_color=PALETTE["reading_text"],
            font=ctk.CTkFont(size=get_font_size(), weight="bold"),
        )
        self.reading_text.pack(expand=True, fill="both", padx=SPACING["inner"], pady=SPACING["inner"])

        self.speed_slider = ctk.CTkSlider(
            self,
            from_=MIN_SPEED_WPS,
            to=MAX_SPEED_WPS,
            number_of_steps=int((MAX_SPEED_WPS - MIN_SPEED_WPS) * 10),
            command=self.on_slider_changed,
        )
        self.speed_slider.set(start_speed)
        self.speed_slider.grid(row=3, column=0, columnspan=3, sticky="ew", padx=SPACING["outer"])

        self.speed_label = ctk.CTkLabel(self, text="", text_color=PALETTE["muted_text"], font=ctk.CTkFont(size=12))
        self.speed_label.grid(row=4, column=0, columnspan=3, sticky="n")
        self._update_speed_label(start_speed)

        self.stop_button = ctk.CTkButton(self, text="Stop", command=self.stop, **neutral_button_style())
        self.stop_button.grid(row=5, column=0, sticky="ew", padx=(SPACING["outer"], 4), pady=SPACING["control_y"])
        self.pause_button = ctk.CTkButton(self, text="Pause", command=self.pause, **neutral_button_style())
        self.pause_button.grid(row=5, column=1, sticky="ew", padx=4, pady=SPACING["control_y"])
        self.start_button = ctk.CTkButton(self, text="Start reading", command=self.play, **accent_button_style())
        self.start_button.grid(row=5, column=2, sticky="ew", padx=(4, SPACING["outer"]), pady=SPACING["control_y"])

        self._update_transport_buttons()

        self.bind("<space>", lambda _e: self.toggle_play())
        self.protocol("WM_DELETE_WINDOW", self.on_app_close)

        if initial_path:
            self.load_path(initial_path)

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][App] {message}")

    def display_word(self, text):
        self.reading_text.configure(text=text)

    def _on_playback_state(self, state):
        self.debug_log(f"Playback state: {state}")
        if hasattr(self, "start_button"):
            self._update_transport_buttons()

    def _update_transport_buttons(self):
        state = self.session.transport_state()
        for button, key in ((self.start_button, "start"), (self.pause_button, "pause"), (self.stop_button, "stop")):
            button.configure(state="normal" if state[key] else "disabled")

    def _update_speed_label(self, wps):
        self.speed_label.configure(text=f"Playback speed: {wps:.1f} words/s")

    def on_slider_changed(self, value):
        wps = clamp_speed(round(float(value), 1))
        self._update_speed_label(wps)
        if self._speed_after is not None:
            self.after_cancel(self._speed_after)
        self._speed_after = self.after(SPEED_DEBOUNCE_MS, lambda: self.apply_speed(wps))

    def apply_speed(self, wps):
        self._speed_after = None
        try:
            self.session.update_speed(wps)
        except SourceUnreadable as exc:
            self.show_source_error(exc)
        self._schedule_tick()

    def choose_file(self):
        path = filedialog.askopenfilename(
            title="Select source text file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self.load_path(path)

    def load_path(self, path):
        self.debug_log(f"Loading file: {path}")
        try:
            self.session.select_file(path)
        except SourceUnreadable as exc:
            self.show_source_error(exc)
            return False
        self.title(f"Word-by-word - {Path(path).name}")
        self.source_label.configure(text=Path(path).name)
        self._schedule_tick()
        return True

    def choose_url(self):
        dialog = ctk.CTkInputDialog(text="Text URL:", title="Open URL")
        url = (dialog.get_input() or "").strip()
        if url:
            self.load_url(url)

    def load_url(self, url):
        self.debug_log(f"Loading URL: {url}")
        try:
            self.session.select_url(url)
        except SourceUnreadable as exc:
            self.show_source_error(exc)
            return False
        self.title(f"Word-by-word - {url}")
        self.source_label.configure(text=url)
        self._schedule_tick()
        return True

    def show_source_error(self, exc):
        self.debug_log(f"Source unreadable: {exc}")
        messagebox.showerror("Word-by-word", INVALID_FILE_ERROR)

    def play(self):
        self.session.play()
        self._schedule_tick()

    def pause(self):
        self.session.pause()
        self._schedule_tick()

    def stop(self):
        self.session.stop()
        self._schedule_tick()

    def toggle_play(self):
        self.session.toggle_play()
        self._schedule_tick()

    def _schedule_tick(self):
        if self._tick_after is not None:
            self.after_cancel(self._tick_after)
            self._tick_after = None
        delay = self.session.scheduler.ms_until_next_event()
        if delay is None:
            return
        self._tick_after = self.after(max(1, int(delay) + 1), self._on_tick)

    def _on_tick(self):
        self._tick_after = None
        self.session.tick()
        self._schedule_tick()

    def on_app_close(self):
        self.debug_log("App close requested")
        self.session.stop()
        if self._tick_after is not None:
            self.after_cancel(self._tick_after)
        self.destroy()


def build_parser():
    parser = argparse.ArgumentParser(description="Word-by-word")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging in the app and reading session.",
    )
    parser.add_argument(
        "--wps",
        type=float,
        default=None,
        help="Initial playback speed in words per second (clamped to 1-15).",
    )
    parser.add_argument("path", nargs="?", default=None, help="Text file to load on startup.")
    return parser


def main(argv=None):
    apply_settings_to_environ(load_settings(), override=False)
    configure_dpi_awareness()
    ctk.set_appearance_mode("Dark")
    ctk.set_default_color_theme("blue")

    args = build_parser().parse_args(argv)
    app = App(debug=args.debug, speed_wps=args.wps, initial_path=args.path)
    app.mainloop()


if __name__ == "__main__":
    main()
