import qt.main_window as mw
from core.timeline import COMPLETION_TEXT, PROMPT_TEXT, READY_TEXT


def _build_window(monkeypatch, errors=None, **kwargs):
    monkeypatch.setenv("WORDBYWORD_DEFAULT_WPS", "2")
    if errors is not None:
        monkeypatch.setattr(mw.MainWindow, "_show_source_error", lambda self, exc: errors.append(exc))
    return mw.MainWindow(debug=False, **kwargs)


def test_window_starts_with_prompt_and_default_speed(qapp, monkeypatch):
    window = _build_window(monkeypatch)

    assert window.reading_text.text() == PROMPT_TEXT
    assert window.speed_slider.value() == 20
    assert window.session.speed_wps == 2.0
    assert "2.0" in window.speed_label.text()
    assert window.start_btn.isEnabled() is False
    window.close()


def test_loading_a_file_shows_ready_and_enables_start(qapp, monkeypatch, tmp_path):
    path = tmp_path / "story.txt"
    path.write_text("hello world", encoding="utf-8")
    window = _build_window(monkeypatch)

    assert window.load_path(str(path)) is True

    assert window.reading_text.text() == READY_TEXT
    assert window.source_label.text() == "story.txt"
    assert window.session.timeline.word_count == 2
    assert window.start_btn.isEnabled() is True
    assert window.pause_btn.isEnabled() is False
    window.close()


def test_transport_buttons_drive_playback(qapp, monkeypatch, clock):
    window = _build_window(monkeypatch)
    window.session.scheduler.clock = clock
    window.session.select_text("hello world")

    window.start_btn.click()
    assert window.reading_text.text() == "3..."
    assert window.pause_btn.isEnabled() is True

    clock.advance_ms(1500)
    window._on_tick()
    assert window.reading_text.text() == "hello"

    window.pause_btn.click()
    clock.advance_ms(10_000)
    window._on_tick()
    assert window.reading_text.text() == "hello"

    window.start_btn.click()
    clock.advance_ms(1000)
    window._on_tick()
    assert window.reading_text.text() == COMPLETION_TEXT
    assert window.session.scheduler.finished is True
    window.close()


def test_stop_button_resets_playback(qapp, monkeypatch, clock):
    window = _build_window(monkeypatch)
    window.session.scheduler.clock = clock
    window.session.select_text("a b c")
    window.start_btn.click()
    clock.advance_ms(1200)
    window._on_tick()

    window.stop_btn.click()

    assert window.session.scheduler.position_ms == 0
    window.start_btn.click()
    assert window.reading_text.text() == "3..."
    window.close()


def test_unreadable_file_shows_error_and_keeps_previous(qapp, monkeypatch, tmp_path):
    errors = []
    window = _build_window(monkeypatch, errors=errors)
    window.session.select_text("kept text")
    previous = window.session.timeline

    assert window.load_path(str(tmp_path / "missing.txt")) is False

    assert len(errors) == 1
    assert isinstance(errors[0], mw.SourceUnreadable)
    assert window.session.timeline is previous
    window.close()


def test_slider_change_rebuilds_timeline_at_new_pace(qapp, monkeypatch):
    window = _build_window(monkeypatch)
    window.session.select_text("one two")

    window.speed_slider.setValue(50)
    assert "5.0" in window.speed_label.text()
    window._apply_pending_speed()

    assert window.session.speed_wps == 5.0
    assert window.session.timeline.millis_per_word == 200
    assert window.reading_text.text() == READY_TEXT
    window.close()


def test_initial_speed_argument_is_clamped(qapp, monkeypatch):
    window = _build_window(monkeypatch, speed_wps=99)

    assert window.session.speed_wps == 15.0
    assert window.speed_slider.value() == 150
    window.close()


def test_initial_path_is_loaded(qapp, monkeypatch, tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("ready set go", encoding="utf-8")

    window = _build_window(monkeypatch, initial_path=str(path))

    assert window.session.timeline.word_count == 3
    assert window.reading_text.text() == READY_TEXT
    window.close()
