from functools import partial
from pathlib import Path

from core.scheduler import PlaybackScheduler, monotonic_ms
from core.text_source import SourceUnreadable, is_url, open_source
from core.timeline import DEFAULT_SPEED_WPS, READY_TEXT, build_timeline, wps_to_millis_per_word


class ReadingSession:
    """State transitions the host UI invokes: pick a source, change pace, transport.

    A selection is kept as an opener (a zero-argument callable returning a
    fresh TextSource) so the timeline can be rebuilt from the start whenever
    the pace changes.
    """

    def __init__(
        self,
        display,
        clock=monotonic_ms,
        speed_wps=DEFAULT_SPEED_WPS,
        encoding="utf-8",
        url_timeout=None,
        on_state_change=None,
        debug=False,
    ):
        self.display = display
        self.encoding = encoding
        self.url_timeout = url_timeout
        self.debug = debug
        self.scheduler = PlaybackScheduler(display, clock=clock, on_state_change=on_state_change)
        self.speed_wps = float(speed_wps)
        self.millis_per_word = wps_to_millis_per_word(self.speed_wps)
        self.source_label = None
        self._opener = None

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][ReadingSession] {message}")

    @property
    def has_source(self):
        return self._opener is not None

    @property
    def timeline(self):
        return self.scheduler.timeline

    def select_file(self, path, encoding=None):
        path = Path(path)
        opener = partial(open_source, path, encoding=encoding or self.encoding)
        return self.select_source(opener, label=str(path))

    def select_url(self, url):
        url = (url or "").strip()
        if not is_url(url):
            raise SourceUnreadable(f"Not an http(s) URL: {url!r}", url)
        opener = partial(open_source, url, timeout=self.url_timeout, encoding=self.encoding)
        return self.select_source(opener, label=url)

    def select_text(self, text, label="<text>"):
        return self.select_source(partial(open_source, text, raw=True), label=label)

    def select_source(self, opener, label=None):
        """Build a timeline from ``opener`` and make it the active selection.

        SourceUnreadable propagates; the previous selection and timeline stay.
        """
        timeline = self._build(opener)
        self._opener = opener
        self.source_label = label
        self._install(timeline)
        return timeline

    def update_speed(self, words_per_second):
        millis_per_word = wps_to_millis_per_word(words_per_second)
        if millis_per_word == self.millis_per_word:
            return False
        self.speed_wps = float(words_per_second)
        self.millis_per_word = millis_per_word
        self.debug_log(f"Speed set to {self.speed_wps:g} wps ({millis_per_word:.1f} ms/word)")
        if self._opener is not None:
            self._install(self._build(self._opener))
        return True

    def play(self):
        self.scheduler.play()

    def pause(self):
        self.scheduler.pause()

    def stop(self):
        self.scheduler.stop()

    def toggle_play(self):
        if self.scheduler.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self):
        return self.scheduler.tick()

    def transport_state(self):
        """Which of start, pause and stop make sense right now."""
        loaded = self.scheduler.timeline is not None
        playing = self.scheduler.is_playing
        return {"start": loaded and not playing, "pause": playing, "stop": loaded}

    def _build(self, opener):
        source = opener()
        timeline = build_timeline(source, self.millis_per_word)
        self.debug_log(f"Built timeline: {timeline.word_count} words at {self.millis_per_word:.1f} ms/word")
        return timeline

    def _install(self, timeline):
        self.scheduler.load(timeline)
        self.display(READY_TEXT)
