import bisect
from dataclasses import dataclass

MIN_SPEED_WPS = 1.0
MAX_SPEED_WPS = 15.0
DEFAULT_SPEED_WPS = 2.5

COUNTDOWN_TEXTS = ("3...", "2...", "1...")
COMPLETION_TEXT = "Reading complete."
READY_TEXT = "Ready."
PROMPT_TEXT = "Select a file."


@dataclass(frozen=True)
class WordEvent:
    offset_ms: float
    text: str


class PlaybackTimeline:
    """Ordered, immutable list of word events for one (source, pace) pair."""

    def __init__(self, events, millis_per_word):
        self._events = tuple(events)
        self.millis_per_word = float(millis_per_word)
        self._offsets = [event.offset_ms for event in self._events]

    def __len__(self):
        return len(self._events)

    def __iter__(self):
        return iter(self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __eq__(self, other):
        if not isinstance(other, PlaybackTimeline):
            return NotImplemented
        return self._events == other._events and self.millis_per_word == other.millis_per_word

    def __hash__(self):
        return hash((self._events, self.millis_per_word))

    def __repr__(self):
        return f"PlaybackTimeline(events={len(self._events)}, millis_per_word={self.millis_per_word:g})"

    @property
    def events(self):
        return self._events

    @property
    def offsets(self):
        return list(self._offsets)

    @property
    def texts(self):
        return [event.text for event in self._events]

    @property
    def duration_ms(self):
        return self._offsets[-1] if self._offsets else 0.0

    @property
    def word_count(self):
        return max(0, len(self._events) - len(COUNTDOWN_TEXTS) - 1)

    def index_at(self, offset_ms):
        """Index of the last event due at or before ``offset_ms``, or -1."""
        return bisect.bisect_right(self._offsets, offset_ms) - 1


def wps_to_millis_per_word(words_per_second):
    words_per_second = float(words_per_second)
    if words_per_second <= 0:
        raise ValueError(f"Playback speed must be positive, got {words_per_second:g}")
    return 1000.0 / words_per_second


def clamp_speed(words_per_second):
    return max(MIN_SPEED_WPS, min(MAX_SPEED_WPS, float(words_per_second)))


def build_timeline(source, millis_per_word):
    """Drain ``source`` into a timeline: countdown, one slot per word, completion.

    Slot ``i`` sits at ``i * millis_per_word``. The source is closed once
    drained, including when reading fails part way.
    """
    millis_per_word = float(millis_per_word)
    if millis_per_word <= 0:
        raise ValueError(f"millis_per_word must be positive, got {millis_per_word:g}")

    texts = list(COUNTDOWN_TEXTS)
    try:
        while source.has_next_word():
            texts.append(source.get_next_word())
    finally:
        source.close()
    texts.append(COMPLETION_TEXT)

    events = [WordEvent(slot * millis_per_word, text) for slot, text in enumerate(texts)]
    return PlaybackTimeline(events, millis_per_word)
