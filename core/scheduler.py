import time

STOPPED = "stopped"
PLAYING = "playing"
PAUSED = "paused"


def monotonic_ms():
    return time.monotonic() * 1000.0


class PlaybackScheduler:
    """Replays a PlaybackTimeline into a single display callback.

    The scheduler owns no timer. The host calls ``tick()`` from its event loop
    (QTimer, Tk ``after``) and every event whose offset has been reached fires
    in order, synchronously, on that call. Position is measured with ``clock``
    (milliseconds, monotonic) from the last ``play()`` plus whatever had elapsed
    before the last ``pause()``.
    """

    def __init__(self, display, clock=monotonic_ms, on_state_change=None):
        self.display = display
        self.clock = clock
        self.on_state_change = on_state_change
        self.timeline = None
        self.state = STOPPED
        self.finished = False
        self._next_index = 0
        self._paused_position_ms = 0.0
        self._started_at = None
        # Bumped on every play, pause and halt; a tick stops dispatching once it changes.
        self._generation = 0

    @property
    def is_playing(self):
        return self.state == PLAYING

    @property
    def position_ms(self):
        if self.state == PLAYING and self._started_at is not None:
            return self._paused_position_ms + (self.clock() - self._started_at)
        return self._paused_position_ms

    @property
    def next_index(self):
        return self._next_index

    def load(self, timeline):
        self._halt()
        self.timeline = timeline
        self.finished = False
        self._emit_state()

    def unload(self):
        self._halt()
        self.timeline = None
        self.finished = False
        self._emit_state()

    def play(self):
        if self.timeline is None or self.state == PLAYING:
            return
        if self.state == STOPPED:
            self._next_index = 0
            self._paused_position_ms = 0.0
            self.finished = False
        self._started_at = self.clock()
        self.state = PLAYING
        self._generation += 1
        self._emit_state()
        self.tick()

    def pause(self):
        if self.state != PLAYING:
            return
        self._paused_position_ms = self.position_ms
        self._started_at = None
        self.state = PAUSED
        self._generation += 1
        self._emit_state()

    def stop(self):
        if self.state == STOPPED and self._next_index == 0 and self._paused_position_ms == 0.0:
            return
        self._halt()
        self._emit_state()

    def tick(self):
        """Fire every due event not fired yet. Returns how many fired."""
        if self.state != PLAYING or self.timeline is None:
            return 0
        generation = self._generation
        position = self.position_ms
        events = self.timeline.events
        fired = 0
        while self._generation == generation and self._next_index < len(events):
            event = events[self._next_index]
            if event.offset_ms > position:
                break
            self._next_index += 1
            fired += 1
            self.display(event.text)
        if self._generation == generation and self._next_index >= len(events):
            self._halt()
            self.finished = True
            self._emit_state()
        return fired

    def ms_until_next_event(self):
        if self.state != PLAYING or self.timeline is None:
            return None
        if self._next_index >= len(self.timeline):
            return 0.0
        return max(0.0, self.timeline[self._next_index].offset_ms - self.position_ms)

    def _halt(self):
        self.state = STOPPED
        self._generation += 1
        self._next_index = 0
        self._paused_position_ms = 0.0
        self._started_at = None

    def _emit_state(self):
        if self.on_state_change is None:
            return
        self.on_state_change(
            {
                "state": self.state,
                "position_ms": self.position_ms,
                "next_index": self._next_index,
                "total_events": len(self.timeline) if self.timeline is not None else 0,
                "finished": self.finished,
            }
        )
