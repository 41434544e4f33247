from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence, Tuple

from vegam.core.clock import Clock, ManualClock
from vegam.core.config import SessionConfig, validate_duration
from vegam.core.matching import InputMatcher, ProgressionController, WordAdvance
from vegam.core.metrics import MetricsCalculator, SessionResult
from vegam.core.state import Phase, SessionState, row_start
from vegam.core.words import Word, shuffle_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot of a session for rendering."""

    visible_words: Tuple[str, ...]
    highlight_index: int
    phase: Phase
    remaining_seconds: int
    duration: int
    wpm: int
    error_count: int
    accuracy: int
    input_buffer: str
    current_index: int
    total_words: int
    total_characters_typed: int
    correct_characters: int

    @property
    def input_enabled(self) -> bool:
        return self.phase is not Phase.FINISHED


class TypingSession:
    """Timed typing test: Idle -> Running -> Finished.

    All mutation goes through the event methods (:meth:`type_text`,
    :meth:`press_space`, :meth:`tick`, :meth:`select_duration`,
    :meth:`restart`). The underlying :class:`SessionState` is replaced
    wholesale on restart or duration change, and the clock is stopped on
    every exit from Running.
    """

    def __init__(
        self,
        vocabulary: Sequence[Word],
        config: Optional[SessionConfig] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
        on_update: Optional[Callable[[SessionView], None]] = None,
        on_scroll: Optional[Callable[[], None]] = None,
    ) -> None:
        self._vocabulary = list(vocabulary)
        self._config = config or SessionConfig()
        self._clock: Clock = clock if clock is not None else ManualClock()
        self._rng = rng or random.Random()
        self._on_update = on_update
        self._on_scroll = on_scroll
        self._matcher = InputMatcher(count_deletions=self._config.count_deletions)
        self._progression = ProgressionController(row_size=self._config.row_size)
        self._metrics = MetricsCalculator(count_partial_word=self._config.count_partial_word)
        self._generation = 0
        self._result: Optional[SessionResult] = None
        self._state = self._new_state(self._config.default_duration)

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def duration(self) -> int:
        return self._state.duration

    @property
    def result(self) -> Optional[SessionResult]:
        """Metrics frozen when the session finished, ``None`` until then."""
        return self._result

    def view(self) -> SessionView:
        s = self._state
        return SessionView(
            visible_words=tuple(w.text for w in s.visible_window),
            highlight_index=s.current_index - row_start(s.current_index, self._config.row_size),
            phase=s.phase,
            remaining_seconds=s.remaining_seconds,
            duration=s.duration,
            wpm=s.wpm,
            error_count=s.error_count,
            accuracy=s.accuracy,
            input_buffer=s.input_buffer,
            current_index=s.current_index,
            total_words=s.total_words,
            total_characters_typed=s.total_characters_typed,
            correct_characters=s.correct_characters,
        )

    # -- events -------------------------------------------------------------

    def type_text(self, buffer: str) -> bool:
        """Handle a change of the input buffer. Returns False if ignored."""
        state = self._state
        if state.phase is Phase.FINISHED:
            return False
        if state.phase is Phase.IDLE:
            self._begin()
            if state.is_exhausted():
                # Nothing to type: the session is complete as soon as it starts.
                self._finish("vocabulary empty")
                self._notify()
                return True

        self._matcher.apply(state, buffer)
        self._notify()
        return True

    def press_space(self) -> WordAdvance:
        """Handle the word-boundary key. The space itself is never inserted."""
        state = self._state
        if state.phase is not Phase.RUNNING:
            return WordAdvance()

        outcome = self._progression.advance(state)
        if outcome.scrolled and self._on_scroll is not None:
            self._on_scroll()
        if outcome.exhausted:
            self._finish("all words typed")
        if outcome.advanced:
            self._notify()
        return outcome

    def tick(self) -> bool:
        """Count down one second. Returns True if this tick ended the session."""
        state = self._state
        if state.phase is not Phase.RUNNING:
            return False
        state.remaining_seconds = max(0, state.remaining_seconds - 1)
        finished = state.remaining_seconds == 0
        if finished:
            self._finish("time up")
        self._notify()
        return finished

    def select_duration(self, seconds: int) -> bool:
        """Replace the session with a fresh one of *seconds* length.

        Rejected (returns False) while a session is running.
        """
        validate_duration(seconds)
        if self._state.phase is Phase.RUNNING:
            logger.info("Ignoring duration change to %ds while running", seconds)
            return False
        self._replace(seconds)
        return True

    def restart(self) -> None:
        """Start over with the current duration and a re-shuffled vocabulary."""
        self._replace(self._state.duration)

    # -- internals ----------------------------------------------------------

    def _new_state(self, duration: int) -> SessionState:
        words = shuffle_words(self._vocabulary, self._rng)
        return SessionState.fresh(words, duration, self._config.row_size)

    def _replace(self, duration: int) -> None:
        self._clock.stop()
        self._generation += 1
        self._result = None
        self._state = self._new_state(duration)
        logger.info("New %ds session with %d words", duration, self._state.total_words)
        self._notify()

    def _begin(self) -> None:
        self._state.phase = Phase.RUNNING
        self._clock.start(partial(self._on_clock_tick, self._generation))
        logger.info("Session started (%ds)", self._state.duration)

    def _on_clock_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.tick()

    def _finish(self, reason: str) -> None:
        self._clock.stop()
        self._state.phase = Phase.FINISHED
        self._result = self._metrics.freeze(self._state)
        logger.info(
            "Session finished (%s): %d WPM, %d%% accuracy, %d errors",
            reason,
            self._result.wpm,
            self._result.accuracy,
            self._result.errors,
        )

    def _notify(self) -> None:
        if self._on_update is not None:
            self._on_update(self.view())
