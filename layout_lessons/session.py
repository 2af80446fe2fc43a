"""Keystroke-by-keystroke progress through one generated lesson text.

A session is NotStarted until the first keystroke, which stamps the start
time. A wrong keystroke counts an error and leaves the cursor where it is;
the character has to be retried. The correct keystroke that consumes the
last character stamps the end time and finishes the session.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from datetime import datetime, timedelta
from typing import Deque, List, NamedTuple, Optional

from .clock import Clock, SystemClock
from .stats import CharactersPerMinute, TrainingRecord, TrainingStatistics, TypingSpeed

logger = logging.getLogger(__name__)

MIN_MEASURED_DURATION = timedelta(seconds=1)


class SessionFinishedError(RuntimeError):
    """Raised when a key is fed to a session that has already finished."""


class InputResult(enum.Enum):
    NONE = "none"
    WRONG = "wrong"
    CORRECT = "correct"


class SessionDiff(NamedTuple):
    typed: str
    current: str
    remaining: str
    last_result: InputResult


class TrainingSession:
    def __init__(self, lesson_content: str, clock: Optional[Clock] = None) -> None:
        self.lesson_content = lesson_content
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._finished_chars: List[str] = []
        self._remaining_chars: Deque[str] = deque(lesson_content)
        self._current_char: Optional[str] = self._remaining_chars.popleft() if self._remaining_chars else None
        self._last_input_result = InputResult.NONE
        self._start_time: Optional[datetime] = None
        self._end_time: Optional[datetime] = None
        self._errors = 0

    @property
    def start_time(self) -> Optional[datetime]:
        return self._start_time

    @property
    def end_time(self) -> Optional[datetime]:
        return self._end_time

    @property
    def current_char(self) -> Optional[str]:
        return self._current_char

    @property
    def last_input_result(self) -> InputResult:
        return self._last_input_result

    def is_started(self) -> bool:
        return self._start_time is not None

    def is_finished(self) -> bool:
        return self._current_char is None

    def handle_key(self, key: str) -> InputResult:
        if self._current_char is None:
            raise SessionFinishedError("session is already finished")
        if self._start_time is None:
            self._start_time = self._clock.now()

        if key == self._current_char:
            self._finished_chars.append(key)
            self._current_char = self._remaining_chars.popleft() if self._remaining_chars else None
            self._last_input_result = InputResult.CORRECT
        else:
            self._errors += 1
            self._last_input_result = InputResult.WRONG

        if self._current_char is None:
            self._end_time = self._clock.now()
            logger.debug("session finished after %d errors", self._errors)
        return self._last_input_result

    def progress(self) -> float:
        """Fraction of the text typed correctly, in [0, 1]."""
        if not self.lesson_content:
            return 1.0
        return len(self._finished_chars) / len(self.lesson_content)

    def elapsed(self) -> timedelta:
        if self._start_time is None:
            return timedelta(0)
        end = self._end_time if self._end_time is not None else self._clock.now()
        return end - self._start_time

    def typing_speed(self) -> TypingSpeed:
        if self._start_time is None:
            return CharactersPerMinute(0)
        duration = self.elapsed()
        if duration < MIN_MEASURED_DURATION:
            return CharactersPerMinute(0)
        # whole seconds only, a partial second does not count
        seconds = int(duration.total_seconds())
        return CharactersPerMinute(60 * len(self._finished_chars) // seconds)

    def errors(self) -> int:
        return self._errors

    def stats(self) -> TrainingStatistics:
        return TrainingStatistics(errors=self._errors, typing_speed=self.typing_speed())

    def training_record(self) -> TrainingRecord:
        timestamp = self._start_time if self._start_time is not None else self._clock.now()
        return TrainingRecord(timestamp=timestamp, stats=self.stats())

    def diff(self) -> SessionDiff:
        return SessionDiff(
            typed="".join(self._finished_chars),
            current=self._current_char or "",
            remaining="".join(self._remaining_chars),
            last_result=self._last_input_result,
        )
