"""Lesson selection / training / terminated state machine.

Input arrives one event per tick: a :class:`SpecialKey`, a single typed
character, or ``None`` when the input source had nothing to deliver.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Optional, Union

from .clock import Clock, SystemClock
from .lesson_list import SelectableLessonList
from .session import TrainingSession

logger = logging.getLogger(__name__)


class AppState(enum.Enum):
    LESSON_SELECTION = "lesson_selection"
    TRAINING = "training"
    TERMINATED = "terminated"


class SpecialKey(enum.Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"


InputEvent = Optional[Union[SpecialKey, str]]


class TrainerApp:
    def __init__(
        self,
        lesson_list: SelectableLessonList,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.lesson_list = lesson_list
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._rng = rng or random.Random()
        self._session: Optional[TrainingSession] = None
        self._state = AppState.LESSON_SELECTION

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def session(self) -> Optional[TrainingSession]:
        return self._session

    def tick(self, event: InputEvent = None) -> None:
        if event is None or self._state is AppState.TERMINATED:
            return
        if self._state is AppState.TRAINING:
            self._handle_training(event)
        else:
            self._handle_lesson_selection(event)

    def _handle_lesson_selection(self, event: Union[SpecialKey, str]) -> None:
        if event is SpecialKey.ESCAPE:
            self._set_state(AppState.TERMINATED)
        elif event is SpecialKey.DOWN:
            self.lesson_list.select_next_lesson()
        elif event is SpecialKey.UP:
            self.lesson_list.select_prev_lesson()
        elif event is SpecialKey.ENTER:
            self.start_session()

    def _handle_training(self, event: Union[SpecialKey, str]) -> None:
        if event is SpecialKey.ESCAPE:
            # abandoned sessions are not recorded
            self._session = None
            self._set_state(AppState.LESSON_SELECTION)
            return
        if not isinstance(event, str) or len(event) != 1 or not event.isprintable():
            return
        session = self._session
        if session is None:
            return
        session.handle_key(event)
        if session.is_finished():
            record = session.training_record()
            self.lesson_list.add_record_to_current_session(record)
            logger.info(
                "lesson %s finished: %d wpm, %d errors",
                self.lesson_list.selected_index,
                record.stats.typing_speed.words_per_minute(),
                record.stats.errors,
            )
            self.start_session()

    def start_session(self) -> None:
        lesson = self.lesson_list.current_lesson()
        if lesson is None:
            return
        self._session = TrainingSession(lesson.generate_lesson_content(self._rng), clock=self._clock)
        self._set_state(AppState.TRAINING)

    def _set_state(self, state: AppState) -> None:
        if state is not self._state:
            logger.debug("state %s -> %s", self._state.value, state.value)
        self._state = state
