"""Ordered lessons with a selection cursor and per-lesson history."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .lesson import Lesson
from .stats import TrainingRecord

SNAPSHOT_VERSION = 1


class NoLessonSelectedError(RuntimeError):
    pass


class SelectableLessonList:
    def __init__(
        self,
        lessons: Sequence[Lesson],
        selected_index: Optional[int] = None,
        history: Optional[Dict[int, List[TrainingRecord]]] = None,
    ) -> None:
        self._lessons: Tuple[Lesson, ...] = tuple(lessons)
        if selected_index is not None and not 0 <= selected_index < len(self._lessons):
            raise ValueError(f"selected index {selected_index} out of range for {len(self._lessons)} lessons")
        self._selected_index = selected_index
        self._history: Dict[int, List[TrainingRecord]] = {k: list(v) for k, v in (history or {}).items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectableLessonList):
            return NotImplemented
        return (
            self._lessons == other._lessons
            and self._selected_index == other._selected_index
            and self._history == other._history
        )

    def __repr__(self) -> str:
        return f"SelectableLessonList(lessons={len(self._lessons)}, selected_index={self._selected_index})"

    @property
    def lessons(self) -> Tuple[Lesson, ...]:
        return self._lessons

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def history(self) -> Dict[int, List[TrainingRecord]]:
        return {k: list(v) for k, v in self._history.items()}

    def select_next_lesson(self) -> None:
        if self._selected_index is None:
            if self._lessons:
                self._selected_index = 0
        elif self._selected_index + 1 < len(self._lessons):
            self._selected_index += 1

    def select_prev_lesson(self) -> None:
        # from nothing selected, "up" lands on the last lesson
        if self._selected_index is None:
            if self._lessons:
                self._selected_index = len(self._lessons) - 1
        elif self._selected_index > 0:
            self._selected_index -= 1

    def current_lesson(self) -> Optional[Lesson]:
        if self._selected_index is None:
            return None
        return self._lessons[self._selected_index]

    def records(self, index: int) -> List[TrainingRecord]:
        return list(self._history.get(index, []))

    def current_lesson_records(self) -> List[TrainingRecord]:
        if self._selected_index is None:
            return []
        return self.records(self._selected_index)

    def add_record_to_current_session(self, record: TrainingRecord) -> None:
        if self._selected_index is None:
            raise NoLessonSelectedError("cannot record a session with no lesson selected")
        self._history.setdefault(self._selected_index, []).append(record)

    def to_dict(self) -> Dict[str, object]:
        return {
            "version": SNAPSHOT_VERSION,
            "lessons": [lesson.to_dict() for lesson in self._lessons],
            "selected_index": self._selected_index,
            "history": {
                str(index): [record.to_dict() for record in records]
                for index, records in sorted(self._history.items())
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "SelectableLessonList":
        version = data.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version {version!r}")
        raw_lessons = data["lessons"]
        raw_history = data.get("history") or {}
        if not isinstance(raw_lessons, list) or not isinstance(raw_history, dict):
            raise ValueError("snapshot 'lessons' must be a list and 'history' a mapping")
        lessons = [Lesson.from_dict(item) for item in raw_lessons]
        history: Dict[int, List[TrainingRecord]] = {}
        for key, records in raw_history.items():
            index = int(key)
            if not 0 <= index < len(lessons):
                raise ValueError(f"history refers to unknown lesson index {index}")
            history[index] = [TrainingRecord.from_dict(item) for item in records]
        selected = data.get("selected_index")
        return cls(lessons, None if selected is None else int(selected), history)  # type: ignore[arg-type]
