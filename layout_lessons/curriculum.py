"""Built-in lesson chains.

Each chain starts from a few home-row keys and adds keys lesson by lesson.
Every extension focuses the keys it introduces.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .lesson import Lesson
from .weighting import EqualWeight, FocusKey

BONE_HOME_ROW = ("iern", "ts", "cg", "ob", "q")
QWERTY_HOME_ROW = ("fjdk", "sl", "a;", "gh", "ei", "ru")


def build_chain(
    steps: Sequence[str],
    lesson_length: int,
    word_length: int,
    focus_multiplier: float,
) -> List[Lesson]:
    if not steps:
        return []
    lessons = [Lesson.from_chars("Lesson 1", steps[0], lesson_length, word_length, EqualWeight())]
    for number, added in enumerate(steps[1:], start=2):
        strategy = FocusKey.of(added, focus_multiplier) if focus_multiplier != 1.0 else EqualWeight()
        lessons.append(lessons[-1].add_chars(f"Lesson {number}", added, strategy))
    return lessons


def bone_home_row(lesson_length: int = 40, word_length: int = 4, focus_multiplier: float = 3.0) -> List[Lesson]:
    return build_chain(BONE_HOME_ROW, lesson_length, word_length, focus_multiplier)


def qwerty_home_row(lesson_length: int = 40, word_length: int = 4, focus_multiplier: float = 3.0) -> List[Lesson]:
    return build_chain(QWERTY_HOME_ROW, lesson_length, word_length, focus_multiplier)


CURRICULA: Dict[str, Callable[..., List[Lesson]]] = {
    "bone": bone_home_row,
    "qwerty": qwerty_home_row,
}
