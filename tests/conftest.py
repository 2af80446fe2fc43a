from __future__ import annotations

from datetime import datetime, timezone

import pytest

from layout_lessons.clock import FakeClock
from layout_lessons.lesson import Lesson

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(T0)


@pytest.fixture()
def two_lessons() -> list:
    first = Lesson.from_chars("Lesson 1", "1", 10, 4)
    return [first, first.add_chars("Lesson 2", "2")]
