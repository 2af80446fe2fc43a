"""Tests for layout_lessons.curriculum."""

from __future__ import annotations

from layout_lessons.curriculum import CURRICULA, bone_home_row, build_chain, qwerty_home_row
from layout_lessons.weighting import EqualWeight, FocusKey


class TestBoneHomeRow:
    def test_lesson_progression(self):
        lessons = bone_home_row()
        assert [lesson.name for lesson in lessons] == [f"Lesson {n}" for n in range(1, 6)]
        assert [lesson.chars for lesson in lessons] == ["iern", "iernts", "ierntscg", "ierntscgob", "ierntscgobq"]

    def test_new_keys_are_focused(self):
        lessons = bone_home_row(focus_multiplier=2.0)
        assert lessons[0].weighting_strategy == EqualWeight()
        assert lessons[1].weighting_strategy == FocusKey.of("ts", 2.0)
        assert lessons[4].weighting_strategy == FocusKey.of("q", 2.0)

    def test_lengths_carry_through(self):
        lessons = bone_home_row(lesson_length=8, word_length=4)
        assert all(lesson.lesson_length == 8 and lesson.word_length == 4 for lesson in lessons)


class TestBuildChain:
    def test_multiplier_one_means_equal_weight(self):
        lessons = build_chain(["ab", "c"], 10, 2, 1.0)
        assert all(lesson.weighting_strategy == EqualWeight() for lesson in lessons)

    def test_empty(self):
        assert build_chain([], 10, 2, 3.0) == []


class TestRegistry:
    def test_names(self):
        assert set(CURRICULA) == {"bone", "qwerty"}

    def test_qwerty_starts_on_index_fingers(self):
        assert qwerty_home_row()[0].chars == "fjdk"
