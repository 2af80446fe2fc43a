"""Tests for layout_lessons.lesson – text generation and derivation."""

from __future__ import annotations

import random

import pytest

from layout_lessons.lesson import Character, Lesson
from layout_lessons.weighting import EqualWeight, FocusKey


# ---------------------------------------------------------------------------
# Character
# ---------------------------------------------------------------------------

class TestCharacter:
    def test_default_weight(self):
        assert Character("a").weight == 1.0

    @pytest.mark.parametrize("value", ["", "ab", " ", "\t", "\x07"])
    def test_rejects_non_single_printable(self, value):
        with pytest.raises(ValueError):
            Character(value)

    def test_rejects_non_positive_weight(self):
        with pytest.raises(ValueError):
            Character("a", 0.0)


# ---------------------------------------------------------------------------
# Lesson construction
# ---------------------------------------------------------------------------

class TestLessonConstruction:
    def test_from_chars(self):
        lesson = Lesson.from_chars("Lesson 1", "ab", 10, 2)
        assert lesson.characters == (Character("a"), Character("b"))
        assert lesson.weighting_strategy == EqualWeight()
        assert lesson.chars == "ab"

    def test_word_length_must_be_positive(self):
        with pytest.raises(ValueError):
            Lesson.from_chars("x", "a", 10, 0)

    def test_lesson_length_must_not_be_negative(self):
        with pytest.raises(ValueError):
            Lesson.from_chars("x", "a", -1, 2)

    def test_duplicates_allowed(self):
        lesson = Lesson.from_chars("x", "aa", 10, 2)
        assert len(lesson.characters) == 2


class TestAddChars:
    def test_appends_keys_and_keeps_lengths(self):
        original = Lesson.from_chars("Lesson 1", "a", 10, 2)
        extended = original.add_chars("Lesson 2", "b")
        assert extended == Lesson.from_chars("Lesson 2", "ab", 10, 2)

    def test_parent_is_untouched(self):
        original = Lesson.from_chars("Lesson 1", "a", 10, 2)
        original.add_chars("Lesson 2", "bc", FocusKey.of("bc", 3.0))
        assert original == Lesson.from_chars("Lesson 1", "a", 10, 2)

    def test_new_strategy(self):
        extended = Lesson.from_chars("Lesson 1", "a", 10, 2).add_chars("Lesson 2", "b", FocusKey.of("b", 3.0))
        assert extended.weighting_strategy == FocusKey.of("b", 3.0)
        assert extended.weights() == [1.0, 3.0]


# ---------------------------------------------------------------------------
# Content generation
# ---------------------------------------------------------------------------

class TestGenerateLessonContent:
    @pytest.mark.parametrize("seed", range(20))
    def test_has_roughly_specified_length(self, seed):
        lesson = Lesson.from_chars("x", "asdf", 23, 4)
        content = lesson.generate_lesson_content(random.Random(seed))
        assert lesson.lesson_length <= len(content) <= lesson.lesson_length + lesson.word_length

    @pytest.mark.parametrize("seed", range(20))
    def test_does_not_start_or_end_with_whitespace(self, seed):
        lesson = Lesson.from_chars("x", "jkl;", 30, 3)
        content = lesson.generate_lesson_content(random.Random(seed))
        assert content == content.strip()

    def test_words_have_word_length(self):
        lesson = Lesson.from_chars("x", "asdf", 50, 5)
        words = lesson.generate_lesson_content(random.Random(1)).split(" ")
        assert all(len(word) == 5 for word in words)

    def test_only_lesson_characters(self):
        lesson = Lesson.from_chars("x", "iern", 200, 4)
        content = lesson.generate_lesson_content(random.Random(7))
        assert set(content) <= set("iern ")

    def test_single_character(self):
        lesson = Lesson.from_chars("x", "a", 10, 2)
        assert lesson.generate_lesson_content() == "aa aa aa aa"

    def test_zero_length_gives_one_word(self):
        lesson = Lesson.from_chars("x", "a", 0, 3)
        assert lesson.generate_lesson_content() == "aaa"

    def test_empty_character_set_fails(self):
        lesson = Lesson.from_chars("x", "", 10, 2)
        with pytest.raises(ValueError):
            lesson.generate_lesson_content()

    def test_same_seed_same_text(self):
        lesson = Lesson.from_chars("x", "asdfjkl", 40, 4)
        assert lesson.generate_lesson_content(random.Random(5)) == lesson.generate_lesson_content(random.Random(5))

    def test_focus_key_dominates(self):
        lesson = Lesson.from_chars("x", "a", 1000, 10).add_chars("y", "b", FocusKey.of("b", 1000.0))
        letters = lesson.generate_lesson_content(random.Random(3)).replace(" ", "")
        assert letters.count("b") / len(letters) > 0.9

    def test_character_weight_counts(self):
        lesson = Lesson("x", (Character("a"), Character("b", 1000.0)), EqualWeight(), 1000, 10)
        letters = lesson.generate_lesson_content(random.Random(3)).replace(" ", "")
        assert letters.count("b") / len(letters) > 0.9


class TestLessonDict:
    def test_round_trip(self):
        lesson = Lesson.from_chars("Lesson 2", "iernts", 40, 4, FocusKey.of("ts", 3.0))
        assert Lesson.from_dict(lesson.to_dict()) == lesson

    def test_missing_weight_defaults_to_one(self):
        data = Lesson.from_chars("x", "a", 10, 2).to_dict()
        data["characters"] = [{"value": "a"}]
        assert Lesson.from_dict(data).characters == (Character("a"),)

    def test_empty_characters_rejected(self):
        data = Lesson.from_chars("x", "a", 10, 2).to_dict()
        data["characters"] = []
        with pytest.raises(ValueError):
            Lesson.from_dict(data)
