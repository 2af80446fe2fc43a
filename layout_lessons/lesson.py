"""Lessons and the practice text generated from them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

from .weighting import EqualWeight, WeightingStrategy, key_weight, strategy_from_dict, strategy_to_dict


@dataclass(frozen=True)
class Character:
    value: str
    weight: float = 1.0

    def __post_init__(self) -> None:
        if len(self.value) != 1 or not self.value.isprintable() or self.value.isspace():
            raise ValueError(f"lesson characters must be single printable non-space characters, got {self.value!r}")
        if not self.weight > 0:
            raise ValueError(f"character weight must be positive, got {self.weight!r}")


@dataclass(frozen=True)
class Lesson:
    """A named character set plus the dimensions of the text to generate.

    ``lesson_length`` is the minimum number of characters (separators
    included) of the generated text; the last word is always completed, so
    the text may overshoot by up to ``word_length`` characters.
    """

    name: str
    characters: Tuple[Character, ...]
    weighting_strategy: WeightingStrategy = field(default_factory=EqualWeight)
    lesson_length: int = 40
    word_length: int = 4

    def __post_init__(self) -> None:
        object.__setattr__(self, "characters", tuple(self.characters))
        if self.lesson_length < 0:
            raise ValueError(f"lesson_length must not be negative, got {self.lesson_length}")
        if self.word_length < 1:
            raise ValueError(f"word_length must be at least 1, got {self.word_length}")

    @classmethod
    def from_chars(
        cls,
        name: str,
        chars: Iterable[str],
        lesson_length: int,
        word_length: int,
        weighting_strategy: Optional[WeightingStrategy] = None,
    ) -> "Lesson":
        return cls(
            name=name,
            characters=tuple(Character(c) for c in chars),
            weighting_strategy=weighting_strategy if weighting_strategy is not None else EqualWeight(),
            lesson_length=lesson_length,
            word_length=word_length,
        )

    def add_chars(
        self,
        name: str,
        chars: Iterable[str],
        weighting_strategy: Optional[WeightingStrategy] = None,
    ) -> "Lesson":
        """Return a new lesson with ``chars`` appended; this one is untouched."""
        return replace(
            self,
            name=name,
            characters=self.characters + tuple(Character(c) for c in chars),
            weighting_strategy=weighting_strategy if weighting_strategy is not None else EqualWeight(),
        )

    @property
    def chars(self) -> str:
        return "".join(c.value for c in self.characters)

    def weights(self) -> List[float]:
        return [c.weight * key_weight(self.weighting_strategy, c.value) for c in self.characters]

    def generate_word(self, rng: Optional[random.Random] = None) -> str:
        if not self.characters:
            raise ValueError(f"lesson {self.name!r} has no characters to generate text from")
        rng = rng or random.Random()
        # sampling with replacement: the same character may repeat any number of times
        picked = rng.choices(self.characters, weights=self.weights(), k=self.word_length)
        return "".join(c.value for c in picked)

    def generate_lesson_content(self, rng: Optional[random.Random] = None) -> str:
        rng = rng or random.Random()
        content = self.generate_word(rng)
        while len(content) < self.lesson_length:
            content = content + " " + self.generate_word(rng)
        return content

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "characters": [{"value": c.value, "weight": c.weight} for c in self.characters],
            "weighting_strategy": strategy_to_dict(self.weighting_strategy),
            "lesson_length": self.lesson_length,
            "word_length": self.word_length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Lesson":
        raw_chars = data["characters"]
        if not isinstance(raw_chars, list) or not raw_chars:
            raise ValueError("lesson 'characters' must be a non-empty list")
        return cls(
            name=str(data["name"]),
            characters=tuple(Character(str(c["value"]), float(c.get("weight", 1.0))) for c in raw_chars),
            weighting_strategy=strategy_from_dict(data["weighting_strategy"]),  # type: ignore[arg-type]
            lesson_length=int(data["lesson_length"]),  # type: ignore[arg-type]
            word_length=int(data["word_length"]),  # type: ignore[arg-type]
        )
