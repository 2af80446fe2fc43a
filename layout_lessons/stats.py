"""Typing speed and per-session statistics."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Union

CHARS_PER_WORD = 5


@dataclass(frozen=True)
class CharactersPerMinute:
    value: int

    def characters_per_minute(self) -> int:
        return self.value

    def words_per_minute(self) -> int:
        return self.value // CHARS_PER_WORD


@dataclass(frozen=True)
class WordsPerMinute:
    value: int

    def characters_per_minute(self) -> int:
        return self.value * CHARS_PER_WORD

    def words_per_minute(self) -> int:
        return self.value


TypingSpeed = Union[CharactersPerMinute, WordsPerMinute]


def speed_to_dict(speed: TypingSpeed) -> Dict[str, object]:
    unit = "cpm" if isinstance(speed, CharactersPerMinute) else "wpm"
    return {"unit": unit, "value": speed.value}


def speed_from_dict(data: Dict[str, object]) -> TypingSpeed:
    unit = data["unit"]
    value = int(data["value"])  # type: ignore[arg-type]
    if unit == "cpm":
        return CharactersPerMinute(value)
    if unit == "wpm":
        return WordsPerMinute(value)
    raise ValueError(f"unknown typing speed unit: {unit!r}")


@dataclass(frozen=True)
class TrainingStatistics:
    errors: int
    typing_speed: TypingSpeed


@dataclass(frozen=True)
class TrainingRecord:
    timestamp: datetime
    stats: TrainingStatistics

    def to_dict(self) -> Dict[str, object]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "stats": {
                "errors": self.stats.errors,
                "typing_speed": speed_to_dict(self.stats.typing_speed),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "TrainingRecord":
        stats = data["stats"]
        return cls(
            timestamp=datetime.fromisoformat(str(data["timestamp"])),
            stats=TrainingStatistics(
                errors=int(stats["errors"]),  # type: ignore[index]
                typing_speed=speed_from_dict(stats["typing_speed"]),  # type: ignore[index]
            ),
        )
