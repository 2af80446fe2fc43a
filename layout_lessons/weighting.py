"""Sampling weights for lesson characters.

Two strategies exist: every character weighs the same, or a set of focused
characters is boosted by a multiplier. Strategies are plain values; the
weight of a character is looked up with :func:`key_weight`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Union


@dataclass(frozen=True)
class EqualWeight:
    pass


@dataclass(frozen=True)
class FocusKey:
    focused: FrozenSet[str]
    multiplier: float

    def __post_init__(self) -> None:
        # accept any iterable of characters, store a frozenset
        object.__setattr__(self, "focused", frozenset(self.focused))
        if not self.multiplier > 0:
            raise ValueError(f"focus multiplier must be positive, got {self.multiplier!r}")

    @classmethod
    def of(cls, chars: Iterable[str], multiplier: float) -> "FocusKey":
        return cls(frozenset(chars), float(multiplier))


WeightingStrategy = Union[EqualWeight, FocusKey]


def key_weight(strategy: WeightingStrategy, char: str) -> float:
    if isinstance(strategy, EqualWeight):
        return 1.0
    if isinstance(strategy, FocusKey):
        return strategy.multiplier if char in strategy.focused else 1.0
    raise TypeError(f"unknown weighting strategy: {strategy!r}")


def strategy_to_dict(strategy: WeightingStrategy) -> Dict[str, object]:
    if isinstance(strategy, EqualWeight):
        return {"kind": "equal_weight"}
    if isinstance(strategy, FocusKey):
        return {
            "kind": "focus_key",
            "focused": sorted(strategy.focused),
            "multiplier": strategy.multiplier,
        }
    raise TypeError(f"unknown weighting strategy: {strategy!r}")


def strategy_from_dict(data: Dict[str, object]) -> WeightingStrategy:
    kind = data["kind"]
    if kind == "equal_weight":
        return EqualWeight()
    if kind == "focus_key":
        focused = data["focused"]
        if not isinstance(focused, list):
            raise ValueError("focus_key 'focused' must be a list of characters")
        return FocusKey.of((str(c) for c in focused), float(data["multiplier"]))  # type: ignore[arg-type]
    raise ValueError(f"unknown weighting strategy kind: {kind!r}")
