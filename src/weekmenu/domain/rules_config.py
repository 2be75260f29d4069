"""Declarative rule configuration for the menu domain."""

from __future__ import annotations

from dataclasses import dataclass, field

from .seed_data import SOFT_CARD_COLORS


@dataclass(frozen=True, slots=True)
class WeekRules:
    """Bounds on the number of day containers."""

    default_day_count: int = 5
    min_day_count: int = 1
    max_day_count: int = 7


@dataclass(frozen=True, slots=True)
class GeneratorRules:
    """Inputs for bulk menu generation."""

    palette: tuple[str, ...] = SOFT_CARD_COLORS


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Aggregate configuration consumed by the rule functions."""

    week: WeekRules = field(default_factory=WeekRules)
    generator: GeneratorRules = field(default_factory=GeneratorRules)


DEFAULT_RULES = RulesConfig()
