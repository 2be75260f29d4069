"""Enumerations used across the weekly-menu domain."""

from __future__ import annotations

from enum import StrEnum


class IngredientType(StrEnum):
    """Whether an ingredient is a main component or a seasoning/side."""

    MAIN = "main"
    SUB = "sub"


class BackgroundType(StrEnum):
    """Page background styles a client can render."""

    DOTS = "dots"
    GRID = "grid"
    SOLID = "solid"
    NONE = "none"
