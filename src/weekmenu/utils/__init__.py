"""Utility functions for the weekly menu planner."""

from weekmenu.utils.rng import cycle_take, make_rng, seed_to_int, shuffled

__all__ = [
    "cycle_take",
    "make_rng",
    "seed_to_int",
    "shuffled",
]
