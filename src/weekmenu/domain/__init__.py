"""Domain layer of the weekly menu planner.

This package holds everything with real invariants.  It exposes:

* Frozen dataclasses describing the catalog and the week (see :mod:`models`).
* Built-in seed data and palettes (see :mod:`seed_data`).
* Rule configuration objects (see :mod:`rules_config`).
* Pure transition functions ``(state, args) -> state`` grouped by concern:
  :mod:`catalog` (create/rename/delete with cascades), :mod:`generator`
  (random assignment), :mod:`reorder` (moves and day swaps), :mod:`weekly`
  (day and entry editing) and :mod:`migration` (legacy record upgrades).

Nothing in here performs I/O; persistence goes through a thin repository
adapter and the :class:`weekmenu.store.MenuStore` owns the current state.
"""

from . import (
    catalog,
    enums,
    generator,
    migration,
    models,
    reorder,
    rules_config,
    seed_data,
    weekly,
)

__all__ = [
    "catalog",
    "enums",
    "generator",
    "migration",
    "models",
    "reorder",
    "rules_config",
    "seed_data",
    "weekly",
]
