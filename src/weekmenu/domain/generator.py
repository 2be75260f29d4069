"""Randomised menu generation and single-slot re-rolls."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime
from uuid import uuid4

from weekmenu.utils.rng import cycle_take, shuffled

from .models import (
    DayMenu,
    Dish,
    MenuEntry,
    MenuState,
    entry_position,
    map_items,
    replace_day,
    utc_now,
)
from .rules_config import DEFAULT_RULES, RulesConfig


def new_entry_id() -> str:
    return str(uuid4())


def filter_dishes_by_tags(dishes: Iterable[Dish], tags: Iterable[str]) -> list[Dish]:
    """Dishes carrying every tag of the template (an empty template matches all)."""

    required = [tag for tag in tags if tag]
    return [dish for dish in dishes if all(tag in dish.tags for tag in required)]


def _assign(entry: MenuEntry, dish_name: str) -> MenuEntry:
    return entry if entry.dish_name == dish_name else replace(entry, dish_name=dish_name)


def generate_new_menu(
    state: MenuState,
    *,
    rng: random.Random,
    rules: RulesConfig = DEFAULT_RULES,
) -> MenuState:
    """Re-roll every unlocked day.

    Unlocked days get a fresh color drawn without repetition from the shuffled
    palette (wrapping when there are more days than colors) and each entry is
    filled with a random dish matching its tag template.  Entries whose
    template matches nothing keep their current dish.  Locked days are
    returned as the very same objects.
    """

    unlocked = [index for index, day in enumerate(state.weekly_menu) if not day.locked]
    if not unlocked:
        return state

    palette = rules.generator.palette
    colors = cycle_take(shuffled(rng, palette), len(unlocked)) if palette else []
    color_for = dict(zip(unlocked, colors, strict=False))

    def _roll(entry: MenuEntry) -> MenuEntry:
        candidates = filter_dishes_by_tags(state.dishes, entry.tags)
        if not candidates:
            return entry
        return _assign(entry, rng.choice(candidates).name)

    days: list[DayMenu] = []
    for index, day in enumerate(state.weekly_menu):
        if day.locked:
            days.append(day)
            continue
        entries = map_items(day.entries, _roll)
        color = color_for.get(index, day.color)
        if entries is day.entries and color == day.color:
            days.append(day)
        else:
            days.append(replace(day, entries=entries, color=color))

    weekly_menu = tuple(days)
    if all(new is old for new, old in zip(weekly_menu, state.weekly_menu, strict=True)):
        return state
    return replace(state, weekly_menu=weekly_menu)


def randomize_entry(
    state: MenuState,
    day_index: int,
    entry_id: str,
    *,
    rng: random.Random,
) -> MenuState:
    """Re-roll a single slot, preferring a different dish when possible."""

    day = state.day_at(day_index)
    if day is None:
        return state
    position = entry_position(day, entry_id)
    if position is None:
        return state

    entry = day.entries[position]
    candidates = filter_dishes_by_tags(state.dishes, entry.tags)
    if len(candidates) > 1:
        candidates = [dish for dish in candidates if dish.name != entry.dish_name]
    if not candidates:
        return state

    rolled = _assign(entry, rng.choice(candidates).name)
    if rolled is entry:
        return state
    entries = list(day.entries)
    entries[position] = rolled
    return replace_day(state, day_index, replace(day, entries=tuple(entries)))


def duplicate_entry(
    state: MenuState,
    day_index: int,
    entry_id: str,
    *,
    id_factory: Callable[[], str] = new_entry_id,
) -> MenuState:
    """Insert a copy of an entry (new id, same dish and tags) right after it."""

    day = state.day_at(day_index)
    if day is None:
        return state
    position = entry_position(day, entry_id)
    if position is None:
        return state

    new_id = id_factory()
    if new_id in state.entry_ids():
        return state

    source = day.entries[position]
    copy = MenuEntry(id=new_id, dish_name=source.dish_name, tags=source.tags)
    entries = (*day.entries[: position + 1], copy, *day.entries[position + 1 :])
    return replace_day(state, day_index, replace(day, entries=entries))


def mark_dish_used(
    state: MenuState,
    dish_name: str,
    *,
    now: datetime | None = None,
) -> MenuState:
    """Stamp ``last_used_at`` on a dish so pickers can sort by recency."""

    dish = state.find_dish(dish_name)
    if dish is None:
        return state
    stamped = replace(dish, last_used_at=now or utc_now())
    if stamped == dish:
        return state
    return replace(state, dishes=tuple(stamped if d is dish else d for d in state.dishes))
