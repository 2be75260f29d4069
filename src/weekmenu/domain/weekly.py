"""Editing the week: day containers, their entries and the page background."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from .enums import BackgroundType
from .generator import new_entry_id
from .models import (
    BackgroundSettings,
    DayMenu,
    MenuEntry,
    MenuState,
    clean_names,
    entry_position,
    replace_day,
)
from .rules_config import DEFAULT_RULES, RulesConfig
from .seed_data import day_label

_UNSET: object = object()


# --- Entries --------------------------------------------------------------------


def add_menu_entry(
    state: MenuState,
    day_index: int,
    tags: Iterable[str] = (),
    *,
    dish_name: str = "",
    id_factory: Callable[[], str] = new_entry_id,
) -> MenuState:
    """Append a new slot to a day."""

    day = state.day_at(day_index)
    if day is None:
        return state
    new_id = id_factory()
    if new_id in state.entry_ids():
        return state
    entry = MenuEntry(id=new_id, dish_name=dish_name.strip(), tags=clean_names(tags))
    return replace_day(state, day_index, replace(day, entries=(*day.entries, entry)))


def remove_menu_entry(state: MenuState, day_index: int, entry_id: str) -> MenuState:
    day = state.day_at(day_index)
    if day is None or entry_position(day, entry_id) is None:
        return state
    entries = tuple(entry for entry in day.entries if entry.id != entry_id)
    return replace_day(state, day_index, replace(day, entries=entries))


def update_entry(
    state: MenuState,
    day_index: int,
    entry_id: str,
    *,
    dish_name: str | None = None,
    tags: Iterable[str] | None = None,
) -> MenuState:
    """Point a slot at another dish and/or change its tag template."""

    day = state.day_at(day_index)
    if day is None:
        return state
    position = entry_position(day, entry_id)
    if position is None:
        return state

    entry = day.entries[position]
    updated = replace(
        entry,
        dish_name=entry.dish_name if dish_name is None else dish_name.strip(),
        tags=entry.tags if tags is None else clean_names(tags),
    )
    if updated == entry:
        return state
    entries = list(day.entries)
    entries[position] = updated
    return replace_day(state, day_index, replace(day, entries=tuple(entries)))


def update_entry_dish(
    state: MenuState, day_index: int, entry_id: str, dish_name: str
) -> MenuState:
    return update_entry(state, day_index, entry_id, dish_name=dish_name)


# --- Days -----------------------------------------------------------------------


def update_day(
    state: MenuState,
    day_index: int,
    *,
    day: str | None = None,
    color: str | None = None,
    locked: bool | None = None,
    note: str | None | object = _UNSET,
) -> MenuState:
    """Edit a day's label, color, lock or note.

    A blank label or color is ignored.  ``note=None`` clears the note, a
    blank note is stored as ``None``.
    """

    current = state.day_at(day_index)
    if current is None:
        return state

    new_note = current.note
    if note is not _UNSET:
        new_note = (note.strip() or None) if isinstance(note, str) else None

    updated = replace(
        current,
        day=day.strip() if day and day.strip() else current.day,
        color=color.strip() if color and color.strip() else current.color,
        locked=current.locked if locked is None else bool(locked),
        note=new_note,
    )
    if updated == current:
        return state
    return replace_day(state, day_index, updated)


def update_day_color(state: MenuState, day_index: int, color: str) -> MenuState:
    return update_day(state, day_index, color=color)


def toggle_day_lock(state: MenuState, day_index: int) -> MenuState:
    current = state.day_at(day_index)
    if current is None:
        return state
    return update_day(state, day_index, locked=not current.locked)


def add_day(
    state: MenuState,
    *,
    label: str | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> MenuState:
    """Append an empty day unless the week is already at its maximum length."""

    count = len(state.weekly_menu)
    if count >= rules.week.max_day_count:
        return state
    palette = rules.generator.palette
    color = palette[count % len(palette)] if palette else "#FFFFFF"
    new_day = DayMenu(day=(label or "").strip() or day_label(count), color=color)
    return replace(state, weekly_menu=(*state.weekly_menu, new_day))


def remove_day(
    state: MenuState,
    day_index: int,
    *,
    rules: RulesConfig = DEFAULT_RULES,
) -> MenuState:
    """Drop a day and its entries, keeping at least the minimum day count."""

    if state.day_at(day_index) is None or len(state.weekly_menu) <= rules.week.min_day_count:
        return state
    weekly_menu = state.weekly_menu[:day_index] + state.weekly_menu[day_index + 1 :]
    return replace(state, weekly_menu=weekly_menu)


# --- Background -----------------------------------------------------------------


def set_background(
    state: MenuState,
    type: BackgroundType | str | None = None,
    color: str | None = None,
) -> MenuState:
    """Change the background style and/or color; unknown styles are ignored."""

    current = state.background
    try:
        kind = current.type if type is None else BackgroundType(type)
    except (ValueError, TypeError):
        return state
    updated = BackgroundSettings(type=kind, color=current.color if color is None else color)
    if updated == current:
        return state
    return replace(state, background=updated)
