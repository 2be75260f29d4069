"""Relocating entries between days and swapping day contents.

Two drag gestures map onto two distinct operations:

* dragging a whole day swaps the *contents* of two day slots
  (:func:`swap_day_contents`); the labels stay where they are because a day
  slot is a fixed position in the week;
* dragging a single entry moves it, possibly into another day
  (:func:`move_entry`).
"""

from __future__ import annotations

from dataclasses import replace

from .models import MenuState, entry_position, replace_day


def swap_day_contents(state: MenuState, first: int, second: int) -> MenuState:
    """Exchange entries, color, lock and note of two days; labels stay put."""

    a = state.day_at(first)
    b = state.day_at(second)
    if a is None or b is None or first == second:
        return state

    weekly_menu = list(state.weekly_menu)
    weekly_menu[first] = replace(a, entries=b.entries, color=b.color, locked=b.locked, note=b.note)
    weekly_menu[second] = replace(b, entries=a.entries, color=a.color, locked=a.locked, note=a.note)
    return replace(state, weekly_menu=tuple(weekly_menu))


def adjust_target_index(from_index: int, to_index: int, *, same_container: bool) -> int:
    """Translate an insertion point in the list *before* removal to one after it.

    Removing the dragged item shifts every later item down by one, so within
    the same container a gap after the source must be decremented to land in
    the slot the user pointed at.
    """

    if same_container and from_index < to_index:
        return to_index - 1
    return to_index


def move_entry(
    state: MenuState,
    from_day: int,
    to_day: int,
    entry_id: str,
    to_index: int,
) -> MenuState:
    """Move an entry to ``to_index`` of ``to_day``.

    ``to_index`` is the slot the entry was dropped on, counted in the target
    list as displayed before the move.  Dropping below the source within the
    same day lands after that slot, anywhere else lands before it, so
    ``[x, y, z]`` with ``x`` dropped on 2 becomes ``[y, z, x]``.  Indices
    past the end append; negative indices clamp to the front.  Unknown days or
    an entry missing from ``from_day`` leave the state untouched.
    """

    source = state.day_at(from_day)
    target = state.day_at(to_day)
    if source is None or target is None:
        return state
    position = entry_position(source, entry_id)
    if position is None:
        return state

    entry = source.entries[position]
    remaining = source.entries[:position] + source.entries[position + 1 :]
    same_day = from_day == to_day
    gap = to_index + 1 if same_day and position < to_index else to_index
    index = adjust_target_index(position, gap, same_container=same_day)
    destination = remaining if same_day else target.entries
    index = max(0, min(index, len(destination)))
    inserted = (*destination[:index], entry, *destination[index:])

    if same_day:
        if inserted == source.entries:
            return state
        return replace_day(state, from_day, replace(source, entries=inserted))

    weekly_menu = list(state.weekly_menu)
    weekly_menu[from_day] = replace(source, entries=remaining)
    weekly_menu[to_day] = replace(target, entries=inserted)
    return replace(state, weekly_menu=tuple(weekly_menu))
