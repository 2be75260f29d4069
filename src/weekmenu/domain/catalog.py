"""Create, rename and delete catalog entities with their cascades.

Each function takes the current :class:`MenuState` and returns the next one.
Invalid input (blank or duplicate name, unknown target, rename collision)
returns the very same state object, so callers can retry blindly and detect
a no-op with ``new is state``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime

from .enums import IngredientType
from .models import (
    DayMenu,
    Dish,
    Ingredient,
    MenuEntry,
    MenuState,
    Tag,
    clean_color,
    clean_names,
    drop_from,
    map_items,
    rename_in,
    utc_now,
)
from .seed_data import DEFAULT_TAG_COLORS, FALLBACK_TAG_COLOR, ingredient_colors


def _resolve_rename(current: str, requested: str | None, taken: Iterable[str]) -> str | None:
    """Return the name the entity should end up with, or ``None`` on collision."""

    trimmed = requested.strip() if requested is not None else ""
    if not trimmed or trimmed == current:
        return current
    if trimmed in taken:
        return None
    return trimmed


def _coerce_type(value: object) -> IngredientType | None:
    try:
        return IngredientType(value)
    except (ValueError, TypeError):
        return None


def _map_entries(state: MenuState, fn) -> tuple[DayMenu, ...]:
    def _day(day: DayMenu) -> DayMenu:
        entries = map_items(day.entries, fn)
        return day if entries is day.entries else replace(day, entries=entries)

    return map_items(state.weekly_menu, _day)


# --- Dishes ---------------------------------------------------------------------


def add_dish(
    state: MenuState,
    name: str,
    tags: Iterable[str] = (),
    *,
    main_ingredients: Iterable[str] = (),
    sub_ingredients: Iterable[str] = (),
    steps: str = "",
    now: datetime | None = None,
) -> MenuState:
    """Append a new dish unless the trimmed name is blank or already taken."""

    trimmed = name.strip()
    if not trimmed or state.find_dish(trimmed) is not None:
        return state
    dish = Dish(
        name=trimmed,
        tags=clean_names(tags),
        main_ingredients=clean_names(main_ingredients),
        sub_ingredients=clean_names(sub_ingredients),
        steps=steps,
        last_used_at=now or utc_now(),
    )
    return replace(state, dishes=(*state.dishes, dish))


def remove_dish(state: MenuState, name: str) -> MenuState:
    """Delete a dish; entries pointing at it become empty slots."""

    if state.find_dish(name) is None:
        return state

    def _clear(entry: MenuEntry) -> MenuEntry:
        return replace(entry, dish_name="") if entry.dish_name == name else entry

    return replace(
        state,
        dishes=tuple(dish for dish in state.dishes if dish.name != name),
        weekly_menu=_map_entries(state, _clear),
    )


def update_dish(
    state: MenuState,
    old_name: str,
    *,
    name: str | None = None,
    tags: Iterable[str] | None = None,
    main_ingredients: Iterable[str] | None = None,
    sub_ingredients: Iterable[str] | None = None,
    steps: str | None = None,
) -> MenuState:
    """Merge field changes into a dish and cascade a rename into the week."""

    dish = state.find_dish(old_name)
    if dish is None:
        return state
    new_name = _resolve_rename(old_name, name, (d.name for d in state.dishes))
    if new_name is None:
        return state

    updated = replace(
        dish,
        name=new_name,
        tags=dish.tags if tags is None else clean_names(tags),
        main_ingredients=(
            dish.main_ingredients if main_ingredients is None else clean_names(main_ingredients)
        ),
        sub_ingredients=(
            dish.sub_ingredients if sub_ingredients is None else clean_names(sub_ingredients)
        ),
        steps=dish.steps if steps is None else steps,
    )
    if updated == dish:
        return state

    dishes = tuple(updated if d is dish else d for d in state.dishes)
    weekly_menu = state.weekly_menu
    if new_name != old_name:

        def _rename(entry: MenuEntry) -> MenuEntry:
            if entry.dish_name == old_name:
                return replace(entry, dish_name=new_name)
            return entry

        weekly_menu = _map_entries(state, _rename)
    return replace(state, dishes=dishes, weekly_menu=weekly_menu)


# --- Tags -----------------------------------------------------------------------


def add_tag(state: MenuState, name: str, color: str | None = None) -> MenuState:
    """Append a tag.  Without a color, built-in tags keep their usual color."""

    trimmed = name.strip()
    if not trimmed or state.find_tag(trimmed) is not None:
        return state
    default = DEFAULT_TAG_COLORS.get(trimmed, FALLBACK_TAG_COLOR)
    tag = Tag(name=trimmed, color=clean_color(color, default))
    return replace(state, tags=(*state.tags, tag))


def remove_tag(state: MenuState, name: str) -> MenuState:
    """Delete a tag and strip it from every dish and entry template.

    The cascade also runs for names missing from the tag catalog, so stray
    tags left on dishes or entries can be purged.
    """

    def _dish(dish: Dish) -> Dish:
        tags = drop_from(dish.tags, name)
        return dish if tags is dish.tags else replace(dish, tags=tags)

    def _entry(entry: MenuEntry) -> MenuEntry:
        tags = drop_from(entry.tags, name)
        return entry if tags is entry.tags else replace(entry, tags=tags)

    tags = state.tags
    if state.find_tag(name) is not None:
        tags = tuple(tag for tag in state.tags if tag.name != name)
    dishes = map_items(state.dishes, _dish)
    weekly_menu = _map_entries(state, _entry)
    if tags is state.tags and dishes is state.dishes and weekly_menu is state.weekly_menu:
        return state
    return replace(state, tags=tags, dishes=dishes, weekly_menu=weekly_menu)


def update_tag(
    state: MenuState,
    old_name: str,
    *,
    name: str | None = None,
    color: str | None = None,
) -> MenuState:
    """Recolor and/or rename a tag, rewriting dishes and entry templates."""

    tag = state.find_tag(old_name)
    if tag is None:
        return state
    new_name = _resolve_rename(old_name, name, (t.name for t in state.tags))
    if new_name is None:
        return state

    updated = replace(tag, name=new_name, color=clean_color(color, tag.color))
    if updated == tag:
        return state

    tags = tuple(updated if t is tag else t for t in state.tags)
    if new_name == old_name:
        return replace(state, tags=tags)

    def _dish(dish: Dish) -> Dish:
        renamed = rename_in(dish.tags, old_name, new_name)
        return dish if renamed is dish.tags else replace(dish, tags=renamed)

    def _entry(entry: MenuEntry) -> MenuEntry:
        renamed = rename_in(entry.tags, old_name, new_name)
        return entry if renamed is entry.tags else replace(entry, tags=renamed)

    return replace(
        state,
        tags=tags,
        dishes=map_items(state.dishes, _dish),
        weekly_menu=_map_entries(state, _entry),
    )


# --- Ingredients ----------------------------------------------------------------


def add_ingredient(
    state: MenuState,
    name: str,
    *,
    bg_color: str | None = None,
    text_color: str | None = None,
    type: IngredientType = IngredientType.MAIN,
) -> MenuState:
    """Append an ingredient, defaulting to the neutral palette pair."""

    trimmed = name.strip()
    kind = _coerce_type(type)
    if not trimmed or kind is None or state.find_ingredient(trimmed) is not None:
        return state
    default_bg, default_text = ingredient_colors("default")
    ingredient = Ingredient(
        name=trimmed,
        bg_color=clean_color(bg_color, default_bg),
        text_color=clean_color(text_color, default_text),
        type=kind,
    )
    return replace(state, ingredients=(*state.ingredients, ingredient))


def remove_ingredient(state: MenuState, name: str) -> MenuState:
    """Delete an ingredient and strip it from every dish, catalogued or not."""

    def _dish(dish: Dish) -> Dish:
        main = drop_from(dish.main_ingredients, name)
        sub = drop_from(dish.sub_ingredients, name)
        if main is dish.main_ingredients and sub is dish.sub_ingredients:
            return dish
        return replace(dish, main_ingredients=main, sub_ingredients=sub)

    ingredients = state.ingredients
    if state.find_ingredient(name) is not None:
        ingredients = tuple(item for item in state.ingredients if item.name != name)
    dishes = map_items(state.dishes, _dish)
    if ingredients is state.ingredients and dishes is state.dishes:
        return state
    return replace(state, ingredients=ingredients, dishes=dishes)


def update_ingredient(
    state: MenuState,
    old_name: str,
    *,
    name: str | None = None,
    bg_color: str | None = None,
    text_color: str | None = None,
    type: IngredientType | None = None,
) -> MenuState:
    """Edit an ingredient; a rename is propagated into every dish."""

    ingredient = state.find_ingredient(old_name)
    kind = ingredient.type if ingredient is not None and type is None else _coerce_type(type)
    if ingredient is None or kind is None:
        return state
    new_name = _resolve_rename(old_name, name, (i.name for i in state.ingredients))
    if new_name is None:
        return state

    updated = replace(
        ingredient,
        name=new_name,
        bg_color=clean_color(bg_color, ingredient.bg_color),
        text_color=clean_color(text_color, ingredient.text_color),
        type=kind,
    )
    if updated == ingredient:
        return state

    ingredients = tuple(updated if i is ingredient else i for i in state.ingredients)
    if new_name == old_name:
        return replace(state, ingredients=ingredients)

    def _dish(dish: Dish) -> Dish:
        main = rename_in(dish.main_ingredients, old_name, new_name)
        sub = rename_in(dish.sub_ingredients, old_name, new_name)
        if main is dish.main_ingredients and sub is dish.sub_ingredients:
            return dish
        return replace(dish, main_ingredients=main, sub_ingredients=sub)

    return replace(state, ingredients=ingredients, dishes=map_items(state.dishes, _dish))
