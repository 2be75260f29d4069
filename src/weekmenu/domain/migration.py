"""Reconcile any persisted blob with the current state schema.

The record handed over by the persistence layer may come from any earlier
release of the planner, may be partially written, or may not be a mapping at
all.  :func:`migrate` never raises: every top-level field has its own
reconciler in :data:`RECONCILERS` that understands the legacy shapes of that
field and falls back to the built-in defaults when nothing usable is found.
Unknown keys are dropped.

Running :func:`migrate` on the serialized form of its own output yields an
equal state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from .enums import BackgroundType, IngredientType
from .models import (
    BackgroundSettings,
    DayMenu,
    Dish,
    Ingredient,
    MenuEntry,
    MenuState,
    Tag,
    clean_color,
    from_epoch_ms,
    to_epoch_ms,
    unique,
)
from .rules_config import DEFAULT_RULES, RulesConfig
from .seed_data import (
    DEFAULT_BACKGROUND,
    DEFAULT_DISHES,
    DEFAULT_INGREDIENTS,
    DEFAULT_TAG_COLORS,
    DEFAULT_TAGS,
    FALLBACK_TAG_COLOR,
    INITIAL_WEEKLY_MENU,
    day_label,
    ingredient_colors,
)

_TOP_LEVEL_KEYS = frozenset(
    {"dishes", "weeklyMenu", "ingredients", "tags", "backgroundSettings", "backgroundColor"}
)

Reconciler = Callable[[Mapping[str, Any], RulesConfig], Any]


# --- Primitive coercions --------------------------------------------------------


def _name(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _text(value: object, default: str) -> str:
    return value if isinstance(value, str) else default


_color = clean_color


def _names(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    return unique(name for name in map(_name, value) if name is not None)


def _timestamp(value: object) -> datetime | None:
    """Parse epoch milliseconds or an ISO-8601 string into an aware UTC time."""

    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return from_epoch_ms(int(value))
        if isinstance(value, str):
            parsed = datetime.fromisoformat(value.strip())
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=UTC)
            return from_epoch_ms(to_epoch_ms(parsed))
    except (ValueError, OverflowError, OSError):
        return None
    return None


def _dedupe_by_name(items: list[Any]) -> tuple[Any, ...]:
    seen: set[str] = set()
    result: list[Any] = []
    for item in items:
        if item.name in seen:
            continue
        seen.add(item.name)
        result.append(item)
    return tuple(result)


# --- Per-field reconcilers ------------------------------------------------------


def reconcile_tags(data: Mapping[str, Any], rules: RulesConfig) -> tuple[Tag, ...]:
    """Plain tag names are wrapped with their default (or fallback) color."""

    raw = data.get("tags")
    if not isinstance(raw, (list, tuple)):
        return DEFAULT_TAGS

    tags: list[Tag] = []
    for item in raw:
        if isinstance(item, Mapping):
            name = _name(item.get("name"))
            color = item.get("color")
        else:
            name, color = _name(item), None
        if name is None:
            continue
        default = DEFAULT_TAG_COLORS.get(name, FALLBACK_TAG_COLOR)
        tags.append(Tag(name=name, color=_color(color, default)))
    return _dedupe_by_name(tags)


def _ingredient_type(value: object) -> IngredientType:
    try:
        return IngredientType(value)
    except (ValueError, TypeError):
        return IngredientType.MAIN


def reconcile_ingredients(data: Mapping[str, Any], rules: RulesConfig) -> tuple[Ingredient, ...]:
    """Expand legacy color names into explicit background/text colors."""

    raw = data.get("ingredients")
    if not isinstance(raw, (list, tuple)):
        return DEFAULT_INGREDIENTS

    ingredients: list[Ingredient] = []
    for item in raw:
        if not isinstance(item, Mapping):
            item = {"name": item}
        name = _name(item.get("name"))
        if name is None:
            continue
        legacy = item.get("color")
        bg, text = ingredient_colors(legacy if isinstance(legacy, str) else "default")
        ingredients.append(
            Ingredient(
                name=name,
                bg_color=_color(item.get("bgColor"), bg),
                text_color=_color(item.get("textColor"), text),
                type=_ingredient_type(item.get("type")),
            )
        )
    return _dedupe_by_name(ingredients)


def _dish(item: Mapping[str, Any]) -> Dish | None:
    name = _name(item.get("name"))
    if name is None:
        return None
    if "mainIngredients" in item:
        main = _names(item.get("mainIngredients"))
    else:
        main = _names(item.get("ingredients"))
    return Dish(
        name=name,
        tags=_names(item.get("tags")),
        main_ingredients=main,
        sub_ingredients=_names(item.get("subIngredients")),
        steps=_text(item.get("steps"), ""),
        last_used_at=_timestamp(item.get("lastUsedAt")),
    )


def _dishes_by_category(raw: Mapping[Any, Any]) -> tuple[Dish, ...]:
    """Oldest format: ``{category: [dish name, ...]}``."""

    dishes: dict[str, Dish] = {}
    for category, names in raw.items():
        tag = _name(category)
        for name in _names(names):
            existing = dishes.get(name) or Dish(name=name)
            tags = unique((*existing.tags, tag)) if tag else existing.tags
            dishes[name] = Dish(name=name, tags=tags)
    return tuple(dishes.values())


def reconcile_dishes(data: Mapping[str, Any], rules: RulesConfig) -> tuple[Dish, ...]:
    """Accept dish lists, bare names, and the category mapping format."""

    raw = data.get("dishes")
    if isinstance(raw, Mapping):
        return _dishes_by_category(raw)
    if not isinstance(raw, (list, tuple)):
        return DEFAULT_DISHES

    dishes: list[Dish] = []
    for item in raw:
        dish = _dish(item if isinstance(item, Mapping) else {"name": item})
        if dish is not None:
            dishes.append(dish)
    return _dedupe_by_name(dishes)


def _entry(item: object, fallback_id: str) -> MenuEntry | None:
    if isinstance(item, str):
        item = {"dishName": item}
    if not isinstance(item, Mapping):
        return None
    return MenuEntry(
        id=_name(item.get("id")) or fallback_id,
        dish_name=_name(item.get("dishName")) or "",
        tags=_names(item.get("tags")),
    )


def _entries(
    item: Mapping[str, Any], index: int, template: DayMenu | None
) -> tuple[MenuEntry, ...]:
    raw = item.get("entries")
    if isinstance(raw, (list, tuple)):
        entries = (_entry(value, f"entry-{index}-{pos}") for pos, value in enumerate(raw))
        return tuple(entry for entry in entries if entry is not None)

    legacy = item.get("items")
    if isinstance(legacy, Mapping):
        # ``{category: dish name}`` slots from before entries had ids
        result: list[MenuEntry] = []
        for category, dish_name in legacy.items():
            tag = _name(category)
            if tag is None:
                continue
            result.append(
                MenuEntry(
                    id=f"entry-{index}-{len(result)}",
                    dish_name=_name(dish_name) or "",
                    tags=(tag,),
                )
            )
        return tuple(result)

    return template.entries if template is not None else ()


def _template_day(index: int) -> DayMenu | None:
    if index < len(INITIAL_WEEKLY_MENU):
        return INITIAL_WEEKLY_MENU[index]
    return None


def _day(item: object, index: int, rules: RulesConfig) -> DayMenu:
    template = _template_day(index)
    palette = rules.generator.palette
    if template is not None:
        default_color = template.color
    else:
        default_color = palette[index % len(palette)] if palette else "#FFFFFF"
    if not isinstance(item, Mapping):
        if template is not None:
            return template
        return DayMenu(day=day_label(index), color=default_color)

    locked = item.get("locked")
    note = item.get("note")
    return DayMenu(
        day=_name(item.get("day")) or (template.day if template else day_label(index)),
        color=_color(item.get("color"), default_color),
        locked=locked if isinstance(locked, bool) else False,
        note=(note.strip() or None) if isinstance(note, str) else None,
        entries=_entries(item, index, template),
    )


def reconcile_weekly_menu(data: Mapping[str, Any], rules: RulesConfig) -> tuple[DayMenu, ...]:
    """Fill missing day fields from the template day at the same position."""

    raw = data.get("weeklyMenu")
    if not isinstance(raw, (list, tuple)) or not raw:
        return INITIAL_WEEKLY_MENU
    days = raw[: rules.week.max_day_count]
    return tuple(_day(item, index, rules) for index, item in enumerate(days))


def reconcile_background(data: Mapping[str, Any], rules: RulesConfig) -> BackgroundSettings:
    """Structured settings win; a legacy flat color becomes a dotted background."""

    raw = data.get("backgroundSettings")
    if isinstance(raw, Mapping):
        try:
            kind = BackgroundType(raw.get("type"))
        except (ValueError, TypeError):
            kind = None
        if kind is not None:
            color = _text(raw.get("color"), DEFAULT_BACKGROUND.color)
            return BackgroundSettings(type=kind, color=color)

    legacy = data.get("backgroundColor")
    if isinstance(legacy, str):
        return BackgroundSettings(type=BackgroundType.DOTS, color=legacy)
    return DEFAULT_BACKGROUND


RECONCILERS: tuple[tuple[str, Reconciler], ...] = (
    ("tags", reconcile_tags),
    ("ingredients", reconcile_ingredients),
    ("dishes", reconcile_dishes),
    ("weekly_menu", reconcile_weekly_menu),
    ("background", reconcile_background),
)


# --- Whole-record passes --------------------------------------------------------


def _unwrap(raw: object) -> Mapping[str, Any]:
    """Return the record mapping, peeling off a ``{"state": ..., "version": n}`` envelope."""

    if not isinstance(raw, Mapping):
        return {}
    inner = raw.get("state")
    if isinstance(inner, Mapping) and not _TOP_LEVEL_KEYS.intersection(raw):
        return inner
    return raw


def _ensure_unique_entry_ids(weekly_menu: tuple[DayMenu, ...]) -> tuple[DayMenu, ...]:
    """Rename repeated entry ids deterministically (``id-1``, ``id-2`` ...)."""

    all_ids = {entry.id for day in weekly_menu for entry in day.entries}
    seen: set[str] = set()
    days: list[DayMenu] = []
    changed = False
    for day in weekly_menu:
        entries: list[MenuEntry] = []
        for entry in day.entries:
            if entry.id in seen:
                suffix = 1
                while f"{entry.id}-{suffix}" in all_ids:
                    suffix += 1
                new_id = f"{entry.id}-{suffix}"
                all_ids.add(new_id)
                entry = replace(entry, id=new_id)
                changed = True
            seen.add(entry.id)
            entries.append(entry)
        days.append(replace(day, entries=tuple(entries)))
    return tuple(days) if changed else weekly_menu


def migrate(raw: object, *, rules: RulesConfig = DEFAULT_RULES) -> MenuState:
    """Build a current-schema :class:`MenuState` from any persisted blob."""

    if isinstance(raw, MenuState):
        return raw
    data = _unwrap(raw)
    fields = {field: reconcile(data, rules) for field, reconcile in RECONCILERS}
    fields["weekly_menu"] = _ensure_unique_entry_ids(fields["weekly_menu"])
    return MenuState(**fields)
