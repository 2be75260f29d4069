"""Immutable dataclasses describing the weekly-menu domain.

Every entity is a frozen dataclass and every collection is a tuple.  Rule
functions never mutate a value in place; they build a new container for
whatever changed and reuse the untouched objects, so observers can detect
changes with an identity check (``new is not old``) instead of a deep
comparison.

References between entities are plain names.  A :class:`MenuEntry` points at
a dish by ``dish_name`` and a lookup miss (empty or unknown name) is a valid
"dangling" slot rather than an error.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta
from typing import TypeVar

from .enums import BackgroundType, IngredientType

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Tag:
    """User-defined dish category such as ``大荤``."""

    name: str
    color: str


@dataclass(frozen=True, slots=True)
class Ingredient:
    """Catalog ingredient with its display colors."""

    name: str
    bg_color: str
    text_color: str
    type: IngredientType = IngredientType.MAIN


@dataclass(frozen=True, slots=True)
class Dish:
    """Catalog dish.

    ``tags``, ``main_ingredients`` and ``sub_ingredients`` behave as sets but
    are stored as duplicate-free tuples so display order is preserved.
    """

    name: str
    tags: tuple[str, ...] = ()
    main_ingredients: tuple[str, ...] = ()
    sub_ingredients: tuple[str, ...] = ()
    steps: str = ""
    last_used_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class MenuEntry:
    """One slot of a day.  ``tags`` is the generator filter template."""

    id: str
    dish_name: str = ""
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DayMenu:
    """A day container.  ``day`` is a display label, not a key."""

    day: str
    color: str
    locked: bool = False
    note: str | None = None
    entries: tuple[MenuEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class BackgroundSettings:
    """Page background shown behind the week view."""

    type: BackgroundType = BackgroundType.DOTS
    color: str = "#67e8f9"


@dataclass(frozen=True, slots=True)
class MenuState:
    """Aggregate root owned by :class:`weekmenu.store.MenuStore`."""

    dishes: tuple[Dish, ...] = ()
    tags: tuple[Tag, ...] = ()
    ingredients: tuple[Ingredient, ...] = ()
    weekly_menu: tuple[DayMenu, ...] = ()
    background: BackgroundSettings = field(default_factory=BackgroundSettings)

    def find_dish(self, name: str) -> Dish | None:
        return next((dish for dish in self.dishes if dish.name == name), None)

    def find_tag(self, name: str) -> Tag | None:
        return next((tag for tag in self.tags if tag.name == name), None)

    def find_ingredient(self, name: str) -> Ingredient | None:
        return next((item for item in self.ingredients if item.name == name), None)

    def day_at(self, index: int) -> DayMenu | None:
        """Return the day at ``index`` or ``None`` when out of range."""

        if 0 <= index < len(self.weekly_menu):
            return self.weekly_menu[index]
        return None

    def entry_ids(self) -> list[str]:
        return [entry.id for day in self.weekly_menu for entry in day.entries]


# --- Helpers shared by the rule modules -----------------------------------------


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds (the persisted precision)."""

    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch, computed without float rounding."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - _EPOCH) // _MILLISECOND


def from_epoch_ms(value: int) -> datetime:
    return _EPOCH + value * _MILLISECOND


def unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates while keeping first-seen order."""

    return tuple(dict.fromkeys(values))


def clean_names(values: Iterable[str] | str) -> tuple[str, ...]:
    """Trimmed, non-blank, duplicate-free names; a bare string is one name."""

    if isinstance(values, str):
        values = (values,)
    return unique(value.strip() for value in values if isinstance(value, str) and value.strip())


def clean_color(value: object, default: str) -> str:
    """Trimmed color, or ``default`` when ``value`` is blank or not a string."""

    return value.strip() if isinstance(value, str) and value.strip() else default


def map_items(items: tuple[T, ...], fn: Callable[[T], T]) -> tuple[T, ...]:
    """Apply ``fn`` to each item, returning ``items`` itself if nothing changed.

    ``fn`` must return its argument unchanged (same object) when it has
    nothing to do.
    """

    changed = False
    result: list[T] = []
    for item in items:
        new = fn(item)
        changed = changed or new is not item
        result.append(new)
    return tuple(result) if changed else items


def rename_in(values: tuple[str, ...], old: str, new: str) -> tuple[str, ...]:
    """Replace ``old`` by ``new`` in a name tuple, keeping it duplicate-free."""

    if old not in values:
        return values
    return unique(new if value == old else value for value in values)


def drop_from(values: tuple[str, ...], name: str) -> tuple[str, ...]:
    if name not in values:
        return values
    return tuple(value for value in values if value != name)


def validate_state(state: MenuState, *, max_days: int | None = None) -> list[str]:
    """Return human readable descriptions of every broken invariant."""

    problems: list[str] = []
    for label, names in (
        ("dish", [dish.name for dish in state.dishes]),
        ("tag", [tag.name for tag in state.tags]),
        ("ingredient", [item.name for item in state.ingredients]),
    ):
        seen: set[str] = set()
        for name in names:
            if not name or name != name.strip():
                problems.append(f"{label} name not normalised: {name!r}")
            if name in seen:
                problems.append(f"duplicate {label} name: {name}")
            seen.add(name)

    seen_ids: set[str] = set()
    for entry_id in state.entry_ids():
        if entry_id in seen_ids:
            problems.append(f"duplicate entry id: {entry_id}")
        seen_ids.add(entry_id)

    if not state.weekly_menu:
        problems.append("weekly menu has no days")
    if max_days is not None and len(state.weekly_menu) > max_days:
        problems.append(f"weekly menu has {len(state.weekly_menu)} days (max {max_days})")
    return problems


def entry_position(day: DayMenu, entry_id: str) -> int | None:
    return next((pos for pos, entry in enumerate(day.entries) if entry.id == entry_id), None)


def replace_day(state: MenuState, index: int, day: DayMenu) -> MenuState:
    """Swap in a new object for one day, leaving every other day untouched."""

    if day is state.weekly_menu[index]:
        return state
    weekly_menu = list(state.weekly_menu)
    weekly_menu[index] = day
    return replace(state, weekly_menu=tuple(weekly_menu))
