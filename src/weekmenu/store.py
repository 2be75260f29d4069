"""The menu store: one immutable state value plus the operations on it."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from weekmenu.domain import catalog, generator, reorder, weekly
from weekmenu.domain.enums import BackgroundType, IngredientType
from weekmenu.domain.migration import migrate
from weekmenu.domain.models import MenuState
from weekmenu.domain.rules_config import DEFAULT_RULES, RulesConfig
from weekmenu.domain.seed_data import initial_state
from weekmenu.utils.rng import make_rng

logger = logging.getLogger(__name__)

Listener = Callable[[MenuState, MenuState], None]


class MenuStore:
    """Single-writer owner of the current :class:`MenuState`.

    Every operation delegates to a pure rule function.  When the rule returns
    the same object the operation was a no-op and nothing happens; otherwise
    the new state is installed and subscribers are called synchronously with
    ``(new_state, old_state)``.  Operations never raise on bad input.
    """

    def __init__(
        self,
        state: MenuState | None = None,
        *,
        rules: RulesConfig = DEFAULT_RULES,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] = generator.new_entry_id,
    ) -> None:
        self._state = state if state is not None else initial_state()
        self._rules = rules
        self._rng = rng or make_rng()
        self._id_factory = id_factory
        self._listeners: list[Listener] = []

    @classmethod
    def from_persisted(cls, raw: Any, **kwargs: Any) -> MenuStore:
        """Build a store from whatever the persistence layer returned."""

        rules = kwargs.get("rules", DEFAULT_RULES)
        return cls(migrate(raw, rules=rules), **kwargs)

    @property
    def state(self) -> MenuState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, operation: str, new_state: MenuState) -> bool:
        old_state = self._state
        if new_state is old_state:
            logger.debug("%s left the menu unchanged", operation)
            return False
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state, old_state)
        return True

    def replace_state(self, raw: Any) -> bool:
        """Swap in a migrated copy of an externally supplied record."""

        return self._commit("replace_state", migrate(raw, rules=self._rules))

    # --- Catalog ----------------------------------------------------------------

    def add_dish(
        self,
        name: str,
        tags: Iterable[str] = (),
        *,
        main_ingredients: Iterable[str] = (),
        sub_ingredients: Iterable[str] = (),
        steps: str = "",
    ) -> bool:
        return self._commit(
            "add_dish",
            catalog.add_dish(
                self._state,
                name,
                tags,
                main_ingredients=main_ingredients,
                sub_ingredients=sub_ingredients,
                steps=steps,
            ),
        )

    def remove_dish(self, name: str) -> bool:
        return self._commit("remove_dish", catalog.remove_dish(self._state, name))

    def update_dish(self, old_name: str, **updates: Any) -> bool:
        return self._commit("update_dish", catalog.update_dish(self._state, old_name, **updates))

    def add_tag(self, name: str, color: str | None = None) -> bool:
        return self._commit("add_tag", catalog.add_tag(self._state, name, color))

    def remove_tag(self, name: str) -> bool:
        return self._commit("remove_tag", catalog.remove_tag(self._state, name))

    def update_tag(self, old_name: str, **updates: Any) -> bool:
        return self._commit("update_tag", catalog.update_tag(self._state, old_name, **updates))

    def add_ingredient(
        self,
        name: str,
        *,
        bg_color: str | None = None,
        text_color: str | None = None,
        type: IngredientType = IngredientType.MAIN,
    ) -> bool:
        return self._commit(
            "add_ingredient",
            catalog.add_ingredient(
                self._state, name, bg_color=bg_color, text_color=text_color, type=type
            ),
        )

    def remove_ingredient(self, name: str) -> bool:
        return self._commit("remove_ingredient", catalog.remove_ingredient(self._state, name))

    def update_ingredient(self, old_name: str, **updates: Any) -> bool:
        return self._commit(
            "update_ingredient", catalog.update_ingredient(self._state, old_name, **updates)
        )

    # --- Generation -------------------------------------------------------------

    def generate_new_menu(self) -> bool:
        new_state = generator.generate_new_menu(self._state, rng=self._rng, rules=self._rules)
        return self._commit("generate_new_menu", new_state)

    def randomize_entry(self, day_index: int, entry_id: str) -> bool:
        return self._commit(
            "randomize_entry",
            generator.randomize_entry(self._state, day_index, entry_id, rng=self._rng),
        )

    def duplicate_entry(self, day_index: int, entry_id: str) -> bool:
        return self._commit(
            "duplicate_entry",
            generator.duplicate_entry(
                self._state, day_index, entry_id, id_factory=self._id_factory
            ),
        )

    def mark_dish_used(self, dish_name: str, *, now: datetime | None = None) -> bool:
        return self._commit(
            "mark_dish_used", generator.mark_dish_used(self._state, dish_name, now=now)
        )

    # --- Reordering -------------------------------------------------------------

    def swap_days(self, first: int, second: int) -> bool:
        return self._commit("swap_days", reorder.swap_day_contents(self._state, first, second))

    def move_entry(self, from_day: int, to_day: int, entry_id: str, to_index: int) -> bool:
        return self._commit(
            "move_entry",
            reorder.move_entry(self._state, from_day, to_day, entry_id, to_index),
        )

    # --- Week editing -----------------------------------------------------------

    def add_menu_entry(
        self, day_index: int, tags: Iterable[str] = (), *, dish_name: str = ""
    ) -> bool:
        return self._commit(
            "add_menu_entry",
            weekly.add_menu_entry(
                self._state, day_index, tags, dish_name=dish_name, id_factory=self._id_factory
            ),
        )

    def remove_menu_entry(self, day_index: int, entry_id: str) -> bool:
        return self._commit(
            "remove_menu_entry", weekly.remove_menu_entry(self._state, day_index, entry_id)
        )

    def update_entry(
        self,
        day_index: int,
        entry_id: str,
        *,
        dish_name: str | None = None,
        tags: Iterable[str] | None = None,
    ) -> bool:
        return self._commit(
            "update_entry",
            weekly.update_entry(self._state, day_index, entry_id, dish_name=dish_name, tags=tags),
        )

    def update_entry_dish(self, day_index: int, entry_id: str, dish_name: str) -> bool:
        return self.update_entry(day_index, entry_id, dish_name=dish_name)

    def update_day(self, day_index: int, **updates: Any) -> bool:
        return self._commit("update_day", weekly.update_day(self._state, day_index, **updates))

    def update_day_color(self, day_index: int, color: str) -> bool:
        return self._commit(
            "update_day_color", weekly.update_day_color(self._state, day_index, color)
        )

    def toggle_day_lock(self, day_index: int) -> bool:
        return self._commit("toggle_day_lock", weekly.toggle_day_lock(self._state, day_index))

    def add_day(self, label: str | None = None) -> bool:
        return self._commit("add_day", weekly.add_day(self._state, label=label, rules=self._rules))

    def remove_day(self, day_index: int) -> bool:
        return self._commit(
            "remove_day", weekly.remove_day(self._state, day_index, rules=self._rules)
        )

    def set_background(
        self, type: BackgroundType | str | None = None, color: str | None = None
    ) -> bool:
        return self._commit("set_background", weekly.set_background(self._state, type, color))
