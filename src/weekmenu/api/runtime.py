"""Runtime primitives backing the menu planner HTTP API."""

from __future__ import annotations

import logging

from weekmenu.config import Settings, get_settings
from weekmenu.domain.models import MenuState
from weekmenu.domain.rules_config import DEFAULT_RULES, RulesConfig
from weekmenu.repository import JsonKeyValueStore, MenuRepository
from weekmenu.store import MenuStore
from weekmenu.utils.rng import make_rng

logger = logging.getLogger(__name__)


class ApiState:
    """The store and its persistence wiring, shared by the FastAPI layer.

    The store is loaded once from the repository and every state change is
    written back through a subscriber.  A failed write is logged and the
    in-memory state stays authoritative.
    """

    def __init__(
        self, *, settings: Settings | None = None, rules: RulesConfig = DEFAULT_RULES
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = rules
        self.repository = MenuRepository(
            JsonKeyValueStore(self.settings.data_dir),
            self.settings.storage_key,
            rules=rules,
        )
        self.store = MenuStore(
            self.repository.load(),
            rules=rules,
            rng=make_rng(self.settings.random_seed),
        )
        self._unsubscribe = self.store.subscribe(self._persist)

    def _persist(self, new_state: MenuState, old_state: MenuState) -> None:
        try:
            self.repository.save(new_state)
        except OSError:
            logger.exception("Failed to persist menu under %r", self.repository.key)

    async def shutdown(self) -> None:
        self._unsubscribe()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
