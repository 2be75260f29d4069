"""JSON-file persistence for the menu record."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import JsonValue, TypeAdapter, ValidationError

from weekmenu.domain.migration import migrate
from weekmenu.domain.models import MenuState
from weekmenu.domain.rules_config import DEFAULT_RULES, RulesConfig
from weekmenu.schemas import to_payload

logger = logging.getLogger(__name__)


class JsonKeyValueStore:
    """A minimal string-keyed store keeping one JSON document per key on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in {".", ".."}:
            raise ValueError(f"invalid storage key: {key!r}")
        return self.base_path / f"{key}.json"

    def get(self, key: str) -> JsonValue | None:
        """Return the decoded document for ``key``, or ``None`` when absent.

        Raises :class:`pydantic.ValidationError` when the file is not valid JSON.
        """

        path = self._path_for(key)
        if not path.exists():
            return None
        return self._adapter.validate_json(path.read_bytes())

    def set(self, key: str, value: JsonValue) -> Path:
        """Write ``value`` under ``key`` and return the file path."""

        path = self._path_for(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_bytes(self._adapter.dump_json(value, indent=2))
        tmp.replace(path)
        return path

    def delete(self, key: str) -> None:
        """Remove the document for ``key`` if it exists."""

        path = self._path_for(key)
        if path.exists():
            path.unlink()

    def keys(self) -> list[str]:
        return sorted(path.stem for path in self.base_path.glob("*.json"))


class MenuRepository:
    """Load and save the menu state under a single storage key."""

    def __init__(
        self,
        kv: JsonKeyValueStore,
        key: str = "menu-storage",
        *,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.kv = kv
        self.key = key
        self.rules = rules

    def load(self) -> MenuState:
        """Return the migrated stored record; unreadable data yields the defaults."""

        try:
            raw = self.kv.get(self.key)
        except (OSError, ValidationError) as exc:
            logger.warning("Could not read stored menu %r, starting from defaults: %s", self.key, exc)
            raw = None
        if raw is None:
            logger.info("No stored menu under %r, using the built-in defaults", self.key)
        return migrate(raw, rules=self.rules)

    def save(self, state: MenuState) -> Path:
        return self.kv.set(self.key, to_payload(state))

    def clear(self) -> None:
        self.kv.delete(self.key)
