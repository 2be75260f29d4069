"""Wire shape of the persisted menu record (camelCase keys)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from weekmenu.domain import models as dm
from weekmenu.domain.enums import BackgroundType, IngredientType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TagRecord(CamelModel):
    name: str
    color: str


class IngredientRecord(CamelModel):
    name: str
    bg_color: str
    text_color: str
    type: IngredientType = IngredientType.MAIN


class DishRecord(CamelModel):
    name: str
    tags: list[str] = Field(default_factory=list)
    main_ingredients: list[str] = Field(default_factory=list)
    sub_ingredients: list[str] = Field(default_factory=list)
    steps: str = ""
    last_used_at: int | None = Field(None, description="Epoch milliseconds")


class EntryRecord(CamelModel):
    id: str
    dish_name: str = ""
    tags: list[str] = Field(default_factory=list)


class DayRecord(CamelModel):
    day: str
    color: str
    locked: bool = False
    note: str | None = None
    entries: list[EntryRecord] = Field(default_factory=list)


class BackgroundRecord(CamelModel):
    type: BackgroundType = BackgroundType.DOTS
    color: str = ""


class PersistedMenu(CamelModel):
    """The subset of store state that survives a restart."""

    dishes: list[DishRecord]
    weekly_menu: list[DayRecord]
    ingredients: list[IngredientRecord]
    tags: list[TagRecord]
    background_settings: BackgroundRecord

    @classmethod
    def from_state(cls, state: dm.MenuState) -> PersistedMenu:
        return cls(
            dishes=[
                DishRecord(
                    name=dish.name,
                    tags=list(dish.tags),
                    main_ingredients=list(dish.main_ingredients),
                    sub_ingredients=list(dish.sub_ingredients),
                    steps=dish.steps,
                    last_used_at=(
                        dm.to_epoch_ms(dish.last_used_at) if dish.last_used_at is not None else None
                    ),
                )
                for dish in state.dishes
            ],
            weekly_menu=[
                DayRecord(
                    day=day.day,
                    color=day.color,
                    locked=day.locked,
                    note=day.note,
                    entries=[
                        EntryRecord(id=entry.id, dish_name=entry.dish_name, tags=list(entry.tags))
                        for entry in day.entries
                    ],
                )
                for day in state.weekly_menu
            ],
            ingredients=[
                IngredientRecord(
                    name=item.name,
                    bg_color=item.bg_color,
                    text_color=item.text_color,
                    type=item.type,
                )
                for item in state.ingredients
            ],
            tags=[TagRecord(name=tag.name, color=tag.color) for tag in state.tags],
            background_settings=BackgroundRecord(
                type=state.background.type, color=state.background.color
            ),
        )


def to_payload(state: dm.MenuState) -> dict[str, Any]:
    """Serialize the persisted subset of ``state`` to JSON-compatible data."""

    return PersistedMenu.from_state(state).model_dump(mode="json", by_alias=True)
