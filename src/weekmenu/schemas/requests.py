"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from pydantic import Field

from weekmenu.domain.enums import BackgroundType, IngredientType

from .menu import CamelModel, PersistedMenu


class MenuResponse(CamelModel):
    changed: bool = Field(..., description="False when the operation was a no-op")
    state: PersistedMenu


class DishCreate(CamelModel):
    name: str
    tags: list[str] = Field(default_factory=list)
    main_ingredients: list[str] = Field(default_factory=list)
    sub_ingredients: list[str] = Field(default_factory=list)
    steps: str = ""


class DishUpdate(CamelModel):
    name: str | None = None
    tags: list[str] | None = None
    main_ingredients: list[str] | None = None
    sub_ingredients: list[str] | None = None
    steps: str | None = None


class TagCreate(CamelModel):
    name: str
    color: str | None = None


class TagUpdate(CamelModel):
    name: str | None = None
    color: str | None = None


class IngredientCreate(CamelModel):
    name: str
    bg_color: str | None = None
    text_color: str | None = None
    type: IngredientType = IngredientType.MAIN


class IngredientUpdate(CamelModel):
    name: str | None = None
    bg_color: str | None = None
    text_color: str | None = None
    type: IngredientType | None = None


class DayCreate(CamelModel):
    day: str | None = Field(None, description="Label; defaults to the next weekday name")


class DayUpdate(CamelModel):
    day: str | None = None
    color: str | None = None
    locked: bool | None = None
    note: str | None = None


class DaySwap(CamelModel):
    first: int = Field(..., ge=0)
    second: int = Field(..., ge=0)


class EntryCreate(CamelModel):
    tags: list[str] = Field(default_factory=list)
    dish_name: str = ""


class EntryUpdate(CamelModel):
    dish_name: str | None = None
    tags: list[str] | None = None


class EntryMove(CamelModel):
    from_day: int = Field(..., ge=0)
    to_day: int = Field(..., ge=0)
    entry_id: str
    to_index: int = Field(..., ge=0)


class BackgroundUpdate(CamelModel):
    type: BackgroundType | None = None
    color: str | None = None
