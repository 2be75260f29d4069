from .menu import (
    BackgroundRecord,
    DayRecord,
    DishRecord,
    EntryRecord,
    IngredientRecord,
    PersistedMenu,
    TagRecord,
    to_payload,
)
from .requests import (
    BackgroundUpdate,
    DayCreate,
    DaySwap,
    DayUpdate,
    DishCreate,
    DishUpdate,
    EntryCreate,
    EntryMove,
    EntryUpdate,
    IngredientCreate,
    IngredientUpdate,
    MenuResponse,
    TagCreate,
    TagUpdate,
)

__all__ = [
    "BackgroundRecord",
    "BackgroundUpdate",
    "DayCreate",
    "DayRecord",
    "DaySwap",
    "DayUpdate",
    "DishCreate",
    "DishRecord",
    "DishUpdate",
    "EntryCreate",
    "EntryMove",
    "EntryRecord",
    "EntryUpdate",
    "IngredientCreate",
    "IngredientRecord",
    "IngredientUpdate",
    "MenuResponse",
    "PersistedMenu",
    "TagCreate",
    "TagRecord",
    "TagUpdate",
    "to_payload",
]
