"""HTTP routes for the menu planner API.

Every mutating route is fail-soft: an operation that does not apply (unknown
name, rename collision, locked or missing day) answers ``200`` with
``changed: false`` and the unchanged record.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from weekmenu.api.runtime import ApiState
from weekmenu.schemas import (
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
    PersistedMenu,
    TagCreate,
    TagUpdate,
)
from weekmenu.store import MenuStore

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


def _respond(store: MenuStore, changed: bool) -> MenuResponse:
    return MenuResponse(changed=changed, state=PersistedMenu.from_state(store.state))


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/menu", response_model=MenuResponse)
async def read_menu(api_state: ApiStateDep) -> MenuResponse:
    return _respond(api_state.store, False)


@router.post("/menu/generate", response_model=MenuResponse)
async def generate_menu(api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.generate_new_menu())


# --- Dishes ---------------------------------------------------------------------


@router.post("/dishes", response_model=MenuResponse)
async def create_dish(body: DishCreate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    changed = store.add_dish(
        body.name,
        body.tags,
        main_ingredients=body.main_ingredients,
        sub_ingredients=body.sub_ingredients,
        steps=body.steps,
    )
    return _respond(store, changed)


@router.patch("/dishes/{name}", response_model=MenuResponse)
async def update_dish(name: str, body: DishUpdate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.update_dish(name, **body.model_dump(exclude_none=True)))


@router.delete("/dishes/{name}", response_model=MenuResponse)
async def delete_dish(name: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.remove_dish(name))


@router.post("/dishes/{name}/used", response_model=MenuResponse)
async def mark_dish_used(name: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.mark_dish_used(name))


# --- Tags -----------------------------------------------------------------------


@router.post("/tags", response_model=MenuResponse)
async def create_tag(body: TagCreate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.add_tag(body.name, body.color))


@router.patch("/tags/{name}", response_model=MenuResponse)
async def update_tag(name: str, body: TagUpdate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.update_tag(name, **body.model_dump(exclude_none=True)))


@router.delete("/tags/{name}", response_model=MenuResponse)
async def delete_tag(name: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.remove_tag(name))


# --- Ingredients ----------------------------------------------------------------


@router.post("/ingredients", response_model=MenuResponse)
async def create_ingredient(body: IngredientCreate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    changed = store.add_ingredient(
        body.name, bg_color=body.bg_color, text_color=body.text_color, type=body.type
    )
    return _respond(store, changed)


@router.patch("/ingredients/{name}", response_model=MenuResponse)
async def update_ingredient(
    name: str, body: IngredientUpdate, api_state: ApiStateDep
) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.update_ingredient(name, **body.model_dump(exclude_none=True)))


@router.delete("/ingredients/{name}", response_model=MenuResponse)
async def delete_ingredient(name: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.remove_ingredient(name))


# --- Days -----------------------------------------------------------------------


@router.post("/days", response_model=MenuResponse)
async def create_day(body: DayCreate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.add_day(body.day))


@router.post("/days/swap", response_model=MenuResponse)
async def swap_days(body: DaySwap, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.swap_days(body.first, body.second))


@router.patch("/days/{index}", response_model=MenuResponse)
async def update_day(index: int, body: DayUpdate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    # an explicit ``"note": null`` clears the note, an absent key keeps it
    return _respond(store, store.update_day(index, **body.model_dump(exclude_unset=True)))


@router.delete("/days/{index}", response_model=MenuResponse)
async def delete_day(index: int, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.remove_day(index))


# --- Entries --------------------------------------------------------------------


@router.post("/days/{index}/entries", response_model=MenuResponse)
async def create_entry(index: int, body: EntryCreate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.add_menu_entry(index, body.tags, dish_name=body.dish_name))


@router.patch("/days/{index}/entries/{entry_id}", response_model=MenuResponse)
async def update_entry(
    index: int, entry_id: str, body: EntryUpdate, api_state: ApiStateDep
) -> MenuResponse:
    store = api_state.store
    changed = store.update_entry(index, entry_id, dish_name=body.dish_name, tags=body.tags)
    return _respond(store, changed)


@router.delete("/days/{index}/entries/{entry_id}", response_model=MenuResponse)
async def delete_entry(index: int, entry_id: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.remove_menu_entry(index, entry_id))


@router.post("/days/{index}/entries/{entry_id}/randomize", response_model=MenuResponse)
async def randomize_entry(index: int, entry_id: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.randomize_entry(index, entry_id))


@router.post("/days/{index}/entries/{entry_id}/duplicate", response_model=MenuResponse)
async def duplicate_entry(index: int, entry_id: str, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.duplicate_entry(index, entry_id))


@router.post("/entries/move", response_model=MenuResponse)
async def move_entry(body: EntryMove, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    changed = store.move_entry(body.from_day, body.to_day, body.entry_id, body.to_index)
    return _respond(store, changed)


@router.put("/background", response_model=MenuResponse)
async def update_background(body: BackgroundUpdate, api_state: ApiStateDep) -> MenuResponse:
    store = api_state.store
    return _respond(store, store.set_background(body.type, body.color))
