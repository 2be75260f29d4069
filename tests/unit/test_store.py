"""Unit tests for the store wrapper: change detection and notifications."""

from __future__ import annotations

import logging

from weekmenu.domain.seed_data import initial_state
from weekmenu.store import MenuStore
from weekmenu.utils.rng import make_rng


def _store(**kwargs):
    kwargs.setdefault("rng", make_rng("store"))
    return MenuStore(**kwargs)


def test_defaults_to_builtin_state():
    store = _store()
    assert store.state == initial_state()


def test_listener_sees_new_and_old_state():
    store = _store()
    seen = []
    store.subscribe(lambda new, old: seen.append((new, old)))

    before = store.state
    assert store.add_tag("凉菜") is True

    assert len(seen) == 1
    new, old = seen[0]
    assert old is before
    assert new is store.state
    assert new.find_tag("凉菜") is not None


def test_noop_does_not_notify(caplog):
    store = _store()
    seen = []
    store.subscribe(lambda new, old: seen.append(new))
    before = store.state

    with caplog.at_level(logging.DEBUG, logger="weekmenu.store"):
        assert store.add_tag("大荤") is False
        assert store.update_dish("白米饭", name="杂粮饭") is False

    assert seen == []
    assert store.state is before
    assert "add_tag left the menu unchanged" in caplog.text


def test_unsubscribe_stops_notifications():
    store = _store()
    seen = []
    unsubscribe = store.subscribe(lambda new, old: seen.append(new))
    unsubscribe()
    unsubscribe()

    store.add_tag("凉菜")
    assert seen == []


def test_operations_delegate_to_rules():
    ids = iter(f"id-{n}" for n in range(10))
    store = _store(id_factory=lambda: next(ids))

    assert store.update_tag("素菜", name="蔬食")
    assert store.remove_dish("糖醋排骨")
    assert store.state.weekly_menu[0].entries[0].dish_name == ""
    assert store.add_menu_entry(0, ["汤"])
    assert store.state.weekly_menu[0].entries[-1].id == "id-0"
    assert store.duplicate_entry(0, "id-0")
    assert store.move_entry(0, 1, "id-1", 0)
    assert store.state.weekly_menu[1].entries[0].id == "id-1"
    assert store.swap_days(0, 1)
    assert store.toggle_day_lock(0)
    assert store.update_day(0, note="聚会")
    assert store.add_day("周六")
    assert store.remove_day(5)
    assert store.set_background("grid")
    assert store.mark_dish_used("罗宋汤")
    assert store.state.find_dish("罗宋汤").last_used_at is not None


def test_generate_respects_locks():
    store = _store()
    store.toggle_day_lock(2)
    locked_day = store.state.weekly_menu[2]

    assert store.generate_new_menu() is True
    assert store.state.weekly_menu[2] is locked_day


def test_seeded_stores_generate_identically():
    first = _store(rng=make_rng("same"))
    second = _store(rng=make_rng("same"))
    first.generate_new_menu()
    second.generate_new_menu()
    assert first.state == second.state


def test_from_persisted_and_replace_state():
    store = MenuStore.from_persisted({"tags": ["凉菜"]}, rng=make_rng("p"))
    assert [tag.name for tag in store.state.tags] == ["凉菜"]

    assert store.replace_state(None) is True
    assert store.state == initial_state()
