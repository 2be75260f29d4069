"""Unit tests for day and entry editing."""

from __future__ import annotations

from dataclasses import replace

from weekmenu.domain.enums import BackgroundType
from weekmenu.domain.models import MenuState
from weekmenu.domain.rules_config import DEFAULT_RULES, RulesConfig, WeekRules
from weekmenu.domain.seed_data import INITIAL_WEEKLY_MENU
from weekmenu.domain.weekly import (
    add_day,
    add_menu_entry,
    remove_day,
    remove_menu_entry,
    set_background,
    toggle_day_lock,
    update_day,
    update_day_color,
    update_entry,
    update_entry_dish,
)


class TestEntries:
    def test_add_entry_appends_with_clean_tags(self, state):
        result = add_menu_entry(state, 3, [" 汤 ", "汤", ""], id_factory=lambda: "fresh")

        entry = result.weekly_menu[3].entries[-1]
        assert entry.id == "fresh"
        assert entry.tags == ("汤",)
        assert entry.dish_name == ""
        assert result.weekly_menu[0] is state.weekly_menu[0]
        assert result.dishes is state.dishes

    def test_add_entry_rejects_duplicate_id_and_bad_day(self, state):
        assert add_menu_entry(state, 0, id_factory=lambda: "entry-3") is state
        assert add_menu_entry(state, 10, id_factory=lambda: "fresh") is state

    def test_remove_entry(self, state):
        result = remove_menu_entry(state, 0, "entry-2")
        assert [e.id for e in result.weekly_menu[0].entries] == [
            "entry-0",
            "entry-1",
            "entry-3",
            "entry-4",
        ]
        assert remove_menu_entry(state, 1, "entry-2") is state

    def test_update_entry_dish_allows_dangling_names(self, state):
        result = update_entry_dish(state, 0, "entry-0", "外卖")
        assert result.weekly_menu[0].entries[0].dish_name == "外卖"

    def test_update_entry_tags(self, state):
        result = update_entry(state, 0, "entry-0", tags=["大荤", "海鲜"])

        entry = result.weekly_menu[0].entries[0]
        assert entry.tags == ("大荤", "海鲜")
        assert entry.dish_name == "糖醋排骨"

    def test_update_entry_without_changes_is_noop(self, state):
        assert update_entry(state, 0, "entry-0", dish_name="糖醋排骨") is state
        assert update_entry(state, 0, "entry-0") is state


class TestDays:
    def test_update_day_fields(self, state):
        result = update_day(state, 1, day="周二晚", color="#000000", locked=True, note=" 加班 ")

        day = result.weekly_menu[1]
        assert (day.day, day.color, day.locked, day.note) == ("周二晚", "#000000", True, "加班")
        assert day.entries is state.weekly_menu[1].entries

    def test_blank_label_and_color_are_ignored(self, state):
        assert update_day(state, 1, day="  ", color="") is state

    def test_note_is_cleared_by_none_or_blank(self, state):
        noted = update_day(state, 0, note="生日")
        assert noted.weekly_menu[0].note == "生日"
        assert update_day(noted, 0, note=None).weekly_menu[0].note is None
        assert update_day(noted, 0, note="   ").weekly_menu[0].note is None
        # leaving the note out keeps it
        assert update_day(noted, 0, locked=True).weekly_menu[0].note == "生日"

    def test_update_color_and_toggle_lock(self, state):
        colored = update_day_color(state, 2, "#123456")
        assert colored.weekly_menu[2].color == "#123456"

        locked = toggle_day_lock(state, 2)
        assert locked.weekly_menu[2].locked is True
        assert toggle_day_lock(locked, 2).weekly_menu[2].locked is False
        assert toggle_day_lock(state, 8) is state

    def test_add_day_until_maximum(self, state):
        result = add_day(state)
        assert result.weekly_menu[-1].day == "周六"
        assert result.weekly_menu[-1].entries == ()
        result = add_day(result, label="周末")
        assert result.weekly_menu[-1].day == "周末"
        assert len(result.weekly_menu) == DEFAULT_RULES.week.max_day_count
        assert add_day(result) is result

    def test_add_day_color_cycles_palette(self, state):
        result = add_day(state)
        palette = DEFAULT_RULES.generator.palette
        assert result.weekly_menu[-1].color == palette[5 % len(palette)]

    def test_remove_day_keeps_minimum(self):
        rules = RulesConfig(week=WeekRules(min_day_count=1))
        single = MenuState(dishes=(), tags=(), ingredients=(), weekly_menu=INITIAL_WEEKLY_MENU[:1])
        assert remove_day(single, 0, rules=rules) is single

    def test_remove_day_drops_entries(self, state):
        result = remove_day(state, 0)
        assert [day.day for day in result.weekly_menu] == ["周二", "周三", "周四", "周五"]
        assert "entry-0" not in result.entry_ids()
        assert remove_day(state, 9) is state


class TestBackground:
    def test_set_type_and_color(self, state):
        result = set_background(state, "grid", "#fafafa")
        assert result.background.type is BackgroundType.GRID
        assert result.background.color == "#fafafa"
        assert result.weekly_menu is state.weekly_menu

    def test_invalid_type_is_noop(self, state):
        assert set_background(state, "stripes") is state

    def test_same_values_are_noop(self, state):
        current = state.background
        assert set_background(state, current.type, current.color) is state

    def test_color_only(self, state):
        result = set_background(state, color="#ffffff")
        assert result.background == replace(state.background, color="#ffffff")
