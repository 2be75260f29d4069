"""Unit tests for catalog create/rename/delete and their cascades."""

from __future__ import annotations

from datetime import UTC, datetime

from weekmenu.domain.catalog import (
    add_dish,
    add_ingredient,
    add_tag,
    remove_dish,
    remove_ingredient,
    remove_tag,
    update_dish,
    update_ingredient,
    update_tag,
)
from weekmenu.domain.enums import IngredientType
from weekmenu.domain.models import validate_state


def _entries(state):
    return [entry for day in state.weekly_menu for entry in day.entries]


class TestDishes:
    def test_add_dish_trims_and_appends(self, state):
        now = datetime(2024, 5, 1, tzinfo=UTC)
        result = add_dish(state, "  红烧肉 ", ["大荤", "大荤"], main_ingredients=["猪肉"], now=now)

        dish = result.find_dish("红烧肉")
        assert dish is not None
        assert dish.tags == ("大荤",)
        assert dish.main_ingredients == ("猪肉",)
        assert dish.last_used_at == now
        assert result.dishes[-1] is dish
        assert result.weekly_menu is state.weekly_menu
        assert result.tags is state.tags

    def test_bare_string_tags_are_one_name(self, state):
        result = add_dish(state, "红烧肉", "大荤", main_ingredients=" 猪肉 ")

        dish = result.find_dish("红烧肉")
        assert dish.tags == ("大荤",)
        assert dish.main_ingredients == ("猪肉",)
        assert update_dish(result, "红烧肉", tags="汤").find_dish("红烧肉").tags == ("汤",)

    def test_add_dish_rejects_blank_and_duplicate_names(self, state):
        assert add_dish(state, "   ") is state
        assert add_dish(state, "糖醋排骨") is state
        assert add_dish(state, " 糖醋排骨 ") is state

    def test_remove_dish_clears_referencing_entries(self, state):
        result = remove_dish(state, "糖醋排骨")

        assert result.find_dish("糖醋排骨") is None
        cleared = result.weekly_menu[0].entries[0]
        assert cleared.id == "entry-0"
        assert cleared.dish_name == ""
        assert cleared.tags == ("大荤",)
        assert all(entry.dish_name != "糖醋排骨" for entry in _entries(result))

    def test_remove_dish_keeps_untouched_days(self, state):
        result = remove_dish(state, "糖醋排骨")

        for old, new in zip(state.weekly_menu[1:], result.weekly_menu[1:], strict=True):
            assert new is old

    def test_remove_unknown_dish_is_noop(self, state):
        assert remove_dish(state, "佛跳墙") is state

    def test_rename_dish_cascades_to_entries(self, state):
        result = update_dish(state, "白米饭", name="香米饭")

        assert result.find_dish("白米饭") is None
        assert result.find_dish("香米饭") is not None
        names = [entry.dish_name for entry in _entries(result)]
        assert "白米饭" not in names
        assert names.count("香米饭") == 2
        # days without the dish are reused as-is
        assert result.weekly_menu[1] is state.weekly_menu[1]

    def test_rename_collision_is_rejected(self, state):
        assert update_dish(state, "白米饭", name="杂粮饭") is state

    def test_blank_rename_keeps_name_but_applies_other_fields(self, state):
        result = update_dish(state, "白米饭", name="  ", steps="淘米，加水，煮熟")

        dish = result.find_dish("白米饭")
        assert dish.steps == "淘米，加水，煮熟"
        assert result.weekly_menu is state.weekly_menu

    def test_identical_update_is_noop(self, state):
        dish = state.find_dish("白米饭")
        assert update_dish(state, "白米饭", name="白米饭", tags=list(dish.tags)) is state


class TestTags:
    def test_rename_tag_cascades_into_dishes_and_entries(self, state):
        result = update_tag(state, "素菜", name="蔬食")

        assert result.find_tag("素菜") is None
        assert result.find_tag("蔬食").color == state.find_tag("素菜").color
        for dish in result.dishes:
            assert "素菜" not in dish.tags
        assert result.find_dish("清炒小青菜").tags == ("蔬菜", "蔬食")
        assert result.find_dish("水果沙拉").tags == ("点心", "蔬食")
        for entry in _entries(result):
            assert "素菜" not in entry.tags
        assert result.weekly_menu[0].entries[2].tags == ("蔬菜", "蔬食")
        # dishes without the tag keep their identity
        assert result.find_dish("糖醋排骨") is state.find_dish("糖醋排骨")

    def test_rename_tag_collision_is_rejected(self, state):
        assert update_tag(state, "素菜", name="蔬菜") is state

    def test_recolor_tag_only_touches_tags(self, state):
        result = update_tag(state, "汤", color="#000000")

        assert result.find_tag("汤").color == "#000000"
        assert result.dishes is state.dishes
        assert result.weekly_menu is state.weekly_menu

    def test_remove_tag_purges_references(self, state):
        result = remove_tag(state, "海鲜")

        assert result.find_tag("海鲜") is None
        assert result.find_dish("虾仁炒蛋").tags == ("小荤",)
        assert all("海鲜" not in entry.tags for entry in _entries(result))
        assert result.find_dish("白米饭") is state.find_dish("白米饭")

    def test_add_tag_uses_builtin_color_then_fallback(self, state):
        without = remove_tag(state, "汤")
        restored = add_tag(without, "汤")
        assert restored.find_tag("汤").color == state.find_tag("汤").color

        custom = add_tag(state, "凉菜")
        assert custom.find_tag("凉菜").color == "#6b7280"

    def test_colors_are_trimmed_and_blank_ignored(self, state):
        result = add_tag(state, "凉菜", " #123456 ")
        assert result.find_tag("凉菜").color == "#123456"

        assert update_tag(result, "凉菜", color="   ") is result
        recolored = update_tag(result, "凉菜", color="\t#654321\n")
        assert recolored.find_tag("凉菜").color == "#654321"

    def test_remove_tag_purges_names_missing_from_catalog(self, state):
        stray = add_dish(state, "红烧肉", ["大荤", "家常"])
        result = remove_tag(stray, "家常")

        assert result.find_dish("红烧肉").tags == ("大荤",)
        assert result.tags is stray.tags
        assert remove_tag(result, "家常") is result

    def test_add_duplicate_tag_is_noop(self, state):
        assert add_tag(state, "汤", "#123456") is state


class TestIngredients:
    def test_add_ingredient_defaults(self, state):
        result = add_ingredient(state, "香菜", type=IngredientType.SUB)

        item = result.find_ingredient("香菜")
        assert item.type is IngredientType.SUB
        assert item.bg_color == "#f1f5f9"
        assert item.text_color == "#334155"

    def test_add_ingredient_rejects_invalid_type(self, state):
        assert add_ingredient(state, "香菜", type="garnish") is state

    def test_rename_ingredient_cascades_into_main_and_sub_lists(self, state):
        result = update_ingredient(state, "葱", name="小葱")

        assert result.find_ingredient("小葱").type is IngredientType.SUB
        assert result.find_dish("清蒸鲈鱼").sub_ingredients == ("小葱", "姜")
        assert all("葱" not in dish.sub_ingredients for dish in result.dishes)
        assert result.find_dish("白米饭") is state.find_dish("白米饭")

    def test_ingredient_colors_are_trimmed(self, state):
        result = add_ingredient(state, "香菜", bg_color=" #dcfce7 ", text_color="  ")
        item = result.find_ingredient("香菜")
        assert item.bg_color == "#dcfce7"
        assert item.text_color == "#334155"

        updated = update_ingredient(result, "香菜", text_color=" #166534")
        assert updated.find_ingredient("香菜").text_color == "#166534"

    def test_remove_ingredient_purges_names_missing_from_catalog(self, state):
        stray = add_dish(state, "凉拌菜", ["蔬菜"], sub_ingredients=["香油"])
        result = remove_ingredient(stray, "香油")

        assert result.find_dish("凉拌菜").sub_ingredients == ()
        assert result.ingredients is stray.ingredients

    def test_rename_ingredient_collision_is_rejected(self, state):
        assert update_ingredient(state, "葱", name="姜") is state

    def test_remove_ingredient_strips_dishes(self, state):
        result = remove_ingredient(state, "鸡蛋")

        assert result.find_ingredient("鸡蛋") is None
        assert result.find_dish("番茄鸡蛋汤").main_ingredients == ("番茄",)
        assert all("鸡蛋" not in dish.main_ingredients for dish in result.dishes)

    def test_update_ingredient_type(self, state):
        result = update_ingredient(state, "洋葱", type=IngredientType.SUB)
        assert result.find_ingredient("洋葱").type is IngredientType.SUB
        assert result.dishes is state.dishes


def test_operations_preserve_invariants(state):
    result = add_dish(state, "红烧肉", ["大荤"])
    result = update_tag(result, "大荤", name="硬菜")
    result = update_dish(result, "红烧肉", name="东坡肉")
    result = remove_ingredient(result, "猪肉")
    result = remove_dish(result, "东坡肉")

    assert validate_state(result) == []
    assert validate_state(state) == []
