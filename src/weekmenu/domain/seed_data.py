"""Built-in catalog data, palettes and the initial week template.

These values seed a fresh store and double as the fallback table for the
migration engine when a persisted record is missing a collection.
"""

from __future__ import annotations

from .enums import BackgroundType, IngredientType
from .models import BackgroundSettings, DayMenu, Dish, Ingredient, MenuEntry, MenuState, Tag

# --- Palettes -------------------------------------------------------------------

# Soft card colors drawn by the generator for unlocked days.
SOFT_CARD_COLORS: tuple[str, ...] = (
    "#FF9A9E",
    "#A18CD1",
    "#FBC2EB",
    "#84FAB0",
    "#FFD1FF",
    "#8FD3F4",
    "#FCCB90",
    "#E0C3FC",
    "#F6D365",
    "#A8EDEA",
)

PRESET_TAG_COLORS: tuple[str, ...] = (
    "#6b7280",
    "#ef4444",
    "#f97316",
    "#eab308",
    "#22c55e",
    "#14b8a6",
    "#3b82f6",
    "#8b5cf6",
    "#ec4899",
    "#78716c",
)

FALLBACK_TAG_COLOR = "#6b7280"

# Legacy ingredient color names mapped to their (background, text) pair.
INGREDIENT_COLORS: dict[str, tuple[str, str]] = {
    "default": ("#f1f5f9", "#334155"),
    "gray": ("#e5e7eb", "#1f2937"),
    "brown": ("#efebe9", "#5d4037"),
    "orange": ("#ffedd5", "#9a3412"),
    "yellow": ("#fef9c3", "#854d0e"),
    "green": ("#dcfce7", "#166534"),
    "blue": ("#dbeafe", "#1e40af"),
    "purple": ("#f3e8ff", "#6b21a8"),
    "pink": ("#fce7f3", "#9d174d"),
    "red": ("#fee2e2", "#991b1b"),
}

DEFAULT_BACKGROUND = BackgroundSettings(type=BackgroundType.DOTS, color="#67e8f9")

DAY_LABELS: tuple[str, ...] = ("周一", "周二", "周三", "周四", "周五", "周六", "周日")


def day_label(index: int) -> str:
    """Label used for a day slot created at ``index``."""

    if 0 <= index < len(DAY_LABELS):
        return DAY_LABELS[index]
    return f"第{index + 1}天"


def ingredient_colors(color_name: str) -> tuple[str, str]:
    return INGREDIENT_COLORS.get(color_name, INGREDIENT_COLORS["default"])


# --- Catalog --------------------------------------------------------------------

DEFAULT_TAGS: tuple[Tag, ...] = (
    Tag("大荤", "#ef4444"),
    Tag("小荤", "#f97316"),
    Tag("蔬菜", "#22c55e"),
    Tag("素菜", "#14b8a6"),
    Tag("汤", "#3b82f6"),
    Tag("主食", "#eab308"),
    Tag("点心", "#ec4899"),
    Tag("海鲜", "#8b5cf6"),
)

DEFAULT_TAG_COLORS: dict[str, str] = {tag.name: tag.color for tag in DEFAULT_TAGS}


def _ingredient(name: str, color: str, kind: IngredientType = IngredientType.MAIN) -> Ingredient:
    bg, text = ingredient_colors(color)
    return Ingredient(name=name, bg_color=bg, text_color=text, type=kind)


DEFAULT_INGREDIENTS: tuple[Ingredient, ...] = (
    # meat
    _ingredient("猪肉", "red"),
    _ingredient("排骨", "red"),
    _ingredient("牛肉", "brown"),
    _ingredient("鸡腿", "orange"),
    _ingredient("鸡翅", "orange"),
    _ingredient("鸭肉", "brown"),
    # seafood
    _ingredient("鱼", "blue"),
    _ingredient("虾", "pink"),
    # eggs and beans
    _ingredient("鸡蛋", "yellow"),
    _ingredient("豆腐", "default"),
    # vegetables
    _ingredient("土豆", "yellow"),
    _ingredient("番茄", "red"),
    _ingredient("青菜", "green"),
    _ingredient("白菜", "green"),
    _ingredient("萝卜", "default"),
    _ingredient("西兰花", "green"),
    _ingredient("茄子", "purple"),
    _ingredient("青椒", "green"),
    _ingredient("洋葱", "default"),
    _ingredient("胡萝卜", "orange"),
    _ingredient("黄瓜", "green"),
    _ingredient("豆角", "green"),
    _ingredient("菌菇", "brown"),
    _ingredient("木耳", "gray"),
    # staples
    _ingredient("粉丝", "default"),
    _ingredient("面条", "yellow"),
    _ingredient("大米", "default"),
    # seasoning
    _ingredient("葱", "green", IngredientType.SUB),
    _ingredient("姜", "yellow", IngredientType.SUB),
    _ingredient("蒜", "default", IngredientType.SUB),
)


def _dish(
    name: str, tags: tuple[str, ...], main: tuple[str, ...] = (), sub: tuple[str, ...] = ()
) -> Dish:
    return Dish(name=name, tags=tags, main_ingredients=main, sub_ingredients=sub)


DEFAULT_DISHES: tuple[Dish, ...] = (
    _dish("糖醋排骨", ("大荤",), ("排骨",), ("姜",)),
    _dish("清蒸鲈鱼", ("大荤", "海鲜"), ("鱼",), ("葱", "姜")),
    _dish("土豆炖牛肉", ("大荤",), ("牛肉", "土豆")),
    _dish("照烧鸡腿", ("大荤",), ("鸡腿",)),
    _dish("油焖大虾", ("大荤", "海鲜"), ("虾",), ("葱", "姜")),
    _dish("虾仁炒蛋", ("小荤", "海鲜"), ("虾", "鸡蛋"), ("葱",)),
    _dish("肉末茄子", ("小荤",), ("猪肉", "茄子"), ("蒜",)),
    _dish("西葫芦炒蛋", ("小荤",), ("鸡蛋",)),
    _dish("烂糊肉丝", ("小荤",), ("猪肉", "白菜")),
    _dish("百叶包肉", ("小荤",), ("猪肉",)),
    _dish("青椒炒肉", ("小荤",), ("猪肉", "青椒")),
    _dish("清炒小青菜", ("蔬菜", "素菜"), ("青菜",), ("蒜",)),
    _dish("西兰花炒胡萝卜", ("蔬菜", "素菜"), ("西兰花", "胡萝卜")),
    _dish("耗油生菜", ("蔬菜",), (), ("蒜",)),
    _dish("醋溜绿豆芽", ("蔬菜",)),
    _dish("荷塘小炒", ("蔬菜",), ("胡萝卜", "木耳")),
    _dish("菌菇豆腐汤", ("汤",), ("菌菇", "豆腐")),
    _dish("番茄鸡蛋汤", ("汤",), ("番茄", "鸡蛋")),
    _dish("紫菜蛋花汤", ("汤", "海鲜"), ("鸡蛋",)),
    _dish("萝卜小排汤", ("汤",), ("萝卜", "排骨")),
    _dish("罗宋汤", ("汤",), ("牛肉", "番茄", "土豆", "洋葱")),
    _dish("白米饭", ("主食",), ("大米",)),
    _dish("杂粮饭", ("主食",), ("大米",)),
    _dish("上海炒饭", ("主食",), ("大米", "鸡蛋"), ("葱",)),
    _dish("意大利肉酱面", ("主食",), ("面条", "牛肉", "番茄")),
    _dish("水果沙拉", ("点心", "素菜")),
    _dish("南瓜饼", ("点心",)),
    _dish("自制蛋挞", ("点心",), ("鸡蛋",)),
)


# --- Initial week ---------------------------------------------------------------

_TEMPLATE: tuple[tuple[str, str, tuple[tuple[str, tuple[str, ...]], ...]], ...] = (
    (
        "周一",
        "#FF9A9E",
        (
            ("糖醋排骨", ("大荤",)),
            ("虾仁炒蛋", ("小荤", "海鲜")),
            ("清炒小青菜", ("蔬菜", "素菜")),
            ("菌菇豆腐汤", ("汤",)),
            ("白米饭", ("主食",)),
        ),
    ),
    (
        "周二",
        "#A18CD1",
        (
            ("清蒸鲈鱼", ("大荤", "海鲜")),
            ("肉末茄子", ("小荤",)),
            ("西兰花炒胡萝卜", ("蔬菜", "素菜")),
            ("番茄鸡蛋汤", ("汤",)),
            ("杂粮饭", ("主食",)),
            ("水果沙拉", ("点心", "素菜")),
        ),
    ),
    (
        "周三",
        "#FBC2EB",
        (
            ("土豆炖牛肉", ("大荤",)),
            ("西葫芦炒蛋", ("小荤",)),
            ("耗油生菜", ("蔬菜",)),
            ("紫菜蛋花汤", ("汤", "海鲜")),
            ("白米饭", ("主食",)),
            ("南瓜饼", ("点心",)),
        ),
    ),
    (
        "周四",
        "#84FAB0",
        (
            ("照烧鸡腿", ("大荤",)),
            ("烂糊肉丝", ("小荤",)),
            ("醋溜绿豆芽", ("蔬菜",)),
            ("萝卜小排汤", ("汤",)),
            ("上海炒饭", ("主食",)),
        ),
    ),
    (
        "周五",
        "#FFD1FF",
        (
            ("油焖大虾", ("大荤", "海鲜")),
            ("百叶包肉", ("小荤",)),
            ("荷塘小炒", ("蔬菜",)),
            ("罗宋汤", ("汤",)),
            ("意大利肉酱面", ("主食",)),
            ("自制蛋挞", ("点心",)),
        ),
    ),
)


def _build_initial_week() -> tuple[DayMenu, ...]:
    counter = 0
    days: list[DayMenu] = []
    for label, color, slots in _TEMPLATE:
        entries: list[MenuEntry] = []
        for dish_name, tags in slots:
            entries.append(MenuEntry(id=f"entry-{counter}", dish_name=dish_name, tags=tags))
            counter += 1
        days.append(DayMenu(day=label, color=color, entries=tuple(entries)))
    return tuple(days)


INITIAL_WEEKLY_MENU: tuple[DayMenu, ...] = _build_initial_week()


def initial_state() -> MenuState:
    """State of a store that has never been persisted."""

    return MenuState(
        dishes=DEFAULT_DISHES,
        tags=DEFAULT_TAGS,
        ingredients=DEFAULT_INGREDIENTS,
        weekly_menu=INITIAL_WEEKLY_MENU,
        background=DEFAULT_BACKGROUND,
    )
