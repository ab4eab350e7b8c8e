from typing import Final, Dict, Tuple

# Seasons
ANY_SEASON: Final[str] = "any"
SEASONS: Final[Tuple[str, ...]] = ("spring", "summer", "autumn", "winter")

# Dish categories, in menu order
MAIN: Final[str] = "main"
SIDE: Final[str] = "side"
SOUP: Final[str] = "soup"
STAPLE: Final[str] = "staple"
MENU_CATEGORIES: Final[Tuple[str, ...]] = (MAIN, SIDE, SOUP, STAPLE)

# Filter pipeline: fewer eligible recipes than this triggers one relaxed re-run
RELAXATION_THRESHOLD: Final[int] = 10

PARTY_SIZE_MIN: Final[int] = 1
PARTY_SIZE_MAX: Final[int] = 20

# Daily reference intake for an adult
REFERENCE_DAILY_VALUES: Final[Dict[str, float]] = {
    "calories": 2000,
    "protein": 60,
    "carbohydrate": 300,
    "fat": 67,
    "fiber": 25,
}

# nutrient -> (low below, high above, in-band label)
NUTRITION_BANDS: Final[Dict[str, Tuple[float, float, str]]] = {
    "calories": (0.7, 1.3, "adequate"),
    "protein": (0.8, 1.2, "sufficient"),
    "fat": (0.7, 1.3, "adequate"),
}
LOW: Final[str] = "low"
HIGH: Final[str] = "high"

VERDICT_DEFICIENT: Final[str] = "nutritionally deficient"
VERDICT_EXCESSIVE: Final[str] = "nutritionally excessive"
VERDICT_BALANCED: Final[str] = "balanced"
VERDICT_PARTIAL: Final[str] = "partially balanced"

NUTRITION_SUGGESTIONS: Final[Dict[Tuple[str, str], str]] = {
    ("calories", LOW): "Add more staples or protein-rich dishes.",
    ("calories", HIGH): "Cut back on cooking oil or staples.",
    ("protein", LOW): "Add more meat, soy products, eggs or dairy.",
    ("protein", HIGH): "Swap one meat dish for a vegetable dish.",
    ("fat", LOW): "A little nuts, seeds or oil would round out the fat intake.",
    ("fat", HIGH): "Reduce fried or high-fat ingredients.",
}
BALANCED_SUGGESTION: Final[str] = "Menu is balanced, keep it up."

# Shopping list categories, in display order
VEGETABLE: Final[str] = "vegetable"
MEAT: Final[str] = "meat"
SEAFOOD: Final[str] = "seafood"
CONDIMENT: Final[str] = "condiment"
STAPLE_FOOD: Final[str] = "staple"
OTHER: Final[str] = "other"
SHOPPING_CATEGORIES: Final[Tuple[str, ...]] = (VEGETABLE, MEAT, SEAFOOD, CONDIMENT, STAPLE_FOOD, OTHER)

# Ordered keyword table: the first category whose keyword is a substring of the
# ingredient name wins; no hit -> OTHER. Compound names that contain a keyword
# of an earlier table come first.
INGREDIENT_CATEGORY_KEYWORDS: Final[Tuple[Tuple[str, Tuple[str, ...]], ...]] = (
    (SEAFOOD, ("sea cucumber",)),
    (VEGETABLE, (
        "cabbage", "lettuce", "spinach", "bok choy", "bamboo shoot", "mushroom", "bell pepper",
        "chili", "cucumber", "eggplant", "tomato", "carrot", "radish", "potato", "celery",
        "broccoli", "onion", "scallion", "garlic", "ginger", "green bean", "zucchini", "pumpkin", "melon",
    )),
    (MEAT, (
        "pork", "beef", "lamb", "mutton", "chicken", "duck", "rib", "tenderloin", "bacon",
        "ham", "sausage", "liver", "tripe", "trotter",
    )),
    (SEAFOOD, (
        "fish", "shrimp", "prawn", "crab", "clam", "scallop", "mussel", "squid", "salmon", "cod",
    )),
    (CONDIMENT, (
        "oil", "salt", "sauce", "vinegar", "sugar", "cooking wine", "soy", "paste", "pepper",
        "star anise", "cinnamon", "spice",
    )),
    (STAPLE_FOOD, (
        "rice", "noodle", "flour", "bread", "bun", "dumpling", "porridge", "pasta", "tortilla",
    )),
)

DEFAULT_UNIT: Final[str] = "to taste"

SHOPPING_TIPS: Final[Dict[str, str]] = {
    VEGETABLE: "Buy vegetables fresh and use them the same day.",
    MEAT: "Meat can be bought ahead and frozen; thaw before use.",
    SEAFOOD: "Buy seafood on the day you cook it.",
    "by_category": "Shop category by category to save time.",
    "default": "Buy according to the list.",
}

# Cooking tips
SEASON_TIPS: Final[Dict[str, str]] = {
    "spring": "Spring produce is tender; keep cooking times short to preserve flavour.",
    "summer": "It is hot out; favour cold dishes and steaming.",
    "autumn": "Autumn air is dry; drink plenty and consider an extra soup.",
    "winter": "It is cold; warming, hearty dishes go down well.",
}
LARGE_PARTY_SIZE: Final[int] = 8
LARGE_PARTY_TIP: Final[str] = "Many guests: prepare ahead and plan the cooking order."
LONG_COOKING_MINUTES: Final[int] = 120
LONG_COOKING_TIP: Final[str] = "Total cooking time is long; plan ahead and prepare in stages."
