# Paramètres cuisine (tables diététiques, format des fichiers, valeurs par défaut)

from pathlib import Path

# --- Logging ---
APP_LOGGER_NAME = "kitchen_ops"

# --- Fichiers de démo ---
DATA_DIR = Path(__file__).resolve().parent
DEFAULT_DISHES_CSV = DATA_DIR / "dishes.csv"
DEFAULT_KITCHEN_CONFIG = DATA_DIR / "kitchen_config.json"

# --- Format CSV des plats ---
CSV_FIELD_SEPARATOR = ","
CSV_LIST_SEPARATOR = ";"
CSV_PAIR_SEPARATOR = ":"
CSV_SIDE_SEPARATOR = "|"
DEFAULT_DISH_NAME = "UNKNOWN"

# --- Tables diététiques ---
NON_VEGETARIAN_INGREDIENTS = frozenset(
    {"Meat", "Chicken", "Fish", "Beef", "Pork", "Lamb", "Shrimp", "Bacon"}
)
# Remplacements successifs des ingrédients carnés (au-delà : suppression)
VEGETARIAN_SUBSTITUTES = ("Beans", "Mushrooms")
VEGETARIAN_PROTEIN = "Tofu"

DAIRY_AND_EGG_INGREDIENTS = frozenset(
    {"Milk", "Eggs", "Cheese", "Butter", "Cream", "Yogurt"}
)
GLUTEN_INGREDIENTS = frozenset(
    {"Wheat", "Flour", "Bread", "Pasta", "Barley", "Rye", "Oats", "Crust"}
)
NUT_INGREDIENTS = frozenset(
    {"Almonds", "Walnuts", "Pecans", "Hazelnuts", "Peanuts", "Cashews", "Pistachios"}
)
GLUTEN_SIDE_CATEGORIES = frozenset({"GRAIN", "PASTA", "BREAD", "STARCHES"})

LOW_SODIUM_SPICINESS_DROP = 2
LOW_SUGAR_SWEETNESS_DROP = 3
