# kitchenops/domain/types.py
from enum import Enum


class DishType(str, Enum):
    # Values aligned with the CSV labels and the pydantic discriminator
    APPETIZER = "APPETIZER"
    MAINCOURSE = "MAINCOURSE"
    DESSERT = "DESSERT"


class CuisineType(str, Enum):
    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"


class ServingStyle(str, Enum):
    PLATED = "PLATED"
    FAMILY_STYLE = "FAMILY_STYLE"
    BUFFET = "BUFFET"


class CookingMethod(str, Enum):
    GRILLED = "GRILLED"
    BAKED = "BAKED"
    BOILED = "BOILED"
    FRIED = "FRIED"
    STEAMED = "STEAMED"
    RAW = "RAW"


class SideCategory(str, Enum):
    GRAIN = "GRAIN"
    PASTA = "PASTA"
    LEGUME = "LEGUME"
    BREAD = "BREAD"
    SALAD = "SALAD"
    SOUP = "SOUP"
    STARCHES = "STARCHES"
    VEGETABLE = "VEGETABLE"


class FlavorProfile(str, Enum):
    SWEET = "SWEET"
    BITTER = "BITTER"
    SOUR = "SOUR"
    SALTY = "SALTY"
    UMAMI = "UMAMI"


def parse_label(enum_cls, label: str, default):
    """Map a text label to a member of `enum_cls`, falling back to `default`."""
    try:
        return enum_cls(label.strip().upper())
    except ValueError:
        return default
