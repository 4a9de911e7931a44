# kitchenops/domain/dish.py
"""
Dishes that can be ordered from the kitchen.

The station pipeline only relies on the `OrderableItem` protocol: a name, an
ordered recipe and a dietary-adjustment hook. The concrete dishes below form
a tagged union on `dish_type`, so loaders validate raw records straight into
the right variant.
"""

from typing import Annotated, List, Literal, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field, field_validator

from KitchenOPS.data.kitchen_params import (
    DAIRY_AND_EGG_INGREDIENTS,
    DEFAULT_DISH_NAME,
    GLUTEN_INGREDIENTS,
    GLUTEN_SIDE_CATEGORIES,
    LOW_SODIUM_SPICINESS_DROP,
    LOW_SUGAR_SWEETNESS_DROP,
    NON_VEGETARIAN_INGREDIENTS,
    NUT_INGREDIENTS,
    VEGETARIAN_PROTEIN,
    VEGETARIAN_SUBSTITUTES,
)
from KitchenOPS.domain.ingredients import Ingredient
from KitchenOPS.domain.types import (
    CookingMethod,
    CuisineType,
    FlavorProfile,
    ServingStyle,
    SideCategory,
)


class DietaryRequest(BaseModel):
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False


@runtime_checkable
class OrderableItem(Protocol):
    """What the station pipeline needs from anything it prepares."""

    name: str
    ingredients: List[Ingredient]

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None: ...


# -------- Règles diététiques communes --------


def _substitute_meat(ingredients: List[Ingredient]) -> List[Ingredient]:
    """Rename the first meat lines to the vegetarian substitutes, drop the rest."""
    substitutes = list(VEGETARIAN_SUBSTITUTES)
    adjusted: List[Ingredient] = []
    for ingredient in ingredients:
        if ingredient.name not in NON_VEGETARIAN_INGREDIENTS:
            adjusted.append(ingredient)
        elif substitutes:
            adjusted.append(ingredient.model_copy(update={"name": substitutes.pop(0)}))
    return adjusted


def _without(ingredients: List[Ingredient], banned) -> List[Ingredient]:
    return [ingredient for ingredient in ingredients if ingredient.name not in banned]


# -------- Plats --------


class Dish(BaseModel):
    """Base dish: name, recipe and menu attributes."""

    name: str
    ingredients: List[Ingredient] = Field(default_factory=list)
    prep_time: int = Field(default=0, ge=0, description="Minutes")
    price: float = Field(default=0.0, ge=0)
    cuisine_type: CuisineType = CuisineType.OTHER

    @field_validator("name")
    @classmethod
    def _letters_and_spaces_only(cls, value: str) -> str:
        if all(c.isalpha() or c.isspace() for c in value):
            return value
        return DEFAULT_DISH_NAME

    def same_dish(self, other: "Dish") -> bool:
        """Menu equality: name, cuisine, prep time and price all match."""
        return (
            self.name == other.name
            and self.cuisine_type == other.cuisine_type
            and self.prep_time == other.prep_time
            and self.price == other.price
        )

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None:
        return None


class Appetizer(Dish):
    dish_type: Literal["APPETIZER"] = "APPETIZER"
    serving_style: ServingStyle = ServingStyle.BUFFET
    spiciness_level: int = Field(default=0, ge=0)
    vegetarian: bool = False

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None:
        if request.vegetarian:
            self.vegetarian = True
            self.ingredients = _substitute_meat(self.ingredients)
        if request.low_sodium:
            self.spiciness_level = max(
                0, self.spiciness_level - LOW_SODIUM_SPICINESS_DROP
            )
        if request.gluten_free:
            self.ingredients = _without(self.ingredients, GLUTEN_INGREDIENTS)


class SideDish(BaseModel):
    name: str
    category: SideCategory = SideCategory.VEGETABLE


class MainCourse(Dish):
    dish_type: Literal["MAINCOURSE"] = "MAINCOURSE"
    cooking_method: CookingMethod = CookingMethod.RAW
    protein_type: str = DEFAULT_DISH_NAME
    side_dishes: List[SideDish] = Field(default_factory=list)
    gluten_free: bool = False

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None:
        if request.vegetarian:
            self.protein_type = VEGETARIAN_PROTEIN
            self.ingredients = _substitute_meat(self.ingredients)
        if request.vegan:
            self.protein_type = VEGETARIAN_PROTEIN
            self.ingredients = _without(self.ingredients, DAIRY_AND_EGG_INGREDIENTS)
        if request.gluten_free:
            self.gluten_free = True
            self.side_dishes = [
                side
                for side in self.side_dishes
                if side.category.value not in GLUTEN_SIDE_CATEGORIES
            ]


class Dessert(Dish):
    dish_type: Literal["DESSERT"] = "DESSERT"
    flavor_profile: FlavorProfile = FlavorProfile.UMAMI
    sweetness_level: int = Field(default=0, ge=0)
    contains_nuts: bool = False

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None:
        if request.nut_free:
            self.contains_nuts = False
            self.ingredients = _without(self.ingredients, NUT_INGREDIENTS)
        if request.low_sugar:
            self.sweetness_level = max(
                0, self.sweetness_level - LOW_SUGAR_SWEETNESS_DROP
            )
        if request.vegan:
            self.ingredients = _without(self.ingredients, DAIRY_AND_EGG_INGREDIENTS)


AnyDish = Annotated[
    Union[Appetizer, MainCourse, Dessert], Field(discriminator="dish_type")
]


class DishRecord(BaseModel):
    """Wrapper used to validate one raw dish record into its variant."""

    dish: AnyDish
