from dataclasses import dataclass, field
from typing import Dict, List, Optional

from KitchenOPS.domain.dish import OrderableItem
from KitchenOPS.domain.ingredients import Ingredient
from KitchenOPS.domain.ledger import IngredientLedger
from KitchenOPS.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class KitchenStation:
    """A kitchen station: the dishes it knows how to make and its own stock.

    Attributes:
        name: Unique key of the station inside a manager.
        ledger: Stock owned by this station only.
        dishes: Assigned dishes keyed by name (the station's capabilities).
    """

    name: str
    ledger: IngredientLedger = field(default_factory=IngredientLedger)
    dishes: Dict[str, OrderableItem] = field(default_factory=dict)

    def assign_dish(self, dish: Optional[OrderableItem]) -> bool:
        """Add `dish` to the capabilities. False if None or already assigned."""
        if dish is None or dish.name in self.dishes:
            return False
        self.dishes[dish.name] = dish
        logger.debug("%s: assigned %s", self.name, dish.name)
        return True

    def has_dish(self, dish_name: str) -> bool:
        return dish_name in self.dishes

    def get_dish(self, dish_name: str) -> Optional[OrderableItem]:
        return self.dishes.get(dish_name)

    def get_dishes(self) -> List[OrderableItem]:
        return list(self.dishes.values())

    def replenish(self, ingredient: Ingredient) -> None:
        self.ledger.replenish(ingredient)

    def get_ingredients_stock(self) -> List[Ingredient]:
        return self.ledger.ingredients()

    def can_complete_order(self, dish_name: str) -> bool:
        dish = self.dishes.get(dish_name)
        if dish is None:
            return False
        return self.ledger.can_supply(dish)

    def prepare_dish(self, dish_name: str) -> bool:
        """Consume one preparation of `dish_name`; nothing changes on failure."""
        if not self.can_complete_order(dish_name):
            return False
        prepared = self.ledger.consume(self.dishes[dish_name])
        if prepared:
            logger.debug("%s: prepared %s", self.name, dish_name)
        return prepared
