from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from KitchenOPS.domain.dish import OrderableItem
from KitchenOPS.domain.ingredients import Ingredient, required_totals
from KitchenOPS.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class IngredientLedger:
    """
    On-hand stock of one kitchen station:
      - stock[name] -> Ingredient whose `quantity` is the units on hand

    Keyed by name, so one entry per ingredient. An entry that drops to zero
    is removed: a missing ingredient and an empty one are the same thing.
    """

    stock: Dict[str, Ingredient] = field(default_factory=dict)

    # -------- Réassort --------

    def replenish(self, ingredient: Ingredient) -> None:
        """Add `ingredient.quantity` units, creating the entry if needed."""
        current = self.stock.get(ingredient.name)
        if current is not None:
            current.quantity += ingredient.quantity
        elif ingredient.quantity > 0:
            self.stock[ingredient.name] = ingredient.model_copy()
        logger.debug(
            "Replenished %s +%d (now %d)",
            ingredient.name,
            ingredient.quantity,
            self.quantity_of(ingredient.name),
        )

    # -------- Disponibilité / consommation --------

    def can_supply(self, item: OrderableItem) -> bool:
        """
        True if every required ingredient of `item` is stocked in sufficient
        quantity. Stops at the first shortfall, never mutates the ledger.
        """
        for name, required in required_totals(item.ingredients).items():
            current = self.stock.get(name)
            if current is None or current.quantity < required:
                return False
        return True

    def consume(self, item: OrderableItem) -> bool:
        """
        Deduct one preparation of `item` from stock.

        Either every required ingredient is decremented or nothing is: the
        supply check runs first and a shortfall returns False untouched.
        Entries reaching zero are pruned.
        """
        if not self.can_supply(item):
            return False
        for name, required in required_totals(item.ingredients).items():
            current = self.stock[name]
            current.quantity -= required
            if current.quantity == 0:
                del self.stock[name]
        return True

    # -------- Aides diverses --------

    def quantity_of(self, name: str) -> int:
        current = self.stock.get(name)
        return current.quantity if current is not None else 0

    def remove(self, name: str) -> bool:
        return self.stock.pop(name, None) is not None

    def ingredients(self) -> List[Ingredient]:
        """Copies of the stock entries, in insertion order."""
        return [ingredient.model_copy() for ingredient in self.stock.values()]

    def snapshot(self) -> Dict[str, int]:
        """Simple view of the stock: {ingredient: quantity}."""
        return {name: ingredient.quantity for name, ingredient in self.stock.items()}

    def total_value(self) -> float:
        """Stock valued at unit price."""
        if not self.stock:
            return 0.0
        quantities = np.array([i.quantity for i in self.stock.values()], dtype=float)
        prices = np.array([i.unit_price for i in self.stock.values()], dtype=float)
        return round(float(np.dot(quantities, prices)), 2)

    def __len__(self) -> int:
        return len(self.stock)

    def __contains__(self, name: object) -> bool:
        return name in self.stock
