from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from KitchenOPS.domain.ingredients import Ingredient
from KitchenOPS.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class BackupInventory:
    """
    Shared reserve used to top up any station on shortfall.

    Only mutated through `add`, `replace`, `clear` and `withdraw`; a
    withdrawal is all-or-nothing and prunes entries that reach zero.
    """

    stock: Dict[str, Ingredient] = field(default_factory=dict)

    def add(self, ingredient: Ingredient) -> None:
        current = self.stock.get(ingredient.name)
        if current is not None:
            current.quantity += ingredient.quantity
        elif ingredient.quantity > 0:
            self.stock[ingredient.name] = ingredient.model_copy()

    def replace(self, ingredients: Iterable[Ingredient]) -> None:
        self.stock = {}
        for ingredient in ingredients:
            self.add(ingredient)

    def clear(self) -> None:
        self.stock.clear()

    def withdraw(self, name: str, quantity: int) -> Optional[Ingredient]:
        """
        Take exactly `quantity` units of `name` out of the reserve.

        Returns the withdrawn units as a new Ingredient (carrying the reserve's
        unit price), or None when the ingredient is absent, the quantity is not
        positive, or the reserve holds less than requested.
        """
        current = self.stock.get(name)
        if current is None or quantity <= 0 or current.quantity < quantity:
            logger.debug(
                "Backup withdrawal refused: %s x%d (on hand %d)",
                name,
                quantity,
                self.quantity_of(name),
            )
            return None
        current.quantity -= quantity
        withdrawn = current.with_quantity(quantity)
        if current.quantity == 0:
            del self.stock[name]
        return withdrawn

    def quantity_of(self, name: str) -> int:
        current = self.stock.get(name)
        return current.quantity if current is not None else 0

    def ingredients(self) -> List[Ingredient]:
        return [ingredient.model_copy() for ingredient in self.stock.values()]

    def snapshot(self) -> Dict[str, int]:
        return {name: ingredient.quantity for name, ingredient in self.stock.items()}

    def __len__(self) -> int:
        return len(self.stock)

    def __contains__(self, name: object) -> bool:
        return name in self.stock
