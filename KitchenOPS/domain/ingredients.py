# kitchenops/domain/ingredients.py
"""
Ingredient record shared by recipes, station ledgers and the backup store.

The same model plays two roles:
  - inside a recipe, `required_quantity` is the amount one preparation needs;
  - inside a ledger or the backup store, `quantity` is the stock on hand.
"""

from typing import Dict, Iterable

from pydantic import BaseModel, Field


class Ingredient(BaseModel):
    name: str
    quantity: int = Field(default=0, ge=0, description="Stock on hand")
    required_quantity: int = Field(
        default=0, ge=0, description="Needed per preparation"
    )
    unit_price: float = Field(default=0.0, ge=0)

    def with_quantity(self, quantity: int) -> "Ingredient":
        """Copy of this record carrying `quantity` units of stock."""
        return self.model_copy(update={"quantity": int(quantity)})

    def display(self) -> str:
        return f"{self.name} x{self.quantity} @ {self.unit_price:.2f}"


def required_totals(ingredients: Iterable[Ingredient]) -> Dict[str, int]:
    """Sum the required quantities of a recipe per ingredient name.

    Order follows the first appearance of each name. A recipe listing the
    same ingredient on two lines needs both amounts at once.

    Exemple
    -------
    >>> required_totals([
    ...     Ingredient(name="Chicken", required_quantity=2),
    ...     Ingredient(name="Rice", required_quantity=1),
    ...     Ingredient(name="Chicken", required_quantity=1),
    ... ])
    {'Chicken': 3, 'Rice': 1}
    """
    totals: Dict[str, int] = {}
    for ingredient in ingredients:
        totals[ingredient.name] = (
            totals.get(ingredient.name, 0) + ingredient.required_quantity
        )
    return totals
