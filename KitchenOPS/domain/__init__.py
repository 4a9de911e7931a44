"""
Domain objects for KitchenOPS.

Ingredients, dishes, per-station ledgers, kitchen stations and the backup
reserve. Records are pydantic models; containers are plain dataclasses
so they can be built and inspected directly in tests.
"""

from .backup import BackupInventory
from .dish import Appetizer, DietaryRequest, Dessert, Dish, MainCourse, OrderableItem
from .ingredients import Ingredient
from .ledger import IngredientLedger
from .station import KitchenStation

__all__ = [
    "Appetizer",
    "BackupInventory",
    "DietaryRequest",
    "Dessert",
    "Dish",
    "Ingredient",
    "IngredientLedger",
    "KitchenStation",
    "MainCourse",
    "OrderableItem",
]
