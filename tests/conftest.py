"""Shared fixtures for the KitchenOPS test suite."""

import pytest

from KitchenOPS.core.manager import StationManager
from KitchenOPS.domain.dish import Appetizer, Dessert, MainCourse
from KitchenOPS.domain.ingredients import Ingredient
from KitchenOPS.domain.station import KitchenStation


def stock(name, quantity, unit_price=0.0):
    return Ingredient(name=name, quantity=quantity, unit_price=unit_price)


def need(name, required_quantity):
    return Ingredient(name=name, required_quantity=required_quantity)


@pytest.fixture
def chicken_plate():
    """Main course needing 3 Chicken."""
    return MainCourse(name="Chicken Plate", ingredients=[need("Chicken", 3)])


@pytest.fixture
def salad():
    return Appetizer(
        name="Green Salad", ingredients=[need("Lettuce", 2), need("Tomato", 1)]
    )


@pytest.fixture
def cake():
    return Dessert(
        name="Chocolate Cake",
        ingredients=[need("Flour", 2), need("Eggs", 2), need("Chocolate", 1)],
    )


@pytest.fixture
def grill(chicken_plate):
    """Station "Grill" stocked with 2 Chicken and assigned Chicken Plate."""
    station = KitchenStation(name="Grill")
    station.assign_dish(chicken_plate)
    station.replenish(stock("Chicken", 2, 4.5))
    return station


@pytest.fixture
def manager(grill):
    """Manager with the Grill station and 5 Chicken in backup."""
    manager = StationManager()
    manager.add_station(grill)
    manager.add_backup_ingredient(stock("Chicken", 5, 4.5))
    return manager
