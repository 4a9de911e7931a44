"""
Unit tests for StationManager: station collection and dish queue.
"""

import pytest

from KitchenOPS.core.manager import StationManager
from KitchenOPS.domain.dish import DietaryRequest, MainCourse
from KitchenOPS.domain.station import KitchenStation

from conftest import need, stock


@pytest.fixture
def three_stations():
    manager = StationManager()
    for name in ("Grill", "Fryer", "Pastry"):
        manager.add_station(KitchenStation(name=name))
    return manager


class TestStationCollection:
    """Test insert / remove / find / reorder."""

    def test_add_keeps_order(self, three_stations):
        assert three_stations.station_names() == ["Grill", "Fryer", "Pastry"]
        assert len(three_stations) == 3

    def test_add_rejects_duplicate_name(self, three_stations):
        assert not three_stations.add_station(KitchenStation(name="Fryer"))
        assert len(three_stations) == 3

    @pytest.mark.parametrize("station", [None, KitchenStation(name="")])
    def test_add_rejects_invalid(self, station):
        assert not StationManager().add_station(station)

    def test_find(self, three_stations):
        assert three_stations.find_station("Fryer").name == "Fryer"
        assert three_stations.find_station("Wok") is None

    def test_remove(self, three_stations):
        assert three_stations.remove_station("Fryer")
        assert three_stations.station_names() == ["Grill", "Pastry"]
        assert not three_stations.remove_station("Fryer")

    def test_move_to_front(self, three_stations):
        assert three_stations.move_station_to_front("Pastry")
        assert three_stations.station_names() == ["Pastry", "Grill", "Fryer"]

    def test_move_first_is_noop_success(self, three_stations):
        assert three_stations.move_station_to_front("Grill")
        assert three_stations.station_names() == ["Grill", "Fryer", "Pastry"]

    def test_move_unknown(self, three_stations):
        assert not three_stations.move_station_to_front("Wok")
        assert three_stations.station_names() == ["Grill", "Fryer", "Pastry"]

    def test_constructor_accepts_stations(self):
        manager = StationManager(stations=[KitchenStation(name="A"), KitchenStation(name="A")])
        assert manager.station_names() == ["A"]


class TestMergeStations:
    """Test folding one station into another."""

    def _station(self, name, dishes, ingredients):
        station = KitchenStation(name=name)
        for dish in dishes:
            station.assign_dish(dish)
        for ingredient in ingredients:
            station.replenish(ingredient)
        return station

    def test_merge_transfers_dishes_and_stock(self, chicken_plate, salad):
        manager = StationManager()
        manager.add_station(self._station("Grill", [chicken_plate], [stock("Chicken", 2)]))
        manager.add_station(
            self._station("Cold", [salad, chicken_plate], [stock("Chicken", 1), stock("Lettuce", 4)])
        )

        assert manager.merge_stations("Grill", "Cold")

        grill = manager.find_station("Grill")
        assert manager.station_names() == ["Grill"]
        assert [dish.name for dish in grill.get_dishes()] == ["Chicken Plate", "Green Salad"]
        assert grill.ledger.snapshot() == {"Chicken": 3, "Lettuce": 4}

    def test_merge_is_order_independent(self):
        """Summed quantities do not depend on insertion order in either ledger."""
        first = [stock("Rice", 1), stock("Chicken", 2), stock("Beans", 3)]
        second = [stock("Beans", 4), stock("Rice", 5)]

        results = []
        for a_stock, b_stock in ((first, second), (first[::-1], second[::-1])):
            manager = StationManager()
            manager.add_station(self._station("X", [], a_stock))
            manager.add_station(self._station("Y", [], b_stock))
            manager.merge_stations("X", "Y")
            results.append(manager.find_station("X").ledger.snapshot())

        assert results[0] == results[1] == {"Rice": 6, "Chicken": 2, "Beans": 7}

    @pytest.mark.parametrize("names", [("Grill", "Wok"), ("Wok", "Grill"), ("Grill", "Grill")])
    def test_merge_failures(self, three_stations, names):
        assert not three_stations.merge_stations(*names)
        assert three_stations.station_names() == ["Grill", "Fryer", "Pastry"]


class TestStationDelegation:
    """Test manager operations addressed to one station."""

    def test_assign_and_replenish(self, chicken_plate):
        manager = StationManager()
        manager.add_station(KitchenStation(name="Grill"))
        assert manager.assign_dish_to_station("Grill", chicken_plate)
        assert not manager.assign_dish_to_station("Grill", chicken_plate)
        assert not manager.assign_dish_to_station("Wok", chicken_plate)
        assert manager.replenish_ingredient_at_station("Grill", stock("Chicken", 3))
        assert not manager.replenish_ingredient_at_station("Wok", stock("Chicken", 3))

        assert manager.can_complete_order("Chicken Plate")
        assert manager.prepare_dish_at_station("Grill", "Chicken Plate")
        assert not manager.prepare_dish_at_station("Grill", "Chicken Plate")
        assert not manager.prepare_dish_at_station("Wok", "Chicken Plate")
        assert not manager.can_complete_order("Chicken Plate")


class TestDishQueue:
    """Test the FIFO queue and single-dish preparation."""

    def test_fifo_order(self, manager, chicken_plate, salad, cake):
        for dish in (chicken_plate, salad, cake):
            manager.add_dish_to_queue(dish)
        assert [d.name for d in manager.dish_queue] == [
            "Chicken Plate",
            "Green Salad",
            "Chocolate Cake",
        ]

    def test_none_is_ignored(self, manager):
        manager.add_dish_to_queue(None)
        assert manager.dish_queue == []

    def test_dietary_request_applied_before_enqueue(self, manager, salad):
        dish = MainCourse(
            name="Steak Frites",
            ingredients=[need("Beef", 1), need("Potato", 2), need("Butter", 1)],
        )
        manager.add_dish_to_queue(salad)
        manager.add_dish_to_queue(dish, DietaryRequest(vegetarian=True, vegan=True))

        queued = manager.dish_queue
        assert [d.name for d in queued] == ["Green Salad", "Steak Frites"]
        assert [i.name for i in queued[1].ingredients] == ["Beans", "Potato"]
        assert queued[1].protein_type == "Tofu"

    def test_prepare_next_dish_success(self, manager, chicken_plate, salad):
        manager.replenish_ingredient_at_station("Grill", stock("Chicken", 1))
        manager.add_dish_to_queue(chicken_plate)
        manager.add_dish_to_queue(salad)
        assert manager.prepare_next_dish()
        assert [d.name for d in manager.dish_queue] == ["Green Salad"]

    def test_prepare_next_dish_failure_keeps_front(self, manager, chicken_plate, salad):
        """No backup draw: the Grill only has 2 of the 3 Chicken needed."""
        manager.add_dish_to_queue(chicken_plate)
        manager.add_dish_to_queue(salad)
        assert not manager.prepare_next_dish()
        assert [d.name for d in manager.dish_queue] == ["Chicken Plate", "Green Salad"]
        assert manager.backup.quantity_of("Chicken") == 5

    def test_prepare_next_dish_empty_queue(self, manager):
        assert not manager.prepare_next_dish()

    def test_prepare_next_dish_uses_first_able_station(self, chicken_plate):
        manager = StationManager()
        for name, chicken in (("Empty", 0), ("Stocked", 3), ("Also", 3)):
            station = KitchenStation(name=name)
            station.assign_dish(chicken_plate)
            station.replenish(stock("Chicken", chicken))
            manager.add_station(station)
        manager.add_dish_to_queue(chicken_plate)
        assert manager.prepare_next_dish()
        assert manager.find_station("Stocked").ledger.quantity_of("Chicken") == 0
        assert manager.find_station("Also").ledger.quantity_of("Chicken") == 3

    def test_set_and_clear(self, manager, chicken_plate, salad):
        manager.set_dish_queue([salad, chicken_plate])
        assert [d.name for d in manager.dish_queue] == ["Green Salad", "Chicken Plate"]
        manager.clear_dish_queue()
        assert manager.dish_queue == []

    def test_dish_queue_is_a_copy(self, manager, salad):
        manager.add_dish_to_queue(salad)
        manager.dish_queue.clear()
        assert len(manager.dish_queue) == 1
