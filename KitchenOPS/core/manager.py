"""
Station manager: the ordered list of kitchen stations, the shared backup
reserve and the FIFO queue of dishes waiting to be prepared.

Every operation reports failure as False / None; nothing here raises for an
unknown station, a missing ingredient or a duplicate.
"""

from collections import deque
from typing import Deque, Iterable, List, Optional

from KitchenOPS.core.results import BatchReport, DishOutcome, StationAttempt
from KitchenOPS.domain.backup import BackupInventory
from KitchenOPS.domain.dish import DietaryRequest, OrderableItem
from KitchenOPS.domain.ingredients import Ingredient, required_totals
from KitchenOPS.domain.station import KitchenStation
from KitchenOPS.logging_config import get_logger

logger = get_logger(__name__)


class StationManager:
    """Owns the stations, the backup reserve and the dish queue."""

    def __init__(
        self,
        stations: Optional[Iterable[KitchenStation]] = None,
        backup: Optional[BackupInventory] = None,
    ) -> None:
        self.stations: List[KitchenStation] = []
        self.backup: BackupInventory = backup if backup is not None else BackupInventory()
        self._dish_queue: Deque[OrderableItem] = deque()
        for station in stations or []:
            self.add_station(station)

    # ------------------------------------------------------------------
    # Station collection
    # ------------------------------------------------------------------

    def add_station(self, station: Optional[KitchenStation]) -> bool:
        """Append `station`. False for None, an empty name or a taken name."""
        if station is None or not station.name:
            return False
        if self.find_station(station.name) is not None:
            logger.debug("Station %s already registered", station.name)
            return False
        self.stations.append(station)
        return True

    def remove_station(self, station_name: str) -> bool:
        index = self._station_index(station_name)
        if index < 0:
            return False
        del self.stations[index]
        return True

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        for station in self.stations:
            if station.name == station_name:
                return station
        return None

    def station_names(self) -> List[str]:
        return [station.name for station in self.stations]

    def move_station_to_front(self, station_name: str) -> bool:
        index = self._station_index(station_name)
        if index < 0:
            return False
        if index > 0:
            self.stations.insert(0, self.stations.pop(index))
        return True

    def merge_stations(self, station_name1: str, station_name2: str) -> bool:
        """
        Fold the second station into the first one.

        Every dish of station 2 is assigned to station 1 (dishes it already
        has are skipped) and every stocked ingredient is added to station 1's
        ledger, then station 2 is removed.
        """
        if station_name1 == station_name2:
            return False
        station1 = self.find_station(station_name1)
        station2 = self.find_station(station_name2)
        if station1 is None or station2 is None:
            return False
        for dish in station2.get_dishes():
            station1.assign_dish(dish)
        for ingredient in station2.get_ingredients_stock():
            station1.replenish(ingredient)
        self.remove_station(station_name2)
        logger.info("Merged %s into %s", station_name2, station_name1)
        return True

    def assign_dish_to_station(self, station_name: str, dish: OrderableItem) -> bool:
        station = self.find_station(station_name)
        if station is None:
            return False
        return station.assign_dish(dish)

    def replenish_ingredient_at_station(
        self, station_name: str, ingredient: Ingredient
    ) -> bool:
        station = self.find_station(station_name)
        if station is None:
            return False
        station.replenish(ingredient)
        return True

    def can_complete_order(self, dish_name: str) -> bool:
        """True if any station can prepare `dish_name` from its own stock."""
        return any(station.can_complete_order(dish_name) for station in self.stations)

    def prepare_dish_at_station(self, station_name: str, dish_name: str) -> bool:
        station = self.find_station(station_name)
        if station is None:
            return False
        return station.prepare_dish(dish_name)

    def _station_index(self, station_name: str) -> int:
        for index, station in enumerate(self.stations):
            if station.name == station_name:
                return index
        return -1

    def __len__(self) -> int:
        return len(self.stations)

    # ------------------------------------------------------------------
    # Backup reserve
    # ------------------------------------------------------------------

    def backup_ingredients(self) -> List[Ingredient]:
        return self.backup.ingredients()

    def add_backup_ingredients(self, ingredients: Iterable[Ingredient]) -> bool:
        """Replace the whole reserve with `ingredients`."""
        self.backup.replace(ingredients)
        return True

    def add_backup_ingredient(self, ingredient: Ingredient) -> bool:
        self.backup.add(ingredient)
        return True

    def clear_backup_ingredients(self) -> None:
        self.backup.clear()

    def replenish_station_from_backup(
        self, station_name: str, ingredient_name: str, quantity: int
    ) -> bool:
        """
        Move exactly `quantity` units of `ingredient_name` from the reserve to
        the station's ledger. All-or-nothing: False if the station is unknown
        or the reserve cannot cover the whole amount.
        """
        station = self.find_station(station_name)
        if station is None:
            return False
        withdrawn = self.backup.withdraw(ingredient_name, quantity)
        if withdrawn is None:
            return False
        station.replenish(withdrawn)
        logger.debug(
            "%s: +%d %s from backup (%d left)",
            station_name,
            quantity,
            ingredient_name,
            self.backup.quantity_of(ingredient_name),
        )
        return True

    # ------------------------------------------------------------------
    # Dish queue
    # ------------------------------------------------------------------

    @property
    def dish_queue(self) -> List[OrderableItem]:
        """Copy of the queue, front first."""
        return list(self._dish_queue)

    def set_dish_queue(self, dishes: Iterable[OrderableItem]) -> None:
        self._dish_queue = deque(dishes)

    def add_dish_to_queue(
        self, dish: Optional[OrderableItem], request: Optional[DietaryRequest] = None
    ) -> None:
        """Push `dish` at the back, adjusting it for `request` first if given."""
        if dish is None:
            return
        if request is not None:
            dish.apply_dietary_adjustment(request)
        self._dish_queue.append(dish)

    def prepare_next_dish(self) -> bool:
        """
        Try the front dish on each station in order. Popped on the first
        success; otherwise it stays at the front.
        """
        if not self._dish_queue:
            return False
        next_dish = self._dish_queue[0]
        for station in self.stations:
            if station.can_complete_order(next_dish.name) and station.prepare_dish(
                next_dish.name
            ):
                self._dish_queue.popleft()
                return True
        return False

    def clear_dish_queue(self) -> None:
        self._dish_queue.clear()

    # ------------------------------------------------------------------
    # Batch processing
    # ------------------------------------------------------------------

    def process_all_dishes(self) -> BatchReport:
        """
        Run every queued dish through the stations once.

        For each dish, stations are tried in order. A station that is
        assigned the dish but short on stock draws the exact deficit of each
        ingredient from the backup reserve before preparing. Dishes no station
        could prepare are requeued in their original relative order.
        """
        report = BatchReport()
        hold_queue: Deque[OrderableItem] = deque()

        while self._dish_queue:
            dish = self._dish_queue.popleft()
            if dish is None or not dish.name or not dish.name.strip():
                report.discarded += 1
                continue

            outcome = self._process_dish(dish)
            report.outcomes.append(outcome)
            report.lines.extend(outcome.lines)
            report.lines.append("")
            if not outcome.prepared:
                hold_queue.append(dish)
                report.requeued.append(dish.name)

        self._dish_queue = hold_queue
        self._emit(report.lines, "All dishes have been processed.")
        return report

    def _process_dish(self, dish: OrderableItem) -> DishOutcome:
        outcome = DishOutcome(dish_name=dish.name)
        self._emit(outcome.lines, f"PREPARING DISH: {dish.name}")

        for station in self.stations:
            attempt = StationAttempt(station=station.name)
            outcome.attempts.append(attempt)
            self._emit(
                outcome.lines, f"{station.name} attempting to prepare {dish.name}..."
            )

            if not station.has_dish(dish.name):
                self._emit(
                    outcome.lines,
                    f"{station.name}: Dish not available. Moving to next station...",
                )
                continue
            attempt.assigned = True

            if not station.can_complete_order(dish.name):
                self._emit(
                    outcome.lines,
                    f"{station.name}: Insufficient ingredients. Replenishing ingredients...",
                )
                if not self._replenish_deficits(station, dish, attempt):
                    self._emit(
                        outcome.lines,
                        f"{station.name}: Unable to replenish ingredients. "
                        f"Failed to prepare {dish.name}.",
                    )
                    continue
                attempt.replenished = True
                self._emit(outcome.lines, f"{station.name}: Ingredients replenished.")

            if station.prepare_dish(dish.name):
                attempt.prepared = True
                outcome.prepared = True
                outcome.station = station.name
                self._emit(
                    outcome.lines, f"{station.name}: Successfully prepared {dish.name}."
                )
                return outcome
            self._emit(outcome.lines, f"{station.name}: Unable to prepare {dish.name}.")

        self._emit(outcome.lines, f"{dish.name} was not prepared.")
        return outcome

    def _replenish_deficits(
        self, station: KitchenStation, dish: OrderableItem, attempt: StationAttempt
    ) -> bool:
        """Draw from backup whatever the station lacks; stop at the first refusal."""
        for name, required in required_totals(dish.ingredients).items():
            deficit = required - station.ledger.quantity_of(name)
            if deficit <= 0:
                continue
            if not self.replenish_station_from_backup(station.name, name, deficit):
                return False
            attempt.withdrawals[name] = deficit
        return True

    @staticmethod
    def _emit(lines: List[str], message: str) -> None:
        lines.append(message)
        logger.info(message)
