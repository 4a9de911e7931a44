from typing import List

from KitchenOPS.console_style import bold, cyan, green, red, yellow
from KitchenOPS.core.manager import StationManager
from KitchenOPS.core.results import BatchReport
from KitchenOPS.domain.dish import Appetizer, Dessert, Dish, MainCourse
from KitchenOPS.domain.station import KitchenStation

_SUCCESS_MARKERS = ("Successfully prepared", "Ingredients replenished")
_FAILURE_MARKERS = ("Unable to", "was not prepared", "Insufficient ingredients")


def format_price(x: float) -> str:
    """Format a float as a dollar amount with two decimals."""
    return f"${x:,.2f}"


def format_dish(dish: Dish) -> str:
    """Summary of a dish on several lines.

    Parameters
    ----------
    dish : Dish
        Any dish variant.

    Returns
    -------
    str
        Name, recipe, prep time, price, cuisine and the variant-specific
        attributes, one per line.
    """
    recipe = ", ".join(
        f"{ingredient.name} x{ingredient.required_quantity}"
        for ingredient in dish.ingredients
    )
    lines = [
        f"Dish Name: {dish.name}",
        f"Ingredients: {recipe}",
        f"Preparation Time: {dish.prep_time} minutes",
        f"Price: {format_price(dish.price)}",
        f"Cuisine Type: {dish.cuisine_type.value}",
    ]
    if isinstance(dish, Appetizer):
        lines += [
            f"Serving Style: {dish.serving_style.value}",
            f"Spiciness Level: {dish.spiciness_level}",
            f"Vegetarian: {'Yes' if dish.vegetarian else 'No'}",
        ]
    elif isinstance(dish, MainCourse):
        sides = ", ".join(
            f"{side.name} (Category: {side.category.value})" for side in dish.side_dishes
        )
        lines += [
            f"Cooking Method: {dish.cooking_method.value}",
            f"Protein Type: {dish.protein_type}",
            f"Side Dishes: {sides}",
            f"Gluten-Free: {'Yes' if dish.gluten_free else 'No'}",
        ]
    elif isinstance(dish, Dessert):
        lines += [
            f"Flavor Profile: {dish.flavor_profile.value}",
            f"Sweetness Level: {dish.sweetness_level}",
            f"Contains Nuts: {'Yes' if dish.contains_nuts else 'No'}",
        ]
    return "\n".join(lines)


def print_ledger(station: KitchenStation) -> None:
    """Affiche le stock d'une station (ou « vide »)."""
    if not len(station.ledger):
        print("   (stock vide)")
        return
    for ingredient in station.get_ingredients_stock():
        print(
            f"   - {ingredient.name:<16s} {ingredient.quantity:>4d}"
            f"  @ {format_price(ingredient.unit_price)}"
        )
    print(f"   Valeur du stock : {format_price(station.ledger.total_value())}")


def print_stations(manager: StationManager) -> None:
    print(bold("=== Stations ==="))
    for position, station in enumerate(manager.stations, start=1):
        dish_names = ", ".join(dish.name for dish in station.get_dishes()) or "-"
        print(cyan(f"{position}. {station.name}") + f"  [{dish_names}]")
        print_ledger(station)


def print_backup(manager: StationManager) -> None:
    print(bold("=== Réserve ==="))
    backup = manager.backup_ingredients()
    if not backup:
        print("   (réserve vide)")
    for ingredient in backup:
        print(f"   - {ingredient.name:<16s} {ingredient.quantity:>4d}")


def print_dish_queue(manager: StationManager) -> None:
    """Un nom de plat par ligne, du premier au dernier de la file."""
    for dish in manager.dish_queue:
        print(dish.name)


def _colorize(line: str) -> str:
    if line.startswith("PREPARING DISH:") or line.startswith("All dishes"):
        return bold(line)
    if any(marker in line for marker in _SUCCESS_MARKERS):
        return green(line)
    if any(marker in line for marker in _FAILURE_MARKERS):
        return red(line)
    return line


def print_batch_report(report: BatchReport) -> None:
    for line in report.lines:
        print(_colorize(line))
    summary: List[str] = [
        f"Préparés : {report.prepared_count}",
        f"En attente : {len(report.requeued)}",
    ]
    if report.discarded:
        summary.append(f"Ignorés : {report.discarded}")
    print(yellow(" • ".join(summary)))
