import logging

from KitchenOPS.data.loader import load_dishes_csv, load_kitchen_config, build_station_manager
from KitchenOPS.domain.dish import DietaryRequest
from KitchenOPS.logging_config import setup_logging
from KitchenOPS.ui.affichage import (
    print_backup,
    print_batch_report,
    print_dish_queue,
    print_stations,
)


def run():
    setup_logging(log_level=logging.WARNING)

    dishes = load_dishes_csv()
    manager = build_station_manager(load_kitchen_config(), dishes)
    dishes_by_name = {dish.name: dish for dish in dishes}

    # Les commandes sont des copies : l'ajustement diététique ne touche pas
    # la recette assignée aux stations.
    for name in ("Chicken Plate", "Beef Stew", "Garlic Bread", "Lemon Tart"):
        manager.add_dish_to_queue(dishes_by_name[name].model_copy(deep=True))
    manager.add_dish_to_queue(
        dishes_by_name["Pecan Pie"].model_copy(deep=True),
        DietaryRequest(nut_free=True),
    )

    print_stations(manager)
    print_backup(manager)
    print("\nFile de préparation :")
    print_dish_queue(manager)
    print()

    report = manager.process_all_dishes()
    print_batch_report(report)

    print("\nToujours en attente :")
    print_dish_queue(manager)
    print()
    print_stations(manager)
    print_backup(manager)


if __name__ == "__main__":
    run()
