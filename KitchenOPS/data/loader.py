"""
Chargement des plats (CSV) et de la configuration cuisine (JSON).

Format CSV (première ligne = en-tête, ignorée) :
    dish_type,name,ingredients,prep_time,price,cuisine_type,details

- ingredients : "Nom:quantité[:prix]" séparés par ';'
- details, selon le type :
    APPETIZER  -> serving_style;spiciness_level;vegetarian
    MAINCOURSE -> cooking_method;protein_type;Side:CAT|Side:CAT;gluten_free
    DESSERT    -> flavor_profile;sweetness_level;contains_nuts
"""

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from KitchenOPS.core.manager import StationManager
from KitchenOPS.data.kitchen_params import (
    CSV_LIST_SEPARATOR,
    CSV_PAIR_SEPARATOR,
    CSV_SIDE_SEPARATOR,
    DEFAULT_DISHES_CSV,
    DEFAULT_KITCHEN_CONFIG,
)
from KitchenOPS.domain.dish import Dish, DishRecord
from KitchenOPS.domain.ingredients import Ingredient
from KitchenOPS.domain.station import KitchenStation
from KitchenOPS.domain.types import (
    CookingMethod,
    CuisineType,
    DishType,
    FlavorProfile,
    ServingStyle,
    SideCategory,
    parse_label,
)
from KitchenOPS.logging_config import get_logger
from KitchenOPS.utils import load_and_validate

logger = get_logger(__name__)


# -------- Configuration cuisine (JSON) --------


class StationConfig(BaseModel):
    name: str
    dishes: List[str] = Field(default_factory=list)
    ingredients: List[Ingredient] = Field(default_factory=list)


class KitchenConfig(BaseModel):
    """
    Exemple :
    {
      "stations": [
        {"name": "Grill", "dishes": ["Chicken Plate"],
         "ingredients": [{"name": "Chicken", "quantity": 2, "unit_price": 4.5}]}
      ],
      "backup": [{"name": "Chicken", "quantity": 5, "unit_price": 4.5}]
    }
    """

    stations: List[StationConfig] = Field(default_factory=list)
    backup: List[Ingredient] = Field(default_factory=list)


def load_kitchen_config(filepath: Union[Path, str] = DEFAULT_KITCHEN_CONFIG) -> KitchenConfig:
    return load_and_validate(filepath, KitchenConfig)


# -------- Plats (CSV) --------


def _as_bool(field: str) -> bool:
    return field.strip().lower() == "true"


def parse_ingredients(field: str) -> List[Ingredient]:
    """Parse "Chicken:3;Rice:1:0.5" into recipe lines."""
    ingredients: List[Ingredient] = []
    for chunk in field.split(CSV_LIST_SEPARATOR):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [part.strip() for part in chunk.split(CSV_PAIR_SEPARATOR)]
        name = parts[0]
        required = int(parts[1]) if len(parts) > 1 and parts[1] else 0
        unit_price = float(parts[2]) if len(parts) > 2 and parts[2] else 0.0
        ingredients.append(
            Ingredient(name=name, required_quantity=required, unit_price=unit_price)
        )
    return ingredients


def _parse_side_dishes(field: str) -> List[Dict[str, str]]:
    side_dishes = []
    for chunk in field.split(CSV_SIDE_SEPARATOR):
        if CSV_PAIR_SEPARATOR not in chunk:
            continue
        name, category = chunk.split(CSV_PAIR_SEPARATOR, 1)
        side_dishes.append(
            {
                "name": name.strip(),
                "category": parse_label(SideCategory, category, SideCategory.VEGETABLE),
            }
        )
    return side_dishes


def _details(dish_type: DishType, field: str) -> Dict[str, object]:
    parts = [part.strip() for part in field.split(CSV_LIST_SEPARATOR)]
    parts += [""] * (4 - len(parts))

    if dish_type == DishType.APPETIZER:
        return {
            "serving_style": parse_label(ServingStyle, parts[0], ServingStyle.BUFFET),
            "spiciness_level": int(parts[1] or 0),
            "vegetarian": _as_bool(parts[2]),
        }
    if dish_type == DishType.MAINCOURSE:
        return {
            "cooking_method": parse_label(CookingMethod, parts[0], CookingMethod.RAW),
            "protein_type": parts[1],
            "side_dishes": _parse_side_dishes(parts[2]),
            "gluten_free": _as_bool(parts[3]),
        }
    return {
        "flavor_profile": parse_label(FlavorProfile, parts[0], FlavorProfile.UMAMI),
        "sweetness_level": int(parts[1] or 0),
        "contains_nuts": _as_bool(parts[2]),
    }


def parse_dish_row(row: List[str]) -> Optional[Dish]:
    """Build one dish from a CSV row; None for an unknown dish type."""
    row = row + [""] * (7 - len(row))
    dish_type = parse_label(DishType, row[0], None)
    if dish_type is None:
        return None
    raw = {
        "dish_type": dish_type.value,
        "name": row[1].strip(),
        "ingredients": parse_ingredients(row[2]),
        "prep_time": int(row[3] or 0),
        "price": float(row[4] or 0.0),
        "cuisine_type": parse_label(CuisineType, row[5], CuisineType.OTHER),
        **_details(dish_type, row[6]),
    }
    return DishRecord.model_validate({"dish": raw}).dish


def load_dishes_csv(filepath: Union[Path, str] = DEFAULT_DISHES_CSV) -> List[Dish]:
    """Charge les plats depuis un fichier CSV.

    Paramètres
    ----------
    filepath : Path | str
        Chemin du fichier CSV (en-tête sur la première ligne).

    Retour
    ------
    List[Dish]
        Les plats dans l'ordre du fichier.

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    ValueError
        Si une ligne est mal formée (numéro de ligne dans le message).
    """
    path = Path(filepath)
    dishes: List[Dish] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            try:
                dish = parse_dish_row(row)
            except (ValidationError, ValueError) as e:
                raise ValueError(f"{path.name}, line {reader.line_num}: {e}") from e
            if dish is None:
                logger.warning(
                    "%s, line %d: unknown dish type %r, row skipped",
                    path.name,
                    reader.line_num,
                    row[0],
                )
                continue
            dishes.append(dish)
    logger.debug("Loaded %d dishes from %s", len(dishes), path)
    return dishes


# -------- Assemblage --------


def build_station_manager(config: KitchenConfig, dishes: Iterable[Dish]) -> StationManager:
    """Create the stations of `config`, assign dishes by name and stock everything."""
    dishes_by_name = {dish.name: dish for dish in dishes}
    manager = StationManager()
    for station_config in config.stations:
        station = KitchenStation(name=station_config.name)
        for dish_name in station_config.dishes:
            dish = dishes_by_name.get(dish_name)
            if dish is None:
                logger.warning(
                    "Station %s: unknown dish %r, not assigned", station.name, dish_name
                )
                continue
            station.assign_dish(dish)
        for ingredient in station_config.ingredients:
            station.replenish(ingredient)
        if not manager.add_station(station):
            logger.warning("Station %r rejected (empty or duplicate name)", station.name)
    manager.add_backup_ingredients(config.backup)
    return manager


def load_kitchen(
    dishes_path: Union[Path, str] = DEFAULT_DISHES_CSV,
    config_path: Union[Path, str] = DEFAULT_KITCHEN_CONFIG,
) -> StationManager:
    return build_station_manager(load_kitchen_config(config_path), load_dishes_csv(dishes_path))
