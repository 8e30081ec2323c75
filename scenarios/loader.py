"""
Kitchen scenario files: stations, dishes, backup stock and an order list in YAML.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field

from brigade_types import CuisineType
from config import KitchenConfig
from kitchen.manager import StationManager
from kitchen.station import KitchenStation
from recipes.dish import DietaryRequest, Dish
from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


class ScenarioError(ValueError):
    """Scenario file is well-formed but inconsistent."""


class IngredientSpec(BaseModel):
    name: str = Field(..., min_length=1, description="Ingredient name")
    required: int = Field(default=0, ge=0, description="Quantity a dish needs")
    quantity: int = Field(default=0, ge=0, description="Quantity held or available")
    price: float = Field(default=0.0, ge=0, description="Unit price")

    def to_ingredient(self) -> Ingredient:
        return Ingredient(self.name, required_quantity=self.required,
                          quantity=self.quantity, price=self.price)


class DietarySpec(BaseModel):
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False

    def to_request(self) -> DietaryRequest:
        return DietaryRequest(**self.model_dump())


class DishSpec(BaseModel):
    name: str = Field(..., min_length=1, description="Dish name")
    ingredients: List[IngredientSpec] = Field(default=[], description="Required ingredients")
    prep_time: int = Field(default=0, ge=0, description="Preparation time in minutes")
    price: float = Field(default=0.0, ge=0, description="Menu price")
    cuisine: CuisineType = Field(default=CuisineType.OTHER, description="Cuisine type")


class StationSpec(BaseModel):
    name: str = Field(..., min_length=1, description="Station name")
    dishes: List[str] = Field(default=[], description="Names of dishes assigned to the station")
    stock: List[IngredientSpec] = Field(default=[], description="Initial station stock")


class OrderSpec(BaseModel):
    dish: str = Field(..., description="Dish name")
    dietary: Optional[DietarySpec] = Field(default=None, description="Dietary accommodations")


class ScenarioSpec(BaseModel):
    name: str = Field(default="scenario", description="Scenario name")
    dishes: List[DishSpec] = Field(default=[])
    stations: List[StationSpec] = Field(default=[])
    backup: List[IngredientSpec] = Field(default=[])
    orders: List[Union[OrderSpec, str]] = Field(default=[])


def load_scenario(path: Union[str, Path]) -> ScenarioSpec:
    """Read and validate a scenario file."""
    path = Path(path)
    if not path.exists():
        raise ScenarioError(f"Scenario file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ScenarioError(f"Scenario file {path} must contain a mapping")

    data.setdefault("name", path.stem)
    return ScenarioSpec.model_validate(data)


def build_manager(spec: ScenarioSpec, settings: Optional[KitchenConfig] = None) -> StationManager:
    """Create a station manager populated from a scenario.

    Dishes are shared: a station's assigned dish and every order for it refer
    to the same object, so dietary adjustments on an order apply kitchen-wide.
    """
    dishes: Dict[str, Dish] = {}
    for dish_spec in spec.dishes:
        if dish_spec.name in dishes:
            raise ScenarioError(f"Duplicate dish: {dish_spec.name}")
        dishes[dish_spec.name] = Dish(
            name=dish_spec.name,
            ingredients=[i.to_ingredient() for i in dish_spec.ingredients],
            prep_time=dish_spec.prep_time,
            price=dish_spec.price,
            cuisine_type=dish_spec.cuisine
        )

    manager = StationManager(settings)

    for station_spec in spec.stations:
        station = KitchenStation(station_spec.name)
        if not manager.add_station(station):
            raise ScenarioError(f"Duplicate station: {station_spec.name}")
        for dish_name in station_spec.dishes:
            manager.assign_dish_to_station(station.name, _lookup(dishes, dish_name, station.name))
        for ingredient in station_spec.stock:
            station.replenish(ingredient.to_ingredient())

    for ingredient in spec.backup:
        manager.add_backup_ingredient(ingredient.to_ingredient())

    for entry in spec.orders:
        order = OrderSpec(dish=entry) if isinstance(entry, str) else entry
        dish = _lookup(dishes, order.dish, "orders")
        manager.add_dish_to_queue(dish, order.dietary.to_request() if order.dietary else None)

    logger.info(
        f"Loaded scenario '{spec.name}': {len(manager.registry)} stations, "
        f"{len(dishes)} dishes, {len(manager.queue)} orders"
    )
    return manager


def _lookup(dishes: Dict[str, Dish], name: str, where: str) -> Dish:
    dish = dishes.get(name)
    if dish is None:
        raise ScenarioError(f"Unknown dish '{name}' referenced in {where}")
    return dish
