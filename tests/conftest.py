import pytest

import config
from config import KitchenConfig
from kitchen.manager import StationManager
from kitchen.station import KitchenStation
from recipes.dish import Dish
from recipes.ingredient import Ingredient


@pytest.fixture(autouse=True)
def reset_settings():
    original = config._settings
    config._settings = None
    yield
    config._settings = original


@pytest.fixture
def kitchen_config():
    return KitchenConfig(rollback_partial_replenishment=False, verbose_trace=False)


@pytest.fixture
def manager(kitchen_config):
    return StationManager(kitchen_config)


@pytest.fixture
def spaghetti():
    return Dish(
        "Spaghetti Bolognese",
        [
            Ingredient("Spaghetti", required_quantity=1, price=1.5),
            Ingredient("Tomato Sauce", required_quantity=2, price=0.75),
        ],
        prep_time=20,
        price=12.99,
    )


@pytest.fixture
def chicken():
    return Dish(
        "Grilled Chicken",
        [
            Ingredient("Chicken", required_quantity=1, price=2.0),
            Ingredient("Spices", required_quantity=1, price=0.5),
        ],
        prep_time=15,
        price=10.99,
    )


def stocked(name, dishes=(), **stock):
    """Station with the given dishes and ``ingredient=quantity`` stock."""
    station = KitchenStation(name)
    for dish in dishes:
        station.assign_dish(dish)
    for ingredient, quantity in stock.items():
        station.replenish(Ingredient(ingredient.replace("_", " "), quantity=quantity, price=1.0))
    return station
