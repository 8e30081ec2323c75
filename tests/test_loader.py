from pathlib import Path

import pytest
from pydantic import ValidationError

from brigade_types import CuisineType, OrderStatus
from config import KitchenConfig
from scenarios.loader import ScenarioError, build_manager, load_scenario

BISTRO = Path(__file__).resolve().parent.parent / "data" / "scenarios" / "bistro.yaml"


def write(tmp_path, text):
    path = tmp_path / "scenario.yaml"
    path.write_text(text)
    return path


def test_load_bundled_scenario():
    spec = load_scenario(BISTRO)
    assert spec.name == "bistro"
    assert spec.dishes[0].cuisine == CuisineType.ITALIAN
    assert [s.name for s in spec.stations][:2] == ["Grill Station", "Oven Station"]


def test_bundled_scenario_outcome():
    manager = build_manager(load_scenario(BISTRO), KitchenConfig())
    report = manager.process_all_dishes()

    status = {o.dish: o.status for o in report.outcomes}
    assert status == {
        "Spaghetti Bolognese": OrderStatus.FULFILLED,
        "Seafood Paella": OrderStatus.PENDING,
        "Grilled Chicken": OrderStatus.FULFILLED,
        "Beef Wellington": OrderStatus.PENDING,
    }
    assert [d.name for d in manager.dish_queue] == ["Seafood Paella", "Beef Wellington"]
    assert manager.backup.quantity_of("Shrimp") == 2


def test_orders_with_dietary_requests(tmp_path):
    path = write(tmp_path, """
dishes:
  - name: Carbonara
    ingredients:
      - {name: Pasta, required: 1}
      - {name: Bacon, required: 1}
stations:
  - name: Pasta Station
    dishes: [Carbonara]
    stock:
      - {name: Gluten-Free Pasta, quantity: 1}
      - {name: Tempeh Bacon, quantity: 1}
orders:
  - dish: Carbonara
    dietary: {vegetarian: true, gluten_free: true}
""")
    manager = build_manager(load_scenario(path), KitchenConfig())
    report = manager.process_all_dishes()
    assert len(report.fulfilled) == 1
    assert manager.dish_queue == []


def test_unknown_dish_reference(tmp_path):
    path = write(tmp_path, """
stations:
  - name: Grill
    dishes: [Ghost Dish]
""")
    with pytest.raises(ScenarioError):
        build_manager(load_scenario(path), KitchenConfig())


def test_unknown_order_dish(tmp_path):
    path = write(tmp_path, "orders: [Ghost Dish]\n")
    with pytest.raises(ScenarioError):
        build_manager(load_scenario(path), KitchenConfig())


def test_duplicate_station(tmp_path):
    path = write(tmp_path, """
stations:
  - name: Grill
  - name: Grill
""")
    with pytest.raises(ScenarioError):
        build_manager(load_scenario(path), KitchenConfig())


def test_negative_quantity_is_a_validation_error(tmp_path):
    path = write(tmp_path, """
backup:
  - {name: Rice, quantity: -2}
""")
    with pytest.raises(ValidationError):
        load_scenario(path)


def test_missing_file(tmp_path):
    with pytest.raises(ScenarioError):
        load_scenario(tmp_path / "nope.yaml")


def test_name_defaults_to_file_stem(tmp_path):
    assert load_scenario(write(tmp_path, "orders: []\n")).name == "scenario"
