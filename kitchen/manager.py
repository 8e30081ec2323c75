"""
Station manager: one object owning the registry, backup stock and order queue.
"""

from typing import Iterable, List, Optional
import logging

from config import KitchenConfig, get_settings
from kitchen.backup import BackupInventory
from kitchen.engine import FulfillmentEngine, FulfillmentReport
from kitchen.orders import Order, OrderQueue
from kitchen.registry import StationRegistry
from kitchen.station import KitchenStation
from recipes.dish import DietaryRequest, Recipe
from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


class StationManager:
    """Front door for a kitchen: stations, backup stock, orders and fulfillment."""

    def __init__(self, settings: Optional[KitchenConfig] = None):
        self.settings = settings or get_settings().kitchen
        self.registry = StationRegistry()
        self.backup = BackupInventory()
        self.queue = OrderQueue()
        self.engine = FulfillmentEngine(self.registry, self.backup, self.queue, self.settings)

    # Stations
    def add_station(self, station: KitchenStation) -> bool:
        return self.registry.add(station)

    def remove_station(self, station_name: str) -> bool:
        return self.registry.remove(station_name)

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        return self.registry.find(station_name)

    def move_station_to_front(self, station_name: str) -> bool:
        return self.registry.move_to_front(station_name)

    def merge_stations(self, station_name1: str, station_name2: str) -> bool:
        return self.registry.merge(station_name1, station_name2)

    def get_station_index(self, station_name: str) -> int:
        return self.registry.index_of(station_name)

    def assign_dish_to_station(self, station_name: str, dish: Recipe) -> bool:
        station = self.registry.find(station_name)
        if station is None:
            return False
        return station.assign_dish(dish)

    def replenish_ingredient_at_station(self, station_name: str, ingredient: Ingredient) -> bool:
        station = self.registry.find(station_name)
        if station is None:
            return False
        return station.replenish(ingredient)

    def can_complete_order(self, dish_name: str) -> bool:
        """Whether any station can cook the dish from its own stock right now."""
        return any(station.can_complete_order(dish_name) for station in self.registry)

    def prepare_dish_at_station(self, station_name: str, dish_name: str) -> bool:
        station = self.registry.find(station_name)
        if station is None or not station.can_complete_order(dish_name):
            return False
        return station.prepare_dish(dish_name)

    # Order queue
    def add_dish_to_queue(self, dish: Optional[Recipe],
                          dietary_request: Optional[DietaryRequest] = None) -> Optional[Order]:
        if dish is None:
            return None
        if dietary_request is not None:
            dish.apply_dietary_request(dietary_request)
        order = Order(dish)
        self.queue.enqueue(order)
        return order

    def prepare_next_dish(self) -> bool:
        return self.engine.prepare_next()

    @property
    def dish_queue(self) -> List[Recipe]:
        return [order.dish for order in self.queue]

    def set_dish_queue(self, dishes: Iterable[Recipe]):
        self.queue.replace(Order(dish) for dish in dishes)

    def display_dish_queue(self) -> str:
        return "\n".join(self.queue.dish_names())

    def clear_dish_queue(self):
        self.queue.clear()

    # Backup stock
    @property
    def backup_ingredients(self) -> List[Ingredient]:
        return self.backup.ingredients()

    def add_backup_ingredient(self, ingredient: Ingredient) -> bool:
        return self.backup.add(ingredient)

    def add_backup_ingredients(self, ingredients: Iterable[Ingredient]) -> bool:
        return self.backup.set_all(ingredients)

    def clear_backup_ingredients(self):
        self.backup.clear()

    def replenish_station_ingredient_from_backup(self, station_name: str, ingredient_name: str,
                                                 quantity: int) -> bool:
        station = self.registry.find(station_name)
        if station is None or quantity <= 0:
            return False

        withdrawn = self.backup.withdraw(ingredient_name, quantity)
        if withdrawn is None:
            return False
        return station.replenish(withdrawn)

    # Fulfillment
    def process_all_dishes(self) -> FulfillmentReport:
        return self.engine.process_all()
