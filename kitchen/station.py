"""
Kitchen station: own ingredient stock plus the dishes it is assigned to cook.
"""

from typing import Dict, List, Optional
import logging

from recipes.dish import Recipe, required_totals
from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


class KitchenStation:
    """A named station with its own stock and assigned dishes."""

    def __init__(self, name: str, dishes: Optional[List[Recipe]] = None,
                 stock: Optional[List[Ingredient]] = None):
        if not name:
            raise ValueError("Station name must not be empty")
        self.name = name
        self._dishes: Dict[str, Recipe] = {}
        self._stock: Dict[str, Ingredient] = {}

        for dish in dishes or []:
            self.assign_dish(dish)
        for ingredient in stock or []:
            self.replenish(ingredient)

    def __repr__(self) -> str:
        return f"<KitchenStation(name='{self.name}', dishes={len(self._dishes)}, stock={len(self._stock)})>"

    @property
    def dishes(self) -> List[Recipe]:
        return list(self._dishes.values())

    @property
    def ingredients_stock(self) -> List[Ingredient]:
        """Copies of the stock entries, in insertion order."""
        return [ingredient.copy() for ingredient in self._stock.values()]

    def has_dish(self, dish_name: str) -> bool:
        return dish_name in self._dishes

    def quantity_of(self, ingredient_name: str) -> int:
        entry = self._stock.get(ingredient_name)
        return entry.quantity if entry else 0

    def assign_dish(self, dish: Recipe) -> bool:
        """Assign a dish; a dish with the same name can only be assigned once."""
        if dish is None or dish.name in self._dishes:
            return False
        self._dishes[dish.name] = dish
        return True

    def replenish(self, ingredient: Ingredient) -> bool:
        """Add to stock, merging into an existing entry of the same name."""
        if ingredient.quantity <= 0:
            return False

        entry = self._stock.get(ingredient.name)
        if entry is None:
            self._stock[ingredient.name] = ingredient.copy()
        else:
            entry.quantity += ingredient.quantity
        return True

    def release(self, ingredient_name: str, quantity: int) -> bool:
        """Take stock back out of the station."""
        entry = self._stock.get(ingredient_name)
        if quantity <= 0 or entry is None or entry.quantity < quantity:
            return False
        entry.quantity -= quantity
        return True

    def can_complete_order(self, dish_name: str) -> bool:
        dish = self._dishes.get(dish_name)
        if dish is None:
            return False
        return all(
            self.quantity_of(name) >= required
            for name, required in required_totals(dish).items()
        )

    def prepare_dish(self, dish_name: str) -> bool:
        """Consume the dish's required stock. All or nothing."""
        if not self.can_complete_order(dish_name):
            return False

        for name, required in required_totals(self._dishes[dish_name]).items():
            if required > 0:
                self._stock[name].quantity -= required

        logger.debug(f"{self.name} prepared {dish_name}")
        return True

    def absorb(self, other: "KitchenStation"):
        """Take over another station's dishes and stock."""
        for dish in other.dishes:
            self.assign_dish(dish)
        for ingredient in other.ingredients_stock:
            self.replenish(ingredient)

    def display_stock(self) -> str:
        lines = [f"Ingredients Stock at {self.name}:"]
        for ingredient in self._stock.values():
            lines.append(f"  {ingredient.name}: {ingredient.quantity} @ ${ingredient.price:.2f}")
        return "\n".join(lines)
