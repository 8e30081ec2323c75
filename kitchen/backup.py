"""
Shared backup inventory that any station can draw from.
"""

from typing import Dict, Iterable, List, Optional
import logging

from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


class BackupInventory:
    """Extra stock keyed by ingredient name. No entry is kept at quantity zero."""

    def __init__(self, ingredients: Optional[Iterable[Ingredient]] = None):
        self._pool: Dict[str, Ingredient] = {}
        for ingredient in ingredients or []:
            self.add(ingredient)

    def __len__(self) -> int:
        return len(self._pool)

    def __contains__(self, name: str) -> bool:
        return name in self._pool

    def ingredients(self) -> List[Ingredient]:
        return [ingredient.copy() for ingredient in self._pool.values()]

    def quantity_of(self, name: str) -> int:
        entry = self._pool.get(name)
        return entry.quantity if entry else 0

    def add(self, ingredient: Ingredient) -> bool:
        # Zero-quantity entries never persist
        if ingredient.quantity <= 0:
            return True

        entry = self._pool.get(ingredient.name)
        if entry is None:
            self._pool[ingredient.name] = ingredient.copy()
        else:
            entry.quantity += ingredient.quantity
        return True

    def set_all(self, ingredients: Iterable[Ingredient]) -> bool:
        """Replace the whole pool."""
        self._pool = {}
        for ingredient in ingredients:
            self.add(ingredient)
        return True

    def withdraw(self, name: str, quantity: int) -> Optional[Ingredient]:
        """Take ``quantity`` of ``name`` out of the pool.

        Returns the withdrawn stock as an ingredient record ready to be
        replenished into a station, or None when the request is not positive,
        the ingredient is unknown, or the pool holds less than requested.
        """
        if quantity <= 0:
            return None

        entry = self._pool.get(name)
        if entry is None or entry.quantity < quantity:
            logger.debug(f"Backup cannot supply {quantity} x {name} (have {entry.quantity if entry else 0})")
            return None

        entry.quantity -= quantity
        if entry.quantity == 0:
            del self._pool[name]

        return Ingredient(name, quantity=quantity, price=entry.price)

    def clear(self):
        self._pool.clear()
