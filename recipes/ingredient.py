"""
Ingredient record shared by dishes, station stock and the backup inventory
"""
from dataclasses import dataclass, replace


@dataclass
class Ingredient:
    """An ingredient line.

    ``required_quantity`` is what a dish needs; ``quantity`` is what a station
    holds or what the backup inventory can hand out. Two ingredients are the
    same ingredient when their names match exactly.
    """
    name: str
    required_quantity: int = 0
    quantity: int = 0
    price: float = 0.0

    def __post_init__(self):
        if not self.name:
            raise ValueError("Ingredient name must not be empty")
        if self.required_quantity < 0 or self.quantity < 0:
            raise ValueError(f"Ingredient '{self.name}' quantities must not be negative")
        if self.price < 0:
            raise ValueError(f"Ingredient '{self.name}' price must not be negative")

    def copy(self, **changes) -> "Ingredient":
        return replace(self, **changes)

