"""
Dish records and dietary adjustments
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Protocol, runtime_checkable

from brigade_types import CuisineType
from recipes.ingredient import Ingredient

logger = logging.getLogger(__name__)


@dataclass
class DietaryRequest:
    """Dietary accommodations attached to an order"""
    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False

    @property
    def is_empty(self) -> bool:
        return not any((
            self.vegetarian, self.vegan, self.gluten_free,
            self.nut_free, self.low_sodium, self.low_sugar
        ))


@runtime_checkable
class Recipe(Protocol):
    """What stations and the fulfillment engine need from a dish."""
    name: str
    ingredients: List[Ingredient]

    def display(self) -> str:
        ...

    def apply_dietary_request(self, request: DietaryRequest) -> None:
        ...


def required_totals(recipe: Recipe) -> Dict[str, int]:
    """Required quantity per ingredient name, in first-listed order.

    A recipe may list the same ingredient more than once; stock checks and
    deductions work on the per-name totals.
    """
    totals: Dict[str, int] = {}
    for ingredient in recipe.ingredients:
        totals[ingredient.name] = totals.get(ingredient.name, 0) + ingredient.required_quantity
    return totals


VEGETARIAN_SUBSTITUTES: Dict[str, str] = {
    'Chicken': 'Tofu',
    'Beef': 'Seitan',
    'Ground Beef': 'Lentils',
    'Pork': 'Jackfruit',
    'Bacon': 'Tempeh Bacon',
    'Shrimp': 'King Oyster Mushroom',
    'Fish': 'Tofu',
}

VEGAN_SUBSTITUTES: Dict[str, str] = {
    **VEGETARIAN_SUBSTITUTES,
    'Cheese': 'Vegan Cheese',
    'Parmesan': 'Nutritional Yeast',
    'Butter': 'Olive Oil',
    'Milk': 'Oat Milk',
    'Cream': 'Coconut Cream',
    'Eggs': 'Flax Eggs',
    'Honey': 'Maple Syrup',
}

GLUTEN_FREE_SUBSTITUTES: Dict[str, str] = {
    'Pasta': 'Gluten-Free Pasta',
    'Spaghetti': 'Gluten-Free Spaghetti',
    'Flour': 'Rice Flour',
    'Bread': 'Gluten-Free Bread',
    'Breadcrumbs': 'Gluten-Free Breadcrumbs',
    'Soy Sauce': 'Tamari',
}

NUT_KEYWORDS = ('almond', 'walnut', 'pecan', 'peanut', 'cashew', 'pistachio', 'hazelnut', 'pine nut')

# Halved, rounding down; an ingredient reduced to zero is dropped
LOW_SODIUM_REDUCED = ('Salt', 'Soy Sauce', 'Tamari')
LOW_SUGAR_REDUCED = ('Sugar', 'Honey', 'Maple Syrup', 'Syrup')


@dataclass
class Dish:
    """A dish on the menu"""
    name: str
    ingredients: List[Ingredient] = field(default_factory=list)
    prep_time: int = 0
    price: float = 0.0
    cuisine_type: CuisineType = CuisineType.OTHER
    dietary_notes: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Dish name must not be empty")
        if self.prep_time < 0 or self.price < 0:
            raise ValueError(f"Dish '{self.name}' prep time and price must not be negative")

    def display(self) -> str:
        lines = [
            f"Dish Name: {self.name}",
            f"Ingredients: {', '.join(i.name for i in self.ingredients)}",
            f"Preparation Time: {self.prep_time} minutes",
            f"Price: ${self.price:.2f}",
            f"Cuisine Type: {self.cuisine_type.name}",
        ]
        if self.dietary_notes:
            lines.append(f"Dietary: {', '.join(self.dietary_notes)}")
        return "\n".join(lines)

    def apply_dietary_request(self, request: DietaryRequest) -> None:
        """Adjust the ingredient list in place for the given request."""
        if request.is_empty:
            return

        if request.vegan:
            self._substitute(VEGAN_SUBSTITUTES)
            self.dietary_notes.append("vegan")
        elif request.vegetarian:
            self._substitute(VEGETARIAN_SUBSTITUTES)
            self.dietary_notes.append("vegetarian")

        if request.gluten_free:
            self._substitute(GLUTEN_FREE_SUBSTITUTES)
            self.dietary_notes.append("gluten-free")

        if request.nut_free:
            self.ingredients = [
                i for i in self.ingredients
                if not any(keyword in i.name.lower() for keyword in NUT_KEYWORDS)
            ]
            self.dietary_notes.append("nut-free")

        if request.low_sodium:
            self._reduce(LOW_SODIUM_REDUCED)
            self.dietary_notes.append("low-sodium")

        if request.low_sugar:
            self._reduce(LOW_SUGAR_REDUCED)
            self.dietary_notes.append("low-sugar")

        logger.debug(f"Applied dietary request to {self.name}: {self.dietary_notes}")

    def _substitute(self, table: Dict[str, str]):
        adjusted: Dict[str, Ingredient] = {}
        for ingredient in self.ingredients:
            name = table.get(ingredient.name, ingredient.name)
            existing = adjusted.get(name)
            if existing is None:
                adjusted[name] = ingredient.copy(name=name)
            else:
                # Substitute collided with an ingredient already in the dish
                existing.required_quantity += ingredient.required_quantity
        self.ingredients = list(adjusted.values())

    def _reduce(self, names):
        adjusted = []
        for ingredient in self.ingredients:
            if ingredient.name in names:
                reduced = ingredient.required_quantity // 2
                if reduced == 0:
                    continue
                ingredient = ingredient.copy(required_quantity=reduced)
            adjusted.append(ingredient)
        self.ingredients = adjusted
