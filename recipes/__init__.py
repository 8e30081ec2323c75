"""
Dish and ingredient records
"""
from .ingredient import Ingredient
from .dish import Dish, DietaryRequest, Recipe, required_totals

__all__ = ['Ingredient', 'Dish', 'DietaryRequest', 'Recipe', 'required_totals']
