import pytest

from brigade_types import CuisineType
from recipes.dish import DietaryRequest, Dish, Recipe
from recipes.ingredient import Ingredient


def names(dish):
    return [i.name for i in dish.ingredients]


def test_ingredient_rejects_negative_values():
    with pytest.raises(ValueError):
        Ingredient("Salt", required_quantity=-1)
    with pytest.raises(ValueError):
        Ingredient("Salt", quantity=-1)
    with pytest.raises(ValueError):
        Ingredient("Salt", price=-0.1)
    with pytest.raises(ValueError):
        Ingredient("", price=0.1)


def test_dish_rejects_bad_values():
    with pytest.raises(ValueError):
        Dish("")
    with pytest.raises(ValueError):
        Dish("Soup", prep_time=-5)


def test_dish_satisfies_recipe_protocol(spaghetti):
    assert isinstance(spaghetti, Recipe)


def test_display(spaghetti):
    spaghetti.cuisine_type = CuisineType.ITALIAN
    text = spaghetti.display()
    assert "Dish Name: Spaghetti Bolognese" in text
    assert "Ingredients: Spaghetti, Tomato Sauce" in text
    assert "Price: $12.99" in text
    assert "Cuisine Type: ITALIAN" in text


def test_empty_request_changes_nothing(spaghetti):
    spaghetti.apply_dietary_request(DietaryRequest())
    assert names(spaghetti) == ["Spaghetti", "Tomato Sauce"]
    assert spaghetti.dietary_notes == []


def test_vegan_substitutions_merge_collisions():
    dish = Dish("Risotto", [
        Ingredient("Rice", required_quantity=2),
        Ingredient("Butter", required_quantity=1),
        Ingredient("Olive Oil", required_quantity=1),
        Ingredient("Parmesan", required_quantity=1),
    ])
    dish.apply_dietary_request(DietaryRequest(vegan=True))
    assert names(dish) == ["Rice", "Olive Oil", "Nutritional Yeast"]
    assert dish.ingredients[1].required_quantity == 2
    assert dish.dietary_notes == ["vegan"]


def test_nut_free_removes_nuts():
    dish = Dish("Pesto", [Ingredient("Basil", required_quantity=1), Ingredient("Pine Nuts", required_quantity=1), Ingredient("Walnuts", required_quantity=1)])
    dish.apply_dietary_request(DietaryRequest(nut_free=True))
    assert names(dish) == ["Basil"]


def test_low_sodium_and_low_sugar_halve_quantities():
    dish = Dish("Glazed Salmon", [
        Ingredient("Salmon", required_quantity=1),
        Ingredient("Salt", required_quantity=3),
        Ingredient("Soy Sauce", required_quantity=1),
        Ingredient("Sugar", required_quantity=4),
    ])
    dish.apply_dietary_request(DietaryRequest(low_sodium=True, low_sugar=True))
    assert [(i.name, i.required_quantity) for i in dish.ingredients] == [
        ("Salmon", 1), ("Salt", 1), ("Sugar", 2)
    ]
    assert "Dietary: low-sodium, low-sugar" in dish.display()


def test_adjustment_does_not_touch_original_ingredient_records():
    bacon = Ingredient("Bacon", required_quantity=1)
    dish = Dish("Carbonara", [bacon])
    dish.apply_dietary_request(DietaryRequest(vegetarian=True))
    assert bacon.name == "Bacon"
    assert names(dish) == ["Tempeh Bacon"]
