import unittest
from mealmate.domain.Ingredient import MealIngredient
from mealmate.domain.Meal import PlannedMeal


class TestMealIngredient(unittest.TestCase):

    def test_from_dict_defaults_missing_fields(self):
        ing = MealIngredient.from_dict({"amount": 2})
        self.assertEqual(ing.name, "")
        self.assertEqual(ing.amount, "2")
        self.assertIsNone(ing.notes)

    def test_from_dict_ignores_non_dict(self):
        ing = MealIngredient.from_dict(None)
        self.assertEqual((ing.name, ing.amount), ("", ""))

    def test_to_dict_keeps_notes(self):
        ing = MealIngredient("Garlic", "3 cloves", notes="minced")
        self.assertEqual(ing.to_dict(), {"name": "Garlic", "amount": "3 cloves", "notes": "minced"})

    def test_planned_meal_from_dict(self):
        meal = PlannedMeal.from_dict({
            "name": "Tacos",
            "servings": 4,
            "ingredients": [{"name": "Tortillas", "amount": "8"}, {"name": "Salsa", "amount": "1 jar"}],
        })
        self.assertEqual(meal.name, "Tacos")
        self.assertEqual(meal.servings, 4)
        self.assertEqual([i.name for i in meal.ingredients], ["Tortillas", "Salsa"])

    def test_planned_meal_without_ingredients(self):
        meal = PlannedMeal.from_dict({"name": "Leftovers", "ingredients": None})
        self.assertEqual(meal.ingredients, [])
