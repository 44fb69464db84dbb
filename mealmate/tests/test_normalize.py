import unittest
from mealmate.logic.shopping.normalize import normalize_ingredient


class TestNormalizeIngredient(unittest.TestCase):

    def test_lowercases_and_strips_punctuation(self):
        self.assertEqual(normalize_ingredient("Ground Beef (80/20)"), "ground beef 8020")

    def test_collapses_whitespace(self):
        self.assertEqual(normalize_ingredient("  Sweet \t  Potato\n"), "sweet potato")

    def test_empty_and_none(self):
        self.assertEqual(normalize_ingredient(""), "")
        self.assertEqual(normalize_ingredient(None), "")

    def test_punctuation_only(self):
        self.assertEqual(normalize_ingredient("!!! --- ???"), "")

    def test_idempotent(self):
        for raw in ["Jalapeño, diced", "  OLIVE-oil ", "2% Milk", "Chicken   Thighs!"]:
            once = normalize_ingredient(raw)
            self.assertEqual(normalize_ingredient(once), once)
