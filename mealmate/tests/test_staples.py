import unittest
from mealmate.domain.Pantry import PantryEntry
from mealmate.logic.pantry.staples import is_in_pantry, is_staple, is_needed


class TestPantryMatching(unittest.TestCase):

    def test_exact_match_ignores_case_and_punctuation(self):
        self.assertTrue(is_in_pantry("Eggs", [{"name": "eggs", "quantity": 6, "unit": "pcs"}]))
        self.assertTrue(is_in_pantry("Green Onions!", [PantryEntry("green onions", 1, "bunch")]))

    def test_hyphen_joins_words(self):
        # "Green-Onions" normalizes to "greenonions", which is not "green onions"
        self.assertFalse(is_in_pantry("Green-Onions", [PantryEntry("green onions", 1, "bunch")]))
        self.assertTrue(is_in_pantry("Green-Onions", [PantryEntry("greenonions", 1, "bunch")]))

    def test_containment_is_bidirectional(self):
        self.assertTrue(is_in_pantry("Large Eggs", [{"name": "eggs"}]))
        self.assertTrue(is_in_pantry("Rice", [{"name": "Jasmine Rice"}]))

    def test_short_names_match_longer_ones(self):
        self.assertTrue(is_in_pantry("Eggplant", [{"name": "egg"}]))

    def test_no_match(self):
        self.assertFalse(is_in_pantry("Chicken Breast", [{"name": "Tofu"}]))
        self.assertFalse(is_in_pantry("Chicken Breast", []))


class TestStaples(unittest.TestCase):

    def test_staples(self):
        for name in ["Salt", "Kosher salt", "Olive Oil", "Granulated Sugar", "All-Purpose Flour", "Baking Soda"]:
            self.assertTrue(is_staple(name), name)

    def test_non_staples(self):
        for name in ["Chicken", "Milk", "Basil", ""]:
            self.assertFalse(is_staple(name), name)


class TestIsNeeded(unittest.TestCase):

    def test_staple_suppressed_only_when_excluding(self):
        self.assertFalse(is_needed("Salt", [], exclude_staples=True))
        self.assertTrue(is_needed("Salt", [], exclude_staples=False))

    def test_pantry_suppresses_regardless_of_staples(self):
        pantry = [{"name": "eggs"}]
        self.assertFalse(is_needed("Eggs", pantry, exclude_staples=True))
        self.assertFalse(is_needed("Eggs", pantry, exclude_staples=False))

    def test_default_excludes_staples(self):
        self.assertFalse(is_needed("Vegetable Oil", []))
        self.assertTrue(is_needed("Zucchini", []))
