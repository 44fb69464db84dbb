import unittest
from mealmate.logic.shopping.aisles import classify_aisle, AISLES


class TestClassifyAisle(unittest.TestCase):

    def test_known_aisles(self):
        cases = {
            "Baby Spinach": "Produce",
            "Ground Beef": "Meat & Seafood",
            "Eggs": "Dairy & Eggs",
            "Cheddar Cheese": "Dairy & Eggs",
            "Flour Tortillas": "Bakery",
            "Frozen Peas": "Frozen",
            "Quinoa": "Grains & Pasta",
            "Black Beans": "Canned & Jarred",
            "Soy Sauce": "Condiments & Sauces",
            "Olive Oil": "Oils & Spices",
            "Almonds": "Snacks",
            "Coffee": "Beverages",
        }
        for name, aisle in cases.items():
            self.assertEqual(classify_aisle(name), aisle, name)

    def test_unknown_goes_to_other(self):
        self.assertEqual(classify_aisle("Tofu"), "Other")
        self.assertEqual(classify_aisle(""), "Other")

    def test_priority_order_breaks_ties(self):
        # 'pepper' is listed under Produce before Oils & Spices
        self.assertEqual(classify_aisle("Black Pepper"), "Produce")
        # 'tomato' (Produce) wins over 'tomato sauce' (Canned & Jarred)
        self.assertEqual(classify_aisle("Tomato Sauce"), "Produce")

    def test_punctuation_is_kept(self):
        self.assertEqual(classify_aisle("Can-of Tuna"), "Other")
        self.assertEqual(classify_aisle("CAN OF tuna"), "Canned & Jarred")

    def test_classification_is_stable(self):
        for name in ["Salmon Fillet", "Greek Yogurt", "mystery item"]:
            self.assertEqual(classify_aisle(name), classify_aisle(name))
            self.assertIn(classify_aisle(name), AISLES)

    def test_aisle_labels(self):
        self.assertEqual(len(AISLES), 12)
        self.assertEqual(AISLES[0], "Produce")
        self.assertEqual(AISLES[-1], "Other")
