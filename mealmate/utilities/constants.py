from typing import Final

# Aisle labels in classifier priority order ("Other" is the fallback).
PRODUCE: Final[str] = "Produce"
MEAT_SEAFOOD: Final[str] = "Meat & Seafood"
DAIRY_EGGS: Final[str] = "Dairy & Eggs"
BAKERY: Final[str] = "Bakery"
FROZEN: Final[str] = "Frozen"
GRAINS_PASTA: Final[str] = "Grains & Pasta"
CANNED_JARRED: Final[str] = "Canned & Jarred"
CONDIMENTS_SAUCES: Final[str] = "Condiments & Sauces"
OILS_SPICES: Final[str] = "Oils & Spices"
SNACKS: Final[str] = "Snacks"
BEVERAGES: Final[str] = "Beverages"
OTHER: Final[str] = "Other"

AISLE_KEYWORDS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (PRODUCE, (
        'lettuce', 'spinach', 'kale', 'arugula', 'tomato', 'onion', 'garlic', 'pepper', 'carrot',
        'celery', 'cucumber', 'zucchini', 'squash', 'broccoli', 'cauliflower', 'cabbage', 'mushroom',
        'avocado', 'lemon', 'lime', 'apple', 'banana', 'orange', 'berry', 'grape', 'melon',
        'potato', 'sweet potato', 'ginger', 'herbs', 'basil', 'cilantro', 'parsley', 'mint',
    )),
    (MEAT_SEAFOOD, (
        'chicken', 'beef', 'pork', 'lamb', 'turkey', 'salmon', 'fish', 'shrimp', 'crab', 'lobster',
        'bacon', 'sausage', 'ham', 'steak', 'ground',
    )),
    (DAIRY_EGGS, ('milk', 'cheese', 'yogurt', 'butter', 'cream', 'egg', 'sour cream', 'cottage')),
    (BAKERY, ('bread', 'roll', 'bun', 'tortilla', 'pita', 'bagel', 'croissant', 'muffin')),
    (FROZEN, ('frozen', 'ice cream')),
    (GRAINS_PASTA, ('rice', 'pasta', 'noodle', 'quinoa', 'oat', 'cereal', 'flour', 'couscous', 'barley')),
    (CANNED_JARRED, (
        'canned', 'can of', 'jar', 'tomato sauce', 'paste', 'beans', 'chickpea', 'lentil', 'broth', 'stock',
    )),
    (CONDIMENTS_SAUCES, (
        'sauce', 'ketchup', 'mustard', 'mayo', 'dressing', 'vinegar', 'soy sauce', 'teriyaki',
        'hot sauce', 'salsa', 'honey', 'syrup', 'jam',
    )),
    (OILS_SPICES, (
        'oil', 'olive', 'vegetable', 'coconut', 'salt', 'pepper', 'spice', 'cumin', 'paprika',
        'oregano', 'thyme', 'rosemary', 'cinnamon', 'nutmeg', 'curry',
    )),
    (SNACKS, ('chip', 'cracker', 'cookie', 'snack', 'nut', 'almond', 'peanut', 'granola')),
    (BEVERAGES, ('juice', 'soda', 'water', 'coffee', 'tea', 'wine', 'beer')),
)

AISLES: Final[tuple[str, ...]] = tuple(label for label, _ in AISLE_KEYWORDS) + (OTHER,)

# Ingredients most households already have on hand
COMMON_STAPLES: Final[tuple[str, ...]] = (
    'salt', 'pepper', 'water', 'oil', 'olive oil', 'vegetable oil',
    'sugar', 'flour', 'baking soda', 'baking powder',
)

AMOUNT_SEPARATOR: Final[str] = ", "

EXPORT_FORMATS: Final[tuple[str, ...]] = ("text", "csv", "json", "simple", "pdf")
