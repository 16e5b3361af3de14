"""Static reference tables for ingredient extraction.

Three tables drive the filtering pipeline:
- INGREDIENT_VOCABULARY: words (and fragments of multi-word names) that
  count as an ingredient
- STOPWORDS: function words and generic food/description nouns
- MEASUREMENTS: unit words and unit abbreviations

Tables are built once at import and never mutated.
"""

# Ordered whitelist of ingredient words, stored in normalized (lowercase) form.
# Multi-word ingredients are represented by their individual words
# (e.g. "olive" + "oil"), so descriptive fragments like "red" or "ground"
# are members too.
INGREDIENT_VOCABULARY: tuple[str, ...] = (
    "arborio",
    "all-purpose",
    "asparagus",
    "avocado",
    "avocados",
    "baking",
    "balsamic",
    "banana",
    "basil",
    "basmati",
    "bay",
    "beans",
    "beef",
    "bell",
    "black",
    "bread",
    "breast",
    "broccoli",
    "broth",
    "brown",
    "buns",
    "butter",
    "cardamom",
    "carrots",
    "celery",
    "cheddar",
    "cheese",
    "chicken",
    "chickpeas",
    "chili",
    "chilies",
    "chips",
    "chocolate",
    "cilantro",
    "cloves",
    "coconut",
    "coriander",
    "corn",
    "cream",
    "crumbs",
    "crust",
    "cubes",
    "cucumber",
    "cumin",
    "curry",
    "dal",
    "diced",
    "dijon",
    "egg",
    "eggplant",
    "eggs",
    "extract",
    "feta",
    "fillets",
    "flakes",
    "flour",
    "fresh",
    "garam",
    "garlic",
    "ghee",
    "ginger",
    "glaze",
    "green",
    "ground",
    "heavy",
    "honey",
    "ice",
    "jalapeno",
    "juice",
    "kalamata",
    "kale",
    "leaf",
    "leaves",
    "lemon",
    "lentils",
    "lettuce",
    "lime",
    "masala",
    "milk",
    "mozzarella",
    "mushrooms",
    "mustard",
    "noodles",
    "oil",
    "olive",
    "olives",
    "onion",
    "onions",
    "oregano",
    "pancetta",
    "paneer",
    "paprika",
    "parmesan",
    "parsley",
    "peanut",
    "peas",
    "pepper",
    "peppers",
    "pie",
    "potato",
    "potatoes",
    "powder",
    "quinoa",
    "red",
    "rice",
    "rose",
    "saffron",
    "salmon",
    "salt",
    "sauce",
    "seasoning",
    "seeds",
    "sesame",
    "shrimp",
    "sirloin",
    "soda",
    "sour",
    "soy",
    "spaghetti",
    "sugar",
    "sweet",
    "taco",
    "tahini",
    "thyme",
    "tomato",
    "tomatoes",
    "tortilla",
    "tortillas",
    "turmeric",
    "urad",
    "vanilla",
    "vegetable",
    "vinegar",
    "water",
    "white",
    "wine",
    "yogurt",
    "yolks",
)

INGREDIENT_SET: frozenset[str] = frozenset(INGREDIENT_VOCABULARY)

_COMMON_WORDS = (
    "the", "and", "or", "with", "in", "on", "at", "to", "for", "of", "a", "an",
    "some", "few", "many", "much", "this", "that", "these", "those", "image",
    "picture", "photo", "shows", "showing", "contains", "containing", "dish",
    "food", "meal", "recipe", "ingredients", "cooking", "cooked", "prepared",
    "made", "served", "plate", "bowl", "cup", "pieces", "slices", "chunks",
)

# Vocabulary wins: a word listed in both tables is never a stopword.
STOPWORDS: frozenset[str] = frozenset(_COMMON_WORDS) - INGREDIENT_SET

MEASUREMENTS: frozenset[str] = frozenset({
    "cup", "cups", "tablespoon", "tablespoons", "tbsp", "teaspoon", "teaspoons",
    "tsp", "gram", "grams", "g", "kilogram", "kg", "pound", "pounds", "lb",
    "lbs", "ounce", "ounces", "oz", "ml", "liter", "liters", "l", "pinch",
    "dash", "handful", "piece", "pieces", "slice", "slices",
})

# Abbreviations accepted directly after a number, e.g. "100g" or "2cups".
UNIT_ABBREVIATIONS: tuple[str, ...] = (
    "oz", "g", "kg", "lb", "lbs", "cup", "tbsp", "tsp", "ml", "l",
)
