"""Word lists and emoji sets used by the recipe heuristics.

Everything here is an immutable constant so the lists can be tested on their
own and extended for other languages without touching the scoring code.
"""

INGREDIENT_WORDS = ("ingredient", "ingredients")

STRUCTURE_WORDS = (
    "step", "steps",
    "direction", "directions",
    "method",
    "instruction", "instructions",
)

RECIPE_WORDS = ("recipe", "homemade")

MEASUREMENT_UNITS = (
    "cup", "cups",
    "tsp", "tbsp", "teaspoon", "tablespoon",
    "oz", "ounce", "ounces",
    "lb", "pound",
    "g", "gram", "kg",
    "ml", "l", "liter", "litre",
    "clove", "cloves",
    "egg", "eggs",
    "stick", "sticks",
)

VULGAR_FRACTIONS = frozenset({
    "\N{VULGAR FRACTION ONE QUARTER}",
    "\N{VULGAR FRACTION ONE HALF}",
    "\N{VULGAR FRACTION THREE QUARTERS}",
    "\N{VULGAR FRACTION ONE THIRD}",
    "\N{VULGAR FRACTION TWO THIRDS}",
    "\N{VULGAR FRACTION ONE EIGHTH}",
    "\N{VULGAR FRACTION THREE EIGHTHS}",
    "\N{VULGAR FRACTION FIVE EIGHTHS}",
    "\N{VULGAR FRACTION SEVEN EIGHTHS}",
})

LIST_MARKERS = ("-", "*", "\N{BULLET}")

# Food and drink emoji, matched on single code points (variation selectors ignored)
FOOD_EMOJI = frozenset({
    # pizza, burgers, breads
    "\N{SLICE OF PIZZA}",
    "\N{HAMBURGER}",
    "\N{BREAD}",
    "\N{BAGUETTE BREAD}",
    "\N{PRETZEL}",
    "\N{BAGEL}",
    "\N{CROISSANT}",
    "\N{SANDWICH}",
    # tacos and wraps
    "\N{STUFFED FLATBREAD}",
    "\N{TACO}",
    "\N{BURRITO}",
    # bowls, pans, noodles, rice
    "\N{GREEN SALAD}",
    "\N{SHALLOW PAN OF FOOD}",
    "\N{SPAGHETTI}",
    "\N{CANNED FOOD}",
    "\N{STEAMING BOWL}",
    "\N{POT OF FOOD}",
    "\N{CURRY AND RICE}",
    # sushi and dumplings
    "\N{SUSHI}",
    "\N{BENTO BOX}",
    "\N{DUMPLING}",
    "\N{FRIED SHRIMP}",
    # meat, eggs, cheese
    "\N{POULTRY LEG}",
    "\N{MEAT ON BONE}",
    "\N{CUT OF MEAT}",
    "\N{BACON}",
    "\N{EGG}",
    "\N{CHEESE WEDGE}",
    # utensils and timers
    "\N{SALT SHAKER}",
    "\N{SPOON}",
    "\N{FORK AND KNIFE}",
    "\N{FORK AND KNIFE WITH PLATE}",
    "\N{TIMER CLOCK}",
    "\N{STOPWATCH}",
})

KITCHEN_EMOJI = frozenset({
    "\N{SHOPPING TROLLEY}",
    "\N{MEMO}",
    "\N{FORK AND KNIFE WITH PLATE}",
    "\N{ALARM CLOCK}",
    "\N{BLACK RIGHTWARDS ARROW}",
})

PROMOTIONAL_PHRASES = (
    "tour",
    "tickets",
    "anniversary",
    "merch",
    "follow",
    "subscribe",
    "link in bio",
    "watch this",
    "check out",
    "new post",
)

INSTRUCTION_VERBS = (
    "step",
    "preheat",
    "mix",
    "combine",
    "add",
    "stir",
    "whisk",
    "bake",
    "boil",
    "simmer",
    "cook",
    "fry",
    "sauté",
    "grill",
    "roast",
)

# Title heuristics

TITLE_RECIPE_WORDS = (
    "recipe", "homemade", "bake", "baked", "cook", "cooked", "dish", "meal",
    "dinner", "lunch", "breakfast", "brunch", "snack", "dessert", "treat",
    "appetizer",
)

TITLE_PROMO_WORDS = (
    "follow", "subscribe", "like", "share", "check out", "new post", "link in bio",
)

PLATFORM_NAMES = ("tiktok", "instagram", "youtube", "pinterest", "facebook")
