"""
Fixed option lists offered by the forms and filters.

These are constants, not configuration: the pantry form, the recipe
author form and the recipe filter panel all choose from them.
"""

# Pantry ingredient categories
INGREDIENT_CATEGORIES = [
    "Gemüse",
    "Obst",
    "Fleisch",
    "Fisch",
    "Milchprodukte",
    "Getreide",
    "Gewürze",
    "Öle & Essig",
    "Sonstiges",
]
DEFAULT_INGREDIENT_CATEGORY = "Gemüse"

# Recipe categories
RECIPE_CATEGORIES = [
    "Vorspeise",
    "Hauptgericht",
    "Dessert",
    "Snack",
    "Getränk",
    "Beilage",
    "Suppe",
    "Salat",
]
DEFAULT_RECIPE_CATEGORY = "Hauptgericht"

# Difficulty levels, easiest first
DIFFICULTIES = ["Einfach", "Mittel", "Schwer"]
DEFAULT_DIFFICULTY = "Einfach"

DIETARY_OPTIONS = [
    "Vegetarisch",
    "Vegan",
    "Glutenfrei",
    "Laktosefrei",
    "Low-Carb",
]

# Filter value meaning "do not filter on this field"
ANY_OPTION = "Alle"

# Badge colors per difficulty (Streamlit markdown color names)
DIFFICULTY_COLORS = {
    "Einfach": "green",
    "Mittel": "orange",
    "Schwer": "red",
}


def difficulty_color(difficulty: str) -> str:
    """Get the badge color for a difficulty level."""
    return DIFFICULTY_COLORS.get(difficulty, "gray")
