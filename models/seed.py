"""
Demo data loaded into every new session.
"""

from models.entities import Folder, Ingredient, Recipe


def seed_ingredients() -> list[Ingredient]:
    """Starter pantry."""
    return [
        Ingredient(name="Tomaten", category="Gemüse", quantity="500", unit="g"),
        Ingredient(name="Zwiebeln", category="Gemüse", quantity="2", unit="Stück"),
        Ingredient(name="Knoblauch", category="Gewürze", quantity="3", unit="Zehen"),
        Ingredient(name="Olivenöl", category="Öle & Essig", quantity="250", unit="ml"),
    ]


def seed_recipes() -> list[Recipe]:
    """Starter recipe catalog."""
    return [
        Recipe(
            title="Mediterrane Tomatenpfanne",
            description="Ein einfaches und schmackhaftes Gericht mit frischen Tomaten und Zwiebeln.",
            ingredients=["Tomaten", "Zwiebeln", "Knoblauch", "Olivenöl"],
            instructions=[
                "Zwiebeln und Knoblauch in Olivenöl anbraten",
                "Tomaten hinzufügen und 15 Minuten köcheln lassen",
                "Mit Salz und Pfeffer abschmecken",
            ],
            cooking_time=20,
            difficulty="Einfach",
            category="Hauptgericht",
            dietary=["Vegetarisch", "Vegan"],
            calories=180,
        ),
        Recipe(
            title="Knoblauch-Öl Pasta",
            description="Klassische italienische Pasta mit Knoblauch und Olivenöl.",
            ingredients=["Knoblauch", "Olivenöl"],
            instructions=[
                "Pasta nach Packungsanweisung kochen",
                "Knoblauch in dünne Scheiben schneiden",
                "Knoblauch in Olivenöl goldbraun braten",
                "Pasta mit der Knoblauch-Öl-Mischung vermengen",
            ],
            cooking_time=15,
            difficulty="Einfach",
            category="Hauptgericht",
            dietary=["Vegetarisch", "Vegan"],
            calories=420,
        ),
    ]


def seed_folders() -> list[Folder]:
    """Starter folders for saved recipes."""
    return [
        Folder(name="Lieblingsrezepte"),
        Folder(name="Schnelle Gerichte"),
    ]
