"""Sample fridge contents and recipe book used to seed a fresh session."""
import logging
from datetime import date, timedelta
from typing import Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe

logger = logging.getLogger(__name__)

# (name, quantity, unit, price per unit, days until expiry)
SAMPLE_GROCERIES = [
    ("Milk", 1, "liters", 20, 9),
    ("Eggs", 12, "pieces", 10, 10),
    ("Flour", 1, "kg", 20, 182),
    ("Onion", 6, "pieces", 9, 30),
    ("Potato", 10, "pieces", 11, 30),
    ("Cheese", 0.5, "kg", 32, 21),
    # already expired
    ("Bread", 1, "loaf", 29, -3),
    ("Milk", 1, "litres", 20, -2),
    ("Tomato", 3, "pieces", 8, -4),
    ("Yoghurt", 0.25, "kg", 16, -3),
    ("eggs", 2, "pieces", 10, -4),
    # smoothie ingredients
    ("Strawberries", 2, "cups", 14, 7),
    ("Banana", 6, "pieces", 8, 5),
    ("Yoghurt", 0.5, "kg", 22, 10),
    ("Avocado", 4, "pieces", 9, 12),
    ("lemon Juice", 0.5, "tablespoons", 4, 91),
    ("Mango", 4, "pieces", 10, 7),
]

SAMPLE_RECIPES = [
    {
        "name": "Pancakes",
        "description": "Delicious breakfast with 4 eggs, 500g flour and 0.5L milk",
        "procedure": "Mix and cook on a skillet.",
        "ingredients": {"Milk": 1.5, "Eggs": 2.0, "Flour": 0.5},
        "serves": 4,
    },
    {
        "name": "Paneer (Indian Cheese)",
        "description": "Delicious indian cheese made from milk and lemon juice, saves expired milk",
        "procedure": ("Heat milk to just below boiling point, turn the stove off, add lemon juice "
                      "and stir until the milk curdles. Strain through a cheesecloth, rinse with "
                      "cold water and hang for 30 minutes to drain."),
        "ingredients": {"Milk": 2.0, "lemon juice": 0.5},
        "serves": 5,
    },
    {
        "name": "Strawberry Banana Smoothie",
        "description": "A sweet smoothie with strawberries and bananas.",
        "procedure": "Blend all ingredients until smooth.",
        "ingredients": {"Strawberries": 1.0, "Banana": 1.0, "Yogurt": 0.5, "Honey": 0.2},
        "serves": 2,
    },
    {
        "name": "Avo shake smoothie",
        "description": "A creamy green smoothie to delight your taste buds.",
        "procedure": "Blend all ingredients until smooth.",
        "ingredients": {"avocado": 2.0, "banana": 1.0, "milk": 0.3, "cinnamon": 1.0},
        "serves": 2,
    },
    {
        "name": "Mango Lassi Milkshake",
        "description": "A refreshing indian style mango milkshake.",
        "procedure": "Blend all ingredients until smooth.",
        "ingredients": {"Mango": 1.0, "Milk": 0.3, "yoghurt": 0.5, "sugar": 0.1},
        "serves": 2,
    },
]


def seed_sample_data(session, today: Optional[date] = None):
    """Populate ``session`` with the sample groceries and recipes."""
    today = today or date.today()
    for name, quantity, unit, price, days in SAMPLE_GROCERIES:
        session.add_grocery(Grocery(name, quantity, unit, price, today + timedelta(days=days)))
    for data in SAMPLE_RECIPES:
        session.add_recipe(Recipe.from_dict(data))
    logger.info("Seeded %d groceries and %d recipes", len(SAMPLE_GROCERIES), len(SAMPLE_RECIPES))
    return session
