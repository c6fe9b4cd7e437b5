import unittest
from foodwaste.domain.Recipe import Recipe
from foodwaste.domain.RecipeBook import RecipeBook


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.pancakes = Recipe(
            name="Pancakes",
            description="Breakfast",
            procedure="Mix and cook on a skillet.",
            ingredients={"Milk": 1.5, "Eggs": 2.0, "Flour": 0.5},
            serves=4
        )

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Recipe("", "d", "p", {}, 1)
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"Water": -1}, 1)
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"": 1}, 1)
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"Water": 1}, 0)
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"Milk": 1, "milk": 2}, 1)

    def test_ingredients_are_a_copy(self):
        self.pancakes.ingredients["Sugar"] = 1
        self.assertNotIn("Sugar", self.pancakes.ingredients)

    def test_procedure_can_change(self):
        self.pancakes.procedure = "Whisk, rest, fry."
        self.assertEqual(self.pancakes.procedure, "Whisk, rest, fry.")

    def test_requirements_are_normalized(self):
        self.assertEqual(self.pancakes.requirements(), {"milk": 1.5, "eggs": 2.0, "flour": 0.5})

    def test_check_ingredients(self):
        self.assertTrue(self.pancakes.check_ingredients({"milk": 1.5, "eggs": 12, "flour": 1}))
        self.assertFalse(self.pancakes.check_ingredients({"milk": 1.0, "eggs": 12, "flour": 1}))
        self.assertFalse(self.pancakes.check_ingredients({"milk": 2, "eggs": 12}))

    def test_non_finite_quantities_are_rejected(self):
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"Water": float("nan")}, 1)
        with self.assertRaises(ValueError):
            Recipe("Soup", "d", "p", {"Water": float("inf")}, 1)

    def test_is_smoothie(self):
        self.assertFalse(self.pancakes.is_smoothie())
        self.assertTrue(Recipe("Mango Lassi Milkshake").is_smoothie())
        self.assertTrue(Recipe("Avo shake SMOOTHIE").is_smoothie())

    def test_dict_conversion(self):
        clone = Recipe.from_dict(self.pancakes.to_dict())
        self.assertEqual(clone.to_dict(), self.pancakes.to_dict())


class TestRecipeBook(unittest.TestCase):

    def setUp(self):
        self.book = RecipeBook()
        self.book.add_recipe(Recipe("Pancakes", ingredients={"Milk": 1.5}))
        self.book.add_recipe(Recipe("Omelette", ingredients={"Eggs": 3}))
        self.book.add_recipe(Recipe("pancakes", ingredients={"Milk": 0.5}, serves=2))

    def test_order_and_duplicates(self):
        self.assertEqual([r.name for r in self.book.get_recipes()], ["Pancakes", "Omelette", "pancakes"])
        self.assertEqual(len(self.book), 3)

    def test_remove_first_match_only(self):
        self.assertTrue(self.book.remove_recipe("PANCAKES"))
        self.assertEqual([r.name for r in self.book.get_recipes()], ["Omelette", "pancakes"])
        self.assertEqual(self.book.get_recipes()[1].serves, 2)

    def test_remove_unknown(self):
        self.assertFalse(self.book.remove_recipe("Waffles"))
        self.assertEqual(len(self.book), 3)
        with self.assertRaises(ValueError):
            self.book.remove_recipe(None)

    def test_get_recipes_returns_copy(self):
        self.book.get_recipes().clear()
        self.assertEqual(len(self.book), 3)

    def test_add_rejects_non_recipe(self):
        with self.assertRaises(ValueError):
            self.book.add_recipe("Pancakes")

    def test_find_and_smoothies(self):
        self.book.add_recipe(Recipe("Strawberry Banana Smoothie"))
        self.assertEqual(self.book.find_recipe("omelette").name, "Omelette")
        self.assertIsNone(self.book.find_recipe("Waffles"))
        self.assertEqual([r.name for r in self.book.get_smoothie_recipes()], ["Strawberry Banana Smoothie"])


if __name__ == '__main__':
    unittest.main()
