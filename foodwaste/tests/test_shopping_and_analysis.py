from datetime import date, timedelta
import unittest
from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.logic.pantry.analysis import compute_expiring_soon, compute_low_stock, compute_pantry_snapshots
from foodwaste.logic.shopping.list_builder import build_shopping_list


class TestShoppingList(unittest.TestCase):

    def setUp(self):
        self.today = date(2026, 10, 19)
        self.groceries = [
            Grocery("Milk", 1.0, "liters", 20, self.today + timedelta(days=9)),
            Grocery("Milk", 1.0, "liters", 20, self.today - timedelta(days=2)),
            Grocery("Eggs", 12, "pieces", 10, self.today + timedelta(days=10)),
        ]
        self.pancakes = Recipe("Pancakes", ingredients={"Milk": 1.5, "Eggs": 2.0, "Flour": 0.5})
        self.omelette = Recipe("Omelette", ingredients={"eggs": 3})

    def test_missing_items(self):
        items = build_shopping_list([self.pancakes, self.omelette], self.groceries, today=self.today)
        self.assertEqual(items, [
            {'name': 'flour', 'required': 0.5, 'have': 0, 'missing': 0.5},
            {'name': 'milk', 'required': 1.5, 'have': 1.0, 'missing': 0.5},
        ])

    def test_expired_groceries_can_count(self):
        items = build_shopping_list([self.pancakes], self.groceries, include_expired=True, today=self.today)
        self.assertEqual([i['name'] for i in items], ['flour'])

    def test_requirements_add_up(self):
        items = build_shopping_list([self.omelette] * 5, self.groceries, today=self.today)
        self.assertEqual(items, [{'name': 'eggs', 'required': 15, 'have': 12, 'missing': 3}])

    def test_nothing_missing(self):
        self.assertEqual(build_shopping_list([self.omelette], self.groceries, today=self.today), [])


class TestPantryAnalysis(unittest.TestCase):

    def setUp(self):
        self.today = date(2026, 10, 19)
        self.groceries = [
            Grocery("Bread", 1, "loaf", 29, self.today - timedelta(days=3)),
            Grocery("Banana", 6, "pieces", 8, self.today + timedelta(days=5)),
            Grocery("Potato", 10, "pieces", 11, self.today + timedelta(days=30)),
            Grocery("Eggs", 1, "pieces", 10, self.today + timedelta(days=10)),
            Grocery("Eggs", 1, "pieces", 10, self.today + timedelta(days=12)),
            Grocery("Eggs", 1, "pieces", 10, self.today + timedelta(days=14)),
        ]

    def test_expiring_soon_includes_expired(self):
        result = compute_expiring_soon(self.groceries, window=5, today=self.today)
        self.assertEqual([(r['name'], r['days_left']) for r in result], [('bread', -3), ('banana', 5)])
        self.assertEqual(result[0]['exp'], '16-10-2026')
        self.assertEqual(result[1]['value'], 48)

    def test_low_stock_uses_totals(self):
        low = compute_low_stock(self.groceries)
        self.assertEqual(low, [])
        low = compute_low_stock(self.groceries[:4])
        self.assertEqual(low, [{'name': 'eggs', 'quantity': 1, 'unit': 'pieces', 'threshold': 2}])

    def test_snapshots(self):
        expiring, low = compute_pantry_snapshots(iter(self.groceries[:4]), window=0, today=self.today)
        self.assertEqual([r['name'] for r in expiring], ['bread'])
        self.assertEqual([r['name'] for r in low], ['eggs'])


if __name__ == '__main__':
    unittest.main()
