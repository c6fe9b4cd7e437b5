from datetime import date, timedelta
import unittest
from fastapi.testclient import TestClient
from foodwaste.api.api_run import create_app
from foodwaste.infra.sample_data import seed_sample_data
from foodwaste.logic.session import KitchenSession
from foodwaste.utilities.constants import DATE_FORMAT


class TestFridgeAPI(unittest.TestCase):

    def setUp(self):
        self.session = seed_sample_data(KitchenSession())
        self.client = TestClient(create_app(self.session))

    def test_health(self):
        resp = self.client.get('/api/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['recipes'], 5)

    def test_list_sorted_by_name(self):
        resp = self.client.get('/api/groceries', params={'sort': 'name'})
        self.assertEqual(resp.status_code, 200)
        names = [g['name'] for g in resp.json()['groceries']]
        self.assertEqual(names, sorted(names))
        self.assertEqual(self.client.get('/api/groceries', params={'sort': 'price'}).status_code, 422)

    def test_expired_and_value(self):
        expired = self.client.get('/api/groceries/expired').json()
        self.assertEqual(expired['count'], 5)
        value = self.client.get('/api/groceries/value').json()
        self.assertEqual(value['expired'], 97)

    def test_search(self):
        data = self.client.get('/api/groceries/search', params={'name': 'MILK'}).json()
        self.assertEqual(data['count'], 2)

    def test_available_recipes(self):
        data = self.client.get('/api/recipes/available').json()
        self.assertEqual(data['count'], 0)
        self.assertEqual(data['total'], 5)
        data = self.client.get('/api/recipes/available', params={'include_expired': 'true'}).json()
        recipes = {r['name']: r for r in data['recipes']}
        self.assertEqual(set(recipes), {'Pancakes', 'Paneer (Indian Cheese)'})
        self.assertEqual(recipes['Pancakes']['times_possible'], 1)

    def test_added_milk_clubs_and_enables_recipes(self):
        expiry = (date.today() + timedelta(days=9)).strftime(DATE_FORMAT)
        resp = self.client.post('/api/groceries', json={
            'name': 'Milk', 'quantity': 1, 'unit': 'liters', 'price_per_unit': 20, 'expiry_date': expiry
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        lots = resp.json()['groceries']
        self.assertEqual([(g['unit'], g['quantity']) for g in lots], [('liters', 2.0), ('litres', 1.0)])
        names = {r['name'] for r in self.client.get('/api/recipes/available').json()['recipes']}
        self.assertEqual(names, {'Pancakes', 'Paneer (Indian Cheese)'})

    def test_add_invalid_grocery(self):
        resp = self.client.post('/api/groceries', json={
            'name': 'Milk', 'quantity': -1, 'unit': 'liters', 'price_per_unit': 20, 'expiry_date': '2026-10-28'
        })
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post('/api/groceries', json={
            'name': 'Milk', 'quantity': 1, 'unit': 'liters', 'price_per_unit': 20, 'expiry_date': 'soon'
        })
        self.assertEqual(resp.status_code, 422)

    def test_remove_grocery(self):
        resp = self.client.post('/api/groceries/remove', json={'name': 'apple', 'quantity': 1})
        self.assertEqual(resp.status_code, 404)
        resp = self.client.post('/api/groceries/remove', json={'name': 'potato', 'quantity': 11})
        self.assertEqual(resp.status_code, 409)
        resp = self.client.post('/api/groceries/remove', json={'name': 'Potato', 'quantity': 10})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['remaining'], [])
        self.assertNotIn('potato', self.session.fridge)

    def test_recipes_crud(self):
        resp = self.client.post('/api/recipes', json={
            'name': 'Omelette', 'procedure': 'Beat and fry.', 'ingredients': {'Eggs': 3}, 'serves': 1
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        names = [r['name'] for r in self.client.get('/api/recipes').json()['recipes']]
        self.assertEqual(names[-1], 'Omelette')
        available = {r['name'] for r in self.client.get('/api/recipes/available').json()['recipes']}
        self.assertEqual(available, {'Omelette'})

        self.assertEqual(self.client.delete('/api/recipes/omelette').status_code, 200)
        self.assertEqual(self.client.delete('/api/recipes/omelette').status_code, 404)

    def test_duplicate_ingredient_names_rejected(self):
        resp = self.client.post('/api/recipes', json={'name': 'Odd', 'ingredients': {'Milk': 1, 'milk': 2}})
        self.assertEqual(resp.status_code, 400)

    def test_smoothies(self):
        resp = self.client.post('/api/smoothies', json={
            'name': 'Banana Mango', 'portions': {'banana': 1, 'mango': 1}
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        data = resp.json()
        self.assertEqual(data['name'], 'Banana Mango Smoothie')
        self.assertEqual(data['total_price'], 18)
        smoothies = [r['name'] for r in self.client.get('/api/recipes/smoothies').json()['recipes']]
        self.assertIn('Banana Mango Smoothie', smoothies)

        resp = self.client.post('/api/smoothies', json={'name': 'Kiwi', 'portions': {'kiwi': 1}})
        self.assertEqual(resp.status_code, 409)

    def test_shopping_list(self):
        resp = self.client.post('/api/shopping-list', json={'recipes': ['Strawberry Banana Smoothie']})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([i['name'] for i in resp.json()['items']], ['honey', 'yogurt'])
        resp = self.client.post('/api/shopping-list', json={'recipes': ['Lasagne']})
        self.assertEqual(resp.status_code, 404)

    def test_alerts_and_snapshots(self):
        data = self.client.get('/api/fridge/alerts').json()
        self.assertTrue(data['events'])
        cursor = data['next_cursor']
        self.assertEqual(self.client.get('/api/fridge/alerts', params={'since': cursor}).json()['events'], [])
        snapshots = self.client.get('/api/fridge/snapshots').json()
        self.assertIn('bread', [r['name'] for r in snapshots['expiring_soon']])


class TestEmptyApp(unittest.TestCase):

    def test_unseeded_app(self):
        client = TestClient(create_app(seed=False))
        self.assertEqual(client.get('/api/groceries').json(), {'count': 0, 'groceries': []})
        self.assertEqual(client.get('/api/fridge/alerts').json(), {'events': [], 'next_cursor': 0})


if __name__ == '__main__':
    unittest.main()
