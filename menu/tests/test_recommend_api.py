import json
import os
import tempfile
import unittest
from fastapi.testclient import TestClient
from menu.api.api_run import app, menu_cache
from menu.api.routes.recipes import load_catalog, load_recipes
from menu.infra.Recipe_Repository import read_catalog
from menu.tests.factories import make_recipe


class TestRecommendAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        menu_cache.clear()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_recommend_basic(self):
        resp = self.client.get('/api/recommend', params={'party_size': 6, 'season': 'winter', 'seed': 11})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertTrue(data['success'])
        self.assertEqual(data['seed'], 11)
        self.assertEqual(data['params']['party_size'], 6)
        self.assertEqual(set(data['menu'].keys()), {'main', 'side', 'soup', 'staple'})
        for key in ('nutrition', 'shopping_list', 'tips', 'diagnostics', 'relaxed', 'under_supplied'):
            self.assertIn(key, data)
        self.assertFalse(data['cached'])

    def test_same_seed_same_menu_and_cache(self):
        params = {'party_size': 9, 'season': 'summer', 'seed': 5}
        first = self.client.get('/api/recommend', params=params).json()
        second = self.client.get('/api/recommend', params=params).json()
        self.assertFalse(first['cached'])
        self.assertTrue(second['cached'])
        self.assertEqual(first['menu'], second['menu'])
        menu_cache.clear()
        third = self.client.get('/api/recommend', params=params).json()
        self.assertFalse(third['cached'])
        self.assertEqual(first['menu'], third['menu'])
        self.assertEqual(first['shopping_list'], third['shopping_list'])

    def test_invalid_party_size(self):
        resp = self.client.get('/api/recommend', params={'party_size': 25})
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(any('party_size' in msg for msg in resp.json()['detail']))
        self.assertEqual(self.client.get('/api/recommend', params={'party_size': 0}).status_code, 400)

    def test_invalid_season_and_difficulty(self):
        resp = self.client.get('/api/recommend', params={'season': 'monsoon'})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get('/api/recommend', params={'max_difficulty': 'expert'})
        self.assertEqual(resp.status_code, 400)

    def test_exclusions_are_respected(self):
        resp = self.client.get('/api/recommend', params={'party_size': 12, 'exclusions': 'pork, seafood', 'seed': 3})
        data = resp.json()
        for dishes in data['menu'].values():
            for dish in dishes:
                self.assertNotIn('pork', dish['tags'])
                self.assertNotIn('seafood', dish['tags'])

    def test_under_supply_events(self):
        app.dependency_overrides[load_recipes] = lambda: [
            make_recipe('ONLY', categories=('main',), ingredients=[('beef', 200, 'g')]),
            make_recipe('BAD', categories=('soup',), base_servings=0, ingredients=[('water', 1, 'l')]),
        ]
        cursor = self.client.get('/api/events').json()['next_cursor']
        data = self.client.get('/api/recommend', params={'party_size': 4, 'season': 'any', 'seed': 1}).json()
        self.assertTrue(data['relaxed'])
        self.assertEqual(data['under_supplied'], ['side', 'soup', 'staple'])
        self.assertEqual([d['recipe_id'] for d in data['diagnostics']], ['BAD'])
        events = self.client.get('/api/events', params={'since': cursor}).json()['events']
        types = [e['type'] for e in events]
        self.assertEqual(types, ['menu.filters_relaxed', 'recipe.data_error', 'menu.under_supply'])
        self.assertEqual(events[2]['categories'], ['side', 'soup', 'staple'])

    def test_unparsable_catalog_entry_is_reported(self):
        entries = [
            {"id": "M1", "name": "Braised Beef", "categories": ["main"], "base_servings": 4,
             "ingredients": [{"name": "beef", "quantity": 500, "unit": "g"}]},
            {"id": "X1", "name": "Mystery Dish", "categories": ["side"], "difficulty": "legendary"},
        ]
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "recipes.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(entries, f)
            app.dependency_overrides[load_catalog] = lambda: read_catalog(path)
            cursor = self.client.get('/api/events').json()['next_cursor']
            data = self.client.get('/api/recommend', params={'party_size': 4, 'season': 'any', 'seed': 8}).json()
        self.assertEqual([d['recipe_id'] for d in data['diagnostics']], ['X1'])
        self.assertEqual(data['diagnostics'][0]['recipe_name'], 'Mystery Dish')
        self.assertEqual([d['id'] for d in data['menu']['main']], ['M1'])
        events = self.client.get('/api/events', params={'since': cursor}).json()['events']
        errors = [e for e in events if e['type'] == 'recipe.data_error']
        self.assertEqual([e['recipe_id'] for e in errors], ['X1'])


class TestRecipesAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_list_by_category(self):
        data = self.client.get('/api/recipes', params={'category': 'soup'}).json()
        self.assertTrue(data['success'])
        self.assertEqual(data['pagination']['total'], 4)
        self.assertTrue(all('soup' in r['categories'] for r in data['data']))

    def test_pagination(self):
        data = self.client.get('/api/recipes', params={'page_size': 5, 'page': 2}).json()
        self.assertEqual(len(data['data']), 5)
        self.assertEqual(data['pagination']['total'], 20)
        self.assertEqual(data['pagination']['total_pages'], 4)
        self.assertEqual(self.client.get('/api/recipes', params={'page_size': 500}).status_code, 422)

    def test_keyword(self):
        data = self.client.get('/api/recipes', params={'keyword': 'TOFU'}).json()
        self.assertEqual([r['name'] for r in data['data']], ['Mapo Tofu'])

    def test_categories(self):
        data = self.client.get('/api/categories').json()['data']
        self.assertEqual(data['total'], 20)
        self.assertEqual(data['categories'], {'main': 7, 'side': 7, 'soup': 4, 'staple': 4})

    def test_validate_recipe(self):
        good = {
            'name': 'Egg Fried Rice',
            'categories': ['staple'],
            'seasons': ['any'],
            'difficulty': 'beginner',
            'base_servings': 2,
            'ingredients': [{'name': 'rice', 'quantity': 300, 'unit': 'g'}],
        }
        resp = self.client.post('/api/recipes/validate', json=good).json()
        self.assertTrue(resp['valid'])
        self.assertEqual(resp['preview']['categories'], ['staple'])

        bad = dict(good, name='   ', base_servings=0, ingredients=[])
        resp = self.client.post('/api/recipes/validate', json=bad).json()
        self.assertFalse(resp['valid'])
        self.assertEqual(len(resp['errors']), 3)


if __name__ == '__main__':
    unittest.main()
