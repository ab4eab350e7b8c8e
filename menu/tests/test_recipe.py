import json
import os
import tempfile
import unittest
from menu.domain.MenuRequest import Difficulty
from menu.domain.Recipe import Recipe
from menu.domain.errors import DataError
from menu.infra.Recipe_Repository import read_catalog, reading_from_recipes


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.camel = {
            "id": "R1",
            "name": "Pork Stir-fry",
            "categories": ["Main", "Seasonal"],
            "seasons": ["Spring"],
            "difficulty": "Beginner",
            "prepTimeMinutes": 5,
            "cookTimeMinutes": 10,
            "baseServings": 6,
            "ingredients": [{"name": "pork", "quantity": 300, "unit": "g"}],
            "seasonings": [{"name": "salt", "quantity": 3, "unit": "g"}],
            "nutritionPerBase": {"calories": 800, "carbs": 10, "fats": 5},
            "tags": ["Savory"],
        }

    def test_from_dict_camel_case(self):
        r = Recipe.from_dict(self.camel)
        self.assertEqual(r.id, "R1")
        self.assertEqual(r.categories, frozenset({"main", "seasonal"}))
        self.assertEqual(r.seasons, frozenset({"spring"}))
        self.assertEqual(r.difficulty, Difficulty.BEGINNER)
        self.assertEqual(r.total_time_minutes, 15)
        self.assertEqual(r.base_servings, 6)
        self.assertEqual(r.ingredients[0].quantity, 300)
        self.assertEqual(r.seasonings[0].name, "salt")
        self.assertEqual(r.nutrition_per_base.carbohydrate, 10)
        self.assertEqual(r.nutrition_per_base.fat, 5)
        self.assertEqual(r.tags, frozenset({"savory"}))

    def test_to_dict_reads_back(self):
        r = Recipe.from_dict(self.camel)
        self.assertEqual(Recipe.from_dict(r.to_dict()), r)

    def test_missing_optional_fields(self):
        r = Recipe.from_dict({"id": "X", "name": "Plain", "base_servings": 2})
        self.assertEqual(r.seasons, frozenset())
        self.assertIsNone(r.difficulty)
        self.assertIsNone(r.nutrition_per_base)
        self.assertEqual(r.ingredients, ())

    def test_unknown_difficulty_raises_data_error(self):
        self.camel["difficulty"] = "expert"
        with self.assertRaises(DataError) as ctx:
            Recipe.from_dict(self.camel)
        self.assertEqual(ctx.exception.recipe_id, "R1")

    def test_unknown_season_raises_data_error(self):
        self.camel["seasons"] = ["monsoon"]
        with self.assertRaises(DataError):
            Recipe.from_dict(self.camel)


class TestRecipeRepository(unittest.TestCase):

    def test_bad_entries_are_skipped(self):
        bad = {"id": "BAD", "name": "Bad", "difficulty": "impossible"}
        good = {"id": "OK", "name": "Good", "base_servings": 2}
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "recipes.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump([bad, good], f)
            recipes = reading_from_recipes(path)
        self.assertEqual([r.id for r in recipes], ["OK"])

    def test_skipped_entries_become_diagnostics(self):
        entries = [
            {"id": "BAD", "name": "Bad", "difficulty": "impossible"},
            {"id": "WET", "name": "Monsoon Stew", "seasons": ["monsoon"]},
            {"id": "OK", "name": "Good", "base_servings": 2},
        ]
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "recipes.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(entries, f)
            catalog = read_catalog(path)
        self.assertEqual([r.id for r in catalog.recipes], ["OK"])
        self.assertEqual([(d.recipe_id, d.recipe_name) for d in catalog.diagnostics],
                         [("BAD", "Bad"), ("WET", "Monsoon Stew")])
        self.assertIn("monsoon", catalog.diagnostics[1].reason)

    def test_bundled_catalog_has_no_diagnostics(self):
        self.assertEqual(read_catalog().diagnostics, [])

    def test_missing_file_is_empty_catalog(self):
        self.assertEqual(reading_from_recipes("/nonexistent/recipes.json"), [])

    def test_bundled_catalog_loads(self):
        recipes = reading_from_recipes()
        self.assertEqual(len(recipes), 20)
        self.assertTrue(all(r.base_servings >= 1 for r in recipes))


if __name__ == '__main__':
    unittest.main()
