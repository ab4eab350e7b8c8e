import unittest
from menu.logic.scaling.scaler import scale_recipe
from menu.logic.shopping.list_builder import build_shopping_list, categorize_ingredient, collation_key
from menu.tests.factories import make_recipe, worked_example_catalog
from menu.utilities.constants import SHOPPING_CATEGORIES, SHOPPING_TIPS


class TestCategorize(unittest.TestCase):

    def test_keyword_tables(self):
        self.assertEqual(categorize_ingredient("pork"), "meat")
        self.assertEqual(categorize_ingredient("tofu"), "other")
        self.assertEqual(categorize_ingredient("Napa Cabbage"), "vegetable")
        self.assertEqual(categorize_ingredient("tiger shrimp"), "seafood")
        self.assertEqual(categorize_ingredient("light soy sauce"), "condiment")
        self.assertEqual(categorize_ingredient("jasmine rice"), "staple")

    def test_compound_seafood_name(self):
        self.assertEqual(categorize_ingredient("dried sea cucumber"), "seafood")
        self.assertEqual(categorize_ingredient("cucumber"), "vegetable")

    def test_first_table_wins(self):
        # 'bell pepper' (vegetable) is checked before 'pepper' (condiment)
        self.assertEqual(categorize_ingredient("red bell pepper"), "vegetable")
        self.assertEqual(categorize_ingredient("white pepper"), "condiment")

    def test_custom_table(self):
        table = (("soy", ("tofu",)),)
        self.assertEqual(categorize_ingredient("tofu", table), "soy")
        self.assertEqual(categorize_ingredient("pork", table), "other")


class TestBuildShoppingList(unittest.TestCase):

    def setUp(self):
        self.a = make_recipe("A", base_servings=2,
                             ingredients=[("tomato", 100, "g"), ("pork", 200, "g"), ("Walnut", 0.1, "g")],
                             seasonings=[("salt", 2, "g")])
        self.b = make_recipe("B", base_servings=2,
                             ingredients=[("tomato", 50.5, "g"), ("shrimp", 100, "g"), ("apple", 1, "pcs"),
                                          ("Walnut", 0.2, "g"), ("Édamame", 30, "g")],
                             seasonings=[("salt", 1, "tsp")])
        self.selection = [scale_recipe(self.a, 2), scale_recipe(self.b, 2)]

    def test_worked_example(self):
        selection = [scale_recipe(r, 6) for r in worked_example_catalog()]
        sl = build_shopping_list(selection, 6)
        self.assertEqual(sl.total_items, 2)
        self.assertEqual(sl.find("pork").quantity, 300.0)
        self.assertEqual(sl.find("pork").category, "meat")
        self.assertEqual(sl.find("tofu").quantity, 300.0)
        self.assertEqual(sl.find("tofu").category, "other")

    def test_same_names_are_summed(self):
        sl = build_shopping_list(self.selection, 2)
        tomato = sl.find("tomato")
        self.assertEqual(tomato.quantity, 150.5)
        self.assertEqual(tomato.unit, "g")
        self.assertEqual(sl.find("Walnut").quantity, 0.3)

    def test_item_count_identity(self):
        sl = build_shopping_list(self.selection, 2)
        names = {i.name for sr in self.selection for i in sr.all_scaled()}
        self.assertEqual(sl.total_items, len(names))
        self.assertEqual(len(sl.get_items()), len(names))

    def test_category_counts_only_non_empty(self):
        sl = build_shopping_list(self.selection, 2)
        self.assertEqual(sl.category_counts, {"vegetable": 1, "meat": 1, "seafood": 1, "condiment": 1, "other": 3})
        self.assertEqual(tuple(sl.categories.keys()), SHOPPING_CATEGORIES)
        self.assertEqual(sl.categories["staple"], ())

    def test_sorted_with_collation(self):
        sl = build_shopping_list(self.selection, 2)
        self.assertEqual([i.name for i in sl.categories["other"]], ["apple", "Édamame", "Walnut"])
        self.assertLess(collation_key("Édamame"), collation_key("eggs"))

    def test_unit_mismatch_is_summed_and_flagged(self):
        sl = build_shopping_list(self.selection, 2)
        salt = sl.find("salt")
        self.assertEqual(salt.quantity, 3)
        self.assertEqual(salt.unit, "g")
        self.assertEqual(sl.unit_conflicts, ("salt",))

    def test_tips_follow_categories(self):
        sl = build_shopping_list(self.selection, 2)
        self.assertEqual(sl.tips, (SHOPPING_TIPS["vegetable"], SHOPPING_TIPS["meat"],
                                   SHOPPING_TIPS["seafood"], SHOPPING_TIPS["by_category"]))
        only_tofu = build_shopping_list([scale_recipe(make_recipe("T", ingredients=[("tofu", 1, "block")]), 4)], 4)
        self.assertEqual(only_tofu.tips, (SHOPPING_TIPS["by_category"],))

    def test_empty_selection(self):
        sl = build_shopping_list([], 4)
        self.assertEqual(sl.total_items, 0)
        self.assertEqual(sl.category_counts, {})
        self.assertEqual(sl.tips, (SHOPPING_TIPS["default"],))
        self.assertEqual(sl.to_dict()["categories"]["meat"], [])

    def test_missing_unit_defaults(self):
        r = make_recipe("U", ingredients=[("pepper", 1, "")])
        sl = build_shopping_list([scale_recipe(r, 4)], 4)
        self.assertEqual(sl.find("pepper").unit, "to taste")


if __name__ == '__main__':
    unittest.main()
