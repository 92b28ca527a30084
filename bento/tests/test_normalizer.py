import json
import unittest
from bento.logic.imports.normalizer import normalize_recipe, normalize_receipt


class TestNormalizeRecipe(unittest.TestCase):

    def test_empty_object(self):
        recipe = normalize_recipe({})
        self.assertEqual(recipe.to_dict(), {"name": "Imported Recipe", "ingredients": []})
        self.assertNotIn("description", recipe.to_dict())
        self.assertNotIn("procedures", recipe.to_dict())

    def test_defaults_for_blank_ingredient(self):
        recipe = normalize_recipe({"name": " Cake ", "ingredients": [{"name": "", "quantity": "two", "unit": ""}]})
        self.assertEqual(recipe.name, "Cake")
        self.assertEqual(len(recipe.ingredients), 1)
        ing = recipe.ingredients[0]
        self.assertEqual(ing.name, "Unknown Ingredient")
        self.assertEqual(ing.quantity, 1)
        self.assertEqual(ing.unit, "g")

    def test_numeric_coercion(self):
        recipe = normalize_recipe({"ingredients": [
            {"name": "Butter", "quantity": "$2.50", "unit": "kg "},
            {"name": "Eggs", "quantity": 3, "unit": "pcs"},
            {"name": "Salt", "quantity": 0, "unit": "g"},
            {"name": "Yeast", "quantity": None},
        ]})
        self.assertEqual([i.quantity for i in recipe.ingredients], [2.5, 3, 1, 1])
        self.assertEqual(recipe.ingredients[0].unit, "kg")
        self.assertEqual(recipe.ingredients[3].unit, "g")

    def test_non_finite_quantity_falls_back(self):
        recipe = normalize_recipe({"ingredients": [{"name": "Sugar", "quantity": float("inf")}]})
        self.assertEqual(recipe.ingredients[0].quantity, 1)

    def test_oversized_integer_quantity_falls_back(self):
        raw = json.loads('{"ingredients": [{"name": "flour", "quantity": 1' + "0" * 400 + "}]}")
        recipe = normalize_recipe(raw)
        self.assertEqual(recipe.ingredients[0].quantity, 1.0)
        receipt = normalize_receipt({"items": [{"price": 10 ** 400}], "totalAmount": -(10 ** 400)})
        self.assertEqual(receipt.items[0].price, 0.0)
        self.assertEqual(receipt.total_amount, 0.0)

    def test_description_and_procedures_kept_when_present(self):
        recipe = normalize_recipe({"name": "Bread", "description": "  Crusty loaf ", "procedures": "Mix.\nBake."})
        data = recipe.to_dict()
        self.assertEqual(data["description"], "Crusty loaf")
        self.assertEqual(data["procedures"], "Mix.\nBake.")

    def test_empty_description_is_omitted(self):
        data = normalize_recipe({"description": "", "procedures": None}).to_dict()
        self.assertNotIn("description", data)
        self.assertNotIn("procedures", data)

    def test_malformed_structures(self):
        self.assertEqual(normalize_recipe({"ingredients": "flour, sugar"}).ingredients, [])
        self.assertEqual(normalize_recipe(None).name, "Imported Recipe")
        self.assertEqual(normalize_recipe(["not", "an", "object"]).ingredients, [])
        recipe = normalize_recipe({"name": 42, "ingredients": ["flour", {"name": "sugar"}]})
        self.assertEqual(recipe.name, "42")
        self.assertEqual([i.name for i in recipe.ingredients], ["Unknown Ingredient", "sugar"])

    def test_extra_keys_ignored(self):
        recipe = normalize_recipe({"name": "Tart", "servings": 8, "ingredients": [{"name": "Flour", "brand": "x"}]})
        self.assertEqual(recipe.to_dict(), {
            "name": "Tart",
            "ingredients": [{"name": "Flour", "quantity": 1.0, "unit": "g"}],
        })


class TestNormalizeReceipt(unittest.TestCase):

    def test_receipt_items(self):
        receipt = normalize_receipt({
            "supplier": {"name": " Metro Cash & Carry ", "phone": ""},
            "items": [
                {"name": "Bread flour 25kg", "quantity": "2", "unit": "bag", "price": "$38.90",
                 "category": "Grains & Flour", "type": "ingredient"},
                {"name": "Cake boxes", "quantity": "100", "price": 12, "type": "Material"},
                {"price": "n/a"},
            ],
            "totalAmount": "$50.90",
            "date": "2025-03-14",
        })
        self.assertEqual(receipt.supplier.name, "Metro Cash & Carry")
        self.assertIsNone(receipt.supplier.phone)
        self.assertEqual(receipt.total_amount, 50.9)
        first, boxes, unknown = receipt.items
        self.assertEqual((first.quantity, first.unit, first.price), (2.0, "bag", 38.9))
        self.assertEqual(boxes.type, "material")
        self.assertEqual(boxes.unit, "pcs")
        self.assertEqual(unknown.name, "Unknown Item")
        self.assertEqual(unknown.price, 0)
        self.assertEqual(unknown.type, "ingredient")
        self.assertEqual([i.name for i in receipt.materials()], ["Cake boxes"])
        self.assertEqual(len(receipt.ingredients()), 2)

    def test_empty_receipt(self):
        self.assertEqual(normalize_receipt("garbage").to_dict(), {"items": []})
        self.assertIsNone(normalize_receipt({"supplier": {"name": ""}}).supplier)


if __name__ == '__main__':
    unittest.main()
