import pytest
from bento.logic.imports.errors import NoTextExtractedError
from bento.logic.imports.text_parser import parse_recipe_text, parse_ingredient_line, import_recipe_text

CARD = """
Classic Brioche

Rich, buttery bread for burger buns.
Makes 12 buns.

Ingredients
500 g bread flour
6 pcs eggs
250 g butter
a pinch of salt
1/2 tsp vanilla
- 10 g instant yeast

Method
Mix everything except the butter.
Knead in the butter, proof overnight, bake at 180C.
"""


def test_card_is_segmented():
    raw = parse_recipe_text(CARD)
    assert raw["name"] == "Classic Brioche"
    assert raw["description"] == "Rich, buttery bread for burger buns. Makes 12 buns."
    assert raw["ingredients"] == [
        {"name": "bread flour", "quantity": "500", "unit": "g"},
        {"name": "eggs", "quantity": "6", "unit": "pcs"},
        {"name": "butter", "quantity": "250", "unit": "g"},
        {"name": "instant yeast", "quantity": "10", "unit": "g"},
    ]
    assert raw["procedures"] == (
        "Mix everything except the butter.\n"
        "Knead in the butter, proof overnight, bake at 180C."
    )


def test_import_normalizes_quantities():
    recipe = import_recipe_text(CARD)
    assert [i.quantity for i in recipe.ingredients] == [500.0, 6.0, 250.0, 10.0]
    assert recipe.description.startswith("Rich")


def test_without_ingredient_header_uses_first_paragraph():
    text = "Shortbread\nButtery and crumbly.\n\n200 g flour\n100 g butter\n50 g sugar\nDirections\nRub, press, bake."
    raw = parse_recipe_text(text)
    assert raw["description"] == "Buttery and crumbly."
    assert [i["name"] for i in raw["ingredients"]] == ["flour", "butter", "sugar"]
    assert raw["procedures"] == "Rub, press, bake."


def test_title_only_document():
    recipe = import_recipe_text("Mystery Cake\n")
    data = recipe.to_dict()
    assert data == {"name": "Mystery Cake", "ingredients": []}


def test_ingredient_word_in_method_is_not_a_header():
    text = "Pancakes\nStep 1: whisk all the ingredients together.\nStep 2: fry."
    raw = parse_recipe_text(text)
    assert raw["description"] == ""
    assert raw["ingredients"] == []
    assert raw["procedures"] == "Step 2: fry."


@pytest.mark.parametrize("blurb", [
    "My grandma's method for fudgy brownies.",
    "A step-by-step loaf",
    "Follow the directions closely.",
])
def test_procedure_word_in_description_keeps_sections(blurb):
    text = f"Brownies\n{blurb}\nIngredients\n200 g flour\n100 g sugar\nInstructions\nMix."
    raw = parse_recipe_text(text)
    assert raw["description"] == blurb
    assert [i["name"] for i in raw["ingredients"]] == ["flour", "sugar"]
    assert raw["procedures"] == "Mix."


def test_short_line_mentioning_what_you_need_is_a_header():
    raw = parse_recipe_text("Lemonade\nTart and cold.\nHere's what you need:\n4 pcs lemons\n1 l water\nSteps\nSqueeze.")
    assert raw["description"] == "Tart and cold."
    assert [i["name"] for i in raw["ingredients"]] == ["lemons", "water"]


def test_limits_are_applied():
    lines = ["X" * 150, "Ingredients"] + [f"{n} g item{n}" for n in range(1, 80)]
    raw = parse_recipe_text("\n".join(lines))
    assert len(raw["name"]) == 100
    assert len(raw["ingredients"]) == 50


@pytest.mark.parametrize("text", ["", "   \n\n  ", None])
def test_empty_text_raises(text):
    with pytest.raises(NoTextExtractedError):
        parse_recipe_text(text)


def test_parse_ingredient_line():
    assert parse_ingredient_line("2 cups flour") == {"name": "flour", "quantity": "2", "unit": "cups"}
    assert parse_ingredient_line("0.5 tsp sea salt") == {"name": "sea salt", "quantity": "0.5", "unit": "tsp"}
    assert parse_ingredient_line("flour 2 cups") is None
    assert parse_ingredient_line("2 eggs") is None
    assert parse_ingredient_line("nan g flour") is None
