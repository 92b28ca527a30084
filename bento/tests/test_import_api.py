import pytest
from fastapi.testclient import TestClient

from bento.api import api_ai
from bento.api.api_run import app
from bento.api.routes import imports
from bento.domain.Receipt import ParsedReceipt
from bento.events.Event_Bus import EventBus
from bento.infra.Recipe_Repository import RecipeRepository
from bento.logic.imports.errors import ExtractionUnavailableError, InvalidExtractionResponseError
from bento.logic.imports.normalizer import normalize_recipe


@pytest.fixture
def client(tmp_path):
    """Test client whose recipe repository writes into a temporary directory."""
    repo = RecipeRepository(tmp_path / "recipes.json", tmp_path / "ingredients.json", event_bus=EventBus())
    app.dependency_overrides[imports.get_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_parse_text(client):
    resp = client.post("/api/recipes/parse-text", json={
        "text": "Banana Bread\nMoist loaf.\nIngredients\n3 pcs bananas\n250 g flour\nSteps\nMash, mix, bake."
    })
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["name"] == "Banana Bread"
    assert data["ingredients"] == [
        {"name": "bananas", "quantity": 3.0, "unit": "pcs"},
        {"name": "flour", "quantity": 250.0, "unit": "g"},
    ]
    assert data["procedures"] == "Mash, mix, bake."


def test_parse_text_without_content(client):
    resp = client.post("/api/recipes/parse-text", json={"text": "  \n "})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "No text could be extracted from the document"


def test_import_persists_normalized_recipe(client):
    resp = client.post("/api/recipes/import", json={
        "name": " Cake ", "ingredients": [{"name": "", "quantity": "two", "unit": ""}],
    })
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["parsed"] == {"name": "Cake", "ingredients": [
        {"name": "Unknown Ingredient", "quantity": 1.0, "unit": "g"}]}
    assert body["recipe"]["name"] == "Cake"

    listing = client.get("/api/recipes").json()
    assert listing["count"] == 1
    assert listing["recipes"][0]["id"] == body["recipe"]["id"]


def test_parse_image_uses_ai(client, monkeypatch):
    seen = {}

    def fake_extract(data, mime_type):
        seen["mime"] = mime_type
        return normalize_recipe({"name": "Siopao", "ingredients": [{"name": "Pork asado", "quantity": "300"}]})

    monkeypatch.setattr(api_ai, "extract_recipe_from_image", fake_extract)
    resp = client.post("/api/recipes/parse-image", files={"file": ("card.jpg", b"\xff\xd8fake", "image/jpeg")})
    assert resp.status_code == 200, resp.text
    assert resp.json()["ingredients"][0]["quantity"] == 300.0
    assert seen["mime"] == "image/jpeg"


@pytest.mark.parametrize("error, status", [
    (ExtractionUnavailableError(), 503),
    (InvalidExtractionResponseError(), 502),
])
def test_parse_image_service_errors(client, monkeypatch, error, status):
    def failing(data, mime_type):
        raise error

    monkeypatch.setattr(api_ai, "extract_recipe_from_image", failing)
    resp = client.post("/api/recipes/parse-image", files={"file": ("card.png", b"png", "image/png")})
    assert resp.status_code == status
    assert resp.json()["detail"] == error.message


def test_upload_type_and_size_checks(client, monkeypatch):
    resp = client.post("/api/recipes/parse-image", files={"file": ("notes.txt", b"hello", "text/plain")})
    assert resp.status_code == 400
    monkeypatch.setattr(imports, "MAX_UPLOAD_BYTES", 4)
    resp = client.post("/api/recipes/parse-pdf", files={"file": ("big.pdf", b"%PDF-1.4 data", "application/pdf")})
    assert resp.status_code == 413


def test_parse_pdf_unreadable(client):
    resp = client.post("/api/recipes/parse-pdf", files={"file": ("broken.pdf", b"not a pdf at all", "application/pdf")})
    assert resp.status_code == 422


def test_parse_csv_receipt(client, monkeypatch):
    monkeypatch.setattr(api_ai, "extract_receipt_from_csv", lambda csv: ParsedReceipt.model_validate({
        "items": [{"name": "Cake boxes", "quantity": "50", "price": "$20", "type": "material"}],
    }))
    resp = client.post("/api/receipts/parse-csv", json={"csv": "Cake boxes,50,20"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["items"][0] == {
        "name": "Cake boxes", "quantity": 50.0, "unit": "pcs", "price": 20.0, "type": "material",
    }
