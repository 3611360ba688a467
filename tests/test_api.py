"""Tests for the HTTP surface."""

from fastapi.testclient import TestClient

from foodcheck.api.app import create_app
from tests.conftest import FakeAnalysisClient, FakeOpenFoodFactsClient


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_catalog_search_returns_quinoa_bowl(container) -> None:
    response = _client(container).get("/catalog/search", params={"q": "quinoa bowl"})

    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 1
    assert body["has_more"] is False
    item = body["items"][0]
    assert item["name"] == "Organic Quinoa Power Bowl"
    assert item["vish_score"] == 92
    assert item["nutrition"]["protein"] == {"amount": 18.0, "unit": "g"}


def test_catalog_search_filters(container) -> None:
    response = _client(container).get(
        "/catalog/search",
        params=[("tag", "vegan"), ("exclude_allergen", "sesame"), ("page_size", "2")],
    )

    body = response.json()
    names = [item["name"] for item in body["items"]]
    assert "Organic Quinoa Power Bowl" not in names
    assert len(names) == 2
    assert body["has_more"] is True


def test_catalog_views_and_items(container) -> None:
    client = _client(container)

    popular = client.get("/catalog/views/popular", params={"limit": 3}).json()
    assert [item["consumer_score"] for item in popular["items"]] == sorted(
        (item["consumer_score"] for item in popular["items"]), reverse=True
    )
    assert client.get("/catalog/views/trending").status_code == 404

    item = client.get("/catalog/items/healthy_greek_yogurt").json()
    assert item["brand"] == "Fage"
    assert client.get("/catalog/items/nope").status_code == 404

    summary = client.get("/catalog/summary").json()
    assert summary["total"] == 18
    assert "Dairy" in client.get("/catalog/categories").json()["categories"]


def test_barcode_lookup(container, off_client: FakeOpenFoodFactsClient) -> None:
    client = _client(container)

    local = client.get("/catalog/barcode/0850001234017")
    missing = client.get("/catalog/barcode/999")

    assert local.json()["id"] == "healthy_quinoa_power_bowl"
    assert missing.status_code == 404
    assert off_client.calls == ["999"]


def test_image_analysis_is_validated_and_stored(
    container, analysis_client: FakeAnalysisClient
) -> None:
    client = _client(container)

    response = client.post(
        "/analyses/image",
        content=b"\x89PNG\r\n\x1a\nimage",
        headers={"X-Health-Context": "low sodium diet"},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["food_name"] == "Crunchy Granola"
    assert body["vish_score"] == 72
    assert body["analysis"]["overall"]["grade"] == "C"
    assert "low sodium diet" in analysis_client.calls[0]["prompt"]
    assert analysis_client.calls[0]["image_data_url"].startswith("data:image/png")
    assert container.history_service.get_by_id(body["id"]) is not None


def test_image_analysis_rejects_unusable_output(
    container, analysis_client: FakeAnalysisClient
) -> None:
    analysis_client.response_text = "Sorry, I can't read this label."

    client = _client(container)

    assert client.post("/analyses/image", content=b"img").status_code == 422
    assert client.post("/analyses/image", content=b"").status_code == 422
    assert container.history_service.get_all() == []


def test_raw_analysis_missing_taste_uses_defaults(container) -> None:
    response = _client(container).post(
        "/analyses",
        json={
            "analysis": {
                "productName": "Rice Cakes",
                "health": {"score": 80},
                "consumer": {"score": 70},
            },
            "user_notes": "light snack",
        },
    )

    body = response.json()
    assert response.status_code == 200
    assert body["food_name"] == "Rice Cakes"
    assert body["analysis"]["taste"]["score"] == 50
    assert body["analysis"]["taste"]["profile"] == ["Neutral"]
    assert body["vish_score"] == 67
    assert body["user_notes"] == "light snack"


def test_history_crud(container) -> None:
    client = _client(container)
    created = client.post(
        "/analyses",
        json={"analysis": {"health": {"score": 90}}, "food_name": "Kale Chips"},
    ).json()
    record_id = created["id"]

    listed = client.get("/analyses").json()["records"]
    assert [record["id"] for record in listed] == [record_id]
    assert client.get("/analyses", params={"q": "kale"}).json()["records"]
    assert client.get("/analyses", params={"band": "healthy"}).json()["records"] == []
    assert (
        client.get("/analyses", params={"q": "kale", "min_score": 80}).json()["records"]
        == []
    )

    noted = client.patch(f"/analyses/{record_id}/note", json={"notes": "crispy"})
    assert noted.json()["user_notes"] == "crispy"
    assert client.patch("/analyses/nope/note", json={"notes": "x"}).status_code == 404

    assert client.delete(f"/analyses/{record_id}").status_code == 204
    assert client.get(f"/analyses/{record_id}").status_code == 404
    assert client.delete(f"/analyses/{record_id}").status_code == 404


def test_clear_history(container) -> None:
    client = _client(container)
    client.post("/analyses", json={"analysis": {}})

    assert client.delete("/analyses").status_code == 204
    assert client.get("/analyses").json()["records"] == []


def test_recipe_analysis(container) -> None:
    client = _client(container)

    response = client.post(
        "/recipes/analyze",
        json={
            "name": "Overnight Oats",
            "servings": 2,
            "ingredients": [
                {"food_id": "healthy_greek_yogurt", "amount": 1},
                {"food_id": "healthy_steel_cut_oats", "amount": 2, "unit": "cup"},
            ],
            "save": True,
        },
    )

    body = response.json()
    assert response.status_code == 200
    assert body["food_name"] == "Overnight Oats"
    assert body["analysis"]["consumer"]["score"] == 75
    assert "milk" in body["analysis"]["health"]["allergens"]

    unknown = client.post(
        "/recipes/analyze",
        json={"ingredients": [{"food_id": "nope", "amount": 1}]},
    )
    assert unknown.status_code == 422


def test_stats_and_exports(container) -> None:
    client = _client(container)
    for score in (90, 40):
        client.post(
            "/analyses",
            json={
                "analysis": {
                    "health": {"score": score},
                    "taste": {"score": score},
                    "consumer": {"score": score},
                },
                "food_name": f"food {score}",
            },
        )

    stats = client.get("/stats").json()
    assert stats["total_analyses"] == 2
    assert stats["average_vish_score"] == 65
    assert stats["healthy_choices"] == 1
    assert len(stats["monthly_analyses"]) == 6
    assert stats["monthly_analyses"][-1] == {"month": "Oct 2026", "count": 2}

    trends = client.get("/stats/trends.csv")
    assert trends.headers["content-type"].startswith("text/csv")
    assert trends.text.splitlines()[1] == "Vish Score,65,0"

    history_csv = client.get("/analyses/export.csv").text.splitlines()
    assert history_csv[0].startswith("Date,Food Name,Vish Score")
    assert len(history_csv) == 3


def test_user_lists(container) -> None:
    client = _client(container)

    toggled = client.post("/lists/favorites/dessert_oreo/toggle").json()
    assert toggled == {"item_id": "dessert_oreo", "present": True}
    assert client.get("/lists/favorites").json() == {"items": ["dessert_oreo"]}
    assert client.get("/lists/wishlist").status_code == 404
