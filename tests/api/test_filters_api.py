"""Tests for Filter and Sort API endpoints."""

from fastapi.testclient import TestClient


def ids(listing: dict) -> list[int]:
    return [item["id"] for item in listing["items"]]


class TestFilterOptions:
    """Tests for GET /filters/options."""

    def test_options(self, client: TestClient) -> None:
        response = client.get("/filters/options")

        assert response.status_code == 200
        data = response.json()
        assert data["categories"][0] == "All"
        assert [o["value"] for o in data["price_ranges"]] == [
            "All",
            "0-50",
            "50-100",
            "100-200",
            "200-500",
            "500-99999",
        ]
        assert data["price_ranges"][1]["label"] == "Under ₹50"
        assert [o["value"] for o in data["ratings"]] == [0, 4, 3, 2]
        assert [o["value"] for o in data["sort_options"]] == [
            "relevance",
            "price-low",
            "price-high",
            "rating",
            "popularity",
        ]


class TestFilterEditor:
    """Tests for the staged filter editor endpoints."""

    def test_initially_closed(self, client: TestClient) -> None:
        response = client.get("/filters/editor")

        data = response.json()
        assert data["status"] == "closed"
        assert data["draft"] is None
        assert data["applied"] == {"category": "All", "price_range": "All", "min_rating": 0}

    def test_open_seeds_draft(self, client: TestClient) -> None:
        response = client.post("/filters/editor/open")

        data = response.json()
        assert data["status"] == "editing"
        assert data["draft"] == data["applied"]

    def test_draft_does_not_change_list(self, client: TestClient) -> None:
        """Test draft edits leave applied filters and the list alone."""
        client.post("/filters/editor/open")

        response = client.patch(
            "/filters/editor/draft",
            json={"category": "electronics", "min_rating": 3},
        )

        data = response.json()
        assert data["draft"]["category"] == "electronics"
        assert data["draft"]["min_rating"] == 3
        assert data["applied"]["category"] == "All"
        assert data["active_count"] == 0
        assert client.get("/products").json()["total"] == 7

    def test_draft_ignored_while_closed(self, client: TestClient) -> None:
        response = client.patch("/filters/editor/draft", json={"category": "electronics"})

        data = response.json()
        assert data["status"] == "closed"
        assert data["draft"] is None

    def test_invalid_rating_rejected(self, client: TestClient) -> None:
        client.post("/filters/editor/open")

        response = client.patch("/filters/editor/draft", json={"min_rating": 5})

        assert response.status_code == 422

    def test_commit_applies_draft(self, client: TestClient) -> None:
        client.post("/filters/editor/open")
        client.patch(
            "/filters/editor/draft",
            json={"category": "electronics", "price_range": "0-50"},
        )

        response = client.post("/filters/editor/commit")

        assert response.status_code == 200
        data = response.json()
        assert ids(data) == [5, 6]
        assert data["active_count"] == 2
        assert data["chips"] == [
            {"field": "category", "label": "electronics"},
            {"field": "price_range", "label": "Under ₹50"},
        ]
        assert client.get("/filters/editor").json()["status"] == "closed"

    def test_cancel_discards_draft(self, client: TestClient) -> None:
        client.post("/filters/editor/open")
        client.patch("/filters/editor/draft", json={"category": "jewelery"})

        response = client.post("/filters/editor/cancel")

        data = response.json()
        assert data["status"] == "closed"
        assert data["applied"]["category"] == "All"
        assert client.get("/products").json()["total"] == 7

    def test_no_matches_shows_empty_state(self, client: TestClient) -> None:
        client.post("/filters/editor/open")
        client.patch(
            "/filters/editor/draft",
            json={"category": "jewelery", "price_range": "0-50"},
        )

        data = client.post("/filters/editor/commit").json()

        assert data["items"] == []
        assert data["is_empty"] is True
        assert data["count_label"] == "0 Products"


class TestChipsAndClear:
    """Tests for chip removal and clear all."""

    def _apply(self, client: TestClient, **draft: object) -> None:
        client.post("/filters/editor/open")
        client.patch("/filters/editor/draft", json=draft)
        client.post("/filters/editor/commit")

    def test_remove_chip(self, client: TestClient) -> None:
        """Test removing one chip resets only that criterion."""
        self._apply(client, category="men's clothing", min_rating=4)

        response = client.delete("/filters/chips/min_rating")

        assert response.status_code == 200
        data = response.json()
        assert data["applied"]["category"] == "men's clothing"
        assert data["applied"]["min_rating"] == 0
        assert ids(data) == [1, 2, 3]

    def test_remove_unknown_chip(self, client: TestClient) -> None:
        response = client.delete("/filters/chips/colour")
        assert response.status_code == 422

    def test_clear_all(self, client: TestClient) -> None:
        self._apply(client, category="electronics", price_range="0-50", min_rating=2)

        response = client.post("/filters/clear")

        data = response.json()
        assert data["active_count"] == 0
        assert data["chips"] == []
        assert data["total"] == 7


class TestSort:
    """Tests for PUT /sort."""

    def test_sort_price_low(self, client: TestClient) -> None:
        response = client.put("/sort", json={"sort_key": "price-low"})

        assert response.status_code == 200
        data = response.json()
        assert data["sort_key"] == "price-low"
        assert ids(data) == [5, 2, 6, 3, 1, 4, 7]

    def test_sort_popularity_is_stable(self, client: TestClient) -> None:
        """Test ties keep fetch order."""
        data = client.put("/sort", json={"sort_key": "popularity"}).json()
        assert ids(data) == [3, 4, 2, 6, 1, 7, 5]

    def test_sort_after_filter(self, client: TestClient) -> None:
        client.post("/filters/editor/open")
        client.patch("/filters/editor/draft", json={"category": "men's clothing"})
        client.post("/filters/editor/commit")

        data = client.put("/sort", json={"sort_key": "rating"}).json()

        assert ids(data) == [3, 2, 1]

    def test_unknown_sort_key_rejected(self, client: TestClient) -> None:
        response = client.put("/sort", json={"sort_key": "newest"})
        assert response.status_code == 422
