"""Tests for the users API example — CRUD, params, errors, CORS."""

from finch.testing import TestClient

ADMIN = "https://admin.example.com"


class TestCrud:
    def test_empty_list(self, example_app) -> None:
        response = TestClient(example_app).get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_then_get(self, example_app) -> None:
        client = TestClient(example_app)
        created = client.post("/users", json={"name": "alice"})
        assert created.status_code == 200
        user_id = created.json()["id"]

        response = client.get(f"/users/{user_id}")
        assert response.json() == {"id": user_id, "name": "alice"}

    def test_rename(self, example_app) -> None:
        client = TestClient(example_app)
        user_id = client.post("/users", json={"name": "alice"}).json()["id"]

        response = client.put(f"/users/{user_id}", json={"name": "bob"})
        assert response.json()["name"] == "bob"

    def test_delete(self, example_app) -> None:
        client = TestClient(example_app)
        user_id = client.post("/users", json={"name": "alice"}).json()["id"]

        assert client.delete(f"/users/{user_id}").json() == {"deleted": user_id}
        assert client.get(f"/users/{user_id}").status_code == 404


class TestErrors:
    def test_unknown_user(self, example_app) -> None:
        response = TestClient(example_app).get("/users/99")
        assert response.status_code == 404
        assert response.body == "Error: user 99 not found"

    def test_non_numeric_id(self, example_app) -> None:
        assert TestClient(example_app).get("/users/abc").status_code == 404

    def test_malformed_body(self, example_app) -> None:
        response = TestClient(example_app).post("/users", body="{nope")
        assert response.status_code == 400
        assert response.body == "Error: body must be JSON"

    def test_missing_name(self, example_app) -> None:
        response = TestClient(example_app).post("/users", json={"name": "  "})
        assert response.status_code == 422

    def test_unknown_route(self, example_app) -> None:
        response = TestClient(example_app).get("/teams")
        assert response.status_code == 404
        assert response.body == "Route not found"


class TestCors:
    def test_preflight_from_admin(self, example_app) -> None:
        response = TestClient(example_app).options("/users", origin=ADMIN)
        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE"

    def test_preflight_from_elsewhere(self, example_app) -> None:
        response = TestClient(example_app).options("/users", origin="https://evil.com")
        assert response.status_code == 403

    def test_admin_origin_echoed(self, example_app) -> None:
        response = TestClient(example_app).get("/users", headers={"Origin": ADMIN})
        assert response.headers["Access-Control-Allow-Origin"] == ADMIN
