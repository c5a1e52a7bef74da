"""Tests for the /api/users endpoints."""

from fastapi.testclient import TestClient

from conftest import FailingUserStore
from skill_sharing_api.app.main import create_app
from skill_sharing_api.app.schemas.user import Role


ANA = {"id": "u1", "name": "Ana", "email": "ana@x.com"}


class TestUserScenario:
    def test_create_repeat_and_read(self, client):
        response = client.post("/api/users", json=ANA)
        assert response.status_code == 200
        assert response.json()["id"] == "u1"

        response = client.post("/api/users", json=ANA)
        assert response.status_code == 200
        assert response.json() == {"message": "User already exists"}

        response = client.get("/api/users/u1")
        assert response.status_code == 200
        assert response.json() == {"id": "u1", "name": "Ana", "email": "ana@x.com"}

        response = client.get("/api/users/u404")
        assert response.status_code == 404
        assert response.content == b""


class TestCreateUserEndpoint:
    def test_created_body(self, client):
        response = client.post("/api/users", json=ANA)
        assert response.json() == {
            "message": "User created successfully",
            "id": "u1",
            "name": "Ana",
        }

    def test_repeat_with_other_data_keeps_original(self, client):
        client.post("/api/users", json=ANA)
        client.post("/api/users", json={"id": "u1", "name": "Bob", "email": "bob@x.com"})
        assert client.get("/api/users/u1").json()["name"] == "Ana"

    def test_role_injection_is_ignored(self, client, store):
        response = client.post(
            "/api/users", json={**ANA, "role": "ADMIN", "following": ["u2"]}
        )
        assert response.status_code == 200
        assert store.users["u1"].role == Role.USER
        assert store.users["u1"].following == []

    def test_missing_id(self, client):
        response = client.post("/api/users", json={"name": "Ana", "email": "ana@x.com"})
        assert response.status_code == 400
        assert response.json() == {"message": "User ID is required"}

    def test_empty_name(self, client):
        response = client.post("/api/users", json={"id": "u1", "name": "", "email": "ana@x.com"})
        assert response.status_code == 400
        assert response.json() == {"message": "User name is required"}

    def test_missing_email(self, client):
        response = client.post("/api/users", json={"id": "u1", "name": "Ana"})
        assert response.status_code == 400
        assert response.json() == {"message": "User email is required"}

    def test_first_failing_field_is_reported(self, client):
        response = client.post("/api/users", json={"email": ""})
        assert response.json() == {"message": "User ID is required"}

    def test_non_object_body(self, client):
        response = client.post("/api/users", json=["u1", "Ana"])
        assert response.status_code == 400
        assert response.json() == {"message": "User ID is required"}

    def test_truncated_json_body(self, client, store):
        response = client.post(
            "/api/users",
            content=b'{"id": "u1", "name":',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"].startswith("Failed to create user: ")
        assert store.users == {}

    def test_scalar_json_body(self, client):
        response = client.post(
            "/api/users", content=b"42", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "User ID is required"}

    def test_empty_body(self, client):
        response = client.post("/api/users")
        assert response.status_code == 400
        assert response.json() == {"message": "User ID is required"}

    def test_store_failure(self):
        client = TestClient(create_app(store=FailingUserStore(fail_save=True)))
        response = client.post("/api/users", json=ANA)
        assert response.status_code == 400
        assert response.json() == {"message": "Database error: disk full"}

    def test_unexpected_failure(self):
        client = TestClient(create_app(store=FailingUserStore(fail_exists=True)))
        response = client.post("/api/users", json=ANA)
        assert response.status_code == 400
        assert response.json() == {"message": "Failed to create user: cursor closed"}

    def test_service_stays_available_after_failure(self):
        store = FailingUserStore(fail_save=True)
        client = TestClient(create_app(store=store))
        assert client.post("/api/users", json=ANA).status_code == 400
        store.fail_save = False
        assert client.post("/api/users", json=ANA).json()["message"] == "User created successfully"


class TestGetUserEndpoint:
    def test_id_containing_slash(self, client):
        client.post("/api/users", json={"id": "team/ana", "name": "Ana", "email": "ana@x.com"})
        response = client.get("/api/users/team/ana")
        assert response.status_code == 200
        assert response.json() == {"id": "team/ana", "name": "Ana", "email": "ana@x.com"}

    def test_percent_encoded_slash(self, client):
        client.post("/api/users", json={"id": "team/ana", "name": "Ana", "email": "ana@x.com"})
        assert client.get("/api/users/team%2Fana").json()["id"] == "team/ana"

    def test_missing_nested_id_is_empty_404(self, client):
        response = client.get("/api/users/team/nobody")
        assert response.status_code == 404
        assert response.content == b""

    def test_lookup_failure_is_404(self):
        client = TestClient(create_app(store=FailingUserStore(fail_find=True)))
        response = client.get("/api/users/u1")
        assert response.status_code == 404
        assert response.content == b""

    def test_only_public_fields(self, client):
        client.post("/api/users", json=ANA)
        assert set(client.get("/api/users/u1").json()) == {"id", "name", "email"}
