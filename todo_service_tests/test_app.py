from fastapi.testclient import TestClient

from todo_service.main import create_app


def test_routes_mount_under_api_prefix():
    with TestClient(create_app(api_prefix="/api")) as prefixed:
        reg = prefixed.post(
            "/api/auth/register",
            json={"email": "prefixed@example.com", "password": "pw", "name": "P"},
        )
        assert reg.status_code == 201
        headers = {"Authorization": f"Bearer {reg.json()['token']}"}

        created = prefixed.post("/api/todos", headers=headers, json={"title": "Buy milk"})
        assert created.status_code == 201
        listed = prefixed.get("/api/todos", headers=headers)
        assert [t["title"] for t in listed.json()] == ["Buy milk"]

        assert prefixed.get("/todos", headers=headers).status_code == 404
        assert prefixed.get("/health").status_code == 200


def test_docs_served_at_api_docs(client):
    assert client.get("/api-docs").status_code == 200
    assert client.get("/docs").status_code == 404
