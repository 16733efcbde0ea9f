from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from userservice.app import create_app
from userservice.domain.errors import StorageError
from userservice.services.user_service import UserService


@pytest.fixture()
def client(fake_repo):
    with TestClient(create_app(UserService(fake_repo))) as c:
        yield c


def test_create_and_fetch(client):
    res = client.post("/users", json={"name": "Ann", "email": "ann@x.com", "age": 40})
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 1
    assert body["created_at"]

    assert client.get("/users/1").json()["email"] == "ann@x.com"
    assert client.get("/users/by-email", params={"email": "ann@x.com"}).json()["id"] == 1
    assert [u["id"] for u in client.get("/users").json()] == [1]


def test_error_status_mapping(client):
    client.post("/users", json={"name": "Ann", "email": "ann@x.com"})
    assert client.post("/users", json={"name": "", "email": "ann@x.com"}).status_code == 400
    assert client.post("/users", json={"name": "Ann", "email": "ann@x.com", "age": "old"}).status_code == 400
    assert client.post("/users", json={"name": 5, "email": "a@b.com"}).status_code == 400
    assert client.post("/users", json={"name": "Ann", "email": ["a@b.com"]}).status_code == 400
    assert client.put("/users/1", json={"name": {"first": "A"}, "email": "a@b.com"}).status_code == 400
    dup = client.post("/users", json={"name": "Bob", "email": "ann@x.com"})
    assert dup.status_code == 409
    assert dup.json()["detail"] == "Email already exists: ann@x.com"
    assert client.get("/users/77").status_code == 404
    assert client.get("/users/0").status_code == 400
    assert client.get("/users/by-email", params={"email": " "}).status_code == 400


def test_update_and_delete(client):
    client.post("/users", json={"name": "A", "email": "a@b.com"})
    res = client.put("/users/1", json={"name": "A2", "email": "a2@b.com", "age": 20})
    assert res.status_code == 200
    assert res.json()["age"] == 20

    assert client.delete("/users/1").status_code == 204
    assert client.delete("/users/1").status_code == 404


def test_storage_error_is_503(client, fake_repo):
    def boom():
        raise StorageError("Error finding all users")

    fake_repo.find_all = boom
    res = client.get("/users")
    assert res.status_code == 503


def test_out_of_range_id_against_sqlite_is_503(temp_db):
    with TestClient(create_app()) as c:
        res = c.get("/users/100000000000000000000")
    assert res.status_code == 503
