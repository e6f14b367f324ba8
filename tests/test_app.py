"""Tests for application-level routes and error mapping."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from coffee_loyalty.main import app
from coffee_loyalty.routes import products as products_routes


@pytest.mark.parametrize("path", ["/health", "/status"])
def test_health_routes(client, path):
    resp = client.get(path)

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_unknown_endpoint(client):
    resp = client.get("/coupons")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Endpoint not found."}


@pytest.mark.parametrize("method, path", [("delete", "/transactions"), ("patch", "/products")])
def test_unsupported_method_on_known_path(client, method, path):
    resp = client.request(method.upper(), path)

    assert resp.status_code == 404
    assert resp.json() == {"error": "Endpoint not found."}


def test_unsupported_method_on_member(client, member):
    resp = client.delete(f"/members/{member.id}")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Endpoint not found."}


def test_malformed_json_body(client):
    resp = client.post("/products", content="{", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request payload."}


def test_storage_failure_is_generic(client, monkeypatch):
    def broken(db):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(products_routes, "list_products", broken)

    resp = client.get("/products")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Storage error."}


def test_unhandled_error(monkeypatch):
    def broken(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(products_routes, "list_products", broken)

    resp = TestClient(app, raise_server_exceptions=False).get("/products")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error."}


class TestClubCategories:
    def test_create_and_list(self, client):
        resp = client.post("/club-categories", json={"name": "Silver", "description": "Second tier"})

        assert resp.status_code == 200
        assert resp.json()["name"] == "Silver"

        listed = client.get("/club-categories").json()
        assert [c["name"] for c in listed] == ["Silver"]

    def test_default_name(self, client):
        resp = client.post("/club-categories", json={})

        assert resp.status_code == 200
        assert resp.json()["name"] == "Regular"
        assert resp.json()["description"] == ""

    def test_duplicate_name(self, client, category_gold):
        resp = client.post("/club-categories", json={"name": "Gold"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "ClubCategory name already exists."}

    def test_member_can_join_new_category(self, client):
        client.post("/club-categories", json={"name": "VIP"})

        resp = client.post("/members", json={"name": "Indra", "phone": "0821", "clubCategory": "VIP"})

        assert resp.status_code == 200
        assert resp.json()["clubCategory"]["name"] == "VIP"
