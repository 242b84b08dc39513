"""Tests for the HTTP layer: envelopes, status codes and headers."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from dpr_api.api.app import app
from dpr_api.data.errors import DatabaseOperationError


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["environment"]
    assert "X-Request-ID" in response.headers
    assert "X-Process-Time" in response.headers


def test_health_without_store_is_degraded():
    response = TestClient(app).get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "disconnected"


def test_store_not_initialized_returns_503():
    response = TestClient(app).get("/api/members")
    assert response.status_code == 503
    assert response.json()["success"] is False


def test_list_members_paginated(client):
    response = client.get("/api/members", params={"page": 2, "limit": 4, "sortBy": "usia", "sortOrder": "desc"})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["data"]) == 2
    assert body["pagination"]["currentPage"] == 2
    assert body["pagination"]["hasNext"] is False
    assert response.headers["X-Total-Count"] == "6"
    assert response.headers["X-Page-Count"] == "2"
    assert response.headers["X-Current-Page"] == "2"
    assert response.headers["X-Page-Size"] == "4"


def test_list_members_invalid_paging_uses_defaults(client):
    body = client.get("/api/members", params={"page": "abc", "limit": "0"}).json()
    assert body["pagination"]["currentPage"] == 1
    assert body["pagination"]["itemsPerPage"] == 25
    assert len(body["data"]) == 6


def test_get_member(client):
    response = client.get("/api/members/105")
    assert response.status_code == 200
    assert set(response.json()) == {"success", "data"}
    assert response.json()["data"]["nama"] == "Muhammad Rizal"


def test_get_member_not_found(client):
    for member_id in ("999", "abc"):
        response = client.get(f"/api/members/{member_id}")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Member not found",
            "message": "Anggota DPR tidak ditemukan",
        }


def test_search(client):
    response = client.post("/api/search", json={
        "query": "  golkar ",
        "limit": 1,
        "sortBy": "usia",
        "sortOrder": "DESC",
        "filters": {"agama": "Islam", "minUsia": "", "maxUsia": None},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["query"] == "golkar"
    assert body["count"] == 1
    assert body["total"] == 2
    assert body["results"][0]["nama"] == "Muhammad Rizal"
    assert body["pagination"]["totalPages"] == 2
    assert response.headers["X-Total-Count"] == "2"


def test_search_with_empty_body_lists_everything(client):
    body = client.post("/api/search").json()
    assert body["success"] is True
    assert body["query"] == ""
    assert body["total"] == 6


def test_search_age_range(client):
    body = client.post("/api/search", json={"filters": {"minUsia": 30, "maxUsia": 50}}).json()
    assert sorted(item["nama"] for item in body["results"]) == ["Ahmad Sahroni", "Dewi Lestari"]


def test_search_invalid_age_is_422(client):
    response = client.post("/api/search", json={"filters": {"minUsia": "tua"}})
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
    assert body["details"]


def test_search_database_failure_is_500(client, store):
    with patch.object(store.member_store, "search", side_effect=DatabaseOperationError("down")):
        response = client.post("/api/search", json={"query": "x"})
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal server error",
        "message": "Gagal melakukan pencarian",
    }


def test_stats(client):
    body = client.get("/api/stats").json()
    assert body["success"] is True
    assert body["data"]["total"] == [{"count": 6}]
    assert "byUsia" in body["data"]


def test_filters(client):
    body = client.get("/api/filters").json()
    assert body["success"] is True
    assert body["data"]["agama"] == ["Hindu", "Islam", "Kristen"]


def test_export_json(client):
    body = client.get("/api/export").json()
    assert body["success"] is True
    assert body["count"] == 6
    assert body["data"][0]["nama"] == "Ahmad Sahroni"


def test_export_csv(client):
    response = client.get("/api/export", params={"format": "csv"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == 'attachment; filename="dpr_data.csv"'
    lines = response.text.split("\n")
    assert lines[0].startswith("ID,Nama,")
    assert len([line for line in lines if line]) == 7


def test_unknown_endpoint(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Not found",
        "message": "Endpoint tidak ditemukan",
        "requested": "/api/does-not-exist",
    }
