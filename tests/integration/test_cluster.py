"""Integration tests for the single-process cluster app."""

from fastapi.testclient import TestClient


def test_cluster_serves_both_services() -> None:
    """Test that books and orders are reachable from one app."""
    from main import app

    with TestClient(app) as client:
        assert client.get("/health").json()["success"] is True
        assert client.get("/api/books").status_code == 200

        created = client.post(
            "/api/orders",
            json={"userId": "u1", "items": [{"bookId": "b1", "quantity": 1, "unitPrice": 3.0}]},
        )
        assert created.status_code == 201
        assert client.get("/api/orders/stats").json()["data"]["totalOrders"] >= 1
