API = "/api/v1/memberships"


def test_create_and_list_tiers(client):
    response = client.post(f"{API}/tiers", json={
        "name": "Mensual",
        "description": "Acceso a sala",
        "price": "39.90",
        "duration_months": 1,
        "features": ["sala"]
    })
    assert response.status_code == 201
    assert response.json()["is_active"] is True

    tiers = client.get(f"{API}/tiers").json()
    assert [t["name"] for t in tiers] == ["Mensual"]


def test_create_tier_rejects_non_positive_price(client):
    response = client.post(f"{API}/tiers", json={
        "name": "Gratis", "description": "-", "price": "0", "duration_months": 1
    })
    assert response.status_code == 422


def test_purchase_membership(client, user, tier):
    response = client.post(API, json={
        "user_id": user.id,
        "membership_tier_id": tier.id,
        "start_date": "2024-02-29T00:00:00"
    })

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "active"
    assert data["end_date"].startswith("2025-03-01T00:00:00")

    current = client.get(f"{API}/user/{user.id}")
    assert current.status_code == 200
    assert current.json()["id"] == data["id"]


def test_purchase_inactive_tier(client, user, inactive_tier):
    response = client.post(API, json={
        "user_id": user.id,
        "membership_tier_id": inactive_tier.id,
        "start_date": "2025-01-01T00:00:00"
    })

    assert response.status_code == 409
    assert response.json()["error"] == "invalid_state"


def test_purchase_unknown_user(client, tier):
    response = client.post(API, json={
        "user_id": 999, "membership_tier_id": tier.id, "start_date": "2025-01-01T00:00:00"
    })
    assert response.status_code == 404


def test_user_without_membership_returns_null(client, user):
    response = client.get(f"{API}/user/{user.id}")
    assert response.status_code == 200
    assert response.json() is None
