API = "/api/v1/users"


def test_create_user(client):
    response = client.post(API, json={
        "email": "nuevo@gym.io",
        "first_name": "Marta",
        "last_name": "López",
        "phone": "+34 611 111 111"
    })

    assert response.status_code == 201
    data = response.json()
    assert data["id"] > 0
    assert data["email"] == "nuevo@gym.io"
    assert "created_at" in data and "updated_at" in data


def test_create_user_duplicate_email(client, user):
    response = client.post(API, json={
        "email": user.email, "first_name": "Otra", "last_name": "Persona"
    })

    assert response.status_code == 409
    assert response.json()["error"] == "conflict"


def test_create_user_invalid_email(client):
    response = client.post(API, json={"email": "no-es-email", "first_name": "A", "last_name": "B"})
    assert response.status_code == 422


def test_get_user(client, user):
    response = client.get(f"{API}/{user.id}")
    assert response.status_code == 200
    assert response.json()["email"] == user.email

    assert client.get(f"{API}/999").status_code == 404


def test_update_user_clears_phone(client, user):
    response = client.put(f"{API}/{user.id}", json={"last_name": "García Ruiz", "phone": None})

    assert response.status_code == 200
    data = response.json()
    assert data["last_name"] == "García Ruiz"
    assert data["first_name"] == user.first_name
    assert data["phone"] is None


def test_update_unknown_user(client):
    response = client.put(f"{API}/999", json={"first_name": "X"})
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"
