from app.repositories.gym import facility_repository, gym_info_repository


def test_list_trainers(client, trainer, unavailable_trainer):
    response = client.get("/api/v1/trainers")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [trainer.id]


def test_trainer_availability(client, user, trainer):
    client.post("/api/v1/personal-training", json={
        "user_id": user.id,
        "trainer_id": trainer.id,
        "session_date": "2025-06-10T00:00:00",
        "start_time": "10:00",
        "end_time": "11:00",
    })

    response = client.get(f"/api/v1/trainers/{trainer.id}/availability", params={"date": "2025-06-10"})

    assert response.status_code == 200
    slots = response.json()
    assert len(slots) == 11
    assert "10:00" not in slots

    other_day = client.get(f"/api/v1/trainers/{trainer.id}/availability", params={"date": "2025-06-11"})
    assert len(other_day.json()) == 12


def test_trainer_availability_errors(client, unavailable_trainer):
    assert client.get("/api/v1/trainers/999/availability", params={"date": "2025-06-10"}).status_code == 404
    response = client.get(f"/api/v1/trainers/{unavailable_trainer.id}/availability", params={"date": "2025-06-10"})
    assert response.status_code == 409
    assert client.get("/api/v1/trainers/1/availability").status_code == 422


def test_gym_info_and_facilities(client, db):
    assert client.get("/api/v1/gym/info").json() is None

    facility_repository.create(db, obj_in={"name": "Piscina", "description": "25 m"})
    gym_info_repository.create(db, obj_in={
        "name": "Gym Centro",
        "address": "Calle Mayor 1",
        "phone": "+34 910 000 000",
        "email": "info@gym.io",
        "operating_hours": {
            "monday": "06:00-22:00", "tuesday": "06:00-22:00", "wednesday": "06:00-22:00",
            "thursday": "06:00-22:00", "friday": "06:00-22:00", "saturday": "08:00-20:00",
            "sunday": "09:00-14:00"
        },
    })

    facilities = client.get("/api/v1/gym/facilities").json()
    assert [f["name"] for f in facilities] == ["Piscina"]
    info = client.get("/api/v1/gym/info").json()
    assert info["operating_hours"]["sunday"] == "09:00-14:00"


def test_health_and_timing_headers(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["database"] == "ok"
    assert response.headers["X-Process-Time"].endswith("ms")
    assert response.headers["X-Process-Speed"] in {"FAST", "MEDIUM", "SLOW", "VERY_SLOW"}


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/api/v1/docs"
