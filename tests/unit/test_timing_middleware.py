import logging
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.middleware.timing import TimingMiddleware, speed_category


@pytest.fixture
def timed_client():
    app = FastAPI()
    app.add_middleware(TimingMiddleware)

    @app.get("/items/{item_id}")
    def read_item(item_id: int):
        return {"id": item_id}

    return TestClient(app)


@pytest.mark.parametrize("ms,category", [
    (10, "FAST"), (300, "FAST"), (301, "MEDIUM"), (701, "SLOW"), (1501, "VERY_SLOW"),
])
def test_speed_category(ms, category):
    assert speed_category(ms) == category


def test_very_slow_request_is_logged(timed_client, caplog):
    with patch("app.middleware.timing.time") as fake_time, \
         caplog.at_level(logging.WARNING, logger="timing_middleware"):
        fake_time.time.side_effect = [100.0, 102.0]
        response = timed_client.get("/items/17")

    assert response.headers["X-Process-Speed"] == "VERY_SLOW"
    assert response.headers["X-Process-Time"] == "2000.00ms"
    assert "GET:/items/17" in caplog.text


def test_fast_request_is_not_logged(timed_client, caplog):
    with caplog.at_level(logging.WARNING, logger="timing_middleware"):
        response = timed_client.get("/items/1")

    assert response.status_code == 200
    assert response.headers["X-Process-Speed"] == "FAST"
    assert "Petición muy lenta" not in caplog.text
