from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from simulator.app import create_app


@pytest.fixture()
def app() -> Flask:
    return create_app(
        {
            "TESTING": True,
            "AMOUNT_UNIT": 10_000.0,
            "DEFAULT_LOCALE": "ja",
        }
    )


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
