import json
from datetime import datetime

import pytest

from app import create_app

# Monday
NOW = datetime(2024, 5, 6, 10, 30)

STORES = {
    "stores": [
        {
            "name": "Alpha Cafe",
            "hours": {"Monday": {"open": "0900", "close": "1700"}, "Sunday": {"open": "1000", "close": "1400"}},
        },
        {"name": "beta books", "hours": {"Monday": {"open": "1100", "close": "2000"}}},
        {"name": "Gamma Gym", "hours": {"Monday": {"open": "0500", "close": "2400"}}},
        {"name": "Delta Deli", "hours": {"Tuesday": {"open": "0800", "close": "1000"}}},
    ]
}


@pytest.fixture
def stores():
    return json.loads(json.dumps(STORES["stores"]))


@pytest.fixture
def data_path(tmp_path):
    path = tmp_path / "stores.json"
    path.write_text(json.dumps(STORES))
    return path


@pytest.fixture
def app(data_path):
    app = create_app(
        {
            "TESTING": True,
            "DATA_PATH": str(data_path),
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "CLOCK": lambda: NOW,
        }
    )
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
