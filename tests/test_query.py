import json
import logging

import pytest

from app import create_app
from hours import HoursFormatError
from query import FixtureError, get_business_hours, get_days, get_store_names, get_stores, load_stores_to_db


def test_get_stores(app):
    stores = get_stores()
    assert [s["name"] for s in stores] == ["Alpha Cafe", "beta books", "Gamma Gym", "Delta Deli"]
    assert stores[0]["hours"]["Sunday"] == {"open": "1000", "close": "1400"}
    assert stores[3]["hours"] == {"Tuesday": {"open": "0800", "close": "1000"}}


def test_get_days_follows_first_store(app):
    assert get_days() == ["Monday", "Sunday"]


def test_get_store_names(app):
    assert get_store_names() == {"Alpha Cafe", "beta books", "Gamma Gym", "Delta Deli"}


def test_get_business_hours(app):
    assert get_business_hours(2) == {"Monday": {"open": "1100", "close": "2000"}}
    assert get_business_hours(99) == {}


def test_reload_replaces_data(app, tmp_path):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"stores": [{"name": "Solo", "hours": {}}]}))
    load_stores_to_db(path)
    assert get_stores() == [{"name": "Solo", "hours": {}}]
    assert get_days() == []


@pytest.mark.parametrize(
    "payload, error",
    [
        ([], FixtureError),
        ({"stores": [{"hours": {}}]}, FixtureError),
        ({"stores": [{"name": "A"}, {"name": "A"}]}, FixtureError),
        ({"stores": [{"name": "A", "hours": {"Monday": {"open": "9", "close": "1700"}}}]}, HoursFormatError),
    ],
)
def test_bad_fixture(app, tmp_path, payload, error):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(error):
        load_stores_to_db(path)
    # the previous data set is left untouched
    assert len(get_stores()) == 4


def test_load_logs_counts(data_path, caplog):
    caplog.set_level(logging.INFO)
    create_app({"TESTING": True, "DATA_PATH": str(data_path), "SQLALCHEMY_DATABASE_URI": "sqlite://"})
    assert "Loaded 4 stores (5 day entries)" in caplog.text
