import json

import pandas as pd
from flask import current_app

from db_setup import db
from hours import validate_hours
from models import Store, StoreHours


class FixtureError(ValueError):
    pass


def read_fixture(file_path):
    with open(file_path, encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict) or not isinstance(payload.get("stores"), list):
        raise FixtureError(f"{file_path}: expected an object with a 'stores' list")
    return payload["stores"]


def fixture_frames(stores):
    """Flatten fixture stores into the ``stores`` and ``store_hours`` tables."""
    store_rows = []
    hour_rows = []
    seen = set()
    for store_id, store in enumerate(stores, start=1):
        name = store.get("name")
        if not name:
            raise FixtureError(f"Store #{store_id} has no name")
        if name in seen:
            raise FixtureError(f"Duplicate store name {name!r}")
        seen.add(name)
        hours = store.get("hours") or {}
        validate_hours(hours)
        store_rows.append({"id": store_id, "name": name})
        for position, (day, window) in enumerate(hours.items()):
            hour_rows.append(
                {
                    "store_id": store_id,
                    "position": position,
                    "day": day,
                    "open_time": window["open"],
                    "close_time": window["close"],
                }
            )
    hours_columns = ["store_id", "position", "day", "open_time", "close_time"]
    return pd.DataFrame(store_rows, columns=["id", "name"]), pd.DataFrame(hour_rows, columns=hours_columns)


def load_stores_to_db(file_path):
    stores_df, hours_df = fixture_frames(read_fixture(file_path))
    StoreHours.query.delete()
    Store.query.delete()
    conn = db.session.connection()
    stores_df.to_sql("stores", conn, if_exists="append", index=False)
    hours_df.to_sql("store_hours", conn, if_exists="append", index=False)
    db.session.commit()
    current_app.logger.info("Loaded %d stores (%d day entries) from %s", len(stores_df), len(hours_df), file_path)


def get_stores():
    return [{"name": s.name, "hours": s.hours_by_day()} for s in Store.query.order_by(Store.id).all()]


def get_store_names():
    return {row.name for row in db.session.query(Store.name).all()}


def get_business_hours(store_id):
    results = StoreHours.query.filter_by(store_id=store_id).order_by(StoreHours.position).all()
    return {row.day: {"open": row.open_time, "close": row.close_time} for row in results}


def get_days():
    first = Store.query.order_by(Store.id).first()
    if first is None:
        return []
    return list(get_business_hours(first.id))
