import os
from datetime import datetime


class Config:
    # Static store fixture, loaded once at start-up
    DATA_PATH = os.environ.get(
        "STORE_TABLE_DATA", os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "stores.json")
    )
    SQLALCHEMY_DATABASE_URI = os.environ.get("STORE_TABLE_DATABASE_URI", "sqlite://")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Favorites live client-side under a single cookie
    FAVORITES_COOKIE = os.environ.get("STORE_TABLE_FAVORITES_COOKIE", "favorites")
    FAVORITES_MAX_AGE = 60 * 60 * 24 * 365

    # Returns the local "now" used for open-now checks and "Current Day"
    CLOCK = datetime.now
