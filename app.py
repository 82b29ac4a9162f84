import logging

from flask import Flask

from config import Config
from db_setup import db
from query import load_stores_to_db
from views import stores


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # Database setup
    db.init_app(app)
    with app.app_context():
        db.create_all()
        load_stores_to_db(app.config["DATA_PATH"])

    app.register_blueprint(stores)
    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
