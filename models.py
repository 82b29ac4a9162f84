# models.py
from db_setup import db


class Store(db.Model):
    __tablename__ = "stores"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False, unique=True)
    hours = db.relationship("StoreHours", backref="store", order_by="StoreHours.position")

    def hours_by_day(self):
        return {h.day: {"open": h.open_time, "close": h.close_time} for h in self.hours}

    def __repr__(self):
        return f"<Store(id={self.id}, name={self.name})>"


class StoreHours(db.Model):
    __tablename__ = "store_hours"

    id = db.Column(db.Integer, primary_key=True)
    store_id = db.Column(db.Integer, db.ForeignKey("stores.id"), nullable=False, index=True)
    # position keeps the fixture's day order for the day selector
    position = db.Column(db.Integer, nullable=False)
    day = db.Column(db.String, nullable=False)
    open_time = db.Column(db.String(4), nullable=False)
    close_time = db.Column(db.String(4), nullable=False)

    def __repr__(self):
        return f"<StoreHours(store_id={self.store_id}, day={self.day}, open={self.open_time}, close={self.close_time})>"
