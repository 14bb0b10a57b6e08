"""
Meal Model

Contains the Meal model for the trip's fixed meal catalog.
"""

from .base import db, utcnow


class Meal(db.Model):
    """
    A planned meal of the trip.

    Meals without an external_link have their ingredients tracked here;
    meals with a link point at an external (restaurant) menu instead.
    """
    __tablename__ = 'meals'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    scheduled_time = db.Column(db.DateTime, nullable=True, index=True)
    external_link = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'scheduled_time': self.scheduled_time,
            'external_link': self.external_link,
            'created_at': self.created_at,
        }
