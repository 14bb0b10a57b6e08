"""
Arrival Model

Contains the ArrivalRecord model: when and how a participant gets to the cabin.
"""

from .base import db, utcnow


class ArrivalRecord(db.Model):
    """Estimated arrival for one user (at most one row per user)."""
    __tablename__ = 'arrivals'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    arrival_at = db.Column(db.DateTime, nullable=False)
    transport_mode = db.Column(db.String(20), nullable=False)
    notes = db.Column(db.Text, default='', nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'arrival_at': self.arrival_at,
            'transport_mode': self.transport_mode,
            'notes': self.notes or '',
            'updated_at': self.updated_at,
        }
