"""
Linen Reservation Model

Contains the LinenReservation model for the bed linen/towel sign-up.
"""

from .base import db, utcnow

from constants import LINEN_BRING_OWN, LINEN_RENT


class LinenReservation(db.Model):
    """
    One reservation per user.

    amount is the number of rented sets; 0 means the user brings their own.
    """
    __tablename__ = 'linen_reservations'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    amount = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        db.CheckConstraint('amount >= 0', name='ck_linen_amount_non_negative'),
    )

    @property
    def mode(self):
        return LINEN_RENT if self.amount else LINEN_BRING_OWN

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'mode': self.mode,
            'quantity': self.amount or 0,
            'updated_at': self.updated_at,
        }
