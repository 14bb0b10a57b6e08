"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, utcnow

from .user import User
from .meal import Meal
from .ingredient import Ingredient
from .linen import LinenReservation
from .arrival import ArrivalRecord

# Table names as seen by the store client
TABLES = {
    'users': User,
    'meals': Meal,
    'ingredients': Ingredient,
    'linen_reservations': LinenReservation,
    'arrivals': ArrivalRecord,
}

__all__ = [
    'db',
    'utcnow',
    'User',
    'Meal',
    'Ingredient',
    'LinenReservation',
    'ArrivalRecord',
    'TABLES',
]
