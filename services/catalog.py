"""
Meal Catalog Service

Reads the trip's meal list and turns each row into one of two variants:
TrackedMeal (ingredients are collected here) or ExternalMenuMeal
(the meal is ordered from an external menu).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .errors import NotFound


@dataclass(frozen=True)
class TrackedMeal:
    """Meal whose ingredient list lives in the Ingredient Ledger."""

    id: int
    name: str
    scheduled_time: Optional[datetime] = None

    supports_tracking = True
    external_link = None


@dataclass(frozen=True)
class ExternalMenuMeal:
    """Meal served from an external menu; no ingredients are tracked."""

    id: int
    name: str
    link: str
    scheduled_time: Optional[datetime] = None

    supports_tracking = False

    @property
    def external_link(self):
        return self.link


def meal_from_row(row):
    """Build the matching meal variant from a store row."""
    if row.get('external_link'):
        return ExternalMenuMeal(
            id=row['id'],
            name=row['name'],
            link=row['external_link'],
            scheduled_time=row.get('scheduled_time'),
        )
    return TrackedMeal(id=row['id'], name=row['name'], scheduled_time=row.get('scheduled_time'))


class MealCatalog:
    """Read-only access to the meals of the trip, in schedule order."""

    def __init__(self, store):
        self.store = store

    def list_meals(self):
        rows = self.store.select('meals', order_by=('scheduled_time', 'id'))
        return [meal_from_row(row) for row in rows]

    def get_meal(self, meal_id):
        rows = self.store.select('meals', {'id': meal_id})
        if not rows:
            raise NotFound(f'Meal {meal_id} does not exist')
        return meal_from_row(rows[0])

    def trackable_meals(self):
        return [meal for meal in self.list_meals() if meal.supports_tracking]
