"""
Ingredient Model

Contains the Ingredient model: one grocery item contributed by a user
to a meal's shopping list.
"""

from .base import db, utcnow


class Ingredient(db.Model):
    """
    Ingredient contributed to a tracked meal.

    name_key holds the lowercased, trimmed name. The unique constraint on
    (meal_id, name_key) keeps "Milk" and "milk" from both landing on the
    same meal even when two users submit at the same moment.
    """
    __tablename__ = 'ingredients'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    name_key = db.Column(db.String(200), nullable=False)
    meal_id = db.Column(db.Integer, db.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False, index=True)
    contributor_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('meal_id', 'name_key', name='uq_ingredient_meal_name'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'meal_id': self.meal_id,
            'contributor_id': self.contributor_id,
            'created_at': self.created_at,
        }
