"""
Ingredient Ledger Service

Per-meal ingredient lists. Anyone signed in may add to a tracked meal;
only the contributor may remove their own item. Names are unique per meal
regardless of case.
"""

import logging

from constants import MAX_LENGTHS
from utils.sanitizer import name_key, sanitize_name
from .errors import ConflictError, DuplicateItem, Forbidden, NotFound, UnsupportedOperation, ValidationError

logger = logging.getLogger(__name__)


class IngredientLedger:
    """
    Args:
        store: StoreClient
        catalog: MealCatalog used to check the target meal
        identity: IdentityProvider used for batched display-name lookups
    """

    def __init__(self, store, catalog, identity):
        self.store = store
        self.catalog = catalog
        self.identity = identity

    def list_for_meal(self, meal_id):
        """
        Ingredients of a meal, oldest first.

        Returns a list of (ingredient_row, contributor_display_name) tuples.
        Contributor names are fetched in a single lookup for the whole list.
        """
        self.catalog.get_meal(meal_id)
        rows = self.store.select('ingredients', {'meal_id': meal_id}, order_by=('created_at', 'id'))
        names = self.identity.display_names(row['contributor_id'] for row in rows)
        return [(row, names[row['contributor_id']]) for row in rows]

    def count_for_meal(self, meal_id):
        return self.store.count('ingredients', {'meal_id': meal_id})

    def add(self, meal_id, name, contributor_id):
        """
        Add an ingredient to a tracked meal.

        Raises:
            ValidationError: name is empty after trimming
            NotFound: the meal does not exist
            UnsupportedOperation: the meal uses an external menu
            DuplicateItem: the meal already has this name (any casing)
        """
        name = sanitize_name(name, max_length=MAX_LENGTHS['ingredient_name'])
        if not name:
            raise ValidationError('name', 'Ingredient name is required')
        key = name_key(name)

        meal = self.catalog.get_meal(meal_id)
        if not meal.supports_tracking:
            raise UnsupportedOperation(f'"{meal.name}" uses an external menu; ingredients are not tracked')

        existing = self.store.select('ingredients', {'meal_id': meal.id, 'name_key': key})
        if existing:
            logger.warning('Duplicate ingredient %r for meal %s', name, meal.id)
            raise DuplicateItem(f'"{existing[0]["name"]}" is already on the list for {meal.name}')

        try:
            row = self.store.insert('ingredients', {
                'name': name,
                'name_key': key,
                'meal_id': meal.id,
                'contributor_id': contributor_id,
            })
        except ConflictError as e:
            # Someone else added the same name between our check and insert
            raise DuplicateItem(f'"{name}" is already on the list for {meal.name}') from e

        logger.info('User %s added %r to meal %s', contributor_id, name, meal.id)
        return row

    def remove(self, ingredient_id, requester_id):
        rows = self.store.select('ingredients', {'id': ingredient_id})
        if not rows:
            raise NotFound(f'Ingredient {ingredient_id} does not exist')
        row = rows[0]
        if row['contributor_id'] != requester_id:
            logger.warning('User %s tried to remove ingredient %s owned by %s',
                           requester_id, ingredient_id, row['contributor_id'])
            raise Forbidden(f'Only the person who added "{row["name"]}" can remove it')

        self.store.delete('ingredients', ingredient_id)
        logger.info('User %s removed %r from meal %s', requester_id, row['name'], row['meal_id'])
