"""
Bed Linen Service

One reservation per user: either bringing their own linen/towels or
renting a number of sets at a fixed price per set.
"""

import logging

from constants import LINEN_BRING_OWN, LINEN_RENT, MAX_LINEN_SETS, VALID_LINEN_MODES
from .errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def linen_totals(reservations, unit_price):
    """
    Total rented sets and their cost.

    Args:
        reservations: Reservation dicts with 'mode' and 'quantity'
        unit_price: Price of one set for the whole stay

    Returns:
        (total_rentals, total_cost)
    """
    total_rentals = sum(r['quantity'] for r in reservations if r['mode'] == LINEN_RENT)
    return total_rentals, total_rentals * unit_price


def _normalize_quantity(mode, quantity):
    if not isinstance(mode, str) or mode not in VALID_LINEN_MODES:
        raise ValidationError('mode', f'Invalid linen choice: {mode}')
    if mode == LINEN_BRING_OWN:
        return 0

    if isinstance(quantity, bool) or (isinstance(quantity, float) and not quantity.is_integer()):
        raise ValidationError('quantity', 'Number of sets must be a whole number')
    try:
        quantity = int(quantity)
    except (ValueError, TypeError):
        raise ValidationError('quantity', 'Number of sets must be a whole number')
    if quantity < 1:
        raise ValidationError('quantity', 'Renting requires at least one set')
    if quantity > MAX_LINEN_SETS:
        raise ValidationError('quantity', f'At most {MAX_LINEN_SETS} sets can be rented')
    return quantity


class LinenLedger:
    """
    Args:
        store: StoreClient
        identity: IdentityProvider used for the roster's display names
        unit_price: Price per rented set
    """

    def __init__(self, store, identity, unit_price=200):
        self.store = store
        self.identity = identity
        self.unit_price = unit_price

    def get_for_user(self, user_id):
        rows = self.store.select('linen_reservations', {'user_id': user_id})
        return rows[0] if rows else None

    def upsert(self, user_id, mode, quantity=0):
        """
        Save the user's linen choice, updating their existing reservation if any.

        Returns the stored reservation so the caller can show authoritative state.
        """
        amount = _normalize_quantity(mode, quantity)

        existing = self.get_for_user(user_id)
        if existing is not None:
            row = self.store.update('linen_reservations', existing['id'], {'amount': amount})
            if row is not None:
                logger.info('User %s updated linen: %s x%s', user_id, row['mode'], row['quantity'])
                return row
            # Removed since it was read; store a fresh one
            logger.warning('Linen reservation %s for user %s vanished before update', existing['id'], user_id)

        try:
            row = self.store.insert('linen_reservations', {'user_id': user_id, 'amount': amount})
        except ConflictError:
            # A concurrent submission by the same user created the row first
            existing = self.get_for_user(user_id)
            if existing is None:
                raise
            row = self.store.update('linen_reservations', existing['id'], {'amount': amount})
            if row is None:
                raise
            logger.info('User %s updated linen: %s x%s', user_id, row['mode'], row['quantity'])
            return row

        logger.info('User %s reserved linen: %s x%s', user_id, row['mode'], row['quantity'])
        return row

    def list_all(self):
        """All reservations with the owner's display name."""
        rows = self.store.select('linen_reservations')
        names = self.identity.display_names(row['user_id'] for row in rows)
        return [(row, names[row['user_id']]) for row in rows]

    def totals(self):
        """(total_rentals, total_cost) recomputed from the current reservations."""
        return linen_totals(self.store.select('linen_reservations'), self.unit_price)
