"""
Arrival Service

Who arrives when and how. Each user has at most one arrival record,
which they can create, change or delete.
"""

import logging
from datetime import datetime

from constants import MAX_LENGTHS, VALID_TRANSPORT_MODES
from utils.sanitizer import sanitize_text
from .errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def parse_arrival_time(value):
    """Accept a datetime or an ISO-8601 string ('2025-05-29T15:00')."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) if value.tzinfo else value
    if not value or not isinstance(value, str):
        raise ValidationError('arrival_at', 'Arrival date and time are required')
    value = value.strip()
    if value.endswith(('Z', 'z')):
        # fromisoformat only learned the Zulu suffix in 3.11
        value = value[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError('arrival_at', f'Invalid arrival date/time: {value}')
    return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed


def normalize_transport(mode):
    if mode is not None and not isinstance(mode, str):
        raise ValidationError('transport_mode', f'Invalid transport mode: {mode}')
    mode = (mode or '').strip().lower()
    if not mode:
        raise ValidationError('transport_mode', 'Transport mode is required')
    if mode not in VALID_TRANSPORT_MODES:
        raise ValidationError('transport_mode', f'Invalid transport mode: {mode}')
    return mode


class ArrivalLedger:

    def __init__(self, store, identity):
        self.store = store
        self.identity = identity

    def get_for_user(self, user_id):
        rows = self.store.select('arrivals', {'user_id': user_id})
        return rows[0] if rows else None

    def upsert(self, user_id, arrival_at, transport_mode, notes=''):
        """Create or update the user's arrival record and return it."""
        values = {
            'arrival_at': parse_arrival_time(arrival_at),
            'transport_mode': normalize_transport(transport_mode),
            'notes': sanitize_text(notes, max_length=MAX_LENGTHS['notes']),
        }

        existing = self.get_for_user(user_id)
        if existing is not None:
            row = self.store.update('arrivals', existing['id'], values)
            if row is not None:
                logger.info('User %s updated arrival %s by %s', user_id, row['arrival_at'], row['transport_mode'])
                return row
            # Deleted (e.g. from another tab) since it was read
            logger.warning('Arrival %s for user %s vanished before update', existing['id'], user_id)

        try:
            row = self.store.insert('arrivals', dict(values, user_id=user_id))
        except ConflictError:
            existing = self.get_for_user(user_id)
            if existing is None:
                raise
            row = self.store.update('arrivals', existing['id'], values)
            if row is None:
                raise
            logger.info('User %s updated arrival %s by %s', user_id, row['arrival_at'], row['transport_mode'])
            return row

        logger.info('User %s saved arrival %s by %s', user_id, row['arrival_at'], row['transport_mode'])
        return row

    def delete(self, user_id):
        """Remove the user's arrival record. Deleting a missing record is a no-op."""
        existing = self.get_for_user(user_id)
        if existing is None:
            return
        self.store.delete('arrivals', existing['id'])
        logger.info('User %s deleted their arrival', user_id)

    def list_all(self):
        """Every arrival with its owner's display name, in store order."""
        rows = self.store.select('arrivals')
        names = self.identity.display_names(row['user_id'] for row in rows)
        return [(row, names[row['user_id']]) for row in rows]
