"""
Identity Service

Maps username/password logins onto stable user identities and resolves
user ids to display names for the shared lists.
"""

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from constants import MAX_LENGTHS
from utils.sanitizer import sanitize_name
from .errors import AuthFailure, DuplicateItem, ValidationError
from .store import In, IEquals

logger = logging.getLogger(__name__)

UNKNOWN_USER = 'Unknown'


class TripSession:
    """
    An authenticated user's session.

    Created by IdentityProvider.authenticate, deactivated by sign_out.
    Ledgers never read it implicitly; callers pass session.user_id along.
    """

    def __init__(self, user_id, display_name, is_admin=False):
        self.user_id = user_id
        self.display_name = display_name
        self.is_admin = is_admin
        self.active = True

    def require_active(self):
        if not self.active:
            raise AuthFailure('Session has been signed out')
        return self

    def to_dict(self):
        return {
            'id': self.user_id,
            'display_name': self.display_name,
            'is_admin': self.is_admin,
        }


class IdentityProvider:
    """
    Args:
        store: StoreClient used for id -> name lookups and duplicate checks
        user_model: The User model holding password hashes
    """

    def __init__(self, store, user_model):
        self.store = store
        self.user_model = user_model

    def authenticate(self, username, password):
        """Return a TripSession for valid credentials, raise AuthFailure otherwise."""
        username = sanitize_name(username, max_length=MAX_LENGTHS['username'])
        if not username or not password:
            raise AuthFailure('Invalid username or password')

        user = self.user_model.query.filter_by(username=username).first()
        if user is None or not check_password_hash(user.password_hash, password):
            logger.warning('Failed login for %r', username)
            raise AuthFailure('Invalid username or password')

        logger.info('User %s signed in', user.username)
        return TripSession(user.id, user.username, is_admin=user.is_admin)

    def sign_out(self, session):
        if session is not None and session.active:
            session.active = False
            logger.info('User %s signed out', session.display_name)

    def session_for(self, user_id):
        """Rebuild a session for a user id kept in the signed cookie."""
        rows = self.store.select('users', {'id': user_id})
        if not rows:
            raise AuthFailure('Session refers to an unknown user')
        row = rows[0]
        return TripSession(row['id'], row['username'], is_admin=row['is_admin'])

    def display_names(self, user_ids):
        """
        Resolve many user ids in one round trip.

        Returns {user_id: display_name}; ids with no user map to 'Unknown'.
        """
        unique_ids = sorted(set(user_ids))
        if not unique_ids:
            return {}
        rows = self.store.select('users', {'id': In(unique_ids)})
        names = {row['id']: row['username'] for row in rows}
        return {user_id: names.get(user_id, UNKNOWN_USER) for user_id in unique_ids}

    def add_user(self, username, password, is_admin=False):
        """Create a participant account. Usernames are unique regardless of case."""
        username = sanitize_name(username, max_length=MAX_LENGTHS['username'])
        if not username:
            raise ValidationError('username', 'Username is required')
        if not password:
            raise ValidationError('password', 'Password is required')
        if len(password) > MAX_LENGTHS['password']:
            raise ValidationError('password', 'Password is too long')

        if self.store.select('users', {'username': IEquals(username)}):
            logger.warning('Refused duplicate username %r', username)
            raise DuplicateItem(f'Username "{username}" already exists')

        row = self.store.insert('users', {
            'username': username,
            'password_hash': generate_password_hash(password),
            'is_admin': bool(is_admin),
        })
        logger.info('Added user %s (admin=%s)', username, row['is_admin'])
        return row
