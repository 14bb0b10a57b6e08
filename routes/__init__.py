"""
Routes Package

JSON blueprints exposing the ledgers, plus shared request helpers.
"""

from datetime import date, datetime
from functools import wraps

from flask import current_app, g, session

from services import AuthFailure


def trip():
    """Services wired for the current app (see app._init_services)."""
    return current_app.extensions['trip']


def to_json(value):
    """Make rows JSON friendly: datetimes become ISO-8601 strings."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def current_trip_session():
    """Rebuild the TripSession from the user id in the signed cookie."""
    user_id = session.get('user_id')
    if user_id is None:
        raise AuthFailure('You must be logged in')
    try:
        return trip().identity.session_for(user_id)
    except AuthFailure:
        session.pop('user_id', None)
        raise


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        g.trip_session = current_trip_session()
        return view(*args, **kwargs)
    return wrapped
