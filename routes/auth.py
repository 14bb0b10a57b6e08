from flask import Blueprint, current_app, g, jsonify, request, session

from services import AuthFailure, Forbidden
from . import login_required, trip, to_json

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or request.form
    trip_session = trip().identity.authenticate(
        data.get('username', ''),
        data.get('password', ''),
    )
    session.clear()
    session['user_id'] = trip_session.user_id
    return jsonify(user=trip_session.to_dict())


@auth_bp.route('/logout', methods=['POST'])
def logout():
    user_id = session.pop('user_id', None)
    if user_id is not None:
        identity = trip().identity
        try:
            identity.sign_out(identity.session_for(user_id))
        except AuthFailure:
            current_app.logger.info('Signed-out user %s no longer exists', user_id)
    return jsonify(message='You have been logged out')


@auth_bp.route('/me')
@login_required
def me():
    return jsonify(user=g.trip_session.to_dict())


@auth_bp.route('/users', methods=['POST'])
@login_required
def add_user():
    """Admins create accounts for trip participants."""
    if not g.trip_session.is_admin:
        raise Forbidden('Only admins can add users')

    data = request.get_json(silent=True) or {}
    row = trip().identity.add_user(
        data.get('username', ''),
        data.get('password', ''),
        is_admin=bool(data.get('is_admin', False)),
    )
    return jsonify(user=to_json(row)), 201
