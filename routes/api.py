from flask import Blueprint, current_app, g, jsonify, request

from services import build_shopping_list, meal_summaries
from . import login_required, trip, to_json

api_bp = Blueprint('api', __name__, url_prefix='/api')


def _payload():
    return request.get_json(silent=True) or {}


# ============================================
# MEALS & INGREDIENTS
# ============================================

@api_bp.route('/meals')
@login_required
def meals_list():
    services = trip()
    meals = services.catalog.list_meals()
    return jsonify(
        trip=current_app.config['TRIP_NAME'],
        meals=to_json(meal_summaries(meals, services.ingredients)),
    )


@api_bp.route('/meals/<int:meal_id>/ingredients')
@login_required
def meal_ingredients(meal_id):
    services = trip()
    meal = services.catalog.get_meal(meal_id)
    items = services.ingredients.list_for_meal(meal_id)
    return jsonify(
        meal={'id': meal.id, 'name': meal.name, 'external_link': meal.external_link},
        ingredients=[
            dict(to_json(row), contributor_display_name=name, is_mine=row['contributor_id'] == g.trip_session.user_id)
            for row, name in items
        ],
    )


@api_bp.route('/meals/<int:meal_id>/ingredients', methods=['POST'])
@login_required
def meal_ingredient_add(meal_id):
    row = trip().ingredients.add(meal_id, _payload().get('name', ''), g.trip_session.user_id)
    return jsonify(ingredient=to_json(row)), 201


@api_bp.route('/ingredients/<int:ingredient_id>', methods=['DELETE'])
@login_required
def ingredient_delete(ingredient_id):
    trip().ingredients.remove(ingredient_id, g.trip_session.user_id)
    return jsonify(message='Ingredient removed')


@api_bp.route('/shopping-list')
@login_required
def shopping_list():
    services = trip()
    items = build_shopping_list(services.store, services.catalog.trackable_meals())
    return jsonify(items=items, count=len(items))


# ============================================
# BED LINENS
# ============================================

@api_bp.route('/linens/me')
@login_required
def linen_mine():
    row = trip().linens.get_for_user(g.trip_session.user_id)
    return jsonify(reservation=to_json(row))


@api_bp.route('/linens/me', methods=['PUT'])
@login_required
def linen_save():
    data = _payload()
    row = trip().linens.upsert(g.trip_session.user_id, data.get('mode'), data.get('quantity', 0))
    return jsonify(reservation=to_json(row))


@api_bp.route('/linens')
@login_required
def linens_list():
    linens = trip().linens
    roster = linens.list_all()
    total_rentals, total_cost = linens.totals()
    return jsonify(
        reservations=[dict(to_json(row), display_name=name) for row, name in roster],
        total_rentals=total_rentals,
        total_cost=total_cost,
        unit_price=linens.unit_price,
        currency=current_app.config['LINEN_CURRENCY'],
    )


# ============================================
# ARRIVALS
# ============================================

@api_bp.route('/arrivals/me')
@login_required
def arrival_mine():
    row = trip().arrivals.get_for_user(g.trip_session.user_id)
    return jsonify(arrival=to_json(row), default_arrival=current_app.config['DEFAULT_ARRIVAL'])


@api_bp.route('/arrivals/me', methods=['PUT'])
@login_required
def arrival_save():
    data = _payload()
    row = trip().arrivals.upsert(
        g.trip_session.user_id,
        data.get('arrival_at'),
        data.get('transport_mode'),
        data.get('notes', ''),
    )
    return jsonify(arrival=to_json(row))


@api_bp.route('/arrivals/me', methods=['DELETE'])
@login_required
def arrival_delete():
    trip().arrivals.delete(g.trip_session.user_id)
    return jsonify(message='Arrival information deleted')


@api_bp.route('/arrivals')
@login_required
def arrivals_list():
    roster = sorted(trip().arrivals.list_all(), key=lambda item: (item[0]['arrival_at'], item[1].lower()))
    return jsonify(arrivals=[dict(to_json(row), display_name=name) for row, name in roster])
