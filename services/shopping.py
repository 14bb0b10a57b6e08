"""
Shopping List Service

Builds the trip-wide shopping list from every tracked meal's ingredients.
The list is derived on each request from the stored ingredients; nothing
is cached between calls.
"""

from .store import In
from utils.sanitizer import name_key


def aggregate_ingredients(ingredient_rows, meals):
    """
    Fold ingredient rows into shopping list entries.

    Rows are merged by case-insensitive trimmed name. The display name is
    the first row's spelling; every meal needing the item is credited once.
    Rows pointing at a meal not in `meals` are ignored.

    Args:
        ingredient_rows: Ingredient row dicts, oldest first
        meals: The tracked meals to include

    Returns:
        List of {'name', 'contributing_meals': [{'id', 'name'}]} sorted by name
    """
    meal_names = {meal.id: meal.name for meal in meals}
    meal_order = {meal.id: position for position, meal in enumerate(meals)}

    consolidated = {}
    for row in ingredient_rows:
        meal_id = row['meal_id']
        if meal_id not in meal_names:
            continue

        key = name_key(row['name'])
        if not key:
            continue

        if key in consolidated:
            consolidated[key]['meal_ids'].add(meal_id)
        else:
            consolidated[key] = {
                'name': row['name'],
                'meal_ids': {meal_id},
            }

    shopping_items = []
    for item in consolidated.values():
        meal_ids = sorted(item['meal_ids'], key=meal_order.get)
        shopping_items.append({
            'name': item['name'],
            'contributing_meals': [{'id': mid, 'name': meal_names[mid]} for mid in meal_ids],
        })

    shopping_items.sort(key=lambda x: (x['name'].lower(), x['name']))
    return shopping_items


def build_shopping_list(store, trackable_meals):
    """
    Read all ingredients of the given meals in one query and aggregate them.

    An empty meal list returns [] without touching the store.
    """
    meals = [meal for meal in trackable_meals if meal.supports_tracking]
    if not meals:
        return []

    rows = store.select(
        'ingredients',
        {'meal_id': In(meal.id for meal in meals)},
        order_by=('created_at', 'id'),
    )
    return aggregate_ingredients(rows, meals)


def meal_summaries(meals, ingredient_ledger):
    """
    Overview of every meal with how many ingredients it has so far.

    ingredient_count is None for meals served from an external menu.
    """
    summaries = []
    for meal in meals:
        summaries.append({
            'id': meal.id,
            'name': meal.name,
            'scheduled_time': meal.scheduled_time,
            'external_link': meal.external_link,
            'supports_tracking': meal.supports_tracking,
            'ingredient_count': ingredient_ledger.count_for_meal(meal.id) if meal.supports_tracking else None,
        })
    return summaries
