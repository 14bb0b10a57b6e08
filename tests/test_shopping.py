from datetime import datetime

from services import (
    ExternalMenuMeal,
    TrackedMeal,
    aggregate_ingredients,
    build_shopping_list,
    meal_from_row,
    meal_summaries,
)


def _row(name, meal_id):
    return {"name": name, "meal_id": meal_id}


def test_casing_variants_merge_and_credit_both_meals():
    meal1 = TrackedMeal(id=1, name="Breakfast")
    meal2 = TrackedMeal(id=2, name="Dinner")
    rows = [_row("Milk", 1), _row("milk", 2), _row("Eggs", 1)]

    entries = aggregate_ingredients(rows, [meal1, meal2])

    assert len(entries) == 2
    assert entries[0] == {"name": "Eggs", "contributing_meals": [{"id": 1, "name": "Breakfast"}]}
    assert entries[1]["name"] == "Milk"
    assert entries[1]["contributing_meals"] == [
        {"id": 1, "name": "Breakfast"},
        {"id": 2, "name": "Dinner"},
    ]


def test_first_seen_spelling_wins():
    meal = TrackedMeal(id=1, name="Lunch")
    entries = aggregate_ingredients([_row("tomatoes", 1), _row("Tomatoes ", 1)], [meal])
    assert [e["name"] for e in entries] == ["tomatoes"]


def test_sorted_case_insensitively():
    meal = TrackedMeal(id=1, name="Lunch")
    rows = [_row("bananas", 1), _row("Apples", 1), _row("carrots", 1), _row("Bread", 1)]
    assert [e["name"] for e in aggregate_ingredients(rows, [meal])] == ["Apples", "bananas", "Bread", "carrots"]


def test_meal_credited_once_per_item():
    meal = TrackedMeal(id=1, name="Lunch")
    entries = aggregate_ingredients([_row("Salt", 1), _row("salt", 1)], [meal])
    assert entries[0]["contributing_meals"] == [{"id": 1, "name": "Lunch"}]


def test_rows_of_other_meals_ignored():
    meal = TrackedMeal(id=1, name="Lunch")
    assert aggregate_ingredients([_row("Salt", 9)], [meal]) == []


def test_empty_meal_list_does_not_touch_store():
    class NoStore:
        def select(self, *args, **kwargs):
            raise AssertionError("unexpected store call")

    assert build_shopping_list(NoStore(), []) == []


def test_build_reads_current_ledger_state(services, users, meals):
    ledger = services.ingredients
    trackable = services.catalog.trackable_meals()
    assert [m.id for m in trackable] == [5, 6]
    assert build_shopping_list(services.store, trackable) == []

    ledger.add(5, "Milk", users["anna"]["id"])
    ledger.add(6, "milk", users["erik"]["id"])
    eggs = ledger.add(5, "Eggs", users["anna"]["id"])

    entries = build_shopping_list(services.store, trackable)
    assert [e["name"] for e in entries] == ["Eggs", "Milk"]
    assert [m["id"] for m in entries[1]["contributing_meals"]] == [5, 6]

    ledger.remove(eggs["id"], users["anna"]["id"])
    assert [e["name"] for e in build_shopping_list(services.store, trackable)] == ["Milk"]


def test_meal_variant_from_row():
    tracked = meal_from_row({"id": 1, "name": "Breakfast", "external_link": None})
    external = meal_from_row({
        "id": 2,
        "name": "Pizza",
        "external_link": "https://example.com/menu",
        "scheduled_time": datetime(2025, 5, 30, 18, 0),
    })

    assert isinstance(tracked, TrackedMeal) and tracked.supports_tracking
    assert tracked.external_link is None
    assert isinstance(external, ExternalMenuMeal) and not external.supports_tracking
    assert external.external_link == "https://example.com/menu"


def test_meal_summaries_count_ingredients(services, users, meals):
    services.ingredients.add(5, "Bread", users["anna"]["id"])
    services.ingredients.add(5, "Butter", users["anna"]["id"])

    summaries = meal_summaries(services.catalog.list_meals(), services.ingredients)

    assert [(s["id"], s["ingredient_count"]) for s in summaries] == [(5, 2), (6, 0), (7, None)]
    assert summaries[2]["external_link"] == "https://example.com/menu"
