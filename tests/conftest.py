import os
import sys
from datetime import datetime

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app import create_app  # noqa: E402
from models import db  # noqa: E402


@pytest.fixture()
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def services(app):
    return app.extensions["trip"]


@pytest.fixture()
def store(services):
    return services.store


@pytest.fixture()
def users(services):
    """anna (admin) and erik, both with password 'password'."""
    identity = services.identity
    anna = identity.add_user("anna", "password", is_admin=True)
    erik = identity.add_user("erik", "password")
    return {"anna": anna, "erik": erik}


@pytest.fixture()
def meals(store):
    breakfast = store.insert("meals", {
        "id": 5,
        "name": "Breakfast",
        "scheduled_time": datetime(2025, 5, 30, 8, 0),
    })
    dinner = store.insert("meals", {
        "id": 6,
        "name": "Dinner - Day 1",
        "scheduled_time": datetime(2025, 5, 30, 19, 0),
    })
    restaurant = store.insert("meals", {
        "id": 7,
        "name": "Lunch at the inn",
        "scheduled_time": datetime(2025, 5, 31, 12, 0),
        "external_link": "https://example.com/menu",
    })
    return {"breakfast": breakfast, "dinner": dinner, "restaurant": restaurant}


@pytest.fixture()
def client(app):
    return app.test_client()


def login(client, username, password="password"):
    return client.post("/auth/login", json={"username": username, "password": password})
