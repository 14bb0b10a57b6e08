from conftest import login


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"status": "ok"}


def test_api_requires_login(client, users):
    resp = client.get("/api/meals")
    assert resp.status_code == 401
    assert resp.get_json()["error_code"] == "auth_failure"


def test_login_and_logout(client, users):
    resp = login(client, "anna", "wrong")
    assert resp.status_code == 401

    resp = login(client, "anna")
    assert resp.status_code == 200
    assert resp.get_json()["user"]["display_name"] == "anna"
    assert client.get("/auth/me").status_code == 200

    client.post("/auth/logout")
    assert client.get("/auth/me").status_code == 401


def test_end_to_end_breakfast_scenario(app, client, users, meals):
    login(client, "anna")
    resp = client.post("/api/meals/5/ingredients", json={"name": "Bread"})
    assert resp.status_code == 201

    listing = client.get("/api/meals/5/ingredients").get_json()["ingredients"]
    assert len(listing) == 1
    assert listing[0]["name"] == "Bread"
    assert listing[0]["contributor_display_name"] == "anna"
    assert listing[0]["is_mine"] is True

    client.post("/auth/logout")
    login(client, "erik")
    resp = client.post("/api/meals/5/ingredients", json={"name": "bread"})
    assert resp.status_code == 409
    assert resp.get_json()["error_code"] == "duplicate_item"
    assert "Bread" in resp.get_json()["message"]

    items = client.get("/api/shopping-list").get_json()["items"]
    assert {"name": "Bread", "contributing_meals": [{"id": 5, "name": "Breakfast"}]} in items


def test_erik_cannot_delete_annas_ingredient(client, users, meals):
    login(client, "anna")
    ingredient_id = client.post("/api/meals/5/ingredients", json={"name": "Jam"}).get_json()["ingredient"]["id"]
    client.post("/auth/logout")

    login(client, "erik")
    resp = client.delete(f"/api/ingredients/{ingredient_id}")
    assert resp.status_code == 403
    assert client.get("/api/meals/5/ingredients").get_json()["ingredients"][0]["is_mine"] is False


def test_external_menu_and_validation_errors(client, users, meals):
    login(client, "erik")
    resp = client.post("/api/meals/7/ingredients", json={"name": "Fries"})
    assert resp.status_code == 422
    assert resp.get_json()["error_code"] == "unsupported_operation"

    resp = client.post("/api/meals/5/ingredients", json={"name": " "})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "name"

    assert client.get("/api/meals/404/ingredients").status_code == 404


def test_meal_overview(client, users, meals):
    login(client, "anna")
    client.post("/api/meals/6/ingredients", json={"name": "Burger buns"})

    summaries = client.get("/api/meals").get_json()["meals"]
    assert [(m["name"], m["ingredient_count"]) for m in summaries] == [
        ("Breakfast", 0),
        ("Dinner - Day 1", 1),
        ("Lunch at the inn", None),
    ]
    assert summaries[0]["scheduled_time"] == "2025-05-30T08:00:00"


def test_linen_signup_and_totals(client, users):
    login(client, "anna")
    assert client.get("/api/linens/me").get_json()["reservation"] is None

    first = client.put("/api/linens/me", json={"mode": "rent", "quantity": 2}).get_json()["reservation"]
    second = client.put("/api/linens/me", json={"mode": "rent", "quantity": 3}).get_json()["reservation"]
    assert first["id"] == second["id"]

    client.post("/auth/logout")
    login(client, "erik")
    client.put("/api/linens/me", json={"mode": "bringing-own"})

    data = client.get("/api/linens").get_json()
    assert data["total_rentals"] == 3
    assert data["total_cost"] == 600
    assert data["currency"] == "SEK"
    assert sorted(r["display_name"] for r in data["reservations"]) == ["anna", "erik"]

    resp = client.put("/api/linens/me", json={"mode": "rent", "quantity": 0})
    assert resp.status_code == 400


def test_arrival_roster_sorted_by_time(client, users):
    login(client, "anna")
    client.put("/api/arrivals/me", json={"arrival_at": "2025-05-29T18:00", "transport_mode": "car"})
    client.post("/auth/logout")

    login(client, "erik")
    resp = client.put("/api/arrivals/me", json={
        "arrival_at": "2025-05-29T14:30",
        "transport_mode": "train",
        "notes": "Need a pickup at the station",
    })
    assert resp.status_code == 200

    roster = client.get("/api/arrivals").get_json()["arrivals"]
    assert [a["display_name"] for a in roster] == ["erik", "anna"]
    assert roster[0]["arrival_at"] == "2025-05-29T14:30:00"

    assert client.delete("/api/arrivals/me").status_code == 200
    assert client.delete("/api/arrivals/me").status_code == 200
    assert client.get("/api/arrivals/me").get_json()["arrival"] is None
    assert [a["display_name"] for a in client.get("/api/arrivals").get_json()["arrivals"]] == ["anna"]


def test_only_admin_adds_users(client, users):
    login(client, "erik")
    assert client.post("/auth/users", json={"username": "lisa", "password": "pw"}).status_code == 403
    client.post("/auth/logout")

    login(client, "anna")
    resp = client.post("/auth/users", json={"username": "lisa", "password": "pw"})
    assert resp.status_code == 201
    assert resp.get_json()["user"]["username"] == "lisa"
    assert client.post("/auth/users", json={"username": "LISA", "password": "pw"}).status_code == 409
    client.post("/auth/logout")

    assert login(client, "lisa", "pw").status_code == 200


def test_wrongly_typed_fields_are_rejected(client, users):
    login(client, "anna")

    resp = client.put("/api/arrivals/me", json={"arrival_at": "2025-05-29T15:00", "transport_mode": 5})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "transport_mode"

    resp = client.put("/api/linens/me", json={"mode": ["rent"], "quantity": 1})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "mode"

    resp = client.put("/api/linens/me", json={"mode": "rent", "quantity": 2.5})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "quantity"


def test_logout_after_account_removed(client, store, users):
    login(client, "erik")
    store.delete("users", users["erik"]["id"])

    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert client.get("/auth/me").status_code == 401
