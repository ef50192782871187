from conftest import signup


def add_income(client, **overrides):
    payload = {"name": "Salary", "amount": 1000, "category": "Salary"}
    payload.update(overrides)
    r = client.post("/income", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def add_expense(client, **overrides):
    payload = {"name": "Groceries", "amount": 50, "category": "Food"}
    payload.update(overrides)
    r = client.post("/expense", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_then_get_income(auth_client):
    me = auth_client.get("/profile").json()["data"]
    created = add_income(auth_client, name="  Bonus  ", amount=250.5, category="Gift")

    assert created["id"] is not None
    assert created["userId"] == me["id"]
    assert created["name"] == "Bonus"
    assert created["description"] == ""
    assert created["createdAt"] and created["updatedAt"]

    r = auth_client.get(f"/income/{created['id']}")
    assert r.status_code == 200
    fetched = r.json()["data"]
    assert fetched["amount"] == 250.5
    assert fetched["category"] == "Gift"


def test_income_defaults_category_to_other(auth_client):
    created = add_income(auth_client, category=None)
    assert created["category"] == "Other"


def test_income_validation(auth_client):
    assert auth_client.post("/income", json={"name": "x", "amount": 0}).status_code == 400
    assert auth_client.post("/income", json={"name": "x", "amount": -3}).status_code == 400
    assert auth_client.post("/income", json={"amount": 10}).status_code == 400
    assert auth_client.post("/income", json={"name": "x"}).status_code == 400

    r = auth_client.post("/income", json={"name": "x", "amount": 10, "category": "Food"})
    assert r.status_code == 400
    assert "category" in r.json()["error"]

    r = auth_client.post("/income", json={"name": "x" * 101, "amount": 10})
    assert r.status_code == 400


def test_list_income_sorted_by_date_desc(auth_client):
    add_income(auth_client, name="old", date="2025-01-01T00:00:00")
    add_income(auth_client, name="new", date="2025-03-01T00:00:00")
    add_income(auth_client, name="mid", date="2025-02-01T00:00:00")

    body = auth_client.get("/income").json()
    assert body["count"] == 3
    assert [i["name"] for i in body["data"]] == ["new", "mid", "old"]


def test_partial_update_only_touches_sent_fields(auth_client):
    created = add_income(auth_client, description="monthly pay")

    r = auth_client.patch(f"/income/{created['id']}", json={"amount": 1200})
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["amount"] == 1200
    assert updated["name"] == "Salary"
    assert updated["description"] == "monthly pay"

    r = auth_client.patch(f"/income/{created['id']}", json={"amount": 0})
    assert r.status_code == 400

    r = auth_client.patch("/income/9999", json={"amount": 5})
    assert r.status_code == 404


def test_delete_income(auth_client):
    created = add_income(auth_client)
    r = auth_client.delete(f"/income/{created['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["id"] == created["id"]

    assert auth_client.get(f"/income/{created['id']}").status_code == 404
    assert auth_client.delete(f"/income/{created['id']}").status_code == 404


def test_sum_total_tracks_entries(auth_client):
    assert auth_client.get("/income/total/sum").json()["data"]["totalIncome"] == 0

    add_income(auth_client, amount=100)
    second = add_income(auth_client, amount=40.5)
    assert auth_client.get("/income/total/sum").json()["data"]["totalIncome"] == 140.5

    auth_client.delete(f"/income/{second['id']}")
    assert auth_client.get("/income/total/sum").json()["data"]["totalIncome"] == 100


def test_other_users_entries_look_missing(client):
    signup(client, email="owner@example.com")
    owned = add_income(client)

    client.cookies.clear()
    signup(client, email="intruder@example.com")

    assert client.get(f"/income/{owned['id']}").status_code == 404
    assert client.patch(f"/income/{owned['id']}", json={"amount": 1}).status_code == 404
    assert client.delete(f"/income/{owned['id']}").status_code == 404
    assert client.get("/income").json()["count"] == 0


def test_expense_requires_income_first(auth_client):
    r = auth_client.post("/expense", json={"name": "Rent", "amount": 500})
    assert r.status_code == 400
    assert r.json()["error"] == "Please add income first before adding expenses"
    assert auth_client.get("/expense").json()["count"] == 0

    add_income(auth_client)
    created = add_expense(auth_client, name="Rent", amount=500, category="Bills")
    assert created["category"] == "Bills"


def test_expense_crud_and_sum(auth_client):
    add_income(auth_client)
    first = add_expense(auth_client, amount=20)
    add_expense(auth_client, amount=30, category="Transport")

    assert auth_client.get("/expense/total/sum").json()["data"]["totalExpense"] == 50

    r = auth_client.patch(f"/expense/{first['id']}", json={"category": "Shopping", "name": None})
    assert r.status_code == 200
    assert r.json()["data"]["category"] == "Shopping"
    assert r.json()["data"]["name"] == "Groceries"

    r = auth_client.post("/expense", json={"name": "x", "amount": 10, "category": "Salary"})
    assert r.status_code == 400

    auth_client.delete(f"/expense/{first['id']}")
    assert auth_client.get("/expense/total/sum").json()["data"]["totalExpense"] == 30


def test_non_finite_amount_is_rejected_and_not_stored(auth_client):
    r = auth_client.post(
        "/income",
        content='{"name": "huge", "amount": 1e309}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert "amount" in r.json()["error"]

    assert auth_client.get("/income").json()["count"] == 0
    assert auth_client.get("/income/total/sum").json()["data"]["totalIncome"] == 0
    assert auth_client.get("/dashboard/summary").status_code == 200

    created = add_income(auth_client)
    r = auth_client.patch(
        f"/income/{created['id']}",
        content='{"amount": 1e309}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert auth_client.get(f"/income/{created['id']}").json()["data"]["amount"] == 1000


def test_expense_income_check_runs_before_body_validation(auth_client):
    r = auth_client.post("/expense", json={"name": "Rent", "amount": -1})
    assert r.status_code == 400
    assert r.json()["error"] == "Please add income first before adding expenses"

    add_income(auth_client)
    r = auth_client.post("/expense", json={"name": "Rent", "amount": -1})
    assert r.status_code == 400
    assert "amount" in r.json()["error"]
