from datetime import datetime, timedelta


def create_automation(client, **overrides):
    payload = {"name": "Netflix", "amount": 15.99, "frequency": "Monthly", "category": "Entertainment"}
    payload.update(overrides)
    r = client.post("/automation", json=payload)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_automation_defaults(auth_client):
    created = create_automation(auth_client, category=None)
    assert created["isActive"] is True
    assert created["category"] == "Other"
    assert created["frequency"] == "Monthly"
    assert created["lastProcessedDate"] is None
    assert created["startDate"]
    assert created["endDate"] is None


def test_create_automation_validation(auth_client):
    r = auth_client.post("/automation", json={"name": "Gym", "amount": 30})
    assert r.status_code == 400  # sin frequency

    r = auth_client.post("/automation", json={"name": "Gym", "amount": 0, "frequency": "Monthly"})
    assert r.status_code == 400

    r = auth_client.post("/automation", json={"name": "Gym", "amount": 30, "frequency": "Hourly"})
    assert r.status_code == 400


def test_list_update_delete(auth_client):
    first = create_automation(auth_client, name="Gym")
    create_automation(auth_client, name="Spotify")

    body = auth_client.get("/automation").json()
    assert body["count"] == 2

    r = auth_client.patch(
        f"/automation/{first['id']}",
        json={"amount": 35, "endDate": "2030-01-01T00:00:00"},
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["amount"] == 35
    assert data["name"] == "Gym"
    assert data["endDate"].startswith("2030-01-01")

    r = auth_client.patch(f"/automation/{first['id']}", json={"endDate": None})
    assert r.json()["data"]["endDate"] is None

    assert auth_client.patch(f"/automation/{first['id']}", json={"amount": -1}).status_code == 400

    assert auth_client.delete(f"/automation/{first['id']}").status_code == 200
    assert auth_client.get(f"/automation/{first['id']}").status_code == 404


def test_toggle_is_its_own_inverse(auth_client):
    created = create_automation(auth_client)

    r = auth_client.patch(f"/automation/{created['id']}/toggle")
    assert r.status_code == 200
    assert r.json()["data"]["isActive"] is False
    assert r.json()["message"] == "Automation deactivated successfully"

    r = auth_client.patch(f"/automation/{created['id']}/toggle")
    assert r.json()["data"]["isActive"] is True
    assert r.json()["message"] == "Automation activated successfully"

    assert auth_client.patch("/automation/9999/toggle").status_code == 404


def test_process_inactive_automation_fails(auth_client):
    created = create_automation(auth_client)
    auth_client.patch(f"/automation/{created['id']}/toggle")

    r = auth_client.post(f"/automation/{created['id']}/process")
    assert r.status_code == 400
    assert r.json()["error"] == "Automation is not active"
    assert auth_client.get("/expense").json()["count"] == 0


def test_process_creates_one_expense(auth_client):
    created = create_automation(auth_client, amount=42, category="Bills", frequency="Weekly")

    before = datetime.utcnow()
    r = auth_client.post(f"/automation/{created['id']}/process")
    assert r.status_code == 201
    data = r.json()["data"]

    expense = data["expense"]
    assert expense["amount"] == 42
    assert expense["category"] == "Bills"
    assert expense["name"] == "Netflix"
    assert expense["description"] == "Auto-generated from Weekly automation"

    stamped = datetime.fromisoformat(data["automation"]["lastProcessedDate"])
    assert before - timedelta(seconds=5) <= stamped <= datetime.utcnow() + timedelta(seconds=5)

    expenses = auth_client.get("/expense").json()
    assert expenses["count"] == 1
    assert expenses["data"][0]["id"] == expense["id"]


def test_process_unknown_automation_is_404(auth_client):
    assert auth_client.post("/automation/9999/process").status_code == 404


def test_non_finite_automation_amount_is_rejected(auth_client):
    r = auth_client.post(
        "/automation",
        content='{"name": "Gym", "amount": 1e309, "frequency": "Monthly"}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert auth_client.get("/automation").json()["count"] == 0
