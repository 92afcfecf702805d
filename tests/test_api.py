from datetime import date, timedelta


def _create(client, **body):
    payload = {"title": "Write report", "due_date": "2025-01-10"}
    payload.update(body)
    response = client.post("/tasks/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_fetch(client):
    created = _create(client, description="  quarterly  ")

    assert created["completed"] is False
    assert created["description"] == "quarterly"

    response = client.get(f"/tasks/{created['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Write report"


def test_create_strips_and_requires_title(client):
    assert client.post("/tasks/", json={"title": "   ", "due_date": "2025-01-10"}).status_code == 422
    assert _create(client, title="  Trim me ")["title"] == "Trim me"


def test_create_requires_due_date(client):
    assert client.post("/tasks/", json={"title": "No date"}).status_code == 422
    assert client.post("/tasks/", json={"title": "Bad", "due_date": "2025-13-40"}).status_code == 422


def test_list_with_filters(client):
    a = _create(client, title="A")
    _create(client, title="B")
    client.put(f"/tasks/{a['id']}/toggle-complete")

    titles = lambda mode: [t["title"] for t in client.get("/tasks/", params={"filter": mode}).json()]

    assert titles("all") == ["A", "B"]
    assert titles("completed") == ["A"]
    assert titles("pending") == ["B"]
    assert titles("whatever") == ["A", "B"]
    assert [t["title"] for t in client.get("/tasks/").json()] == ["A", "B"]


def test_update_applies_only_sent_fields(client):
    created = _create(client, description="keep me")

    response = client.put(f"/tasks/{created['id']}", json={"title": "Renamed"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Renamed"
    assert body["description"] == "keep me"
    assert body["due_date"] == "2025-01-10"
    assert body["created_at"] == created["created_at"]


def test_update_rejects_blank_title_and_null_due_date(client):
    created = _create(client)

    assert client.put(f"/tasks/{created['id']}", json={"title": ""}).status_code == 422
    assert client.put(f"/tasks/{created['id']}", json={"due_date": None}).status_code == 422


def test_update_missing_task_is_404(client):
    assert client.put("/tasks/nope", json={"title": "X"}).status_code == 404


def test_toggle(client):
    created = _create(client)

    first = client.put(f"/tasks/{created['id']}/toggle-complete").json()
    second = client.put(f"/tasks/{created['id']}/toggle-complete").json()

    assert first["completed"] is True
    assert second["completed"] is False
    assert client.put("/tasks/nope/toggle-complete").status_code == 404


def test_delete(client):
    created = _create(client)

    assert client.delete(f"/tasks/{created['id']}").status_code == 204
    assert client.get(f"/tasks/{created['id']}").status_code == 404
    assert client.delete(f"/tasks/{created['id']}").status_code == 404


def test_deadline_flags(client):
    today = date.today()
    overdue = _create(client, title="late", due_date=(today - timedelta(days=1)).isoformat())
    soon = _create(client, title="soon", due_date=(today + timedelta(days=1)).isoformat())
    later = _create(client, title="later", due_date=(today + timedelta(days=30)).isoformat())

    assert (overdue["overdue"], overdue["due_soon"]) == (True, False)
    assert (soon["overdue"], soon["due_soon"]) == (False, True)
    assert (later["overdue"], later["due_soon"]) == (False, False)

    done = client.put(f"/tasks/{overdue['id']}/toggle-complete").json()
    assert done["overdue"] is False
