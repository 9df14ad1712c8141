# tests/test_tasks_api.py

import pytest

TASKS = "/api/v1/tasks"


def _create(client, headers, **body):
    r = client.post(TASKS, json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["task"]


def test_create_defaults_completed_to_false(client, alice):
    task = _create(client, alice, description="buy milk")

    assert task["description"] == "buy milk"
    assert task["completed"] is False
    assert isinstance(task["id"], int)
    assert task["created_at"] and task["updated_at"]

    me = client.get("/api/v1/auth/me", headers=alice).json()
    assert task["owner_id"] == me["id"]

    listed = client.get(TASKS, headers=alice).json()
    assert [t["id"] for t in listed["tasks"]] == [task["id"]]
    assert listed["total"] == 1


def test_create_can_start_completed(client, alice):
    task = _create(client, alice, description="already done", completed=True)
    assert task["completed"] is True


def test_description_is_trimmed(client, alice):
    task = _create(client, alice, description="  walk the dog \n")
    assert task["description"] == "walk the dog"


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"description": ""},
        {"description": "   "},
        {"description": None},
        {"description": "ok", "completed": "yes"},
        {"description": "ok", "completed": None},
    ],
)
def test_create_rejects_invalid_bodies(client, alice, body):
    r = client.post(TASKS, json=body, headers=alice)
    assert r.status_code == 422
    assert client.get(TASKS, headers=alice).json()["total"] == 0


def test_list_keeps_insertion_order_and_owner_scope(client, alice, bob):
    a = _create(client, alice, description="A")
    _create(client, bob, description="bob's")
    b = _create(client, alice, description="B", completed=True)

    tasks = client.get(TASKS, headers=alice).json()["tasks"]
    assert [t["id"] for t in tasks] == [a["id"], b["id"]]
    assert all(t["owner_id"] == a["owner_id"] for t in tasks)


def test_get_one(client, alice):
    task = _create(client, alice, description="read")
    r = client.get(f"{TASKS}/{task['id']}", headers=alice)
    assert r.status_code == 200
    assert r.json()["task"] == task


def test_other_users_task_is_not_found(client, alice, bob):
    task = _create(client, alice, description="private")
    url = f"{TASKS}/{task['id']}"

    assert client.get(url, headers=bob).status_code == 404
    assert client.put(url, json={"completed": True}, headers=bob).status_code == 404
    assert client.delete(url, headers=bob).status_code == 404
    assert client.patch(f"{url}/toggle", headers=bob).status_code == 404

    # intacte pour sa propriétaire
    assert client.get(url, headers=alice).json()["task"]["completed"] is False


def test_put_updates_only_given_fields(client, alice):
    task = _create(client, alice, description="draft")
    url = f"{TASKS}/{task['id']}"

    r = client.put(url, json={"completed": True}, headers=alice)
    assert r.status_code == 200
    updated = r.json()["task"]
    assert updated["completed"] is True
    assert updated["description"] == "draft"

    r = client.put(url, json={"description": "final", "completed": False}, headers=alice)
    assert r.json()["task"]["description"] == "final"
    assert r.json()["task"]["completed"] is False
    assert r.json()["task"]["id"] == task["id"]


def test_put_rejects_empty_or_null_fields(client, alice):
    task = _create(client, alice, description="keep me")
    url = f"{TASKS}/{task['id']}"

    assert client.put(url, json={"description": "  "}, headers=alice).status_code == 422
    assert client.put(url, json={"description": None}, headers=alice).status_code == 422
    assert client.put(url, json={"completed": None}, headers=alice).status_code == 422
    assert client.get(url, headers=alice).json()["task"]["description"] == "keep me"


def test_toggle_twice_restores_original(client, alice):
    task = _create(client, alice, description="flip", completed=True)
    url = f"{TASKS}/{task['id']}/toggle"

    first = client.patch(url, headers=alice).json()["task"]
    second = client.patch(url, headers=alice).json()["task"]

    assert first["completed"] is False
    assert second["completed"] is True
    assert second["description"] == "flip"


def test_delete_removes_from_list(client, alice):
    keep = _create(client, alice, description="keep")
    gone = _create(client, alice, description="gone")

    r = client.delete(f"{TASKS}/{gone['id']}", headers=alice)
    assert r.status_code == 204

    ids = [t["id"] for t in client.get(TASKS, headers=alice).json()["tasks"]]
    assert ids == [keep["id"]]


def test_delete_missing_task_is_not_found(client, alice):
    task = _create(client, alice, description="once")
    url = f"{TASKS}/{task['id']}"

    assert client.delete(url, headers=alice).status_code == 204
    r = client.delete(url, headers=alice)
    assert r.status_code == 404
    assert r.json()["detail"] == "Task not found."


def test_tasks_require_authentication(client):
    assert client.get(TASKS).status_code == 401
    assert client.post(TASKS, json={"description": "x"}).status_code == 401
    r = client.get(TASKS, headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
