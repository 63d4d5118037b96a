from __future__ import annotations

import pytest

from todoapi.api_types import TaskListEnvelope, TaskRecord

TITLE_MESSAGE = "O campo Title deve ser preenchido e deve conter mais do que 3 caracteres"
NOT_FOUND = {"message": "Tarefa não encontrada", "statusCode": 404}


# GIVEN: empty store
# WHEN: creating a task with a valid title
# THEN: 201 with generated id, completed False and full metadata
def test_create_task_happy(client):
    r = client.post("/tasks", json={"title": "Minha nova task"})
    assert r.status_code == 201
    body = r.get_json()
    assert isinstance(body["id"], str) and body["id"]
    assert body["title"] == "Minha nova task"
    assert body["completed"] is False
    meta = body["meta"]
    assert meta["resourceType"] == "Task"
    assert meta["created"] == meta["lastModified"] == "2025-09-08T19:05:00.000Z"
    assert meta["location"] == f"http://localhost:3000/tasks/{body['id']}"
    assert r.headers["Location"] == meta["location"]
    assert r.headers["Content-Type"].startswith("application/json")


def test_create_with_trailing_slash(client):
    r = client.post("/tasks/", json={"title": "Trailing slash"})
    assert r.status_code == 201


@pytest.mark.parametrize("payload", [{}, {"title": "a"}, {"title": "abc"}, {"title": None}, {"title": 1234}])
def test_create_task_invalid_title(client, store, payload):
    r = client.post("/tasks", json=payload)
    assert r.status_code == 400
    assert r.get_json() == {"message": TITLE_MESSAGE, "statusCode": 400}
    assert store.count() == 0


def test_create_without_json_body(client):
    r = client.post("/tasks", data="title=Something", content_type="application/x-www-form-urlencoded")
    assert r.status_code == 400
    assert r.get_json()["message"] == TITLE_MESSAGE


def test_create_with_malformed_json(client):
    r = client.post("/tasks", data="{not json", content_type="application/json")
    assert r.status_code == 400
    assert r.get_json()["statusCode"] == 400


def test_create_ignores_extra_fields(client):
    r = client.post("/tasks", json={"title": "Only title", "completed": True, "id": "mine", "owner": "x"})
    body = r.get_json()
    assert body["completed"] is False
    assert body["id"] != "mine"
    assert set(body) == {"id", "title", "completed", "meta"}


def test_list_tasks_paginated(client, make_task):
    for i in range(1, 4):
        make_task(f"Task {i}")
    r = client.get("/tasks", query_string={"page": 1, "limit": 2})
    assert r.status_code == 200
    body = r.get_json()
    assert list(body) == ["page", "limit", "total", "totalPages", "data"]
    assert (body["page"], body["limit"], body["total"], body["totalPages"]) == (1, 2, 3, 2)
    assert [t["title"] for t in body["data"]] == ["Task 1", "Task 2"]

    r2 = client.get("/tasks?page=2&limit=2")
    assert [t["title"] for t in r2.get_json()["data"]] == ["Task 3"]


def test_list_limit_is_clamped(client, make_task):
    make_task()
    r = client.get("/tasks", query_string={"limit": 1000})
    assert r.status_code == 200
    body = r.get_json()
    assert body["limit"] == 100
    assert len(body["data"]) <= 100


@pytest.mark.parametrize("qs", ["page=abc&limit=xyz", "page=0&limit=0", "page=-1&limit=-5", ""])
def test_list_invalid_params_use_defaults(client, qs):
    r = client.get(f"/tasks?{qs}")
    assert r.status_code == 200
    body = r.get_json()
    assert (body["page"], body["limit"]) == (1, 10)
    assert body["total"] == 0 and body["totalPages"] == 0 and body["data"] == []


def test_list_numeric_query_strings_count_by_value(client, make_task):
    for i in range(1, 4):
        make_task(f"Task {i}")
    body = client.get("/tasks?page=2.0&limit=2").get_json()
    assert (body["page"], body["limit"]) == (2, 2)
    assert [t["title"] for t in body["data"]] == ["Task 3"]
    assert client.get("/tasks?limit=1e3").get_json()["limit"] == 100
    assert client.get("/tasks?page=1_0").get_json()["page"] == 1


def test_list_out_of_range_page(client, make_task):
    make_task()
    r = client.get("/tasks?page=50")
    assert r.status_code == 200
    assert r.get_json()["data"] == []


def test_get_task_by_id(client, make_task):
    created = make_task("Task GET")
    r = client.get(f"/tasks/{created['id']}")
    assert r.status_code == 200
    assert r.get_json() == created


def test_get_task_not_found(client):
    r = client.get("/tasks/invalid-id")
    assert r.status_code == 404
    assert r.get_json() == NOT_FOUND


def test_update_task(client, clock, make_task):
    created = make_task("Task PUT")
    clock.advance(2)
    r = client.put(f"/tasks/{created['id']}", json={"title": "Atualizada", "completed": True})
    assert r.status_code == 200
    body = r.get_json()
    assert body["id"] == created["id"]
    assert body["title"] == "Atualizada"
    assert body["completed"] is False  # only the title is taken from the payload
    assert body["meta"]["created"] == created["meta"]["created"]
    assert body["meta"]["location"] == created["meta"]["location"]
    assert body["meta"]["lastModified"] == "2025-09-08T19:05:02.000Z"


def test_update_task_not_found(client):
    r = client.put("/tasks/invalid-id", json={"title": "Test"})
    assert r.status_code == 404
    assert r.get_json() == NOT_FOUND


def test_update_task_invalid_title(client, make_task):
    created = make_task()
    r = client.put(f"/tasks/{created['id']}", json={"title": "ab"})
    assert r.status_code == 400
    assert r.get_json() == {"message": TITLE_MESSAGE, "statusCode": 400}
    assert client.get(f"/tasks/{created['id']}").get_json() == created


def test_toggle_completed(client, clock, make_task):
    created = make_task("Task PATCH")
    clock.advance(1)
    r1 = client.patch(f"/tasks/{created['id']}/completed")
    assert r1.status_code == 200
    assert r1.get_json()["completed"] is True
    clock.advance(1)
    r2 = client.patch(f"/tasks/{created['id']}/completed")
    body = r2.get_json()
    assert body["completed"] is False
    assert created["meta"]["lastModified"] < r1.get_json()["meta"]["lastModified"] < body["meta"]["lastModified"]


def test_toggle_not_found(client):
    r = client.patch("/tasks/invalid-id/completed")
    assert r.status_code == 404
    assert r.get_json() == NOT_FOUND


def test_delete_task(client, store, make_task):
    created = make_task("Task DELETE")
    r = client.delete(f"/tasks/{created['id']}")
    assert r.status_code == 204
    assert r.data == b""
    assert store.count() == 0


def test_deleted_task_is_gone_for_every_operation(client, make_task):
    tid = make_task()["id"]
    assert client.delete(f"/tasks/{tid}").status_code == 204
    assert client.get(f"/tasks/{tid}").status_code == 404
    assert client.put(f"/tasks/{tid}", json={"title": "Valid title"}).status_code == 404
    assert client.patch(f"/tasks/{tid}/completed").status_code == 404
    assert client.delete(f"/tasks/{tid}").get_json() == NOT_FOUND


def test_full_lifecycle_scenario(client, clock):
    created = client.post("/tasks", json={"title": "Minha nova task"})
    assert created.status_code == 201
    task = created.get_json()

    fetched = client.get(f"/tasks/{task['id']}")
    assert fetched.get_json() == task

    clock.advance(0.25)
    updated = client.put(f"/tasks/{task['id']}", json={"title": "Atualizada"}).get_json()
    assert updated["title"] == "Atualizada"
    assert updated["id"] == task["id"]
    assert updated["meta"]["lastModified"] > task["meta"]["created"]

    assert client.delete(f"/tasks/{task['id']}").status_code == 204
    assert client.get(f"/tasks/{task['id']}").status_code == 404


def test_list_body_matches_envelope_contract(client, make_task):
    make_task()
    body = client.get("/tasks").get_json()
    assert list(body) == list(TaskListEnvelope.__annotations__)
    assert list(body["data"][0]) == list(TaskRecord.__annotations__)
