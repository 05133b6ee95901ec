from fastapi.testclient import TestClient

PREFIX = "/api/v1"


def _create(client, path, body):
    response = client.post(f"{PREFIX}/{path}", json=body)
    assert response.status_code == 200, response.json()
    return response.json()["data"]


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "running"


def test_health(client):
    response = client.get(f"{PREFIX}/health")

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["service"] == "TaskFlow"
    assert "error" not in body


def test_task_lifecycle(client):
    task_id = _create(client, "tasks", {"userId": "u1", "title": "T", "status": "pending"})

    fetched = client.get(f"{PREFIX}/tasks", params={"id": task_id}).json()
    assert fetched["data"]["title"] == "T"
    assert fetched["data"]["assignedBy"] == "u1"

    updated = client.put(f"{PREFIX}/tasks", params={"id": task_id}, json={"status": "completed"})
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "completed"

    by_user = client.get(f"{PREFIX}/tasks/user/u1").json()
    assert [task["id"] for task in by_user["data"]] == [task_id]

    by_status = client.get(f"{PREFIX}/tasks/status/completed").json()
    assert [task["id"] for task in by_status["data"]] == [task_id]

    deleted = client.delete(f"{PREFIX}/tasks", params={"id": task_id})
    assert deleted.status_code == 200
    assert deleted.json()["data"]["id"] == task_id

    missing = client.get(f"{PREFIX}/tasks", params={"id": task_id})
    assert missing.status_code == 404
    assert missing.json()["error"] == "NOT_FOUND"
    assert "data" not in missing.json()


def test_create_without_owner_is_400(client):
    response = client.post(f"{PREFIX}/tasks", json={"title": "T"})

    assert response.status_code == 400
    assert response.json()["status"] == 400
    assert response.json()["success"] is False


def test_get_without_id_is_400(client):
    response = client.get(f"{PREFIX}/labels")

    assert response.status_code == 400
    assert response.json()["error"] == "MISSING_PARAMETER"


def test_non_object_body_is_400(client):
    response = client.put(f"{PREFIX}/labels", params={"id": "l1"}, json=["not", "an", "object"])

    assert response.status_code == 400


def test_malformed_json_is_400_envelope(client):
    response = client.post(
        f"{PREFIX}/comment",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_FAILURE"


def test_list_endpoints_return_empty_lists(client):
    for path in ("tasks", "projects", "comment", "labels", "activities"):
        response = client.get(f"{PREFIX}/{path}/list")

        assert response.status_code == 200
        assert response.json()["data"] == []


def test_project_team_routes(client):
    project_id = _create(client, "projects", {"userId": "u1", "title": "P"})

    added = client.post(f"{PREFIX}/projects/{project_id}/team/add", json={"userId": "u2"})
    again = client.post(f"{PREFIX}/projects/{project_id}/team/add", json={"userId": "u2"})
    removed = client.post(f"{PREFIX}/projects/{project_id}/team/remove", json={"userId": "u9"})
    members = client.get(f"{PREFIX}/projects/member/u2").json()

    assert added.status_code == 200
    assert again.status_code == 400
    assert again.json()["error"] == "ALREADY_MEMBER"
    assert removed.status_code == 400
    assert [project["id"] for project in members["data"]] == [project_id]


def test_comment_and_label_lookups(client):
    comment_id = _create(client, "comment", {"userId": "u1", "taskId": "t1", "content": "LGTM"})
    label_id = _create(client, "labels", {"userId": "u1", "name": "bug", "color": "red"})

    assert client.get(f"{PREFIX}/comment/task/t1").json()["data"][0]["id"] == comment_id
    assert client.get(f"{PREFIX}/comment/content/LGTM").json()["data"][0]["id"] == comment_id
    assert client.get(f"{PREFIX}/labels/color/red").json()["data"][0]["id"] == label_id
    assert client.get(f"{PREFIX}/labels/user/u1").json()["data"][0]["id"] == label_id


def test_activity_routes(client):
    activity_id = _create(
        client,
        "activities",
        {"userId": "u1", "taskId": "t1", "action": "created", "details": "Task created"},
    )

    assert client.get(f"{PREFIX}/activities/action/created").json()["data"][0]["id"] == activity_id
    deleted = client.delete(f"{PREFIX}/activities", params={"id": activity_id}).json()
    assert deleted["data"]["details"] == "Task created"


def test_login_without_credentials(client, identity_provider):
    response = client.post(f"{PREFIX}/login", json={})

    assert response.status_code == 400
    assert identity_provider.calls == []


def test_register_login_logout(client):
    registered = client.post(
        f"{PREFIX}/register", json={"email": "a@b.c", "password": "secret"}
    )
    assert registered.status_code == 200
    uid = registered.json()["data"]["uid"]

    login = client.post(f"{PREFIX}/login", json={"email": "a@b.c", "password": "secret"})
    assert login.status_code == 200
    token = login.json()["data"]["token"]

    duplicate = client.post(f"{PREFIX}/register", json={"email": "a@b.c", "password": "x"})
    assert duplicate.status_code == 409

    logout = client.post(f"{PREFIX}/logout", headers={"Authorization": f"Bearer {token}"})
    assert logout.status_code == 200

    rejected = client.post(f"{PREFIX}/logout", json={"token": "forged"})
    assert rejected.status_code == 401

    assert uid


def test_user_profile_route(client):
    response = client.post(f"{PREFIX}/user", json={"user": {"authInfo": {"uid": "uid-42"}}})

    assert response.status_code == 200
    assert response.json()["data"] == "uid-42"


def test_unhandled_errors_are_500_envelopes(app):
    async def boom():
        raise RuntimeError("secret detail")

    app.add_api_route("/boom", boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_ERROR"
    assert "secret detail" not in response.json()["message"]
