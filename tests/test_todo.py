import pytest

pytestmark = pytest.mark.anyio


@pytest.fixture
async def project_id(api):
    res = await api.post("/projects", json={"name": "Home"})
    return res.json()["id"]


async def test_create_and_get_todo(api, project_id):
    todo_payload = {"title": "Buy milk", "completed": True, "dueDate": "2026-11-01"}
    res = await api.post(f"/projects/{project_id}/todos", json=todo_payload)
    assert res.status_code == 201
    todo = res.json()
    assert set(todo) == {"id", "projectId", "title", "completed", "dueDate", "createdAt"}
    assert todo["projectId"] == project_id
    assert todo["completed"] is True
    assert todo["dueDate"] == "2026-11-01"

    res = await api.get(f"/todos/{todo['id']}")
    assert res.status_code == 200
    assert res.json() == todo


async def test_create_defaults(api, project_id):
    res = await api.post(f"/projects/{project_id}/todos", json={"title": " Walk dog "})
    todo = res.json()
    assert todo["title"] == "Walk dog"
    assert todo["completed"] is False
    assert todo["dueDate"] is None


async def test_create_discards_non_string_due_date(api, project_id):
    res = await api.post(f"/projects/{project_id}/todos", json={"title": "x", "dueDate": 20261101})
    assert res.status_code == 201
    assert res.json()["dueDate"] is None


async def test_create_coerces_completed_by_truthiness(api, project_id):
    res = await api.post(f"/projects/{project_id}/todos", json={"title": "x", "completed": "yes"})
    assert res.json()["completed"] is True
    res = await api.post(f"/projects/{project_id}/todos", json={"title": "y", "completed": 0})
    assert res.json()["completed"] is False


@pytest.mark.parametrize("payload", [{}, {"title": "  "}, {"completed": True}])
async def test_create_requires_title(api, project_id, payload):
    res = await api.post(f"/projects/{project_id}/todos", json=payload)
    assert res.status_code == 400
    assert res.text == "Missing todo title"


@pytest.mark.parametrize("payload", [{"title": "valid"}, {}, None])
async def test_create_under_unknown_project(api, payload):
    res = await api.post("/projects/does-not-exist/todos", json=payload)
    assert res.status_code == 404


async def test_todo_ids_independent_of_project_ids(api, project_id):
    await api.post("/projects", json={"name": "Other"})
    res = await api.post(f"/projects/{project_id}/todos", json={"title": "first"})
    assert res.json()["id"] == "1"


async def test_list_by_project_and_all(api, project_id):
    other = (await api.post("/projects", json={"name": "Work"})).json()["id"]
    await api.post(f"/projects/{project_id}/todos", json={"title": "a"})
    await api.post(f"/projects/{other}/todos", json={"title": "b"})
    await api.post(f"/projects/{project_id}/todos", json={"title": "c"})

    res = await api.get(f"/projects/{project_id}/todos")
    assert res.status_code == 200
    assert [t["title"] for t in res.json()] == ["a", "c"]

    res = await api.get("/todos")
    assert [t["title"] for t in res.json()] == ["a", "b", "c"]


async def test_list_by_unknown_project(api):
    res = await api.get("/projects/404/todos")
    assert res.status_code == 404


async def test_update_fields_independently(api, project_id):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "t"})).json()

    res = await api.put(f"/todos/{todo['id']}", json={"completed": True})
    assert res.status_code == 200
    assert res.json() == {**todo, "completed": True}

    res = await api.put(f"/todos/{todo['id']}", json={"dueDate": "2026-12-24", "title": "gift"})
    assert res.json() == {**todo, "completed": True, "dueDate": "2026-12-24", "title": "gift"}


async def test_update_ignores_wrong_types(api, project_id):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "t", "dueDate": "2026-01-01"})).json()

    res = await api.put(
        f"/todos/{todo['id']}",
        json={"completed": "true", "title": 5, "dueDate": None, "projectId": "999"},
    )
    assert res.status_code == 200
    assert res.json() == todo


@pytest.mark.parametrize("title", ["", "  x  "])
async def test_update_title_is_stored_verbatim(api, project_id, title):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "t"})).json()
    res = await api.put(f"/todos/{todo['id']}", json={"title": title})
    assert res.status_code == 200
    assert res.json()["title"] == title
    assert (await api.get(f"/todos/{todo['id']}")).json()["title"] == title


async def test_update_with_malformed_body_changes_nothing(api, project_id):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "t"})).json()
    res = await api.put(f"/todos/{todo['id']}", content=b"{", headers={"Content-Type": "application/json"})
    assert res.status_code == 200
    assert res.json() == todo


async def test_update_unknown_todo(api):
    res = await api.put("/todos/77", json={"title": "x"})
    assert res.status_code == 404


async def test_delete_todo(api, project_id):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "t"})).json()
    res = await api.delete(f"/todos/{todo['id']}")
    assert res.status_code == 204
    assert (await api.get(f"/todos/{todo['id']}")).status_code == 404
    assert (await api.delete(f"/todos/{todo['id']}")).status_code == 404


async def test_deleting_project_leaves_todos_dangling(api, project_id):
    todo = (await api.post(f"/projects/{project_id}/todos", json={"title": "orphan"})).json()
    assert (await api.delete(f"/projects/{project_id}")).status_code == 204

    res = await api.get(f"/todos/{todo['id']}")
    assert res.status_code == 200
    assert res.json()["projectId"] == project_id
    assert [t["id"] for t in (await api.get("/todos")).json()] == [todo["id"]]
    # the project itself is gone, so listing by it fails
    assert (await api.get(f"/projects/{project_id}/todos")).status_code == 404
