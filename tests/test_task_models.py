import pytest

from core import QueryKey, Task, TaskPage, User, make_query_key


def test_task_from_dict_accepts_mongo_id():
    task = Task.from_dict({"_id": "abc", "title": "Buy milk", "completed": True, "createdAt": "2024-01-01T00:00:00Z"})
    assert task.id == "abc"
    assert task.title == "Buy milk"
    assert task.description == ""
    assert task.completed is True
    assert task.to_dict()["createdAt"] == "2024-01-01T00:00:00Z"


def test_task_from_dict_requires_id():
    with pytest.raises(ValueError):
        Task.from_dict({"title": "no id"})


def test_task_page_from_dict():
    page = TaskPage.from_dict({"tasks": [{"id": 1, "title": "a"}, {"id": 2, "title": "b"}], "totalPages": "3"})
    assert [t.id for t in page.tasks] == ["1", "2"]
    assert page.total_pages == 3
    assert not page.is_empty


def test_task_page_tolerates_missing_total():
    page = TaskPage.from_dict({"tasks": [], "totalPages": "n/a"})
    assert page.total_pages == 0
    assert page.is_empty


def test_query_key_depends_on_page_and_search_only():
    assert make_query_key(2, "milk") == QueryKey(2, "milk")
    assert make_query_key(0, None) == QueryKey(1, "")
    assert make_query_key(1, "") == make_query_key(1, None)
    assert make_query_key(1, "a") != make_query_key(1, "b")


def test_user_from_dict_roundtrip_fields():
    user = User.from_dict({"_id": "u1", "name": "Ann", "email": "ann@example.com"})
    assert user.to_dict() == {"id": "u1", "name": "Ann", "email": "ann@example.com"}
    with pytest.raises(ValueError):
        User.from_dict({"name": "nobody"})


@pytest.mark.parametrize("body", [{"tasks": 5}, {"tasks": "abc"}, {"tasks": [1, 2]}, {"tasks": ["oops"]}])
def test_task_page_rejects_malformed_tasks(body):
    with pytest.raises(ValueError):
        TaskPage.from_dict(body)
