import re

import pytest

from src.todo import InvalidTodoError, TodoNotFoundError, TodoRepository


def test_todo_repository_crud_cycle(repo):
    created = repo.create("Write report")
    assert created.id == 1
    assert created.title == "Write report"
    assert created.completed is False

    assert [item.id for item in repo.list()] == [1]

    updated = repo.update(created.id, title="Write final report")
    assert updated.title == "Write final report"

    toggled = repo.toggle(created.id)
    assert toggled.completed is True

    repo.delete(created.id)
    assert repo.list() == []


def test_create_trims_title_and_sets_timestamp(repo):
    created = repo.create("  Buy milk  ")

    assert created.title == "Buy milk"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", created.created_at)


@pytest.mark.parametrize("title", [None, "", "   ", "\t\n", 42])
def test_create_rejects_missing_or_blank_title(repo, title):
    with pytest.raises(InvalidTodoError, match="Title is required"):
        repo.create(title)
    assert repo.list() == []


def test_ids_strictly_increase_and_are_never_reused(repo):
    first = repo.create("one")
    second = repo.create("two")
    repo.delete(second.id)
    third = repo.create("three")

    assert first.id < second.id < third.id
    assert third.id == 3


def test_list_keeps_insertion_order(repo):
    repo.bulk_create(["c", "a", "b"])
    repo.delete(2)
    repo.create("d")

    assert [item.title for item in repo.list()] == ["c", "b", "d"]


def test_toggle_twice_restores_completed(repo):
    created = repo.create("Laundry")

    repo.toggle(created.id)
    again = repo.toggle(created.id)

    assert again.completed is created.completed


def test_update_without_title_keeps_title(repo):
    created = repo.create("Keep me")

    assert repo.update(created.id).title == "Keep me"
    assert repo.update(created.id, title=None).title == "Keep me"


def test_update_stores_title_verbatim_by_default(repo):
    created = repo.create("Original")

    assert repo.update(created.id, title="  spaced  ").title == "  spaced  "
    assert repo.update(created.id, title="").title == ""


def test_strict_titles_validates_updates():
    strict = TodoRepository(strict_titles=True)
    created = strict.create("Original")

    with pytest.raises(InvalidTodoError):
        strict.update(created.id, title="   ")
    assert strict.get(created.id).title == "Original"
    assert strict.update(created.id, title="  New  ").title == "New"


@pytest.mark.parametrize("operation", ["get", "update", "toggle", "delete"])
def test_unknown_id_raises_not_found(repo, operation):
    repo.create("only one")

    with pytest.raises(TodoNotFoundError) as excinfo:
        getattr(repo, operation)(999)

    assert excinfo.value.todo_id == 999
    assert str(excinfo.value) == "Todo not found"
    assert len(repo) == 1


def test_returned_records_are_snapshots(repo):
    created = repo.create("Snapshot")
    created.title = "mutated outside"

    assert repo.get(created.id).title == "Snapshot"


def test_clear_resets_counter(repo):
    repo.bulk_create(["a", "b"])
    repo.clear()

    assert repo.list() == []
    assert repo.create("fresh").id == 1
