from __future__ import annotations

import pytest

from restaurant_manager.data.repo import Repo
from restaurant_manager.logic.records import RecordService, reload_from_store
from restaurant_manager.models.restaurant import Restaurant
from restaurant_manager.models.result import ResultKind


@pytest.fixture
def repo():
    with Repo(":memory:") as r:
        yield r


def test_in_memory_service_only_touches_the_aggregate() -> None:
    service = RecordService(Restaurant("Cafe"))
    assert not service.persistent
    assert service.add_employee("Sam", 10, 20)
    assert service.restaurant.find_employee("sam").id == 0
    assert service.reload() == (1, 0)


def test_add_writes_through_and_assigns_ids(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    result = service.add_employee("Sam", 10, 20)
    assert result.message == "Employee added successfully."
    assert result.value.id == 1
    assert service.add_dish("Soup", 5).value.id == 1
    assert [e.name for e in repo.get_employees()] == ["Sam"]


def test_rejected_add_does_not_reach_the_store(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_dish("Soup", 5)
    assert service.add_dish("SOUP", 4).kind is ResultKind.CONFLICT
    assert service.add_employee("R2D2", 1, 1).kind is ResultKind.INVALID
    assert len(repo.get_dishes()) == 1
    assert repo.get_employees() == []


def test_remove_deletes_the_row(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_employee("Sam", 10, 20)
    service.add_dish("Soup", 5)

    assert service.remove_employee("sam")
    assert service.remove_dish("soup")
    assert repo.get_employees() == [] and repo.get_dishes() == []
    assert service.remove_employee("sam").kind is ResultKind.NOT_FOUND


def test_partial_update_persists_applied_values(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_employee("Jane Doe", 12.5, 40)

    result = service.update_employee("jane doe", 15, 500)
    assert result.kind is ResultKind.PARTIAL
    stored = repo.get_employees()[0]
    assert (stored.hourly_rate, stored.hours_worked) == (15.0, 40.0)

    assert service.update_dish("Nothing", 1).kind is ResultKind.NOT_FOUND
    service.add_dish("Soup", 5)
    assert service.update_dish("soup", 7)
    assert repo.get_dishes()[0].price == 7.0


def test_attach_saves_unsaved_records_then_reloads(repo: Repo) -> None:
    repo.add_employee("Dana", 20, 10)
    service = RecordService(Restaurant("Cafe"))
    service.add_employee("Sam", 10, 20)
    service.add_employee("dana", 1, 1)   # same name as a stored row: not copied
    service.add_dish("Soup", 5)

    assert service.attach(repo) == (2, 1)
    assert [(e.id, e.name) for e in service.restaurant.employees] == [(1, "Dana"), (2, "Sam")]
    assert service.restaurant.find_employee("dana").hourly_rate == 20


def test_detach_keeps_records_and_returns_repo(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_employee("Sam", 10, 20)
    assert service.detach() is repo
    assert not service.persistent
    service.add_employee("Dana", 20, 10)
    assert len(repo.get_employees()) == 1
    assert len(service.restaurant.employees) == 2


def test_reload_from_store_replaces_contents(repo: Repo) -> None:
    cafe = Restaurant("Cafe")
    cafe.add_employee("Temp", 1, 1)
    repo.add_employee("Sam", 10, 20)
    repo.add_dish("Soup", 5)
    repo.add_dish("Bread", 2)

    assert reload_from_store(cafe, repo) == (1, 2)
    assert [e.name for e in cafe.employees] == ["Sam"]
    assert [d.name for d in cafe.dishes] == ["Soup", "Bread"]


def test_open_late_passthrough() -> None:
    service = RecordService(Restaurant("Cafe"))
    assert service.toggle_open_late() is True
    service.set_open_late(False)
    assert service.restaurant.is_open_late() is False


def _read_only(repo: Repo) -> None:
    repo.conn.execute("PRAGMA query_only = ON")


def test_failed_store_write_keeps_memory_in_step(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_dish("Soup", 5)
    _read_only(repo)

    result = service.add_employee("Sam", 10, 20)
    assert result.kind is ResultKind.STORAGE
    assert result.message.startswith("Storage error: ")
    assert service.restaurant.employees == [] and repo.get_employees() == []

    assert service.remove_dish("soup").kind is ResultKind.STORAGE
    assert [d.name for d in service.restaurant.dishes] == ["Soup"]
    assert [d.name for d in repo.get_dishes()] == ["Soup"]


def test_failed_store_update_restores_stored_values(repo: Repo) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    service.add_employee("Jane Doe", 12.5, 40)
    service.add_dish("Soup", 5)
    _read_only(repo)

    assert service.update_employee("jane doe", 15, 30).kind is ResultKind.STORAGE
    emp = service.restaurant.find_employee("jane doe")
    assert (emp.hourly_rate, emp.hours_worked) == (12.5, 40.0)

    assert service.update_dish("soup", 9).kind is ResultKind.STORAGE
    assert service.restaurant.find_dish("soup").price == 5.0


def test_store_failure_is_logged(repo: Repo, caplog: pytest.LogCaptureFixture) -> None:
    service = RecordService(Restaurant("Cafe"), repo)
    _read_only(repo)
    with caplog.at_level("ERROR", logger="restaurant_manager.logic.records"):
        service.add_dish("Soup", 5)
    assert "store write failed" in caplog.text
