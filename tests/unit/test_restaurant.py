from __future__ import annotations

import math

import pytest

from restaurant_manager.exceptions import ValidationError
from restaurant_manager.models.dish import Dish
from restaurant_manager.models.employee import Employee
from restaurant_manager.models.restaurant import Restaurant
from restaurant_manager.models.result import ResultKind


@pytest.fixture
def cafe() -> Restaurant:
    return Restaurant("Cafe")


def test_restaurant_name_is_required_and_trimmed() -> None:
    assert Restaurant("  Cafe ").name == "Cafe"
    with pytest.raises(ValidationError):
        Restaurant("   ")


def test_open_late_flag(cafe: Restaurant) -> None:
    assert cafe.is_open_late() is False
    assert cafe.toggle_open_late() is True
    assert cafe.is_open_late() is True
    cafe.set_open_late(False)
    assert cafe.is_open_late() is False


def test_add_employee_success_has_no_error(cafe: Restaurant) -> None:
    result = cafe.add_employee("Jane Doe", 12.5, 40)
    assert result
    assert result.error is None
    assert len(cafe.employees) == 1


def test_add_employee_returns_validation_message(cafe: Restaurant) -> None:
    result = cafe.add_employee("R2D2", 10, 10)
    assert result.kind is ResultKind.INVALID
    assert result.message == "Employee name must contain only letters and spaces."
    assert cafe.employees == []


def test_duplicate_employee_names_differing_in_case(cafe: Restaurant) -> None:
    first = cafe.add_employee("Jane Doe", 12.5, 40)
    second = cafe.add_employee("  JANE DOE", 20, 10)
    assert first
    assert second.kind is ResultKind.CONFLICT
    assert second.message == "Employee with name 'JANE DOE' already exists."
    assert len(cafe.employees) == 1
    assert cafe.employees[0].hourly_rate == 12.5


def test_remove_employee(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    cafe.add_employee("Dana", 20, 10)

    missing = cafe.remove_employee("Nonexistent")
    assert missing.kind is ResultKind.NOT_FOUND
    assert missing.message == "Employee not found."
    assert len(cafe.employees) == 2

    blank = cafe.remove_employee("   ")
    assert blank.kind is ResultKind.INVALID
    assert blank.message == "Name cannot be empty."

    removed = cafe.remove_employee(" sam ")
    assert removed.message == "Employee removed successfully."
    assert [e.name for e in cafe.employees] == ["Dana"]


def test_update_employee_applies_valid_fields_only(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    result = cafe.update_employee("sam", 15, 200)

    assert not result
    assert result.kind is ResultKind.PARTIAL
    assert result.message == "Employee update completed with validation errors."
    assert result.errors == ("Hours worked must be between 0 and 168",)
    emp = cafe.find_employee("Sam")
    assert emp.hourly_rate == 15
    assert emp.hours_worked == 20


def test_update_employee_rejected_rate_keeps_old_rate(cafe: Restaurant) -> None:
    cafe.add_employee("Jane Doe", 12.5, 40)
    result = cafe.update_employee("jane doe", -1, 40)
    assert result.kind is ResultKind.PARTIAL
    assert cafe.find_employee("Jane Doe").hourly_rate == 12.5
    assert cafe.find_employee("Jane Doe").hours_worked == 40


def test_update_employee_success_and_not_found(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    assert cafe.update_employee("SAM", 11, 21).message == "Employee updated successfully."
    assert cafe.find_employee("sam").weekly_pay == 11 * 21
    assert cafe.update_employee("Nobody", 1, 1).kind is ResultKind.NOT_FOUND
    assert cafe.update_employee("", 1, 1).kind is ResultKind.INVALID


def test_total_payroll(cafe: Restaurant) -> None:
    assert cafe.total_payroll() == 0
    cafe.add_employee("Sam", 10, 20)
    cafe.add_employee("Dana", 20, 10)
    assert math.isclose(cafe.total_payroll(), 400.00)


def test_dish_scenario(cafe: Restaurant) -> None:
    assert cafe.add_dish("Soup", 5.00).error is None
    conflict = cafe.add_dish("soup", 3.00)
    assert conflict.kind is ResultKind.CONFLICT
    assert conflict.message == "Dish with name 'soup' already exists."

    menu = cafe.menu_display_strings()
    assert len(menu) == 1
    assert "Soup" in menu[0] and "5.00" in menu[0]


def test_dish_update_and_remove(cafe: Restaurant) -> None:
    cafe.add_dish("Soup", 5)
    failed = cafe.update_dish("SOUP", -1)
    assert failed.kind is ResultKind.INVALID
    assert failed.message == "Dish update failed due to validation."
    assert cafe.find_dish("soup").price == 5

    assert cafe.update_dish("soup", 6).message == "Dish updated successfully."
    assert cafe.update_dish("Salad", 6).message == "Dish not found."
    assert cafe.remove_dish("Salad").kind is ResultKind.NOT_FOUND
    assert cafe.remove_dish("").message == "Name cannot be empty."
    assert cafe.remove_dish("soup").message == "Dish removed successfully."
    assert cafe.dishes == []


def test_display_strings_keep_insertion_order(cafe: Restaurant) -> None:
    for name in ("Zed", "Amy", "Mo"):
        cafe.add_employee(name, 10, 10)
    assert [line.split("|")[1].strip() for line in cafe.employee_display_strings()] == ["Zed", "Amy", "Mo"]


def test_clear_all_then_bulk_load_reproduces_display(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    cafe.add_employee("Dana", 20, 10)
    cafe.add_dish("Soup", 5)
    cafe.add_dish("Bread", 2.5)
    employees, dishes = cafe.employees, cafe.dishes
    before = (cafe.employee_display_strings(), cafe.menu_display_strings())

    cafe.clear_all()
    assert cafe.employees == [] and cafe.dishes == []

    for e in employees:
        cafe.load_employee(e)
    for d in dishes:
        cafe.load_dish(d)
    assert (cafe.employee_display_strings(), cafe.menu_display_strings()) == before


def test_bulk_load_skips_duplicate_check(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    cafe.load_employee(Employee("SAM", 5, 5, id=2))
    cafe.load_dish(Dish("Soup", 1, id=1))
    cafe.load_dish(Dish("soup", 2, id=2))
    assert len(cafe.employees) == 2
    assert len(cafe.dishes) == 2


def test_collections_are_copies(cafe: Restaurant) -> None:
    cafe.add_employee("Sam", 10, 20)
    cafe.employees.clear()
    assert len(cafe.employees) == 1


def test_remove_by_id(cafe: Restaurant) -> None:
    cafe.load_employee(Employee("Sam", 10, 20, id=5))
    cafe.load_dish(Dish("Soup", 5, id=8))
    assert cafe.remove_employee_by_id(5) is True
    assert cafe.remove_employee_by_id(5) is False
    assert cafe.remove_dish_by_id(8) is True
    assert cafe.remove_dish_by_id(99) is False
