# models/restaurant.py
from __future__ import annotations

import logging
from typing import List, Optional

from restaurant_manager.models.dish import Dish
from restaurant_manager.models.employee import Employee
from restaurant_manager.models.fields import clean_name
from restaurant_manager.models.result import Result

logger = logging.getLogger(__name__)

EMPTY_NAME = "Name cannot be empty."


def _key(name) -> Optional[str]:
    """Lookup key: trimmed, case-folded. None for blank input."""
    if name is None:
        return None
    key = str(name).strip()
    return key.casefold() if key else None


class Restaurant:
    """
    Aggregate root for one restaurant's roster and menu.

    Employees and dishes keep insertion order. Names are unique per
    collection (case-insensitive) on the add path; ``load_employee`` /
    ``load_dish`` append stored records as-is without that check.
    Mutations report problems through Result values and do not raise.
    """

    def __init__(self, name: str, open_late: bool = False):
        self._name = clean_name(name, "Restaurant")
        self._open_late = bool(open_late)
        self._employees: List[Employee] = []
        self._dishes: List[Dish] = []

    @property
    def name(self) -> str:
        return self._name

    # ---------- open late ----------
    def is_open_late(self) -> bool:
        return self._open_late

    def set_open_late(self, open_late: bool) -> None:
        self._open_late = bool(open_late)

    def toggle_open_late(self) -> bool:
        self._open_late = not self._open_late
        return self._open_late

    # ---------- employees ----------
    @property
    def employees(self) -> List[Employee]:
        return list(self._employees)

    def find_employee(self, name) -> Optional[Employee]:
        key = _key(name)
        if key is None:
            return None
        return next((e for e in self._employees if e.name.casefold() == key), None)

    def add_employee(self, name, hourly_rate, hours_worked) -> Result:
        created = Employee.create(name, hourly_rate, hours_worked)
        if not created:
            return created
        emp = created.value
        if self.find_employee(emp.name) is not None:
            return Result.conflict(f"Employee with name '{emp.name}' already exists.")
        self._employees.append(emp)
        logger.debug("employee added: %s", emp.name)
        return Result.success("Employee added successfully.", value=emp)

    def remove_employee(self, name) -> Result:
        if _key(name) is None:
            return Result.invalid(EMPTY_NAME)
        emp = self.find_employee(name)
        if emp is None:
            return Result.not_found("Employee not found.")
        self._employees.remove(emp)
        logger.debug("employee removed: %s", emp.name)
        return Result.success("Employee removed successfully.", value=emp)

    def update_employee(self, name, new_rate, new_hours) -> Result:
        """
        Rate and hours are applied independently: a rejected value does not
        roll back the other one.
        """
        if _key(name) is None:
            return Result.invalid(EMPTY_NAME)
        emp = self.find_employee(name)
        if emp is None:
            return Result.not_found("Employee not found.")
        outcomes = (emp.set_hourly_rate(new_rate), emp.set_hours_worked(new_hours))
        errors = [r.message for r in outcomes if not r]
        if errors:
            logger.debug("employee %s partially updated: %s", emp.name, errors)
            return Result.partial("Employee update completed with validation errors.", errors)
        return Result.success("Employee updated successfully.", value=emp)

    def remove_employee_by_id(self, emp_id: int) -> bool:
        before = len(self._employees)
        self._employees = [e for e in self._employees if e.id != emp_id]
        return len(self._employees) != before

    def load_employee(self, employee: Employee) -> None:
        """Bulk-load path: append a stored employee without the duplicate check."""
        self._employees.append(employee)

    def employee_display_strings(self) -> List[str]:
        return [e.display_string() for e in self._employees]

    def total_payroll(self) -> float:
        return sum((e.weekly_pay for e in self._employees), 0.0)

    # ---------- dishes ----------
    @property
    def dishes(self) -> List[Dish]:
        return list(self._dishes)

    def find_dish(self, name) -> Optional[Dish]:
        key = _key(name)
        if key is None:
            return None
        return next((d for d in self._dishes if d.name.casefold() == key), None)

    def add_dish(self, name, price) -> Result:
        created = Dish.create(name, price)
        if not created:
            return created
        dish = created.value
        if self.find_dish(dish.name) is not None:
            return Result.conflict(f"Dish with name '{dish.name}' already exists.")
        self._dishes.append(dish)
        logger.debug("dish added: %s", dish.name)
        return Result.success("Dish added successfully.", value=dish)

    def remove_dish(self, name) -> Result:
        if _key(name) is None:
            return Result.invalid(EMPTY_NAME)
        dish = self.find_dish(name)
        if dish is None:
            return Result.not_found("Dish not found.")
        self._dishes.remove(dish)
        logger.debug("dish removed: %s", dish.name)
        return Result.success("Dish removed successfully.", value=dish)

    def update_dish(self, name, new_price) -> Result:
        if _key(name) is None:
            return Result.invalid(EMPTY_NAME)
        dish = self.find_dish(name)
        if dish is None:
            return Result.not_found("Dish not found.")
        if not dish.set_price(new_price):
            return Result.invalid("Dish update failed due to validation.")
        return Result.success("Dish updated successfully.", value=dish)

    def remove_dish_by_id(self, dish_id: int) -> bool:
        before = len(self._dishes)
        self._dishes = [d for d in self._dishes if d.id != dish_id]
        return len(self._dishes) != before

    def load_dish(self, dish: Dish) -> None:
        """Bulk-load path: append a stored dish without the duplicate check."""
        self._dishes.append(dish)

    def menu_display_strings(self) -> List[str]:
        return [d.display_string() for d in self._dishes]

    # ---------- resync ----------
    def clear_all(self) -> None:
        self._employees.clear()
        self._dishes.clear()
