# models/employee.py
from __future__ import annotations

from typing import Any, Dict

from restaurant_manager.exceptions import ValidationError
from restaurant_manager.models.fields import (
    MAX_WEEKLY_HOURS, check_id, clean_person_name, is_amount, is_hours
)
from restaurant_manager.models.result import Result

RATE_ERROR = "Hourly rate cannot be negative"
HOURS_ERROR = f"Hours worked must be between 0 and {MAX_WEEKLY_HOURS}"


class Employee:
    """
    A staff member with an hourly wage.

    - name: trimmed, letters and spaces only
    - hourly_rate: >= 0 (0 allowed for unpaid positions)
    - hours_worked: hours in the current week, 0..168
    - id: storage primary key, 0 while not persisted; never changes
    """

    def __init__(self, name: str, hourly_rate: float, hours_worked: float, id: int = 0):
        self._id = check_id(id, "Employee")
        self._name = clean_person_name(name, "Employee")
        if not is_amount(hourly_rate):
            raise ValidationError(RATE_ERROR)
        if not is_hours(hours_worked):
            raise ValidationError(HOURS_ERROR)
        self._hourly_rate = float(hourly_rate)
        self._hours_worked = float(hours_worked)

    @classmethod
    def create(cls, name, hourly_rate, hours_worked, id: int = 0) -> Result:
        """Like the constructor, but reports failure as a Result."""
        try:
            emp = cls(name, hourly_rate, hours_worked, id=id)
        except ValidationError as e:
            return Result.invalid(str(e))
        return Result.success(value=emp)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def hourly_rate(self) -> float:
        return self._hourly_rate

    @property
    def hours_worked(self) -> float:
        return self._hours_worked

    @property
    def weekly_pay(self) -> float:
        return self._hourly_rate * self._hours_worked

    def set_hourly_rate(self, rate: float) -> Result:
        if not is_amount(rate):
            return Result.invalid(RATE_ERROR)
        self._hourly_rate = float(rate)
        return Result.success()

    def set_hours_worked(self, hours: float) -> Result:
        if not is_hours(hours):
            return Result.invalid(HOURS_ERROR)
        self._hours_worked = float(hours)
        return Result.success()

    def display_string(self) -> str:
        return (f"{self._id} | {self._name:<15} | ${self._hourly_rate:<8.2f} | "
                f"{self._hours_worked:4.1f} hrs | Weekly Pay: ${self.weekly_pay:.2f}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "hourly_rate": self._hourly_rate,
            "hours_worked": self._hours_worked,
        }

    @staticmethod
    def from_dict(data) -> "Employee":
        return Employee(data["name"], data["hourly_rate"], data["hours_worked"],
                        id=data.get("id") or 0)

    def __repr__(self) -> str:
        return (f"Employee(id={self._id}, name={self._name!r}, "
                f"hourly_rate={self._hourly_rate}, hours_worked={self._hours_worked})")
