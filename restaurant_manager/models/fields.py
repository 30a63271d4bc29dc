# models/fields.py
"""Field checks shared by Employee and Dish."""
from __future__ import annotations

import math
import re

from restaurant_manager.exceptions import ValidationError

MAX_WEEKLY_HOURS = 168   # 24 * 7
_PERSON_NAME = re.compile(r"[A-Za-z ]+")


def is_amount(value) -> bool:
    """Finite real number >= 0. bool is not accepted as a number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def is_hours(value) -> bool:
    return is_amount(value) and value <= MAX_WEEKLY_HOURS


def check_id(value, label: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} ID must be an integer")
    if value < 0:
        raise ValidationError(f"{label} ID cannot be negative")
    return value


def clean_name(value, label: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} name cannot be null or empty")
    return str(value).strip()


def clean_person_name(value, label: str) -> str:
    name = clean_name(value, label)
    if not _PERSON_NAME.fullmatch(name):
        raise ValidationError(f"{label} name must contain only letters and spaces.")
    return name
