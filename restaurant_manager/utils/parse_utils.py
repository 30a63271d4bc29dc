# utils/parse_utils.py
from __future__ import annotations

import math
from typing import NamedTuple, Union


class EmployeeRecord(NamedTuple):
    name: str
    hourly_rate: float
    hours_worked: float


class DishRecord(NamedTuple):
    name: str
    price: float


def parse_number(text: str) -> float:
    """
    '12.5' -> 12.5, ' 40 ' -> 40.0
    'abc', '', 'nan', 'inf' -> ValueError
    """
    value = float(str(text).strip())
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def parse_record_line(line: str) -> Union[EmployeeRecord, DishRecord]:
    """
    'Jane Doe, 12.5, 40' -> EmployeeRecord
    'Soup, 5.00'         -> DishRecord
    any other field count or a bad number -> ValueError
    """
    parts = [p.strip() for p in line.strip().split(",")]
    if len(parts) == 3:
        return EmployeeRecord(parts[0], parse_number(parts[1]), parse_number(parts[2]))
    if len(parts) == 2:
        return DishRecord(parts[0], parse_number(parts[1]))
    raise ValueError(f"Invalid format: {line.strip()}")
