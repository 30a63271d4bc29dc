# logic/payroll.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class PayrollLine:
    name: str
    hours: float
    rate: float

    @property
    def pay(self) -> float:
        return self.hours * self.rate


def payroll_report(employees) -> List[PayrollLine]:
    """One line per employee, in roster order."""
    return [PayrollLine(e.name, e.hours_worked, e.hourly_rate) for e in employees]


def payroll_from_rows(rows: Iterable[Tuple[str, float, float]]) -> List[PayrollLine]:
    """Same report built from Repo.payroll_rows() tuples (name, hours, rate)."""
    return [PayrollLine(name, hours, rate) for name, hours, rate in rows]


def payroll_total(lines: Iterable[PayrollLine]) -> float:
    return sum((ln.pay for ln in lines), 0.0)


def format_payroll_report(lines: List[PayrollLine]) -> List[str]:
    out = ["Payroll Report:", "----------------------------"]
    for ln in lines:
        out.append(f"{ln.name} | Hours: {ln.hours:.2f} | Rate: ${ln.rate:.2f} | Pay: ${ln.pay:.2f}")
    out.append("----------------------------")
    out.append(f"Total Payroll: ${payroll_total(lines):.2f}")
    return out
