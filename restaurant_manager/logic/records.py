# logic/records.py
"""
Front-end facing record operations.

Every mutation goes to the Restaurant aggregate first. When a Repo is
attached, accepted changes are written through and the aggregate is
reloaded from the store so it carries the store-assigned ids.
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Optional, Tuple

from restaurant_manager.data.repo import Repo
from restaurant_manager.models.restaurant import Restaurant
from restaurant_manager.models.result import Result, ResultKind

logger = logging.getLogger(__name__)

_APPLIED = (ResultKind.OK, ResultKind.PARTIAL)


def reload_from_store(restaurant: Restaurant, repo: Repo) -> Tuple[int, int]:
    """Replace the in-memory roster and menu with the stored ones."""
    employees = repo.get_employees()
    dishes = repo.get_dishes()
    restaurant.clear_all()
    for e in employees:
        restaurant.load_employee(e)
    for d in dishes:
        restaurant.load_dish(d)
    logger.info("reloaded %d employees, %d dishes from %s",
                len(employees), len(dishes), repo.db_path)
    return len(employees), len(dishes)


class RecordService:
    def __init__(self, restaurant: Restaurant, repo: Optional[Repo] = None):
        self.restaurant = restaurant
        self.repo = None
        if repo is not None:
            self.attach(repo)

    # ---------- storage ----------
    @property
    def persistent(self) -> bool:
        return self.repo is not None

    def attach(self, repo: Repo) -> Tuple[int, int]:
        """
        Switch to store-backed mode. Records that only exist in memory are
        saved first (unless the store already has that name), then the
        aggregate is reloaded.
        """
        stored_emp = {e.name.casefold() for e in repo.get_employees()}
        for e in self.restaurant.employees:
            if not e.id and e.name.casefold() not in stored_emp:
                repo.add_employee(e.name, e.hourly_rate, e.hours_worked)
        stored_dish = {d.name.casefold() for d in repo.get_dishes()}
        for d in self.restaurant.dishes:
            if not d.id and d.name.casefold() not in stored_dish:
                repo.add_dish(d.name, d.price)
        self.repo = repo
        return self.reload()

    def detach(self) -> Optional[Repo]:
        """Back to in-memory mode. The caller still owns (and closes) the repo."""
        repo, self.repo = self.repo, None
        return repo

    def reload(self) -> Tuple[int, int]:
        if self.repo is None:
            return len(self.restaurant.employees), len(self.restaurant.dishes)
        return reload_from_store(self.restaurant, self.repo)

    def _write_through(self, write) -> Optional[Result]:
        """
        Run ``write`` against the store, then resync the aggregate. A failed
        write still resyncs, so an in-memory change the store never got is
        dropped again; the failure comes back as a STORAGE result.
        """
        try:
            write(self.repo)
        except sqlite3.Error as e:
            logger.error("store write failed on %s: %s", self.repo.db_path, e)
            self.reload()
            return Result.storage_error(f"Storage error: {e}")
        self.reload()
        return None

    # ---------- employees ----------
    def add_employee(self, name, hourly_rate, hours_worked) -> Result:
        result = self.restaurant.add_employee(name, hourly_rate, hours_worked)
        if result and self.repo is not None:
            emp = result.value
            failed = self._write_through(
                lambda repo: repo.add_employee(emp.name, emp.hourly_rate, emp.hours_worked))
            if failed is not None:
                return failed
            result = Result.success(result.message, value=self.restaurant.find_employee(emp.name))
        return result

    def remove_employee(self, name) -> Result:
        result = self.restaurant.remove_employee(name)
        if result and self.repo is not None and result.value.id:
            emp_id = result.value.id
            failed = self._write_through(lambda repo: repo.remove_employee(emp_id))
            return result if failed is None else failed
        return result

    def update_employee(self, name, new_rate, new_hours) -> Result:
        result = self.restaurant.update_employee(name, new_rate, new_hours)
        if result.kind in _APPLIED and self.repo is not None:
            emp = self.restaurant.find_employee(name)
            if emp.id:
                def write(repo):
                    repo.update_employee_field(emp.id, "hourly_rate", emp.hourly_rate)
                    repo.update_employee_field(emp.id, "hours_worked", emp.hours_worked)
                failed = self._write_through(write)
                return result if failed is None else failed
        return result

    # ---------- dishes ----------
    def add_dish(self, name, price) -> Result:
        result = self.restaurant.add_dish(name, price)
        if result and self.repo is not None:
            dish = result.value
            failed = self._write_through(lambda repo: repo.add_dish(dish.name, dish.price))
            if failed is not None:
                return failed
            result = Result.success(result.message, value=self.restaurant.find_dish(dish.name))
        return result

    def remove_dish(self, name) -> Result:
        result = self.restaurant.remove_dish(name)
        if result and self.repo is not None and result.value.id:
            dish_id = result.value.id
            failed = self._write_through(lambda repo: repo.remove_dish(dish_id))
            return result if failed is None else failed
        return result

    def update_dish(self, name, new_price) -> Result:
        result = self.restaurant.update_dish(name, new_price)
        if result and self.repo is not None:
            dish = result.value
            if dish.id:
                failed = self._write_through(
                    lambda repo: repo.update_dish_field(dish.id, "price", dish.price))
                return result if failed is None else failed
        return result

    # ---------- flag ----------
    def toggle_open_late(self) -> bool:
        return self.restaurant.toggle_open_late()

    def set_open_late(self, open_late: bool) -> None:
        self.restaurant.set_open_late(open_late)
