# data/repo.py
import logging
import sqlite3
from pathlib import Path
from typing import List, Tuple

from restaurant_manager.exceptions import ValidationError
from restaurant_manager.models.dish import PRICE_ERROR, Dish
from restaurant_manager.models.employee import HOURS_ERROR, RATE_ERROR, Employee
from restaurant_manager.models.fields import clean_name, clean_person_name, is_amount, is_hours

logger = logging.getLogger(__name__)


def _number(check, message):
    def convert(value) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(message) from None
        if not check(number):
            raise ValidationError(message)
        return number
    return convert


# column whitelists for single-field updates; each converter validates the
# value the same way the model does and returns what gets stored
EMPLOYEE_FIELDS = {
    "name": lambda v: clean_person_name(v, "Employee"),
    "hourly_rate": _number(is_amount, RATE_ERROR),
    "hours_worked": _number(is_hours, HOURS_ERROR),
}
DISH_FIELDS = {
    "name": lambda v: clean_name(v, "Dish"),
    "price": _number(is_amount, PRICE_ERROR),
}


class Repo:
    """
    SQLite store for employees and dishes.

    One instance owns one connection; close it (or use ``with``) when done.
    Ids come from AUTOINCREMENT, never from the caller.
    """

    def __init__(self, db_path: str = "restaurant.sqlite3"):
        if db_path is None or not str(db_path).strip():
            raise ValueError("Database path cannot be empty.")
        self.db_path = str(db_path).strip()
        if self.db_path != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        self._create_tables()
        logger.info("connected to %s", self.db_path)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.info("disconnected from %s", self.db_path)

    def _create_tables(self):
        cur = self.conn.cursor()
        cur.execute("""
        CREATE TABLE IF NOT EXISTS employees(
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            hours_worked REAL NOT NULL,
            hourly_rate REAL NOT NULL
        );
        """)
        cur.execute("""
        CREATE TABLE IF NOT EXISTS dishes(
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price REAL NOT NULL
        );
        """)
        self.conn.commit()

    # --- Employees ---
    def add_employee(self, name: str, hourly_rate: float, hours_worked: float) -> int:
        cur = self.conn.cursor()
        cur.execute("INSERT INTO employees(name, hours_worked, hourly_rate) VALUES(?,?,?)",
                    (name, hours_worked, hourly_rate))
        self.conn.commit()
        logger.debug("employee row %s inserted", cur.lastrowid)
        return cur.lastrowid

    def get_employees(self) -> List[Employee]:
        cur = self.conn.cursor()
        cur.execute("SELECT id, name, hourly_rate, hours_worked FROM employees ORDER BY id;")
        out = []
        for r in cur.fetchall():
            try:
                out.append(Employee.from_dict(dict(r)))
            except ValidationError as e:
                # row edited outside the app
                logger.warning("skipping employee row %s: %s", r["id"], e)
        return out

    def remove_employee(self, emp_id: int) -> bool:
        return self._delete("employees", emp_id)

    def update_employee_field(self, emp_id: int, field: str, value) -> bool:
        return self._update("employees", EMPLOYEE_FIELDS, emp_id, field, value)

    def payroll_rows(self) -> List[Tuple[str, float, float]]:
        """(name, hours_worked, hourly_rate) per stored employee."""
        cur = self.conn.cursor()
        cur.execute("SELECT name, hours_worked, hourly_rate FROM employees ORDER BY id;")
        return [(r["name"], r["hours_worked"], r["hourly_rate"]) for r in cur.fetchall()]

    # --- Dishes ---
    def add_dish(self, name: str, price: float) -> int:
        cur = self.conn.cursor()
        cur.execute("INSERT INTO dishes(name, price) VALUES(?,?)", (name, price))
        self.conn.commit()
        logger.debug("dish row %s inserted", cur.lastrowid)
        return cur.lastrowid

    def get_dishes(self) -> List[Dish]:
        cur = self.conn.cursor()
        cur.execute("SELECT id, name, price FROM dishes ORDER BY id;")
        out = []
        for r in cur.fetchall():
            try:
                out.append(Dish.from_dict(dict(r)))
            except ValidationError as e:
                logger.warning("skipping dish row %s: %s", r["id"], e)
        return out

    def remove_dish(self, dish_id: int) -> bool:
        return self._delete("dishes", dish_id)

    def update_dish_field(self, dish_id: int, field: str, value) -> bool:
        return self._update("dishes", DISH_FIELDS, dish_id, field, value)

    # --- helpers ---
    def _delete(self, table: str, row_id: int) -> bool:
        cur = self.conn.cursor()
        cur.execute(f"DELETE FROM {table} WHERE id=?", (row_id,))
        self.conn.commit()
        if not cur.rowcount:
            logger.warning("no %s row with id %s", table, row_id)
        return cur.rowcount > 0

    def _update(self, table: str, allowed: dict, row_id: int, field: str, value) -> bool:
        """Raises ValueError for an unknown field, ValidationError for a bad value."""
        if field not in allowed:
            raise ValueError(f"Invalid field: {field}")
        stored = allowed[field](value)
        # field name is whitelisted; only the value is bound
        cur = self.conn.cursor()
        cur.execute(f"UPDATE {table} SET {field}=? WHERE id=?", (stored, row_id))
        self.conn.commit()
        if not cur.rowcount:
            logger.warning("no %s row with id %s", table, row_id)
        return cur.rowcount > 0
