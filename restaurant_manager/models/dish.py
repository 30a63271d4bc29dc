# models/dish.py
from __future__ import annotations

from typing import Any, Dict

from restaurant_manager.exceptions import ValidationError
from restaurant_manager.models.fields import check_id, clean_name, is_amount
from restaurant_manager.models.result import Result

PRICE_ERROR = "Price cannot be negative"


class Dish:
    """A menu item. Only the price can change after construction."""

    def __init__(self, name: str, price: float, id: int = 0):
        self._id = check_id(id, "Dish")
        self._name = clean_name(name, "Dish")
        if not is_amount(price):
            raise ValidationError(PRICE_ERROR)
        self._price = float(price)

    @classmethod
    def create(cls, name, price, id: int = 0) -> Result:
        try:
            dish = cls(name, price, id=id)
        except ValidationError as e:
            return Result.invalid(str(e))
        return Result.success(value=dish)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    def set_price(self, price: float) -> Result:
        if not is_amount(price):
            return Result.invalid(PRICE_ERROR)
        self._price = float(price)
        return Result.success()

    def display_string(self) -> str:
        return f"[{self._id}] {self._name:<20} | ${self._price:<6.2f}"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self._id, "name": self._name, "price": self._price}

    @staticmethod
    def from_dict(data) -> "Dish":
        return Dish(data["name"], data["price"], id=data.get("id") or 0)

    def __repr__(self) -> str:
        return f"Dish(id={self._id}, name={self._name!r}, price={self._price})"
