"""Grocery domain entity: one lot of a named item with unit, price per unit and expiry date."""
import math
from datetime import date, datetime
from numbers import Real
from typing import Optional

from foodwaste.utilities.constants import CURRENCY, DATE_FORMAT
from foodwaste.utilities.naming import normalize_name


def _check_amount(value, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{label} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number, got {value!r}")
    if value < 0:
        raise ValueError(f"{label} cannot be negative: {value}")
    return value


class Grocery:
    def __init__(self, name: str, quantity: float, unit: str,
                 price_per_unit: float, expiry_date: date):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Name cannot be null or empty")
        if not isinstance(unit, str) or not unit.strip():
            raise ValueError("Unit cannot be null or empty")
        if expiry_date is None:
            raise ValueError("Expiry date cannot be null")
        if isinstance(expiry_date, datetime):
            expiry_date = expiry_date.date()
        if not isinstance(expiry_date, date):
            raise ValueError(f"Expiry date must be a date, got {expiry_date!r}")

        self._name = normalize_name(name)
        self._quantity = _check_amount(quantity, "Quantity")
        self._unit = unit.strip()
        self._price_per_unit = _check_amount(price_per_unit, "Price per unit")
        self._expiry_date = expiry_date

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def price_per_unit(self) -> float:
        return self._price_per_unit

    @property
    def expiry_date(self) -> date:
        return self._expiry_date

    @property
    def quantity(self) -> float:
        return self._quantity

    @quantity.setter
    def quantity(self, value: float):
        '''Sets the quantity of this lot; the only mutable field.'''
        self._quantity = _check_amount(value, "Quantity")

    def is_expired(self, today: Optional[date] = None) -> bool:
        '''A lot is expired when its expiry date is strictly before today.'''
        return self._expiry_date < (today or date.today())

    def value(self) -> float:
        return self._quantity * self._price_per_unit

    def copy(self) -> "Grocery":
        return Grocery(self._name, self._quantity, self._unit,
                       self._price_per_unit, self._expiry_date)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grocery):
            return NotImplemented
        return (self._name, self._quantity, self._unit, self._price_per_unit, self._expiry_date) == \
            (other._name, other._quantity, other._unit, other._price_per_unit, other._expiry_date)

    __hash__ = None

    def __str__(self) -> str:
        return (f"{self._name}: {self._quantity:.2f} {self._unit}, "
                f"{CURRENCY} {self._price_per_unit:.2f}/unit, "
                f"Expiry: {self._expiry_date.strftime(DATE_FORMAT)}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Grocery from a dictionary. Expiry dates may be DD-MM-YYYY strings.'''
        d = dict(data)
        exp = d.get("expiry_date")
        if isinstance(exp, str):
            try:
                d["expiry_date"] = datetime.strptime(exp, DATE_FORMAT).date()
            except ValueError:
                raise ValueError(f"Invalid expiry date '{exp}', expected {DATE_FORMAT}")
        return Grocery(
            name=d.get("name"),
            quantity=d.get("quantity", 0),
            unit=d.get("unit"),
            price_per_unit=d.get("price_per_unit", 0),
            expiry_date=d.get("expiry_date"),
        )

    def to_dict(self):
        '''Converts the Grocery to a JSON-friendly dictionary.'''
        return {
            "name": self._name,
            "quantity": self._quantity,
            "unit": self._unit,
            "price_per_unit": self._price_per_unit,
            "expiry_date": self._expiry_date.strftime(DATE_FORMAT),
        }
