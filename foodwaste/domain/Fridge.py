"""Fridge aggregate: groceries bucketed by normalized name, clubbed on add, depleted FIFO on remove."""
import logging
import math
from datetime import date
from typing import Dict, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.events.Event_Bus import EventBus, FRIDGE_LOW_STOCK, FRIDGE_NEAR_EXPIRY
from foodwaste.logic.inventory.policy import are_groceries_clubbable, total_quantity, total_value
from foodwaste.utilities.constants import DAYS_BEFORE_EXPIRY, LOW_STOCK_THRESHOLD, QUANTITY_TOLERANCE
from foodwaste.utilities.naming import normalize_name

logger = logging.getLogger(__name__)


class Fridge:
    def __init__(self, event_bus=None, days_before_expiry: int = DAYS_BEFORE_EXPIRY):
        # name -> lots in insertion order (oldest first)
        self._groceries_per_name: Dict[str, List[Grocery]] = {}
        self._event_bus = event_bus if event_bus is not None else EventBus()
        self._days_before_expiry = days_before_expiry

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _notify_low_stock(self, name: str, remaining: float, threshold: float):
        self._event_bus.publish(FRIDGE_LOW_STOCK, {
            "name": name,
            "remaining": remaining,
            "threshold": threshold
        })

    def _notify_near_expiry(self, grocery: Grocery, days_left: int):
        self._event_bus.publish(FRIDGE_NEAR_EXPIRY, {
            "grocery": grocery.copy(),
            "days_left": days_left,
            "threshold": self._days_before_expiry
        })

    def _evaluate_name(self, name: str, today: Optional[date] = None):
        lots = self._groceries_per_name.get(name, [])
        if not lots:
            return
        # Low stock is judged on the bucket total per unit
        per_unit: Dict[str, float] = {}
        for lot in lots:
            per_unit[lot.unit] = per_unit.get(lot.unit, 0) + lot.quantity
        for unit, remaining in per_unit.items():
            threshold = LOW_STOCK_THRESHOLD.get(unit, 0)
            if threshold > 0 and remaining <= threshold:
                self._notify_low_stock(name, remaining, threshold)
        today = today or date.today()
        for lot in lots:
            days_left = (lot.expiry_date - today).days
            if days_left <= self._days_before_expiry:
                self._notify_near_expiry(lot, days_left)

    def scan_and_notify(self, today: Optional[date] = None):
        for name in list(self._groceries_per_name):
            self._evaluate_name(name, today)
        return self

    # --- Mutations --------------------------------------------------------
    def add_grocery(self, grocery: Grocery):
        '''
        Adds a grocery lot. A lot clubbable with an existing one (same name, unit,
        price per unit and expiry date) is merged into it by summing quantities;
        otherwise a copy is appended to the bucket for its name.
        '''
        if not isinstance(grocery, Grocery):
            raise ValueError(f"Expected a Grocery, got {type(grocery).__name__}")
        name = normalize_name(grocery.name)
        bucket = self._groceries_per_name.get(name, [])
        for existing in bucket:
            if are_groceries_clubbable(existing, grocery):
                existing.quantity = existing.quantity + grocery.quantity
                logger.debug("Clubbed %s into existing lot, now %s", grocery, existing.quantity)
                break
        else:
            # Depleted lots never enter the fridge
            if grocery.quantity == 0:
                logger.debug("Ignoring empty lot %s", grocery)
                return
            bucket.append(grocery.copy())
            self._groceries_per_name[name] = bucket
            logger.debug("Added new lot %s", grocery)
        self._evaluate_name(name)

    def remove_grocery(self, name: str, quantity: float) -> bool:
        '''
        Removes a quantity of a grocery, oldest lot first.

        Returns False (and changes nothing) when the name is unknown or the fridge
        holds less than the requested quantity in total.
        '''
        if name is None:
            raise ValueError("The name parameter cannot be null")
        if quantity is None or not quantity >= 0:
            raise ValueError(f"Quantity to remove cannot be negative: {quantity}")
        key = normalize_name(name)
        groceries = self._groceries_per_name.get(key)
        if groceries is None:
            logger.info("Cannot remove %s %s: not in fridge", quantity, key)
            return False

        available = total_quantity(groceries)
        if available < quantity and not math.isclose(available, quantity, abs_tol=QUANTITY_TOLERANCE):
            logger.info("Cannot remove %s %s: only %s available", quantity, key, available)
            return False

        remaining = quantity
        while groceries and remaining > QUANTITY_TOLERANCE:
            grocery = groceries[0]
            # A lot within tolerance of the remainder is used up entirely
            if grocery.quantity <= remaining + QUANTITY_TOLERANCE:
                remaining -= grocery.quantity
                groceries.pop(0)
            else:
                grocery.quantity = grocery.quantity - remaining
                remaining = 0

        if not groceries:
            del self._groceries_per_name[key]
        else:
            self._evaluate_name(key)
        logger.debug("Removed %s %s", quantity, key)
        return True

    # --- Queries ----------------------------------------------------------
    def get_all_groceries(self) -> List[Grocery]:
        '''
        Returns copies of every lot, expired ones included, bucket by bucket.
        '''
        return [g.copy() for lots in self._groceries_per_name.values() for g in lots]

    def get_expired_groceries(self, today: Optional[date] = None) -> List[Grocery]:
        return [g for g in self.get_all_groceries() if g.is_expired(today)]

    def get_groceries_sorted_by_name(self) -> List[Grocery]:
        return sorted(self.get_all_groceries(), key=lambda g: g.name)

    def get_groceries_sorted_by_expiry_date(self) -> List[Grocery]:
        return sorted(self.get_all_groceries(), key=lambda g: g.expiry_date)

    def calculate_total_value(self) -> float:
        return total_value(g for lots in self._groceries_per_name.values() for g in lots)

    def calculate_total_value_of_expired(self, today: Optional[date] = None) -> float:
        return total_value(self.get_expired_groceries(today))

    def find_groceries_by_name(self, name: str) -> List[Grocery]:
        '''
        Returns copies of the lots whose name matches, ignoring case.
        '''
        if name is None:
            raise ValueError("The name parameter cannot be null")
        return [g.copy() for g in self._groceries_per_name.get(normalize_name(name), [])]

    def get_total_quantity(self, name: str) -> float:
        if name is None:
            raise ValueError("The name parameter cannot be null")
        return total_quantity(self._groceries_per_name.get(normalize_name(name), []))

    def names(self) -> List[str]:
        return list(self._groceries_per_name)

    def __len__(self) -> int:
        return sum(len(lots) for lots in self._groceries_per_name.values())

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._groceries_per_name

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(g) for g in self.get_all_groceries())
        return f"Groceries:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()
