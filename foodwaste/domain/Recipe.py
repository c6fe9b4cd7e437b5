"""Recipe domain entity: name, description, procedure, ingredient requirements, servings."""
import math
from numbers import Real
from typing import Dict, Mapping, Optional

from foodwaste.utilities.constants import QUANTITY_TOLERANCE, SMOOTHIE_KEYWORDS
from foodwaste.utilities.naming import normalize_name


class Recipe:
    def __init__(self, name: str, description: str = "", procedure: str = "",
                 ingredients: Optional[Mapping[str, float]] = None, serves: int = 1):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Recipe name cannot be null or empty")
        if not isinstance(description, str) or not isinstance(procedure, str):
            raise ValueError("Description and procedure must be text")
        if isinstance(serves, bool) or not isinstance(serves, int) or serves < 1:
            raise ValueError(f"Recipe must serve at least one person, got {serves!r}")

        self._ingredients: Dict[str, float] = {}
        seen = set()
        for ingredient, quantity in dict(ingredients or {}).items():
            if not isinstance(ingredient, str) or not ingredient.strip():
                raise ValueError("Ingredient name cannot be null or empty")
            if isinstance(quantity, bool) or not isinstance(quantity, Real) \
                    or not math.isfinite(quantity) or quantity < 0:
                raise ValueError(f"Required quantity for '{ingredient}' must be a non-negative number")
            key = normalize_name(ingredient)
            if key in seen:
                raise ValueError(f"Ingredient '{ingredient}' is listed more than once")
            seen.add(key)
            self._ingredients[ingredient] = quantity

        self._name = name.strip()
        self._description = description
        self.procedure = procedure
        self._serves = serves

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def serves(self) -> int:
        return self._serves

    @property
    def ingredients(self) -> Dict[str, float]:
        return dict(self._ingredients)

    def requirements(self) -> Dict[str, float]:
        """Required quantities keyed by normalized ingredient name."""
        return {normalize_name(k): v for k, v in self._ingredients.items()}

    def check_ingredients(self, availability: Mapping[str, float]) -> bool:
        """Return True if every requirement is covered by the availability map.

        ``availability`` is keyed by normalized name; missing keys count as zero.
        """
        return all(availability.get(name, 0) + QUANTITY_TOLERANCE >= required
                   for name, required in self.requirements().items())

    def is_smoothie(self) -> bool:
        lowered = self._name.lower()
        return any(word in lowered for word in SMOOTHIE_KEYWORDS)

    def __str__(self) -> str:
        return f"{self._name}: {self._description} , ingredients: {self._ingredients} , serves: {self._serves}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            name=d.get("name"),
            description=d.get("description", ""),
            procedure=d.get("procedure", ""),
            ingredients=d.get("ingredients", {}),
            serves=d.get("serves", 1),
        )

    def to_dict(self):
        return {
            "name": self._name,
            "description": self._description,
            "procedure": self.procedure,
            "ingredients": dict(self._ingredients),
            "serves": self._serves,
        }
