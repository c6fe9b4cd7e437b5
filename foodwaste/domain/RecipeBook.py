"""RecipeBook aggregate: ordered collection of recipes."""
import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.logic.matching.feasibility import get_possible_recipes
from foodwaste.utilities.naming import normalize_name

logger = logging.getLogger(__name__)


class RecipeBook:
    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._recipes: List[Recipe] = []
        for recipe in recipes or []:
            self.add_recipe(recipe)

    def add_recipe(self, recipe: Recipe):
        '''
        Appends a recipe. Duplicate names are allowed.
        '''
        if not isinstance(recipe, Recipe):
            raise ValueError(f"Expected a Recipe, got {type(recipe).__name__}")
        self._recipes.append(recipe)
        logger.debug("Added recipe %s", recipe.name)

    def remove_recipe(self, name: str) -> bool:
        '''
        Removes the first recipe whose name matches, ignoring case.
        '''
        if name is None:
            raise ValueError("The recipe name cannot be null")
        key = normalize_name(name)
        for i, recipe in enumerate(self._recipes):
            if normalize_name(recipe.name) == key:
                del self._recipes[i]
                logger.debug("Removed recipe %s", recipe.name)
                return True
        return False

    def find_recipe(self, name: str) -> Optional[Recipe]:
        if name is None:
            raise ValueError("The recipe name cannot be null")
        key = normalize_name(name)
        return next((r for r in self._recipes if normalize_name(r.name) == key), None)

    def get_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def get_smoothie_recipes(self) -> List[Recipe]:
        return [r for r in self._recipes if r.is_smoothie()]

    def get_possible_recipes(self, groceries: Iterable[Grocery], include_expired: bool,
                             today: Optional[date] = None) -> List[Recipe]:
        return get_possible_recipes(groceries, include_expired, self._recipes, today)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))

    def __str__(self) -> str:
        recipes_str = ",\n\t".join(str(r) for r in self._recipes)
        return f"Recipes:\n\t{recipes_str}"
