"""In-memory, insertion-ordered store for recipe records.

The store owns the collection for the lifetime of the process. One instance is
created per application and reached from request handlers through
`recipes_app.database.session.get_store`.
"""
import logging
import threading
from typing import Iterable, List, Optional

from .models import Recipe
from ..core.utils import new_recipe_id

logger = logging.getLogger(__name__)


class RecipeStore:
    """Ordered collection of recipes guarded by a single lock.

    Every method hands back copies so callers cannot mutate stored records.
    """

    def __init__(self):
        self._recipes: List[Recipe] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def __contains__(self, recipe_id) -> bool:
        with self._lock:
            return self._find(recipe_id) is not None

    def _find(self, recipe_id: str) -> Optional[int]:
        # caller must hold the lock
        for idx, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return idx
        return None

    def list(self) -> List[Recipe]:
        """Return all recipes in insertion order."""
        with self._lock:
            return [r.copy() for r in self._recipes]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            idx = self._find(recipe_id)
            return None if idx is None else self._recipes[idx].copy()

    def create(self, name: str, ingredients: Iterable[str]) -> Recipe:
        """Append a new recipe with a freshly generated id and return it."""
        with self._lock:
            recipe_id = new_recipe_id()
            # uuid4 collisions are practically impossible, but the id must stay unique
            while self._find(recipe_id) is not None:
                recipe_id = new_recipe_id()
            recipe = Recipe(id=recipe_id, name=name, ingredients=list(ingredients))
            self._recipes.append(recipe)
        logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
        return recipe.copy()

    def update(self, recipe_id: str, name: str, ingredients: Iterable[str]) -> Optional[Recipe]:
        """Replace name and ingredients of an existing recipe in place.

        Returns None when no recipe has that id; the id itself never changes.
        """
        with self._lock:
            idx = self._find(recipe_id)
            if idx is None:
                return None
            recipe = self._recipes[idx]
            recipe.name = name
            recipe.ingredients = list(ingredients)
            updated = recipe.copy()
        logger.info("Updated recipe %s", recipe_id)
        return updated

    def delete(self, recipe_id: str) -> bool:
        with self._lock:
            idx = self._find(recipe_id)
            if idx is None:
                return False
            del self._recipes[idx]
        logger.info("Deleted recipe %s", recipe_id)
        return True

    def clear(self) -> None:
        with self._lock:
            self._recipes.clear()
