"""Store access for request handlers and sample data seeding."""
import logging

from fastapi import Request

from recipes_app.database.store import RecipeStore

logger = logging.getLogger(__name__)

SAMPLE_RECIPES = [
    ("boiled white rice", ["1 cup white rice", "2 cups water", "pinch of salt"]),
    ("milkshake", ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"]),
]


def init_sample_data(store: RecipeStore) -> int:
    """Seed the store with sample recipes if it is empty. Returns the number added."""
    if len(store) > 0:
        return 0
    for name, ingredients in SAMPLE_RECIPES:
        store.create(name, ingredients)
    logger.info("Seeded %d sample recipes", len(SAMPLE_RECIPES))
    return len(SAMPLE_RECIPES)


def get_store(request: Request) -> RecipeStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.store
