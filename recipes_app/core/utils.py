"""Utility helpers for the Recipes application."""
import uuid


def new_recipe_id() -> str:
    """Return a fresh random identifier for a recipe."""
    return str(uuid.uuid4())
