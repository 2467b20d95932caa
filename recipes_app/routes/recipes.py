"""Recipe CRUD endpoints backed by the in-memory store."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from typing import List

from ..database.session import get_store
from ..database.store import RecipeStore
from ..schemas.schemas import RecipeCreate, RecipeUpdate, RecipeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[RecipeResponse])
@router.get("/", response_model=List[RecipeResponse], include_in_schema=False)
def list_recipes(store: RecipeStore = Depends(get_store)):
    """Return every recipe in insertion order."""
    return store.list()


@router.post("", response_model=RecipeResponse, status_code=201)
@router.post("/", response_model=RecipeResponse, status_code=201, include_in_schema=False)
def create_recipe(recipe: RecipeCreate, store: RecipeStore = Depends(get_store)):
    """Create a recipe; the id is generated by the server."""
    return store.create(recipe.name, recipe.ingredients)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)):
    recipe = store.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(recipe_id: str, recipe: RecipeUpdate, store: RecipeStore = Depends(get_store)):
    """Replace a recipe's name and ingredients.

    The body may repeat the id; if it does it has to match the one in the path.
    """
    if recipe.id is not None and recipe.id != recipe_id:
        message = f"Request path id ({recipe_id}) and request body id ({recipe.id}) must match"
        logger.warning(message)
        raise HTTPException(status_code=400, detail=message)

    updated = store.update(recipe_id, recipe.name, recipe.ingredients)
    if updated is None:
        logger.warning("Update of unknown recipe %s", recipe_id)
        raise HTTPException(status_code=404, detail="Recipe not found")
    return updated


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_store)):
    if not store.delete(recipe_id):
        logger.warning("Delete of unknown recipe %s", recipe_id)
        raise HTTPException(status_code=404, detail="Recipe not found")
    return Response(status_code=204)
