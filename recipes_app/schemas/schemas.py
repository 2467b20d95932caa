"""Pydantic schemas for request/response models."""
from pydantic import BaseModel, ConfigDict
from typing import Optional, List

class RecipeBase(BaseModel):
    name: str
    ingredients: List[str]

class RecipeCreate(RecipeBase):
    # Any client-supplied id is dropped; the store always assigns one
    model_config = ConfigDict(extra="ignore")

class RecipeUpdate(RecipeBase):
    # Optional in the body; when given it must match the path id
    id: Optional[str] = None

class RecipeResponse(RecipeBase):
    id: str

    model_config = ConfigDict(from_attributes=True)
