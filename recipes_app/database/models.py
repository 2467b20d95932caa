"""Record types held by the in-memory recipe store."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Recipe:
    """A single recipe: server-assigned id, a name and an ordered ingredient list."""
    id: str
    name: str
    ingredients: List[str] = field(default_factory=list)

    def copy(self) -> "Recipe":
        return Recipe(id=self.id, name=self.name, ingredients=list(self.ingredients))
