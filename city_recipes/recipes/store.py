from __future__ import annotations

from .models import Recipe


class RecipeStore:
    """Recipes per city, held in process memory.

    Ids come from a single counter shared by every city. None of the
    methods await, so each call runs to completion on the event loop
    without interleaving with other requests.
    """

    def __init__(self, first_id: int = 1) -> None:
        self._recipes_by_city: dict[str, list[Recipe]] = {}
        self._next_id = first_id

    def list_recipes(self, city_id: str) -> list[Recipe]:
        """Return a copy of the city's recipes in creation order."""
        return list(self._recipes_by_city.get(city_id, []))

    def has_collection(self, city_id: str) -> bool:
        """True once the city has received a recipe, even if all were deleted."""
        return city_id in self._recipes_by_city

    def add(self, city_id: str, content: str) -> Recipe:
        recipe = Recipe(id=self._next_id, content=content)
        self._next_id += 1
        self._recipes_by_city.setdefault(city_id, []).append(recipe)
        return recipe

    def remove(self, city_id: str, recipe_id: int) -> bool:
        """Remove one recipe. Returns False when the city has no such id."""
        recipes = self._recipes_by_city.get(city_id)
        if recipes is None:
            return False
        for index, recipe in enumerate(recipes):
            if recipe.id == recipe_id:
                del recipes[index]
                return True
        return False
