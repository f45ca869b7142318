"""API routers for the recipeparse application."""

from recipeparse.routers.ingredients import router as ingredients_router

__all__ = [
    "ingredients_router",
]
