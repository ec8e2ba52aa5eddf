from .user import User
from .recipe import Recipe
from .rating import Rating
from .favourite import Favourite
from .followers import Follower
from .recipe_view import RecipeView

__all__ = [
    "User",
    "Recipe",
    "Rating",
    "Favourite",
    "Follower",
    "RecipeView",
]
