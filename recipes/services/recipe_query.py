"""Read side of recipes: filtered, sorted, paged listings plus per-viewer decoration."""

from recipes.conf import recipix_setting
from recipes.errors import NotFound
from recipes.models import Recipe
from recipes.pagination import build_connection, window
from recipes.repos.recipe_repo import DEFAULT_SORT, RecipeRepo
from recipes.repos.user_repo import UserRepo
from recipes.services.favourites import FavouriteService
from recipes.services.ratings import RatingService


def clamp_limit(limit):
    """Fall back to the default list size and never exceed the maximum."""
    if limit is None:
        return recipix_setting("DEFAULT_LIST_LIMIT")
    return max(0, min(int(limit), recipix_setting("MAX_LIST_LIMIT")))


class RecipeQueryService:
    """
    Query facade over visible recipes.

    The repository hands back plain rows. `decorate` then adds what depends on
    who is asking (`is_favorited`, `user_rating`) in two batched queries, so a
    page costs the same number of round trips whatever its size.
    """

    def __init__(self, recipe_repo=None, favourite_service=None, rating_service=None, user_repo=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.user_repo = user_repo or UserRepo()
        self.favourite_service = favourite_service or FavouriteService()
        self.rating_service = rating_service or RatingService()

    def list_recipes(self, recipe_filter=None, sort=None, first=None, after=None, viewer=None):
        """Return one page of visible recipes as a connection envelope."""
        page_window = window(first=first, after=after)
        rows, total = self.recipe_repo.list_page(
            recipe_filter=recipe_filter,
            sort=sort or DEFAULT_SORT,
            limit=page_window.limit,
            offset=page_window.offset,
        )
        self.decorate(rows, viewer)
        return build_connection(rows, page_window.offset, total)

    def search_recipes(self, query, limit=None, offset=0, viewer=None):
        rows = self.recipe_repo.search(query or "", limit=clamp_limit(limit), offset=max(0, offset))
        return self.decorate(rows, viewer)

    def popular(self, limit=None, viewer=None):
        return self.decorate(self.recipe_repo.popular(limit=clamp_limit(limit)), viewer)

    def recent(self, limit=None, viewer=None):
        return self.decorate(self.recipe_repo.recent(limit=clamp_limit(limit)), viewer)

    def get_recipe(self, recipe_id, viewer=None):
        try:
            recipe = self.recipe_repo.get_visible(recipe_id)
        except Recipe.DoesNotExist:
            raise NotFound("Recipe not found.")
        self.decorate([recipe], viewer)
        return recipe

    def favorite_recipes(self, user_id, viewer=None):
        """Visible recipes favourited by user_id, decorated for the viewer."""
        self.user_repo.ensure_exists(user_id)
        return self.decorate(self.favourite_service.favorite_recipes(user_id), viewer)

    def decorate(self, recipes, viewer):
        """Attach `is_favorited` and `user_rating` for viewer to each recipe."""
        ids = [recipe.pk for recipe in recipes]
        favourited = self.favourite_service.favorited_ids(viewer, ids)
        ratings = self.rating_service.ratings_for(viewer, ids)
        for recipe in recipes:
            recipe.is_favorited = recipe.pk in favourited
            recipe.user_rating = ratings.get(recipe.pk)
        return recipes
