"""Service helpers for assembling a user's public profile summary."""

from recipes.repos.recipe_repo import RecipeRepo
from recipes.repos.user_repo import UserRepo
from recipes.services.favourites import FavouriteService
from recipes.services.follow_read import FollowReadService
from recipes.services.recipe_query import clamp_limit


class ProfileService:
    """Combine a user row with the counts derived from their edges."""

    def __init__(self, user_repo=None, recipe_repo=None, follow_read=None, favourite_service=None):
        self.user_repo = user_repo or UserRepo()
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.follow_read = follow_read or FollowReadService()
        self.favourite_service = favourite_service or FavouriteService()

    def summary(self, user_id, viewer=None):
        """Return the user with derived counters attached; NotFound if missing."""
        user = self.user_repo.get_by_id(user_id)
        user.followers_count = self.follow_read.followers_count(user.pk)
        user.following_count = self.follow_read.following_count(user.pk)
        user.recipes_count = self.recipe_repo.count_visible_for_author(user.pk)
        user.favorite_recipes_count = self.favourite_service.favorite_recipes_count(user.pk)
        user.total_recipe_views = self.recipe_repo.total_views_for_author(user.pk)
        user.is_following = self.follow_read.is_following(viewer, user.pk)
        return user

    def search(self, query, limit=None, offset=0):
        """Users whose username, first or last name contains ``query``."""
        return self.user_repo.search(query or "", limit=clamp_limit(limit), offset=max(0, offset))
