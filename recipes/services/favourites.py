"""Service helpers for favourite recipes and the favourite counter."""

import logging

from django.db import IntegrityError, connection, transaction
from django.db.models import F

from recipes.errors import AlreadyFavorited, NotFavorited
from recipes.models import Favourite, Recipe
from recipes.permissions import is_signed_in, require_authenticated
from recipes.services.locks import lock_recipe
from recipes.utils.deadline import bound_transaction, check_deadline

logger = logging.getLogger(__name__)


class FavouriteService:
    """Encapsulate favourite edges and the `favorite_count` they drive."""

    def __init__(self, favourite_model=Favourite, recipe_model=Recipe):
        self.favourite_model = favourite_model
        self.recipe_model = recipe_model

    def favorite(self, user, recipe_id, *, deadline=None):
        """Add the recipe to the user's favourites and bump the counter once."""
        require_authenticated(user)
        with transaction.atomic():
            bound_transaction(deadline, connection)
            recipe = lock_recipe(self.recipe_model, recipe_id)
            try:
                with transaction.atomic():
                    self.favourite_model.objects.create(user=user, recipe=recipe)
            except IntegrityError:
                raise AlreadyFavorited()
            self.recipe_model.objects.filter(pk=recipe.pk).update(
                favorite_count=F("favorite_count") + 1
            )
            check_deadline(deadline)
        logger.info("user %s favorited recipe %s", user.pk, recipe.pk)
        return True

    def unfavorite(self, user, recipe_id, *, deadline=None):
        """Remove the favourite and decrement the counter, never below zero."""
        require_authenticated(user)
        with transaction.atomic():
            bound_transaction(deadline, connection)
            recipe = lock_recipe(self.recipe_model, recipe_id)
            deleted, _ = self.favourite_model.objects.filter(user=user, recipe=recipe).delete()
            if not deleted:
                raise NotFavorited()
            updated = self.recipe_model.objects.filter(pk=recipe.pk, favorite_count__gt=0).update(
                favorite_count=F("favorite_count") - 1
            )
            if not updated:
                logger.warning("favorite_count for recipe %s was already zero", recipe.pk)
            check_deadline(deadline)
        logger.info("user %s unfavorited recipe %s", user.pk, recipe.pk)
        return True

    def is_favorited(self, user, recipe_id):
        """Return True when the user has favourited the recipe."""
        if not is_signed_in(user):
            return False
        return self.favourite_model.objects.filter(user=user, recipe_id=recipe_id).exists()

    def favorited_ids(self, user, recipe_ids):
        """Subset of recipe_ids the user has favourited."""
        if not is_signed_in(user) or not recipe_ids:
            return set()
        return set(
            self.favourite_model.objects.filter(user=user, recipe_id__in=recipe_ids)
            .values_list("recipe_id", flat=True)
        )

    def _visible_items(self, user_id):
        return self.favourite_model.objects.filter(
            user_id=user_id,
            recipe__is_public=True,
            recipe__is_published=True,
        )

    def favorite_recipes(self, user_id):
        """Visible recipes the user has favourited, newest favourite first."""
        items_qs = self._visible_items(user_id).select_related("recipe__author").order_by("-created_at", "-id")
        return [item.recipe for item in items_qs]

    def favorite_recipes_count(self, user_id):
        return self._visible_items(user_id).count()
