"""Service helpers for moving recipes in and out of the published state."""

import logging

from django.db import transaction

from recipes.errors import NotFound
from recipes.models import Recipe
from recipes.permissions import require_recipe_manager

logger = logging.getLogger(__name__)


class RecipePublishingService:
    """Publish and unpublish recipes on behalf of their author or an admin."""

    def __init__(self, recipe_model=Recipe):
        self.recipe_model = recipe_model

    def _set_published(self, user, recipe_id, published):
        with transaction.atomic():
            try:
                recipe = (
                    self.recipe_model.objects.select_for_update()
                    .select_related("author")
                    .get(pk=recipe_id)
                )
            except self.recipe_model.DoesNotExist:
                raise NotFound("Recipe not found.")
            require_recipe_manager(user, recipe)
            if recipe.is_published != published:
                recipe.is_published = published
                recipe.save(update_fields=["is_published", "updated_at"])
                logger.info(
                    "recipe %s %s by user %s",
                    recipe.pk, "published" if published else "unpublished", user.pk,
                )
        return recipe

    def publish(self, user, recipe_id):
        """Make the recipe eligible for listings (if it is also public)."""
        return self._set_published(user, recipe_id, True)

    def unpublish(self, user, recipe_id):
        return self._set_published(user, recipe_id, False)
