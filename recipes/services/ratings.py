"""Rating aggregation: one rating per user and recipe, averages recomputed in full."""

import logging

from django.db import connection, transaction
from django.db.models import Avg, Count

from recipes.errors import OutOfRange
from recipes.models import Rating, Recipe
from recipes.permissions import is_signed_in, require_authenticated
from recipes.services.locks import lock_recipe
from recipes.utils.deadline import bound_transaction, check_deadline

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating_value(value):
    """Accept integers 1-5 only; bools are rejected even though they are ints."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRange()
    if not MIN_RATING <= value <= MAX_RATING:
        raise OutOfRange()
    return value


class RatingService:
    """
    Owns Rating rows and the recipe's `rating`/`rating_count`.

    After every upsert the aggregate is rebuilt from the full set of rating
    rows, so the stored average never depends on a previous stored value.
    """

    def __init__(self, rating_model=Rating, recipe_model=Recipe):
        self.rating_model = rating_model
        self.recipe_model = recipe_model

    def rate(self, user, recipe_id, value, *, deadline=None):
        """Create or overwrite the user's rating and return the refreshed recipe."""
        require_authenticated(user)
        validate_rating_value(value)

        with transaction.atomic():
            bound_transaction(deadline, connection)
            recipe = lock_recipe(self.recipe_model, recipe_id)
            _, created = self.rating_model.objects.update_or_create(
                user=user,
                recipe=recipe,
                defaults={"value": value},
            )
            count, average = self._aggregate(recipe)
            self.recipe_model.objects.filter(pk=recipe.pk).update(
                rating=average,
                rating_count=count,
            )
            check_deadline(deadline)

        logger.info(
            "%s rating %s on recipe %s by user %s (now %.2f over %d)",
            "new" if created else "updated", value, recipe.pk, user.pk, average, count,
        )
        recipe.refresh_from_db()
        return recipe

    def _aggregate(self, recipe):
        stats = self.rating_model.objects.filter(recipe=recipe).aggregate(
            count=Count("id"),
            average=Avg("value"),
        )
        count = stats["count"] or 0
        average = float(stats["average"]) if count else 0.0
        return count, average

    def rating_for(self, user, recipe_id):
        """The user's own rating of the recipe, or None."""
        if not is_signed_in(user):
            return None
        return (
            self.rating_model.objects.filter(user=user, recipe_id=recipe_id)
            .values_list("value", flat=True)
            .first()
        )

    def ratings_for(self, user, recipe_ids):
        """Map recipe id -> the user's rating, for the recipes the user has rated."""
        if not is_signed_in(user) or not recipe_ids:
            return {}
        rows = self.rating_model.objects.filter(user=user, recipe_id__in=recipe_ids)
        return dict(rows.values_list("recipe_id", "value"))
