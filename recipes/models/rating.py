"""Model representing a user's 1-5 rating of a recipe."""

from django.conf import settings
from django.db import models
from django.db.models import Q


class Rating(models.Model):
    """One rating per user/recipe pair; re-rating overwrites `value`."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='ratings'
    )

    recipe = models.ForeignKey(
        "recipes.Recipe",
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ratings'
    )

    value = models.PositiveSmallIntegerField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Enforce one rating per user/recipe pair and the 1-5 range."""
        db_table = "rating"
        constraints = [
            models.UniqueConstraint(fields=["user", "recipe"], name="uniq_rating_user_recipe"),
            models.CheckConstraint(
                condition=Q(value__gte=1) & Q(value__lte=5),
                name="chk_rating_value_range",
            ),
        ]
        indexes = [
            models.Index(fields=["recipe"], name="rating_recipe_idx"),
        ]

    def __str__(self):
        """Readable representation for debugging."""
        return f"{self.user_id} → {self.recipe_id}: {self.value}"
