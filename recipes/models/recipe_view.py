"""Ledger of recipe views used to deduplicate the view counter."""

from django.conf import settings
from django.db import models
from django.db.models import Q

from recipes.utils.uuid import uuid7_or_4


class RecipeView(models.Model):
    """
    One row per distinct (recipe, viewer, address).

    Anonymous views have no viewer and are told apart by address only. SQL
    unique constraints treat NULLs as distinct, so the triple is guarded by
    two partial constraints: one for signed-in viewers and one for anonymous.
    Rows are never updated or deleted.
    """
    id = models.UUIDField(primary_key=True, default=uuid7_or_4, editable=False)

    recipe = models.ForeignKey(
        "recipes.Recipe",
        on_delete=models.CASCADE,
        related_name="views",
        db_column="recipe_id",
    )
    viewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipe_views",
        db_column="viewer_id",
        null=True,
        blank=True,
    )
    ip_address = models.CharField(max_length=64)
    user_agent = models.TextField(blank=True, default="")
    viewed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Dedup constraints and lookup indexes."""
        db_table = "recipe_view"
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "viewer", "ip_address"],
                condition=Q(viewer__isnull=False),
                name="uniq_recipe_view_viewer",
            ),
            models.UniqueConstraint(
                fields=["recipe", "ip_address"],
                condition=Q(viewer__isnull=True),
                name="uniq_recipe_view_anonymous",
            ),
        ]
        indexes = [
            models.Index(fields=["recipe"], name="recipe_view_recipe_idx"),
            models.Index(fields=["viewer"], name="recipe_view_viewer_idx"),
            models.Index(fields=["viewed_at"], name="recipe_view_viewed_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for debugging."""
        return f"RecipeView(recipe={self.recipe_id}, viewer={self.viewer_id}, ip={self.ip_address})"
