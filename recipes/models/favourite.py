from django.conf import settings
from django.db import models

"""
Favourite model

One row per (user, recipe) the user has favourited.

Key points:
- The pair is unique, so a second favourite of the same recipe by the same
  user fails at the database level instead of double-counting.
- `Recipe.favorite_count` mirrors the number of rows for a recipe; the row
  and the counter are always changed in the same transaction by
  FavouriteService.
- `created_at` orders a user's favourites newest first.
"""


class Favourite(models.Model):
    """A recipe saved to a user's favourites."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favourites",
        db_column="user_id",
    )

    recipe = models.ForeignKey(
        "recipes.Recipe",
        on_delete=models.CASCADE,
        related_name="favourites",
        db_column="recipe_id",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favourite"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "recipe"],
                name="uniq_favourite_user_recipe",
            ),
        ]
        indexes = [
            models.Index(fields=["user"], name="favourite_user_idx"),
            models.Index(fields=["recipe"], name="favourite_recipe_idx"),
        ]

    def __str__(self) -> str:
        return f"Favourite(user={self.user_id}, recipe={self.recipe_id})"
