import uuid
from django.conf import settings
from django.db import models
from django.db.models import Q

"""
Recipe model

The central record of the app. Primitive fields (title, timings, tags, ...)
are written by the author; the four engagement fields are derived and each
has exactly one writer:

- `rating` / `rating_count`: recomputed from Rating rows by RatingService.
- `favorite_count`: incremented/decremented by FavouriteService together
  with the Favourite row it mirrors.
- `view_count`: incremented by ViewTrackingService.

Only recipes with `is_public` and `is_published` both set are visible through
the listing and search endpoints.
"""


class Recipe(models.Model):
    DIFFICULTY_EASY = "easy"
    DIFFICULTY_MEDIUM = "medium"
    DIFFICULTY_HARD = "hard"

    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, "Easy"),
        (DIFFICULTY_MEDIUM, "Medium"),
        (DIFFICULTY_HARD, "Hard"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
        db_column="author_id",
    )

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=1000, blank=True, default="")

    # ingredients: list of {"name", "amount", "unit", "notes"} objects
    ingredients = models.JSONField(default=list, blank=True)
    instructions = models.JSONField(default=list, blank=True)

    # minutes
    prep_time = models.PositiveIntegerField(null=True, blank=True)
    cook_time = models.PositiveIntegerField(null=True, blank=True)
    servings = models.PositiveIntegerField(null=True, blank=True)

    difficulty = models.CharField(
        max_length=10,
        choices=DIFFICULTY_CHOICES,
        default=DIFFICULTY_MEDIUM,
    )
    cuisine = models.CharField(max_length=100, blank=True, null=True)
    tags = models.JSONField(default=list, blank=True)
    image = models.CharField(max_length=500, blank=True, null=True)

    is_public = models.BooleanField(default=True)
    is_published = models.BooleanField(default=False)

    # derived engagement fields
    rating = models.FloatField(default=0)
    rating_count = models.PositiveIntegerField(default=0)
    view_count = models.PositiveIntegerField(default=0)
    favorite_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "recipe"
        constraints = [
            models.CheckConstraint(
                condition=Q(rating__gte=0) & Q(rating__lte=5),
                name="chk_recipe_rating_range",
            ),
        ]
        indexes = [
            models.Index(fields=["title"], name="recipe_title_idx"),
            models.Index(fields=["cuisine"], name="recipe_cuisine_idx"),
            models.Index(fields=["difficulty"], name="recipe_difficulty_idx"),
            models.Index(fields=["is_public", "is_published"], name="recipe_visible_idx"),
            models.Index(fields=["rating"], name="recipe_rating_idx"),
            models.Index(fields=["created_at"], name="recipe_created_idx"),
        ]

    def __str__(self):
        return self.title

    def can_be_managed_by(self, user):
        """Owners and admins may change publication state."""
        if not user or not getattr(user, "is_authenticated", False):
            return False
        return self.author_id == user.pk or getattr(user, "is_admin", False)
