"""Row locks that serialise edge + counter writes per recipe or user."""

from recipes.errors import NotFound


def lock_recipe(recipe_model, recipe_id):
    """Fetch and lock a recipe row; must be called inside transaction.atomic()."""
    try:
        return recipe_model.objects.select_for_update().get(pk=recipe_id)
    except recipe_model.DoesNotExist:
        raise NotFound("Recipe not found.")


def lock_user(user_model, user_id):
    """Fetch and lock a user row; must be called inside transaction.atomic()."""
    try:
        return user_model.objects.select_for_update().get(pk=user_id)
    except user_model.DoesNotExist:
        raise NotFound("User not found.")
