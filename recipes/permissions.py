"""Caller checks shared by the engagement services."""

from recipes.errors import Forbidden, Unauthorized


def is_signed_in(user):
    return bool(user) and getattr(user, "is_authenticated", False)


def require_authenticated(user):
    """Raise Unauthorized for anonymous callers."""
    if not is_signed_in(user):
        raise Unauthorized()
    return user


def require_recipe_manager(user, recipe):
    """Only the author or an admin may change a recipe's publication state."""
    require_authenticated(user)
    if not recipe.can_be_managed_by(user):
        raise Forbidden("Not authorized to change this recipe.")
