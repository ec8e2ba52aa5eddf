import itertools
import uuid

from recipes.models import Recipe, User
from recipes.utils.deadline import Deadline


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )
    return user


def make_recipe(
    *,
    author=None,
    title="test recipe",
    description="desc",
    published=True,
    public=True,
    created_at=None,
    **extra,
):
    """
    creates and returns a recipe. visible (public and published) by default.
    created_at overrides the auto_now_add timestamp when given.
    """
    if author is None:
        author = make_user(username=f"author_{uuid.uuid4().hex[:8]}")

    recipe = Recipe.objects.create(
        author=author,
        title=title,
        description=description,
        is_published=published,
        is_public=public,
        **extra,
    )
    if created_at is not None:
        Recipe.objects.filter(pk=recipe.pk).update(created_at=created_at)
        recipe.refresh_from_db()
    return recipe


def deadline_expiring_mid_operation():
    """A deadline that passes its first check and has expired by the next one."""
    ticks = itertools.chain([0.0], itertools.repeat(10.0))
    return Deadline(5.0, clock=lambda: next(ticks))
