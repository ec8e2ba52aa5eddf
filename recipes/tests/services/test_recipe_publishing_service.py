import uuid

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from recipes.errors import Forbidden, NotFound, Unauthorized
from recipes.models import User
from recipes.services import RecipePublishingService
from recipes.tests.helpers import make_recipe, make_user


class RecipePublishingServiceTestCase(TestCase):
    def setUp(self):
        self.service = RecipePublishingService()
        self.author = make_user(username="author")
        self.recipe = make_recipe(author=self.author, published=False)

    def test_author_publishes(self):
        recipe = self.service.publish(self.author, self.recipe.pk)
        self.assertTrue(recipe.is_published)
        self.recipe.refresh_from_db()
        self.assertTrue(self.recipe.is_published)

    def test_author_unpublishes(self):
        self.service.publish(self.author, self.recipe.pk)
        recipe = self.service.unpublish(self.author, self.recipe.pk)
        self.assertFalse(recipe.is_published)

    def test_admin_may_publish_others_recipes(self):
        admin = make_user(username="admin", role=User.ROLE_ADMIN)
        self.assertTrue(self.service.publish(admin, self.recipe.pk).is_published)

    def test_other_user_forbidden(self):
        other = make_user(username="other")
        with self.assertRaises(Forbidden):
            self.service.publish(other, self.recipe.pk)
        self.recipe.refresh_from_db()
        self.assertFalse(self.recipe.is_published)

    def test_anonymous_unauthorized(self):
        with self.assertRaises(Unauthorized):
            self.service.publish(AnonymousUser(), self.recipe.pk)

    def test_missing_recipe(self):
        with self.assertRaises(NotFound):
            self.service.publish(self.author, uuid.uuid4())
