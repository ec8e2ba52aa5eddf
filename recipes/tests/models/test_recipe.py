from django.db import IntegrityError, transaction
from django.test import TestCase

from recipes.models import Recipe
from recipes.tests.helpers import make_recipe, make_user


class RecipeModelTestCase(TestCase):
    def setUp(self):
        self.author = make_user(username="author")
        self.recipe = make_recipe(author=self.author, title="Tomato soup")

    def test_defaults(self):
        recipe = Recipe.objects.create(author=self.author, title="Plain rice")
        self.assertEqual(recipe.rating, 0)
        self.assertEqual(recipe.rating_count, 0)
        self.assertEqual(recipe.view_count, 0)
        self.assertEqual(recipe.favorite_count, 0)
        self.assertEqual(recipe.difficulty, Recipe.DIFFICULTY_MEDIUM)
        self.assertTrue(recipe.is_public)
        self.assertFalse(recipe.is_published)
        self.assertEqual(recipe.tags, [])

    def test_str_is_title(self):
        self.assertEqual(str(self.recipe), "Tomato soup")

    def test_author_can_manage(self):
        self.assertTrue(self.recipe.can_be_managed_by(self.author))

    def test_admin_can_manage(self):
        admin = make_user(username="admin", role="admin")
        self.assertTrue(self.recipe.can_be_managed_by(admin))

    def test_other_user_cannot_manage(self):
        other = make_user(username="other")
        self.assertFalse(self.recipe.can_be_managed_by(other))
        self.assertFalse(self.recipe.can_be_managed_by(None))

    def test_rating_above_five_rejected_by_database(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Recipe.objects.filter(pk=self.recipe.pk).update(rating=5.5)
