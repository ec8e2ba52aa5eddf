import uuid
from datetime import timedelta

from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from django.utils import timezone

from recipes.errors import AlreadyFavorited, NotFavorited, NotFound, OperationTimedOut, Unauthorized
from recipes.models import Favourite, Recipe
from recipes.services import FavouriteService
from recipes.tests.helpers import deadline_expiring_mid_operation, make_recipe, make_user


class FavouriteServiceTestCase(TestCase):
    def setUp(self):
        self.service = FavouriteService()
        self.user = make_user(username="fan")
        self.recipe = make_recipe()

    def _count(self):
        return Recipe.objects.get(pk=self.recipe.pk).favorite_count

    def test_favorite_creates_edge_and_increments(self):
        self.assertTrue(self.service.favorite(self.user, self.recipe.pk))
        self.assertTrue(Favourite.objects.filter(user=self.user, recipe=self.recipe).exists())
        self.assertEqual(self._count(), 1)

    def test_double_favorite_counts_once(self):
        self.service.favorite(self.user, self.recipe.pk)
        with self.assertRaises(AlreadyFavorited):
            self.service.favorite(self.user, self.recipe.pk)
        self.assertEqual(self._count(), 1)
        self.assertEqual(Favourite.objects.count(), 1)

    def test_round_trip_restores_counter(self):
        other = make_user(username="other")
        self.service.favorite(other, self.recipe.pk)
        before = self._count()
        self.service.favorite(self.user, self.recipe.pk)
        self.service.unfavorite(self.user, self.recipe.pk)
        self.assertEqual(self._count(), before)
        self.assertFalse(self.service.is_favorited(self.user, self.recipe.pk))

    def test_unfavorite_without_edge_raises(self):
        with self.assertRaises(NotFavorited):
            self.service.unfavorite(self.user, self.recipe.pk)
        self.assertEqual(self._count(), 0)

    def test_unfavorite_clamps_counter_at_zero(self):
        Favourite.objects.create(user=self.user, recipe=self.recipe)
        with self.assertLogs("recipes.services.favourites", level="WARNING"):
            self.service.unfavorite(self.user, self.recipe.pk)
        self.assertEqual(self._count(), 0)

    def test_missing_recipe_raises_not_found(self):
        with self.assertRaises(NotFound):
            self.service.favorite(self.user, uuid.uuid4())
        with self.assertRaises(NotFound):
            self.service.unfavorite(self.user, uuid.uuid4())

    def test_anonymous_rejected(self):
        with self.assertRaises(Unauthorized):
            self.service.favorite(AnonymousUser(), self.recipe.pk)

    def test_expired_deadline_rolls_back_edge_and_counter(self):
        with self.assertRaises(OperationTimedOut):
            self.service.favorite(self.user, self.recipe.pk, deadline=deadline_expiring_mid_operation())
        self.assertFalse(Favourite.objects.exists())
        self.assertEqual(self._count(), 0)

    def test_favorited_ids(self):
        other = make_recipe()
        self.service.favorite(self.user, self.recipe.pk)
        self.assertEqual(self.service.favorited_ids(self.user, [self.recipe.pk, other.pk]), {self.recipe.pk})
        self.assertEqual(self.service.favorited_ids(AnonymousUser(), [self.recipe.pk]), set())

    def test_favorite_recipes_newest_first_and_visible_only(self):
        older = make_recipe(title="older")
        hidden = make_recipe(title="hidden", published=False)
        self.service.favorite(self.user, older.pk)
        self.service.favorite(self.user, self.recipe.pk)
        self.service.favorite(self.user, hidden.pk)
        Favourite.objects.filter(recipe=older).update(created_at=timezone.now() - timedelta(days=1))

        recipes = self.service.favorite_recipes(self.user.pk)
        self.assertEqual([r.pk for r in recipes], [self.recipe.pk, older.pk])
        self.assertEqual(self.service.favorite_recipes_count(self.user.pk), 2)
