from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from recipes.errors import NotFound
from recipes.services import FavouriteService, FollowService, ProfileService, ViewTrackingService
from recipes.tests.helpers import make_recipe, make_user


class ProfileServiceTestCase(TestCase):
    def setUp(self):
        self.service = ProfileService()
        self.user = make_user(username="chef")
        self.fan = make_user(username="fan")
        self.published = make_recipe(author=self.user)
        self.draft = make_recipe(author=self.user, published=False)

    def test_summary_counts(self):
        FollowService(self.fan).follow(self.user.pk)
        FollowService(self.user).follow(self.fan.pk)
        FavouriteService().favorite(self.user, self.published.pk)
        ViewTrackingService().record_view(self.published.pk, viewer=self.fan, address="1.2.3.4")
        ViewTrackingService().record_view(self.draft.pk, viewer=self.fan, address="1.2.3.4")

        summary = self.service.summary(self.user.pk, viewer=self.fan)
        self.assertEqual(summary.followers_count, 1)
        self.assertEqual(summary.following_count, 1)
        self.assertEqual(summary.recipes_count, 1)
        self.assertEqual(summary.favorite_recipes_count, 1)
        self.assertEqual(summary.total_recipe_views, 2)
        self.assertTrue(summary.is_following)

    def test_anonymous_viewer_is_not_following(self):
        summary = self.service.summary(self.user.pk, viewer=AnonymousUser())
        self.assertFalse(summary.is_following)
        self.assertEqual(summary.followers_count, 0)
        self.assertEqual(summary.total_recipe_views, 0)

    def test_missing_user(self):
        with self.assertRaises(NotFound):
            self.service.summary(999999)

    def test_search_users_caps_the_page(self):
        with self.settings(RECIPIX={"MAX_LIST_LIMIT": 1}):
            self.assertEqual([u.username for u in self.service.search("", limit=50)], ["chef"])
        self.assertEqual([u.username for u in self.service.search("FA")], ["fan"])
        self.assertEqual([u.username for u in self.service.search("", offset=-3)], ["chef", "fan"])
