from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from recipes.models import Follower
from recipes.services import FavouriteService, FollowService
from recipes.tests.helpers import make_recipe, make_user


class UserApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.client.force_authenticate(user=self.alice)

    def _url(self, name, user=None):
        return reverse(name, kwargs={"user_id": (user or self.bob).pk})

    def test_follow_and_unfollow(self):
        response = self.client.post(self._url("user_follow"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})
        self.assertTrue(Follower.objects.filter(follower=self.alice, author=self.bob).exists())

        response = self.client.post(self._url("user_follow"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "already_following")

        response = self.client.delete(self._url("user_follow"))
        self.assertEqual(response.json(), {"success": True})

        response = self.client.delete(self._url("user_follow"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "not_following")

    def test_self_follow(self):
        response = self.client.post(self._url("user_follow", self.alice))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "self_follow")
        self.assertFalse(Follower.objects.exists())

    def test_follow_requires_authentication(self):
        response = APIClient().post(self._url("user_follow"))
        self.assertEqual(response.status_code, 401)

    def test_follow_missing_user(self):
        response = self.client.post(reverse("user_follow", kwargs={"user_id": 999999}))
        self.assertEqual(response.status_code, 404)

    def test_user_detail(self):
        FollowService(self.alice).follow(self.bob.pk)
        make_recipe(author=self.bob)
        response = self.client.get(self._url("user_detail"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["username"], "bob")
        self.assertEqual(body["followers_count"], 1)
        self.assertEqual(body["following_count"], 0)
        self.assertEqual(body["recipes_count"], 1)
        self.assertTrue(body["is_following"])

    def test_followers_and_following(self):
        FollowService(self.alice).follow(self.bob.pk)
        followers = APIClient().get(self._url("user_followers"))
        self.assertEqual([u["username"] for u in followers.json()], ["alice"])
        following = APIClient().get(self._url("user_following", self.alice))
        self.assertEqual([u["username"] for u in following.json()], ["bob"])

    def test_followers_missing_user(self):
        response = self.client.get(reverse("user_followers", kwargs={"user_id": 999999}))
        self.assertEqual(response.status_code, 404)

    def test_search_users(self):
        make_user(username="mary", first_name="Mary", last_name="Berry")
        response = APIClient().get(reverse("user_search"), {"query": "berry"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([u["username"] for u in response.json()], ["mary"])

        response = APIClient().get(reverse("user_search"), {"query": "o", "limit": 1, "offset": 1})
        self.assertEqual([u["username"] for u in response.json()], ["bob"])

    def test_search_users_rejects_bad_paging(self):
        response = APIClient().get(reverse("user_search"), {"limit": "ten"})
        self.assertEqual(response.status_code, 400)

    def test_favorites(self):
        recipe = make_recipe(title="Pie")
        FavouriteService().favorite(self.bob, recipe.pk)
        response = self.client.get(self._url("user_favorites"))
        self.assertEqual([r["title"] for r in response.json()], ["Pie"])
