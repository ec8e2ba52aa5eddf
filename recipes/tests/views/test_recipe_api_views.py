import base64
import uuid
from datetime import timedelta

from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from recipes.models import Favourite, Rating, Recipe, RecipeView
from recipes.pagination import encode_cursor
from recipes.tests.helpers import make_recipe, make_user


class RecipeListApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.author = make_user(username="author")
        now = timezone.now()
        self.recipes = [
            make_recipe(
                author=self.author,
                title=f"Recipe {n}",
                cuisine="italian" if n % 2 else "thai",
                tags=["quick"] if n < 3 else [],
                prep_time=n * 10,
                created_at=now - timedelta(hours=10 - n),
            )
            for n in range(1, 6)
        ]
        self.draft = make_recipe(author=self.author, title="Draft", published=False)
        self.url = reverse("recipe_list")

    def _titles(self, response):
        return [edge["node"]["title"] for edge in response.json()["edges"]]

    def test_anonymous_list(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["total_count"], 5)
        self.assertNotIn("Draft", self._titles(response))
        self.assertFalse(data["edges"][0]["node"]["is_favorited"])
        self.assertIsNone(data["edges"][0]["node"]["user_rating"])

    def test_paging(self):
        response = self.client.get(self.url, {"first": 2})
        self.assertEqual(self._titles(response), ["Recipe 5", "Recipe 4"])
        page_info = response.json()["page_info"]
        self.assertTrue(page_info["has_next_page"])
        self.assertEqual(page_info["end_cursor"], encode_cursor(1))

        response = self.client.get(self.url, {"first": 2, "after": page_info["end_cursor"]})
        self.assertEqual(self._titles(response), ["Recipe 3", "Recipe 2"])

    def test_filters_from_query_params(self):
        response = self.client.get(self.url, {"cuisine": "italian", "maxPrepTime": 30})
        self.assertEqual(self._titles(response), ["Recipe 3", "Recipe 1"])

    def test_tags_param(self):
        response = self.client.get(self.url, {"tags": "quick"})
        self.assertEqual(self._titles(response), ["Recipe 2", "Recipe 1"])

    def test_sort_params(self):
        response = self.client.get(self.url, {"sortField": "title", "sortDirection": "asc", "first": 1})
        self.assertEqual(self._titles(response), ["Recipe 1"])

    def test_invalid_sort(self):
        response = self.client.get(self.url, {"sortField": "favoriteCount"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "invalid_sort")

    def test_malformed_cursor(self):
        response = self.client.get(self.url, {"after": "@@@"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "malformed_cursor")

    def test_oversized_cursor_and_offset(self):
        huge = base64.b64encode(b"99999999999999999999999").decode("ascii")
        response = self.client.get(self.url, {"after": huge})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "malformed_cursor")

        response = self.client.get(reverse("recipe_search"), {"query": "x", "offset": "9" * 23})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "validation_error")

    def test_non_integer_first(self):
        response = self.client.get(self.url, {"first": "many"})
        self.assertEqual(response.status_code, 400)

    def test_search_endpoint(self):
        response = self.client.get(reverse("recipe_search"), {"query": "recipe 4"})
        self.assertEqual([r["title"] for r in response.json()], ["Recipe 4"])

    def test_recent_endpoint(self):
        response = self.client.get(reverse("recipe_recent"), {"limit": 2})
        self.assertEqual([r["title"] for r in response.json()], ["Recipe 5", "Recipe 4"])

    def test_popular_endpoint(self):
        response = self.client.get(reverse("recipe_popular"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 5)


class RecipeEngagementApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.author = make_user(username="author")
        self.user = make_user(username="johndoe")
        self.recipe = make_recipe(author=self.author, title="Soup")
        self.client.force_authenticate(user=self.user)

    def _url(self, name, recipe=None):
        return reverse(name, kwargs={"recipe_id": (recipe or self.recipe).pk})

    def test_detail(self):
        response = self.client.get(self._url("recipe_detail"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "Soup")
        self.assertEqual(body["author"]["username"], "author")

    def test_detail_missing(self):
        response = self.client.get(reverse("recipe_detail", kwargs={"recipe_id": uuid.uuid4()}))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"]["code"], "not_found")

    def test_rate(self):
        response = self.client.post(self._url("recipe_rate"), {"value": 4}, format="json")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["rating"], 4.0)
        self.assertEqual(body["rating_count"], 1)
        self.assertEqual(body["user_rating"], 4)

    def test_rate_out_of_range(self):
        response = self.client.post(self._url("recipe_rate"), {"value": 9}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "rating_out_of_range")
        self.assertFalse(Rating.objects.exists())

    def test_rate_missing_or_non_integer_value(self):
        for body in ({}, {"value": "lots"}, {"value": 4.5}):
            response = self.client.post(self._url("recipe_rate"), body, format="json")
            self.assertEqual(response.status_code, 400)
            error = response.json()["error"]
            self.assertEqual(error["code"], "validation_error")
            self.assertIn("value", error["message"])
        self.assertFalse(Rating.objects.exists())

    def test_rate_requires_authentication(self):
        response = APIClient().post(self._url("recipe_rate"), {"value": 4}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_favorite_and_unfavorite(self):
        response = self.client.post(self._url("recipe_favorite"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).favorite_count, 1)

        response = self.client.post(self._url("recipe_favorite"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "already_favorited")

        response = self.client.delete(self._url("recipe_favorite"))
        self.assertEqual(response.json(), {"success": True})
        self.assertFalse(Favourite.objects.exists())
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).favorite_count, 0)

        response = self.client.delete(self._url("recipe_favorite"))
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "not_favorited")

    def test_view_deduplicates_by_forwarded_address(self):
        url = self._url("recipe_view")
        headers = {"HTTP_X_FORWARDED_FOR": "198.51.100.4, 10.0.0.1", "HTTP_USER_AGENT": "pytest"}
        first = self.client.post(url, **headers)
        second = self.client.post(url, **headers)
        self.assertEqual(first.json()["view_count"], 1)
        self.assertEqual(second.json()["view_count"], 1)
        view = RecipeView.objects.get()
        self.assertEqual(view.ip_address, "198.51.100.4")
        self.assertEqual(view.user_agent, "pytest")

    def test_anonymous_view(self):
        response = APIClient().post(self._url("recipe_view"), REMOTE_ADDR="192.0.2.1")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(RecipeView.objects.get().viewer)

    def test_publish_requires_owner(self):
        draft = make_recipe(author=self.author, published=False)
        response = self.client.post(self._url("recipe_publish", draft))
        self.assertEqual(response.status_code, 403)

        owner_client = APIClient()
        owner_client.force_authenticate(user=self.author)
        response = owner_client.post(self._url("recipe_publish", draft))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["is_published"])

        response = owner_client.post(self._url("recipe_unpublish", draft))
        self.assertFalse(response.json()["is_published"])

    @override_settings(RECIPIX={"REQUEST_DEADLINE_SECONDS": -1})
    def test_expired_request_deadline(self):
        response = self.client.post(self._url("recipe_favorite"))
        self.assertEqual(response.status_code, 504)
        self.assertEqual(response.json()["error"]["code"], "timeout")
        self.assertFalse(Favourite.objects.exists())
