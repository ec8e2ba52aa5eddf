"""JSON endpoints for recipe listings and recipe engagement."""

from rest_framework.decorators import api_view
from rest_framework.response import Response

from recipes.errors import OutOfRange, ValidationError
from recipes.permissions import require_authenticated
from recipes.repos.recipe_repo import RecipeFilter, RecipeSort
from recipes.serializers import RateSerializer, RecipeConnectionSerializer, RecipeSerializer
from recipes.services.favourites import FavouriteService
from recipes.services.ratings import RatingService
from recipes.services.recipe_publishing import RecipePublishingService
from recipes.services.recipe_query import RecipeQueryService
from recipes.services.view_tracking import ViewTrackingService
from recipes.utils.http import client_address, user_agent
from recipes.views.view_utils import float_param, int_param, list_param, request_deadline

__all__ = [
    "list_recipes",
    "search_recipes",
    "popular_recipes",
    "recent_recipes",
    "recipe_detail",
    "rate_recipe",
    "favorite_recipe",
    "view_recipe",
    "publish_recipe",
    "unpublish_recipe",
]


def _recipe_filter(request):
    params = request.query_params
    return RecipeFilter(
        search=params.get("search") or None,
        cuisine=params.get("cuisine") or None,
        difficulty=params.get("difficulty") or None,
        min_rating=float_param(request, "minRating"),
        max_prep_time=int_param(request, "maxPrepTime"),
        max_cook_time=int_param(request, "maxCookTime"),
        author_id=int_param(request, "authorId"),
        tags=list_param(request, "tags"),
    )


def _recipe_sort(request):
    params = request.query_params
    return RecipeSort(
        field=params.get("sortField") or "createdAt",
        direction=(params.get("sortDirection") or "DESC").upper(),
    )


def _recipe_response(request, recipe, **kwargs):
    return Response(RecipeSerializer(recipe, context={"request": request}).data, **kwargs)


def _recipes_response(request, recipes):
    return Response(RecipeSerializer(recipes, many=True, context={"request": request}).data)


@api_view(["GET"])
def list_recipes(request):
    """Filtered, sorted page of public, published recipes."""
    connection = RecipeQueryService().list_recipes(
        recipe_filter=_recipe_filter(request),
        sort=_recipe_sort(request),
        first=int_param(request, "first"),
        after=request.query_params.get("after") or None,
        viewer=request.user,
    )
    return Response(RecipeConnectionSerializer(connection, context={"request": request}).data)


@api_view(["GET"])
def search_recipes(request):
    recipes = RecipeQueryService().search_recipes(
        request.query_params.get("query", ""),
        limit=int_param(request, "limit"),
        offset=int_param(request, "offset", default=0),
        viewer=request.user,
    )
    return _recipes_response(request, recipes)


@api_view(["GET"])
def popular_recipes(request):
    recipes = RecipeQueryService().popular(limit=int_param(request, "limit"), viewer=request.user)
    return _recipes_response(request, recipes)


@api_view(["GET"])
def recent_recipes(request):
    recipes = RecipeQueryService().recent(limit=int_param(request, "limit"), viewer=request.user)
    return _recipes_response(request, recipes)


@api_view(["GET"])
def recipe_detail(request, recipe_id):
    recipe = RecipeQueryService().get_recipe(recipe_id, viewer=request.user)
    return _recipe_response(request, recipe)


@api_view(["POST"])
def rate_recipe(request, recipe_id):
    """Create or replace the caller's rating; returns the recipe with fresh aggregates."""
    require_authenticated(request.user)
    serializer = RateSerializer(data=request.data)
    if not serializer.is_valid():
        codes = {error.code for error in serializer.errors.get("value", [])}
        if codes & {"min_value", "max_value"}:
            raise OutOfRange()
        raise ValidationError(serializer.errors)
    value = serializer.validated_data["value"]
    recipe = RatingService().rate(request.user, recipe_id, value, deadline=request_deadline())
    recipe.is_favorited = FavouriteService().is_favorited(request.user, recipe.pk)
    recipe.user_rating = value
    return _recipe_response(request, recipe)


@api_view(["POST", "DELETE"])
def favorite_recipe(request, recipe_id):
    """POST adds the recipe to the caller's favourites, DELETE removes it."""
    service = FavouriteService()
    if request.method == "DELETE":
        service.unfavorite(request.user, recipe_id, deadline=request_deadline())
    else:
        service.favorite(request.user, recipe_id, deadline=request_deadline())
    return Response({"success": True})


@api_view(["POST"])
def view_recipe(request, recipe_id):
    """Count a view of the recipe; repeat views from the same viewer are absorbed."""
    recipe = ViewTrackingService().record_view(
        recipe_id,
        viewer=request.user,
        address=client_address(request),
        user_agent=user_agent(request),
        deadline=request_deadline(),
    )
    RecipeQueryService().decorate([recipe], request.user)
    return _recipe_response(request, recipe)


@api_view(["POST"])
def publish_recipe(request, recipe_id):
    recipe = RecipePublishingService().publish(request.user, recipe_id)
    RecipeQueryService().decorate([recipe], request.user)
    return _recipe_response(request, recipe)


@api_view(["POST"])
def unpublish_recipe(request, recipe_id):
    recipe = RecipePublishingService().unpublish(request.user, recipe_id)
    RecipeQueryService().decorate([recipe], request.user)
    return _recipe_response(request, recipe)
