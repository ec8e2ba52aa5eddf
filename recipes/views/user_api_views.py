"""JSON endpoints for user profiles and the follow graph."""

from rest_framework.decorators import api_view
from rest_framework.response import Response

from recipes.serializers import AuthorSerializer, RecipeSerializer, UserSummarySerializer
from recipes.services.follow import FollowService
from recipes.services.follow_read import FollowReadService
from recipes.services.profile import ProfileService
from recipes.services.recipe_query import RecipeQueryService
from recipes.views.view_utils import int_param, request_deadline

__all__ = [
    "search_users",
    "user_detail",
    "follow_user",
    "user_followers",
    "user_following",
    "user_favorites",
]


@api_view(["GET"])
def user_detail(request, user_id):
    """Profile summary with follower, following and recipe counts."""
    user = ProfileService().summary(user_id, viewer=request.user)
    return Response(UserSummarySerializer(user).data)


@api_view(["GET"])
def search_users(request):
    users = ProfileService().search(
        request.query_params.get("query", ""),
        limit=int_param(request, "limit"),
        offset=int_param(request, "offset", default=0),
    )
    return Response(AuthorSerializer(users, many=True).data)


@api_view(["POST", "DELETE"])
def follow_user(request, user_id):
    """POST follows the user, DELETE unfollows."""
    service = FollowService(request.user)
    if request.method == "DELETE":
        service.unfollow(user_id, deadline=request_deadline())
    else:
        service.follow(user_id, deadline=request_deadline())
    return Response({"success": True})


@api_view(["GET"])
def user_followers(request, user_id):
    users = FollowReadService().list_followers(
        user_id,
        limit=int_param(request, "limit"),
        offset=int_param(request, "offset", default=0),
    )
    return Response(AuthorSerializer(users, many=True).data)


@api_view(["GET"])
def user_following(request, user_id):
    users = FollowReadService().list_following(
        user_id,
        limit=int_param(request, "limit"),
        offset=int_param(request, "offset", default=0),
    )
    return Response(AuthorSerializer(users, many=True).data)


@api_view(["GET"])
def user_favorites(request, user_id):
    """Public, published recipes the user has favourited, newest first."""
    recipes = RecipeQueryService().favorite_recipes(user_id, viewer=request.user)
    return Response(RecipeSerializer(recipes, many=True, context={"request": request}).data)
