"""
URL configuration for the recipix project.

All routes are JSON endpoints served by the recipes app under ``/api/``.
"""
from django.urls import path

from recipes.views.recipe_api_views import (
    favorite_recipe,
    list_recipes,
    popular_recipes,
    publish_recipe,
    rate_recipe,
    recent_recipes,
    recipe_detail,
    search_recipes,
    unpublish_recipe,
    view_recipe,
)
from recipes.views.user_api_views import (
    follow_user,
    search_users,
    user_detail,
    user_favorites,
    user_followers,
    user_following,
)

urlpatterns = [
    path('api/recipes/', list_recipes, name='recipe_list'),
    path('api/recipes/search/', search_recipes, name='recipe_search'),
    path('api/recipes/popular/', popular_recipes, name='recipe_popular'),
    path('api/recipes/recent/', recent_recipes, name='recipe_recent'),
    path('api/recipes/<uuid:recipe_id>/', recipe_detail, name='recipe_detail'),
    path('api/recipes/<uuid:recipe_id>/rate/', rate_recipe, name='recipe_rate'),
    path('api/recipes/<uuid:recipe_id>/favorite/', favorite_recipe, name='recipe_favorite'),
    path('api/recipes/<uuid:recipe_id>/view/', view_recipe, name='recipe_view'),
    path('api/recipes/<uuid:recipe_id>/publish/', publish_recipe, name='recipe_publish'),
    path('api/recipes/<uuid:recipe_id>/unpublish/', unpublish_recipe, name='recipe_unpublish'),
    path('api/users/search/', search_users, name='user_search'),
    path('api/users/<int:user_id>/', user_detail, name='user_detail'),
    path('api/users/<int:user_id>/follow/', follow_user, name='user_follow'),
    path('api/users/<int:user_id>/followers/', user_followers, name='user_followers'),
    path('api/users/<int:user_id>/following/', user_following, name='user_following'),
    path('api/users/<int:user_id>/favorites/', user_favorites, name='user_favorites'),
]
