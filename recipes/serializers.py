from rest_framework import serializers
from recipes.models import Recipe, User
from recipes.services.ratings import MAX_RATING, MIN_RATING


class AuthorSerializer(serializers.ModelSerializer):
    """Compact user representation nested inside recipes and follow lists."""

    class Meta:
        model = User
        fields = ["id", "username", "first_name", "last_name", "avatar", "is_verified"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Profile with the counters ProfileService attaches to the user."""
    followers_count = serializers.IntegerField(read_only=True)
    following_count = serializers.IntegerField(read_only=True)
    recipes_count = serializers.IntegerField(read_only=True)
    favorite_recipes_count = serializers.IntegerField(read_only=True)
    total_recipe_views = serializers.IntegerField(read_only=True)
    is_following = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "first_name",
            "last_name",
            "bio",
            "avatar",
            "is_verified",
            "role",
            "date_joined",
            "followers_count",
            "following_count",
            "recipes_count",
            "favorite_recipes_count",
            "total_recipe_views",
            "is_following",
        ]
        read_only_fields = fields


class RecipeSerializer(serializers.ModelSerializer):
    """Serializer for Recipe, including the viewer-specific decoration."""
    author = AuthorSerializer(read_only=True)
    is_favorited = serializers.SerializerMethodField()
    user_rating = serializers.SerializerMethodField()

    class Meta:
        model = Recipe
        fields = [
            "id",
            "author",
            "title",
            "description",
            "ingredients",
            "instructions",
            "prep_time",
            "cook_time",
            "servings",
            "difficulty",
            "cuisine",
            "tags",
            "image",
            "is_public",
            "is_published",
            "rating",
            "rating_count",
            "view_count",
            "favorite_count",
            "is_favorited",
            "user_rating",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_is_favorited(self, obj):
        return getattr(obj, "is_favorited", False)

    def get_user_rating(self, obj):
        return getattr(obj, "user_rating", None)


class RateSerializer(serializers.Serializer):
    """Request body of the rate endpoint."""
    value = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)


class RecipeConnectionSerializer(serializers.Serializer):
    """Serialize the envelope built by recipes.pagination.build_connection."""

    def to_representation(self, connection):
        return {
            "edges": [
                {"node": RecipeSerializer(edge["node"], context=self.context).data, "cursor": edge["cursor"]}
                for edge in connection["edges"]
            ],
            "page_info": dict(connection["page_info"]),
            "total_count": connection["total_count"],
        }
