import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import recipes.utils.uuid
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=128, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three letters, digits, underscores or spaces", regex="^[\\w ]{3,}$")])),
                ("first_name", models.CharField(blank=True, max_length=50)),
                ("last_name", models.CharField(blank=True, max_length=50)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("bio", models.TextField(blank=True, help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("avatar", models.CharField(blank=True, max_length=500, null=True)),
                ("is_verified", models.BooleanField(default=False)),
                ("role", models.CharField(choices=[("user", "User"), ("admin", "Admin")], default="user", max_length=10)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["last_name", "first_name"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="", max_length=1000)),
                ("ingredients", models.JSONField(blank=True, default=list)),
                ("instructions", models.JSONField(blank=True, default=list)),
                ("prep_time", models.PositiveIntegerField(blank=True, null=True)),
                ("cook_time", models.PositiveIntegerField(blank=True, null=True)),
                ("servings", models.PositiveIntegerField(blank=True, null=True)),
                ("difficulty", models.CharField(choices=[("easy", "Easy"), ("medium", "Medium"), ("hard", "Hard")], default="medium", max_length=10)),
                ("cuisine", models.CharField(blank=True, max_length=100, null=True)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("image", models.CharField(blank=True, max_length=500, null=True)),
                ("is_public", models.BooleanField(default=True)),
                ("is_published", models.BooleanField(default=False)),
                ("rating", models.FloatField(default=0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("view_count", models.PositiveIntegerField(default=0)),
                ("favorite_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="recipes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe",
                "indexes": [
                    models.Index(fields=["title"], name="recipe_title_idx"),
                    models.Index(fields=["cuisine"], name="recipe_cuisine_idx"),
                    models.Index(fields=["difficulty"], name="recipe_difficulty_idx"),
                    models.Index(fields=["is_public", "is_published"], name="recipe_visible_idx"),
                    models.Index(fields=["rating"], name="recipe_rating_idx"),
                    models.Index(fields=["created_at"], name="recipe_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("rating__gte", 0), ("rating__lte", 5)), name="chk_recipe_rating_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Rating",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("value", models.PositiveSmallIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to="recipes.recipe")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "rating",
                "indexes": [
                    models.Index(fields=["recipe"], name="rating_recipe_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "recipe"), name="uniq_rating_user_recipe"),
                    models.CheckConstraint(condition=models.Q(("value__gte", 1), ("value__lte", 5)), name="chk_rating_value_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Favourite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="favourites", to="recipes.recipe")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="favourites", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "favourite",
                "indexes": [
                    models.Index(fields=["user"], name="favourite_user_idx"),
                    models.Index(fields=["recipe"], name="favourite_recipe_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "recipe"), name="uniq_favourite_user_recipe"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.UUIDField(default=recipes.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="followers", to=settings.AUTH_USER_MODEL)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "followers",
                "indexes": [
                    models.Index(fields=["follower", "created_at"], name="followers_follower_idx"),
                    models.Index(fields=["author", "created_at"], name="followers_author_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "author"), name="uniq_followers_follower_author"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("author")), _negated=True), name="chk_followers_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RecipeView",
            fields=[
                ("id", models.UUIDField(default=recipes.utils.uuid.uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("ip_address", models.CharField(max_length=64)),
                ("user_agent", models.TextField(blank=True, default="")),
                ("viewed_at", models.DateTimeField(auto_now_add=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="views", to="recipes.recipe")),
                ("viewer", models.ForeignKey(blank=True, db_column="viewer_id", null=True, on_delete=django.db.models.deletion.CASCADE, related_name="recipe_views", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe_view",
                "indexes": [
                    models.Index(fields=["recipe"], name="recipe_view_recipe_idx"),
                    models.Index(fields=["viewer"], name="recipe_view_viewer_idx"),
                    models.Index(fields=["viewed_at"], name="recipe_view_viewed_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("viewer__isnull", False)), fields=("recipe", "viewer", "ip_address"), name="uniq_recipe_view_viewer"),
                    models.UniqueConstraint(condition=models.Q(("viewer__isnull", True)), fields=("recipe", "ip_address"), name="uniq_recipe_view_anonymous"),
                ],
            },
        ),
    ]
