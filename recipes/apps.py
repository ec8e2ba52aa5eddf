from django.apps import AppConfig

class RecipesConfig(AppConfig):
    """Django app config for recipes: models, engagement services and the JSON API."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'
    verbose_name = 'Recipes'
