from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Avg, Count
from recipes.models import Recipe, User

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users. Their recipes, ratings, favourites, follow
    edges and views cascade with them, and the rating and favourite counters on
    surviving recipes are rebuilt from the edges that remain.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        non_staff_users = User.objects.filter(is_staff=False)

        with transaction.atomic():
            deleted_count, _ = non_staff_users.delete()
            self._rebuild_counters()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))

    def _rebuild_counters(self):
        recipes = Recipe.objects.annotate(
            edge_ratings=Count("ratings", distinct=True),
            edge_average=Avg("ratings__value"),
            edge_favourites=Count("favourites", distinct=True),
        )
        for recipe in recipes:
            Recipe.objects.filter(pk=recipe.pk).update(
                rating=float(recipe.edge_average or 0),
                rating_count=recipe.edge_ratings,
                favorite_count=recipe.edge_favourites,
            )
