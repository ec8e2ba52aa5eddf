"""Management command to seed the database with sample users, recipes and engagement."""

from random import choice, randint, sample
from typing import List

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from recipes.errors import ConflictError
from recipes.models import Recipe, User
from recipes.services.favourites import FavouriteService
from recipes.services.follow import FollowService
from recipes.services.ratings import RatingService
from recipes.services.view_tracking import ViewTrackingService
from .seed_data import bio_phrases, user_agents, user_fixtures
from .seed_utils import SeedHelpers, create_email, create_username


class Command(SeedHelpers, BaseCommand):
    """
    Seed sample data.

    Engagement is written through the services rather than bulk inserted, so
    every stored counter matches the edges behind it.
    """
    USER_COUNT = 50
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total users to reach.")
        parser.add_argument("--recipes-per-user", type=int, default=3)

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_recipes(per_user=options["recipes_per_user"])
        self.seed_follows(follow_k=5)
        self.seed_ratings(max_ratings_per_recipe=8)
        self.seed_favourites(per_user=4)
        self.seed_views(max_views_per_recipe=15)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        """Create fixture users, then random users until target is reached."""
        for data in user_fixtures:
            self.try_create_user(data)
        user_count = User.objects.count()
        while user_count < target:
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
            user_count = User.objects.count()
        self.stdout.write(f"users: {user_count}")

    def try_create_user(self, data):
        """Create a user, skipping usernames or emails that are already taken."""
        try:
            with transaction.atomic():
                User.objects.create_user(
                    username=data['username'],
                    email=data['email'],
                    password=Command.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                    bio=choice(bio_phrases),
                )
        except IntegrityError:
            self.stdout.write(f"skipping duplicate user {data['username']}")

    def seed_recipes(self, *, per_user: int = 3) -> None:
        user_ids = list(User.objects.values_list("id", flat=True))
        rows: List[Recipe] = [
            self._build_recipe(author_id)
            for author_id in user_ids
            for _ in range(per_user)
        ]
        with transaction.atomic():
            Recipe.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"recipes created: {len(rows)}")

    def seed_follows(self, follow_k: int = 5) -> None:
        users = list(User.objects.all())
        if len(users) < 2:
            return
        created = 0
        for follower in users:
            others = [user for user in users if user.pk != follower.pk]
            service = FollowService(follower)
            for target in sample(others, min(follow_k, len(others))):
                created += self._attempt(service.follow, target.pk)
        self.stdout.write(f"follows created: {created}")

    def seed_ratings(self, max_ratings_per_recipe: int = 8) -> None:
        users = list(User.objects.all())
        service = RatingService()
        count = 0
        for recipe_id in Recipe.objects.values_list("id", flat=True):
            for user in sample(users, min(len(users), randint(0, max_ratings_per_recipe))):
                service.rate(user, recipe_id, randint(1, 5))
                count += 1
        self.stdout.write(f"ratings created: {count}")

    def seed_favourites(self, *, per_user: int = 4) -> None:
        recipe_ids = list(Recipe.objects.values_list("id", flat=True))
        if not recipe_ids:
            return
        service = FavouriteService()
        created = 0
        for user in User.objects.all():
            for recipe_id in sample(recipe_ids, min(per_user, len(recipe_ids))):
                created += self._attempt(service.favorite, user, recipe_id)
        self.stdout.write(f"favourites created: {created}")

    def seed_views(self, max_views_per_recipe: int = 15) -> None:
        users = list(User.objects.all())
        service = ViewTrackingService()
        for recipe_id in Recipe.objects.values_list("id", flat=True):
            for _ in range(randint(0, max_views_per_recipe)):
                viewer = choice(users) if users and randint(0, 1) else None
                service.record_view(
                    recipe_id,
                    viewer=viewer,
                    address=self.faker.ipv4(),
                    user_agent=choice(user_agents),
                )
        self.stdout.write("views recorded")

    def _attempt(self, operation, *args):
        """Run an engagement write, treating an existing edge as a no-op."""
        try:
            operation(*args)
        except ConflictError:
            return 0
        return 1
