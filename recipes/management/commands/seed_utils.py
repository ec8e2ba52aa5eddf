"""Helper utilities for assembling seed objects without hitting the DB too often."""

import re
from random import choice, randint, sample
from typing import Any, Dict, List

from recipes.models import Recipe
from .seed_data import cuisines, image_pool, ingredient_pool, tags_pool


def create_username(first_name: str, last_name: str) -> str:
    """Lower-case username built from the name, letters and digits only."""
    base = re.sub(r"[^a-z0-9]", "", f"{first_name}{last_name}".lower())
    return f"{base or 'cook'}{randint(10, 999)}"


def create_email(first_name: str, last_name: str) -> str:
    local = re.sub(r"[^a-z0-9.]", "", f"{first_name}.{last_name}".lower())
    return f"{local}{randint(10, 999)}@example.org"


class SeedHelpers:
    """Non-DB helpers that create model instances for bulk seeding."""

    def _build_ingredients(self) -> List[Dict[str, Any]]:
        chosen = sample(ingredient_pool, randint(3, 7))
        return [
            {"name": name, "amount": amount, "unit": unit, "notes": ""}
            for name, amount, unit in chosen
        ]

    def _build_instructions(self) -> List[str]:
        return [self.faker.sentence(nb_words=12) for _ in range(randint(3, 7))]

    def _build_recipe(self, author_id: int) -> Recipe:
        """Construct an unsaved Recipe with randomized fields."""
        return Recipe(
            author_id=author_id,
            title=self.faker.sentence(nb_words=4).rstrip(".")[:200],
            description=self.faker.paragraph(nb_sentences=3)[:1000],
            ingredients=self._build_ingredients(),
            instructions=self._build_instructions(),
            prep_time=randint(5, 60),
            cook_time=randint(0, 120),
            servings=choice([1, 2, 4, 6, 8]),
            difficulty=choice([choice_value for choice_value, _ in Recipe.DIFFICULTY_CHOICES]),
            cuisine=choice(cuisines),
            tags=sample(tags_pool, randint(0, 4)),
            image=choice(image_pool),
            is_public=randint(1, 10) > 1,
            is_published=randint(1, 5) > 1,
        )
