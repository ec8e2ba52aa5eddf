"""View counting with a deduplication ledger.

A view is identified by (recipe, viewer, address); anonymous viewers have no
viewer, so everyone behind one address counts as a single anonymous viewer.

The ledger insert and the counter increment are separate units of work. A
duplicate ledger row means the view was already counted. Any other ledger
failure is logged and the view is counted anyway: the counter favours never
losing a view over exact deduplication.
"""

import enum
import logging

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F

from recipes.errors import NotFound
from recipes.models import Recipe, RecipeView
from recipes.permissions import is_signed_in
from recipes.utils.deadline import check_deadline
from recipes.utils.http import UNKNOWN

logger = logging.getLogger(__name__)


class LedgerOutcome(enum.Enum):
    INSERTED = "inserted"
    DUPLICATE = "duplicate"
    FAILED = "failed"


class ViewTrackingService:
    """Owns RecipeView rows and the recipe's `view_count`."""

    def __init__(self, view_model=RecipeView, recipe_model=Recipe):
        self.view_model = view_model
        self.recipe_model = recipe_model

    def record_view(self, recipe_id, viewer=None, address=UNKNOWN, user_agent="", *, deadline=None):
        """Record a view and return the recipe with its current view count."""
        try:
            recipe = self.recipe_model.objects.select_related("author").get(pk=recipe_id)
        except self.recipe_model.DoesNotExist:
            raise NotFound("Recipe not found.")

        check_deadline(deadline)
        viewer = viewer if is_signed_in(viewer) else None
        address = address or UNKNOWN

        outcome = self._write_ledger(recipe, viewer, address, user_agent or "")
        if outcome is LedgerOutcome.DUPLICATE:
            logger.debug("repeat view of recipe %s absorbed", recipe.pk)
            return recipe

        self.recipe_model.objects.filter(pk=recipe.pk).update(view_count=F("view_count") + 1)
        recipe.refresh_from_db(fields=["view_count"])
        return recipe

    def _write_ledger(self, recipe, viewer, address, user_agent):
        try:
            with transaction.atomic():
                seen = self.view_model.objects.filter(
                    recipe=recipe, viewer=viewer, ip_address=address
                ).exists()
                if seen:
                    return LedgerOutcome.DUPLICATE
                self.view_model.objects.create(
                    recipe=recipe,
                    viewer=viewer,
                    ip_address=address,
                    user_agent=user_agent,
                )
        except IntegrityError:
            # an identical view committed between the check and the insert
            return LedgerOutcome.DUPLICATE
        except DatabaseError:
            logger.exception(
                "view ledger write failed for recipe %s; counting the view anyway", recipe.pk
            )
            return LedgerOutcome.FAILED
        return LedgerOutcome.INSERTED
