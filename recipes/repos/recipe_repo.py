"""Repository building bounded recipe queries from filters, sort and paging."""

import json
from dataclasses import dataclass
from typing import List, Optional, Tuple

from django.db.models import Q, QuerySet, Sum

from recipes.db_accessor import DB_Accessor
from recipes.errors import InvalidSort
from recipes.models import Recipe

# API sort field -> model field
SORT_FIELDS = {
    "title": "title",
    "rating": "rating",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "prepTime": "prep_time",
    "cookTime": "cook_time",
}
SORT_DIRECTIONS = ("ASC", "DESC")


@dataclass(frozen=True)
class RecipeFilter:
    """Optional recipe predicates; every one that is set must hold."""
    search: Optional[str] = None
    cuisine: Optional[str] = None
    difficulty: Optional[str] = None
    min_rating: Optional[float] = None
    max_prep_time: Optional[int] = None
    max_cook_time: Optional[int] = None
    author_id: Optional[int] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RecipeSort:
    field: str = "createdAt"
    direction: str = "DESC"

    def __post_init__(self):
        if self.field not in SORT_FIELDS:
            raise InvalidSort(
                f"Cannot sort by '{self.field}'. Allowed: {', '.join(SORT_FIELDS)}."
            )
        if self.direction not in SORT_DIRECTIONS:
            raise InvalidSort(f"Sort direction must be ASC or DESC, not '{self.direction}'.")

    def order_by(self) -> Tuple[str, str]:
        """Model ordering with the primary key as a deterministic tiebreaker."""
        prefix = "-" if self.direction == "DESC" else ""
        return (f"{prefix}{SORT_FIELDS[self.field]}", f"{prefix}id")


DEFAULT_SORT = RecipeSort()


def visible_condition() -> Q:
    """Public and published: the unconditional eligibility rule for listings."""
    return Q(is_public=True, is_published=True)


def tag_condition(tag: str) -> Q:
    """
    Whole-tag, case-insensitive match against the stored JSON array.

    The array text holds each tag JSON-encoded. SQLite keeps non-ASCII
    characters escaped while PostgreSQL keeps them literal, so both spellings
    are tried.
    """
    escaped = json.dumps(tag)
    literal = json.dumps(tag, ensure_ascii=False)
    condition = Q(tags__icontains=escaped)
    if literal != escaped:
        condition |= Q(tags__icontains=literal)
    return condition


def filter_conditions(recipe_filter: Optional[RecipeFilter]) -> List[Q]:
    """Translate a RecipeFilter into Q objects to be ANDed together."""
    if recipe_filter is None:
        return []
    conditions: List[Q] = []
    if recipe_filter.search:
        conditions.append(
            Q(title__icontains=recipe_filter.search)
            | Q(description__icontains=recipe_filter.search)
        )
    if recipe_filter.cuisine:
        conditions.append(Q(cuisine=recipe_filter.cuisine))
    if recipe_filter.difficulty:
        conditions.append(Q(difficulty=recipe_filter.difficulty))
    if recipe_filter.min_rating is not None:
        conditions.append(Q(rating__gte=recipe_filter.min_rating))
    if recipe_filter.max_prep_time is not None:
        conditions.append(Q(prep_time__lte=recipe_filter.max_prep_time))
    if recipe_filter.max_cook_time is not None:
        conditions.append(Q(cook_time__lte=recipe_filter.max_cook_time))
    if recipe_filter.author_id is not None:
        conditions.append(Q(author_id=recipe_filter.author_id))
    for tag in recipe_filter.tags:
        conditions.append(tag_condition(tag))
    return conditions


class RecipeRepo(DB_Accessor):
    """Repository for recipe queries; every listing is limited to visible recipes."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def query(self, **kwargs) -> QuerySet:
        return super().query(**kwargs).select_related("author")

    def list_page(
        self,
        *,
        recipe_filter: Optional[RecipeFilter] = None,
        sort: Optional[RecipeSort] = None,
        limit: int,
        offset: int = 0,
    ) -> Tuple[List[Recipe], int]:
        """Return one page of visible recipes and the total match count."""
        sort = sort or DEFAULT_SORT
        conditions = [visible_condition(), *filter_conditions(recipe_filter)]
        return self.page(
            conditions=conditions,
            order_by=sort.order_by(),
            limit=limit,
            offset=offset,
        )

    def search(self, query: str, *, limit: int, offset: int = 0) -> List[Recipe]:
        """Title/description substring or tag match, best rated first."""
        match = (
            Q(title__icontains=query)
            | Q(description__icontains=query)
            | tag_condition(query)
        )
        return self.list(
            conditions=[visible_condition(), match],
            order_by=("-rating", "-created_at", "-id"),
            limit=limit,
            offset=offset,
        )

    def popular(self, *, limit: int) -> List[Recipe]:
        return self.list(
            conditions=[visible_condition()],
            order_by=("-rating", "-view_count", "-id"),
            limit=limit,
        )

    def recent(self, *, limit: int) -> List[Recipe]:
        return self.list(
            conditions=[visible_condition()],
            order_by=("-created_at", "-id"),
            limit=limit,
        )

    def get_visible(self, recipe_id) -> Recipe:
        """Fetch a visible recipe; raises Recipe.DoesNotExist otherwise."""
        return self.model.objects.select_related("author").get(
            visible_condition(), pk=recipe_id
        )

    def count_visible_for_author(self, author_id: int) -> int:
        return self.model.objects.filter(visible_condition(), author_id=author_id).count()

    def total_views_for_author(self, author_id: int) -> int:
        """Sum of view counters over everything the author has written."""
        total = self.model.objects.filter(author_id=author_id).aggregate(total=Sum("view_count"))["total"]
        return total or 0
