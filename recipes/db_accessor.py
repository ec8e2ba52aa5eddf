from typing import Any, List, Mapping, Optional, Sequence, Tuple, Type
from django.db.models import Model, Q, QuerySet


class DB_Accessor:
    """Generic data accessor wrapping the queryset operations repositories share."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def query(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        conditions: Sequence[Q] = (),
        order_by: Sequence[str] = (),
    ) -> QuerySet:
        """Return an unsliced queryset; ``filters`` and ``conditions`` are ANDed."""
        qs: QuerySet = self.model.objects.filter(*conditions, **(filters or {}))
        return qs.order_by(*order_by) if order_by else qs

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        conditions: Sequence[Q] = (),
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Model]:
        """Return one materialised slice of the filtered, ordered rows."""
        qs = self.query(filters=filters, conditions=conditions, order_by=order_by)
        return list(self._apply_slice(qs, offset=offset, limit=limit))

    def page(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        conditions: Sequence[Q] = (),
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Model], int]:
        """Return ``(rows, total)`` where ``total`` ignores the slice."""
        qs = self.query(filters=filters, conditions=conditions, order_by=order_by)
        total = qs.count()
        return list(self._apply_slice(qs, offset=offset, limit=limit)), total

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.model.objects.get(**lookup)

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def count(self, **lookup: Any) -> int:
        return self.model.objects.filter(**lookup).count()

