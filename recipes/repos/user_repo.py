"""Repository helpers for user lookups."""

from typing import List

from django.db.models import Q

from recipes.db_accessor import DB_Accessor
from recipes.errors import NotFound
from recipes.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_id(self, user_id: int) -> User:
        """Return a user by id or raise NotFound."""
        try:
            return self.get(id=user_id)
        except User.DoesNotExist:
            raise NotFound("User not found.")

    def ensure_exists(self, user_id: int) -> None:
        if not self.exists(id=user_id):
            raise NotFound("User not found.")

    def search(self, query: str, *, limit: int, offset: int = 0) -> List[User]:
        """Case-insensitive substring match on username, first or last name."""
        match = (
            Q(username__icontains=query)
            | Q(first_name__icontains=query)
            | Q(last_name__icontains=query)
        )
        return self.list(conditions=[match], order_by=("username", "id"), limit=limit, offset=offset)
