"""Repository helpers for follower relationships."""

from typing import List
from recipes.db_accessor import DB_Accessor
from recipes.models import Follower, User


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower edges, in edge-creation order."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def list_followers(self, *, author_id: int, limit: int = 20, offset: int = 0) -> List[User]:
        """Users following author_id, oldest follow first."""
        edges = self.query(
            filters={"author_id": author_id},
            order_by=("created_at", "id"),
        ).select_related("follower")
        return [edge.follower for edge in self._apply_slice(edges, offset=offset, limit=limit)]

    def list_following(self, *, follower_id: int, limit: int = 20, offset: int = 0) -> List[User]:
        """Users follower_id follows, oldest follow first."""
        edges = self.query(
            filters={"follower_id": follower_id},
            order_by=("created_at", "id"),
        ).select_related("author")
        return [edge.author for edge in self._apply_slice(edges, offset=offset, limit=limit)]

    def is_following(self, *, follower_id: int, author_id: int) -> bool:
        """Return True if follower_id follows author_id."""
        return self.exists(follower_id=follower_id, author_id=author_id)

    def followers_count(self, author_id: int) -> int:
        return self.count(author_id=author_id)

    def following_count(self, follower_id: int) -> int:
        return self.count(follower_id=follower_id)
