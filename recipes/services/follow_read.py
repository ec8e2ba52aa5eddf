"""Read-only helpers for follower/following queries and derived counts."""

from recipes.conf import recipix_setting
from recipes.permissions import is_signed_in
from recipes.repos.followers_repo import FollowersRepo
from recipes.repos.user_repo import UserRepo


class FollowReadService:
    """Provide paged projections and counts of the follow graph."""

    def __init__(self, followers_repo=None, user_repo=None):
        self.followers_repo = followers_repo or FollowersRepo()
        self.user_repo = user_repo or UserRepo()

    def _limit(self, limit):
        if limit is None:
            return recipix_setting("DEFAULT_FOLLOW_LIMIT")
        return max(0, min(int(limit), recipix_setting("MAX_LIST_LIMIT")))

    def list_followers(self, user_id, limit=None, offset=0):
        """Users following user_id, in the order they followed."""
        self.user_repo.ensure_exists(user_id)
        return self.followers_repo.list_followers(
            author_id=user_id, limit=self._limit(limit), offset=max(0, offset)
        )

    def list_following(self, user_id, limit=None, offset=0):
        """Users that user_id follows, in the order they were followed."""
        self.user_repo.ensure_exists(user_id)
        return self.followers_repo.list_following(
            follower_id=user_id, limit=self._limit(limit), offset=max(0, offset)
        )

    def followers_count(self, user_id):
        return self.followers_repo.followers_count(user_id)

    def following_count(self, user_id):
        return self.followers_repo.following_count(user_id)

    def is_following(self, viewer, user_id):
        """Return True when the signed-in viewer follows user_id."""
        if not is_signed_in(viewer):
            return False
        return self.followers_repo.is_following(follower_id=viewer.pk, author_id=user_id)
