import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, connection, transaction

from recipes.errors import AlreadyFollowing, NotFollowing, SelfFollow
from recipes.models import Follower
from recipes.permissions import require_authenticated
from recipes.services.locks import lock_user
from recipes.utils.deadline import bound_transaction, check_deadline

logger = logging.getLogger(__name__)


class FollowService:
    """
    Follow and unfollow on behalf of one acting user.

    Follower/following counts are not stored anywhere; FollowReadService
    counts edges when they are read.
    """

    def __init__(self, actor, follower_model=Follower, user_model=None):
        self.actor = actor
        self.follower_model = follower_model
        self.user_model = user_model or get_user_model()

    def _check_target(self, target_id, self_message=None):
        require_authenticated(self.actor)
        if self.actor.pk == target_id:
            raise SelfFollow(self_message)

    def follow(self, target_id, *, deadline=None):
        """Start following target_id."""
        self._check_target(target_id)
        with transaction.atomic():
            bound_transaction(deadline, connection)
            target = lock_user(self.user_model, target_id)
            try:
                with transaction.atomic():
                    self.follower_model.objects.create(follower=self.actor, author=target)
            except IntegrityError:
                raise AlreadyFollowing()
            check_deadline(deadline)
        logger.info("user %s followed user %s", self.actor.pk, target_id)
        return True

    def unfollow(self, target_id, *, deadline=None):
        """Stop following target_id."""
        self._check_target(target_id, "You cannot unfollow yourself.")
        with transaction.atomic():
            bound_transaction(deadline, connection)
            target = lock_user(self.user_model, target_id)
            deleted, _ = self.follower_model.objects.filter(
                follower=self.actor, author=target
            ).delete()
            if not deleted:
                raise NotFollowing()
            check_deadline(deadline)
        logger.info("user %s unfollowed user %s", self.actor.pk, target_id)
        return True
