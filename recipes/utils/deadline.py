"""Caller-supplied deadlines for engagement writes."""

import logging
import time

from recipes.errors import OperationTimedOut

logger = logging.getLogger(__name__)


class Deadline:
    """
    A point on the monotonic clock an operation must finish by.

    Services call ``check()`` as the last step inside their atomic block, so an
    expired deadline raises before commit and the edge and counter writes roll
    back together.
    """

    def __init__(self, expires_at, clock=time.monotonic):
        self.expires_at = expires_at
        self._clock = clock

    @classmethod
    def after(cls, seconds, clock=time.monotonic):
        """Deadline ``seconds`` from now."""
        return cls(clock() + seconds, clock=clock)

    def remaining(self):
        return max(0.0, self.expires_at - self._clock())

    def expired(self):
        return self._clock() >= self.expires_at

    def check(self):
        if self.expired():
            raise OperationTimedOut()

    def apply_statement_timeout(self, connection):
        """Bound each statement of the current transaction on PostgreSQL."""
        if connection.vendor != "postgresql":
            return
        millis = max(1, int(self.remaining() * 1000))
        with connection.cursor() as cursor:
            cursor.execute("SET LOCAL statement_timeout = %s", [millis])
        logger.debug("statement_timeout set to %sms", millis)


def check_deadline(deadline):
    if deadline is not None:
        deadline.check()


def bound_transaction(deadline, connection):
    """Apply a deadline to the open transaction, if there is one."""
    if deadline is None:
        return
    deadline.check()
    deadline.apply_statement_timeout(connection)
