"""Error taxonomy for the engagement and query services.

Services raise these; ``recipes.exception_handler`` turns them into HTTP
responses. Each subclass carries a stable ``code`` so API callers can tell an
"already true" conflict (for example ``already_favorited``) apart from a
genuinely invalid request.
"""


class EngagementError(Exception):
    """Base class for caller-facing errors."""

    code = "error"
    default_detail = "Request failed."

    def __init__(self, detail=None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(EngagementError):
    code = "not_found"
    default_detail = "Not found."


class Unauthorized(EngagementError):
    code = "unauthorized"
    default_detail = "Authentication required."


class Forbidden(EngagementError):
    code = "forbidden"
    default_detail = "You do not have permission to perform this action."


class ValidationError(EngagementError):
    code = "validation_error"
    default_detail = "Invalid input."


class OutOfRange(ValidationError):
    code = "rating_out_of_range"
    default_detail = "Rating must be between 1 and 5."


class SelfFollow(ValidationError):
    code = "self_follow"
    default_detail = "You cannot follow yourself."


class MalformedCursor(ValidationError):
    code = "malformed_cursor"
    default_detail = "Cursor is not valid."


class InvalidSort(ValidationError):
    code = "invalid_sort"
    default_detail = "Unsupported sort."


class ConflictError(EngagementError):
    code = "conflict"
    default_detail = "Request conflicts with the current state."


class AlreadyFavorited(ConflictError):
    code = "already_favorited"
    default_detail = "Recipe is already in your favorites."


class NotFavorited(ConflictError):
    code = "not_favorited"
    default_detail = "Recipe is not in your favorites."


class AlreadyFollowing(ConflictError):
    code = "already_following"
    default_detail = "You are already following this user."


class NotFollowing(ConflictError):
    code = "not_following"
    default_detail = "You are not following this user."


class OperationTimedOut(EngagementError):
    code = "timeout"
    default_detail = "The operation did not finish before its deadline."
