from .favourites import FavouriteService
from .follow import FollowService
from .follow_read import FollowReadService
from .profile import ProfileService
from .ratings import RatingService
from .recipe_publishing import RecipePublishingService
from .recipe_query import RecipeQueryService
from .view_tracking import LedgerOutcome, ViewTrackingService

__all__ = [
    "FavouriteService",
    "FollowService",
    "FollowReadService",
    "ProfileService",
    "RatingService",
    "RecipePublishingService",
    "RecipeQueryService",
    "LedgerOutcome",
    "ViewTrackingService",
]
