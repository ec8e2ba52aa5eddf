from .recipe_api_views import *
from .user_api_views import *
