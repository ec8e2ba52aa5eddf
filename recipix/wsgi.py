"""WSGI entry point for the recipix API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "recipix.settings")

application = get_wsgi_application()
