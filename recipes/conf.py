"""Access to the RECIPIX settings dict with defaults filled in."""

from django.conf import settings

DEFAULTS = {
    "DEFAULT_PAGE_SIZE": 10,
    "MAX_PAGE_SIZE": 100,
    "DEFAULT_LIST_LIMIT": 10,
    "MAX_LIST_LIMIT": 100,
    "DEFAULT_FOLLOW_LIMIT": 20,
    "REQUEST_DEADLINE_SECONDS": 5.0,
}


def recipix_setting(name):
    """Return a RECIPIX setting, falling back to the built-in default."""
    overrides = getattr(settings, "RECIPIX", None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
