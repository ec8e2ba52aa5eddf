from recipes.conf import recipix_setting
from recipes.errors import ValidationError
from recipes.pagination import MAX_OFFSET
from recipes.utils.deadline import Deadline


def request_deadline():
    """Deadline for the write a request is about to perform."""
    return Deadline.after(recipix_setting("REQUEST_DEADLINE_SECONDS"))


def int_param(request, name, default=None, minimum=0, maximum=MAX_OFFSET):
    """
    Read an integer query parameter.

    Missing or blank values give ``default``; anything that is not an integer
    between ``minimum`` and ``maximum`` is a ValidationError.
    """
    raw = request.query_params.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer.")
    if value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}.")
    if value > maximum:
        raise ValidationError(f"{name} must be at most {maximum}.")
    return value


def float_param(request, name, default=None):
    raw = request.query_params.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number.")


def list_param(request, name):
    """Comma separated values with blanks dropped."""
    raw = request.query_params.get(name) or ""
    return tuple(part.strip() for part in raw.split(",") if part.strip())
