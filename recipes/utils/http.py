"""HTTP-related utility helpers."""

UNKNOWN = "unknown"


def client_address(request):
    """
    Return the originating address of a request.

    The first hop of X-Forwarded-For wins when a proxy set it, then
    REMOTE_ADDR, then the literal "unknown".
    """
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.META.get("REMOTE_ADDR") or UNKNOWN


def user_agent(request):
    """Return the User-Agent header, or "unknown" when absent."""
    return request.META.get("HTTP_USER_AGENT") or UNKNOWN
