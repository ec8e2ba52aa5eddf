"""UUID helpers for primary keys."""

import uuid


def uuid7_or_4() -> uuid.UUID:
    """Return a time-ordered uuid7 on interpreters that provide it, else uuid4."""
    return getattr(uuid, "uuid7", uuid.uuid4)()
