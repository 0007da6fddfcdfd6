"""Primary key generator for new rows (CUID2)."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def generate_cuid() -> str:
    """Return a new collision-resistant id, e.g. for a seeded record without one."""
    return _next_cuid()
