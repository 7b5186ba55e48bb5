from typing import Optional
from uuid import UUID


def parse_uuid(value: str) -> Optional[UUID]:
    """Parse a path id; None when it is not a UUID so callers can answer 404"""
    try:
        return UUID(value)
    except (ValueError, TypeError):
        return None
