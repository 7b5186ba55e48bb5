from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """
    Base for DTOs crossing the HTTP boundary.

    Serialized with camelCase keys (fullName, isEmailVerified, ...) while
    Python code keeps snake_case attribute names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
