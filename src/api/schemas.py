"""
Shared HTTP schemas: the response envelope and common field types.

Every response body carries `success`; payloads sit under `data`.
"""

from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, StringConstraints

DataT = TypeVar("DataT")

# Required text: surrounding whitespace is dropped, blank counts as missing
RequiredStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)
]


class Envelope(BaseModel, Generic[DataT]):
    success: bool = True
    message: Optional[str] = None
    count: Optional[int] = None
    data: Optional[DataT] = None
