"""
Shared building blocks for Helix response models.

Every model is a frozen pydantic model: instances are immutable once decoded
and unknown upstream fields are ignored, so additive API changes on the
Twitch side do not break decoding.
"""

from datetime import datetime
from typing import Annotated
from typing import Generic
from typing import Optional
from typing import TypeVar

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Field

T = TypeVar("T")


def _none_as_empty_list(value):
    return [] if value is None else value


def _blank_as_none(value):
    return value or None


# Helix sends `null` for empty tag lists on some endpoints
StrList = Annotated[list[str], BeforeValidator(_none_as_empty_list)]

# ...and "" for timestamps that do not apply (e.g. offline channels)
OptionalTimestamp = Annotated[Optional[datetime], BeforeValidator(_blank_as_none)]


class TwitchModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Pagination(TwitchModel):
    """Cursor to pass as `after` to fetch the next page. Absent on the last page."""

    cursor: Optional[str] = None


class Page(TwitchModel, Generic[T]):
    """Standard Helix list envelope: {"data": [...], "pagination": {...}}."""

    data: list[T]
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def cursor(self) -> Optional[str]:
        return self.pagination.cursor
