"""
Pydantic models for the barnsworthburning.net search API.

The remote API returns ``{"results": [...]}``. Every record is validated as a
whole: a single bad field rejects the response. Unknown keys are ignored so
new upstream fields do not break the server.
"""

import re
from datetime import date, datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)

SEARCH_QUERY_DESCRIPTION = "The search query to look for on barnsworthburning.net"
MIN_QUERY_LENGTH = 2

_url_adapter = TypeAdapter(AnyUrl)
_NUMERIC_STRING = re.compile(r"\s*[+-]?\d+(\.\d*)?\s*")


def _check_url(value: str) -> str:
    # Validate only; the original string is kept so rendered links are untouched.
    try:
        _url_adapter.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"invalid URL: {value!r}") from e
    return value


def coerce_date(value: Any) -> Any:
    """Resolve the accepted date inputs to a ``datetime``.

    Numbers are epoch milliseconds. Plain dates become midnight UTC. Strings
    are left for pydantic's ISO-8601 parser, except digit-only strings, which
    are not dates.
    """
    if isinstance(value, bool):
        raise ValueError("booleans are not dates")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"epoch milliseconds out of range: {value}") from e
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str) and _NUMERIC_STRING.fullmatch(value):
        raise ValueError(f"numeric string is not a date: {value!r}")
    return value


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _integral_float(value: Any) -> Any:
    # JSON has one number type: 2.0 is accepted where an integer is expected.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Url = Annotated[StrictStr, AfterValidator(_check_url)]
DateValue = Annotated[datetime, BeforeValidator(coerce_date), AfterValidator(_assume_utc)]
JsonInt = Annotated[StrictInt, BeforeValidator(_integral_float)]
NonNegativeInt = Annotated[JsonInt, Field(ge=0)]

SearchQuery = Annotated[
    str,
    Field(
        min_length=MIN_QUERY_LENGTH,
        description=SEARCH_QUERY_DESCRIPTION,
    ),
]


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def reject_null(cls, data: Any) -> Any:
        # Optional fields may be omitted; an explicit null is still a type error.
        if isinstance(data, dict):
            for name, field in cls.model_fields.items():
                key = field.alias or name
                if key in data and data[key] is None:
                    raise ValueError(f"{key} may be omitted but not null")
        return data


class LinkedRecord(_Record):
    """Reference to another catalog record (creator, space, parent...)."""
    id: StrictStr
    name: StrictStr


class Attachment(_Record):
    """Image asset attached to a record."""
    id: StrictStr
    url: Url
    filename: StrictStr
    size: Optional[NonNegativeInt] = None
    type: StrictStr
    width: Optional[NonNegativeInt] = None
    height: Optional[NonNegativeInt] = None


class SearchResultItem(_Record):
    """Single search result record."""
    id: StrictStr
    title: Optional[StrictStr] = None
    creators: Optional[List[LinkedRecord]] = None
    spaces: Optional[List[LinkedRecord]] = None
    connections: Optional[List[LinkedRecord]] = None
    parent: Optional[LinkedRecord] = None
    parent_creators: Optional[List[LinkedRecord]] = Field(default=None, alias="parentCreators")
    children: Optional[List[LinkedRecord]] = None
    extract: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None
    images: Optional[List[Attachment]] = None
    image_caption: Optional[StrictStr] = Field(default=None, alias="imageCaption")
    michelin_stars: Optional[Annotated[JsonInt, Field(ge=0, le=3)]] = Field(
        default=None, alias="michelinStars"
    )
    source: Optional[Url] = None
    format: Optional[StrictStr] = None
    extracted_on: DateValue = Field(alias="extractedOn")
    last_updated: DateValue = Field(alias="lastUpdated")
    published_on: Optional[DateValue] = Field(default=None, alias="publishedOn")


class SearchResults(_Record):
    """Full search response envelope."""
    results: List[SearchResultItem]
