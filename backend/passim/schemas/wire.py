"""Wire map schema — the portable key/value form of an item."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field, StrictInt, StrictStr, TypeAdapter

from passim.config import UINT32_MAX

UInt32 = Annotated[StrictInt, Field(ge=0, le=UINT32_MAX)]

WireValue = Union[str, int]
WireMap = dict[str, WireValue]

KEY_FILENAME = "filename"
KEY_HASH = "hash"
KEY_MAX_AGE = "max-age"
KEY_SHARE_LIMIT = "share-limit"
KEY_SHARE_COUNT = "share-count"

STRING_ADAPTER: TypeAdapter[str] = TypeAdapter(StrictStr)
UINT32_ADAPTER: TypeAdapter[int] = TypeAdapter(UInt32)

# wire key -> (item attribute, validator); order is the serialization order
WIRE_FIELDS: dict[str, tuple[str, TypeAdapter]] = {
    KEY_FILENAME: ("basename", STRING_ADAPTER),
    KEY_HASH: ("hash", STRING_ADAPTER),
    KEY_MAX_AGE: ("max_age", UINT32_ADAPTER),
    KEY_SHARE_LIMIT: ("share_limit", UINT32_ADAPTER),
    KEY_SHARE_COUNT: ("share_count", UINT32_ADAPTER),
}
