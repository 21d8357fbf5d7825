"""
FuelModel DTO for Fuel catalog entries.

Represents a single model record exactly as served by the Fuel ``models``
listing endpoint and as stored in the local cache file. Both sides share the
same wire format, so one codec covers page decoding and cache persistence.

External dependencies
---------------------
- Pydantic v2 ``BaseModel``/``TypeAdapter`` for validation and JSON dumping.

Failure modes
-------------
- ``decode_catalog`` raises :class:`FuelError` with ``ErrorCode.DECODE`` for
  malformed JSON, a non-array payload, a missing required field or a wrongly
  typed value. Unknown extra keys are ignored.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter, ValidationError

from ..errors import ErrorCode, FuelError


class FuelModel(BaseModel):
    """A single catalog entry.

    Validation is strict: a value of the wrong JSON type (``"5"`` for a
    count, ``1`` for ``private``) is rejected rather than coerced.
    Timestamps are opaque strings and are never parsed. ``tags`` and
    ``categories`` keep the order received and default to empty lists.
    Equality is structural over all fields.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore", strict=True)

    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
    name: str
    owner: str
    description: str
    likes: NonNegativeInt
    downloads: NonNegativeInt
    filesize: NonNegativeInt
    upload_date: str
    modify_date: str
    license_id: NonNegativeInt
    license_name: str
    license_url: str
    license_image: str
    permission: NonNegativeInt
    url_name: str
    private: bool
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary using wire field names."""
        return self.model_dump(by_alias=True, mode="json")


_CATALOG = TypeAdapter(List[FuelModel])


def decode_catalog(
    data: Union[bytes, str], *, url: Optional[str] = None, page: Optional[int] = None
) -> List[FuelModel]:
    """Decode a JSON array of records into ``FuelModel`` instances.

    Args:
        data: Raw response body or cache file contents.
        url: Optional source location, attached to the error for diagnostics.
        page: Optional page number, attached to the error for diagnostics.

    Raises:
        FuelError: ``ErrorCode.DECODE`` when the payload does not validate.
    """
    try:
        return _CATALOG.validate_json(data)
    except ValidationError as e:
        raise FuelError(
            code=ErrorCode.DECODE,
            message=f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
            url=url,
            page=page,
            raw=e,
        ) from e


def encode_catalog(models: Sequence[FuelModel]) -> bytes:
    """Encode records as a pretty-printed JSON array (2-space indent, wire names)."""
    return _CATALOG.dump_json(list(models), indent=2, by_alias=True)


__all__ = ["FuelModel", "decode_catalog", "encode_catalog"]
