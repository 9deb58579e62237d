"""Shared data models for the AVIF converter."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidEventError


class ConversionStatus(str, Enum):
    """Terminal status of a successful invocation."""

    CONVERTED = "CONVERTED"
    SKIPPED_ALREADY_AVIF = "SKIPPED_ALREADY_AVIF"


class ConversionRequest(BaseModel):
    """A single object to convert, as delivered by the invocation event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bucket: str = Field(alias="s3Bucket", min_length=1)
    key: str = Field(alias="s3Key", min_length=1)

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ConversionRequest":
        """
        Build a request from an invocation event.

        Accepts ``{"s3Bucket", "s3Key"}``, ``{"bucket", "key"}`` or an S3
        notification carrying exactly one record.

        Raises:
            InvalidEventError: If the event does not name exactly one object
        """
        if not isinstance(event, dict):
            raise InvalidEventError(f"event must be a mapping, got {type(event).__name__}")

        if "Records" in event:
            records = event["Records"] or []
            if len(records) != 1:
                raise InvalidEventError(
                    f"expected exactly one S3 record, got {len(records)}"
                )
            try:
                s3 = records[0]["s3"]
                event = {"s3Bucket": s3["bucket"]["name"], "s3Key": s3["object"]["key"]}
            except (KeyError, TypeError) as e:
                raise InvalidEventError(f"malformed S3 record: missing {e}") from e

        try:
            return cls.model_validate(event)
        except ValidationError as e:
            raise InvalidEventError(f"invalid conversion event: {e}") from e


class ConversionResult(BaseModel):
    """Caller-visible outcome of a successful invocation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: ConversionStatus
    original_key: str = Field(alias="originalKey")
    new_key: Optional[str] = Field(default=None, alias="newKey")
    message: Optional[str] = None
