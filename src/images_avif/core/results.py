"""Mapping from orchestrator outcomes to caller-visible results."""

from typing import Any, Dict, Optional

from .models import ConversionResult, ConversionStatus

SKIPPED_MESSAGE = "Image is already in AVIF format. Skipping conversion."


def build_converted(original_key: str, new_key: str) -> ConversionResult:
    """Result for an object written to ``new_key``."""
    return ConversionResult(
        status=ConversionStatus.CONVERTED,
        original_key=original_key,
        new_key=new_key,
    )


def build_skipped(
    original_key: str, message: Optional[str] = SKIPPED_MESSAGE
) -> ConversionResult:
    """Result for a source that is already AVIF; no object is written."""
    return ConversionResult(
        status=ConversionStatus.SKIPPED_ALREADY_AVIF,
        original_key=original_key,
        message=message or None,
    )


def to_payload(result: ConversionResult) -> Dict[str, Any]:
    """
    Serialize a result for the invocation runtime.

    Fields use their wire names (``originalKey``, ``newKey``); ``newKey`` and
    ``message`` are omitted when empty.
    """
    payload = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not payload.get("message"):
        payload.pop("message", None)
    return payload
