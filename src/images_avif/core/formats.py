"""Source format detection for decoded images."""

from typing import Any, Optional, Tuple, Union

from .exceptions import FormatMetadataReadError
from .observability import LogContext
from .protocols import ImageCodecProtocol, LoggerProtocol

UNKNOWN_FORMAT = "unknown"

# Pillow labels for the HEIF container family, AVIF included
TARGET_LOADER_PREFIXES = ("AVIF", "HEIF")


def detect_format(
    codec: ImageCodecProtocol,
    image: Any,
    logger: LoggerProtocol,
    context: Optional[LogContext] = None,
) -> str:
    """
    Read the loader label the codec reports for a decoded image.

    A failure to read the label does not abort the conversion: it is logged
    as a warning and ``UNKNOWN_FORMAT`` is returned so the image still gets
    encoded.
    """
    try:
        label = codec.read_format_metadata(image)
    except FormatMetadataReadError as e:
        logger.warning(f"Failed to get image format metadata: {e}", context)
        return UNKNOWN_FORMAT

    logger.info(f"Detected loader: {label}", context)
    return label


def is_already_target(
    label: str, prefix: Union[str, Tuple[str, ...]] = TARGET_LOADER_PREFIXES
) -> bool:
    """
    Tell whether a loader label belongs to the target codec family.

    Matching is by prefix so loader variants such as ``AVIFS`` are covered.
    HEIC and other HEIF sources count as the target family and are not
    re-encoded. Matching is case-sensitive.
    """
    return label.startswith(prefix)
