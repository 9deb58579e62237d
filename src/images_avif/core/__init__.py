"""Core utilities and shared components for the AVIF converter."""

from .keys import AVIF_EXTENSION, decode_key, derive_target_key
from .formats import TARGET_LOADER_PREFIXES, UNKNOWN_FORMAT, detect_format, is_already_target
from .profile import (
    AVIF_CONTENT_TYPE,
    AVIF_PROFILE,
    ChromaSubsampling,
    CompressionCodec,
    EncodeProfile,
    EncoderBackend,
)
from .logging_config import get_logger, setup_logger
from .exceptions import (
    ConfigurationError,
    ConversionError,
    ConversionStage,
    DecodeError,
    EncodeError,
    FetchError,
    FormatMetadataReadError,
    ImagesAvifError,
    InvalidEventError,
    KeyDecodeError,
    UploadError,
)
from .models import ConversionRequest, ConversionResult, ConversionStatus
from .results import build_converted, build_skipped, to_payload

__all__ = [
    "AVIF_EXTENSION",
    "decode_key",
    "derive_target_key",
    "TARGET_LOADER_PREFIXES",
    "UNKNOWN_FORMAT",
    "detect_format",
    "is_already_target",
    "AVIF_CONTENT_TYPE",
    "AVIF_PROFILE",
    "ChromaSubsampling",
    "CompressionCodec",
    "EncodeProfile",
    "EncoderBackend",
    "setup_logger",
    "get_logger",
    "ImagesAvifError",
    "ConfigurationError",
    "InvalidEventError",
    "FormatMetadataReadError",
    "ConversionStage",
    "ConversionError",
    "KeyDecodeError",
    "FetchError",
    "DecodeError",
    "EncodeError",
    "UploadError",
    "ConversionRequest",
    "ConversionResult",
    "ConversionStatus",
    "build_converted",
    "build_skipped",
    "to_payload",
]
