"""Exception taxonomy for the AVIF converter."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ImagesAvifError(Exception):
    """Base exception for all converter errors."""


class ConfigurationError(ImagesAvifError):
    """Error raised when the process-wide runtime cannot be built."""


class InvalidEventError(ImagesAvifError):
    """Error raised for an invocation event that names no single object."""


class FormatMetadataReadError(ImagesAvifError):
    """Error raised when the codec cannot report which loader it used.

    This is the only recovered condition: the format detector logs it and
    continues with an unknown label.
    """


class ConversionStage(str, Enum):
    """Stages of a conversion that can fail."""

    DECODE_KEY = "decode_key"
    FETCH = "fetch"
    DECODE = "decode"
    ENCODE = "encode"
    UPLOAD = "upload"


class ConversionError(ImagesAvifError):
    """Base class for a failed conversion, tagged with the failing stage."""

    stage: ConversionStage

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class KeyDecodeError(ConversionError):
    """The raw object key holds malformed escape sequences."""

    stage = ConversionStage.DECODE_KEY


class FetchError(ConversionError):
    """The source object could not be downloaded."""

    stage = ConversionStage.FETCH

    def __init__(
        self, message: str, key: Optional[str] = None, not_found: bool = False
    ):
        super().__init__(message, key)
        self.not_found = not_found


class DecodeError(ConversionError):
    """The source bytes are not a decodable image."""

    stage = ConversionStage.DECODE


class EncodeError(ConversionError):
    """The decoded image could not be encoded to AVIF."""

    stage = ConversionStage.ENCODE


class UploadError(ConversionError):
    """The encoded image could not be written back to storage."""

    stage = ConversionStage.UPLOAD
