"""Process-wide configuration for the converter."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError
from .keys import AVIF_EXTENSION

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")


class ConverterConfig(BaseModel):
    """Settings read once per process. The encode profile is not among them."""

    model_config = ConfigDict(frozen=True)

    aws_region: Optional[str] = None
    s3_endpoint_url: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "structured"
    target_extension: str = AVIF_EXTENSION
    register_heif_opener: bool = True

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("structured", "simple"):
            raise ValueError(f"unknown log format {value!r}")
        return fmt

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        """
        Build the configuration from environment variables.

        Environment Variables:
            AWS_REGION: Region for the S3 client (boto3 default chain if unset)
            S3_ENDPOINT_URL: Alternative S3 endpoint, e.g. a local emulator
            LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
            LOG_FORMAT: "structured" or "simple"
            IMAGES_AVIF_HEIF_INPUT: Accept HEIC/HEIF sources (default true)

        Raises:
            ConfigurationError: If a value is invalid
        """
        env = os.environ if environ is None else environ
        try:
            return cls(
                aws_region=env.get("AWS_REGION") or None,
                s3_endpoint_url=env.get("S3_ENDPOINT_URL") or None,
                log_level=env.get("LOG_LEVEL", "INFO"),
                log_format=env.get("LOG_FORMAT", "structured"),
                register_heif_opener=env.get("IMAGES_AVIF_HEIF_INPUT", "true").lower()
                in _TRUE_VALUES,
            )
        except ValidationError as e:
            raise ConfigurationError(f"invalid converter configuration: {e}") from e
