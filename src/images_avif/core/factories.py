"""Factory classes for building the process-wide converter runtime."""

from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.config import Config as BotocoreConfig
from botocore.exceptions import BotoCoreError

from .codec import PillowImageCodec, ensure_avif_support, register_heif_support
from .config import ConverterConfig
from .exceptions import ConfigurationError
from .observability import StructuredLogger
from .protocols import ImageCodecProtocol, LoggerProtocol, S3ClientProtocol
from .services import ConversionService
from .storage import S3ObjectStorage


@dataclass(frozen=True)
class ConverterRuntime:
    """Collaborators initialized once per process and shared by invocations."""

    config: ConverterConfig
    s3_client: S3ClientProtocol
    codec: ImageCodecProtocol
    logger: LoggerProtocol
    service: ConversionService


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(config: ConverterConfig, name: str = "images-avif") -> StructuredLogger:
        """Create a structured logger honoring the configured level and format."""
        return StructuredLogger(name, level=config.log_level, format_type=config.log_format)


class S3ClientFactory:
    """Factory for creating S3 client instances."""

    @staticmethod
    def create_s3_client(config: ConverterConfig, **kwargs: Any) -> S3ClientProtocol:
        """Create S3 client; transport retries stay with botocore."""
        session = boto3.Session(region_name=config.aws_region)
        return session.client(  # type: ignore
            "s3",
            endpoint_url=config.s3_endpoint_url,
            config=BotocoreConfig(retries={"mode": "standard"}),
            **kwargs,
        )


class CodecFactory:
    """Factory for the image codec."""

    @staticmethod
    def create_codec(config: ConverterConfig) -> ImageCodecProtocol:
        ensure_avif_support()
        if config.register_heif_opener:
            register_heif_support()
        return PillowImageCodec()


class RuntimeFactory:
    """Factory for creating the complete converter runtime."""

    @staticmethod
    def create_runtime(
        config: Optional[ConverterConfig] = None,
        s3_client: Optional[S3ClientProtocol] = None,
        codec: Optional[ImageCodecProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
    ) -> ConverterRuntime:
        """
        Build every collaborator the handler needs.

        Missing collaborators are created from ``config`` (read from the
        environment when not given).

        Raises:
            ConfigurationError: If any collaborator cannot be created
        """
        if config is None:
            config = ConverterConfig.from_env()

        if logger is None:
            logger = LoggerFactory.create_logger(config)

        if s3_client is None:
            try:
                s3_client = S3ClientFactory.create_s3_client(config)
            except (BotoCoreError, ValueError) as e:
                raise ConfigurationError(f"unable to create S3 client: {e}") from e

        if codec is None:
            try:
                codec = CodecFactory.create_codec(config)
            except ImportError as e:
                raise ConfigurationError(f"unable to load image codec: {e}") from e

        service = ConversionService(
            storage=S3ObjectStorage(s3_client),
            codec=codec,
            logger=logger,
            target_extension=config.target_extension,
        )
        logger.info("S3 client and image codec initialized successfully")

        return ConverterRuntime(
            config=config,
            s3_client=s3_client,
            codec=codec,
            logger=logger,
            service=service,
        )
