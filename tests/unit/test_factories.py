"""Tests for configuration and runtime construction."""

import logging
from unittest.mock import patch

import pytest

from images_avif.core.config import ConverterConfig
from images_avif.core.exceptions import ConfigurationError
from images_avif.core.factories import (
    CodecFactory,
    ConverterRuntime,
    LoggerFactory,
    RuntimeFactory,
    S3ClientFactory,
)
from images_avif.core.services import ConversionService
from images_avif.testing.fakes import FakeImageCodec, FakeLogger, FakeS3Client


class TestConverterConfig:
    def test_defaults(self):
        config = ConverterConfig.from_env({})
        assert config.aws_region is None
        assert config.s3_endpoint_url is None
        assert config.log_level == "INFO"
        assert config.log_format == "structured"
        assert config.target_extension == ".avif"
        assert config.register_heif_opener is True

    def test_reads_environment(self):
        config = ConverterConfig.from_env(
            {
                "AWS_REGION": "eu-west-1",
                "S3_ENDPOINT_URL": "http://localhost:4566",
                "LOG_LEVEL": "debug",
                "LOG_FORMAT": "SIMPLE",
                "IMAGES_AVIF_HEIF_INPUT": "false",
            }
        )
        assert config.aws_region == "eu-west-1"
        assert config.s3_endpoint_url == "http://localhost:4566"
        assert config.log_level == "DEBUG"
        assert config.log_format == "simple"
        assert config.register_heif_opener is False

    def test_empty_values_mean_unset(self):
        config = ConverterConfig.from_env({"AWS_REGION": "", "S3_ENDPOINT_URL": ""})
        assert config.aws_region is None
        assert config.s3_endpoint_url is None

    @pytest.mark.parametrize("env", [{"LOG_LEVEL": "LOUD"}, {"LOG_FORMAT": "xml"}])
    def test_invalid_values_raise_configuration_error(self, env):
        with pytest.raises(ConfigurationError, match="invalid converter configuration"):
            ConverterConfig.from_env(env)


class TestLoggerFactory:
    def test_configured_format_wins_over_environment(self):
        config = ConverterConfig(log_level="DEBUG", log_format="simple")
        with patch.dict("os.environ", {"LOG_FORMAT": "structured"}):
            logger = LoggerFactory.create_logger(config, name="test-avif-factory-logger")

        handler = logger.logger.handlers[0]
        assert logger.logger.level == logging.DEBUG
        assert "%(filename)s" not in handler.formatter._fmt


class TestS3ClientFactory:
    def test_passes_region_and_endpoint(self):
        config = ConverterConfig(aws_region="us-east-2", s3_endpoint_url="http://localhost:9000")
        with patch("images_avif.core.factories.boto3.Session") as mock_session:
            S3ClientFactory.create_s3_client(config)

        mock_session.assert_called_once_with(region_name="us-east-2")
        _, kwargs = mock_session.return_value.client.call_args
        assert kwargs["endpoint_url"] == "http://localhost:9000"


class TestCodecFactory:
    def test_registers_heif_opener_when_enabled(self):
        with patch("images_avif.core.factories.ensure_avif_support"), patch(
            "images_avif.core.factories.register_heif_support"
        ) as mock_register:
            CodecFactory.create_codec(ConverterConfig(register_heif_opener=True))
            mock_register.assert_called_once()

    def test_skips_heif_opener_when_disabled(self):
        with patch("images_avif.core.factories.ensure_avif_support"), patch(
            "images_avif.core.factories.register_heif_support"
        ) as mock_register:
            CodecFactory.create_codec(ConverterConfig(register_heif_opener=False))
            mock_register.assert_not_called()

    def test_missing_avif_support_is_fatal(self):
        with patch(
            "images_avif.core.factories.ensure_avif_support",
            side_effect=ConfigurationError("no AVIF"),
        ):
            with pytest.raises(ConfigurationError):
                RuntimeFactory.create_runtime(
                    ConverterConfig(), s3_client=FakeS3Client(), logger=FakeLogger()
                )


class TestRuntimeFactory:
    def test_uses_given_collaborators(self):
        s3 = FakeS3Client()
        codec = FakeImageCodec()
        logger = FakeLogger()

        runtime = RuntimeFactory.create_runtime(
            ConverterConfig(), s3_client=s3, codec=codec, logger=logger
        )

        assert isinstance(runtime, ConverterRuntime)
        assert runtime.s3_client is s3
        assert runtime.codec is codec
        assert runtime.logger is logger
        assert isinstance(runtime.service, ConversionService)
        assert logger.get_logs("INFO")[-1]["message"] == (
            "S3 client and image codec initialized successfully"
        )

    def test_reads_config_from_environment(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "WARNING"}):
            runtime = RuntimeFactory.create_runtime(
                s3_client=FakeS3Client(), codec=FakeImageCodec(), logger=FakeLogger()
            )
        assert runtime.config.log_level == "WARNING"

    def test_s3_client_failure_is_configuration_error(self):
        with patch(
            "images_avif.core.factories.S3ClientFactory.create_s3_client",
            side_effect=ValueError("Invalid endpoint: nope"),
        ):
            with pytest.raises(ConfigurationError, match="unable to create S3 client"):
                RuntimeFactory.create_runtime(
                    ConverterConfig(), codec=FakeImageCodec(), logger=FakeLogger()
                )
