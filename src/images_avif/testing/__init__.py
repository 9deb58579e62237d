"""Testing utilities and fakes for the AVIF converter."""

from .fakes import (
    FakeImage,
    FakeImageCodec,
    FakeS3Client,
    FakeLogger,
    S3Object,
    S3Bucket,
    create_test_image,
    setup_test_s3_environment,
)

__all__ = [
    "FakeImage",
    "FakeImageCodec",
    "FakeS3Client",
    "FakeLogger",
    "S3Object",
    "S3Bucket",
    "create_test_image",
    "setup_test_s3_environment",
]
