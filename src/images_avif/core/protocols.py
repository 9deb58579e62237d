"""Protocol definitions for dependency injection and testability."""

from typing import Any, Dict, Protocol

from .profile import EncodeProfile


class S3ClientProtocol(Protocol):
    """Protocol for the S3 client operations the converter uses."""

    def get_object(self, Bucket: str, Key: str) -> Dict[str, Any]:
        """Get object from S3."""
        ...

    def put_object(
        self,
        Bucket: str,
        Key: str,
        Body: bytes,
        ContentType: str,
        ContentLength: int,
        ChecksumAlgorithm: str,
    ) -> Dict[str, Any]:
        """Put object to S3."""
        ...


class ObjectStorageProtocol(Protocol):
    """Protocol for fetching and writing whole objects."""

    def fetch(self, bucket: str, key: str) -> bytes:
        """Read the full object body into memory."""
        ...

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        checksum_algorithm: str = "SHA256",
    ) -> Dict[str, Any]:
        """Write ``body`` as a new object."""
        ...


class ImageCodecProtocol(Protocol):
    """Protocol for decoding and encoding images."""

    def decode(self, image_bytes: bytes) -> Any:
        """Decode bytes into an image handle."""
        ...

    def read_format_metadata(self, image: Any) -> str:
        """Return the loader label of a decoded image."""
        ...

    def encode(self, image: Any, profile: EncodeProfile) -> bytes:
        """Encode an image handle with the given profile."""
        ...

    def release(self, image: Any) -> None:
        """Free resources held by an image handle."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        ...
