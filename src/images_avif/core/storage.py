"""S3-backed object storage used by the converter."""

from typing import Any, Dict

from .protocols import S3ClientProtocol

DEFAULT_CHECKSUM_ALGORITHM = "SHA256"


class S3ObjectStorage:
    """Whole-object reads and writes against an S3 client."""

    def __init__(self, s3_client: S3ClientProtocol):
        self._s3_client = s3_client

    def fetch(self, bucket: str, key: str) -> bytes:
        """Read the full object into memory and close the response stream."""
        response = self._s3_client.get_object(Bucket=bucket, Key=key)
        body = response["Body"]
        try:
            return body.read()
        finally:
            body.close()

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        checksum_algorithm: str = DEFAULT_CHECKSUM_ALGORITHM,
    ) -> Dict[str, Any]:
        """
        Write ``body`` to ``bucket/key``.

        ``ContentLength`` is always the exact length of ``body``; S3 computes
        and verifies ``checksum_algorithm`` over the same bytes.
        """
        return self._s3_client.put_object(
            Bucket=bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            ContentLength=len(body),
            ChecksumAlgorithm=checksum_algorithm,
        )
