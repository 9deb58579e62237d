"""Conversion orchestration for a single S3 object."""

from typing import Optional

from .codec import scoped_image
from .error_handling import stage_error_handler
from .exceptions import DecodeError, EncodeError, FetchError, UploadError
from .formats import detect_format, is_already_target
from .keys import AVIF_EXTENSION, decode_key, derive_target_key
from .models import ConversionRequest, ConversionResult
from .observability import LogContext, timed_stage
from .profile import AVIF_CONTENT_TYPE, AVIF_PROFILE, EncodeProfile
from .protocols import ImageCodecProtocol, LoggerProtocol, ObjectStorageProtocol
from .results import build_converted, build_skipped
from .storage import DEFAULT_CHECKSUM_ALGORITHM


class ConversionService:
    """Turns one storage reference into a converted, skipped or failed outcome.

    Stages run strictly in order: decode key, fetch, decode, detect format,
    then either skip or encode, derive the new key and upload. Any stage
    failure raises the matching ``ConversionError`` subclass with the
    collaborator error chained; nothing is retried.
    """

    def __init__(
        self,
        storage: ObjectStorageProtocol,
        codec: ImageCodecProtocol,
        logger: LoggerProtocol,
        profile: EncodeProfile = AVIF_PROFILE,
        target_extension: str = AVIF_EXTENSION,
    ):
        self._storage = storage
        self._codec = codec
        self._logger = logger
        self._profile = profile
        self._target_extension = target_extension

    def convert(
        self, request: ConversionRequest, log_context: Optional[LogContext] = None
    ) -> ConversionResult:
        """Convert the object named by ``request`` to AVIF."""
        context = (log_context or LogContext(component="conversion_service")).with_metadata(
            bucket=request.bucket
        )

        with timed_stage("decode_key", self._logger, context):
            src_key = decode_key(request.key)
        context = context.with_metadata(key=src_key)
        self._logger.info("Processing image", context)

        with timed_stage("fetch", self._logger, context), stage_error_handler(
            FetchError, "failed to get object from S3", key=src_key
        ):
            image_bytes = self._storage.fetch(request.bucket, src_key)
        # Trust what was read, not the reported ContentLength
        original_size = len(image_bytes)

        with timed_stage("decode", self._logger, context), stage_error_handler(
            DecodeError, "failed to decode image", key=src_key
        ):
            image = self._codec.decode(image_bytes)

        with scoped_image(self._codec, image):
            label = detect_format(
                self._codec, image, self._logger, context.with_operation("detect_format")
            )
            if is_already_target(label):
                result = build_skipped(src_key)
                self._logger.info(result.message or "Skipping conversion", context)
                return result

            with timed_stage("encode", self._logger, context), stage_error_handler(
                EncodeError, "failed to encode image to AVIF", key=src_key
            ):
                avif_bytes = self._codec.encode(image, self._profile)

        self._logger.info(
            "Successfully encoded to AVIF",
            context,
            original_size=original_size,
            new_size=len(avif_bytes),
            profile_version=self._profile.version,
        )

        new_key = derive_target_key(src_key, self._target_extension)
        upload_context = context.with_metadata(new_key=new_key)
        self._logger.info("Uploading converted image", upload_context)

        with timed_stage("upload", self._logger, upload_context), stage_error_handler(
            UploadError, "failed to upload AVIF image to S3", key=src_key
        ):
            self._storage.upload(
                request.bucket,
                new_key,
                avif_bytes,
                AVIF_CONTENT_TYPE,
                checksum_algorithm=DEFAULT_CHECKSUM_ALGORITHM,
            )

        return build_converted(src_key, new_key)
