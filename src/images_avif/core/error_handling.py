# src/images_avif/core/error_handling.py

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Type

from botocore.exceptions import ClientError as BotocoreClientError

from .exceptions import ConversionError, FetchError, ImagesAvifError

NOT_FOUND_S3_ERROR_CODES = ("NoSuchKey", "NoSuchBucket", "NotFound", "404")


def is_not_found_error(exc: BaseException) -> bool:
    """
    Tell whether a storage error means the object or bucket does not exist.

    Only botocore ``ClientError`` carries an error code; any other exception
    is treated as a transport failure.
    """
    if isinstance(exc, BotocoreClientError):
        error_code = exc.response.get("Error", {}).get("Code")
        return str(error_code) in NOT_FOUND_S3_ERROR_CODES
    return False


@contextmanager
def stage_error_handler(
    error_cls: Type[ConversionError],
    message: str,
    key: Optional[str] = None,
) -> Iterator[None]:
    """
    Wrap a conversion stage so collaborator errors surface as ``error_cls``.

    Errors already classified by the converter propagate unchanged. Anything
    else is logged with its traceback and re-raised as ``error_cls`` with the
    original exception chained as ``__cause__``.

    Args:
        error_cls: Stage error to raise (``FetchError``, ``UploadError``...)
        message: Human readable description naming the failing stage
        key: Object key being processed, attached to the raised error
    """
    logger = logging.getLogger(__name__ + "." + error_cls.__name__)
    try:
        yield
    except ImagesAvifError:
        raise
    except Exception as e:
        logger.error(f"{message}: {e}", exc_info=True)
        if error_cls is FetchError:
            raise FetchError(
                f"{message}: {e}", key=key, not_found=is_not_found_error(e)
            ) from e
        raise error_cls(f"{message}: {e}", key=key) from e
