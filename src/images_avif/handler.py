"""Invocation handler shared by the Lambda entry point and the CLI."""

from typing import Any, Dict, Optional

from .core import ConversionRequest, ConversionError, to_payload
from .core.factories import ConverterRuntime
from .core.observability import LogContext


def handle_request(
    event: Dict[str, Any],
    runtime: ConverterRuntime,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Convert the single object named by ``event``.

    Args:
        event: ``{"s3Bucket": ..., "s3Key": ...}`` or a one-record S3
            notification
        runtime: Process-wide collaborators
        request_id: Invocation id used as the log correlation id

    Returns:
        Serialized ``ConversionResult`` (``status``, ``originalKey`` and,
        when set, ``newKey`` and ``message``)

    Raises:
        InvalidEventError: If the event does not name exactly one object
        ConversionError: Subclass naming the failing stage
    """
    request = ConversionRequest.from_event(event)

    log_context = LogContext(component="handler")
    if request_id:
        log_context.correlation_id = request_id

    try:
        result = runtime.service.convert(request, log_context)
    except ConversionError as e:
        runtime.logger.error(
            f"Conversion failed at stage {e.stage.value}: {e}",
            log_context.with_metadata(bucket=request.bucket, key=e.key or request.key),
        )
        raise

    payload = to_payload(result)
    runtime.logger.info(
        "Conversion finished",
        log_context.with_metadata(**payload),
    )
    return payload
