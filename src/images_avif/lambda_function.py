"""AWS Lambda entry point.

The runtime is built when Lambda imports this module, i.e. once per cold
start, and reused by every warm invocation of the same process. A failure
while building it aborts the import and with it the process.
"""

from typing import Any, Dict

from .core.factories import RuntimeFactory
from .handler import handle_request

RUNTIME = RuntimeFactory.create_runtime()


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request_id = getattr(context, "aws_request_id", None)
    return handle_request(event, RUNTIME, request_id=request_id)
