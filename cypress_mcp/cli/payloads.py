"""JSON shapes returned to callers of the CLI and the stdio server."""

import traceback
from typing import Any

from pydantic import ValidationError

from cypress_mcp.application.dispatcher import CommandResult
from cypress_mcp.domain.errors import CypressMCPError, ProcessExitedNonZeroError

INVALID_ARGUMENT_KIND = "InvalidArgument"
INTERNAL_ERROR_KIND = "InternalError"


def to_payload(result: CommandResult) -> Any:
    if isinstance(result, list):
        return [record.to_payload() for record in result]
    return result.to_payload()


def error_kind(error: BaseException) -> str:
    if isinstance(error, CypressMCPError):
        return error.kind.value
    if isinstance(error, ValidationError):
        return INVALID_ARGUMENT_KIND
    return INTERNAL_ERROR_KIND


def error_payload(error: BaseException, include_trace: bool = False) -> dict[str, Any]:
    """Describe a failure without requiring the trace to interpret it."""
    payload: dict[str, Any] = {"message": str(error), "kind": error_kind(error)}
    if isinstance(error, ProcessExitedNonZeroError):
        payload["result"] = error.record.to_payload()
    if include_trace:
        payload["trace"] = "".join(traceback.format_exception(error))
    return payload
