from typing import Any

from ...core.errors import BindingResult
from ..config import get_settings

_MESSAGE_LIMITS = {
    "low": 0,
    "medium": 3,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high"}


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _format_value(value: Any, *, limit: int = 80) -> str:
    text = repr(value)
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def binding_result_to_loggable(
    result: BindingResult,
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved = _normalize_verbosity(verbosity if verbosity is not None else settings.log_verbosity)
    data: dict[str, Any] = {
        "object_name": result.object_name,
        "valid": not result.has_errors,
        "errors_count": result.error_count,
    }
    if resolved == "low":
        return data

    if resolved == "high":
        data["errors"] = [
            {
                "code": record.code,
                "field": record.field,
                "message": record.message,
                "rejected_value": _format_value(record.rejected_value),
            }
            for record in result.all_errors
        ]
        return data

    messages = result.messages()
    limit = _MESSAGE_LIMITS[resolved]
    data["messages"] = messages[:limit]
    if len(messages) > limit:
        data["messages_truncated"] = len(messages) - limit
    return data
