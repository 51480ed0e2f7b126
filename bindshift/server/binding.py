"""Render binding results in FastAPI's validation error shape."""

from __future__ import annotations

from typing import Any

from ..core.errors import BindingResult, ErrorRecord


def error_record_to_detail(record: ErrorRecord) -> dict[str, Any]:
    loc: list[str] = ["body"]
    if record.field:
        loc.extend(part for part in record.field.split(".") if part)
    return {"loc": loc, "msg": record.message, "type": record.code}


def binding_result_to_detail(result: BindingResult) -> list[dict[str, Any]]:
    return [error_record_to_detail(record) for record in result.all_errors]


__all__ = ["binding_result_to_detail", "error_record_to_detail"]
