"""JSON API routes: /health, /api/v1/*."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ...core.adapter import ValidatorAdapter
from ...core.config import config_from_env
from ...core.errors import BindingResult
from ...core.exceptions import ValidatorNotFoundError
from ...core.registry import ValidatorRegistry
from ..binding import binding_result_to_detail
from ..config import get_settings
from ..logging import binding_result_to_loggable
from ..schemas import KindsResponse, ValidationResponse

settings = get_settings()
logger = logging.getLogger("uvicorn.error")
router = APIRouter()


def _registry(request: Request) -> ValidatorRegistry:
    return request.app.state.registry


@lru_cache(maxsize=128)
def _type_adapter(candidate_type: type) -> TypeAdapter:
    return TypeAdapter(candidate_type)


def _build_candidate(candidate_type: type, payload: dict[str, Any]) -> Any:
    try:
        return _type_adapter(candidate_type).validate_python(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False), body=payload) from exc


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/kinds", response_model=KindsResponse)
def list_kinds(request: Request) -> KindsResponse:
    return KindsResponse(kinds=_registry(request).list_types())


@router.post("/api/v1/validate/{kind}", response_model=ValidationResponse)
def validate_kind(
    kind: str,
    request: Request,
    payload: dict[str, Any] = Body(...),
    strict: bool = Query(False, description="Answer 422 when the candidate is invalid"),
) -> Any:
    registry = _registry(request)
    try:
        candidate_type = registry.get_type(kind)
    except ValidatorNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    candidate = _build_candidate(candidate_type, payload)
    result = BindingResult(object_name=kind.strip().lower())
    adapter = ValidatorAdapter(registry, error_code=config_from_env().error_code)
    adapter.validate(candidate, result)

    loggable = binding_result_to_loggable(result)
    if loggable is not None:
        logger.debug(
            "Validation result:\n%s",
            json.dumps(loggable, ensure_ascii=False, indent=2),
        )

    if strict and result.has_errors:
        raise HTTPException(status_code=422, detail=binding_result_to_detail(result))
    return result.to_dict()
