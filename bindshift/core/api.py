"""Stable public API facade for the bindshift core."""

from __future__ import annotations

from typing import Any

from .adapter import ValidatorAdapter
from .config import config_from_env
from .errors import BindingResult
from .registry import ValidatorRegistry
from .violations import Validator

_registry = ValidatorRegistry()


def default_registry() -> ValidatorRegistry:
    return _registry


def register_validator(candidate_type: type, validator: Validator, *, name: str | None = None) -> None:
    _registry.register(candidate_type, validator, name=name)


def get_validator(candidate_type: type) -> Validator:
    return _registry.get(candidate_type)


def list_validated_types() -> list[str]:
    return _registry.list_types()


def validate(
    candidate: Any,
    *,
    registry: ValidatorRegistry | None = None,
    sink: BindingResult | None = None,
    object_name: str | None = None,
) -> BindingResult:
    """Validate ``candidate`` and return the binding result holding its errors.

    Pass ``sink`` to append to an existing result instead of a new one.
    """
    config = config_from_env()
    adapter = ValidatorAdapter(registry or _registry, error_code=config.error_code)
    if sink is None:
        sink = BindingResult(object_name=object_name or type(candidate).__name__.lower())
    adapter.validate(candidate, sink)
    return sink


__all__ = [
    "default_registry",
    "get_validator",
    "list_validated_types",
    "register_validator",
    "validate",
]
