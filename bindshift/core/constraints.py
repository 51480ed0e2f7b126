"""Small field checks for assembling validators.

Each check is a plain callable ``(field_name, value) -> Violation | None``.
``FieldValidator`` runs a table of them against a candidate in declaration
order, so violations come out in a stable, predictable order.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .violations import Violation

FieldCheck = Callable[[str, Any], Violation | None]
ObjectCheck = Callable[[Any], Violation | None]

_MISSING = object()


def max_size(limit: int) -> FieldCheck:
    def check(name: str, value: Any) -> Violation | None:
        size = len(value)
        if size > limit:
            return Violation(f"{name} has size {size}, expected {limit} or less", field=name, value=value)
        return None

    return check


def min_size(limit: int) -> FieldCheck:
    def check(name: str, value: Any) -> Violation | None:
        size = len(value)
        if size < limit:
            return Violation(f"{name} has size {size}, expected {limit} or more", field=name, value=value)
        return None

    return check


def at_most(limit: Any) -> FieldCheck:
    def check(name: str, value: Any) -> Violation | None:
        if value > limit:
            return Violation(f"{name} got {value}, expected {limit} or less", field=name, value=value)
        return None

    return check


def at_least(limit: Any) -> FieldCheck:
    def check(name: str, value: Any) -> Violation | None:
        if value < limit:
            return Violation(f"{name} got {value}, expected {limit} or more", field=name, value=value)
        return None

    return check


def not_blank() -> FieldCheck:
    def check(name: str, value: Any) -> Violation | None:
        if value is None or not str(value).strip():
            return Violation(f"{name} must not be blank", field=name, value=value)
        return None

    return check


def read_field(candidate: Any, name: str) -> Any:
    """Resolve a dotted field path against attributes or mapping keys."""
    current = candidate
    for part in name.split("."):
        value = getattr(current, part, _MISSING)
        if value is _MISSING and isinstance(current, Mapping):
            value = current.get(part, _MISSING)
        if value is _MISSING:
            raise AttributeError(f"{type(current).__name__} has no field {part!r} (path {name!r})")
        current = value
    return current


@dataclass(frozen=True)
class FieldValidator:
    checks: Mapping[str, Sequence[FieldCheck]]
    object_checks: Sequence[ObjectCheck] = field(default_factory=tuple)

    def __call__(self, candidate: Any) -> list[Violation]:
        violations: list[Violation] = []
        for name, field_checks in self.checks.items():
            value = read_field(candidate, name)
            for check in field_checks:
                violation = check(name, value)
                if violation is not None:
                    violations.append(violation)
        for object_check in self.object_checks:
            violation = object_check(candidate)
            if violation is not None:
                violations.append(violation)
        return violations


__all__ = [
    "FieldCheck",
    "FieldValidator",
    "ObjectCheck",
    "at_least",
    "at_most",
    "max_size",
    "min_size",
    "not_blank",
    "read_field",
]
