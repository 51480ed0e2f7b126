"""Typed exceptions raised by the bindshift core."""

from __future__ import annotations

from typing import Any


class BindshiftError(Exception):
    """Base exception for all bindshift errors."""


class ValidatorNotFoundError(BindshiftError, LookupError):
    """No validator is registered for the candidate's type."""

    def __init__(self, candidate_type: Any, message: str | None = None) -> None:
        name = getattr(candidate_type, "__qualname__", None) or str(candidate_type)
        super().__init__(message or f"No validator registered for type: {name}")
        self.candidate_type = candidate_type


__all__ = ["BindshiftError", "ValidatorNotFoundError"]
