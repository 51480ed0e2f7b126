"""Explicit type-to-validator registry."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import ValidatorNotFoundError
from .violations import Validator


def _normalize_name(name: str) -> str:
    return str(name).strip().lower()


@dataclass
class ValidatorRegistry:
    validators: dict[type, Validator] = field(default_factory=dict)
    names: dict[str, type] = field(default_factory=dict)

    def register(self, candidate_type: type, validator: Validator, *, name: str | None = None) -> None:
        if not isinstance(candidate_type, type):
            raise TypeError(f"candidate_type must be a class, got {candidate_type!r}")
        if not callable(validator):
            raise TypeError(f"validator for {candidate_type.__qualname__} must be callable")
        normalized = _normalize_name(name or candidate_type.__name__)
        existing = self.names.get(normalized)
        if existing is not None and existing is not candidate_type:
            raise ValueError(
                f"Name {normalized!r} is already registered for {existing.__qualname__}"
            )

        # A type answers to one name; re-registering it drops the old one.
        for old_name in [key for key, value in self.names.items() if value is candidate_type]:
            del self.names[old_name]
        self.validators[candidate_type] = validator
        self.names[normalized] = candidate_type

    def get(self, candidate_type: type) -> Validator:
        # Subclasses inherit a base class validator unless they register their own.
        for klass in getattr(candidate_type, "__mro__", (candidate_type,)):
            validator = self.validators.get(klass)
            if validator is not None:
                return validator
        raise ValidatorNotFoundError(candidate_type)

    def supports(self, candidate_type: type) -> bool:
        try:
            self.get(candidate_type)
        except ValidatorNotFoundError:
            return False
        return True

    def get_type(self, name: str) -> type:
        normalized = _normalize_name(name)
        candidate_type = self.names.get(normalized)
        if candidate_type is None:
            raise ValidatorNotFoundError(normalized, f"No validator registered under name: {normalized}")
        return candidate_type

    def list_types(self) -> list[str]:
        return sorted(self.names.keys())


__all__ = ["ValidatorRegistry"]
