"""Error records and the sinks that collect them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

DEFAULT_ERROR_CODE = "invalid"


@dataclass(frozen=True)
class ErrorRecord:
    code: str
    message: str
    field: str | None = None
    rejected_value: Any = None

    @property
    def is_global(self) -> bool:
        return self.field is None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "field": self.field, "message": self.message}


class ErrorSink(Protocol):
    """The narrow surface the adapter writes to."""

    def add_field_error(
        self,
        field: str,
        code: str,
        message: str,
        rejected_value: Any = None,
    ) -> None: ...

    def add_global_error(self, code: str, message: str) -> None: ...


@dataclass
class BindingResult:
    """Ordered, append-only collection of errors for one bound object.

    Records keep the order they were added in. Nothing here removes or
    replaces records; callers that want a fresh result create a new one.
    """

    object_name: str
    _errors: list[ErrorRecord] = field(default_factory=list, repr=False)

    def add_field_error(
        self,
        field: str,
        code: str,
        message: str,
        rejected_value: Any = None,
    ) -> None:
        self._errors.append(
            ErrorRecord(code=code, message=message, field=field, rejected_value=rejected_value)
        )

    def add_global_error(self, code: str, message: str) -> None:
        self._errors.append(ErrorRecord(code=code, message=message))

    @property
    def all_errors(self) -> list[ErrorRecord]:
        return list(self._errors)

    @property
    def field_errors(self) -> list[ErrorRecord]:
        return [record for record in self._errors if not record.is_global]

    @property
    def global_errors(self) -> list[ErrorRecord]:
        return [record for record in self._errors if record.is_global]

    def get_field_errors(self, field: str) -> list[ErrorRecord]:
        return [record for record in self._errors if record.field == field]

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def messages(self) -> list[str]:
        return [record.message for record in self._errors]

    def to_dict(self) -> dict[str, Any]:
        return {
            "object_name": self.object_name,
            "valid": not self._errors,
            "errors": [record.to_dict() for record in self._errors],
        }

    def __len__(self) -> int:
        return len(self._errors)


__all__ = ["DEFAULT_ERROR_CODE", "BindingResult", "ErrorRecord", "ErrorSink"]
