"""Violation type produced by validators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class Violation:
    description: str
    field: str | None = None
    value: Any = None

    @property
    def is_global(self) -> bool:
        return not self.field


class Validator(Protocol):
    def __call__(self, candidate: Any) -> Sequence[Violation]: ...


__all__ = ["Validator", "Violation"]
