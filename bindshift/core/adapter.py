"""Adapter from validator violations to framework error sinks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .errors import DEFAULT_ERROR_CODE, ErrorSink
from .registry import ValidatorRegistry
from .violations import Validator

logger = logging.getLogger(__name__)


class ValidatorAdapter:
    """Run a validator and record each violation on an error sink.

    ``source`` is either a :class:`ValidatorRegistry`, in which case the
    validator is looked up by the candidate's runtime type, or a single
    validator callable that is applied to every candidate.

    Every violation becomes exactly one record, in the order the validator
    emitted them. Records with a field path go through ``add_field_error``;
    the rest are global errors. The violation description is used as the
    message verbatim. Exceptions raised by the validator propagate unchanged.
    """

    def __init__(
        self,
        source: ValidatorRegistry | Validator,
        *,
        error_code: str = DEFAULT_ERROR_CODE,
    ) -> None:
        if isinstance(source, ValidatorRegistry):
            self._registry: ValidatorRegistry | None = source
            self._resolve: Callable[[Any], Validator] = lambda candidate: source.get(type(candidate))
        elif callable(source):
            self._registry = None
            self._resolve = lambda candidate: source
        else:
            raise TypeError(f"Expected a ValidatorRegistry or a validator callable, got {source!r}")
        self.error_code = error_code

    def supports(self, candidate_type: type) -> bool:
        if self._registry is None:
            return True
        return self._registry.supports(candidate_type)

    def resolve(self, candidate: Any) -> Validator:
        return self._resolve(candidate)

    def validate(self, candidate: Any, sink: ErrorSink) -> None:
        if candidate is None:
            raise TypeError("Cannot validate None")

        validator = self.resolve(candidate)
        violations = list(validator(candidate))
        logger.debug(
            "Validated %s: %d violation(s)",
            type(candidate).__qualname__,
            len(violations),
        )

        for violation in violations:
            if violation.is_global:
                sink.add_global_error(self.error_code, violation.description)
            else:
                sink.add_field_error(
                    violation.field,
                    self.error_code,
                    violation.description,
                    violation.value,
                )


__all__ = ["ValidatorAdapter"]
