"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "DEFAULT_ERROR_CODE": ("bindshift.core.errors", "DEFAULT_ERROR_CODE"),
    "BindingResult": ("bindshift.core.errors", "BindingResult"),
    "BindshiftError": ("bindshift.core.exceptions", "BindshiftError"),
    "CoreConfig": ("bindshift.core.config", "CoreConfig"),
    "ErrorRecord": ("bindshift.core.errors", "ErrorRecord"),
    "ErrorSink": ("bindshift.core.errors", "ErrorSink"),
    "FieldValidator": ("bindshift.core.constraints", "FieldValidator"),
    "Validator": ("bindshift.core.violations", "Validator"),
    "ValidatorAdapter": ("bindshift.core.adapter", "ValidatorAdapter"),
    "ValidatorNotFoundError": ("bindshift.core.exceptions", "ValidatorNotFoundError"),
    "ValidatorRegistry": ("bindshift.core.registry", "ValidatorRegistry"),
    "Violation": ("bindshift.core.violations", "Violation"),
    "config_from_env": ("bindshift.core.config", "config_from_env"),
    "default_registry": ("bindshift.core.api", "default_registry"),
    "get_validator": ("bindshift.core.api", "get_validator"),
    "list_validated_types": ("bindshift.core.api", "list_validated_types"),
    "register_validator": ("bindshift.core.api", "register_validator"),
    "validate": ("bindshift.core.api", "validate"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
