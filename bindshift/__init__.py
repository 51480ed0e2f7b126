"""Public package entrypoint for bindshift.

bindshift turns validator violations into web framework error bindings. The
core adapter is framework-agnostic; a FastAPI server adapter is optional.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "BindingResult": ("bindshift.core", "BindingResult"),
    "DEFAULT_ERROR_CODE": ("bindshift.core", "DEFAULT_ERROR_CODE"),
    "ValidatorAdapter": ("bindshift.core", "ValidatorAdapter"),
    "ValidatorNotFoundError": ("bindshift.core", "ValidatorNotFoundError"),
    "ValidatorRegistry": ("bindshift.core", "ValidatorRegistry"),
    "Violation": ("bindshift.core", "Violation"),
    "app": ("bindshift.server.main", "app"),
    "create_app": ("bindshift.server.main", "create_app"),
    "register_validator": ("bindshift.core", "register_validator"),
    "validate": ("bindshift.core", "validate"),
}

try:
    __version__ = version("bindshift")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BindingResult",
    "DEFAULT_ERROR_CODE",
    "ValidatorAdapter",
    "ValidatorNotFoundError",
    "ValidatorRegistry",
    "Violation",
    "__version__",
    "app",
    "create_app",
    "register_validator",
    "validate",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
