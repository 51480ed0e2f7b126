"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import DEFAULT_ERROR_CODE


@dataclass(frozen=True)
class CoreConfig:
    error_code: str = DEFAULT_ERROR_CODE


def config_from_env() -> CoreConfig:
    error_code = (os.getenv("BINDSHIFT_ERROR_CODE") or "").strip()
    return CoreConfig(error_code=error_code or DEFAULT_ERROR_CODE)


__all__ = ["CoreConfig", "config_from_env"]
