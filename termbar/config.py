#!/usr/bin/env python3
"""
Defaults for termbar adapters, overridable through the environment.

    TERMBAR_MININTERVAL   minimum ms between two renders (default 100)
    TERMBAR_WIDTH         ASCII bar cells (default 10)
    TERMBAR_DISABLE       "1"/"true" silences all output
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_MININTERVAL_MS = 100
DEFAULT_WIDTH = 10

_TRUE = ("1", "true", "yes", "on")


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", key, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%d (negative); using %d", key, value, default)
        return default
    return value


@dataclass(frozen=True)
class ProgressConfig:
    mininterval: int = DEFAULT_MININTERVAL_MS
    width: int = DEFAULT_WIDTH
    disable: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProgressConfig":
        env = os.environ if environ is None else environ
        return cls(
            mininterval=_env_int(env, "TERMBAR_MININTERVAL", DEFAULT_MININTERVAL_MS),
            width=_env_int(env, "TERMBAR_WIDTH", DEFAULT_WIDTH),
            disable=env.get("TERMBAR_DISABLE", "").strip().lower() in _TRUE,
        )


def load_config() -> ProgressConfig:
    """Config for the current process environment (read on every call)."""
    return ProgressConfig.from_env()
