from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from psi.errors import PsiConfigError
from psi.recursion import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING
from psi.types.psi_list import DEFAULT_MAX_CAPACITY as DEFAULT_MAX_LIST_CAPACITY


# Defaults
DEFAULT_PROMPT = "psi> "
DEFAULT_INPUT_BUFFER_SIZE = 1024
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class PsiConfig:
    prompt: str = DEFAULT_PROMPT
    input_buffer_size: int = DEFAULT_INPUT_BUFFER_SIZE
    max_depth: int = DEFAULT_MAX_DEPTH
    max_list_capacity: int = DEFAULT_MAX_LIST_CAPACITY
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def max_input_bytes(self) -> int:
        # One byte of the buffer is reserved for the terminator
        return self.input_buffer_size - 1


def int_from_env(var: str, default: int, minimum: int = 1, maximum: int | None = None) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise PsiConfigError(f"{var} must be an integer, got {raw!r}")
    if value < minimum:
        raise PsiConfigError(f"{var} must be at least {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise PsiConfigError(f"{var} must be at most {maximum}, got {value}")
    return value


def log_level_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    name = raw.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise PsiConfigError(f"{var} is not a logging level: {raw!r}")
    return name


def load_config() -> PsiConfig:
    return PsiConfig(
        prompt=os.environ.get("PSI_PROMPT", DEFAULT_PROMPT),
        # Room for at least one character plus the terminator
        input_buffer_size=int_from_env("PSI_INPUT_BUFFER_SIZE", DEFAULT_INPUT_BUFFER_SIZE, minimum=2),
        max_depth=int_from_env("PSI_MAX_DEPTH", DEFAULT_MAX_DEPTH, maximum=MAX_DEPTH_CEILING),
        max_list_capacity=int_from_env("PSI_MAX_LIST_CAPACITY", DEFAULT_MAX_LIST_CAPACITY, minimum=4),
        log_level=log_level_from_env("PSI_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
