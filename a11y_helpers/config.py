"""Defaults for the helpers, overridable through environment variables."""
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    attach_timeout_ms: int = 5000
    max_tabs: int = 20
    tab_delay_ms: int = 100
    name_max_length: int = 100
    log_level: str = "INFO"


def _int_from_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{key} must not be negative, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read A11Y_* variables from ``env`` (``os.environ`` by default)."""
    env = os.environ if env is None else env
    return Settings(
        attach_timeout_ms=_int_from_env(env, "A11Y_ATTACH_TIMEOUT_MS", Settings.attach_timeout_ms),
        max_tabs=_int_from_env(env, "A11Y_MAX_TABS", Settings.max_tabs),
        tab_delay_ms=_int_from_env(env, "A11Y_TAB_DELAY_MS", Settings.tab_delay_ms),
        name_max_length=_int_from_env(env, "A11Y_NAME_MAX_LENGTH", Settings.name_max_length),
        log_level=env.get("A11Y_LOG_LEVEL", Settings.log_level).upper(),
    )
