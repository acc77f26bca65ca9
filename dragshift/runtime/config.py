"""Centralized runtime configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass

from dragshift.api.logging import LoggingConfig
from dragshift.diagnostics.config import DiagnosticsConfig, load_diagnostics_config


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    logging: LoggingConfig
    diagnostics: DiagnosticsConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar(
    "dragshift_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _log_format(raw: str, fallback: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else fallback


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the package-prefixed variable taking precedence."""
    value = _raw("DRAGSHIFT_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    file_path = _text("DRAGSHIFT_LOG_FILE", "", env=env)
    return RuntimeConfig(
        logging=LoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_log_format(_text("DRAGSHIFT_LOG_FORMAT", "text", env=env), "text"),
            file_path=file_path or None,
            file_format=_log_format(_text("DRAGSHIFT_LOG_FILE_FORMAT", "json", env=env), "json"),
        ),
        diagnostics=load_diagnostics_config(env=env),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "DiagnosticsConfig",
    "RuntimeConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
