"""Diagnostics capability configuration from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dragshift.diagnostics.hub import DiagnosticHub


def _raw(name: str, env: Mapping[str, str] | None) -> str | None:
    return os.getenv(name) if env is None else env.get(name)


def _flag(name: str, default: bool, env: Mapping[str, str] | None) -> bool:
    raw = _raw(name, env)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int, env: Mapping[str, str] | None) -> int:
    raw = _raw(name, env)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    enabled: bool = True
    buffer_capacity: int = 1_000
    category_allowlist: tuple[str, ...] = ()


def load_diagnostics_config(*, env: Mapping[str, str] | None = None) -> DiagnosticsConfig:
    allowlist_raw = _raw("DRAGSHIFT_DIAGNOSTICS_CATEGORY_ALLOWLIST", env) or ""
    return DiagnosticsConfig(
        enabled=_flag("DRAGSHIFT_DIAGNOSTICS_ENABLED", True, env),
        buffer_capacity=max(16, _int("DRAGSHIFT_DIAGNOSTICS_BUFFER_CAP", 1_000, env)),
        category_allowlist=tuple(
            item.strip().lower() for item in allowlist_raw.split(",") if item.strip()
        ),
    )


def create_diagnostic_hub(config: DiagnosticsConfig | None = None) -> DiagnosticHub:
    """Return a hub sized and enabled per configuration."""
    resolved = config if config is not None else load_diagnostics_config()
    return DiagnosticHub(
        capacity=resolved.buffer_capacity,
        enabled=resolved.enabled,
        category_allowlist=resolved.category_allowlist,
    )
