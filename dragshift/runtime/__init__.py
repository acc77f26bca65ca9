"""Runtime configuration, logging and session modules."""

from dragshift.runtime.config import (
    DiagnosticsConfig,
    RuntimeConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)
from dragshift.runtime.logging import configure_logging, setup_logging, shutdown_logging
from dragshift.runtime.session import KeyboardReorderSession, SessionState, lift_impact

__all__ = [
    "DiagnosticsConfig",
    "KeyboardReorderSession",
    "RuntimeConfig",
    "SessionState",
    "configure_logging",
    "get_runtime_config",
    "initialize_runtime_config",
    "lift_impact",
    "load_runtime_config",
    "set_runtime_config",
    "setup_logging",
    "shutdown_logging",
]
