"""Diagnostics core package."""

from dragshift.diagnostics.config import (
    DiagnosticsConfig,
    create_diagnostic_hub,
    load_diagnostics_config,
)
from dragshift.diagnostics.event import DiagnosticEvent
from dragshift.diagnostics.hub import DiagnosticHub
from dragshift.diagnostics.json_codec import dumps_bytes, dumps_text
from dragshift.diagnostics.ring_buffer import RingBuffer

__all__ = [
    "DiagnosticEvent",
    "DiagnosticHub",
    "DiagnosticsConfig",
    "RingBuffer",
    "create_diagnostic_hub",
    "dumps_bytes",
    "dumps_text",
    "load_diagnostics_config",
]
