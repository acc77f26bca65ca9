from __future__ import annotations

from dragshift.runtime.config import (
    get_runtime_config,
    load_runtime_config,
    resolve_log_level_name,
    set_runtime_config,
)


def test_load_runtime_config_defaults() -> None:
    cfg = load_runtime_config(env={})
    assert cfg.logging.level_name == "INFO"
    assert cfg.logging.console_format == "text"
    assert cfg.logging.file_path is None
    assert cfg.logging.file_format == "json"
    assert cfg.diagnostics.enabled is True


def test_load_runtime_config_parses_overrides() -> None:
    cfg = load_runtime_config(
        env={
            "DRAGSHIFT_LOG_LEVEL": "debug",
            "DRAGSHIFT_LOG_FORMAT": "JSON",
            "DRAGSHIFT_LOG_FILE": "logs/reorder.log",
            "DRAGSHIFT_LOG_FILE_FORMAT": "yaml",
            "DRAGSHIFT_DIAGNOSTICS_ENABLED": "0",
        }
    )
    assert cfg.logging.level_name == "DEBUG"
    assert cfg.logging.console_format == "json"
    assert cfg.logging.file_path == "logs/reorder.log"
    assert cfg.logging.file_format == "json"
    assert cfg.diagnostics.enabled is False


def test_resolve_log_level_prefers_package_prefix() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "WARNING", "DRAGSHIFT_LOG_LEVEL": "ERROR"}) == "ERROR"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"


def test_set_runtime_config_is_returned_by_getter() -> None:
    cfg = load_runtime_config(env={"DRAGSHIFT_LOG_LEVEL": "ERROR"})
    set_runtime_config(cfg)
    assert get_runtime_config() is cfg
