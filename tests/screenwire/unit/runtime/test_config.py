from __future__ import annotations

from screenwire.runtime.config import load_config, resolve_log_level_name, trace_assembly_enabled


def test_load_config_defaults() -> None:
    config = load_config(env={})
    assert not config.trace_assembly
    assert config.log_level == "INFO"


def test_load_config_reads_prefixed_values() -> None:
    config = load_config(env={"SCREENWIRE_TRACE_ASSEMBLY": "yes", "SCREENWIRE_LOG_LEVEL": " debug "})
    assert config.trace_assembly
    assert config.log_level == "DEBUG"


def test_log_level_falls_back_to_generic_variable() -> None:
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning"}) == "WARNING"
    assert resolve_log_level_name(env={"LOG_LEVEL": "warning", "SCREENWIRE_LOG_LEVEL": "error"}) == "ERROR"


def test_trace_flag_accepts_common_truthy_spellings() -> None:
    assert trace_assembly_enabled(env={"SCREENWIRE_TRACE_ASSEMBLY": "on"})
    assert not trace_assembly_enabled(env={"SCREENWIRE_TRACE_ASSEMBLY": "0"})
    assert not trace_assembly_enabled(env={})
