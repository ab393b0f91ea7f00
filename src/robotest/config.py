"""Harness configuration: YAML file values merged with CLI overrides."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from jsonschema import Draft7Validator

from robotest.cases.loader import HEADER_MODES
from robotest.core.errors import ConfigError
from robotest.policy.port import DEFAULT_AGENT

REPORT_ERROR_POLICIES = ("abort", "warn")

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "robots": {"type": "string", "minLength": 1},
        "cases": {"type": "string", "minLength": 1},
        "report": {"type": "boolean"},
        "report_dir": {"type": "string", "minLength": 1},
        "agent": {"type": "string", "minLength": 1},
        "header": {"enum": list(HEADER_MODES)},
        "workers": {"type": "integer", "minimum": 1},
        "on_report_error": {"enum": list(REPORT_ERROR_POLICIES)},
        "decider": {"type": "string", "minLength": 1},
    },
}
_validator = Draft7Validator(CONFIG_SCHEMA)

# YAML key -> HarnessConfig field
_FIELD_NAMES = {
    "robots": "robots_path",
    "cases": "cases_path",
    "report": "generate_report",
    "report_dir": "report_dir",
    "agent": "agent",
    "header": "header",
    "workers": "workers",
    "on_report_error": "on_report_error",
    "decider": "decider",
}
_PATH_KEYS = {"robots", "cases", "report_dir"}


@dataclass(frozen=True)
class HarnessConfig:
    robots_path: Optional[Path] = None
    cases_path: Optional[Path] = None
    generate_report: bool = False
    report_dir: Path = Path(".")
    agent: str = DEFAULT_AGENT
    header: str = "auto"
    workers: Optional[int] = None
    on_report_error: str = "abort"
    decider: Optional[str] = None

    def __post_init__(self) -> None:
        if self.header not in HEADER_MODES:
            raise ConfigError(f"header must be one of {', '.join(HEADER_MODES)}")
        if self.on_report_error not in REPORT_ERROR_POLICIES:
            raise ConfigError("on_report_error must be 'abort' or 'warn'")
        if self.workers is not None and self.workers < 1:
            raise ConfigError("workers must be a positive integer")

    def with_overrides(self, **overrides: Any) -> "HarnessConfig":
        """Return a copy where every non-``None`` override replaces the current value."""

        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_config(path: Union[str, Path]) -> HarnessConfig:
    """Load and validate a YAML harness configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    return HarnessConfig(**_to_fields(raw, config_path.parent))


def _to_fields(raw: Mapping[str, Any], base: Path) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in _PATH_KEYS:
            candidate = Path(value).expanduser()
            value = candidate if candidate.is_absolute() else base / candidate
        values[_FIELD_NAMES[key]] = value
    if "decider" in values:
        values["decider"] = _anchor_decider(values["decider"], base)
    return values


def _anchor_decider(spec: str, base: Path) -> str:
    source, sep, func_name = spec.rpartition(":")
    if not sep or not source:
        return spec
    candidate = Path(source).expanduser()
    if candidate.is_absolute():
        return spec
    return f"{base / candidate}:{func_name}"
