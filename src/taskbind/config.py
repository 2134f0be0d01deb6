"""Load and validate the optional ``taskbind.yaml`` configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]

from taskbind.artifacts.canonical_json import OUTPUT_FORMATS
from taskbind.resources.declaration import DEFAULT_WORKSPACE_ROOT

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_FILENAME = "taskbind.yaml"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_REASON_PARSE_ERROR = "CONFIG_PARSE_ERROR"
CONFIG_REASON_INVALID = "CONFIG_INVALID"


class ConfigError(ValueError):
    """Configuration validation error."""

    reason_code: str

    def __init__(self, message: str, reason_code: str = CONFIG_REASON_INVALID) -> None:
        super().__init__(message)
        self.reason_code = reason_code


@dataclass(frozen=True)
class BindConfig:
    """Normalized taskbind configuration."""

    workspace_root: str = DEFAULT_WORKSPACE_ROOT
    output_format: str = "json"
    log_level: str = "WARNING"
    path: Path | None = None


def config_path_for_root(root: Path) -> Path:
    """Return the config file location for a working root."""
    return root.resolve() / CONFIG_FILENAME


def load_config(root: Path) -> BindConfig:
    """Load config from ``root/taskbind.yaml``, or defaults when it is absent."""
    path = config_path_for_root(root)
    if not path.exists():
        return BindConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{CONFIG_FILENAME} parse error: {exc}", CONFIG_REASON_PARSE_ERROR) from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"{CONFIG_FILENAME} parse error: expected mapping at top level",
            CONFIG_REASON_PARSE_ERROR,
        )
    return config_from_dict(raw, path=path)


def config_from_dict(raw: dict[str, Any], path: Path | None = None) -> BindConfig:
    """Normalize a raw config mapping, rejecting unknown keys and values."""
    unknown = sorted(set(raw) - {"workspace_root", "output_format", "log_level"})
    if unknown:
        raise ConfigError(f"{CONFIG_FILENAME} has unknown keys: {', '.join(unknown)}")

    workspace_root = str(raw.get("workspace_root", DEFAULT_WORKSPACE_ROOT)).strip()
    if not workspace_root.startswith("/"):
        raise ConfigError(f"workspace_root must be an absolute path, got `{workspace_root}`")

    output_format = str(raw.get("output_format", "json")).strip().lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {OUTPUT_FORMATS}, got `{output_format}`")

    log_level = str(raw.get("log_level", "WARNING")).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got `{log_level}`")

    return BindConfig(
        workspace_root=workspace_root.rstrip("/") or "/",
        output_format=output_format,
        log_level=log_level,
        path=path,
    )
