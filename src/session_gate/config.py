"""
Gateway configuration: defaults, then ~/.session-gate/config.json, then
SESSION_GATE_* environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from session_gate.errors import ConfigError

CONFIG_FILE = Path.home() / ".session-gate" / "config.json"
ENV_PREFIX = "SESSION_GATE_"

_ENV_FIELDS = ("host", "port", "log_level", "socketio_path", "cors_origins", "reply_timeout")


class GatewayConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8765, ge=0, le=65535)
    log_level: str = "INFO"
    socketio_path: str = "socket.io"
    cors_allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    reply_timeout: float = Field(default=2.0, gt=0)  # client-side wait for an error reply

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


def _load_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def _load_env(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for name in _ENV_FIELDS:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None:
            continue
        if name == "cors_origins":
            values["cors_allowed_origins"] = [o.strip() for o in raw.split(",") if o.strip()]
        else:
            values[name] = raw
    return values


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> GatewayConfig:
    """Build the effective config. Keyword overrides set to None are ignored."""
    values = _load_file(path or CONFIG_FILE)
    values.update(_load_env(os.environ if environ is None else environ))
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return GatewayConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
