"""
Configuration management.

Values come from a YAML file (section "client") and can be overridden
from the environment:
- SHISHUTSUKAN_URL: server base URL
- SHISHUTSUKAN_TIMEOUT: request timeout in seconds (unset = no timeout)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import yaml

DEFAULT_BASE_URL = "http://localhost:8000"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class ClientConfig:
    """Shishutsukan client configuration."""

    base_url: str = DEFAULT_BASE_URL
    # None leaves timeouts to the transport (requests waits indefinitely)
    timeout_seconds: float | None = None

    def validate(self) -> list[str]:
        """Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("client.base_url is required")
        else:
            parsed = urlparse(self.base_url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"client.base_url must be an http(s) URL, got {self.base_url!r}")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("client.timeout_seconds must be positive")

        return errors


def _parse_timeout(value: object, source: str) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"{source}: invalid timeout {value!r}") from e


def load_config(config_path: Path) -> ClientConfig:
    """
    Load configuration from YAML file.

    A missing file yields the defaults. Environment variables win over
    file values.
    """
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigValidationError(f"{config_path}: invalid YAML: {e}") from e
    else:
        data = {}

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"{config_path}: expected a mapping at top level, got {type(data).__name__}"
        )

    client_data = data.get("client") or {}
    if not isinstance(client_data, dict):
        raise ConfigValidationError(
            f"{config_path}: 'client' must be a mapping, got {type(client_data).__name__}"
        )

    base_url = os.environ.get("SHISHUTSUKAN_URL", client_data.get("base_url", DEFAULT_BASE_URL))

    timeout_env = os.environ.get("SHISHUTSUKAN_TIMEOUT", "")
    if timeout_env:
        timeout = _parse_timeout(timeout_env, "SHISHUTSUKAN_TIMEOUT")
    else:
        timeout = _parse_timeout(client_data.get("timeout_seconds"), str(config_path))

    return ClientConfig(base_url=base_url, timeout_seconds=timeout)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Shishutsukan client configuration
#
# Environment overrides: SHISHUTSUKAN_URL, SHISHUTSUKAN_TIMEOUT

client:
  base_url: "http://localhost:8000"   # Server URL (no trailing path)
  timeout_seconds: null               # Seconds; null = no client-side timeout
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(default_config)
