"""
Configuration loading and logging setup.

Configuration lives in an optional ``schema-translate.yaml`` file. Missing
sections fall back to DEFAULT_CONFIG; the merged result is validated against
the bundled JSON schema.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from schema_translate.exceptions import InvalidConfigError

PACKAGE_ROOT = Path(__file__).parent

CONFIG_FILE_NAME = "schema-translate.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "docs": {
        "templates_dir": None,
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """
    Load configuration, merged over the defaults.

    Args:
        path: Configuration file, or a directory containing schema-translate.yaml.
            When None or when the file does not exist, defaults are returned.

    Returns:
        Merged configuration dictionary

    Raises:
        InvalidConfigError: If the file is not valid YAML or fails schema validation
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    config_file = Path(path)
    if config_file.is_dir():
        config_file = config_file / CONFIG_FILE_NAME
    if not config_file.exists():
        return config

    try:
        loaded = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"YAML parse error in {config_file}: {e}") from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(loaded).__name__}")

    _validate_config_schema(loaded)
    return _deep_merge(config, loaded)


def _validate_config_schema(config: dict) -> None:
    """Validate config against JSON schema."""
    schema_file = PACKAGE_ROOT / "schema/config.schema.json"
    schema = json.loads(schema_file.read_text())
    try:
        validate(instance=config, schema=schema)
    except ValidationError as e:
        path = ".".join(str(p) for p in e.path) or "root"
        raise InvalidConfigError(f"{e.message} (at '{path}')") from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def configure_logging(config: dict[str, Any] | None = None) -> None:
    """
    Apply the logging section of a configuration to the package logger.

    Args:
        config: Configuration from load_config (defaults when None)
    """
    settings = (config or DEFAULT_CONFIG).get("logging", {})
    level = settings.get("level", DEFAULT_CONFIG["logging"]["level"])
    fmt = settings.get("format", DEFAULT_CONFIG["logging"]["format"])

    package_logger = logging.getLogger("schema_translate")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        package_logger.addHandler(handler)
