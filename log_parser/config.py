"""Configuration — frozen dataclass built from defaults, YAML and env vars."""

import logging
import os
from dataclasses import dataclass, replace

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "LOG_PARSER_CONFIG"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class Config:
    show_banner: bool = True
    log_level: str = "WARNING"


def _parse_bool(value: object, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid boolean value %r", value)
    return default


def _load_yaml(path: str) -> dict:
    """Read a YAML mapping from *path*; missing or invalid files give {}."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s, using defaults: %s", path, e)
        return {}

    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    return data


def load_config(config_path: str | None = None) -> Config:
    """Build Config from an optional YAML file, then environment overrides."""
    config = Config()

    path = config_path or os.environ.get(CONFIG_PATH_ENV)
    if path:
        data = _load_yaml(path)
        if "show_banner" in data:
            config = replace(config, show_banner=_parse_bool(data["show_banner"], config.show_banner))
        if "log_level" in data:
            config = replace(config, log_level=str(data["log_level"]).upper())

    if "LOG_PARSER_SHOW_BANNER" in os.environ:
        config = replace(
            config,
            show_banner=_parse_bool(os.environ["LOG_PARSER_SHOW_BANNER"], config.show_banner),
        )
    if "LOG_PARSER_LOG_LEVEL" in os.environ:
        config = replace(config, log_level=os.environ["LOG_PARSER_LOG_LEVEL"].upper())

    return config
