"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from meshuninstall.errors import ConfigError
from meshuninstall.models.config import (
    DEFAULT_LABEL_KEY,
    DEFAULT_NAMESPACE,
    ClusterConfig,
    ControlPlaneConfig,
    LogConfig,
    OutputConfig,
    UninstallConfig,
)

_DNS1123_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]{0,61}[a-z0-9])?$")
_LABEL_NAME = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9_.]{0,61})?[A-Za-z0-9]$")
_LABEL_VALUE = re.compile(r"^(([A-Za-z0-9][-A-Za-z0-9_.]{0,61})?[A-Za-z0-9])?$")
_DNS1123_SUBDOMAIN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"MESHUNINSTALL_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def validate_namespace(value: str) -> str:
    if not _DNS1123_LABEL.match(value):
        raise ConfigError(f"Invalid namespace name: {value!r}", operation="config")
    return value


def validate_label_key(value: str) -> str:
    prefix, sep, name = value.rpartition("/")
    if sep and (len(prefix) > 253 or not _DNS1123_SUBDOMAIN.match(prefix)):
        raise ConfigError(f"Invalid label key prefix: {value!r}", operation="config")
    if not _LABEL_NAME.match(name):
        raise ConfigError(f"Invalid label key: {value!r}", operation="config")
    return value


def validate_label_value(value: str) -> str:
    if not _LABEL_VALUE.match(value):
        raise ConfigError(f"Invalid label value: {value!r}", operation="config")
    return value


def validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {sorted(valid)}", operation="config")
    return value.lower()


def validate_log_format(value: str) -> str:
    valid = {"console", "json"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log format: {value}. Must be one of {sorted(valid)}", operation="config")
    return value.lower()


def validate_config(config: UninstallConfig) -> UninstallConfig:
    """Re-run every field validator on an assembled config and return it."""
    validate_namespace(config.control_plane.namespace)
    validate_label_key(config.control_plane.label_key)
    validate_label_value(config.control_plane.label_value)
    validate_log_level(config.log.level)
    validate_log_format(config.log.format)
    return config


def load_config() -> UninstallConfig:
    """Load configuration from MESHUNINSTALL_* environment variables."""
    return UninstallConfig(
        cluster=ClusterConfig(
            kubeconfig=_env("KUBECONFIG", ""),
            context=_env("CONTEXT", ""),
            impersonate_user=_env("AS", ""),
            impersonate_group=_env("AS_GROUP", ""),
        ),
        control_plane=ControlPlaneConfig(
            namespace=validate_namespace(_env("NAMESPACE", DEFAULT_NAMESPACE)),
            label_key=validate_label_key(_env("LABEL_KEY", DEFAULT_LABEL_KEY)),
            label_value=validate_label_value(_env("LABEL_VALUE", "")),
        ),
        output=OutputConfig(
            minimal=_env_bool("MINIMAL", False),
            sort_resources=_env_bool("SORT", False),
        ),
        log=LogConfig(
            level=validate_log_level(_env("LOG_LEVEL", "warning")),
            format=validate_log_format(_env("LOG_FORMAT", "console")),
        ),
    )
