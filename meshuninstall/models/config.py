"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_NAMESPACE = "linkerd"
DEFAULT_LABEL_KEY = "linkerd.io/control-plane-ns"


@dataclass(frozen=True)
class ClusterConfig:
    """How to reach the cluster API server."""

    kubeconfig: str = ""
    context: str = ""
    impersonate_user: str = ""
    impersonate_group: str = ""


@dataclass(frozen=True)
class ControlPlaneConfig:
    """Identity of the control-plane installation to remove."""

    namespace: str = DEFAULT_NAMESPACE
    label_key: str = DEFAULT_LABEL_KEY
    label_value: str = ""  # empty selects on label presence only


@dataclass(frozen=True)
class OutputConfig:
    """Manifest stream options."""

    minimal: bool = False
    sort_resources: bool = False


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = "warning"
    format: str = "console"


@dataclass(frozen=True)
class UninstallConfig:
    """Top-level configuration, passed explicitly into the pipeline."""

    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    control_plane: ControlPlaneConfig = field(default_factory=ControlPlaneConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
