"""Core data structures for meshuninstall."""

from meshuninstall.models.config import UninstallConfig
from meshuninstall.models.resources import LabelSelector, ResourceDescriptor, ResourceKind

__all__ = [
    "LabelSelector",
    "ResourceDescriptor",
    "ResourceKind",
    "UninstallConfig",
]
