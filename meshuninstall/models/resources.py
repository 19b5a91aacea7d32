"""Resource data structures shared by discovery and rendering."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class ResourceKind:
    """A listable Kubernetes resource type."""

    api_version: str
    kind: str
    namespaced: bool

    def __str__(self) -> str:
        return f"{self.api_version}/{self.kind}"


@dataclass(frozen=True)
class LabelSelector:
    """Equality or existence selector on a single label key."""

    key: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}={self.value}"


@dataclass(frozen=True)
class ResourceDescriptor:
    """One cluster object to be removed.

    Produced by the discoverer or the namespace resolver, consumed once by the
    renderer. Immutable: ``body`` is deep-copied into a read-only mapping on
    construction, and ``to_manifest()`` always works on a further copy.
    """

    api_version: str
    kind: str
    name: str
    namespace: str | None = None
    body: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.body is not None:
            object.__setattr__(self, "body", MappingProxyType(copy.deepcopy(dict(self.body))))

    @classmethod
    def from_object(cls, kind: ResourceKind, obj: Mapping[str, Any]) -> ResourceDescriptor:
        """Build a descriptor from a serialised live object of type *kind*."""
        metadata = obj.get("metadata") or {}
        return cls(
            api_version=kind.api_version,
            kind=kind.kind,
            name=str(metadata.get("name", "")),
            namespace=metadata.get("namespace") if kind.namespaced else None,
            body=obj,
        )

    @property
    def key(self) -> tuple[str, str, str]:
        """Sort key: (kind, namespace, name)."""
        return (self.kind, self.namespace or "", self.name)

    def to_manifest(self, minimal: bool = False) -> dict[str, Any]:
        """Return a manifest dict with ``apiVersion`` and ``kind`` leading."""
        metadata: dict[str, Any] = {"name": self.name}
        if self.namespace:
            metadata["namespace"] = self.namespace

        if minimal or self.body is None:
            return {"apiVersion": self.api_version, "kind": self.kind, "metadata": metadata}

        rest = copy.deepcopy(dict(self.body))
        rest.pop("apiVersion", None)
        rest.pop("kind", None)
        live_metadata = rest.pop("metadata", None) or {}
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {**live_metadata, **metadata},
            **rest,
        }
