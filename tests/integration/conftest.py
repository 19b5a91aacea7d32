"""Shared fixtures for meshuninstall integration tests.

Provides an in-memory ``ClusterClient`` holding a known object set so the full
discover -> resolve -> render pipeline can run without a real cluster.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from meshuninstall.errors import ApiError, NotFoundError
from meshuninstall.k8s import kinds
from meshuninstall.models.config import ControlPlaneConfig, UninstallConfig
from meshuninstall.models.resources import LabelSelector, ResourceKind

CONTROL_PLANE_LABEL = "linkerd.io/control-plane-ns"


# ---------------------------------------------------------------------------
# Object factory helpers
# ---------------------------------------------------------------------------


def make_object(
    name: str,
    namespace: str | None = None,
    labels: dict[str, str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Create a serialised live object as the API would return it in a list."""
    metadata: dict[str, Any] = {"name": name, "uid": f"uid-{name}", "labels": labels or {}}
    if namespace is not None:
        metadata["namespace"] = namespace
    return {"metadata": metadata, **extra}


def owned(name: str, namespace: str | None = None, **extra: Any) -> dict[str, Any]:
    """Create an object carrying the control-plane ownership label."""
    return make_object(name, namespace, labels={CONTROL_PLANE_LABEL: "linkerd"}, **extra)


# ---------------------------------------------------------------------------
# Fake cluster
# ---------------------------------------------------------------------------


def _parse_selector(selector: str) -> LabelSelector:
    key, sep, value = selector.partition("=")
    return LabelSelector(key=key, value=value if sep else None)


def _selector_matches(selector: LabelSelector, labels: dict[str, str] | None) -> bool:
    """Evaluate *selector* the way the API server does for a single-key selector."""
    if not labels or selector.key not in labels:
        return False
    return selector.value is None or labels[selector.key] == selector.value


class FakeClusterClient:
    """In-memory ClusterClient with server-side-style label filtering."""

    def __init__(
        self,
        objects: dict[str, list[dict[str, Any]]] | None = None,
        namespaces: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        self.objects = objects or {}
        self.namespaces = namespaces or {}
        self.list_errors: dict[str, ApiError] = {}
        self.namespace_error: ApiError | None = None
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def list_resources(self, kind: ResourceKind, label_selector: str) -> list[dict[str, Any]]:
        self.calls.append(("list", kind.kind))
        if kind.kind in self.list_errors:
            raise self.list_errors[kind.kind]
        selector = _parse_selector(label_selector)
        return [
            copy.deepcopy(obj)
            for obj in self.objects.get(kind.kind, [])
            if _selector_matches(selector, obj["metadata"].get("labels"))
        ]

    async def get_namespace(self, name: str) -> dict[str, Any]:
        self.calls.append(("get", name))
        if self.namespace_error is not None:
            raise self.namespace_error
        if name not in self.namespaces:
            raise NotFoundError(f"get Namespace {name}: (404) Not Found", status=404, detail="(404) Not Found")
        return copy.deepcopy(self.namespaces[name])

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> FakeClusterClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> UninstallConfig:
    return UninstallConfig(control_plane=ControlPlaneConfig(namespace="linkerd", label_key=CONTROL_PLANE_LABEL))


@pytest.fixture
def scenario_kinds() -> tuple[ResourceKind, ...]:
    return (kinds.SERVICE_ACCOUNT, kinds.CLUSTER_ROLE_BINDING, kinds.DEPLOYMENT)


@pytest.fixture
def cluster() -> FakeClusterClient:
    """A cluster with one owned object per scenario kind plus unrelated objects."""
    return FakeClusterClient(
        objects={
            "ServiceAccount": [
                owned("linkerd-destination", "linkerd"),
                make_object("default", "linkerd"),
            ],
            "ClusterRoleBinding": [
                owned("linkerd-linkerd-destination-policy"),
                make_object("cluster-admin"),
            ],
            "Deployment": [
                owned("linkerd-destination", "linkerd", spec={"replicas": 1}),
                make_object("emojivoto-web", "emojivoto", labels={"app": "web"}),
            ],
        },
        namespaces={"linkerd": make_object("linkerd", labels={"linkerd.io/is-control-plane": "true"})},
    )
