"""Cluster API access.

``ClusterClient`` is the narrow read-only surface the pipeline depends on:
list objects of a kind by label selector, and get a namespace by name.
``KubernetesClusterClient`` implements it on top of kubernetes-asyncio and
translates client failures into ``ApiError`` / ``NotFoundError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any, Protocol

import aiohttp
from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]
from kubernetes_asyncio.client.exceptions import ApiException  # type: ignore[import-untyped]

from meshuninstall.errors import ApiError, ConfigError, NotFoundError
from meshuninstall.k8s.kinds import LIST_CALLS
from meshuninstall.models.config import ClusterConfig
from meshuninstall.models.resources import ResourceKind
from meshuninstall.observability.logging import get_logger

_log = get_logger("k8s.client")


class ClusterClient(Protocol):
    """Read-only cluster operations used by discovery."""

    async def list_resources(self, kind: ResourceKind, label_selector: str) -> list[dict[str, Any]]:
        """Return every object of *kind* matching *label_selector*, across all namespaces."""
        ...

    async def get_namespace(self, name: str) -> dict[str, Any]:
        """Return the namespace *name*; raise NotFoundError if it does not exist."""
        ...


def _translate(exc: Exception, operation: str) -> ApiError:
    if isinstance(exc, ApiException):
        status = exc.status
        detail = f"({status}) {exc.reason}"
        error_cls = NotFoundError if status == 404 else ApiError
        return error_cls(f"{operation}: {detail}", operation=operation, cause=exc, status=status, detail=detail)
    return ApiError(f"{operation}: {exc}", operation=operation, cause=exc, detail=str(exc))


class KubernetesClusterClient:
    """``ClusterClient`` backed by a kubernetes-asyncio ``ApiClient``.

    Args:
        api_client: Configured kubernetes-asyncio ApiClient. Owned by this object
                    and closed by ``close()``.
        apis:       Optional pre-built API group objects keyed by class name
                    (e.g. ``"CoreV1Api"``). Missing groups are built lazily.
    """

    def __init__(self, api_client: Any, apis: Mapping[str, Any] | None = None) -> None:
        self._api_client = api_client
        self._apis: dict[str, Any] = dict(apis or {})

    @classmethod
    async def connect(cls, config: ClusterConfig) -> KubernetesClusterClient:
        """Load kubeconfig (or in-cluster config) and return a connected client."""
        configuration = k8s_client.Configuration()
        try:
            if config.kubeconfig or config.context:
                await k8s_config.load_kube_config(
                    config_file=config.kubeconfig or None,
                    context=config.context or None,
                    client_configuration=configuration,
                )
                _log.debug("k8s client configured from kubeconfig", context=config.context or None)
            else:
                try:
                    # load_incluster_config() is synchronous in kubernetes-asyncio
                    k8s_config.load_incluster_config(client_configuration=configuration)
                    _log.debug("k8s client configured from in-cluster service account")
                except k8s_config.ConfigException:
                    await k8s_config.load_kube_config(client_configuration=configuration)
                    _log.debug("k8s client configured from kubeconfig")
        except (k8s_config.ConfigException, OSError) as exc:
            raise ConfigError(f"could not load cluster configuration: {exc}", operation="connect", cause=exc) from exc

        api_client = k8s_client.ApiClient(configuration=configuration)
        if config.impersonate_user:
            api_client.set_default_header("Impersonate-User", config.impersonate_user)
        if config.impersonate_group:
            api_client.set_default_header("Impersonate-Group", config.impersonate_group)
        return cls(api_client)

    async def close(self) -> None:
        await self._api_client.close()

    async def __aenter__(self) -> KubernetesClusterClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _api(self, class_name: str) -> Any:
        api = self._apis.get(class_name)
        if api is None:
            api = getattr(k8s_client, class_name)(self._api_client)
            self._apis[class_name] = api
        return api

    async def list_resources(self, kind: ResourceKind, label_selector: str) -> list[dict[str, Any]]:
        try:
            class_name, method = LIST_CALLS[kind.kind]
        except KeyError:
            raise ApiError(f"no list call known for kind {kind.kind}", operation="list") from None

        operation = f"list {kind.kind}"
        try:
            result = await getattr(self._api(class_name), method)(label_selector=label_selector)
        except (ApiException, aiohttp.ClientError) as exc:
            raise _translate(exc, operation) from exc

        # List items carry no apiVersion/kind of their own; descriptors fill them in.
        return [self._api_client.sanitize_for_serialization(item) for item in result.items]

    async def get_namespace(self, name: str) -> dict[str, Any]:
        operation = f"get Namespace {name}"
        try:
            obj = await self._api("CoreV1Api").read_namespace(name)
        except (ApiException, aiohttp.ClientError) as exc:
            raise _translate(exc, operation) from exc
        return self._api_client.sanitize_for_serialization(obj)
