"""Resolution of the control-plane namespace."""

from __future__ import annotations

from meshuninstall.errors import ApiError, NotFoundError
from meshuninstall.k8s.client import ClusterClient
from meshuninstall.k8s.kinds import CORE_API_VERSION
from meshuninstall.models.resources import ResourceDescriptor
from meshuninstall.observability.logging import get_logger

_log = get_logger("discovery.namespace")


class NamespaceResolver:
    """Looks up the control-plane namespace, which carries no ownership label."""

    def __init__(self, client: ClusterClient) -> None:
        self._client = client

    async def resolve(self, name: str) -> ResourceDescriptor | None:
        """Return a Namespace descriptor, or None if the namespace does not exist.

        Raises:
            ApiError: for any failure other than not-found, naming the namespace.
        """
        try:
            obj = await self._client.get_namespace(name)
        except NotFoundError:
            _log.info("namespace not found; omitting it", namespace=name)
            return None
        except ApiError as exc:
            raise ApiError(
                f"could not fetch Namespace {name}: {exc.detail}",
                operation="resolve namespace",
                cause=exc,
                status=exc.status,
                detail=exc.detail,
            ) from exc

        observed = (obj.get("metadata") or {}).get("name") or name
        return ResourceDescriptor(api_version=CORE_API_VERSION, kind="Namespace", name=observed)
