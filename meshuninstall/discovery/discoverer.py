"""Label-selector discovery of control-plane objects."""

from __future__ import annotations

from collections.abc import Sequence

from meshuninstall.k8s.client import ClusterClient
from meshuninstall.k8s.kinds import DEFAULT_KINDS
from meshuninstall.models.resources import LabelSelector, ResourceDescriptor, ResourceKind
from meshuninstall.observability.logging import get_logger

_log = get_logger("discovery")


class ResourceDiscoverer:
    """Lists every configured kind by label selector.

    Results are grouped by kind in the order of *kinds*; within a kind the API
    listing order is kept. Client errors propagate unchanged.
    """

    def __init__(self, client: ClusterClient, kinds: Sequence[ResourceKind] = DEFAULT_KINDS) -> None:
        self._client = client
        self._kinds = tuple(kinds)

    async def discover(self, selector: LabelSelector) -> list[ResourceDescriptor]:
        resources: list[ResourceDescriptor] = []
        for kind in self._kinds:
            objects = await self._client.list_resources(kind, str(selector))
            _log.debug("listed kind", kind=kind.kind, selector=str(selector), count=len(objects))
            resources.extend(ResourceDescriptor.from_object(kind, obj) for obj in objects)

        _log.info("discovery complete", selector=str(selector), resources=len(resources))
        return resources
