"""Uninstall pipeline: discover -> resolve namespace -> render.

Each step completes (or fails) before the next begins. Any error aborts the
run; whatever the renderer already flushed stays on the sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from meshuninstall.discovery import NamespaceResolver, ResourceDiscoverer
from meshuninstall.k8s.client import ClusterClient, KubernetesClusterClient
from meshuninstall.k8s.kinds import DEFAULT_KINDS
from meshuninstall.models.config import UninstallConfig
from meshuninstall.models.resources import LabelSelector, ResourceDescriptor, ResourceKind
from meshuninstall.observability.logging import get_logger, setup_logging
from meshuninstall.render import ResourceStreamRenderer

_log = get_logger("app")


def control_plane_selector(config: UninstallConfig) -> LabelSelector:
    """Build the ownership selector from the control-plane config."""
    cp = config.control_plane
    return LabelSelector(key=cp.label_key, value=cp.label_value or None)


async def collect_resources(
    config: UninstallConfig,
    client: ClusterClient,
    kinds: tuple[ResourceKind, ...] = DEFAULT_KINDS,
) -> list[ResourceDescriptor]:
    """Return discovered resources followed by the namespace, if it exists."""
    resources = await ResourceDiscoverer(client, kinds).discover(control_plane_selector(config))
    if config.output.sort_resources:
        resources.sort(key=lambda r: r.key)

    namespace = await NamespaceResolver(client).resolve(config.control_plane.namespace)
    if namespace is not None:
        resources.append(namespace)
    return resources


async def run(
    config: UninstallConfig,
    client: ClusterClient,
    sink: TextIO,
    kinds: tuple[ResourceKind, ...] = DEFAULT_KINDS,
) -> int:
    """Run the full pipeline against *client*, writing to *sink*.

    Returns the number of manifests written.
    """
    resources = await collect_resources(config, client, kinds)
    written = ResourceStreamRenderer(minimal=config.output.minimal).render(resources, sink)
    _log.info("uninstall manifests written", documents=written)
    return written


async def main(config: UninstallConfig, sink: TextIO | None = None) -> int:
    """Connect to the cluster described by *config* and write to stdout.

    Logging is configured first so that no log line can reach the manifest stream.
    """
    setup_logging(config.log.level, config.log.format)
    async with await KubernetesClusterClient.connect(config.cluster) as client:
        return await run(config, client, sink or sys.stdout)
