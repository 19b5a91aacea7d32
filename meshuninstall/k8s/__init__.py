"""Kubernetes API access for meshuninstall.

Submodules
----------
client -- ClusterClient protocol and the kubernetes-asyncio implementation.
kinds  -- Resource kinds owned by a control-plane installation.
"""

from meshuninstall.k8s.client import ClusterClient, KubernetesClusterClient
from meshuninstall.k8s.kinds import DEFAULT_KINDS

__all__ = ["DEFAULT_KINDS", "ClusterClient", "KubernetesClusterClient"]
