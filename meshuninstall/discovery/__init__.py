"""Discovery of the objects that make up a control-plane installation.

Submodules
----------
discoverer -- ResourceDiscoverer: label-selector listing across all known kinds.
namespace  -- NamespaceResolver: get-by-name lookup of the control-plane namespace.
"""

from meshuninstall.discovery.discoverer import ResourceDiscoverer
from meshuninstall.discovery.namespace import NamespaceResolver

__all__ = ["NamespaceResolver", "ResourceDiscoverer"]
