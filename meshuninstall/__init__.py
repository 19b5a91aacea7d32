"""meshuninstall: print the manifests needed to remove a mesh control plane."""

__version__ = "0.1.0"
