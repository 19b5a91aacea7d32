"""Manifest stream rendering."""

from meshuninstall.render.stream import YAML_SEPARATOR, ResourceStreamRenderer

__all__ = ["YAML_SEPARATOR", "ResourceStreamRenderer"]
