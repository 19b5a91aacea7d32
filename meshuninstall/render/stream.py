"""Multi-document YAML rendering of resource descriptors.

Documents are joined by ``---`` lines placed strictly between documents, so
tools splitting on the delimiter never see an empty leading or trailing
document.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

import yaml

from meshuninstall.errors import RenderError
from meshuninstall.models.resources import ResourceDescriptor

YAML_SEPARATOR = "---\n"


class ResourceStreamRenderer:
    """Writes descriptors to a text sink as one YAML stream.

    Args:
        minimal: Emit only apiVersion, kind and metadata name/namespace.
    """

    def __init__(self, minimal: bool = False) -> None:
        self._minimal = minimal

    def render_document(self, resource: ResourceDescriptor) -> str:
        """Serialise a single descriptor to a YAML document ending in a newline."""
        try:
            return yaml.safe_dump(
                resource.to_manifest(minimal=self._minimal),
                sort_keys=False,
                default_flow_style=False,
            )
        except (yaml.YAMLError, TypeError, ValueError) as exc:
            raise RenderError(
                f"error rendering {resource.kind}/{resource.name}: {exc}",
                operation="render",
                cause=exc,
            ) from exc

    def render(self, resources: Iterable[ResourceDescriptor], sink: TextIO) -> int:
        """Write every descriptor to *sink* in order and return the document count.

        Output already written when a failure occurs is left on the sink.
        """
        written = 0
        for resource in resources:
            document = self.render_document(resource)
            try:
                if written:
                    sink.write(YAML_SEPARATOR)
                sink.write(document)
            except OSError as exc:
                raise RenderError(
                    f"error writing {resource.kind}/{resource.name}: {exc}",
                    operation="render",
                    cause=exc,
                ) from exc
            written += 1
        return written
