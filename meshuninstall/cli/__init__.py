"""meshuninstall command-line interface.

Exposes:
    cli -- Click command entry point (registered as ``meshuninstall`` script).
"""

from meshuninstall.cli.main import cli

__all__ = ["cli"]
