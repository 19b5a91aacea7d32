"""Entry point for `python -m meshuninstall`.

Usage:
    python -m meshuninstall | kubectl delete -f -
"""

from __future__ import annotations

from meshuninstall.cli import cli

cli()
