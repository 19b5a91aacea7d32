"""``meshuninstall`` command.

Options override the MESHUNINSTALL_* environment configuration. Invalid
configuration and pipeline failures alike print ``Error: <message>`` and exit 1.
"""

from __future__ import annotations

import asyncio
import dataclasses

import click

from meshuninstall import __version__
from meshuninstall.app import main as run_main
from meshuninstall.config import load_config, validate_config
from meshuninstall.errors import UninstallError
from meshuninstall.models.config import UninstallConfig
from meshuninstall.observability.logging import get_logger, setup_logging


def _override(section: object, **values: object) -> object:
    changes = {k: v for k, v in values.items() if v is not None}
    return dataclasses.replace(section, **changes) if changes else section  # type: ignore[type-var]


def build_config(
    base: UninstallConfig,
    *,
    kubeconfig: str | None = None,
    context: str | None = None,
    impersonate_user: str | None = None,
    impersonate_group: str | None = None,
    namespace: str | None = None,
    label_key: str | None = None,
    label_value: str | None = None,
    minimal: bool | None = None,
    sort_resources: bool | None = None,
    log_level: str | None = None,
    log_format: str | None = None,
) -> UninstallConfig:
    """Apply command-line values that were given on top of *base*."""
    config = UninstallConfig(
        cluster=_override(  # type: ignore[arg-type]
            base.cluster,
            kubeconfig=kubeconfig,
            context=context,
            impersonate_user=impersonate_user,
            impersonate_group=impersonate_group,
        ),
        control_plane=_override(  # type: ignore[arg-type]
            base.control_plane,
            namespace=namespace,
            label_key=label_key,
            label_value=label_value,
        ),
        output=_override(base.output, minimal=minimal, sort_resources=sort_resources),  # type: ignore[arg-type]
        log=_override(base.log, level=log_level, format=log_format),  # type: ignore[arg-type]
    )
    return validate_config(config)


@click.command(
    name="meshuninstall",
    help=(
        "Output Kubernetes resources to uninstall the control plane.\n\n"
        "Prints every namespace-scoped and cluster-scoped resource (services, "
        "deployments, RBAC, webhooks, CRDs, ...) carrying the control-plane label, "
        "followed by the control-plane namespace.\n\n"
        "Example: meshuninstall | kubectl delete -f -"
    ),
)
@click.option("--kubeconfig", default=None, help="Path to the kubeconfig file.")
@click.option("--context", default=None, help="Name of the kubeconfig context to use.")
@click.option("--as", "impersonate_user", default=None, help="Username to impersonate.")
@click.option("--as-group", "impersonate_group", default=None, help="Group to impersonate.")
@click.option("-n", "--namespace", default=None, help="Namespace of the control plane.")
@click.option("--label-key", default=None, help="Ownership label carried by control-plane objects.")
@click.option("--label-value", default=None, help="Required value of the ownership label.")
@click.option("--minimal/--full", "minimal", default=None, help="Emit only apiVersion, kind and metadata name.")
@click.option("--sort/--no-sort", "sort_resources", default=None, help="Sort discovered resources by kind and name.")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Log level for stderr diagnostics.",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Log format for stderr diagnostics.",
)
@click.version_option(__version__, prog_name="meshuninstall")
def cli(**options: object) -> None:
    # Defaults until the pipeline reconfigures from the loaded config; stderr either way.
    setup_logging()
    log = get_logger("cli")
    try:
        config = build_config(load_config(), **options)  # type: ignore[arg-type]
        asyncio.run(run_main(config))
    except UninstallError as exc:
        log.error("uninstall failed", operation=exc.operation, error=str(exc))
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1) from exc
