"""
CLI entry point for kubex.

Resolves the namespace (flag or current kubeconfig context), runs
find_orphans() and prints the report as YAML or JSON on stdout. Progress
and errors go to stderr so the report can be piped.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .config import OUTPUT_FORMATS
from .finder import find_orphans
from .kubectl import TransportError, current_namespace
from .output import render

# Shown at the bottom of kubex --help / kubex -h
EPILOG = """
Examples:

  kubex                          # Unused ConfigMaps/Secrets in the current context's namespace
  kubex -n app                   # ... in namespace app
  kubex -n app -o json           # Print the report as JSON instead of YAML
  kubex -k ~/.kube/staging       # Use a specific kubeconfig file
  kubex -v                       # Log kubectl calls and counts to stderr

Nothing is deleted; review the report before removing anything.
"""


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option(
    "-k",
    "--kubeconfig",
    "kubeconfig",
    metavar="PATH_TO_KUBECONFIG",
    help="Path to a kubeconfig file. When not set, $KUBECONFIG or ~/.kube/config is used.",
)
@click.option(
    "-n",
    "--namespace",
    "namespace",
    metavar="NS",
    help="Namespace to search in (default: namespace of the current context)",
)
@click.option(
    "-o",
    "--output",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default="yaml",
    show_default=True,
    help="Report format",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log kubectl calls and resource counts to stderr",
)
def main(
    kubeconfig: Optional[str],
    namespace: Optional[str],
    output_format: str,
    verbose: bool,
) -> int:
    """
    Discover unused ConfigMaps and Secrets in a Kubernetes namespace.

    A ConfigMap or Secret is unused when no Deployment, ReplicaSet,
    StatefulSet, DaemonSet, Job, CronJob, ReplicationController, Pod,
    Ingress or ServiceAccount in the namespace references it.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        ns = namespace or current_namespace(kubeconfig)
        click.echo(f"Searching for unused ConfigMaps and Secrets in the '{ns}' namespace", err=True)
        orphans = find_orphans(ns, kubeconfig=kubeconfig)
    except TransportError as e:
        raise click.ClickException(str(e))

    click.echo(render(orphans, output_format.lower()), nl=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
