"""
Kubectl invocation and namespaced resource listing.

All cluster access goes through subprocess kubectl calls. This module
provides a small wrapper that applies the optional kubeconfig path, a
lister that returns every object of one kind in a namespace, and lookup of
the namespace pinned by the current kubeconfig context.

Failures are never swallowed: a listing that cannot be completed raises
TransportError, because a report built from partial data could claim a
referenced ConfigMap or Secret is unused.
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import Optional

from .config import DEFAULT_NAMESPACE, KUBECTL_TIMEOUT

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """A kubectl call failed: transport, authorization, or decoding."""

    def __init__(self, kind: str, message: str, action: str = "list"):
        self.kind = kind
        self.message = message
        self.action = action
        super().__init__(f"failed to {action} {kind}: {message}")


def run_kubectl(
    args: list[str],
    kubeconfig: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """
    Run kubectl with the given args.

    Args:
        args: List of arguments (e.g. ["get", "pods", "-n", "app", "-o", "json"]).
        kubeconfig: Optional path passed as --kubeconfig; kubectl falls back
            to $KUBECONFIG and ~/.kube/config when unset.

    Returns:
        CompletedProcess with returncode, stdout, stderr. Times out after
        KUBECTL_TIMEOUT seconds (raises subprocess.TimeoutExpired).
    """
    cmd = ["kubectl"]
    if kubeconfig:
        cmd.extend(["--kubeconfig", kubeconfig])
    cmd.extend(args)
    logger.debug("running %s", " ".join(cmd))
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        timeout=KUBECTL_TIMEOUT,
    )


def _run_or_raise(
    kind: str,
    args: list[str],
    kubeconfig: Optional[str],
    action: str = "list",
) -> subprocess.CompletedProcess:
    try:
        result = run_kubectl(args, kubeconfig=kubeconfig)
    except FileNotFoundError:
        raise TransportError(kind, "kubectl not found; is it installed and on PATH?", action)
    except subprocess.TimeoutExpired:
        raise TransportError(kind, f"kubectl timed out after {KUBECTL_TIMEOUT}s", action)
    if result.returncode != 0:
        message = (result.stderr or "").strip() or f"kubectl exited with {result.returncode}"
        raise TransportError(kind, message, action)
    return result


def list_resource(
    kind: str,
    namespace: str,
    kubeconfig: Optional[str] = None,
) -> list[dict]:
    """
    List every object of one kind in a namespace.

    kubectl pages through large collections itself (--chunk-size), so the
    returned list is always the complete collection at call time.

    Args:
        kind: Resource kind as accepted by kubectl get (e.g. "configmaps",
            "deployments.apps").
        namespace: Namespace to list in.
        kubeconfig: Optional kubeconfig path.

    Returns:
        The "items" of the List response, as parsed JSON dicts.

    Raises:
        TransportError: kubectl is missing, timed out, exited non-zero, or
            printed something that is not a JSON List.
    """
    result = _run_or_raise(kind, ["get", kind, "-n", namespace, "-o", "json"], kubeconfig)
    try:
        obj = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise TransportError(kind, f"invalid JSON from kubectl: {e}")
    if not isinstance(obj, dict):
        raise TransportError(kind, "unexpected response from kubectl (not a List)")
    items = obj.get("items") or []
    logger.debug("listed %d %s in namespace %s", len(items), kind, namespace)
    return items


def current_namespace(kubeconfig: Optional[str] = None) -> str:
    """
    Return the namespace of the current kubeconfig context.

    Falls back to DEFAULT_NAMESPACE when the context does not set one.
    Raises TransportError when kubectl cannot read the kubeconfig.
    """
    result = _run_or_raise(
        "current namespace",
        ["config", "view", "--minify", "-o", "jsonpath={..namespace}"],
        kubeconfig,
        action="read",
    )
    return (result.stdout or "").strip() or DEFAULT_NAMESPACE
