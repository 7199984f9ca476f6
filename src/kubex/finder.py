"""
Orphan search: list everything, extract references, reduce.

find_orphans() issues all list calls at once on a thread pool (they are
independent kubectl round trips), scans the pod specs in parallel with
each scan producing its own References, then applies all references to
the candidate sets in a single sequential reduction.
"""

from __future__ import annotations

import functools
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from .config import (
    ALL_KINDS,
    CONFIGMAPS,
    INGRESSES,
    MAX_WORKERS,
    POD_SPEC_KINDS,
    REFERENCING_KINDS,
    SECRETS,
    SERVICEACCOUNTS,
)
from .kubectl import list_resource
from .orphans import Orphans, reduce_orphans
from .pod_spec import resolve_pod_spec
from .references import (
    References,
    extract_ingress_references,
    extract_pod_spec_references,
    extract_service_account_references,
)

logger = logging.getLogger(__name__)

# (kind, namespace) -> items
Lister = Callable[[str, str], list]


def _names(items: list[dict]) -> set[str]:
    """metadata.name of every item that has one."""
    names = set()
    for item in items:
        name = (item.get("metadata") or {}).get("name")
        if name:
            names.add(name)
    return names


def _join(futures: dict[str, Future], kind: str) -> list[dict]:
    """Wait for one listing; on failure cancel the rest and re-raise."""
    try:
        return futures[kind].result()
    except Exception:
        for future in futures.values():
            future.cancel()
        raise


def find_orphans(
    namespace: str,
    kubeconfig: Optional[str] = None,
    lister: Optional[Lister] = None,
    max_workers: int = MAX_WORKERS,
) -> Orphans:
    """
    Find ConfigMaps and Secrets in a namespace that nothing references.

    References are taken from the pod specs of Deployments, ReplicaSets,
    StatefulSets, DaemonSets, Jobs, CronJobs, ReplicationControllers and
    Pods, from Ingress TLS entries, and from ServiceAccount secrets and
    imagePullSecrets. kube-root-ca.crt is never reported.

    Args:
        namespace: Namespace to inspect.
        kubeconfig: Optional kubeconfig path for the default lister.
        lister: Callable (kind, namespace) -> items; defaults to
            kubectl.list_resource.
        max_workers: Thread pool size for listing and scanning.

    Returns:
        Orphans for the namespace.

    Raises:
        TransportError: any list call failed. No partial result is returned.
    """
    if lister is None:
        lister = functools.partial(list_resource, kubeconfig=kubeconfig)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {kind: executor.submit(lister, kind, namespace) for kind in ALL_KINDS}

        configmaps = _names(_join(futures, CONFIGMAPS))
        secrets = _names(_join(futures, SECRETS))
        listed = {kind: _join(futures, kind) for kind in REFERENCING_KINDS}

        pod_specs = []
        for kind in POD_SPEC_KINDS:
            for obj in listed[kind]:
                spec = resolve_pod_spec(kind, obj)
                if spec is not None:
                    pod_specs.append(spec)
        logger.debug(
            "namespace %s: %d configmaps, %d secrets, %d pod specs",
            namespace,
            len(configmaps),
            len(secrets),
            len(pod_specs),
        )

        batches: list[References] = list(executor.map(extract_pod_spec_references, pod_specs))

    for ingress in listed[INGRESSES]:
        batches.append(References(frozenset(), frozenset(extract_ingress_references(ingress))))
    for sa in listed[SERVICEACCOUNTS]:
        batches.append(References(frozenset(), frozenset(extract_service_account_references(sa))))

    orphans = reduce_orphans(configmaps, secrets, batches)
    logger.debug(
        "namespace %s: %d orphaned configmaps, %d orphaned secrets",
        namespace,
        len(orphans.configmaps),
        len(orphans.secrets),
    )
    return orphans
