"""
Pod spec resolution for every kind that runs pods.

Each workload kind nests its pod spec at a different path. One resolver
per kind walks that path and returns None as soon as a link is missing,
so half-populated objects simply contribute no pod spec.
"""

from __future__ import annotations

from typing import Callable, Optional

from .config import (
    CRONJOBS,
    DAEMONSETS,
    DEPLOYMENTS,
    JOBS,
    PODS,
    REPLICASETS,
    REPLICATIONCONTROLLERS,
    STATEFULSETS,
)


def _dig(obj: Optional[dict], *keys: str) -> Optional[dict]:
    """Follow keys through nested dicts; None if any link is absent or null."""
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj if isinstance(obj, dict) else None


def deployment_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def replicaset_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def statefulset_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def daemonset_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def job_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def cronjob_pod_spec(obj: dict) -> Optional[dict]:
    # CronJob -> JobTemplateSpec -> JobSpec -> PodTemplateSpec -> PodSpec
    return _dig(obj, "spec", "jobTemplate", "spec", "template", "spec")


def replicationcontroller_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec", "template", "spec")


def pod_pod_spec(obj: dict) -> Optional[dict]:
    return _dig(obj, "spec")


POD_SPEC_RESOLVERS: dict[str, Callable[[dict], Optional[dict]]] = {
    DEPLOYMENTS: deployment_pod_spec,
    REPLICASETS: replicaset_pod_spec,
    STATEFULSETS: statefulset_pod_spec,
    DAEMONSETS: daemonset_pod_spec,
    JOBS: job_pod_spec,
    CRONJOBS: cronjob_pod_spec,
    REPLICATIONCONTROLLERS: replicationcontroller_pod_spec,
    PODS: pod_pod_spec,
}


def resolve_pod_spec(kind: str, obj: dict) -> Optional[dict]:
    """
    Return the pod spec an object of the given kind would run, if any.

    Args:
        kind: One of config.POD_SPEC_KINDS.
        obj: The object as returned by kubectl get -o json.

    Raises:
        KeyError: kind does not carry a pod spec.
    """
    return POD_SPEC_RESOLVERS[kind](obj)
