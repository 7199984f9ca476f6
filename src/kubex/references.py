"""
Extraction of ConfigMap and Secret references.

Pure functions over the JSON objects kubectl returns. A reference whose
name field is absent is not a reference; an empty-string name is kept as
the literal name "". Nothing here raises on malformed objects.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional


class References(NamedTuple):
    """Names discovered in one scanned object."""

    configmaps: frozenset
    secrets: frozenset


def _items(obj: Optional[dict], key: str) -> list:
    """obj[key] as a list of dicts; tolerates missing, null and junk entries."""
    if not isinstance(obj, dict):
        return []
    value = obj.get(key) or []
    return [v for v in value if isinstance(v, dict)] if isinstance(value, list) else []


def _name(ref: Optional[dict], name_field: str = "name") -> Optional[str]:
    if not isinstance(ref, dict):
        return None
    name = ref.get(name_field)
    return name if isinstance(name, str) else None


def _ref_name(obj: Optional[dict], key: str, name_field: str = "name") -> Optional[str]:
    """Name held in obj[key][name_field], or None when any part is missing."""
    if not isinstance(obj, dict):
        return None
    return _name(obj.get(key), name_field)


def _add(names: set, name: Optional[str]) -> None:
    if name is not None:
        names.add(name)


def _scan_containers(containers: Iterable[dict], configmaps: set, secrets: set) -> None:
    for container in containers:
        for env_from in _items(container, "envFrom"):
            _add(configmaps, _ref_name(env_from, "configMapRef"))
            _add(secrets, _ref_name(env_from, "secretRef"))
        for env in _items(container, "env"):
            value_from = env.get("valueFrom")
            _add(configmaps, _ref_name(value_from, "configMapKeyRef"))
            _add(secrets, _ref_name(value_from, "secretKeyRef"))


# Volume drivers that read credentials from a Secret: (source, reference field).
DRIVER_SECRET_REFS = (
    ("csi", "nodePublishSecretRef"),
    ("cephfs", "secretRef"),
    ("rbd", "secretRef"),
    ("iscsi", "secretRef"),
    ("flexVolume", "secretRef"),
    ("cinder", "secretRef"),
    ("scaleIO", "secretRef"),
    ("storageos", "secretRef"),
)


def _scan_volumes(volumes: Iterable[dict], configmaps: set, secrets: set) -> None:
    for volume in volumes:
        _add(configmaps, _ref_name(volume, "configMap"))
        _add(secrets, _ref_name(volume, "secret", "secretName"))
        _add(secrets, _ref_name(volume, "azureFile", "secretName"))
        for source, field in DRIVER_SECRET_REFS:
            _add(secrets, _ref_name(volume.get(source), field))
        projected = volume.get("projected")
        for source in _items(projected, "sources"):
            _add(configmaps, _ref_name(source, "configMap"))
            _add(secrets, _ref_name(source, "secret"))


def extract_pod_spec_references(spec: dict) -> References:
    """
    Collect every ConfigMap and Secret a pod spec needs to start.

    Scans containers, init containers and ephemeral containers (envFrom and
    env valueFrom), volumes (configMap, secret, projected sources and storage
    driver credentials such as csi nodePublishSecretRef) and the
    pod's imagePullSecrets.

    Args:
        spec: A PodSpec dict (see pod_spec.resolve_pod_spec).

    Returns:
        References with the ConfigMap names and Secret names found.
    """
    configmaps: set = set()
    secrets: set = set()
    for key in ("containers", "initContainers", "ephemeralContainers"):
        _scan_containers(_items(spec, key), configmaps, secrets)
    _scan_volumes(_items(spec, "volumes"), configmaps, secrets)
    for pull_secret in _items(spec, "imagePullSecrets"):
        _add(secrets, _name(pull_secret))
    return References(frozenset(configmaps), frozenset(secrets))


def extract_ingress_references(ingress: dict) -> set:
    """Secret names used as TLS certificates by an Ingress."""
    secrets: set = set()
    spec = ingress.get("spec") if isinstance(ingress, dict) else None
    for tls in _items(spec, "tls"):
        _add(secrets, _name(tls, "secretName"))
    return secrets


def extract_service_account_references(sa: dict) -> set:
    """Secret names listed in a ServiceAccount's imagePullSecrets and secrets."""
    secrets: set = set()
    for key in ("imagePullSecrets", "secrets"):
        for ref in _items(sa, key):
            _add(secrets, _name(ref))
    return secrets
