"""
Candidate sets and the orphan reduction.

Every ConfigMap and Secret starts out as a candidate orphan. Each batch of
discovered references removes names from the candidates; whatever survives
all batches is reported. Removal is commutative and idempotent, so batches
may be produced in any order (or in parallel) and applied in any order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .config import EXCLUDED_CONFIGMAPS
from .references import References


class CandidateSet:
    """A set of names that can only shrink."""

    def __init__(self, names: Iterable[str]):
        self._names = set(names)

    def discard(self, name: str) -> None:
        """Remove name if present; a missing name is a no-op."""
        self._names.discard(name)

    def discard_all(self, names: Iterable[str]) -> None:
        self._names.difference_update(names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def freeze(self) -> frozenset:
        return frozenset(self._names)


@dataclass(frozen=True)
class Orphans:
    """ConfigMap and Secret names nothing in the namespace references."""

    configmaps: frozenset
    secrets: frozenset

    def as_dict(self) -> dict[str, list[str]]:
        """Sorted plain lists, ready for YAML or JSON."""
        return {
            "configmaps": sorted(self.configmaps),
            "secrets": sorted(self.secrets),
        }


def reduce_orphans(
    configmaps: Iterable[str],
    secrets: Iterable[str],
    batches: Iterable[References],
    excluded_configmaps: Iterable[str] = EXCLUDED_CONFIGMAPS,
) -> Orphans:
    """
    Remove every referenced name from the candidate sets.

    Args:
        configmaps: Names of all ConfigMaps in the namespace.
        secrets: Names of all Secrets in the namespace.
        batches: References found per scanned object.
        excluded_configmaps: System-managed ConfigMap names dropped after
            reduction whether or not anything references them.

    Returns:
        The surviving names as an immutable Orphans.
    """
    cm_candidates = CandidateSet(configmaps)
    secret_candidates = CandidateSet(secrets)
    for batch in batches:
        cm_candidates.discard_all(batch.configmaps)
        secret_candidates.discard_all(batch.secrets)

    cm_candidates.discard_all(excluded_configmaps)
    return Orphans(cm_candidates.freeze(), secret_candidates.freeze())
