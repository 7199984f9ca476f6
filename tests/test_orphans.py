"""Tests for candidate sets and orphan reduction."""

import itertools

import pytest

from kubex.orphans import CandidateSet, Orphans, reduce_orphans
from kubex.references import References


def refs(configmaps=(), secrets=()):
    return References(frozenset(configmaps), frozenset(secrets))


def test_candidate_set_only_shrinks():
    """discard removes; discarding an unknown name is a no-op."""
    candidates = CandidateSet(["a", "b"])
    candidates.discard("a")
    candidates.discard("zzz")
    candidates.discard_all(["b", "b"])
    assert len(candidates) == 0
    assert "a" not in candidates
    assert not hasattr(candidates, "add")


def test_reduce_removes_referenced_names():
    """orphans = all names minus referenced names, per kind."""
    orphans = reduce_orphans(
        ["cm1", "cm2"],
        ["s1", "s2"],
        [refs(configmaps={"cm1"}), refs(secrets={"s2", "unknown"})],
    )
    assert orphans == Orphans(frozenset({"cm2"}), frozenset({"s1"}))


def test_kinds_are_independent():
    """A Secret reference never removes a ConfigMap with the same name."""
    orphans = reduce_orphans(["shared"], ["shared"], [refs(secrets={"shared"})])
    assert orphans.configmaps == {"shared"}
    assert orphans.secrets == set()


def test_root_ca_always_excluded():
    """kube-root-ca.crt is dropped even when unreferenced."""
    orphans = reduce_orphans(["kube-root-ca.crt", "cm"], [], [])
    assert orphans.configmaps == {"cm"}


def test_order_independent():
    """Any application order of the batches gives the same result."""
    batches = [refs({"a"}, {"x"}), refs({"b"}), refs(secrets={"y"}), refs({"a"}, {"x"})]
    results = {
        reduce_orphans(["a", "b", "c"], ["x", "y", "z"], order)
        for order in itertools.permutations(batches)
    }
    assert results == {Orphans(frozenset({"c"}), frozenset({"z"}))}


def test_as_dict_sorted():
    """Rendering view is sorted lists."""
    orphans = Orphans(frozenset({"b", "a"}), frozenset())
    assert orphans.as_dict() == {"configmaps": ["a", "b"], "secrets": []}


def test_orphans_immutable():
    """Orphans cannot be reassigned after reduction."""
    orphans = reduce_orphans(["a"], [], [])
    with pytest.raises(AttributeError):
        orphans.configmaps = frozenset()
