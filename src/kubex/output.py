"""Rendering of an orphan report as YAML or JSON."""

from __future__ import annotations

import json

import yaml

from .orphans import Orphans


def render(orphans: Orphans, fmt: str = "yaml") -> str:
    """
    Serialize orphans as {"configmaps": [...], "secrets": [...]}.

    Names are sorted so identical cluster state renders identically.
    Raises ValueError for a format other than "yaml" or "json".
    """
    data = orphans.as_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    raise ValueError(f"unsupported output format: {fmt}")
