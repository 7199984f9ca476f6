"""
kubex: Discover unused ConfigMaps and Secrets in a Kubernetes namespace.

Lists every workload, Ingress and ServiceAccount in the namespace, collects
the ConfigMap and Secret names they reference, and reports the ones nothing
references. Read-only: kubex never modifies the cluster.
"""

from .finder import find_orphans
from .kubectl import TransportError
from .orphans import Orphans

__version__ = "0.1.0"

__all__ = ["find_orphans", "Orphans", "TransportError", "__version__"]
