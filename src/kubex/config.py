"""
Constants and resource type definitions for kubex.

Defines the Kubernetes resource kinds kubex lists (as understood by
`kubectl get <kind>`), the system-managed names it never reports, and the
limits applied to kubectl calls.
"""

# Candidate kinds: every object of these kinds is a possible orphan.
CONFIGMAPS = "configmaps"
SECRETS = "secrets"

# Kinds that carry a pod template (or are pods). Group-qualified so kubectl
# never resolves them to a CRD with the same short name.
DEPLOYMENTS = "deployments.apps"
REPLICASETS = "replicasets.apps"
STATEFULSETS = "statefulsets.apps"
DAEMONSETS = "daemonsets.apps"
JOBS = "jobs.batch"
CRONJOBS = "cronjobs.batch"
REPLICATIONCONTROLLERS = "replicationcontrollers"
PODS = "pods"

POD_SPEC_KINDS = [
    DEPLOYMENTS,
    REPLICASETS,
    STATEFULSETS,
    DAEMONSETS,
    JOBS,
    CRONJOBS,
    REPLICATIONCONTROLLERS,
    PODS,
]

# Kinds that reference Secrets outside of a pod spec.
INGRESSES = "ingresses.networking.k8s.io"
SERVICEACCOUNTS = "serviceaccounts"

REFERENCING_KINDS = POD_SPEC_KINDS + [INGRESSES, SERVICEACCOUNTS]

ALL_KINDS = [CONFIGMAPS, SECRETS] + REFERENCING_KINDS

# Injected by the cluster into every namespace; never user-owned.
ROOT_CA_CERT = "kube-root-ca.crt"
EXCLUDED_CONFIGMAPS = frozenset({ROOT_CA_CERT})

# Used when the kubeconfig context does not pin a namespace.
DEFAULT_NAMESPACE = "default"

# Seconds before a single kubectl call is abandoned.
KUBECTL_TIMEOUT = 60

# One worker per listed kind, so every list call is in flight at once.
MAX_WORKERS = len(ALL_KINDS)

OUTPUT_FORMATS = ("yaml", "json")
