"""Resource kinds a control-plane installation may create.

Cluster-scoped kinds come first: they survive namespace deletion and are the
reason the uninstall stream exists at all.
"""

from __future__ import annotations

from meshuninstall.models.resources import ResourceKind

CORE_API_VERSION = "v1"

CLUSTER_ROLE = ResourceKind("rbac.authorization.k8s.io/v1", "ClusterRole", namespaced=False)
CLUSTER_ROLE_BINDING = ResourceKind("rbac.authorization.k8s.io/v1", "ClusterRoleBinding", namespaced=False)
CUSTOM_RESOURCE_DEFINITION = ResourceKind("apiextensions.k8s.io/v1", "CustomResourceDefinition", namespaced=False)
API_SERVICE = ResourceKind("apiregistration.k8s.io/v1", "APIService", namespaced=False)
MUTATING_WEBHOOK_CONFIGURATION = ResourceKind(
    "admissionregistration.k8s.io/v1", "MutatingWebhookConfiguration", namespaced=False
)
VALIDATING_WEBHOOK_CONFIGURATION = ResourceKind(
    "admissionregistration.k8s.io/v1", "ValidatingWebhookConfiguration", namespaced=False
)
ROLE = ResourceKind("rbac.authorization.k8s.io/v1", "Role", namespaced=True)
ROLE_BINDING = ResourceKind("rbac.authorization.k8s.io/v1", "RoleBinding", namespaced=True)
SERVICE_ACCOUNT = ResourceKind(CORE_API_VERSION, "ServiceAccount", namespaced=True)
SERVICE = ResourceKind(CORE_API_VERSION, "Service", namespaced=True)
CONFIG_MAP = ResourceKind(CORE_API_VERSION, "ConfigMap", namespaced=True)
SECRET = ResourceKind(CORE_API_VERSION, "Secret", namespaced=True)
DEPLOYMENT = ResourceKind("apps/v1", "Deployment", namespaced=True)
DAEMON_SET = ResourceKind("apps/v1", "DaemonSet", namespaced=True)
STATEFUL_SET = ResourceKind("apps/v1", "StatefulSet", namespaced=True)
JOB = ResourceKind("batch/v1", "Job", namespaced=True)
CRON_JOB = ResourceKind("batch/v1", "CronJob", namespaced=True)
POD_DISRUPTION_BUDGET = ResourceKind("policy/v1", "PodDisruptionBudget", namespaced=True)

DEFAULT_KINDS: tuple[ResourceKind, ...] = (
    CLUSTER_ROLE,
    CLUSTER_ROLE_BINDING,
    CUSTOM_RESOURCE_DEFINITION,
    API_SERVICE,
    MUTATING_WEBHOOK_CONFIGURATION,
    VALIDATING_WEBHOOK_CONFIGURATION,
    ROLE,
    ROLE_BINDING,
    SERVICE_ACCOUNT,
    SERVICE,
    CONFIG_MAP,
    SECRET,
    DEPLOYMENT,
    DAEMON_SET,
    STATEFUL_SET,
    JOB,
    CRON_JOB,
    POD_DISRUPTION_BUDGET,
)

# kind -> (kubernetes_asyncio API class, list method)
LIST_CALLS: dict[str, tuple[str, str]] = {
    "ClusterRole": ("RbacAuthorizationV1Api", "list_cluster_role"),
    "ClusterRoleBinding": ("RbacAuthorizationV1Api", "list_cluster_role_binding"),
    "CustomResourceDefinition": ("ApiextensionsV1Api", "list_custom_resource_definition"),
    "APIService": ("ApiregistrationV1Api", "list_api_service"),
    "MutatingWebhookConfiguration": ("AdmissionregistrationV1Api", "list_mutating_webhook_configuration"),
    "ValidatingWebhookConfiguration": ("AdmissionregistrationV1Api", "list_validating_webhook_configuration"),
    "Role": ("RbacAuthorizationV1Api", "list_role_for_all_namespaces"),
    "RoleBinding": ("RbacAuthorizationV1Api", "list_role_binding_for_all_namespaces"),
    "ServiceAccount": ("CoreV1Api", "list_service_account_for_all_namespaces"),
    "Service": ("CoreV1Api", "list_service_for_all_namespaces"),
    "ConfigMap": ("CoreV1Api", "list_config_map_for_all_namespaces"),
    "Secret": ("CoreV1Api", "list_secret_for_all_namespaces"),
    "Deployment": ("AppsV1Api", "list_deployment_for_all_namespaces"),
    "DaemonSet": ("AppsV1Api", "list_daemon_set_for_all_namespaces"),
    "StatefulSet": ("AppsV1Api", "list_stateful_set_for_all_namespaces"),
    "Job": ("BatchV1Api", "list_job_for_all_namespaces"),
    "CronJob": ("BatchV1Api", "list_cron_job_for_all_namespaces"),
    "PodDisruptionBudget": ("PolicyV1Api", "list_pod_disruption_budget_for_all_namespaces"),
}
