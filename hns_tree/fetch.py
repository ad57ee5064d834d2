"""
Namespace discovery through the Kubernetes API.

Lists every namespace visible to the configured credentials and reduces it
to the Resource shape the forest builder consumes.
"""

from __future__ import annotations

import logging

import yaml
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from .exceptions import FetchError
from .models import Resource

logger = logging.getLogger(__name__)

# Set by the Hierarchical Namespace Controller on every subnamespace.
PARENT_ANNOTATION = "hnc.x-k8s.io/subnamespace-of"


def fetch_namespaces(
    kubeconfig: str | None = None,
    parent_annotation: str = PARENT_ANNOTATION,
) -> list[Resource]:
    """List all namespaces in the cluster as Resources.

    With ``kubeconfig`` of None the in-cluster service account is tried
    first, then the client default (``$KUBECONFIG`` or ``~/.kube/config``).
    """
    try:
        api_client = _new_api_client(kubeconfig)
    except (ConfigException, yaml.YAMLError, TypeError, AttributeError, ValueError) as e:
        raise FetchError(f"invalid kubeconfig: {e}") from e
    except OSError as e:
        raise FetchError(f"cannot read kubeconfig: {e}") from e

    try:
        with api_client:
            namespaces = client.CoreV1Api(api_client).list_namespace()
    except ApiException as e:
        raise FetchError(f"listing namespaces failed: {e.status} {e.reason}") from e
    except (HTTPError, OSError) as e:
        raise FetchError(f"cannot reach cluster: {e}") from e

    resources = [namespace_to_resource(ns, parent_annotation) for ns in namespaces.items]
    logger.debug("Fetched %d namespaces", len(resources))
    return resources


def _new_api_client(kubeconfig: str | None) -> client.ApiClient:
    if kubeconfig is None:
        configuration = client.Configuration()
        try:
            config.load_incluster_config(client_configuration=configuration)
        except ConfigException as e:
            logger.debug("In-cluster config unavailable (%s), using client default", e)
        else:
            logger.debug("Using in-cluster config")
            return client.ApiClient(configuration)
    logger.debug("Loading kubeconfig from %s", kubeconfig or "client default")
    return config.new_client_from_config(config_file=kubeconfig)


def namespace_to_resource(namespace, parent_annotation: str = PARENT_ANNOTATION) -> Resource:
    """Convert a V1Namespace into a Resource."""
    metadata = namespace.metadata
    annotations = metadata.annotations or {}
    return Resource(name=metadata.name, parent_name=annotations.get(parent_annotation) or None)
