"""Ambari REST topology gateway - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import httpx

from src.domain.entities.errors import TopologyLookupError
from src.domain.entities.state import LifecycleState
from src.domain.entities.topology import (
    ComponentCategory,
    ComponentInstance,
    ComponentRole,
    ServiceHandle,
    ServiceRef,
    StackId,
)
from src.domain.ports.topology_provider import ITopologyProvider
from src.shared import get_logger

logger = get_logger(__name__)

HOST_COMPONENT_FIELDS = ",".join(
    (
        "HostRoles/component_name",
        "HostRoles/host_name",
        "HostRoles/service_name",
        "HostRoles/state",
    )
)


class AmbariTopologyGateway(ITopologyProvider):
    """HTTP client for the Ambari server REST API."""

    def __init__(
        self,
        ambari_url: str,
        username: str,
        password: str,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
    ) -> None:
        """
        Initialize Ambari Topology Gateway.

        Args:
            ambari_url: Base URL of the Ambari server, e.g. http://ambari:8080
            username: Ambari user used for basic authentication
            password: Password of the Ambari user
            timeout: Timeout in seconds applied to every request
            verify_ssl: Whether TLS certificates are verified
        """
        self.ambari_url = ambari_url.rstrip("/")
        self.timeout = timeout
        self._auth = httpx.BasicAuth(username, password)
        self._verify_ssl = verify_ssl
        self._role_cache: Dict[Tuple[str, str, str, str], Optional[ComponentRole]] = {}

    def resolve_service(self, service_ref: ServiceRef) -> Optional[ServiceHandle]:
        url = (
            f"{self.ambari_url}/api/v1/clusters/{service_ref.cluster_name}"
            f"/services/{service_ref.service_name}"
        )
        payload = self._get_json(url, params={"fields": "ServiceInfo/desired_stack"})
        if payload is None:
            return None

        desired_stack = payload.get("ServiceInfo", {}).get("desired_stack")
        if not desired_stack:
            raise TopologyLookupError(
                f"Service {service_ref} has no desired stack",
                details={"url": url},
            )
        try:
            stack_id = StackId.parse(desired_stack)
        except ValueError as exc:
            raise TopologyLookupError(str(exc), details={"url": url}) from exc

        return ServiceHandle(ref=service_ref, stack_id=stack_id)

    def list_component_instances(
        self, service: ServiceHandle
    ) -> List[ComponentInstance]:
        url = (
            f"{self.ambari_url}/api/v1/clusters/{service.ref.cluster_name}"
            "/host_components"
        )
        payload = self._get_json(
            url,
            params={
                "HostRoles/service_name": service.ref.service_name,
                "fields": HOST_COMPONENT_FIELDS,
            },
        )
        if payload is None:
            raise TopologyLookupError(
                f"Cluster {service.ref.cluster_name} not found",
                details={"url": url},
            )

        instances = []
        for item in payload.get("items", []):
            host_role = item.get("HostRoles", {})
            if not host_role.get("component_name"):
                logger.warning(
                    "ambari.host_components.missing_name",
                    service=str(service.ref),
                    host_name=host_role.get("host_name"),
                )
                continue
            instances.append(self._to_instance(host_role))
        logger.info(
            "ambari.host_components.response",
            service=str(service.ref),
            count=len(instances),
        )
        return instances

    def describe_component_role(
        self, component_kind: str, stack_context: ServiceHandle
    ) -> Optional[ComponentRole]:
        stack_id = stack_context.stack_id
        service_name = stack_context.ref.service_name
        cache_key = (
            stack_id.stack_name,
            stack_id.stack_version,
            service_name,
            component_kind,
        )
        if cache_key in self._role_cache:
            return self._role_cache[cache_key]

        url = (
            f"{self.ambari_url}/api/v1/stacks/{stack_id.stack_name}"
            f"/versions/{stack_id.stack_version}/services/{service_name}"
            f"/components/{component_kind}"
        )
        payload = self._get_json(
            url, params={"fields": "StackServiceComponents/component_category"}
        )
        role = None if payload is None else self._to_role(component_kind, payload, url)
        self._role_cache[cache_key] = role
        return role

    def _get_json(self, url: str, params: Dict[str, str]) -> Optional[Dict[str, Any]]:
        """GET a resource, returning None when Ambari answers 404."""
        logger.debug("ambari.request", url=url, params=params)

        try:
            with httpx.Client(
                timeout=self.timeout,
                verify=self._verify_ssl,
                auth=self._auth,
                headers={"X-Requested-By": "ambari"},
            ) as client:
                response = client.get(url, params=params)

            if response.status_code == 404:
                logger.debug("ambari.not_found", url=url)
                return None

            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "ambari.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise TopologyLookupError(
                f"Ambari returned HTTP {e.response.status_code}",
                details={"url": url, "status_code": e.response.status_code},
            ) from e

        except httpx.RequestError as e:
            logger.error("ambari.request_error", error=str(e), url=url)
            raise TopologyLookupError(
                f"Failed to communicate with Ambari: {str(e)}",
                details={"url": url},
            ) from e

        except ValueError as e:
            logger.error("ambari.invalid_payload", error=str(e), url=url)
            raise TopologyLookupError(
                "Ambari returned a malformed payload", details={"url": url}
            ) from e

    def _to_instance(self, host_role: Dict[str, Any]) -> ComponentInstance:
        return ComponentInstance(
            component_kind=host_role["component_name"],
            lifecycle_state=LifecycleState.parse(host_role.get("state")),
            host_name=host_role.get("host_name"),
            service_name=host_role.get("service_name"),
        )

    def _to_role(
        self, component_kind: str, payload: Dict[str, Any], url: str
    ) -> ComponentRole:
        category = payload.get("StackServiceComponents", {}).get("component_category")
        try:
            return ComponentRole(
                component_kind=component_kind,
                category=ComponentCategory(category),
            )
        except ValueError as exc:
            raise TopologyLookupError(
                f"Unsupported component category {category!r} for {component_kind}",
                details={"url": url},
            ) from exc
