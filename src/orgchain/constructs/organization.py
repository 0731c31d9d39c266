"""AWS Organizations constructs that build the resource tree.

Each helper adds one node with its kind, correlation key and the edges it
needs regardless of chaining (a delegated administrator waits for its
account, an attachment waits for its policy and target, ...). Ordering
between siblings is left to the chaining pass.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Literal, Optional

from orgchain.core.config import AppSettings
from orgchain.core.exceptions import ServiceAccessNotEnabledError
from orgchain.models.resource import ResourceKind, ResourceNode
from orgchain.models.tree import ResourceTree

logger = logging.getLogger(__name__)


class PolicyType(StrEnum):
    SERVICE_CONTROL_POLICY = "SERVICE_CONTROL_POLICY"
    TAG_POLICY = "TAG_POLICY"
    BACKUP_POLICY = "BACKUP_POLICY"
    AISERVICES_OPT_OUT_POLICY = "AISERVICES_OPT_OUT_POLICY"


class Organization:
    """An organization, its root, and the resources declared beneath it."""

    def __init__(
        self,
        tree: ResourceTree,
        name: str = "Organization",
        *,
        feature_set: Literal["ALL", "CONSOLIDATED_BILLING"] = "ALL",
        settings: AppSettings | None = None,
    ) -> None:
        if settings is None:
            settings = AppSettings()
        self._tree = tree
        self._region = settings.organizations.region
        self._service_principals: list[str] = []
        self._policy_types: dict[PolicyType, ResourceNode] = {}

        self.node = self._add(
            name, None, resource_type="Custom::Organizations_Organization",
            properties={"FeatureSet": feature_set, "EnabledServicePrincipals": []},
        )
        self.root = self._add("Root", self.node, resource_type="Custom::Organizations_Root")
        tree.add_dependency(self.root, self.node)

    @property
    def tree(self) -> ResourceTree:
        return self._tree

    @property
    def service_principals(self) -> list[str]:
        return list(self._service_principals)

    def _add(
        self,
        name: str,
        parent: ResourceNode | None,
        *,
        kind: ResourceKind = ResourceKind.UNCHAINED,
        correlation_key: Optional[str] = None,
        resource_type: str = "",
        properties: dict[str, Any] | None = None,
        node_id: str | None = None,
    ) -> ResourceNode:
        if node_id is None:
            node_id = f"{parent.id}/{name}" if parent is not None else name
        node = ResourceNode(
            id=node_id,
            kind=kind,
            correlation_key=correlation_key,
            resource_type=resource_type,
            properties={"Region": self._region, **(properties or {})},
        )
        return self._tree.add(node, parent)

    # ---- organization-level settings ----

    def enable_aws_service_access(self, service_principal: str) -> None:
        """Trust ``service_principal`` (e.g. ``sso.amazonaws.com``) in the organization."""
        if service_principal not in self._service_principals:
            self._service_principals.append(service_principal)
            self.node.properties["EnabledServicePrincipals"] = list(self._service_principals)

    def enable_policy_type(self, policy_type: PolicyType) -> ResourceNode:
        """Enable ``policy_type`` in the root. Enabling the same type twice returns the existing node."""
        policy_type = PolicyType(policy_type)
        if policy_type in self._policy_types:
            return self._policy_types[policy_type]
        node = self._add(
            str(policy_type), self.root,
            kind=ResourceKind.POLICY_TYPE_ENABLEMENT,
            correlation_key=self.root.id,
            resource_type="Custom::Organizations_EnablePolicyType",
            properties={"RootId": self.root.id, "PolicyType": str(policy_type)},
            node_id=f"{self.root.id}:{policy_type}",
        )
        self._tree.add_dependency(node, self.root)
        self._policy_types[policy_type] = node
        return node

    # ---- structure ----

    def add_organizational_unit(self, name: str, parent: ResourceNode | None = None) -> ResourceNode:
        parent = parent if parent is not None else self.root
        node = self._add(
            name, parent,
            kind=ResourceKind.ORGANIZATIONAL_UNIT_CREATION,
            resource_type="Custom::Organizations_OrganizationalUnitProvider",
            properties={"Name": name, "ParentId": parent.id},
        )
        self._tree.add_dependency(node, parent)
        return node

    def add_account(self, name: str, email: str, parent: ResourceNode | None = None) -> ResourceNode:
        parent = parent if parent is not None else self.root
        node = self._add(
            name, parent,
            kind=ResourceKind.ACCOUNT_CREATION,
            resource_type="Custom::Organizations_Account",
            properties={"AccountName": name, "Email": email, "ParentId": parent.id},
        )
        self._tree.add_dependency(node, parent)
        return node

    def delegate_administrator(self, account: ResourceNode, service_principal: str) -> ResourceNode:
        """Register ``account`` as delegated administrator for ``service_principal``."""
        if service_principal not in self._service_principals:
            raise ServiceAccessNotEnabledError(service_principal)
        node = self._add(
            f"Delegate-{service_principal}", self.root,
            kind=ResourceKind.DELEGATED_ADMINISTRATOR,
            correlation_key=service_principal,
            resource_type="Custom::Organizations_DelegatedAdministrator",
            properties={"AccountId": account.id, "ServicePrincipal": service_principal},
            node_id=f"{account.id}/Delegate-{service_principal}",
        )
        self._tree.add_dependency(node, account)
        return node

    # ---- policies ----

    def add_policy(self, name: str, content: str, policy_type: PolicyType) -> ResourceNode:
        policy_type = PolicyType(policy_type)
        node = self._add(
            name, self.root,
            resource_type="Custom::Organizations_Policy",
            properties={"Name": name, "Content": content, "Type": str(policy_type)},
        )
        enablement = self._policy_types.get(policy_type)
        if enablement is not None:
            self._tree.add_dependency(node, enablement)
        return node

    def attach_policy(self, policy: ResourceNode, target: ResourceNode) -> ResourceNode:
        """Attach ``policy`` to an account, organizational unit or root.

        The attachment lives under the policy but is grouped for chaining by
        its target.
        """
        node = self._add(
            f"Attachment-{target.id}", policy,
            kind=ResourceKind.POLICY_ATTACHMENT,
            correlation_key=target.id,
            resource_type="Custom::Organizations_PolicyAttachment",
            properties={"PolicyId": policy.id, "TargetId": target.id},
        )
        self._tree.add_dependency(node, policy)
        self._tree.add_dependency(node, target)
        logger.debug("Attached policy %s to %s", policy.id, target.id)
        return node
