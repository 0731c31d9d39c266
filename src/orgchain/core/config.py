"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from orgchain.models.resource import CHAINABLE_KINDS, ResourceKind

_PARTITION_REGIONS = {
    "aws": "us-east-1",
    "aws-cn": "cn-northwest-1",
    "aws-us-gov": "us-gov-west-1",
}


class ChainingConfig(BaseSettings):
    """Sibling dependency-chaining configuration."""

    model_config = {"env_prefix": "ORGCHAIN_CHAIN_"}

    enabled: bool = True
    chainable_kinds: set[ResourceKind] = Field(default_factory=lambda: set(CHAINABLE_KINDS))

    def is_chainable(self, kind: ResourceKind) -> bool:
        return self.enabled and kind in self.chainable_kinds


class OrganizationsConfig(BaseSettings):
    """AWS Organizations endpoint configuration."""

    model_config = {"env_prefix": "ORGCHAIN_ORG_"}

    partition: Literal["aws", "aws-cn", "aws-us-gov"] = "aws"

    @property
    def region(self) -> str:
        # Organizations is a global service served from a single region per partition
        return _PARTITION_REGIONS[self.partition]


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ORGCHAIN_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    chaining: ChainingConfig = ChainingConfig()
    organizations: OrganizationsConfig = OrganizationsConfig()
