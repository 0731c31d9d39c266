"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from orgchain.core.config import AppSettings, ChainingConfig, OrganizationsConfig
from orgchain.models.resource import CHAINABLE_KINDS, ResourceKind


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.chaining.enabled is True


def test_chaining_defaults_cover_every_chainable_kind():
    config = ChainingConfig()
    assert config.chainable_kinds == set(CHAINABLE_KINDS)
    assert config.is_chainable(ResourceKind.DELEGATED_ADMINISTRATOR)
    assert not config.is_chainable(ResourceKind.UNCHAINED)


def test_disabled_chaining_reports_nothing_chainable():
    config = ChainingConfig(enabled=False)
    assert not config.is_chainable(ResourceKind.ACCOUNT_CREATION)


def test_chainable_kinds_from_env(monkeypatch):
    monkeypatch.setenv("ORGCHAIN_CHAIN_CHAINABLE_KINDS", '["account-creation"]')
    config = ChainingConfig()
    assert config.chainable_kinds == {ResourceKind.ACCOUNT_CREATION}
    assert not config.is_chainable(ResourceKind.DELEGATED_ADMINISTRATOR)


def test_organizations_region_per_partition():
    assert OrganizationsConfig().region == "us-east-1"
    assert OrganizationsConfig(partition="aws-cn").region == "cn-northwest-1"
    assert OrganizationsConfig(partition="aws-us-gov").region == "us-gov-west-1"


def test_partition_from_env(monkeypatch):
    monkeypatch.setenv("ORGCHAIN_ORG_PARTITION", "aws-cn")
    assert OrganizationsConfig().region == "cn-northwest-1"
