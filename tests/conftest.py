"""
Pytest configuration and fixtures for aclcore tests.

This module provides shared fixtures used across unit and integration
tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from aclcore import Acl, Resource, Role
from aclcore.rule import Rule, RuleResult


class FixedRule(Rule):
    """A rule that returns the same verdict for every pair it is asked about."""

    def __init__(self, name: str, verdict: bool | None = True) -> None:
        super().__init__(name)
        self.verdict = verdict
        self.calls: list[tuple[str, str]] = []

    def is_allowed(self, role_name: str, resource_name: str) -> RuleResult | None:
        self.calls.append((role_name, resource_name))
        return RuleResult(
            rule=self,
            needed_role_name=role_name,
            needed_resource_name=resource_name,
            action=self.verdict,
        )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def acl() -> Acl:
    """Return an empty ACL."""
    return Acl()


@pytest.fixture
def guest() -> Role:
    return Role("guest")


@pytest.fixture
def article() -> Resource:
    return Resource("article")


@pytest.fixture
def role_tree() -> Role:
    """admin -> moderator -> user."""
    admin = Role("admin")
    moderator = Role("moderator")
    user = Role("user")
    moderator.add_child(user)
    admin.add_child(moderator)
    return admin


@pytest.fixture
def sample_settings_yaml() -> str:
    """Return a settings YAML document using the JSON renderer."""
    return """
rule_class: aclcore.rule.RuleWide
log_level: debug
log_format: json
"""


@pytest.fixture
def make_rule() -> type[FixedRule]:
    """Return a factory for rules with a fixed verdict: make_rule("view", False)."""
    return FixedRule
