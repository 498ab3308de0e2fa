"""
aclcore - In-process Access Control List evaluator.

aclcore answers one question for an embedding application: may this
role do this (named rule) to this resource? It provides:
- A rule registry with identity-based deduplication (re-adding a rule
  retargets it)
- Role and resource hierarchies, plus aggregates for multi-role subjects
- Deny-wins reduction: one deny vetoes, silence never grants access

Example usage:
    from aclcore import Acl, Resource, Role

    acl = Acl()
    acl.add_rule(Role("guest"), Resource("article"), "view", True)
    acl.is_allowed("guest", "article", "view")  # True
"""

from aclcore.acl import Acl
from aclcore.errors import AclError, ConfigurationError, InvalidArgumentError, InvalidRuleError
from aclcore.names import Aggregate, Named, expand_names
from aclcore.objects import Resource, ResourceAggregate, Role, RoleAggregate
from aclcore.result import RuleResultCollection
from aclcore.rule import Rule, RuleResult, RuleWide
from aclcore.schema import AclSettings, load_settings

__version__ = "0.1.0"
__author__ = "aclcore Contributors"

__all__ = [
    "__version__",
    "__author__",
    "Acl",
    "AclError",
    "AclSettings",
    "Aggregate",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidRuleError",
    "Named",
    "Resource",
    "ResourceAggregate",
    "Role",
    "RoleAggregate",
    "Rule",
    "RuleResult",
    "RuleResultCollection",
    "RuleWide",
    "expand_names",
    "load_settings",
]
