"""
Rules: named policy units that judge one (role name, resource name) pair.

A Rule binds a role, a resource and an action under a name such as
"view" or "edit". The Acl only relies on the contract below; subclasses
are free to implement is_allowed() however they like.

Contract:
    - name, role, resource, action are plain attributes and can be
      reassigned at any time (Acl.add_rule does so on every call)
    - is_allowed(role_name, resource_name) returns a RuleResult when the
      rule has something to say about the pair, or None when it does not
    - rules are compared by identity only; they never define __eq__

Actions:
    - True / False: allow / deny for every matched pair
    - None: matched, but no opinion
    - callable: invoked with the RuleResult, returns True, False or None
"""

import uuid
from dataclasses import dataclass
from typing import Any, Callable

from aclcore.objects import AclObject


@dataclass
class RuleResult:
    """
    Outcome of one rule judging one (role name, resource name) pair.

    Attributes:
        rule: The rule that produced this result
        needed_role_name: The role name that was asked about
        needed_resource_name: The resource name that was asked about
        priority: Combined hierarchy distance of the match (0 = direct)
        action: True (allow), False (deny) or None (no opinion)
    """

    rule: "Rule"
    needed_role_name: str
    needed_resource_name: str
    priority: int = 0
    action: bool | None = None

    @property
    def is_allowed(self) -> bool:
        """Whether this single result grants access."""
        return self.action is True


class Rule:
    """
    Baseline rule matching names against its role and resource trees.

    A pair matches when the role name is the bound role's name or the
    name of one of its descendants, and likewise for the resource. A
    plain string binding matches only that exact name.

    Usage:
        rule = Rule("view")
        acl.add_rule(Role("guest"), Resource("article"), rule, True)
    """

    def __init__(self, name: str) -> None:
        self.id = uuid.uuid4().hex
        self.name = name
        self.role: Any = None
        self.resource: Any = None
        self.action: Any = None

    def is_allowed(self, role_name: str, resource_name: str) -> RuleResult | None:
        """
        Judge a single (role name, resource name) pair.

        Args:
            role_name: Concrete role name being checked
            resource_name: Concrete resource name being checked

        Returns:
            A RuleResult if both names fall under this rule, else None
        """
        role_depth = self._match_role(role_name)
        if role_depth is None:
            return None

        resource_depth = self._match_resource(resource_name)
        if resource_depth is None:
            return None

        result = RuleResult(
            rule=self,
            needed_role_name=role_name,
            needed_resource_name=resource_name,
            priority=role_depth + resource_depth,
        )
        result.action = self._resolve_action(result)
        return result

    def _match_role(self, role_name: str) -> int | None:
        return _match_depth(self.role, role_name)

    def _match_resource(self, resource_name: str) -> int | None:
        return _match_depth(self.resource, resource_name)

    def _resolve_action(self, result: RuleResult) -> bool | None:
        action = self.action
        if callable(action):
            action = action(result)
        if action is None:
            return None
        return bool(action)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name} ({self.id[:8]})>"


class RuleWide(Rule):
    """
    A rule that matches every role and resource name.

    Useful as a global switch, e.g. denying "delete" to everybody while
    the more specific rules stay registered.
    """

    def _match_role(self, role_name: str) -> int | None:
        return 0

    def _match_resource(self, resource_name: str) -> int | None:
        return 0


RuleFactory = Callable[[str], Rule]


def binding_name(node: Any) -> str | None:
    """Name of a role or resource binding; a plain string is its own name."""
    if isinstance(node, str):
        return node
    return getattr(node, "name", None)


def _match_depth(node: Any, name: str) -> int | None:
    if node is None:
        return None
    if isinstance(node, AclObject):
        return node.find_depth(name)
    # Strings and bare objects are leaves
    return 0 if binding_name(node) == name else None
