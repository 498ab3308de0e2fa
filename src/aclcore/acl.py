"""
The Acl registry: rule storage and access evaluation.

How evaluation works:
    1. Caller asks is_allowed(role, resource, rule_name)
    2. Stored rules are walked newest first (reverse registration order)
    3. Each rule whose current name equals rule_name judges every
       (role name, resource name) pair from the expanded references
    4. All per-pair results go into a RuleResultCollection, which
       reduces them to a single allow/deny

Design:
    - Rules are deduplicated by identity. Adding a rule object that is
      already registered only retargets it (role, resource, action)
    - Lookups are linear scans; registries are expected to be small
    - Nothing here is thread-safe. Serialize access externally if one
      Acl is shared between threads

Usage:
    acl = Acl()
    acl.add_rule(Role("guest"), Resource("article"), "view", True)
    acl.is_allowed("guest", "article", "view")  # True
"""

from typing import Any, Iterator

import structlog

from aclcore.errors import InvalidRuleError, InvalidRuleFactoryError
from aclcore.names import expand_names
from aclcore.result import RuleResultCollection
from aclcore.rule import Rule, RuleFactory, binding_name
from aclcore.schema import AclSettings, import_rule_class

logger = structlog.get_logger(__name__)


class Acl:
    """
    Registry of rules with identity-based deduplication.

    Attributes:
        _rules: Registered rules in registration order
        _rule_class: Factory used to build rules from plain names
    """

    def __init__(self, rule_factory: RuleFactory | None = None) -> None:
        """
        Initialize an empty ACL.

        Args:
            rule_factory: Builds a Rule from a name when add_rule() is
                given a string. Defaults to Rule.
        """
        self._rules: list[Rule] = []
        self._rule_class: RuleFactory = Rule
        if rule_factory is not None:
            self.set_rule_class(rule_factory)

    @classmethod
    def from_settings(cls, settings: AclSettings) -> "Acl":
        """
        Build an Acl whose rule factory is settings.rule_class.

        Raises:
            RuleClassImportError: If rule_class cannot be imported
            InvalidRuleFactoryError: If it names something not callable
        """
        return cls(rule_factory=import_rule_class(settings.rule_class))

    # =========================================================================
    # Rule factory
    # =========================================================================

    def set_rule_class(self, rule_class: RuleFactory) -> None:
        """
        Set the factory used to build rules from names.

        Args:
            rule_class: A Rule subclass or any callable taking a name and
                returning a Rule

        Raises:
            InvalidRuleFactoryError: If rule_class is not callable
        """
        if not callable(rule_class):
            raise InvalidRuleFactoryError(value_type=type(rule_class).__name__)
        self._rule_class = rule_class

    def get_rule_class(self) -> RuleFactory:
        return self._rule_class

    # =========================================================================
    # Registration
    # =========================================================================

    def has_rule(self, rule: Rule) -> bool:
        """Return True if this exact rule object is registered."""
        return any(existing is rule for existing in self._rules)

    def add_rule(
        self,
        role: Any,
        resource: Any,
        rule: Rule | str,
        action: Any = None,
    ) -> Rule:
        """
        Register a rule, or retarget one that is already registered.

        The role, resource and action are always assigned to the rule.
        The rule is appended only if it is not registered yet, so calling
        add_rule() again with the same rule object updates it in place.

        Args:
            role: Role the rule applies to, or a plain role name
            resource: Resource the rule applies to, or a plain resource name
            rule: A Rule, or a name to build one with the rule factory
            action: True, False, None or a callable taking a RuleResult

        Returns:
            The registered rule

        Raises:
            InvalidRuleError: If rule does not resolve to a Rule
        """
        if isinstance(rule, str):
            rule = self._rule_class(rule)

        if not isinstance(rule, Rule):
            raise InvalidRuleError(value_type=type(rule).__name__)

        rule.role = role
        rule.resource = resource
        rule.action = action

        if self.has_rule(rule):
            logger.debug("acl.rule_updated", rule=rule.name, rule_id=rule.id)
        else:
            self._rules.append(rule)
            logger.debug("acl.rule_added", rule=rule.name, rule_id=rule.id)

        return rule

    # =========================================================================
    # Evaluation
    # =========================================================================

    def is_allowed(self, role: Any, resource: Any, rule_name: str) -> bool:
        """
        Check whether access is allowed.

        Args:
            role: Role name or role aggregate
            resource: Resource name or resource aggregate
            rule_name: Name of the rules to consult

        Returns:
            True only if some matching rule allowed and none denied
        """
        collection = self.is_allowed_return_result(role, resource, rule_name)
        allowed = collection.get()
        logger.debug(
            "acl.evaluated",
            rule=rule_name,
            results=len(collection),
            allowed=allowed,
        )
        return allowed

    def is_allowed_return_result(
        self,
        role: Any,
        resource: Any,
        rule_name: str,
    ) -> RuleResultCollection:
        """
        Evaluate all rules named rule_name and collect their results.

        Rules are consulted newest first. The role and resource are
        expanded into names for every matching rule, and each
        (role name, resource name) pair is judged, role outermost.

        Returns:
            The unreduced RuleResultCollection
        """
        collection = RuleResultCollection()

        for rule in self._walk():
            if rule.name != rule_name:
                continue

            role_names = expand_names(role)
            resource_names = expand_names(resource)
            for role_name in role_names:
                for resource_name in resource_names:
                    collection.add(rule.is_allowed(role_name, resource_name))

        return collection

    def _walk(self) -> list[Rule]:
        """Rules in evaluation order (most recently registered first)."""
        return list(reversed(self._rules))

    # =========================================================================
    # Removal
    # =========================================================================

    def remove_all_rules(self) -> None:
        """Remove every rule."""
        self._rules.clear()
        logger.debug("acl.rules_cleared")

    def remove_rule(
        self,
        role_name: str | None = None,
        resource_name: str | None = None,
        rule_name: str | None = None,
        all_matches: bool = True,
    ) -> None:
        """
        Remove rules by rule name and/or role and resource names.

        Filters left as None match anything; with no filters at all every
        rule is removed. Role and resource filters compare against the
        name of the object bound to the rule, without expanding
        hierarchies or aggregates.

        Args:
            role_name: Only remove rules bound to a role with this name
            resource_name: Only remove rules bound to a resource with this name
            rule_name: Only remove rules with this name
            all_matches: If False, remove only the most recently
                registered matching rule
        """
        if role_name is None and resource_name is None and rule_name is None:
            self.remove_all_rules()
            return

        for index in reversed(range(len(self._rules))):
            rule = self._rules[index]
            if not self._rule_matches(rule, role_name, resource_name, rule_name):
                continue

            del self._rules[index]
            logger.debug("acl.rule_removed", rule=rule.name, rule_id=rule.id)
            if not all_matches:
                return

    @staticmethod
    def _rule_matches(
        rule: Rule,
        role_name: str | None,
        resource_name: str | None,
        rule_name: str | None,
    ) -> bool:
        if rule_name is not None and rule.name != rule_name:
            return False
        if role_name is not None and (
            rule.role is None or binding_name(rule.role) != role_name
        ):
            return False
        if resource_name is not None and (
            rule.resource is None or binding_name(rule.resource) != resource_name
        ):
            return False
        return True

    # =========================================================================
    # Container protocol
    # =========================================================================

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Registered rules in registration order."""
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules))

    def __contains__(self, rule: object) -> bool:
        return any(existing is rule for existing in self._rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"<Acl: [{names}]>"
