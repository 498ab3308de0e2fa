"""
Unit tests for Rule, RuleWide and RuleResult.

Tests cover:
- Name matching against role and resource hierarchies
- Action resolution (bool, None, callable)
- Priority from hierarchy depth
- RuleWide matching everything
"""

from aclcore.objects import Resource, Role
from aclcore.rule import Rule, RuleResult, RuleWide


def bind(rule: Rule, role, resource, action) -> Rule:
    """Assign bindings the way Acl.add_rule does."""
    rule.role = role
    rule.resource = resource
    rule.action = action
    return rule


class TestRuleBasics:
    """Basic rule attributes."""

    def test_new_rule_is_unbound(self) -> None:
        """A fresh rule has a name and an id but no bindings."""
        rule = Rule("view")
        assert rule.name == "view"
        assert rule.role is None
        assert rule.resource is None
        assert rule.action is None
        assert len(rule.id) == 32

    def test_ids_are_unique(self) -> None:
        """Every rule gets its own id."""
        assert Rule("view").id != Rule("view").id

    def test_rules_compare_by_identity(self) -> None:
        """Rules with identical attributes are still different rules."""
        a = bind(Rule("view"), Role("guest"), Resource("article"), True)
        b = bind(Rule("view"), a.role, a.resource, True)
        assert a != b
        assert a == a

    def test_unbound_rule_has_no_opinion(self) -> None:
        """Without a role and resource, a rule matches nothing."""
        assert Rule("view").is_allowed("guest", "article") is None

    def test_repr(self) -> None:
        """repr shows class and name."""
        assert "Rule: view" in repr(Rule("view"))


class TestRuleMatching:
    """Tests for matching names against bound roles and resources."""

    def test_direct_match(self) -> None:
        """Exact role and resource names produce a result."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), True)
        result = rule.is_allowed("guest", "article")

        assert isinstance(result, RuleResult)
        assert result.rule is rule
        assert result.needed_role_name == "guest"
        assert result.needed_resource_name == "article"
        assert result.priority == 0
        assert result.action is True
        assert result.is_allowed is True

    def test_role_mismatch(self) -> None:
        """A different role name yields no result."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), True)
        assert rule.is_allowed("admin", "article") is None

    def test_resource_mismatch(self) -> None:
        """A different resource name yields no result."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), True)
        assert rule.is_allowed("guest", "comment") is None

    def test_matching_is_case_sensitive(self) -> None:
        """Names are compared exactly."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), True)
        assert rule.is_allowed("Guest", "article") is None

    def test_descendant_role_inherits(self, role_tree: Role) -> None:
        """A rule bound to a parent role answers for its descendants."""
        rule = bind(Rule("view"), role_tree, Resource("article"), True)

        assert rule.is_allowed("moderator", "article").priority == 1
        assert rule.is_allowed("user", "article").priority == 2

    def test_ancestor_role_does_not_inherit(self, role_tree: Role) -> None:
        """A rule bound to a child role does not answer for its parent."""
        user = role_tree.children[0].children[0]
        rule = bind(Rule("view"), user, Resource("article"), True)
        assert rule.is_allowed("admin", "article") is None

    def test_descendant_resource_inherits(self) -> None:
        """Resource hierarchies work the same way as role hierarchies."""
        site = Resource("site")
        site.add_child(Resource("blog"))
        rule = bind(Rule("view"), Role("guest"), site, True)

        result = rule.is_allowed("guest", "blog")
        assert result is not None
        assert result.priority == 1

    def test_priority_sums_both_sides(self, role_tree: Role) -> None:
        """Priority adds role depth and resource depth."""
        site = Resource("site")
        site.add_child(Resource("blog"))
        rule = bind(Rule("view"), role_tree, site, True)
        assert rule.is_allowed("user", "blog").priority == 3

    def test_plain_named_objects(self) -> None:
        """Any object with a name attribute can be bound."""

        class Subject:
            name = "guest"

        rule = bind(Rule("view"), Subject(), Resource("article"), True)
        assert rule.is_allowed("guest", "article") is not None
        assert rule.is_allowed("admin", "article") is None


class TestRuleActions:
    """Tests for action resolution."""

    def test_deny_action(self) -> None:
        """False denies."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), False)
        result = rule.is_allowed("guest", "article")
        assert result.action is False
        assert result.is_allowed is False

    def test_none_action_is_no_opinion(self) -> None:
        """None matches but abstains."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), None)
        result = rule.is_allowed("guest", "article")
        assert result is not None
        assert result.action is None

    def test_callable_action_receives_result(self) -> None:
        """Callable actions are invoked with the RuleResult."""
        seen: list[RuleResult] = []

        def only_direct(result: RuleResult) -> bool:
            seen.append(result)
            return result.priority == 0

        root = Role("admin")
        root.add_child(Role("editor"))
        rule = bind(Rule("view"), root, Resource("article"), only_direct)

        assert rule.is_allowed("admin", "article").action is True
        assert rule.is_allowed("editor", "article").action is False
        assert [r.needed_role_name for r in seen] == ["admin", "editor"]

    def test_callable_returning_none_abstains(self) -> None:
        """A callable may decline to judge."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), lambda result: None)
        assert rule.is_allowed("guest", "article").action is None

    def test_truthy_action_coerced_to_bool(self) -> None:
        """Non-bool values are coerced."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), 1)
        assert rule.is_allowed("guest", "article").action is True

        rule.action = 0
        assert rule.is_allowed("guest", "article").action is False

    def test_action_change_affects_later_results_only(self) -> None:
        """Results keep the action resolved when they were produced."""
        rule = bind(Rule("view"), Role("guest"), Resource("article"), True)
        before = rule.is_allowed("guest", "article")
        rule.action = False
        after = rule.is_allowed("guest", "article")

        assert before.action is True
        assert after.action is False


class TestRuleWide:
    """Tests for RuleWide."""

    def test_matches_any_names(self) -> None:
        """RuleWide judges every pair, even without bindings."""
        rule = RuleWide("delete")
        rule.action = False

        result = rule.is_allowed("anyone", "anything")
        assert result is not None
        assert result.action is False
        assert result.priority == 0

    def test_ignores_bindings(self) -> None:
        """Bound role and resource don't restrict a RuleWide."""
        rule = bind(RuleWide("view"), Role("guest"), Resource("article"), True)
        assert rule.is_allowed("admin", "comment").action is True
