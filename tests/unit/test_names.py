"""
Unit tests for role/resource name expansion.
"""

import pytest

from aclcore.names import Aggregate, Named, expand_names, to_name_ref
from aclcore.objects import Resource, ResourceAggregate, Role, RoleAggregate


class RolesOnly:
    """A duck-typed role aggregate."""

    def get_roles_names(self) -> list[str]:
        return ["admin", "editor", "viewer"]


class TestToNameRef:
    """Tests for resolving references into NameRef variants."""

    def test_string(self) -> None:
        assert to_name_ref("guest") == Named("guest")

    def test_role_aggregate(self) -> None:
        aggregate = RoleAggregate([Role("admin"), Role("editor")])
        assert to_name_ref(aggregate) == Aggregate(("admin", "editor"))

    def test_resource_aggregate(self) -> None:
        aggregate = ResourceAggregate([Resource("post"), Resource("page")])
        assert to_name_ref(aggregate) == Aggregate(("post", "page"))

    def test_duck_typed_aggregate(self) -> None:
        """Any object with get_roles_names() counts as a role aggregate."""
        assert to_name_ref(RolesOnly()) == Aggregate(("admin", "editor", "viewer"))

    def test_resolved_refs_pass_through(self) -> None:
        ref = Aggregate(("a", "b"))
        assert to_name_ref(ref) is ref

    @pytest.mark.parametrize("value", [None, 42, Role("guest"), Resource("post"), ["guest"]])
    def test_unsupported_values(self, value: object) -> None:
        """Plain objects, including bare Role/Resource, resolve to nothing."""
        assert to_name_ref(value) is None


class TestExpandNames:
    """Tests for expand_names."""

    def test_string_is_singleton(self) -> None:
        assert expand_names("guest") == ["guest"]

    def test_aggregate_order_preserved(self) -> None:
        aggregate = RoleAggregate([Role("viewer"), Role("admin"), Role("editor")])
        assert expand_names(aggregate) == ["viewer", "admin", "editor"]

    def test_empty_aggregate(self) -> None:
        assert expand_names(RoleAggregate()) == []

    def test_unsupported_is_empty(self) -> None:
        assert expand_names(object()) == []

    def test_empty_string_is_a_name(self) -> None:
        """An empty string is still a name to test."""
        assert expand_names("") == [""]
