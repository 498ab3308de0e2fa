"""
Name expansion for role and resource references.

Evaluation accepts either a plain name or an aggregate for both the role
and the resource side. References are resolved once, at the call
boundary, into one of two variants:

    Named("editor")                 -> ["editor"]
    Aggregate(("admin", "editor"))  -> ["admin", "editor"]

Values that are neither a string nor an aggregate resolve to nothing,
which means no pairs are tested for them. That is a silent no-op, not an
error.
"""

from dataclasses import dataclass
from typing import Any

from aclcore.objects import ResourceAggregateInterface, RoleAggregateInterface


@dataclass(frozen=True)
class Named:
    """A single role or resource name."""

    name: str

    def names(self) -> list[str]:
        return [self.name]


@dataclass(frozen=True)
class Aggregate:
    """An ordered group of role or resource names."""

    members: tuple[str, ...] = ()

    def names(self) -> list[str]:
        return list(self.members)


NameRef = Named | Aggregate


def to_name_ref(value: Any) -> NameRef | None:
    """
    Resolve a role or resource reference into a NameRef.

    Args:
        value: A name, an object with get_roles_names() or
            get_resources_names(), or an already resolved NameRef

    Returns:
        The resolved reference, or None when the value has no names
    """
    if isinstance(value, (Named, Aggregate)):
        return value
    if isinstance(value, str):
        return Named(value)
    if isinstance(value, RoleAggregateInterface):
        return Aggregate(tuple(value.get_roles_names()))
    if isinstance(value, ResourceAggregateInterface):
        return Aggregate(tuple(value.get_resources_names()))
    return None


def expand_names(value: Any) -> list[str]:
    """Flatten a role or resource reference into the names to test."""
    ref = to_name_ref(value)
    if ref is None:
        return []
    return ref.names()
