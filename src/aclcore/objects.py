"""
Roles, resources and their aggregates.

Roles and resources are named nodes that may carry children. A rule
bound to a node also applies to every descendant of that node, so a
hierarchy such as

    admin -> moderator -> user

lets a rule granted to "admin" answer for "moderator" and "user" too.

Aggregates stand in for several names at once. They are what callers
pass to Acl.is_allowed when a subject holds more than one role (or an
object belongs to more than one resource group): the ACL expands the
aggregate into its constituent names and tests each of them.
"""

from typing import Iterator, Protocol, runtime_checkable


class AclObject:
    """
    Named node with ordered children.

    Children are keyed by name: adding a second child with a name that
    is already present is a no-op.

    Attributes:
        name: The node's name
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._children: list["AclObject"] = []

    @property
    def children(self) -> tuple["AclObject", ...]:
        """Direct children, in insertion order."""
        return tuple(self._children)

    def add_child(self, child: "AclObject") -> None:
        """Add a child unless one with the same name already exists."""
        if self.has_child(child.name):
            return
        self._children.append(child)

    def remove_child(self, child: "AclObject | str") -> bool:
        """
        Remove a direct child by object or by name.

        Returns:
            True if a child was removed, False otherwise
        """
        name = child if isinstance(child, str) else child.name
        for index, existing in enumerate(self._children):
            if existing.name == name:
                del self._children[index]
                return True
        return False

    def has_child(self, child: "AclObject | str") -> bool:
        """Check whether a direct child with this name exists."""
        name = child if isinstance(child, str) else child.name
        return any(existing.name == name for existing in self._children)

    def find_depth(self, name: str) -> int | None:
        """
        Distance from this node to the first node named `name`.

        The search is depth-first over children and guards against
        cycles. Returns 0 for the node itself and None when no node in
        the subtree carries the name.
        """
        return self._find_depth(name, 0, set())

    def _find_depth(self, name: str, depth: int, seen: set[int]) -> int | None:
        if id(self) in seen:
            return None
        seen.add(id(self))

        if self.name == name:
            return depth

        for child in self._children:
            found = child._find_depth(name, depth + 1, seen)
            if found is not None:
                return found
        return None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"


class Role(AclObject):
    """A subject of an access decision."""


class Resource(AclObject):
    """An object of an access decision."""


# =============================================================================
# Aggregate capabilities
# =============================================================================


@runtime_checkable
class RoleAggregateInterface(Protocol):
    """Anything that can list the role names it stands for."""

    def get_roles_names(self) -> list[str]: ...


@runtime_checkable
class ResourceAggregateInterface(Protocol):
    """Anything that can list the resource names it stands for."""

    def get_resources_names(self) -> list[str]: ...


class _Aggregate:
    """Ordered, name-unique collection of AclObjects."""

    def __init__(self, items: "list[AclObject] | None" = None) -> None:
        self._items: list[AclObject] = []
        for item in items or []:
            self._add(item)

    def _add(self, item: AclObject) -> None:
        if not self._has(item.name):
            self._items.append(item)

    def _remove(self, item: "AclObject | str") -> bool:
        name = item if isinstance(item, str) else item.name
        for index, existing in enumerate(self._items):
            if existing.name == name:
                del self._items[index]
                return True
        return False

    def _has(self, name: str) -> bool:
        return any(existing.name == name for existing in self._items)

    def _names(self) -> list[str]:
        return [item.name for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[AclObject]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: [{', '.join(self._names())}]>"


class RoleAggregate(_Aggregate):
    """
    A set of roles held together, e.g. by one user.

    Usage:
        user = RoleAggregate([Role("editor"), Role("viewer")])
        acl.is_allowed(user, "post", "edit")
    """

    def add_role(self, role: Role) -> None:
        self._add(role)

    def remove_role(self, role: "Role | str") -> bool:
        return self._remove(role)

    def has_role(self, role: "Role | str") -> bool:
        return self._has(role if isinstance(role, str) else role.name)

    @property
    def roles(self) -> tuple[Role, ...]:
        return tuple(self._items)  # type: ignore[arg-type]

    def get_roles_names(self) -> list[str]:
        """Names of the held roles, in insertion order."""
        return self._names()


class ResourceAggregate(_Aggregate):
    """A set of resources checked together."""

    def add_resource(self, resource: Resource) -> None:
        self._add(resource)

    def remove_resource(self, resource: "Resource | str") -> bool:
        return self._remove(resource)

    def has_resource(self, resource: "Resource | str") -> bool:
        return self._has(resource if isinstance(resource, str) else resource.name)

    @property
    def resources(self) -> tuple[Resource, ...]:
        return tuple(self._items)  # type: ignore[arg-type]

    def get_resources_names(self) -> list[str]:
        """Names of the held resources, in insertion order."""
        return self._names()
