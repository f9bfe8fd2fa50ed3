"""Shape models: member descriptors and visibility markers.

A shape is the set of public members of a type, described independently of
inheritance or declared interfaces. Two shapes are reconciled purely by
member name and declared type.

Usage:
    from typing import Annotated

    @dataclass
    class Order:
        id: int
        total: Annotated[float, Visibility.INTERNAL]  # never copied
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class ShapeWarning(UserWarning):
    """Emitted when a member's annotation cannot be resolved at runtime."""


class Visibility(Enum):
    """Access level of a member, attached through ``typing.Annotated``.

    Names starting with an underscore are always non-public, regardless of
    any marker.
    """

    PUBLIC = auto()  # Readable and writable from outside
    INTERNAL = auto()  # Hidden in both directions
    INTERNAL_SET = auto()  # Public read, non-public write
    INTERNAL_GET = auto()  # Non-public read, public write

    @property
    def public_read(self) -> bool:
        return self in (Visibility.PUBLIC, Visibility.INTERNAL_SET)

    @property
    def public_member(self) -> bool:
        return self is not Visibility.INTERNAL


class MemberKind(Enum):
    """How a member is declared on its owning type."""

    FIELD = auto()  # dataclass or pydantic model field
    PROPERTY = auto()  # property descriptor
    ANNOTATION = auto()  # annotated attribute on a plain class


@dataclass(slots=True, frozen=True)
class Member:
    """Descriptor of one member of a shape.

    Attributes:
        name: Attribute name, compared case-sensitively.
        type: Declared type with visibility markers stripped.
        readable: Whether a value can be read from instances.
        writable: Whether a value can be assigned on instances.
        kind: Declaration form of the member.
        visibility: Access level from the annotation.
    """

    name: str
    type: Any
    readable: bool
    writable: bool
    kind: MemberKind
    visibility: Visibility = Visibility.PUBLIC

    @property
    def is_public(self) -> bool:
        return not self.name.startswith("_") and self.visibility.public_member

    @property
    def is_source(self) -> bool:
        """Member can be read by the copier."""
        return self.is_public and self.readable and self.visibility.public_read

    @property
    def is_destination(self) -> bool:
        """Member can be written by the copier.

        Setter visibility is irrelevant here: a public member with a
        non-public setter is still a destination.
        """
        return self.is_public and self.writable


@dataclass(slots=True, frozen=True)
class Shape:
    """Ordered member descriptors of one runtime type."""

    owner: type
    members: tuple[Member, ...]

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, name: object) -> bool:
        return any(m.name == name for m in self.members)

    def readable(self) -> tuple[Member, ...]:
        """Public readable members, in enumeration order."""
        return tuple(m for m in self.members if m.is_source)

    def writable(self) -> tuple[Member, ...]:
        """Public writable members, in enumeration order."""
        return tuple(m for m in self.members if m.is_destination)

    def get(self, name: str) -> Member | None:
        """Get the member declared under ``name``, if any."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    def find(self, name: str, declared_type: Any) -> Member | None:
        """Find the first writable member with exactly this name and type.

        Args:
            name: Member name.
            declared_type: Declared type to compare with ``==``.

        Returns:
            Matching writable member, or None.
        """
        for member in self.members:
            if member.is_destination and member.name == name and member.type == declared_type:
                return member
        return None
