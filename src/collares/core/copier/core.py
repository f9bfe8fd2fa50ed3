"""Structural copier: shallow copy between two independently defined shapes.

A source member is copied into the destination member with the same name and
exactly the same declared type. Everything else is left alone: unmatched
members, mismatched types, non-public members and read-only destinations are
skipped without error.

Usage:
    @dataclass
    class ItemRecord:
        id: int
        product: str = ""

    class ItemPayload(BaseModel):
        product: str

    record = copy_from(ItemRecord(id=1), ItemPayload(product="apples"))
    record.product  # "apples"
    record.id       # 1, untouched
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from collares.core.copier.models import InvalidArgumentError, Match
from collares.core.shape import Member, MemberKind, Shape, shape_of

if TYPE_CHECKING:
    from collares.config import CopierSettings

_SCALARS = (int, float, complex, bool, str, bytes)
_UNSET = object()


def _require_aggregate(value: Any, role: str) -> None:
    """Validate a copy operand.

    Raises:
        InvalidArgumentError: If value is None, a class, or a scalar.
    """
    if value is None:
        raise InvalidArgumentError(f"{role} must not be None")
    if isinstance(value, type):
        raise InvalidArgumentError(f"{role} must be an instance, got class {value.__name__}")
    if isinstance(value, _SCALARS):
        raise InvalidArgumentError(
            f"{role} must be an aggregate instance, got {type(value).__name__}"
        )


def _read(source: Any, member: Member) -> Any:
    # Fields declared with init=False, empty slots and plain annotated
    # attributes exist only once assigned; getters always run
    if member.kind is MemberKind.PROPERTY:
        return getattr(source, member.name)
    return getattr(source, member.name, _UNSET)


class Copier:
    """Reusable structural copier.

    Args:
        cache_shapes: Memoize shapes per runtime type in this instance.
        include_properties: Consider property descriptors as members.
        include_annotations: Consider annotated attributes of plain classes.
    """

    __slots__ = ("cache_shapes", "include_properties", "include_annotations", "_shapes")

    def __init__(
        self,
        *,
        cache_shapes: bool = False,
        include_properties: bool = True,
        include_annotations: bool = True,
    ) -> None:
        self.cache_shapes = cache_shapes
        self.include_properties = include_properties
        self.include_annotations = include_annotations
        self._shapes: dict[type, Shape] = {}

    @classmethod
    def from_settings(cls, settings: CopierSettings) -> Copier:
        """Build a copier from configuration.

        Args:
            settings: Loaded copier settings.

        Returns:
            Copier configured with the given options.
        """
        return cls(
            cache_shapes=settings.cache_shapes,
            include_properties=settings.include_properties,
            include_annotations=settings.include_annotations,
        )

    def shape(self, value: Any) -> Shape:
        """Shape of a value's runtime type (or of a type)."""
        cls = value if isinstance(value, type) else type(value)
        if self.cache_shapes and cls in self._shapes:
            return self._shapes[cls]
        shape = shape_of(
            cls,
            include_properties=self.include_properties,
            include_annotations=self.include_annotations,
        )
        if self.cache_shapes:
            self._shapes[cls] = shape
        return shape

    def plan(self, destination: Any, source: Any) -> list[Match]:
        """List the member pairs a copy would transfer, without copying.

        Args:
            destination: Instance that would be written.
            source: Instance that would be read.

        Returns:
            Matches in source enumeration order.

        Raises:
            InvalidArgumentError: If either operand is missing or not an aggregate.
        """
        _require_aggregate(destination, "destination")
        _require_aggregate(source, "source")

        destination_shape = self.shape(destination)
        matches: list[Match] = []
        for member in self.shape(source).readable():
            target = destination_shape.find(member.name, member.type)
            if target is None:
                continue
            if member.kind is not MemberKind.PROPERTY and _read(source, member) is _UNSET:
                continue
            matches.append(Match(source=member, destination=target))
        return matches

    def copy_from[T](self, destination: T, source: Any) -> T:
        """Copy matching public members of source onto destination.

        Values are assigned as-is: nested objects end up shared between
        source and destination.

        Args:
            destination: Instance to mutate in place.
            source: Instance to read from. Never modified.

        Returns:
            The destination instance itself.

        Raises:
            InvalidArgumentError: If either operand is missing or not an aggregate.
        """
        for match in self.plan(destination, source):
            value = _read(source, match.source)
            if value is _UNSET:
                continue
            setattr(destination, match.destination.name, value)
        return destination


# Stateless module-level instance backing the functional API
_copier = Copier()


def copy_from[T](destination: T, source: Any) -> T:
    """Copy every public member of source into the same-named, same-typed member of destination.

    Args:
        destination: Instance to mutate in place.
        source: Instance to read from.

    Returns:
        The destination instance, for chaining.

    Raises:
        InvalidArgumentError: If either operand is None or not an aggregate instance.
    """
    return _copier.copy_from(destination, source)


def plan_copy(destination: Any, source: Any) -> list[Match]:
    """List the structural matches ``copy_from`` would apply.

    Raises:
        InvalidArgumentError: If either operand is None or not an aggregate instance.
    """
    return _copier.plan(destination, source)


class CopyFrom:
    """Mixin adding a fluent ``copy_from`` method.

    Usage:
        @dataclass
        class ItemRecord(CopyFrom):
            id: int
            product: str = ""

        record = ItemRecord(id=1).copy_from(payload)
    """

    __slots__ = ()

    def copy_from(self, source: Any) -> Self:
        return _copier.copy_from(self, source)
