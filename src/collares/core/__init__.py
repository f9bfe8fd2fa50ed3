"""Core functionalities: stateless shape introspection and copying.

Architecture Note:
    core/ contains pure functions and immutable models. Nothing here keeps
    state between calls; a Copier only caches shapes when asked to.
"""

from collares.core.copier import (
    Copier,
    CopyFrom,
    InvalidArgumentError,
    Match,
    copy_from,
    plan_copy,
)
from collares.core.shape import (
    Member,
    MemberKind,
    Shape,
    ShapeWarning,
    Visibility,
    shape_of,
)

__all__ = [
    # Shape
    "Member",
    "MemberKind",
    "Shape",
    "ShapeWarning",
    "Visibility",
    "shape_of",
    # Copier
    "Copier",
    "CopyFrom",
    "InvalidArgumentError",
    "Match",
    "copy_from",
    "plan_copy",
]
