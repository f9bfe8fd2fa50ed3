"""Shape functionality: member descriptors, visibility markers and introspection."""

from collares.core.shape.core import shape_of
from collares.core.shape.models import Member, MemberKind, Shape, ShapeWarning, Visibility

__all__ = [
    # Models
    "Member",
    "MemberKind",
    "Shape",
    "ShapeWarning",
    "Visibility",
    # Core
    "shape_of",
]
