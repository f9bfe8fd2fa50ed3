"""Collares: structural shallow copy between unrelated object shapes.

Usage:
    from collares import copy_from

    @dataclass
    class ItemRecord:
        id: int
        product: str = ""
        price: Decimal = Decimal(0)

    class ItemResponse(BaseModel):
        product: str = ""
        price: Decimal = Decimal(0)

    response = copy_from(ItemResponse(), record)
"""

__version__ = "0.1.0"

from collares.core import (
    Copier,
    CopyFrom,
    InvalidArgumentError,
    Match,
    Member,
    MemberKind,
    Shape,
    ShapeWarning,
    Visibility,
    copy_from,
    plan_copy,
    shape_of,
)

__all__ = [
    # Version
    "__version__",
    # Copier
    "copy_from",
    "plan_copy",
    "Copier",
    "CopyFrom",
    "Match",
    "InvalidArgumentError",
    # Shape
    "shape_of",
    "Shape",
    "Member",
    "MemberKind",
    "Visibility",
    "ShapeWarning",
]
