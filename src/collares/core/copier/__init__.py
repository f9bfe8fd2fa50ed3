"""Copier functionality: structural matching and shallow copy."""

from collares.core.copier.core import Copier, CopyFrom, copy_from, plan_copy
from collares.core.copier.models import InvalidArgumentError, Match

__all__ = [
    # Models
    "InvalidArgumentError",
    "Match",
    # Core
    "Copier",
    "CopyFrom",
    "copy_from",
    "plan_copy",
]
