"""Copier models: structural matches and argument errors."""

from __future__ import annotations

from dataclasses import dataclass

from collares.core.shape import Member


class InvalidArgumentError(ValueError):
    """Raised when a copy operand is missing or is not an aggregate instance."""

    pass


@dataclass(slots=True, frozen=True)
class Match:
    """A source member paired with the destination member it is copied into."""

    source: Member
    destination: Member

    @property
    def name(self) -> str:
        return self.destination.name
