"""Hypermedia response envelopes.

Every response carries a list of hrefs telling the client which follow-up
requests are allowed on the resource.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class HrefType(str, Enum):
    """HTTP method a link may be followed with."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"


class Href(BaseModel):
    """A single link on a response."""

    type: HrefType
    href: str


class Envelope(BaseModel):
    """Base envelope holding links."""

    hrefs: list[Href] = Field(default_factory=list)

    def add_href(self, href_type: HrefType, href: str) -> Self:
        self.hrefs.append(Href(type=href_type, href=href))
        return self


class ResourceResponse(Envelope, Generic[T]):
    """One resource with its id."""

    id: int
    data: T


class CollectionResponse(Envelope, Generic[T]):
    """A list of resource envelopes."""

    data: list[ResourceResponse[T]] = Field(default_factory=list)


class InfoResponse(Envelope, Generic[T]):
    """Summary information about a collection."""

    data: T
