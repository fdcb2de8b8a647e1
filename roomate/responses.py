"""JSON response envelopes returned by the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Status:
    """The status part of every response."""

    code: int
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping."""
        return {"code": self.code, "description": self.description}


@dataclass
class SingleResponse:
    """A response carrying one piece of data."""

    status: Status
    data: Any

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping."""
        return {"status": self.status.to_dict(), "data": self.data}


@dataclass
class PagedResponse:
    """A response carrying a page of data and its paging information."""

    status: Status
    data: Any
    paging: Any

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping."""
        return {"status": self.status.to_dict(), "data": self.data, "paging": self.paging}


def single_response(code: int, description: str, data: Any) -> SingleResponse:
    """Build a single-item response whose status carries ``code``."""
    return SingleResponse(status=Status(code=code, description=description), data=data)


def paged_response(code: int, description: str, data: Any, paging: Any) -> PagedResponse:
    """Build a paged response whose status carries ``code``."""
    return PagedResponse(status=Status(code=code, description=description), data=data, paging=paging)