"""Exceptions raised by the vRA catalog client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import requests

# Raised by requests itself (connection refused, DNS, timeouts) and never re-wrapped.
TransportError = requests.RequestException


class CatalogError(Exception):
    """Base class for catalog client failures."""


@dataclass(eq=False)
class RemoteError(CatalogError):
    """The API answered with a non-success status; ``body`` is the raw response body."""

    body: Any
    status_code: Optional[int] = None
    context: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - logging helper
        base = str(self.body)
        if self.status_code is not None:
            base = f"(status={self.status_code}) " + base
        if self.context:
            base = f"{self.context}: " + base
        return base


class NotFoundError(CatalogError, LookupError):
    def __init__(self, key: Any, field: str = "name", kind: str = "resource") -> None:
        self.key = key
        self.field = field
        self.kind = kind
        self.message = f"Unable to find {kind} with {field}: {key}"
        super().__init__(self.message)


class KeyLookupError(CatalogError, LookupError):
    def __init__(self, key: Any, field: str = "name") -> None:
        self.key = key
        self.field = field
        super().__init__(f"no record with {field} == {key!r}")


class AuthenticationError(CatalogError):
    def __init__(self, message: str, details: Any = None) -> None:
        self.details = details
        super().__init__(message if details is None else f"{message}: {details}")


__all__ = [
    "AuthenticationError",
    "CatalogError",
    "KeyLookupError",
    "NotFoundError",
    "RemoteError",
    "TransportError",
]
