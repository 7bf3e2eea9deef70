"""
Domain exceptions.

Service classes raise these instead of building HTTP responses themselves.
The server registers a handler that maps each subclass to its ``status_code``
and returns ``{"detail": message}``.
"""

from __future__ import annotations


class PinkNailError(Exception):
    """Base class for every expected, client-facing failure."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(PinkNailError):
    """The request is well-formed but breaks a business rule."""

    status_code = 400


class UnauthorizedError(PinkNailError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ForbiddenError(PinkNailError):
    status_code = 403


class NotFoundError(PinkNailError):
    """The addressed resource does not exist."""

    status_code = 404


class ConflictError(PinkNailError):
    """The request collides with existing data (duplicate key, booked slot)."""

    status_code = 409
