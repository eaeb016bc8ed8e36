"""Exception types for menu-order."""

from __future__ import annotations


class MenuOrderError(Exception):
    """Base class for menu-order failures."""


class CatalogError(MenuOrderError):
    """Raised when catalog input cannot be ingested."""


class OrderSubmissionError(MenuOrderError):
    """Raised when an order could not be delivered to the order endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
