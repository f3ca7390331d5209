"""
Domain exceptions for the catalog service.

Expected absence (an unknown id) is never an exception: services return
None or False for it. These exceptions cover the store-level failures
that do propagate, and are mapped to HTTP status codes in main.py.
"""
from typing import Any, Optional


class CatalogError(Exception):
     """Base exception for all catalog domain errors."""

     def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
          self.message = message
          self.details = details or {}
          super().__init__(self.message)


class ConstraintViolation(CatalogError):
     """
     Raised when a write breaks a store constraint.

     Examples:
     - Foreign key references a row that does not exist
     - NOT NULL column left empty

     HTTP Status: 400 Bad Request
     """

     pass


class StorageFailure(CatalogError):
     """
     Raised when the underlying database fails for any other reason.

     HTTP Status: 500 Internal Server Error
     """

     pass
