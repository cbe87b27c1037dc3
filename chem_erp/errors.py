from __future__ import annotations

from typing import Optional


class ChemErpError(Exception):
    """Base class for errors raised by the chem_erp services."""


class ValidationError(ChemErpError, ValueError):
    """Raised when input for a record is missing, negative or not a real date."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class DuplicateError(ChemErpError):
    """Raised when a customer with the same (trimmed, case-insensitive) name exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A customer named '{name.strip()}' already exists.")
