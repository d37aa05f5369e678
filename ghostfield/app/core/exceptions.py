"""
GhostField error types.
Neither is fatal: an invalid name just means no field, a rejection is a bot verdict.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ghostfield.app.services.validator import ValidationResult


class InvalidFieldName(ValueError):
    """Logical field name does not match ^[A-Za-z0-9_-]+$."""

    def __init__(self, name: str):
        super().__init__(f"Invalid field name: {name!r}")
        self.name = name


class ValidationRejected(Exception):
    """Submission failed the honeypot or sigil checks."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(result.reason.value if result.reason else "rejected")
        self.result = result
