"""Domain-specific errors.

The classification pass itself never raises; these errors belong to the
boundary where raw upstream records are turned into text blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ClassifierDomainError(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class DomainErrorInfo:
    code: str
    message: str
    detail: Optional[str] = None


class InvalidInputError(ClassifierDomainError):
    """Raised when upstream block records fail validation."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="INVALID_INPUT", message=message, detail=detail)
