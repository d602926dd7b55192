"""
Error types raised while turning a report payload into a PDF.
"""

from typing import Any, Optional


class ReportError(Exception):
    """Base class for report generation failures."""


class ValidationError(ReportError):
    """A required payload field is missing or has the wrong type."""

    def __init__(self, field: str, message: str = "field required"):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ClassificationError(ReportError):
    """A party record carries a type discriminator outside the known set."""

    def __init__(self, type_value: Any, position: Optional[int] = None):
        self.type_value = type_value
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Unknown party type {type_value!r}{where}")


class RenderError(ReportError):
    """The PDF renderer failed to produce a byte stream."""
