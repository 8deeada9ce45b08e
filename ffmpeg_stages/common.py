"""Shared types used across ffmpeg_stages modules."""

from dataclasses import dataclass, field
from typing import List


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class StagesError(Exception):
    """Base class for every error raised by ffmpeg_stages."""


class InvalidArgument(StagesError, ValueError):
    """Raised when a leaf operation receives a malformed value."""


class IncompleteCommand(StagesError):
    """Raised when build() runs before an input and an output exist."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Incomplete command: " + "; ".join(self.errors))


# ---------------------------------------------------------------------------
# Validation result
# ---------------------------------------------------------------------------

@dataclass
class ValidationResult:
    """Result of validating a command under construction."""

    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another ValidationResult into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def raise_if_invalid(self) -> None:
        """Raise IncompleteCommand carrying the collected errors."""
        if not self.valid:
            raise IncompleteCommand(self.errors)
