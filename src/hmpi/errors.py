"""Exceptions raised by the HMPI scoring engine."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a scoring failure."""

    INVALID_INPUT = "invalid_input"
    CONFIGURATION = "configuration"


class ScoringError(Exception):
    """Base exception for scoring failures."""

    kind: ErrorKind

    def __init__(self, message: str, metal: str | None = None) -> None:
        super().__init__(message)
        self.metal = metal


class InvalidInputError(ScoringError):
    """Raised when a sample's metal panel is missing or malformed."""

    kind = ErrorKind.INVALID_INPUT


class ConfigurationError(ScoringError):
    """Raised when the standards or weights tables are unusable."""

    kind = ErrorKind.CONFIGURATION
