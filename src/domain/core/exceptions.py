# src/domain/core/exceptions.py
from typing import Optional, List


class DomainException(Exception):
    """Base exception for all catalogue-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern or prototype cannot be found."""
    def __init__(self, name: str, kind: str = "Pattern"):
        super().__init__(f"{kind} '{name}' not found")
        self.name = name
        self.kind = kind


class PatternConfigurationError(DomainException):
    """Raised when a participant is used before it has been wired up."""
    def __init__(self, participant: str, missing: str):
        super().__init__(f"{participant} has no {missing} set")
        self.participant = participant
        self.missing = missing


class MementoRestoreError(DomainException):
    """Raised when an originator is asked to restore a memento it cannot read."""
    def __init__(self, memento_name: str, reason: str):
        super().__init__(f"Cannot restore memento {memento_name}: {reason}")
        self.memento_name = memento_name
        self.reason = reason
