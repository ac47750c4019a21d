"""Custom exception hierarchy for the bucket gateway."""

from __future__ import annotations


class GatewayError(Exception):
    """Base exception for all gateway-specific errors."""
    
    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GatewayError):
    """Raised when configuration is invalid or missing."""
    pass


class DependencyIncompatibilityError(ConfigurationError):
    """Raised at startup when framework versions do not form a compatible set."""

    def __init__(
        self,
        message: str,
        remediation: str,
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.remediation = remediation


class StorageError(GatewayError):
    """Raised when storage operations fail."""
    pass
