"""Tests for custom exception hierarchy."""

import pytest
from fastapi import status

from core.exceptions import (
    ConfigurationError,
    DependencyIncompatibilityError,
    GatewayError,
    StorageError,
)
from services.api.exception_handlers import gateway_exception_handler


def test_gateway_error_base():
    """Test base GatewayError."""
    error = GatewayError("Test error", {"key": "value"})
    assert str(error) == "Test error"
    assert error.message == "Test error"
    assert error.details == {"key": "value"}


def test_dependency_incompatibility_error():
    error = DependencyIncompatibilityError("Mismatch", remediation="Upgrade", details={"error": "x"})
    assert isinstance(error, ConfigurationError)
    assert isinstance(error, GatewayError)
    assert error.remediation == "Upgrade"
    assert error.details == {"error": "x"}


def test_storage_error():
    error = StorageError("Backend down")
    assert isinstance(error, GatewayError)
    assert error.details == {}


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ConfigurationError("bad"), status.HTTP_500_INTERNAL_SERVER_ERROR),
        (DependencyIncompatibilityError("bad", remediation="fix"), status.HTTP_500_INTERNAL_SERVER_ERROR),
        (StorageError("down"), status.HTTP_503_SERVICE_UNAVAILABLE),
        (GatewayError("other"), status.HTTP_500_INTERNAL_SERVER_ERROR),
    ],
)
async def test_handler_status_mapping(exc, expected):
    response = await gateway_exception_handler(None, exc)
    assert response.status_code == expected
