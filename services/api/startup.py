"""Dependency verification run once before the API accepts requests."""

from __future__ import annotations

from loguru import logger

from core.compat import DependencyVersionVerifier, Incompatible, VerificationResult
from core.exceptions import DependencyIncompatibilityError
from core.settings import Settings


def verify_dependencies(settings: Settings) -> VerificationResult:
    """Run the compatibility check and abort startup on a mismatch.

    Raises:
        DependencyIncompatibilityError: If the detected versions are incompatible.
    """
    result = DependencyVersionVerifier(settings.compatibility_verifier).verify()
    if isinstance(result, Incompatible):
        logger.error("ERROR: {message}", message=result.message)
        logger.error("ACTION: {action}", action=result.remediation)
        raise DependencyIncompatibilityError(
            "Dependency incompatibility detected",
            remediation=result.remediation,
            details={"error": result.message},
        )
    logger.info("All dependencies are compatible.")
    return result


__all__ = ["verify_dependencies"]
