"""Framework version detection and compatibility checking."""

from core.compat.verifier import (
    ACCEPTED_FRAMEWORK_VERSIONS,
    COMPATIBILITY_TABLE,
    REMEDIATION,
    Compatible,
    CompatibilityEntry,
    DependencyVersionVerifier,
    Incompatible,
    VerificationResult,
    verify,
)
from core.compat.versions import UNKNOWN_VERSION, detect_version, normalize_version

__all__ = [
    "ACCEPTED_FRAMEWORK_VERSIONS",
    "COMPATIBILITY_TABLE",
    "REMEDIATION",
    "UNKNOWN_VERSION",
    "Compatible",
    "CompatibilityEntry",
    "DependencyVersionVerifier",
    "Incompatible",
    "VerificationResult",
    "detect_version",
    "normalize_version",
    "verify",
]
