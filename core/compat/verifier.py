"""Startup check that the framework, cloud and provider layers agree on versions.

The compatibility table is a flat, immutable tuple of ``(framework, cloud) ->
provider`` rows. ``verify`` is a pure function over it and never raises;
callers decide whether an :class:`Incompatible` result is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loguru import logger

from core.compat.versions import detect_version, normalize_version
from core.settings import DEFAULT_LABELS, CompatibilityVerifierSettings


@dataclass(frozen=True)
class CompatibilityEntry:
    framework: str
    cloud: str
    provider: str


ACCEPTED_FRAMEWORK_VERSIONS: tuple[str, ...] = ("3.2", "3.3", "3.4", "3.5")

COMPATIBILITY_TABLE: tuple[CompatibilityEntry, ...] = (
    CompatibilityEntry(framework="3.2", cloud="2023.0", provider="5.9.0"),
    CompatibilityEntry(framework="3.3", cloud="2024.0", provider="4.10.0"),
    CompatibilityEntry(framework="3.4", cloud="2024.0", provider="4.10.0"),
)

_PROVIDER_BY_PAIR: dict[tuple[str, str], str] = {
    (entry.framework, entry.cloud): entry.provider for entry in COMPATIBILITY_TABLE
}

REMEDIATION = (
    "Update your dependencies to a compatible combination.\n"
    "See the Spring Cloud GCP compatibility matrix: "
    "[https://github.com/GoogleCloudPlatform/spring-cloud-gcp#compatibility-with-spring-project-versions]\n"
    "Learn more about Spring Boot: [https://spring.io/projects/spring-boot#learn]\n"
    "Learn more about Spring Cloud: [https://spring.io/projects/spring-cloud#overview]\n"
    "To disable this check, set: [compatibility_verifier.enabled=false]"
)


@dataclass(frozen=True)
class Compatible:
    compatible = True


@dataclass(frozen=True)
class Incompatible:
    message: str
    remediation: str = REMEDIATION
    compatible = False


VerificationResult = Union[Compatible, Incompatible]


def _format_accepted() -> str:
    return "[" + ", ".join(ACCEPTED_FRAMEWORK_VERSIONS) + "]"


def verify(
    enabled: bool,
    framework: str,
    cloud: str,
    provider: str,
    *,
    labels: tuple[str, str, str] = DEFAULT_LABELS,
) -> VerificationResult:
    """Check the three detected versions against the compatibility table."""
    if not enabled:
        return Compatible()

    framework_label, cloud_label, provider_label = labels
    framework_key = normalize_version(framework)
    if framework_key not in ACCEPTED_FRAMEWORK_VERSIONS:
        return Incompatible(
            f"{framework_label} [{framework}] is not in accepted versions: {_format_accepted()}"
        )

    expected_provider = _PROVIDER_BY_PAIR.get((framework_key, normalize_version(cloud)))
    if expected_provider is None:
        return Incompatible(
            f"{cloud_label} [{cloud}] is not compatible with {framework_label} [{framework}]"
        )

    if normalize_version(provider) != normalize_version(expected_provider):
        return Incompatible(
            f"{provider_label} [{provider}] is not compatible with {framework_label} [{framework}] "
            f"and {cloud_label} [{cloud}]. Expected version: [{expected_provider}]"
        )

    return Compatible()


class DependencyVersionVerifier:
    """Detects installed versions and runs :func:`verify` against them."""

    def __init__(self, settings: CompatibilityVerifierSettings) -> None:
        self.settings = settings

    @property
    def labels(self) -> tuple[str, str, str]:
        return (
            self.settings.framework.label,
            self.settings.cloud.label,
            self.settings.provider.label,
        )

    def detect(self) -> tuple[str, str, str]:
        return (
            detect_version(self.settings.framework.distribution, self.settings.framework.label),
            detect_version(self.settings.cloud.distribution, self.settings.cloud.label),
            detect_version(self.settings.provider.distribution, self.settings.provider.label),
        )

    def verify(self) -> VerificationResult:
        if not self.settings.enabled:
            logger.info("Compatibility verification is disabled via compatibility_verifier.enabled=false")
            return Compatible()

        framework, cloud, provider = self.detect()
        framework_label, cloud_label, provider_label = self.labels
        logger.info(
            "Detected versions: {fl} [{fv}], {cl} [{cv}], {pl} [{pv}]",
            fl=framework_label,
            fv=framework,
            cl=cloud_label,
            cv=cloud,
            pl=provider_label,
            pv=provider,
        )
        return verify(True, framework, cloud, provider, labels=self.labels)


__all__ = [
    "ACCEPTED_FRAMEWORK_VERSIONS",
    "COMPATIBILITY_TABLE",
    "REMEDIATION",
    "CompatibilityEntry",
    "Compatible",
    "Incompatible",
    "VerificationResult",
    "DependencyVersionVerifier",
    "verify",
]
