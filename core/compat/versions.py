"""Version string helpers: metadata lookup and major.minor normalisation."""

from __future__ import annotations

from importlib import metadata

from loguru import logger

UNKNOWN_VERSION = "unknown"
_WILDCARD = ".x"


def normalize_version(version: str | None) -> str:
    """Reduce ``version`` to ``major.minor``, dropping a trailing ``.x`` wildcard first.

    ``"3.4.1"``, ``"3.4.x"`` and ``"3.4"`` all normalise to ``"3.4"``. Empty
    values and the ``unknown`` sentinel are returned untouched, ``None`` becomes ``""``.
    """
    if not version or version == UNKNOWN_VERSION:
        return version or ""
    if version.endswith(_WILDCARD):
        version = version[: version.index(_WILDCARD)]
    first_dot = version.find(".")
    second_dot = version.find(".", first_dot + 1) if first_dot >= 0 else -1
    return version[:second_dot] if second_dot > 0 else version


def detect_version(distribution: str, label: str | None = None) -> str:
    """Return the installed version of ``distribution`` or ``unknown``."""
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError as exc:
        logger.warning("Cannot determine {label} version: {error}", label=label or distribution, error=exc)
        return UNKNOWN_VERSION
    return version.strip() if version and version.strip() else UNKNOWN_VERSION


__all__ = ["UNKNOWN_VERSION", "detect_version", "normalize_version"]
