from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, validator

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

_TRUTHY = {"true", "1", "yes"}

# (label, distribution) for the framework, cloud and provider layers
DEFAULT_COMPONENTS: tuple[tuple[str, str], ...] = (
    ("Spring Boot", "spring-boot"),
    ("Spring Cloud", "spring-cloud-commons"),
    ("spring-cloud-gcp", "spring-cloud-gcp"),
)
DEFAULT_LABELS: tuple[str, str, str] = tuple(label for label, _ in DEFAULT_COMPONENTS)


class ComponentSettings(BaseModel):
    """A framework layer whose installed version takes part in the compatibility check."""

    label: str
    distribution: str


def _default_component(index: int) -> ComponentSettings:
    label, distribution = DEFAULT_COMPONENTS[index]
    return ComponentSettings(label=label, distribution=distribution)


class CompatibilityVerifierSettings(BaseModel):
    enabled: bool = True
    framework: ComponentSettings = Field(default_factory=lambda: _default_component(0))
    cloud: ComponentSettings = Field(default_factory=lambda: _default_component(1))
    provider: ComponentSettings = Field(default_factory=lambda: _default_component(2))


class StorageSettings(BaseModel):
    bucket: str
    backend: Literal["s3", "local"] = "s3"
    prefix: str = ""
    region: str | None = None
    endpoint_url: str | None = None
    local_root: Path = Path("data/buckets")

    @validator("bucket")
    def _bucket_not_blank(cls, value: str) -> str:  # noqa: D401
        if not value or not value.strip():
            raise ValueError("storage.bucket must not be empty")
        return value.strip()


class Settings(BaseModel):
    compatibility_verifier: CompatibilityVerifierSettings = Field(default_factory=CompatibilityVerifierSettings)
    storage: StorageSettings

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.
        
        Args:
            path: Optional path to configuration file. If not provided, uses
                GATEWAY_CONFIG environment variable or defaults to config/default.yaml.
        
        Returns:
            Settings instance with loaded configuration.
        
        Raises:
            FileNotFoundError: If configuration file does not exist.
            ValueError: If configuration is invalid.
        """
        config_path = path or Path(os.getenv("GATEWAY_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with config_path.open("r", encoding="utf-8") as fp:
            payload = yaml.safe_load(fp) or {}
        _apply_env_overrides(payload)
        try:
            return cls(**payload)
        except Exception as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc


def _apply_env_overrides(payload: dict[str, Any]) -> None:
    bucket = os.getenv("STORAGE_BUCKET")
    if bucket:
        storage = payload.get("storage") or {}
        storage["bucket"] = bucket
        payload["storage"] = storage

    enabled = os.getenv("COMPATIBILITY_VERIFIER_ENABLED")
    if enabled is not None:
        verifier = payload.get("compatibility_verifier") or {}
        verifier["enabled"] = enabled.strip().lower() in _TRUTHY
        payload["compatibility_verifier"] = verifier


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "DEFAULT_COMPONENTS",
    "DEFAULT_LABELS",
    "ComponentSettings",
    "CompatibilityVerifierSettings",
    "StorageSettings",
    "get_settings",
]
