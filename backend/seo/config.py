"""
Brand defaults and resolver settings. Overridable via SEO_* env vars.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


def _read_env_str(name: str, default: str) -> str:
    """Read env var as a non-blank string; return default if unset or blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _read_env_positive_int(name: str, default: int) -> int:
    """Read env var as a positive int; return default if unset, invalid or <= 0."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _read_env_optional_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else None


@dataclass(frozen=True)
class SiteDefaults:
    """Brand-wide fallbacks used when no override or product value applies."""

    title: str = "Serendia Gems | Heart of Sri Lanka"
    description: str = (
        "Ethically mined, expertly cut. Discover the world's finest Sapphires "
        "directly from the source."
    )
    og_image: str = "/hero/hero.jpeg"
    brand_name: str = "Serendia Gems"
    product_description_fallback: str = "Luxury gemstone from Serendia Gems."
    product_description_limit: int = 160
    product_path_prefix: str = "/product/"

    @classmethod
    def from_env(cls) -> "SiteDefaults":
        """Build defaults from SEO_* env vars, falling back to the built-in brand copy."""
        base = cls()
        return cls(
            title=_read_env_str("SEO_DEFAULT_TITLE", base.title),
            description=_read_env_str("SEO_DEFAULT_DESCRIPTION", base.description),
            og_image=_read_env_str("SEO_DEFAULT_OG_IMAGE", base.og_image),
            brand_name=_read_env_str("SEO_BRAND_NAME", base.brand_name),
            product_description_fallback=_read_env_str(
                "SEO_PRODUCT_DESCRIPTION_FALLBACK", base.product_description_fallback
            ),
            product_description_limit=_read_env_positive_int(
                "SEO_PRODUCT_DESCRIPTION_LIMIT", base.product_description_limit
            ),
        )

    def product_path(self, product_id: str) -> str:
        return f"{self.product_path_prefix}{product_id}"


@dataclass(frozen=True)
class MetadataResolverConfig:
    defaults: SiteDefaults = SiteDefaults()
    # None disables the per-lookup timeout.
    lookup_timeout_seconds: float | None = None

    @classmethod
    def from_env(cls) -> "MetadataResolverConfig":
        return cls(
            defaults=SiteDefaults.from_env(),
            lookup_timeout_seconds=_read_env_optional_float("SEO_LOOKUP_TIMEOUT_SECONDS", None),
        )
