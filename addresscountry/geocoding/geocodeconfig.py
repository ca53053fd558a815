"""Geocoding service configuration.

Configuration is explicit (keyword arguments) with an environment fallback:

    ADDRESSCOUNTRY_API_KEY     API key (falls back to GOOGLE_MAPS_API_KEY)
    ADDRESSCOUNTRY_TIMEOUT     per-request timeout in seconds (default 10)
    ADDRESSCOUNTRY_LANGUAGE    optional response language, e.g. "en"
    ADDRESSCOUNTRY_REGION      optional region bias (ccTLD), e.g. "sg"
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional


GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_TIMEOUT = 10.0

API_KEY_ENV = "ADDRESSCOUNTRY_API_KEY"
API_KEY_FALLBACK_ENV = "GOOGLE_MAPS_API_KEY"
TIMEOUT_ENV = "ADDRESSCOUNTRY_TIMEOUT"
LANGUAGE_ENV = "ADDRESSCOUNTRY_LANGUAGE"
REGION_ENV = "ADDRESSCOUNTRY_REGION"


class MissingAPIKeyError(ValueError):
    """No geocoding API key is configured."""


@dataclass(frozen=True)
class GeocodeConfig:
    """Settings for the geocoding client."""

    api_key: Optional[str] = None
    base_url: str = GOOGLE_GEOCODE_URL
    timeout: float = DEFAULT_TIMEOUT
    language: Optional[str] = None
    region: Optional[str] = None

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "GeocodeConfig":
        """Build a config from environment variables.

        Keyword overrides that are not None win over the environment.

        Examples:
            >>> GeocodeConfig.from_env({"ADDRESSCOUNTRY_API_KEY": "k"}).api_key
            'k'
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get(TIMEOUT_ENV)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {timeout_raw!r}") from e

        values = {
            "api_key": env.get(API_KEY_ENV) or env.get(API_KEY_FALLBACK_ENV) or None,
            "timeout": timeout,
            "language": env.get(LANGUAGE_ENV) or None,
            "region": env.get(REGION_ENV) or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def require_api_key(self) -> str:
        """Return the API key or raise MissingAPIKeyError."""
        if not self.api_key:
            raise MissingAPIKeyError(
                f"No geocoding API key configured. Set {API_KEY_ENV} "
                f"(or {API_KEY_FALLBACK_ENV}) or pass api_key explicitly."
            )
        return self.api_key


__all__ = [
    "GOOGLE_GEOCODE_URL",
    "DEFAULT_TIMEOUT",
    "MissingAPIKeyError",
    "GeocodeConfig",
]
