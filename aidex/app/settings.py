"""Runtime settings and ``DirectoryPort`` composition.

Connection details come from environment variables so the same build can
point at any hosted directory project, or run offline from a JSON fixture.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from aidex.adapters.directory_memory import InMemoryDirectory
from aidex.adapters.directory_rest import DirectoryRestAdapter
from aidex.domain.ports import DirectoryPort, UseCaseError

LOGGER = logging.getLogger(__name__)

_URL_ENV_VARS = ("AIDEX_SUPABASE_URL", "SUPABASE_URL")
_KEY_ENV_VARS = ("AIDEX_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY")


def _as_int(value: Any, default: int) -> int:
    """Convert mixed values to int with deterministic fallback."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _first_env(env: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return ""


@dataclass
class DirectorySettings:
    """Typed connection settings for the directory service."""

    api_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    fixture_path: str = ""

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DirectorySettings":
        source = os.environ if env is None else env
        return cls(
            api_url=_first_env(source, _URL_ENV_VARS),
            api_key=_first_env(source, _KEY_ENV_VARS),
            request_timeout_s=max(1, _as_int(source.get("AIDEX_REQUEST_TIMEOUT_S"), 10)),
            fixture_path=(source.get("AIDEX_FIXTURE_PATH") or "").strip(),
        )

    def is_configured(self) -> bool:
        return bool(self.api_url and self.api_key)


def build_directory_port(settings: DirectorySettings, *, offline: bool = False) -> DirectoryPort:
    """Compose the port used by the view-models.

    Raises:
        UseCaseError: ``CONFIG_MISSING`` when the remote service is requested
            but URL or key are not set.
    """
    if offline:
        LOGGER.info("Using offline directory fixture %s", settings.fixture_path or "(bundled)")
        return InMemoryDirectory.from_json(settings.fixture_path or None)
    if not settings.is_configured():
        raise UseCaseError(
            "CONFIG_MISSING",
            "Set AIDEX_SUPABASE_URL and AIDEX_SUPABASE_ANON_KEY, or run with --offline.",
        )
    LOGGER.info("Using directory service at %s", settings.api_url)
    return DirectoryRestAdapter(
        settings.api_url,
        api_key=settings.api_key,
        request_timeout_s=settings.request_timeout_s,
    )


__all__ = ["DirectorySettings", "build_directory_port"]
