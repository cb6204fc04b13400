"""Use case for loading the full company listing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from aidex.domain.companies import CompanySummary
from aidex.domain.ports import DirectoryPort, UseCaseError
from aidex.usecases.error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load companies. Please try again later."


@dataclass
class LoadCompanies:
    """Use-case callable returning every company ordered by name."""

    directory: DirectoryPort

    def __call__(self) -> Tuple[CompanySummary, ...]:
        try:
            companies = self.directory.list_companies()
        except Exception as exc:
            mapped = map_api_error(exc, default_code="COMPANIES_LOAD_FAILED")
            LOGGER.error("Error fetching companies: [%s] %s", mapped.code, mapped.message)
            raise UseCaseError("COMPANIES_LOAD_FAILED", LOAD_FAILED_MESSAGE) from exc
        return tuple(companies or ())


__all__ = ["LOAD_FAILED_MESSAGE", "LoadCompanies"]
