"""Use cases behind the company detail page.

``FetchCompany`` resolves the primary row and is the only call whose failure
is shown to the user. ``FetchRelated`` loads one related-record section and
downgrades every failure to an empty section plus an ERROR log entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

from aidex.domain.companies import CompanyDetail
from aidex.domain.ports import CompanyId, DirectoryPort, UseCaseError
from aidex.usecases.error_mapping import map_api_error

LOGGER = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load company details. Please try again later."
NOT_FOUND_MESSAGE = "Company not found"


class RelatedSection(str, Enum):
    """Related-record sets joined onto a company, keyed by port method."""

    CUSTOMERS = "customers"
    PRODUCTS = "products"
    PRICING_MODELS = "pricing_models"

    @property
    def port_method(self) -> str:
        return f"list_{self.value}"


@dataclass
class FetchCompany:
    """Use-case callable resolving exactly one company by id."""

    directory: DirectoryPort

    def __call__(self, company_id: CompanyId) -> CompanyDetail:
        try:
            company = self.directory.get_company(company_id)
        except Exception as exc:
            mapped = map_api_error(exc, default_code="COMPANY_LOAD_FAILED")
            LOGGER.error(
                "Error fetching company details for %s: [%s] %s",
                company_id,
                mapped.code,
                mapped.message,
            )
            raise UseCaseError("COMPANY_LOAD_FAILED", LOAD_FAILED_MESSAGE) from exc
        if company is None:
            LOGGER.info("Company %s not found", company_id)
            raise UseCaseError("COMPANY_NOT_FOUND", NOT_FOUND_MESSAGE)
        return company


@dataclass
class FetchRelated:
    """Use-case callable loading one related section; never raises on service errors."""

    directory: DirectoryPort

    def __call__(self, company_id: CompanyId, section: RelatedSection) -> Tuple[Any, ...]:
        fetch = getattr(self.directory, section.port_method)
        try:
            records = fetch(company_id)
        except Exception as exc:
            mapped = map_api_error(exc, default_code="RELATED_LOAD_FAILED")
            LOGGER.error(
                "Error fetching %s for %s: [%s] %s",
                section.value,
                company_id,
                mapped.code,
                mapped.message,
            )
            return ()
        return tuple(records or ())


__all__ = [
    "FetchCompany",
    "FetchRelated",
    "LOAD_FAILED_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "RelatedSection",
]
