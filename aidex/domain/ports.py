from __future__ import annotations

from typing import Optional, Protocol, Sequence

from aidex.domain.companies import (
    CompanyDetail,
    CompanySummary,
    Customer,
    PricingModel,
    Product,
)

CompanyId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class DirectoryPort(Protocol):
    """Read-only queries against the remote company directory.

    Every method raises an ``ApiError`` subclass when the call itself fails.
    Related-record queries are always scoped by the parent company id.
    """

    def list_companies(self) -> Sequence[CompanySummary]: ...  # ordered by name
    def get_company(self, company_id: CompanyId) -> Optional[CompanyDetail]: ...  # None = zero rows
    def list_customers(self, company_id: CompanyId) -> Sequence[Customer]: ...
    def list_products(self, company_id: CompanyId) -> Sequence[Product]: ...
    def list_pricing_models(self, company_id: CompanyId) -> Sequence[PricingModel]: ...
