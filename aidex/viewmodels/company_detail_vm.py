"""Company detail state joining the company row with its related records.

Call context:
    ``aidex.web_ui.main`` creates a ``CompanyDetailVM`` for each visit of
    ``/company/{company_id}`` and awaits ``load`` with the route parameter.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from aidex.domain.companies import CompanyDetail, Customer, PricingModel, Product
from aidex.domain.ports import CompanyId, DirectoryPort, UseCaseError
from aidex.domain.view_state import ViewState
from aidex.usecases.load_company_details import FetchCompany, FetchRelated, RelatedSection

LOGGER = logging.getLogger(__name__)

NOT_FOUND_CODE = "COMPANY_NOT_FOUND"


@dataclass(frozen=True)
class CompanyDetailData:
    """Company plus every related section that resolved (failed ones are empty)."""

    company: CompanyDetail
    customers: Tuple[Customer, ...] = ()
    products: Tuple[Product, ...] = ()
    pricing_models: Tuple[PricingModel, ...] = ()


@dataclass(frozen=True)
class DetailSection:
    key: str
    title: str


@dataclass(frozen=True)
class PricingRow:
    name: str
    price: str
    details: str


@dataclass(frozen=True)
class OverviewField:
    """Optional overview block; exactly one of ``text`` or ``items`` is used."""

    title: str
    text: str = ""
    items: Tuple[str, ...] = ()
    link: bool = False


class CompanyDetailVM:
    """View-model for one company's detail page.

    Every ``load`` call discards prior state and bumps a generation counter.
    Results are applied only if their generation is still current, so a slow
    response for an earlier id never overwrites a newer one.
    """

    def __init__(
        self,
        directory: DirectoryPort,
        *,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._fetch_company = FetchCompany(directory)
        self._fetch_related = FetchRelated(directory)
        self.on_changed = on_changed
        self.company_id: Optional[CompanyId] = None
        self.state: ViewState[CompanyDetailData] = ViewState()
        self._generation = 0

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def load(self, company_id: Optional[CompanyId]) -> None:
        """Load one company and its related sections.

        An absent or blank id is a no-op. The primary lookup must succeed
        before the three related sections are fetched concurrently; a
        related-section failure leaves that section empty.
        """
        company_id = (company_id or "").strip()
        if not company_id:
            LOGGER.debug("Company detail load skipped: no id")
            return

        self._generation += 1
        token = self._generation
        self.company_id = company_id
        self.state = state = ViewState().start()
        self._notify()

        try:
            company = await asyncio.to_thread(self._fetch_company, company_id)
        except UseCaseError as exc:
            if self._is_current(token, company_id):
                state.fail(exc.message, exc.code)
                self._notify()
            return
        if not self._is_current(token, company_id):
            return

        customers, products, pricing_models = await asyncio.gather(
            asyncio.to_thread(self._fetch_related, company_id, RelatedSection.CUSTOMERS),
            asyncio.to_thread(self._fetch_related, company_id, RelatedSection.PRODUCTS),
            asyncio.to_thread(self._fetch_related, company_id, RelatedSection.PRICING_MODELS),
        )
        if not self._is_current(token, company_id):
            return

        state.succeed(
            CompanyDetailData(
                company=company,
                customers=customers,
                products=products,
                pricing_models=pricing_models,
            )
        )
        self._notify()

    def dispose(self) -> None:
        """Invalidate any in-flight load and detach the view."""
        self._generation += 1
        self.on_changed = None

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def error_code(self) -> Optional[str]:
        return self.state.error_code

    @property
    def not_found(self) -> bool:
        return self.state.error_code == NOT_FOUND_CODE

    @property
    def data(self) -> Optional[CompanyDetailData]:
        return self.state.data

    def sections(self) -> List[DetailSection]:
        """Related sections to render; empty sections are omitted entirely."""
        data = self.data
        if data is None:
            return []
        candidates = (
            ("products", "Products", data.products),
            ("pricing_models", "Pricing Models", data.pricing_models),
            ("customers", "Notable Customers", data.customers),
        )
        return [DetailSection(key, title) for key, title, records in candidates if records]

    def pricing_rows(self) -> List[PricingRow]:
        data = self.data
        if data is None:
            return []
        return [
            PricingRow(name=model.name, price=model.price, details=model.details or "N/A")
            for model in data.pricing_models
        ]

    def customer_names(self) -> List[str]:
        data = self.data
        return [customer.customer for customer in data.customers] if data else []

    def overview_fields(self) -> List[OverviewField]:
        data = self.data
        if data is None:
            return []
        company = data.company
        fields: List[OverviewField] = []
        if company.website:
            fields.append(OverviewField("Website", text=company.website, link=True))
        if company.competitive_advantage:
            fields.append(OverviewField("Competitive Advantage", text=company.competitive_advantage))
        if company.products:
            fields.append(OverviewField("Products (from main table)", items=company.products))
        return fields

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _is_current(self, token: int, company_id: CompanyId) -> bool:
        if token == self._generation:
            return True
        LOGGER.debug("Discarding stale detail result for %s", company_id)
        return False

    def _notify(self) -> None:
        if self.on_changed is not None:
            self.on_changed()


__all__ = [
    "CompanyDetailData",
    "CompanyDetailVM",
    "DetailSection",
    "OverviewField",
    "PricingRow",
]
