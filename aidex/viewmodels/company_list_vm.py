"""Company listing state with in-memory capability filtering.

Call context:
    ``aidex.web_ui.main`` creates one ``CompanyListVM`` for each visit of the
    index page, awaits ``load`` once, and calls ``set_filter`` from the
    filter buttons.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from aidex.domain.companies import CompanySummary
from aidex.domain.filters import CapabilityFilter, apply_filter, parse_filter
from aidex.domain.ports import DirectoryPort, UseCaseError
from aidex.domain.view_state import ViewPhase, ViewState
from aidex.usecases.load_companies import LoadCompanies

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterOption:
    """Filter button model; ``active`` marks the highlighted control."""

    value: str
    label: str
    active: bool


@dataclass(frozen=True)
class CompanyCard:
    """Display card consumed by the listing grid."""

    company_id: str
    name: str
    hero_tagline: str
    sub_tagline: str
    badges: Tuple[str, ...]
    href: str


class CompanyListVM:
    """View-model for the directory listing.

    Holds the full company sequence loaded once per mount and a filtered
    subsequence derived synchronously from the active ``CapabilityFilter``.
    """

    def __init__(
        self,
        directory: DirectoryPort,
        *,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._load_companies = LoadCompanies(directory)
        self.on_changed = on_changed
        self.state: ViewState[Tuple[CompanySummary, ...]] = ViewState()
        self.companies: Tuple[CompanySummary, ...] = ()
        self.filtered: Tuple[CompanySummary, ...] = ()
        self.active_filter: CapabilityFilter = CapabilityFilter.ALL
        self._disposed = False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def load(self) -> None:
        """Fetch all companies once; failures become a fixed error message."""
        if self.state.phase is not ViewPhase.IDLE:
            LOGGER.debug("Company list already %s; skipping load", self.state.phase.value)
            return
        self.state.start()
        self._notify()
        try:
            companies = await asyncio.to_thread(self._load_companies)
        except UseCaseError as exc:
            if self._disposed:
                return
            self.state.fail(exc.message, exc.code)
        else:
            if self._disposed:
                LOGGER.debug("Company list disposed; dropping %d result(s)", len(companies))
                return
            self.companies = companies
            self.filtered = tuple(apply_filter(companies, self.active_filter))
            self.state.succeed(companies)
        self._notify()

    def set_filter(self, selection: Union[CapabilityFilter, str]) -> None:
        """Recompute the filtered set from memory; no network access."""
        self.active_filter = parse_filter(selection)
        self.filtered = tuple(apply_filter(self.companies, self.active_filter))
        self._notify()

    def dispose(self) -> None:
        """Detach the view; a load still in flight will not touch state."""
        self._disposed = True
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
    def no_matches(self) -> bool:
        """True once loaded when the active filter leaves nothing to show."""
        return self.state.phase is ViewPhase.READY and not self.filtered

    def counts(self) -> Tuple[int, int]:
        """Return ``(shown, total)``."""
        return len(self.filtered), len(self.companies)

    @property
    def summary_text(self) -> str:
        shown, total = self.counts()
        return f"Showing {shown} of {total} companies"

    def filter_options(self) -> List[FilterOption]:
        return [
            FilterOption(value=option.value, label=option.label, active=option is self.active_filter)
            for option in CapabilityFilter
        ]

    def cards(self) -> List[CompanyCard]:
        return [
            CompanyCard(
                company_id=company.id,
                name=company.name,
                hero_tagline=company.hero_tagline or "",
                sub_tagline=company.sub_tagline or "",
                badges=company.capabilities(),
                href=f"/company/{company.id}",
            )
            for company in self.filtered
        ]

    def _notify(self) -> None:
        if self.on_changed is not None:
            self.on_changed()


__all__ = ["CompanyCard", "CompanyListVM", "FilterOption"]
