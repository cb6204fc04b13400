"""Capability filter selection for the company listing."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Union

from aidex.domain.companies import CompanySummary


class CapabilityFilter(str, Enum):
    """Single active filter; ``ALL`` disables filtering."""

    ALL = "all"
    INFERENCE = "inference"
    GPUS = "gpus"
    WEB3 = "web3"
    FINETUNING = "finetuning"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def flag(self) -> Optional[str]:
        """Name of the ``offers_*`` attribute tested by this filter."""
        if self is CapabilityFilter.ALL:
            return None
        return f"offers_{self.value}"

    def matches(self, company: CompanySummary) -> bool:
        flag = self.flag
        if flag is None:
            return True
        return bool(getattr(company, flag))


_LABELS = {
    CapabilityFilter.ALL: "All",
    CapabilityFilter.INFERENCE: "Inference",
    CapabilityFilter.GPUS: "GPUs",
    CapabilityFilter.WEB3: "Web3",
    CapabilityFilter.FINETUNING: "Fine-tuning",
}


def parse_filter(value: Union[CapabilityFilter, str]) -> CapabilityFilter:
    """Coerce a filter value or its string form; unknown values raise ``ValueError``."""
    if isinstance(value, CapabilityFilter):
        return value
    text = str(value or "").strip().lower()
    try:
        return CapabilityFilter(text)
    except ValueError:
        raise ValueError(f"Unknown capability filter: {value!r}") from None


def apply_filter(
    companies: Iterable[CompanySummary], selection: CapabilityFilter
) -> List[CompanySummary]:
    """Return the companies matching ``selection`` in their original order."""
    return [company for company in companies if selection.matches(company)]


__all__ = ["CapabilityFilter", "apply_filter", "parse_filter"]
