"""Typed company and related-record snapshots built from directory rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

CAPABILITY_FLAGS: Tuple[Tuple[str, str], ...] = (
    ("offers_inference", "Inference"),
    ("offers_gpus", "GPUs"),
    ("offers_web3", "Web3"),
    ("offers_finetuning", "Fine-tuning"),
)

SUMMARY_COLUMNS: Tuple[str, ...] = (
    "id",
    "name",
    "hero_tagline",
    "sub_tagline",
    "offers_inference",
    "offers_gpus",
    "offers_web3",
    "offers_finetuning",
)


def _require_id(row: Mapping[str, Any], key: str = "id") -> str:
    value = row.get(key)
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"Row is missing required column '{key}'.")
    return text


def _text(row: Mapping[str, Any], key: str) -> str:
    value = row.get(key)
    return str(value) if value is not None else ""


def _optional_text(row: Mapping[str, Any], key: str) -> Optional[str]:
    value = row.get(key)
    if value is None:
        return None
    return str(value)


def _flag(row: Mapping[str, Any], key: str) -> bool:
    return bool(row.get(key) or False)


@dataclass(frozen=True)
class CompanySummary:
    """Company row as shown in the directory listing."""

    id: str
    name: str
    hero_tagline: Optional[str] = None
    sub_tagline: Optional[str] = None
    offers_inference: bool = False
    offers_gpus: bool = False
    offers_web3: bool = False
    offers_finetuning: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CompanySummary":
        return cls(
            id=_require_id(row),
            name=_text(row, "name"),
            hero_tagline=_optional_text(row, "hero_tagline"),
            sub_tagline=_optional_text(row, "sub_tagline"),
            offers_inference=_flag(row, "offers_inference"),
            offers_gpus=_flag(row, "offers_gpus"),
            offers_web3=_flag(row, "offers_web3"),
            offers_finetuning=_flag(row, "offers_finetuning"),
        )

    def capabilities(self) -> Tuple[str, ...]:
        """Return badge labels for every capability flag that is set."""
        return tuple(label for attr, label in CAPABILITY_FLAGS if getattr(self, attr))


@dataclass(frozen=True)
class CompanyDetail(CompanySummary):
    """Full company row used by the detail page."""

    website: Optional[str] = None
    competitive_advantage: Optional[str] = None
    products: Tuple[str, ...] = ()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CompanyDetail":
        summary = CompanySummary.from_row(row)
        raw_products = row.get("products") or ()
        if isinstance(raw_products, str):
            raw_products = (raw_products,)
        products = tuple(str(item) for item in raw_products if item is not None)
        return cls(
            id=summary.id,
            name=summary.name,
            hero_tagline=summary.hero_tagline,
            sub_tagline=summary.sub_tagline,
            offers_inference=summary.offers_inference,
            offers_gpus=summary.offers_gpus,
            offers_web3=summary.offers_web3,
            offers_finetuning=summary.offers_finetuning,
            website=_optional_text(row, "website"),
            competitive_advantage=_optional_text(row, "competitive_advantage"),
            products=products,
            created_at=_optional_text(row, "created_at"),
            updated_at=_optional_text(row, "updated_at"),
        )


@dataclass(frozen=True)
class Customer:
    """Notable customer reference for one company."""

    id: str
    company_id: str
    customer: str
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        return cls(
            id=_require_id(row),
            company_id=_require_id(row, "company_id"),
            customer=_text(row, "customer"),
            created_at=_optional_text(row, "created_at"),
        )


@dataclass(frozen=True)
class Product:
    """Product offered by one company."""

    id: str
    company_id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Product":
        return cls(
            id=_require_id(row),
            company_id=_require_id(row, "company_id"),
            name=_text(row, "name"),
            description=_optional_text(row, "description"),
            created_at=_optional_text(row, "created_at"),
            updated_at=_optional_text(row, "updated_at"),
        )


@dataclass(frozen=True)
class PricingModel:
    """Pricing plan published by one company."""

    id: str
    company_id: str
    name: str
    price: str
    details: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PricingModel":
        return cls(
            id=_require_id(row),
            company_id=_require_id(row, "company_id"),
            name=_text(row, "name"),
            price=_text(row, "price"),
            details=_optional_text(row, "details"),
            created_at=_optional_text(row, "created_at"),
            updated_at=_optional_text(row, "updated_at"),
        )


__all__ = [
    "CAPABILITY_FLAGS",
    "SUMMARY_COLUMNS",
    "CompanyDetail",
    "CompanySummary",
    "Customer",
    "PricingModel",
    "Product",
]
