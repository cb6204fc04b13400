from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from aidex.domain.companies import (
    CompanyDetail,
    CompanySummary,
    Customer,
    PricingModel,
    Product,
)
from aidex.domain.ports import CompanyId, DirectoryPort

from .directory_rest import (
    COMPANIES_TABLE,
    CUSTOMERS_TABLE,
    PRICING_TABLE,
    PRODUCTS_TABLE,
)

DEFAULT_FIXTURE = Path(__file__).resolve().parent.parent / "fixtures" / "directory.json"


@dataclass
class InMemoryDirectory(DirectoryPort):
    """Offline substitute for ``DirectoryRestAdapter`` backed by table rows.

    ``tables`` maps table names to row lists with the same columns the hosted
    service returns.
    """

    tables: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)

    @classmethod
    def from_json(cls, path: Union[str, Path, None] = None) -> "InMemoryDirectory":
        fixture = Path(path) if path else DEFAULT_FIXTURE
        with fixture.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
        if not isinstance(raw, dict):
            raise ValueError(f"Fixture {fixture} must contain a JSON object of tables.")
        return cls(tables={str(name): list(rows or []) for name, rows in raw.items()})

    # ---------- DirectoryPort ----------

    def list_companies(self) -> List[CompanySummary]:
        companies = [CompanySummary.from_row(row) for row in self._rows(COMPANIES_TABLE)]
        return sorted(companies, key=lambda company: company.name)

    def get_company(self, company_id: CompanyId) -> Optional[CompanyDetail]:
        for row in self._rows(COMPANIES_TABLE):
            if str(row.get("id")) == company_id:
                return CompanyDetail.from_row(row)
        return None

    def list_customers(self, company_id: CompanyId) -> List[Customer]:
        return [Customer.from_row(row) for row in self._scoped(CUSTOMERS_TABLE, company_id)]

    def list_products(self, company_id: CompanyId) -> List[Product]:
        return [Product.from_row(row) for row in self._scoped(PRODUCTS_TABLE, company_id)]

    def list_pricing_models(self, company_id: CompanyId) -> List[PricingModel]:
        return [PricingModel.from_row(row) for row in self._scoped(PRICING_TABLE, company_id)]

    # ---------- helpers ----------

    def _rows(self, table: str) -> Sequence[Mapping[str, Any]]:
        return [row for row in self.tables.get(table, []) if isinstance(row, Mapping)]

    def _scoped(self, table: str, company_id: CompanyId) -> List[Mapping[str, Any]]:
        return [row for row in self._rows(table) if str(row.get("company_id")) == company_id]


__all__ = ["DEFAULT_FIXTURE", "InMemoryDirectory"]
