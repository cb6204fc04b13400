from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests

from aidex.domain.companies import (
    SUMMARY_COLUMNS,
    CompanyDetail,
    CompanySummary,
    Customer,
    PricingModel,
    Product,
)
from aidex.domain.ports import CompanyId, DirectoryPort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_code,
    extract_error_hint,
    parse_error_payload,
)
from .http_client import ApiSession, HttpConfig

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

COMPANIES_TABLE = "ai_companies"
CUSTOMERS_TABLE = "company_customers"
PRODUCTS_TABLE = "company_products"
PRICING_TABLE = "company_pricing_models"


class DirectoryRestAdapter(DirectoryPort):
    """PostgREST adapter for the hosted company directory tables."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
    ) -> None:
        base = str(base_url or "").strip().rstrip("/")
        if not base:
            raise ValueError("DirectoryRestAdapter requires a base URL")
        if not base.endswith("/rest/v1"):
            base = f"{base}/rest/v1"
        self.base_url = base
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s)
        self.session = ApiSession(api_key, self.cfg)

    def list_companies(self) -> List[CompanySummary]:
        rows = self._select(
            COMPANIES_TABLE,
            {"select": ",".join(SUMMARY_COLUMNS), "order": "name.asc"},
            ctx="companies",
        )
        return self._parse(rows, CompanySummary.from_row, ctx="companies")

    def get_company(self, company_id: CompanyId) -> Optional[CompanyDetail]:
        ctx = f"company[{company_id}]"
        rows = self._select(
            COMPANIES_TABLE,
            {"select": "*", "id": f"eq.{company_id}", "limit": "1"},
            ctx=ctx,
        )
        if not rows:
            return None
        return self._parse(rows[:1], CompanyDetail.from_row, ctx=ctx)[0]

    def list_customers(self, company_id: CompanyId) -> List[Customer]:
        return self._related(CUSTOMERS_TABLE, company_id, Customer.from_row, "customers")

    def list_products(self, company_id: CompanyId) -> List[Product]:
        return self._related(PRODUCTS_TABLE, company_id, Product.from_row, "products")

    def list_pricing_models(self, company_id: CompanyId) -> List[PricingModel]:
        return self._related(PRICING_TABLE, company_id, PricingModel.from_row, "pricing_models")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _related(
        self,
        table: str,
        company_id: CompanyId,
        factory: Callable[[Dict[str, Any]], T],
        label: str,
    ) -> List[T]:
        ctx = f"{label}[{company_id}]"
        rows = self._select(
            table,
            {"select": "*", "company_id": f"eq.{company_id}", "order": "created_at.asc"},
            ctx=ctx,
        )
        return self._parse(rows, factory, ctx=ctx)

    def _select(self, table: str, params: Dict[str, str], *, ctx: str) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/{table}"
        resp = self.session.get(url, params=params)
        self._ensure_ok(resp, ctx)
        data = self._json_any(resp, ctx)
        if not isinstance(data, list):
            raise ApiError(f"{ctx}: expected list response", context=ctx)
        LOGGER.debug("%s: %d row(s)", ctx, len(data))
        return [row for row in data if isinstance(row, dict)]

    @staticmethod
    def _parse(
        rows: List[Dict[str, Any]], factory: Callable[[Dict[str, Any]], T], *, ctx: str
    ) -> List[T]:
        try:
            return [factory(row) for row in rows]
        except ValueError as exc:
            raise ApiError(f"{ctx}: malformed row ({exc})", context=ctx) from exc

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        code = extract_error_code(payload)
        hint = extract_error_hint(payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                code=code,
                hint=hint,
                payload=payload,
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(
                message,
                status=status,
                payload=payload,
                context=ctx,
            )
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from None


__all__ = ["DirectoryRestAdapter"]
