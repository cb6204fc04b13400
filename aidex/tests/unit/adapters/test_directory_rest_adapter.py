from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

import pytest
from requests import exceptions as req_exc

from aidex.adapters.api_errors import ApiClientError, ApiError, ApiServerError, ApiTimeoutError
from aidex.adapters.directory_rest import DirectoryRestAdapter


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = str(payload)

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[Union[_ResponseStub, Exception]]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> _ResponseStub:
        self.calls.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {}), "timeout": timeout})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _adapter(responses, **kwargs) -> tuple[DirectoryRestAdapter, _SessionStub]:
    adapter = DirectoryRestAdapter("https://demo.supabase.co/", api_key="anon-key", **kwargs)
    stub = _SessionStub(responses)
    adapter.session.session = stub  # type: ignore[assignment]
    return adapter, stub


def test_list_companies_selects_summary_columns_ordered_by_name():
    rows = [
        {"id": "a", "name": "Acme", "offers_gpus": True},
        "ignore-me",
        {"id": "b", "name": "Beta"},
    ]
    adapter, stub = _adapter([_ResponseStub(rows)])

    companies = adapter.list_companies()

    assert [c.name for c in companies] == ["Acme", "Beta"]
    call = stub.calls[0]
    assert call["url"] == "https://demo.supabase.co/rest/v1/ai_companies"
    assert call["params"]["order"] == "name.asc"
    assert call["params"]["select"].startswith("id,name,hero_tagline")
    assert call["headers"]["apikey"] == "anon-key"
    assert call["headers"]["Authorization"] == "Bearer anon-key"
    assert call["timeout"] == 10


def test_get_company_filters_by_id_and_returns_none_for_zero_rows():
    adapter, stub = _adapter([_ResponseStub([])])

    assert adapter.get_company("missing") is None
    assert stub.calls[0]["params"]["id"] == "eq.missing"
    assert stub.calls[0]["params"]["limit"] == "1"


def test_get_company_parses_detail_row():
    adapter, _ = _adapter([_ResponseStub([{"id": "x", "name": "Zed", "products": ["API"]}])])

    company = adapter.get_company("x")

    assert company is not None
    assert company.name == "Zed"
    assert company.products == ("API",)


@pytest.mark.parametrize(
    "method,table",
    [
        ("list_customers", "company_customers"),
        ("list_products", "company_products"),
        ("list_pricing_models", "company_pricing_models"),
    ],
)
def test_related_queries_are_scoped_by_company_id(method, table):
    adapter, stub = _adapter([_ResponseStub([])])

    assert getattr(adapter, method)("x") == []
    call = stub.calls[0]
    assert call["url"].endswith(f"/rest/v1/{table}")
    assert call["params"]["company_id"] == "eq.x"
    assert call["params"]["order"] == "created_at.asc"


def test_client_error_carries_postgrest_code_and_hint():
    payload = {"code": "42P01", "message": "relation does not exist", "hint": "check table", "details": None}
    adapter, _ = _adapter([_ResponseStub(payload, status_code=404)])

    with pytest.raises(ApiClientError) as excinfo:
        adapter.list_products("x")

    err = excinfo.value
    assert err.status == 404
    assert err.code == "42P01"
    assert err.hint == "check table"
    assert "relation does not exist" in str(err)
    assert "HTTP 404" in str(err)


def test_server_error_raises_api_server_error():
    adapter, _ = _adapter([_ResponseStub("boom", status_code=503)])

    with pytest.raises(ApiServerError) as excinfo:
        adapter.list_companies()
    assert "HTTP 503" in str(excinfo.value)


def test_non_list_payload_is_rejected():
    adapter, _ = _adapter([_ResponseStub({"id": "x"})])

    with pytest.raises(ApiError):
        adapter.get_company("x")


def test_invalid_json_is_reported_as_api_error():
    adapter, _ = _adapter([_ResponseStub(ValueError("no json"))])

    with pytest.raises(ApiError):
        adapter.list_companies()


def test_malformed_row_is_reported_as_api_error():
    adapter, _ = _adapter([_ResponseStub([{"name": "no id"}])])

    with pytest.raises(ApiError):
        adapter.list_companies()


TIMEOUT_CASES = [req_exc.Timeout(), req_exc.ConnectionError()]


@pytest.mark.parametrize("failure", TIMEOUT_CASES)
def test_transport_failure_is_raised_after_one_attempt(failure):
    adapter, stub = _adapter([failure, _ResponseStub([{"id": "a", "name": "Acme"}])])

    with pytest.raises(ApiTimeoutError):
        adapter.list_companies()
    assert len(stub.calls) == 1


def test_other_request_errors_are_not_repeated():
    adapter, stub = _adapter([req_exc.InvalidURL("bad url"), _ResponseStub([])])

    with pytest.raises(ApiError) as excinfo:
        adapter.get_company("x")
    assert not isinstance(excinfo.value, ApiTimeoutError)
    assert len(stub.calls) == 1


def test_adapter_requires_base_url():
    with pytest.raises(ValueError):
        DirectoryRestAdapter("  ")


def test_base_url_with_rest_suffix_is_not_doubled():
    adapter = DirectoryRestAdapter("https://demo.supabase.co/rest/v1/")
    assert adapter.base_url == "https://demo.supabase.co/rest/v1"
