from aidex.adapters.api_errors import ApiTimeoutError
from aidex.web_ui.main import main, smoke_test


class _FailingDirectory:
    def list_companies(self):
        raise ApiTimeoutError("slow")


def test_offline_smoke_test_loads_fixture(capsys):
    assert main(["--offline", "--smoke-test"]) == 0
    assert capsys.readouterr().out.startswith("smoke-ok 3 companies")


def test_smoke_test_reports_load_failure(capsys):
    assert smoke_test(_FailingDirectory()) == 1
    assert "COMPANIES_LOAD_FAILED" in capsys.readouterr().err


def test_missing_configuration_exits_with_error(monkeypatch):
    for name in ("AIDEX_SUPABASE_URL", "SUPABASE_URL", "AIDEX_SUPABASE_ANON_KEY", "SUPABASE_ANON_KEY"):
        monkeypatch.delenv(name, raising=False)

    assert main(["--smoke-test"]) == 2
