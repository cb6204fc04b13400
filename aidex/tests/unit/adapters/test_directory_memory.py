import json

from aidex.adapters.directory_memory import InMemoryDirectory

TOGETHER_ID = "7b0c5a52-3f3e-4d8e-9a55-6c1f0d2f9a01"


def test_bundled_fixture_lists_companies_by_name():
    directory = InMemoryDirectory.from_json()

    names = [company.name for company in directory.list_companies()]

    assert names == sorted(names)
    assert "Together AI" in names


def test_bundled_fixture_related_records_are_scoped():
    directory = InMemoryDirectory.from_json()

    customers = directory.list_customers(TOGETHER_ID)

    assert [c.customer for c in customers] == ["Pika", "Zomato"]
    assert all(c.company_id == TOGETHER_ID for c in customers)
    assert directory.list_products("unknown") == []


def test_unknown_company_yields_zero_rows():
    directory = InMemoryDirectory.from_json()

    assert directory.get_company("unknown") is None


def test_from_json_reads_custom_fixture(tmp_path):
    fixture = tmp_path / "tables.json"
    fixture.write_text(
        json.dumps(
            {
                "ai_companies": [{"id": "x", "name": "Zed", "products": ["API"]}],
                "company_pricing_models": [
                    {"id": "m1", "company_id": "x", "name": "Pro", "price": "$10"}
                ],
            }
        ),
        encoding="utf-8",
    )

    directory = InMemoryDirectory.from_json(fixture)

    assert directory.get_company("x").products == ("API",)
    assert [plan.name for plan in directory.list_pricing_models("x")] == ["Pro"]
    assert directory.list_customers("x") == []
