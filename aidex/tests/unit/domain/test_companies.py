import pytest

from aidex.domain.companies import CompanyDetail, CompanySummary, Customer, PricingModel, Product


def test_summary_from_row_defaults_missing_optionals():
    company = CompanySummary.from_row({"id": "a", "name": "Acme", "offers_gpus": True})

    assert company.id == "a"
    assert company.hero_tagline is None
    assert company.sub_tagline is None
    assert company.offers_gpus is True
    assert company.offers_inference is False
    assert company.capabilities() == ("GPUs",)


def test_capabilities_follow_fixed_order():
    company = CompanySummary.from_row(
        {
            "id": "a",
            "name": "Acme",
            "offers_finetuning": True,
            "offers_web3": True,
            "offers_inference": True,
            "offers_gpus": True,
        }
    )

    assert company.capabilities() == ("Inference", "GPUs", "Web3", "Fine-tuning")


def test_detail_from_row_maps_null_products_to_empty_tuple():
    detail = CompanyDetail.from_row(
        {
            "id": "x",
            "name": "Zed",
            "website": "https://zed.example",
            "products": None,
            "competitive_advantage": None,
            "created_at": "2025-01-01T00:00:00+00:00",
        }
    )

    assert detail.products == ()
    assert detail.website == "https://zed.example"
    assert detail.competitive_advantage is None
    assert detail.updated_at is None
    assert isinstance(detail, CompanySummary)


def test_detail_from_row_keeps_product_order():
    detail = CompanyDetail.from_row({"id": "x", "name": "Zed", "products": ["B", "A", None]})

    assert detail.products == ("B", "A")


def test_row_without_id_is_rejected():
    with pytest.raises(ValueError):
        CompanySummary.from_row({"name": "Nameless"})


def test_related_records_require_parent_id():
    with pytest.raises(ValueError):
        Customer.from_row({"id": "c1", "customer": "Pika"})


def test_related_records_parse_variant_fields():
    product = Product.from_row({"id": "p1", "company_id": "x", "name": "API", "description": None})
    plan = PricingModel.from_row({"id": "m1", "company_id": "x", "name": "Pro", "price": "$10"})

    assert product.description is None
    assert plan.price == "$10"
    assert plan.details is None
