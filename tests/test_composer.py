"""Tests for composer.py and templates.py"""

from datetime import datetime, timezone

import pytest

from product_studio.composer import (
    QUALITY_CHECKS,
    InvalidTrendError,
    compose_product,
    download_filename,
    run_quality_checks,
)
from product_studio.templates import (
    CONTENT_BY_TYPE,
    DEFAULT_TEMPLATE,
    TEMPLATES_BY_TYPE,
    generate_content,
    select_design_template,
)


def _trend(product_type: str, **extra) -> dict:
    trend = {"productType": product_type, "keywords": ["k1", "k2"], "averagePrice": 10.99}
    trend.update(extra)
    return trend


def test_tables_cover_same_ten_types():
    assert len(CONTENT_BY_TYPE) == 10
    assert len(TEMPLATES_BY_TYPE) == 10
    assert set(CONTENT_BY_TYPE) == set(TEMPLATES_BY_TYPE)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CONTENT_BY_TYPE["New"] = None  # type: ignore[index]


def test_budget_planner_product():
    product = compose_product(_trend("Budget Planner Journal"))
    assert product.title == "Complete Budget Planner & Financial Success Journal"
    assert product.format == "pdf"
    assert product.type == "Planner"
    assert product.design["pageCount"] == 120
    assert product.design["typography"] == {"heading": "Montserrat", "body": "Open Sans"}
    assert len(product.content) == 8


def test_sticker_pack_is_png():
    product = compose_product(_trend("Motivational Quote Stickers"))
    assert product.type == "Sticker Pack"
    assert product.format == "png"
    assert product.design["pageCount"] == 5


def test_unknown_type_uses_fallbacks():
    product = compose_product(_trend("Zebra Coloring Kit"))
    assert product.title == "Professional Zebra Coloring Kit"
    assert product.description == (
        "High-quality zebra coloring kit designed for maximum value and user satisfaction."
    )
    assert product.content == ["Premium Content", "Professional Design", "Easy to Use", "High Quality"]
    assert product.type == "General"
    assert product.format == "pdf"
    assert product.design == DEFAULT_TEMPLATE.design_dict()
    assert product.design["pageCount"] == 100
    assert product.fallbacks == ["content", "template"]


def test_lookup_is_case_sensitive():
    assert generate_content("budget planner journal").title == "Professional budget planner journal"
    assert select_design_template("budget planner journal") is DEFAULT_TEMPLATE
    assert len(DEFAULT_TEMPLATE.content_structure) == 2


def test_quality_checks_always_pass():
    passed, checks = run_quality_checks()
    assert passed is True
    assert len(checks) == 8
    assert checks == list(QUALITY_CHECKS)


def test_copies_keywords_and_price():
    product = compose_product(_trend("Fitness Workout Log", averagePrice=12.5, keywords=["gym log"]))
    assert product.keywords == ["gym log"]
    assert product.estimated_value == 12.5


def test_ids_are_unique():
    ids = {compose_product(_trend("Habit Tracker Journal")).id for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("prod_") for i in ids)


def test_urls_and_timestamp():
    moment = datetime(2026, 3, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)
    product = compose_product(_trend("Budget Planner Journal"), now=moment)
    assert product.created_at == "2026-03-01T12:00:00.250Z"
    assert product.thumbnail_url == f"/api/thumbnail?id={int(moment.timestamp() * 1000)}"
    assert product.download_url == f"/api/download-product?id={product.id}"


def test_content_fields_idempotent():
    first = compose_product(_trend("Wedding Planning Checklist")).as_dict()
    second = compose_product(_trend("Wedding Planning Checklist")).as_dict()
    for key in ("type", "title", "description", "keywords", "format", "content", "design", "qualityChecks"):
        assert first[key] == second[key]
    assert first["id"] != second["id"]


def test_as_dict_keys():
    payload = compose_product(_trend("Kids Activity Puzzle Book")).as_dict()
    assert set(payload) == {
        "id", "type", "title", "description", "keywords", "format", "content", "design",
        "qualityChecks", "thumbnailUrl", "createdAt", "estimatedValue", "downloadUrl",
    }
    assert set(payload["design"]) == {"style", "colorPalette", "typography", "pageCount"}


@pytest.mark.parametrize(
    "trend",
    [
        {"keywords": [], "averagePrice": 1.0},
        {"productType": "  ", "keywords": [], "averagePrice": 1.0},
        {"productType": "X", "averagePrice": 1.0},
        {"productType": "X", "keywords": [1, 2], "averagePrice": 1.0},
        {"productType": "X", "keywords": []},
        {"productType": "X", "keywords": [], "averagePrice": "9.99"},
        {"productType": "X", "keywords": [], "averagePrice": -1},
        {"productType": "X", "keywords": [], "averagePrice": True},
        {"productType": "X", "keywords": [], "averagePrice": float("inf")},
        {"productType": "X", "keywords": [], "averagePrice": float("nan")},
    ],
)
def test_invalid_trends_rejected(trend):
    with pytest.raises(InvalidTrendError):
        compose_product(trend)


def test_non_mapping_rejected():
    with pytest.raises(InvalidTrendError):
        compose_product(["Budget Planner Journal"])  # type: ignore[arg-type]


def test_download_filename():
    product = compose_product(_trend("Motivational Quote Stickers"))
    assert download_filename(product) == "Motivational-Quote-Sticker-Pack:-50-Inspirational-Designs.png"
    assert download_filename({"title": "A  B\tC", "format": "pdf"}) == "A-B-C.pdf"
