"""Tests for catalog.py"""

import tempfile
from pathlib import Path

import pytest

from product_studio.catalog import (
    MARKET_CATALOG,
    CatalogError,
    MarketRecord,
    load_catalog_csv,
    platform_counts,
)
from product_studio.scanner import scan_markets

SAMPLE_CSV = Path(__file__).parents[1] / "sample_data" / "catalog_small.csv"


def test_builtin_catalog_shape():
    assert len(MARKET_CATALOG) == 10
    assert platform_counts(MARKET_CATALOG) == {"amazon": 5, "etsy": 5}
    for rec in MARKET_CATALOG:
        low, high = rec.price_range
        assert low <= high
        assert len(rec.keywords) == 5


def test_records_are_immutable():
    with pytest.raises(Exception):
        MARKET_CATALOG[0].search_volume = 1


def test_price_range_must_be_ordered():
    with pytest.raises(CatalogError):
        MarketRecord("amazon", "Broken", 1, 1, 4.0, 1, (10.0, 5.0), ())


def test_rating_must_be_in_range():
    with pytest.raises(CatalogError):
        MarketRecord("amazon", "Broken", 1, 1, 5.5, 1, (1.0, 2.0), ())


def test_load_sample_csv():
    records = load_catalog_csv(SAMPLE_CSV)
    assert len(records) == 4
    assert records[1].platform == "etsy"
    assert records[0].keywords == ("budget planner", "finance tracker", "money management")
    assert records[0].price_range == (6.99, 14.99)
    assert isinstance(records[0].search_volume, int)


def test_scan_sample_csv():
    result = scan_markets(["amazon", "etsy"], catalog=load_catalog_csv(SAMPLE_CSV))
    assert [t.product_type for t in result.trends] == [
        "Budget Planner Journal",
        "Wedding Planning Checklist",
    ]
    assert result.matched == 4


def test_missing_file():
    with pytest.raises(CatalogError):
        load_catalog_csv("/nonexistent/catalog.csv")


def test_missing_columns():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.csv"
        path.write_text("platform,category\namazon,Thing\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="missing column"):
            load_catalog_csv(path)


def test_non_numeric_value():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.csv"
        path.write_text(
            "platform,category,search_volume,competitor_count,average_rating,review_count,"
            "price_min,price_max,keywords\n"
            "amazon,Thing,lots,10,4.0,100,1.00,2.00,a|b\n",
            encoding="utf-8",
        )
        with pytest.raises(CatalogError, match="search_volume"):
            load_catalog_csv(path)


def _write_row(tmpdir: str, row: str) -> Path:
    path = Path(tmpdir) / "catalog.csv"
    path.write_text(
        "platform,category,search_volume,competitor_count,average_rating,review_count,"
        "price_min,price_max,keywords\n" + row + "\n",
        encoding="utf-8",
    )
    return path


@pytest.mark.parametrize(
    "row",
    [
        "amazon,Thing,inf,10,4.0,100,1.00,2.00,a|b",
        "amazon,Thing,40000,10,4.0,-inf,1.00,2.00,a|b",
        "amazon,Thing,40000,10,4.0,100,nan,2.00,a|b",
        "amazon,Thing,40000,10,4.0,100,1.00,Infinity,a|b",
    ],
)
def test_non_finite_values_rejected(row):
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(CatalogError, match="finite"):
            load_catalog_csv(_write_row(tmpdir, row))


def test_record_rejects_nan_price():
    with pytest.raises(CatalogError):
        MarketRecord("amazon", "Broken", 1, 1, 4.0, 1, (float("nan"), 2.0), ())
