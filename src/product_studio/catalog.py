"""
Simulated marketplace catalogue.

The built-in records stand in for scraped Amazon / Etsy category data and are
read-only for the life of the process. A CSV file with the same fields can be
loaded instead (see :func:`load_catalog_csv`).
"""
from __future__ import annotations

import logging
import math as _math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd

logger = logging.getLogger(__name__)

PLATFORMS = ("amazon", "etsy")

CSV_COLUMNS = (
    "platform",
    "category",
    "search_volume",
    "competitor_count",
    "average_rating",
    "review_count",
    "price_min",
    "price_max",
    "keywords",
)

_KEYWORD_SEP = "|"


class CatalogError(Exception):
    """Raised when a market record or catalogue file is invalid."""


@dataclass(frozen=True)
class MarketRecord:
    platform: str
    category: str
    search_volume: int
    competitor_count: int
    average_rating: float
    review_count: int
    price_range: tuple[float, float]
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        numbers = (
            self.search_volume,
            self.competitor_count,
            self.average_rating,
            self.review_count,
            *self.price_range,
        )
        if not all(_math.isfinite(n) for n in numbers):
            raise CatalogError(f"{self.category!r}: numeric fields must be finite")
        low, high = self.price_range
        if low > high:
            raise CatalogError(
                f"{self.category!r}: price range minimum {low} exceeds maximum {high}"
            )
        if not 0 <= self.average_rating <= 5:
            raise CatalogError(f"{self.category!r}: average rating {self.average_rating} outside 0-5")


MARKET_CATALOG: tuple[MarketRecord, ...] = (
    MarketRecord("amazon", "Budget Planner Journal", 45000, 120, 4.2, 3400, (6.99, 14.99),
                 ("budget planner", "finance tracker", "money management", "expense journal", "savings planner")),
    MarketRecord("etsy", "Mindfulness Coloring Book", 38000, 85, 4.1, 2200, (7.99, 12.99),
                 ("mindfulness coloring", "stress relief", "adult coloring", "meditation art", "relaxation")),
    MarketRecord("amazon", "Social Media Content Planner", 52000, 95, 4.3, 4100, (8.99, 16.99),
                 ("content calendar", "social media planner", "instagram planner", "content strategy", "post scheduler")),
    MarketRecord("etsy", "Wedding Planning Checklist", 67000, 240, 4.5, 8900, (5.99, 19.99),
                 ("wedding planner", "bride checklist", "wedding organizer", "ceremony planning", "wedding timeline")),
    MarketRecord("amazon", "Habit Tracker Journal", 41000, 110, 4.0, 2800, (6.99, 13.99),
                 ("habit tracker", "daily habits", "productivity journal", "goal tracker", "routine planner")),
    MarketRecord("etsy", "Recipe Organization Templates", 34000, 65, 3.9, 1600, (4.99, 11.99),
                 ("recipe cards", "cookbook template", "meal planner", "cooking organizer", "recipe binder")),
    MarketRecord("amazon", "Gratitude Journal Prompts", 48000, 150, 4.4, 5200, (7.99, 15.99),
                 ("gratitude journal", "thankful prompts", "positive thinking", "daily gratitude", "mindfulness journal")),
    MarketRecord("etsy", "Kids Activity Puzzle Book", 56000, 180, 4.3, 6700, (5.99, 14.99),
                 ("kids puzzles", "activity book", "children games", "brain teasers", "educational puzzles")),
    MarketRecord("amazon", "Fitness Workout Log", 39000, 105, 4.1, 3100, (6.99, 14.99),
                 ("workout log", "exercise tracker", "fitness journal", "gym log", "training diary")),
    MarketRecord("etsy", "Motivational Quote Stickers", 44000, 320, 4.6, 12000, (3.99, 9.99),
                 ("motivational stickers", "inspirational quotes", "planner stickers", "affirmation stickers", "positive vibes")),
)


def platform_counts(records: Iterable[MarketRecord]) -> dict[str, int]:
    """Number of records per platform, in first-seen order."""
    counts: dict[str, int] = {}
    for rec in records:
        counts[rec.platform] = counts.get(rec.platform, 0) + 1
    return counts


# ── CSV loading ───────────────────────────────────────────────────────────────

def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, float) and _math.isnan(value)) or str(value).strip() == ""


def _to_number(value: object, column: str, row_no: int, cast: type) -> int | float:
    if _is_blank(value):
        raise CatalogError(f"Row {row_no}: missing value for '{column}'")
    try:
        number = float(str(value).replace(",", "").strip())
    except ValueError as exc:
        raise CatalogError(f"Row {row_no}: '{column}' is not numeric: {value!r}") from exc
    if not _math.isfinite(number):
        raise CatalogError(f"Row {row_no}: '{column}' must be finite: {value!r}")
    return int(number) if cast is int else number


def _parse_keywords(raw: object) -> tuple[str, ...]:
    if _is_blank(raw):
        return ()
    return tuple(k.strip() for k in str(raw).split(_KEYWORD_SEP) if k.strip())


def record_from_row(row: dict, row_no: int = 0) -> MarketRecord:
    """Build a :class:`MarketRecord` from one CSV row dict."""
    platform = row.get("platform")
    category = row.get("category")
    if _is_blank(platform) or _is_blank(category):
        raise CatalogError(f"Row {row_no}: 'platform' and 'category' are required")
    return MarketRecord(
        platform=str(platform).strip().lower(),
        category=str(category).strip(),
        search_volume=_to_number(row.get("search_volume"), "search_volume", row_no, int),
        competitor_count=_to_number(row.get("competitor_count"), "competitor_count", row_no, int),
        average_rating=_to_number(row.get("average_rating"), "average_rating", row_no, float),
        review_count=_to_number(row.get("review_count"), "review_count", row_no, int),
        price_range=(
            _to_number(row.get("price_min"), "price_min", row_no, float),
            _to_number(row.get("price_max"), "price_max", row_no, float),
        ),
        keywords=_parse_keywords(row.get("keywords")),
    )


def load_catalog_csv(path: str | Path) -> tuple[MarketRecord, ...]:
    """
    Load market records from a CSV file.

    Expected columns are listed in :data:`CSV_COLUMNS`; ``keywords`` holds a
    ``|``-separated list. Platforms are lower-cased so that request filters
    match regardless of how the file was written.

    Raises:
        CatalogError: file missing, required columns absent, or a row invalid.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog file {path} is missing column(s): {', '.join(missing)}")

    records = tuple(
        record_from_row(row, row_no)
        for row_no, row in enumerate(df.to_dict(orient="records"), start=2)
    )
    logger.info("Loaded %d market record(s) from %s", len(records), path)
    return records
