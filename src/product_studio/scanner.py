"""
Market opportunity scanner.

Scores each catalogue record for competition and buying intent, blends them
into an opportunity score, drops records that fail the opportunity gate and
returns the best-ranked trends.
"""
from __future__ import annotations

import logging
import math as _math
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from .catalog import MARKET_CATALOG, MarketRecord

logger = logging.getLogger(__name__)

# ── Opportunity gate defaults ─────────────────────────────────────────────────

MIN_SEARCH_VOLUME = 30000
MAX_COMPETITION = 50
MIN_BUYING_INTENT = 50
TOP_N = 6

# ── Score weights ─────────────────────────────────────────────────────────────

_COMPETITOR_SATURATION = 1000   # competitors at which density maxes out
_DENSITY_WEIGHT = 60
_RATING_BONUS_HIGH = 20         # average rating >= 4.5
_RATING_BONUS_MID = 10          # average rating >= 4.0

_REVIEW_VELOCITY_SCALE = 100
_REVIEW_WEIGHT = 40
_DEMAND_RATIO_SCALE = 50
_DEMAND_WEIGHT = 60

_VOLUME_CAP = 50                # search volume, in thousands


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for positive values (``Math.round`` semantics)."""
    factor = 10 ** digits
    return _math.floor(value * factor + 0.5) / factor


def competition_score(competitor_count: int, average_rating: float) -> float:
    density = min(competitor_count / _COMPETITOR_SATURATION, 1) * _DENSITY_WEIGHT
    if average_rating >= 4.5:
        bonus = _RATING_BONUS_HIGH
    elif average_rating >= 4.0:
        bonus = _RATING_BONUS_MID
    else:
        bonus = 0
    return min(density + bonus, 100)


def buying_intent_score(review_count: int, search_volume: int, competitor_count: int) -> float:
    """Demand per competitor (60%) plus review depth per competitor (40%), capped at 100."""
    competitors = max(competitor_count, 1)
    review_velocity = review_count / competitors
    search_ratio = search_volume / competitors
    review_score = min(review_velocity / _REVIEW_VELOCITY_SCALE * _REVIEW_WEIGHT, _REVIEW_WEIGHT)
    demand_score = min(search_ratio / _DEMAND_RATIO_SCALE * _DEMAND_WEIGHT, _DEMAND_WEIGHT)
    return min(review_score + demand_score, 100)


def opportunity_score(competition: float, buying_intent: float, search_volume: int) -> float:
    return (
        (100 - competition) * 0.3
        + buying_intent * 0.4
        + min(search_volume / 1000, _VOLUME_CAP) * 0.3
    )


@dataclass
class Trend:
    product_type: str
    search_volume: int
    competition: int
    buying_intent: int
    keywords: list[str]
    average_price: float
    sales_velocity: float
    opportunity_score: float
    platform: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "productType": self.product_type,
            "searchVolume": self.search_volume,
            "competition": self.competition,
            "buyingIntent": self.buying_intent,
            "keywords": list(self.keywords),
            "averagePrice": self.average_price,
            "salesVelocity": self.sales_velocity,
            "opportunityScore": self.opportunity_score,
            "platform": self.platform,
        }


@dataclass
class ScanGate:
    min_search_volume: int = MIN_SEARCH_VOLUME
    max_competition: int = MAX_COMPETITION
    min_buying_intent: int = MIN_BUYING_INTENT

    def admits(self, trend: Trend) -> bool:
        return (
            trend.search_volume >= self.min_search_volume
            and trend.competition <= self.max_competition
            and trend.buying_intent >= self.min_buying_intent
        )


def analyze_record(record: MarketRecord) -> Trend:
    """Score a single market record. Exposed scores are rounded; the ranking key is not."""
    competition = competition_score(record.competitor_count, record.average_rating)
    intent = buying_intent_score(record.review_count, record.search_volume, record.competitor_count)
    low, high = record.price_range
    return Trend(
        product_type=record.category,
        search_volume=record.search_volume,
        competition=int(round_half_up(competition)),
        buying_intent=int(round_half_up(intent)),
        keywords=list(record.keywords),
        average_price=round_half_up((low + high) / 2, 2),
        sales_velocity=round_half_up(record.review_count / max(record.competitor_count, 1), 2),
        opportunity_score=opportunity_score(competition, intent, record.search_volume),
        platform=record.platform,
    )


@dataclass
class ScanResult:
    platforms: list[str]
    trends: list[Trend] = field(default_factory=list)
    matched: int = 0
    admitted: int = 0

    def trend_dicts(self) -> list[dict[str, Any]]:
        return [t.as_dict() for t in self.trends]


def scan_markets(
    platforms: Sequence[str],
    catalog: Iterable[MarketRecord] | None = None,
    gate: ScanGate | None = None,
    limit: int = TOP_N,
) -> ScanResult:
    """
    Rank the catalogue's opportunities on the requested platforms.

    Args:
        platforms: Platform identifiers to include. Values are not validated;
                   unknown platforms simply match no records.
        catalog:   Records to scan (defaults to :data:`MARKET_CATALOG`).
        gate:      Opportunity thresholds applied to the rounded scores.
        limit:     Maximum number of trends returned.

    Returns:
        :class:`ScanResult` with trends sorted by descending opportunity
        score; ties keep catalogue order.
    """
    records = MARKET_CATALOG if catalog is None else catalog
    gate = gate or ScanGate()
    wanted = set(platforms)

    matched = [analyze_record(r) for r in records if r.platform in wanted]
    admitted = [t for t in matched if gate.admits(t)]
    # sorted() is stable, so equal scores stay in catalogue order
    ranked = sorted(admitted, key=lambda t: t.opportunity_score, reverse=True)

    result = ScanResult(
        platforms=list(platforms),
        trends=ranked[: max(limit, 0)],
        matched=len(matched),
        admitted=len(admitted),
    )
    logger.info(
        "Scan of %s: %d matched, %d passed the gate, %d returned",
        ", ".join(result.platforms) or "(none)",
        result.matched,
        result.admitted,
        len(result.trends),
    )
    return result
