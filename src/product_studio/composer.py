"""Digital product assembly from a selected market trend."""

from __future__ import annotations

import logging
import math as _math
import numbers
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from .templates import (
    CONTENT_BY_TYPE,
    TEMPLATES_BY_TYPE,
    generate_content,
    select_design_template,
)
from .timestamps import epoch_millis, iso_timestamp, utc_now

logger = logging.getLogger(__name__)

THUMBNAIL_PATH = "/api/thumbnail"
DOWNLOAD_PATH = "/api/download-product"

_RASTER_TYPES = {"Sticker Pack"}
_WHITESPACE = re.compile(r"\s+")

QUALITY_CHECKS: tuple[str, ...] = (
    "✓ Content originality verified",
    "✓ Design consistency validated",
    "✓ Typography accessibility confirmed",
    "✓ Color contrast ratios meet WCAG standards",
    "✓ File format optimization complete",
    "✓ Page layout structural integrity verified",
    "✓ Print-ready specifications met",
    "✓ Digital device compatibility tested",
)


class InvalidTrendError(ValueError):
    """Raised when a trend is missing fields needed to compose a product."""


def run_quality_checks() -> tuple[bool, list[str]]:
    """Cosmetic QA pass; every check always passes."""
    return True, list(QUALITY_CHECKS)


def new_product_id() -> str:
    return f"prod_{uuid.uuid4().hex}"


def validate_trend(trend: Mapping[str, Any]) -> tuple[str, list[str], float]:
    """
    Check the fields composition depends on.

    Returns:
        (product_type, keywords, average_price)

    Raises:
        InvalidTrendError: on a missing or ill-typed field.
    """
    if not isinstance(trend, Mapping):
        raise InvalidTrendError("trend must be an object")

    product_type = trend.get("productType")
    if not isinstance(product_type, str) or not product_type.strip():
        raise InvalidTrendError("productType must be a non-empty string")

    keywords = trend.get("keywords")
    if not isinstance(keywords, (list, tuple)) or not all(isinstance(k, str) for k in keywords):
        raise InvalidTrendError("keywords must be a list of strings")

    price = trend.get("averagePrice")
    if (
        isinstance(price, bool)
        or not isinstance(price, numbers.Real)
        or not _math.isfinite(price)
        or price < 0
    ):
        raise InvalidTrendError("averagePrice must be a finite non-negative number")

    return product_type, list(keywords), float(price)


@dataclass
class Product:
    id: str
    type: str
    title: str
    description: str
    keywords: list[str]
    format: str
    content: list[str]
    design: dict[str, Any]
    quality_checks: list[str]
    thumbnail_url: str
    created_at: str
    estimated_value: float
    download_url: str = ""
    fallbacks: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            "format": self.format,
            "content": self.content,
            "design": self.design,
            "qualityChecks": self.quality_checks,
            "thumbnailUrl": self.thumbnail_url,
            "createdAt": self.created_at,
            "estimatedValue": self.estimated_value,
            "downloadUrl": self.download_url,
        }


def compose_product(trend: Mapping[str, Any], now: datetime | None = None) -> Product:
    """
    Build a product descriptor for the selected trend.

    Content and design template are looked up independently by
    ``trend["productType"]``; unknown types use the generic entries. The
    format is ``png`` for sticker packs and ``pdf`` otherwise, and
    ``estimatedValue`` is the trend's ``averagePrice`` unchanged.

    Raises:
        InvalidTrendError: ``trend`` lacks productType, keywords or averagePrice.
    """
    product_type, keywords, average_price = validate_trend(trend)
    now = now or utc_now()

    content = generate_content(product_type)
    template = select_design_template(product_type)
    _, checks = run_quality_checks()

    fallbacks = []
    if product_type not in CONTENT_BY_TYPE:
        fallbacks.append("content")
    if product_type not in TEMPLATES_BY_TYPE:
        fallbacks.append("template")

    product_id = new_product_id()
    product = Product(
        id=product_id,
        type=template.type,
        title=content.title,
        description=content.description,
        keywords=keywords,
        format="png" if template.type in _RASTER_TYPES else "pdf",
        content=list(content.content),
        design=template.design_dict(),
        quality_checks=checks,
        thumbnail_url=f"{THUMBNAIL_PATH}?id={epoch_millis(now)}",
        created_at=iso_timestamp(now),
        estimated_value=average_price,
        download_url=f"{DOWNLOAD_PATH}?id={product_id}",
        fallbacks=fallbacks,
    )
    if fallbacks:
        logger.info("No canned %s for %r, using generic entries", " or ".join(fallbacks), product_type)
    logger.info("Composed %s %s (%s) for %r", product.format, product.type, product.id, product_type)
    return product


def download_filename(product: Product | Mapping[str, Any]) -> str:
    """File name a download is saved under: title with whitespace runs hyphenated, plus format."""
    if isinstance(product, Product):
        title, fmt = product.title, product.format
    else:
        title, fmt = product["title"], product["format"]
    return f"{_WHITESPACE.sub('-', title)}.{fmt}"
