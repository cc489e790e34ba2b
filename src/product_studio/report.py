"""Scan report generation: Markdown, JSON, and a plain-text summary."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from dateutil import tz

from .scanner import ScanResult

logger = logging.getLogger(__name__)

_DISCLAIMER = (
    "> **Note:** Market figures are simulated demo data, not scraped marketplace statistics. "
    "Scores indicate relative opportunity within this catalogue only."
)


def _now_local(timezone_str: str) -> datetime:
    local_tz = tz.gettz(timezone_str) or tz.tzlocal()
    return datetime.now(tz=local_tz)


def _md_table(trends: list[dict[str, Any]]) -> str:
    if not trends:
        return "_No opportunities passed the gate._\n"
    header = "| # | Product Type | Platform | Search Volume | Competition | Buying Intent | Avg Price | Score |\n"
    separator = "|---|---|---|---|---|---|---|---|\n"
    rows = []
    for rank, t in enumerate(trends, 1):
        rows.append(
            f"| {rank} | {t['productType']} | {t.get('platform') or '—'} | {t['searchVolume']:,} "
            f"| {t['competition']} | {t['buyingIntent']} | ${t['averagePrice']:.2f} "
            f"| {t['opportunityScore']:.1f} |"
        )
    return header + separator + "\n".join(rows) + "\n"


def generate_markdown_report(result: ScanResult, run_date_str: str, timezone_str: str = "UTC") -> str:
    trends = result.trend_dicts()
    if trends:
        best = trends[0]
        highlight = (
            f"- Top opportunity: **{best['productType']}** "
            f"(score {best['opportunityScore']:.1f}, keywords: {', '.join(best['keywords'][:3])})"
        )
    else:
        highlight = "- No opportunities this scan."

    return f"""# Product Studio — Market Scan

**Date:** {run_date_str} ({timezone_str})
**Platforms:** {', '.join(result.platforms) or '_none_'}
**Records matched:** {result.matched}  •  **Passed gate:** {result.admitted}  •  **Returned:** {len(trends)}

---

## 📌 Highlights

{highlight}

---

## 🔍 Ranked Opportunities

{_md_table(trends)}
---

{_DISCLAIMER}
"""


def generate_json_report(result: ScanResult, run_date_str: str, timezone_str: str = "UTC") -> dict[str, Any]:
    return {
        "meta": {
            "date": run_date_str,
            "timezone": timezone_str,
            "platforms": result.platforms,
            "matched": result.matched,
            "admitted": result.admitted,
            "returned": len(result.trends),
        },
        "trends": result.trend_dicts(),
    }


def generate_summary(result: ScanResult, run_date_str: str, md_path: str, json_path: str) -> str:
    """Return a short plain-text summary suitable for a terminal or chat message."""
    lines = [
        f"📊 Product Studio — Market Scan ({run_date_str})",
        f"Platforms: {', '.join(result.platforms) or 'none'}",
        f"Opportunities: {len(result.trends)} of {result.matched} matched record(s)",
        "",
    ]
    for rank, t in enumerate(result.trends, 1):
        lines.append(f"  {rank}. {t.product_type} ({t.platform}) score {t.opportunity_score:.1f}")
    if not result.trends:
        lines.append("No opportunities passed the gate.")
    lines += [
        "",
        f"📄 Report (MD):   {md_path}",
        f"📋 Report (JSON): {json_path}",
    ]
    return "\n".join(lines)


def write_reports(
    result: ScanResult,
    reports_dir: str | Path,
    timezone_str: str = "UTC",
) -> tuple[Path, Path, str]:
    """
    Write Markdown + JSON scan reports to reports_dir.
    Returns (md_path, json_path, summary).
    """
    reports_dir = Path(reports_dir)
    reports_dir.mkdir(parents=True, exist_ok=True)

    now = _now_local(timezone_str)
    date_str = now.strftime("%Y-%m-%d")
    file_stem = f"scan_{now.strftime('%Y%m%d_%H%M%S')}"

    md_path = reports_dir / f"{file_stem}.md"
    json_path = reports_dir / f"{file_stem}.json"

    md_path.write_text(generate_markdown_report(result, date_str, timezone_str), encoding="utf-8")
    json_path.write_text(
        json.dumps(generate_json_report(result, date_str, timezone_str), indent=2, default=str),
        encoding="utf-8",
    )

    logger.info("Report written: %s", md_path)
    logger.info("Report written: %s", json_path)

    return md_path, json_path, generate_summary(result, date_str, str(md_path), str(json_path))
