"""Tests for report.py"""

import json
import tempfile

from product_studio.report import (
    generate_json_report,
    generate_markdown_report,
    generate_summary,
    write_reports,
)
from product_studio.scanner import scan_markets

RESULT = scan_markets(["amazon", "etsy"])
EMPTY = scan_markets(["ebay"])


def test_markdown_contains_title_and_table():
    md = generate_markdown_report(RESULT, "2026-03-01")
    assert "# Product Studio" in md
    assert "| # | Product Type |" in md
    assert "Social Media Content Planner" in md
    assert "simulated" in md


def test_markdown_empty_scan():
    md = generate_markdown_report(EMPTY, "2026-03-01")
    assert "No opportunities" in md


def test_json_report_structure():
    report = generate_json_report(RESULT, "2026-03-01")
    assert report["meta"]["returned"] == 6
    assert report["meta"]["matched"] == 10
    assert report["meta"]["platforms"] == ["amazon", "etsy"]
    assert report["trends"][0]["productType"] == "Social Media Content Planner"


def test_summary_lists_ranked_trends():
    summary = generate_summary(RESULT, "2026-03-01", "r.md", "r.json")
    assert "2026-03-01" in summary
    assert "1. Social Media Content Planner (amazon)" in summary
    assert "No opportunities" in generate_summary(EMPTY, "2026-03-01", "r.md", "r.json")


def test_write_reports_creates_files():
    with tempfile.TemporaryDirectory() as tmpdir:
        md_path, json_path, summary = write_reports(RESULT, reports_dir=tmpdir, timezone_str="America/New_York")
        assert md_path.exists()
        assert json_path.exists()
        data = json.loads(json_path.read_text())
        assert data["meta"]["timezone"] == "America/New_York"
        assert len(data["trends"]) == 6
        assert summary.strip() != ""
