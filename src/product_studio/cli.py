"""Command-line entry point for Product Studio."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-studio",
        description="Scan simulated marketplaces for digital-product opportunities and generate products.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── scan ───────────────────────────────────────────────────────────────
    scan_cmd = sub.add_parser("scan", help="Rank market opportunities for one or more platforms.")
    scan_cmd.add_argument(
        "--platforms",
        default="amazon,etsy",
        help="Comma-separated platforms to scan (default: amazon,etsy).",
    )
    scan_cmd.add_argument("--config", default=None, help="Path to config.yaml (default: built-in settings)")
    scan_cmd.add_argument("--catalog", default=None, help="CSV catalogue to scan instead of the built-in one.")
    scan_cmd.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Output only machine-readable JSON.",
    )
    scan_cmd.add_argument(
        "--report",
        action="store_true",
        help="Also write Markdown + JSON reports to the configured reports directory.",
    )
    scan_cmd.add_argument("--report-dir", default=None, help="Reports directory (implies --report).")

    # ── generate ───────────────────────────────────────────────────────────
    gen_cmd = sub.add_parser("generate", help="Generate a product descriptor for a trend.")
    source = gen_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument("--product-type", default=None, help="Product type, e.g. 'Budget Planner Journal'.")
    source.add_argument("--trend-file", default=None, help="JSON file holding a trend object.")
    gen_cmd.add_argument(
        "--keywords",
        default=None,
        help="Comma-separated keywords (used with --product-type when the type is not in the catalogue).",
    )
    gen_cmd.add_argument("--price", type=float, default=None, help="Average price for an uncatalogued type.")
    gen_cmd.add_argument("--json", dest="output_json", action="store_true", help="Output only JSON.")

    # ── serve ──────────────────────────────────────────────────────────────
    serve_cmd = sub.add_parser("serve", help="Run the HTTP API.")
    serve_cmd.add_argument("--config", default=None, help="Path to config.yaml (default: built-in settings)")
    serve_cmd.add_argument("--host", default=None, help="Bind address (overrides config).")
    serve_cmd.add_argument("--port", type=int, default=None, help="Port (overrides config).")

    return parser


def _load_cfg(path: str | None):
    from .config import AppConfig, ConfigError, load_config

    if not path:
        return AppConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        print(f"[ERROR] Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)


def _split(raw: str | None) -> list[str]:
    return [p.strip() for p in (raw or "").split(",") if p.strip()]


# ---------------------------------------------------------------------------
# Sub-command implementations
# ---------------------------------------------------------------------------

def _cmd_scan(args: argparse.Namespace) -> None:
    """Rank opportunities and print them."""
    from .catalog import MARKET_CATALOG, CatalogError, load_catalog_csv
    from .scanner import ScanGate, scan_markets

    cfg = _load_cfg(args.config)

    platforms = _split(args.platforms)
    if not platforms:
        print("[ERROR] --platforms requires at least one platform.", file=sys.stderr)
        sys.exit(2)

    catalog_path = args.catalog or cfg.catalog.path
    try:
        catalog = load_catalog_csv(catalog_path) if catalog_path else MARKET_CATALOG
    except CatalogError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        sys.exit(2)

    gate = ScanGate(
        min_search_volume=cfg.scanner.min_search_volume,
        max_competition=cfg.scanner.max_competition,
        min_buying_intent=cfg.scanner.min_buying_intent,
    )
    try:
        result = scan_markets(platforms, catalog=catalog, gate=gate, limit=cfg.scanner.top_n)
    except Exception as exc:  # noqa: BLE001
        print(f"[ERROR] Market scan failed: {exc}", file=sys.stderr)
        sys.exit(4)

    if args.report or args.report_dir:
        from .report import write_reports
        try:
            _, _, summary = write_reports(
                result,
                reports_dir=args.report_dir or cfg.storage.reports_dir,
                timezone_str=cfg.runtime.timezone,
            )
        except OSError as exc:
            print(f"[ERROR] Report generation failed: {exc}", file=sys.stderr)
            sys.exit(4)
        if not args.output_json:
            print(summary)
            print()

    records = result.trend_dicts()
    if args.output_json:
        print(json.dumps(records, indent=2, ensure_ascii=False))
    else:
        SEP = "-" * 80
        print(SEP)
        print(f"  Market Scan  •  {len(records)} opportunit{'y' if len(records) == 1 else 'ies'} "
              f"on: {', '.join(platforms)}")
        print(SEP)
        for rank, rec in enumerate(records, 1):
            print(f"  #{rank} {rec['productType']} ({rec['platform']})")
            print(f"     Search volume : {rec['searchVolume']:,}")
            print(f"     Competition   : {rec['competition']}   Buying intent: {rec['buyingIntent']}")
            print(f"     Avg price     : ${rec['averagePrice']:.2f}   Sales velocity: {rec['salesVelocity']}")
            print(f"     Score         : {rec['opportunityScore']:.2f}")
            print(f"     Keywords      : {', '.join(rec['keywords'])}")
            print(SEP)

    if not records:
        print(f"No opportunities found for: {', '.join(platforms)}", file=sys.stderr)
        sys.exit(1)


def _trend_for_type(product_type: str, keywords: list[str], price: float | None) -> dict:
    """Use the catalogue's scored trend when the type is known, else build one from the flags."""
    from .catalog import MARKET_CATALOG
    from .scanner import analyze_record

    for record in MARKET_CATALOG:
        if record.category == product_type:
            trend = analyze_record(record).as_dict()
            if keywords:
                trend["keywords"] = keywords
            if price is not None:
                trend["averagePrice"] = price
            return trend
    return {"productType": product_type, "keywords": keywords, "averagePrice": price or 0.0}


def _cmd_generate(args: argparse.Namespace) -> None:
    """Compose a product and print it."""
    from .composer import InvalidTrendError, compose_product, download_filename

    if args.trend_file:
        try:
            trend = json.loads(Path(args.trend_file).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            print(f"[ERROR] Cannot read --trend-file: {exc}", file=sys.stderr)
            sys.exit(2)
        if isinstance(trend, dict) and isinstance(trend.get("trend"), dict):
            trend = trend["trend"]
    else:
        trend = _trend_for_type(args.product_type, _split(args.keywords), args.price)

    try:
        product = compose_product(trend)
    except InvalidTrendError as exc:
        print(f"[ERROR] Invalid trend: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as exc:  # noqa: BLE001
        print(f"[ERROR] Product generation failed: {exc}", file=sys.stderr)
        sys.exit(4)

    payload = product.as_dict()
    if args.output_json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    design = payload["design"]
    SEP = "-" * 80
    print(SEP)
    print(f"  {payload['title']}")
    print(SEP)
    print(f"  Type        : {payload['type']} ({payload['format']}, {design['pageCount']} pages)")
    print(f"  Style       : {design['style']}  •  {design['typography']['heading']} / {design['typography']['body']}")
    print(f"  Palette     : {' '.join(design['colorPalette'])}")
    print(f"  Value       : ${payload['estimatedValue']:.2f}")
    print(f"  Description : {payload['description']}")
    print("  Contents    :")
    for line in payload["content"]:
        print(f"    - {line}")
    print("  Quality     :")
    for check in payload["qualityChecks"]:
        print(f"    {check}")
    print(f"  Download as : {download_filename(product)}")
    print(SEP)


def _cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    from .api import create_app
    from .catalog import CatalogError

    cfg = _load_cfg(args.config)
    if args.host:
        cfg.server.host = args.host
    if args.port:
        cfg.server.port = args.port

    try:
        application = create_app(cfg)
    except CatalogError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        sys.exit(2)

    logger.info("Serving on %s:%d", cfg.server.host, cfg.server.port)
    uvicorn.run(application, host=cfg.server.host, port=cfg.server.port)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "scan":
        _cmd_scan(args)
    elif args.command == "generate":
        _cmd_generate(args)
    elif args.command == "serve":
        _cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(0)

    sys.exit(0)


if __name__ == "__main__":
    main()
