"""FastAPI Web API for Product Studio."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog import MARKET_CATALOG, load_catalog_csv, platform_counts
from .composer import InvalidTrendError, compose_product
from .config import AppConfig, config_from_env
from .models import GenerateRequest, ScanRequest
from .scanner import ScanGate, scan_markets
from .timestamps import iso_timestamp

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

_SCAN_FAILED = "Failed to scan markets"
_GENERATE_FAILED = "Failed to generate product"


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid input: " + "; ".join(parts)


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    """
    Build the API around a configuration; the catalogue is loaded once here.

    Without ``cfg`` the file named by PRODUCT_STUDIO_CONFIG is read, so
    configuration errors surface when the app is built, not on import.
    Serve with ``uvicorn --factory product_studio.api:create_app``.
    """
    cfg = cfg or config_from_env()
    catalog = load_catalog_csv(cfg.catalog.path) if cfg.catalog.path else MARKET_CATALOG
    gate = ScanGate(
        min_search_volume=cfg.scanner.min_search_volume,
        max_competition=cfg.scanner.max_competition,
        min_buying_intent=cfg.scanner.min_buying_intent,
    )

    app = FastAPI(
        title="Product Studio API",
        description=(
            "Scan simulated Amazon / Etsy market data for digital-product opportunities "
            "and generate product descriptors for a selected trend."
        ),
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.config = cfg
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.server.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _on_invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _failure(422, message)

    # ── Health ───────────────────────────────────────────────────────────────

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        """Returns 200 OK when the API is up."""
        return {"status": "ok", "version": VERSION}

    @app.get("/api/platforms", tags=["meta"])
    def platforms() -> list[dict[str, Any]]:
        """Platforms present in the loaded catalogue, with record counts."""
        return [{"platform": p, "records": n} for p, n in platform_counts(catalog).items()]

    # ── Market scan ──────────────────────────────────────────────────────────

    @app.post("/api/scan-markets", tags=["scan"])
    async def scan(body: ScanRequest) -> Any:
        """
        Score the catalogue for the requested platforms and return the top
        opportunities.

        A record is kept only with search volume >= 30000, competition <= 50
        and buying intent >= 50 (defaults; see ``scanner`` in the config).

        **Example body:** `{"platforms": ["amazon", "etsy"]}`
        """
        try:
            await asyncio.sleep(cfg.simulation.scan_delay_seconds)
            result = scan_markets(body.platforms, catalog=catalog, gate=gate, limit=cfg.scanner.top_n)
            return {
                "success": True,
                "trends": result.trend_dicts(),
                "scannedPlatforms": result.platforms,
                "timestamp": iso_timestamp(),
            }
        except Exception:
            logger.exception("Market scan error")
            return _failure(500, _SCAN_FAILED)

    # ── Product generation ───────────────────────────────────────────────────

    @app.post("/api/generate-product", tags=["generate"])
    async def generate(body: GenerateRequest) -> Any:
        """
        Generate a digital product descriptor for a trend returned by
        `/api/scan-markets`.

        Unknown product types get generic content and the `General` design
        template rather than an error.
        """
        try:
            await asyncio.sleep(cfg.simulation.generate_delay_seconds)
            product = compose_product(body.trend.as_trend())
            return {"success": True, "product": product.as_dict(), "timestamp": iso_timestamp()}
        except InvalidTrendError as exc:
            logger.info("Rejected trend: %s", exc)
            return _failure(422, f"Invalid input: {exc}")
        except Exception:
            logger.exception("Product generation error")
            return _failure(500, _GENERATE_FAILED)

    logger.info(
        "Product Studio API ready (%d catalogue record(s), scan delay %.1fs, generate delay %.1fs)",
        len(catalog),
        cfg.simulation.scan_delay_seconds,
        cfg.simulation.generate_delay_seconds,
    )
    return app
