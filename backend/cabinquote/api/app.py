"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from cabinquote.config import Settings, load_env

load_env()

from cabinquote.data.labels import (  # noqa: E402
    DOOR_CATEGORY_LABELS,
    DOOR_LABELS,
    EXTERIOR_LABELS,
    INSULATION_LABELS,
    INTERIOR_LABELS,
    PLUMBING_LABELS,
    WINDOW_LABELS,
)
from cabinquote.data.pricing import PRICE_LIST_VERSION  # noqa: E402
from cabinquote.data.seed import DEFAULT_CONFIG  # noqa: E402
from cabinquote.engine import ENGINE_VERSION  # noqa: E402
from cabinquote.exceptions import ConsultantError  # noqa: E402
from cabinquote.models.chat import ChatRequest  # noqa: E402,TCH001 (FastAPI resolves at runtime)
from cabinquote.models.config import CabinConfig  # noqa: E402,TCH001
from cabinquote.models.enums import DOOR_CATEGORIES  # noqa: E402

if TYPE_CHECKING:
    from cabinquote.engine import PricingEngine
    from cabinquote.services.consultant import CabinConsultant

logger = logging.getLogger(__name__)


def _labels(mapping: dict[Any, str]) -> dict[str, str]:
    return {str(key): label for key, label in mapping.items()}


def create_app(
    *,
    engine: PricingEngine | None = None,
    consultant: CabinConsultant | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built pricing engine (e.g. tests). Defaults to
        create_default_engine on first request.
    consultant
        Optional pre-built assistant for /api/chat. If not provided, one is
        created from settings on first chat request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    app = FastAPI(title="Cabinquote", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.consultant = consultant
    app.state.settings = settings

    def _get_engine() -> PricingEngine:
        eng: PricingEngine | None = app.state.engine
        if eng is not None:
            return eng
        from cabinquote.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _get_consultant() -> CabinConsultant:
        cons: CabinConsultant | None = app.state.consultant
        if cons is not None:
            return cons
        from cabinquote.api.deps import create_consultant

        cons = create_consultant(app.state.settings)
        app.state.consultant = cons
        return cons

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/catalog")
    def catalog() -> dict[str, Any]:
        eng = _get_engine()
        return {
            "price_list_version": PRICE_LIST_VERSION,
            "prices": eng.catalog.to_dict(),
            "included_options": eng.catalog.included.model_dump(mode="json"),
            "substitute_door": str(eng.catalog.substitute_door),
            "door_categories": _labels(DOOR_CATEGORIES),
            "labels": {
                "exterior": _labels(EXTERIOR_LABELS),
                "interior": _labels(INTERIOR_LABELS),
                "insulation": _labels(INSULATION_LABELS),
                "window": _labels(WINDOW_LABELS),
                "door": _labels(DOOR_LABELS),
                "door_category": _labels(DOOR_CATEGORY_LABELS),
                "plumbing": _labels(PLUMBING_LABELS),
            },
        }

    # ------------------------------------------------------------------
    # GET /api/default-config
    # ------------------------------------------------------------------

    @app.get("/api/default-config")
    def default_config() -> dict[str, Any]:
        return DEFAULT_CONFIG.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(config: CabinConfig) -> dict[str, Any]:
        breakdown = _get_engine().estimate(config)
        return {
            "estimate": breakdown.model_dump(mode="json"),
            "summary_dict": breakdown.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/chat
    # ------------------------------------------------------------------

    @app.post("/api/chat")
    def chat(request: ChatRequest) -> StreamingResponse:
        try:
            cons = _get_consultant()
        except ConsultantError as exc:
            logger.warning("Chat requested without a configured consultant")
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        chunks = cons.stream_reply(request.message, request.config, request.history)
        return StreamingResponse(chunks, media_type="text/plain; charset=utf-8")

    return app
