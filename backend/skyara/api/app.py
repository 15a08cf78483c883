"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from skyara.config import load_settings
from skyara.engine import ENGINE_VERSION
from skyara.exceptions import ConfigurationError, SkyaraError
from skyara.levels import default_levels, default_parameters
from skyara.models.project import Level, ProjectParameters

if TYPE_CHECKING:
    from skyara.config import Settings
    from skyara.engine import FeasibilityEngine
    from skyara.models.estimate import ProjectEstimate

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    """Body of /api/estimate and /api/report."""

    project_name: str = "Projet"
    parameters: ProjectParameters = Field(default_factory=ProjectParameters)
    levels: list[Level] = Field(default_factory=default_levels)


def create_app(
    *,
    engine: FeasibilityEngine | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests). If
        not provided, one is created from the settings on first request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    logging.getLogger("skyara").setLevel(settings.log_level)

    app = FastAPI(title="Skyara", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject engines
    app.state.engine = engine

    def _get_engine() -> FeasibilityEngine:
        eng: FeasibilityEngine | None = app.state.engine
        if eng is not None:
            return eng
        from skyara.factory import create_engine

        try:
            eng = create_engine(settings)
        except ConfigurationError as exc:
            logger.exception("Cannot create the feasibility engine")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.engine = eng
        return eng

    def _run_estimate(request: EstimateRequest) -> ProjectEstimate:
        try:
            return _get_engine().estimate(
                request.parameters,
                request.levels,
                request.project_name,
            )
        except ConfigurationError as exc:
            logger.warning("Rejected project '%s': %s", request.project_name, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except SkyaraError as exc:
            logger.exception("Estimation failed for '%s'", request.project_name)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        result = _run_estimate(request)
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        request = EstimateRequest(
            project_name="R+2 sur 100 m²",
            parameters=default_parameters(),
            levels=default_levels(),
        )
        result = _run_estimate(request)
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
            "export_dict": result.to_export_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/report
    # ------------------------------------------------------------------

    @app.post("/api/report")
    def report(request: EstimateRequest) -> Response:
        from skyara.report import build_report
        from skyara.services.pdf_renderer import render_pdf

        result = _run_estimate(request)
        try:
            pdf = render_pdf(build_report(result))
        except SkyaraError as exc:
            logger.exception("Report rendering failed for '%s'", request.project_name)
            raise HTTPException(status_code=500, detail=str(exc)) from exc

        filename = f"Devis_Skyara_{request.parameters.terrain_area:g}m2_{date.today():%Y%m%d}.pdf"
        return Response(
            content=pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
