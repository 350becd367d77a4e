"""FastAPI Web application — translate Condor tasks over HTTP."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from condor2nav.condor.coords import FlatEarthConverter
from condor2nav.task.errors import TranslationError
from condor2nav.task.models import TranslateOptions
from condor2nav.web.schemas import (
    HealthResponse,
    TaskPointRecord,
    TranslateRequest,
    TranslateResponse,
)
from condor2nav.web.service import TranslationService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

app = FastAPI(title="Condor2Nav", version=VERSION)

_DEFAULT_PATH_PREFIX = os.environ.get("CONDOR2NAV_PATH_PREFIX", "")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api/translate", response_model=TranslateResponse)
def translate(req: TranslateRequest) -> TranslateResponse:
    """Translate a Condor flight plan into XCSoar profile, waypoint and airspace files."""
    options = TranslateOptions(
        aat_minutes=req.aat_minutes,
        max_task_points=req.max_task_points,
        max_start_points=req.max_start_points,
        generate_waypoint_file=req.generate_waypoint_file,
        auto_advance=req.auto_advance,
        path_prefix=req.path_prefix or _DEFAULT_PATH_PREFIX,
    )
    svc = TranslationService(FlatEarthConverter(req.origin_lat, req.origin_lon))
    try:
        output = svc.run_text(req.task_text, options)
    except TranslationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        _logger.exception("Translation failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    translation = output.translation
    return TranslateResponse(
        profile=output.profile.as_dict(),
        waypoint_file=translation.waypoint_lines,
        airspace_file=output.airspace_file,
        warnings=translation.warnings,
        tps_valid=translation.tps_valid,
        task_points=[
            TaskPointRecord(
                index=tp.index,
                sector_type=tp.sector_type.value,
                sector_radius=tp.sector_radius,
                aat_start_radial=tp.aat_start_radial,
                aat_finish_radial=tp.aat_finish_radial,
            )
            for tp in translation.task_points
        ],
    )
