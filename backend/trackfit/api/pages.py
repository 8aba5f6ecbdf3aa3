from datetime import date
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from trackfit.api.weights import append_weight, list_all_weights
from trackfit.core.chart import chart_json
from trackfit.core.config import settings
from trackfit.core.constants import FORM_WEIGHT_STEP, MSG_DATE_REQUIRED, WEIGHT_UNIT
from trackfit.core.errors import TrackFitError
from trackfit.core.merge import merge_series
from trackfit.db import get_db


router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _range_error() -> str:
    return (
        f"Weight must be between {settings.form_min_weight:g} and "
        f"{settings.form_max_weight:g} {WEIGHT_UNIT}."
    )


def _render(
    request: Request,
    db: Session,
    selected_date: str,
    selected_weight: float,
    error: str | None = None,
    glitch: bool = False,
    status_code: int = status.HTTP_200_OK,
):
    # Everything below is derived from the stored rows on each request
    records = list_all_weights(db)
    points = merge_series(records, settings.target_config())
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "selected_date": selected_date,
            "selected_weight": selected_weight,
            "min_weight": settings.form_min_weight,
            "max_weight": settings.form_max_weight,
            "step": FORM_WEIGHT_STEP,
            "unit": WEIGHT_UNIT,
            "records": records,
            "chart_json": chart_json(points),
            "error": error,
            "glitch": glitch,
        },
        status_code=status_code,
    )


def render_error(request: Request, exc: TrackFitError):
    """HTML counterpart of the `{"error": ...}` body for page routes."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": exc.message},
        status_code=exc.status_code,
    )


@router.get("/", response_class=HTMLResponse)
def index(request: Request, glitch: bool = False, db: Session = Depends(get_db)):
    return _render(
        request,
        db,
        selected_date=date.today().isoformat(),
        selected_weight=settings.form_default_weight,
        glitch=glitch,
    )


@router.post("/", response_class=HTMLResponse)
def submit_weight(
    request: Request,
    entry_date: str = Form("", alias="date"),
    entry_weight: str = Form("", alias="weight"),
    db: Session = Depends(get_db),
):
    """Form submission from the page; redirects back to `/` on success."""
    error = None
    weight = settings.form_default_weight
    parsed_date = None

    try:
        weight = float(entry_weight)
    except ValueError:
        error = _range_error()

    if not entry_date.strip():
        error = MSG_DATE_REQUIRED
    else:
        try:
            parsed_date = date.fromisoformat(entry_date.strip())
        except ValueError:
            error = MSG_DATE_REQUIRED

    if error is None and not (settings.form_min_weight <= weight <= settings.form_max_weight):
        error = _range_error()

    if error is not None:
        return _render(
            request,
            db,
            selected_date=entry_date or date.today().isoformat(),
            selected_weight=weight,
            error=error,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    append_weight(db, parsed_date, weight)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
