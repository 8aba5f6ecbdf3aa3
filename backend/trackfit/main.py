import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trackfit.api.pages import render_error, router as pages_router
from trackfit.api.weights import router as weights_router
from trackfit.core.config import settings
from trackfit.core.errors import InvalidPayload, TrackFitError
from trackfit.db import Base, engine
from trackfit.models.weight import Weight  # noqa: F401  (import ensures table is registered)


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Track-Fit")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup
if engine is not None:
    Base.metadata.create_all(bind=engine)
else:
    logger.warning("DATABASE_URL is not set; API calls will fail until it is configured")


@app.exception_handler(TrackFitError)
async def trackfit_error_handler(request: Request, exc: TrackFitError):
    if not request.url.path.startswith("/api/"):
        return render_error(request, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # JSON API answers 400 {"error": ...}; everything else keeps FastAPI's 422
    if request.url.path.startswith("/api/"):
        logger.info("Rejected payload on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": InvalidPayload.message},
        )
    return await request_validation_exception_handler(request, exc)


app.include_router(weights_router)
app.include_router(pages_router)


@app.get("/health")
def health():
    return {"message": "Track-Fit backend is running"}
