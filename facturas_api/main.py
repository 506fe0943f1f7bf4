import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_ALLOW_ORIGINS, get_settings, setup_logging
from .database import DatabaseClient, FacturasError, get_db
from .models import ErrorResponse, HealthResponse
from .routers.facturas import router as facturas_router
from .routers.timbre import router as timbre_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Facturas API starting, data file: %s", settings.facturas_file)
    yield
    logger.info("Facturas API shutting down")


# Initialize FastAPI app
app = FastAPI(
    title="Facturas API",
    description="Read-only API over locally stored facturas with DGII timbre lookup",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
)

app.include_router(facturas_router)
app.include_router(timbre_router)


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"message": "Facturas API is running", "status": "healthy"}


@app.get("/api/health", response_model=HealthResponse)
async def health_check(db: DatabaseClient = Depends(get_db)):
    """Detailed health check with data file status"""
    total = None
    status = "healthy"
    file_present = db.exists()
    if not file_present:
        status = "degraded"
    else:
        try:
            total = len(await run_in_threadpool(db.load_facturas))
        except FacturasError as e:
            logger.warning("Health check could not read facturas: %s", e)
            status = "degraded"

    return HealthResponse(
        status=status,
        facturas_file=str(db.file_path),
        file_present=file_present,
        total_facturas=total,
        timestamp=datetime.now().isoformat(timespec="seconds"),
    )


# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Error interno del servidor").model_dump(exclude_none=True),
    )
