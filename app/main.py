"""
FastAPI application entry point.

Demographic Choropleth API - KPIs, bracket distributions, rankings and map
fills for administrative areas, by demographic segment.
"""
import asyncio
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.data_store import data_store
from app.exceptions import (
    ChoroplethError,
    EmptyInputError,
    LoadFailureError,
    MetricNotFoundError,
    NotReadyError,
)
from app.routers import analytics, geospatial, metadata
from app.schemas.common import ErrorResponse, HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    🗺️ **Demographic Choropleth API**

    Serves everything a choropleth dashboard needs for one metric
    (literacy, income or population) and one demographic segment.

    ## Key Features

    * **Map fills**: Per-area color and tooltip fields, or styled GeoJSON
    * **KPIs**: Average, minimum and maximum across all areas
    * **Distribution**: Area counts per bracket for a proportion chart
    * **Rankings**: Areas ordered by value for a ranked bar chart

    ## Important Concept

    A segment is chosen with four dimensions: gender, age band, social
    category and economic class. Map colors and distribution brackets
    come from the same bracket table, so they always agree.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the area catalog and metrics once, off the event loop."""
    try:
        await asyncio.to_thread(data_store.load)
    except LoadFailureError:
        # Store is FAILED; requests report the error until the service restarts
        logger.error("⚠️ Startup load failed; derived endpoints will return errors")


# Errors the derived endpoints can return, documented in OpenAPI
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "No areas or no metric data"},
    500: {"model": ErrorResponse, "description": "Area catalog or metric table failed to load"},
    503: {"model": ErrorResponse, "description": "Data still loading; retry after Retry-After seconds"},
}

# Include routers with prefixes
app.include_router(
    analytics.router,
    prefix=f"{settings.API_V1_PREFIX}/analytics",
    tags=["Analytics & KPIs"],
    responses=ERROR_RESPONSES
)
app.include_router(
    geospatial.router,
    prefix=f"{settings.API_V1_PREFIX}/choropleth",
    tags=["Choropleth"],
    responses=ERROR_RESPONSES
)
app.include_router(
    metadata.router,
    prefix=f"{settings.API_V1_PREFIX}/metadata",
    tags=["Metadata"]
)


# Root endpoint
@app.get("/", tags=["Root"])
def root():
    """API root endpoint with basic information."""
    return {
        "message": "🗺️ Demographic Choropleth API",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "analytics": f"{settings.API_V1_PREFIX}/analytics",
            "choropleth": f"{settings.API_V1_PREFIX}/choropleth",
            "metadata": f"{settings.API_V1_PREFIX}/metadata"
        }
    }


# Health check
@app.get(f"{settings.API_V1_PREFIX}/health", tags=["Health"], response_model=HealthResponse)
def health_check():
    """Health check endpoint; degraded while loading or after a failed load."""
    store = data_store.health()
    return {
        "status": "healthy" if store["status"] == "ready" else "degraded",
        "version": settings.VERSION,
        "store_status": store["status"],
        "area_count": store["area_count"],
        "error": store["error"],
    }


# Exception handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "status_code": exc.status_code
        }
    )


@app.exception_handler(ChoroplethError)
async def choropleth_exception_handler(request, exc):
    headers = None
    if isinstance(exc, NotReadyError):
        status_code = 503
        headers = {"Retry-After": "5"}
    elif isinstance(exc, LoadFailureError):
        status_code = 500
    elif isinstance(exc, (EmptyInputError, MetricNotFoundError)):
        status_code = 404
    else:
        status_code = 500
    return JSONResponse(
        status_code=status_code,
        content={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "status_code": status_code
        },
        headers=headers
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "status_code": 500
        }
    )
