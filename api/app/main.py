"""
Revam BnB API - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, Response
import time
import logging

# Prometheus metrics
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST, REGISTRY

from app.config import Settings, settings

# Define Prometheus metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

REQUEST_LATENCY = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint']
)
from app.routers import auth, destinations, health, hotels, internal, phone_verification, wishlist
from app.utils.database import init_db, close_db
from app.utils.errors import register_error_handlers

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def warn_missing_config(app_settings: Settings) -> None:
    """Log each unset secret that leaves a feature disabled or unprotected"""
    if not app_settings.AMADEUS_CLIENT_ID or not app_settings.AMADEUS_CLIENT_SECRET:
        logger.warning("Amadeus credentials not configured; hotel search will return empty results")
    if not app_settings.SUPABASE_SERVICE_ROLE_KEY:
        logger.warning("SUPABASE_SERVICE_ROLE_KEY not configured; auth endpoints will fail")
    if not app_settings.INTERNAL_TASK_TOKEN:
        logger.warning("INTERNAL_TASK_TOKEN not configured; internal token refresh endpoint is unauthenticated")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager - handles startup and shutdown events
    """
    # Startup
    logger.info("Starting Revam BnB API...")

    await init_db()

    warn_missing_config(settings)

    logger.info("Revam BnB API ready to serve requests!")

    yield

    # Shutdown
    logger.info("Shutting down Revam BnB API...")

    await close_db()

    logger.info("Cleanup completed")


# Create FastAPI application
app = FastAPI(
    title="Revam BnB API",
    description="""
    ## Travel Destination Backend-for-Frontend

    ### Features
    - Destinations with optional GeoJSON area/center geometry
    - Hotel search and offers via Amadeus
    - Supabase-backed sign-up, login and session verification
    - POI wishlists
    - Phone-verification token validation

    ### Authentication
    Send the Supabase access token in the Authorization header: `Bearer <token>`
    """,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials="*" not in settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Request timing middleware with Prometheus metrics
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    # Record metrics (skip /metrics endpoint to avoid recursion)
    if request.url.path != "/metrics":
        route = request.scope.get("route")
        endpoint = getattr(route, "path", request.url.path)
        method = request.method
        status = response.status_code

        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(process_time)

    response.headers["X-Process-Time"] = str(process_time)
    return response


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["Authentication"])
app.include_router(destinations.router, prefix=f"{settings.API_PREFIX}/destinations", tags=["Destinations"])
app.include_router(wishlist.router, prefix=f"{settings.API_PREFIX}/poi-wishlist", tags=["POI Wishlist"])
app.include_router(hotels.router, prefix=f"{settings.API_PREFIX}/hotels", tags=["Hotels"])
app.include_router(phone_verification.router, prefix=f"{settings.API_PREFIX}/phone-verification", tags=["Phone Verification"])
app.include_router(internal.router, prefix=f"{settings.API_PREFIX}/internal", tags=["Internal"], include_in_schema=False)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - API information"""
    return {
        "name": "Revam BnB API",
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


@app.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint"""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST
    )


def run():
    """Console entry point: serve the API with uvicorn"""
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
