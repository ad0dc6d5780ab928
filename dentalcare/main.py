from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from datetime import datetime, timezone
from typing import Optional
import logging

# Load environment variables as early as possible
load_dotenv()

from .config import Settings, get_settings
from .database import build_engine, create_db_and_tables
from .exceptions import http_exception_handler
from .middleware import RateLimitMiddleware, SecurityMiddleware, LoggingMiddleware, ErrorHandlingMiddleware
from .seed import seed_appointment_options
from .application.ports.payment_gateway import PaymentGateway
from .application.ports.rate_limiter import RateLimiter
from .infrastructure.payments.stripe_gateway import StripePaymentGateway
from .infrastructure.rate_limit.memory_rate_limiter import InMemoryRateLimiter
from .infrastructure.rate_limit.redis_rate_limiter import RedisRateLimiter
from .routers import (
    appointments_router,
    auth_router,
    bookings_router,
    doctors_router,
    payments_router,
    users_router,
)

logger = logging.getLogger(__name__)


def _build_payment_gateway(settings: Settings) -> Optional[PaymentGateway]:
    if not settings.STRIPE_SECRET_KEY:
        logger.warning("STRIPE_SECRET_KEY not set; payment intents are disabled")
        return None
    return StripePaymentGateway(settings.STRIPE_SECRET_KEY)


def _build_rate_limiter(settings: Settings) -> RateLimiter:
    if settings.REDIS_URL:
        logger.info("Using Redis rate limiter")
        return RedisRateLimiter(settings.REDIS_URL)
    logger.info("Using memory-based rate limiting")
    return InMemoryRateLimiter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings: Settings = app.state.settings
    logger.info("Starting DentalCare API...")
    app.state.db_init_ok = True
    app.state.db_init_error = None
    try:
        create_db_and_tables(app.state.engine)
        if settings.SEED_APPOINTMENT_OPTIONS:
            seed_appointment_options(app.state.engine)
        logger.info("Database initialized successfully")
    except Exception as e:
        # Do not crash the app; report via health endpoint
        app.state.db_init_ok = False
        app.state.db_init_error = str(e)
        logger.exception("Database initialization failed")
    yield
    # Shutdown
    logger.info("Shutting down DentalCare API...")
    app.state.engine.dispose()


def create_app(
    settings: Optional[Settings] = None,
    engine=None,
    payment_gateway: Optional[PaymentGateway] = None,
    rate_limiter: Optional[RateLimiter] = None,
) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT
    )

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
    )

    # Store handle and collaborators live on the app, not in module globals
    app.state.settings = settings
    app.state.engine = engine if engine is not None else build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.payment_gateway = payment_gateway if payment_gateway is not None else _build_payment_gateway(settings)

    app.add_exception_handler(HTTPException, http_exception_handler)

    app.add_middleware(ErrorHandlingMiddleware, debug=settings.DEBUG)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=rate_limiter or _build_rate_limiter(settings),
        rate_limit=settings.RATE_LIMIT_PER_MINUTE,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=settings.allowed_methods_list,
        allow_headers=settings.allowed_headers_list,
    )

    app.include_router(appointments_router.router)
    app.include_router(bookings_router.router)
    app.include_router(users_router.router)
    app.include_router(auth_router.router)
    app.include_router(doctors_router.router)
    app.include_router(payments_router.router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Dental care server is running"

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy" if getattr(app.state, "db_init_ok", True) else "degraded",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": {
                "ok": getattr(app.state, "db_init_ok", True),
                "error": getattr(app.state, "db_init_error", None)
            },
            "auth": {
                "secret_key_configured": settings.secret_configured,
                "jwt_algorithm": settings.ALGORITHM,
                "token_expiry_days": settings.ACCESS_TOKEN_EXPIRE_DAYS
            },
            "payments": {
                "configured": app.state.payment_gateway is not None
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("dentalcare.main:app", host=_settings.HOST, port=_settings.PORT)
