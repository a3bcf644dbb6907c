import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from emojid import __version__
from emojid.core.config import settings
from emojid.core.startup import startup_event
from emojid.models.alphabet import DEFAULT_ALPHABET
from emojid.api.ids import ids_router
from emojid.middleware.rate_limit import limiter, rate_limit_exceeded_handler, create_rate_limit_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    logger.info("Starting %s %s", settings.APP_NAME, __version__)
    yield
    logger.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    description="Generate, parse and validate UUID-shaped emoji identifiers",
    version=__version__,
    lifespan=lifespan,
)

# Configure rate limiting
if settings.RATE_LIMIT_ENABLED:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

rate_limit_middleware = create_rate_limit_middleware()
if rate_limit_middleware:
    app.add_middleware(rate_limit_middleware)

if settings.ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

app.include_router(ids_router, prefix="/api/ids", tags=["ids"])

@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": __version__}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": __version__,
        "alphabet_size": len(DEFAULT_ALPHABET),
    }
