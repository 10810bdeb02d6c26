import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from pagegen.config import get_settings
from pagegen.routers.derive import limiter, router as derive_router
from pagegen.routers.plugins import router as plugins_router
from pagegen.services.deriver import InvalidEntryError

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": get_settings().log_level.upper(), "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="pagegen – Static Site Page Data",
    description=(
        "Shapes content entries from the Contentful source into the page routes "
        "and common props consumed by the Next.js build target."
    ),
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(InvalidEntryError)
async def invalid_entry_handler(request: Request, exc: InvalidEntryError) -> JSONResponse:
    # A malformed entry aborts the whole derivation cycle
    logger.warning("Rejected content entries for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(derive_router)
app.include_router(plugins_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    settings = get_settings()
    return {
        "message": "Hello from pagegen",
        "dev": settings.is_dev,
        "environment": settings.contentful_environment,
    }
