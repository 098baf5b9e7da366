"""FastAPI application for the AABot dashboard API."""

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from aabot import __version__
from aabot.api.routes.config import router as config_router
from aabot.api.routes.dashboard import router as dashboard_router
from aabot.api.routes.health import router as health_router
from aabot.errors import ConfigurationError

logger = structlog.get_logger()

app = FastAPI(title="AABot API", version=__version__)

# CORS for Vite dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:5000"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Log the failure; the client only sees a generic message."""
    logger.error(
        "configuration_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": "Configuration storage error"})


app.include_router(health_router)
app.include_router(config_router)
app.include_router(dashboard_router)
