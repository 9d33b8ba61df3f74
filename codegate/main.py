# codegate/main.py
"""
codegate HTTP service - structural validation for generated UI code.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from codegate import __version__
from codegate.core.config import settings
from codegate.core.exceptions import CodeGateError, InputTooLargeError
from codegate.core.logging import log
from codegate.lib.monitoring import register_monitoring


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    log("STARTUP", f"🚀 codegate {__version__} starting...")
    log("STARTUP", f"Default framework: {settings.validation.default_framework}, "
                   f"max input: {settings.validation.max_input_chars} chars")
    yield
    log("STARTUP", "🔌 Shutting down...")


# ---------------------------------------------------------------------------
# APP INITIALIZATION
# ---------------------------------------------------------------------------

app = FastAPI(
    title="codegate",
    version=__version__,
    lifespan=lifespan,
)

# Monitoring
register_monitoring(app)

cors_origins = settings.server.cors_origin_list
if cors_origins == ["*"] and not settings.debug:
    log("STARTUP", "⚠️ [CORS] Using allow_origins=['*'] - consider setting CORS_ORIGINS in production")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate Limiting - default 100 requests per minute per IP, RATE_LIMIT overrides
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.server.rate_limit])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


# ---------------------------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------------------------

@app.exception_handler(InputTooLargeError)
async def input_too_large_handler(request: Request, exc: InputTooLargeError):
    return JSONResponse(status_code=413, content={"detail": exc.message, **exc.details})


@app.exception_handler(CodeGateError)
async def codegate_error_handler(request: Request, exc: CodeGateError):
    log("API", f"⚠️ {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=400, content={"detail": exc.message, **exc.details})


# ---------------------------------------------------------------------------
# API ROUTES
# ---------------------------------------------------------------------------

from codegate.api import health, validate  # noqa: E402

app.include_router(health.router)
app.include_router(validate.router)


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run("codegate.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)
