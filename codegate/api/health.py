# codegate/api/health.py
"""
Health check endpoints.

/healthz is liveness only. /api/health is readiness: it pushes a known-good
and a known-bad snippet through the validator and reports whether both
verdicts come out right.
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from codegate import __version__
from codegate.core.logging import log
from codegate.validation import Framework, validate_code

router = APIRouter(tags=["Health"])

_READY_SNIPPET = "const App = () => <div><p>ok</p></div>;"
_BROKEN_SNIPPET = "const App = () => <div><p>ok</p>;"


def _validator_ready() -> bool:
    good = validate_code(_READY_SNIPPET, Framework.REACT)
    bad = validate_code(_BROKEN_SNIPPET, Framework.REACT)
    return good.valid and bad.errors == ("Unclosed tag: <div>",)


@router.get("/healthz")
async def healthz():
    """Liveness check."""
    return {
        "ok": True,
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/api/health")
async def api_health():
    """Readiness check: the validator must give the expected verdicts."""
    ready = _validator_ready()
    if not ready:
        log("API", "🚨 Readiness check failed: validator verdicts are off")
    return {
        "status": "healthy" if ready else "degraded",
        "version": __version__,
        "frameworks": [f.value for f in Framework],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
