# codegate/core/logging.py
import os
import sys
from datetime import datetime
from typing import Any


# ═══════════════════════════════════════════════════════════════════════════════
# LOG FILTERING
# ═══════════════════════════════════════════════════════════════════════════════
# Only these scopes are shown by default
# Everything else is gated behind CODEGATE_DEBUG

INFO_SCOPES = {
    "STARTUP",      # App lifecycle
    "API",          # Request boundary
    "VALIDATION",   # Per-snippet verdict
    "BATCH",        # Per-feature aggregation
    "MONITORING",   # Metrics wiring
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "SYNTAX",
    "STRUCTURE",
}

DEBUG_MODE = os.getenv("CODEGATE_DEBUG", "false").lower() == "true"


def log(scope: str, message: str, data: Any = None) -> None:
    """
    Unified logging function for codegate.

    Only INFO_SCOPES are shown by default.
    Set CODEGATE_DEBUG=true to see all scopes.
    """
    if not DEBUG_MODE and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [{scope}] {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str) -> None:
    """
    Log a section header with visual separator.
    """
    if not DEBUG_MODE and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
