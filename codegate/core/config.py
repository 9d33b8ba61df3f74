# codegate/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class ValidationSettings:
    """Structural validator configuration."""
    # Upper bound on snippet size; generated UI files are far below this
    max_input_chars: int = field(default_factory=lambda: int(os.getenv("CODEGATE_MAX_INPUT_CHARS", "500000")))
    default_framework: str = field(default_factory=lambda: os.getenv("CODEGATE_DEFAULT_FRAMEWORK", "react"))


@dataclass
class ServerSettings:
    """HTTP server configuration."""
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))
    rate_limit: str = field(default_factory=lambda: os.getenv("RATE_LIMIT", "100/minute"))

    @property
    def cors_origin_list(self) -> List[str]:
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@dataclass
class Settings:
    """Main application settings."""
    validation: ValidationSettings = field(default_factory=ValidationSettings)
    server: ServerSettings = field(default_factory=ServerSettings)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", 8000)))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")


# Singleton instance
settings = Settings()
