"""
Application Settings
===================

Main application settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Annotated, Optional, List, Union
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import json
from pathlib import Path

from src.models.schemas import RenderGeometry

DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "templates"

DEFAULT_BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="Carousel Slide Renderer", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    debug: bool = Field(default=True, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(
        default=3100,
        validation_alias=AliasChoices("port", "CAROUSEL_PORT", "PORT"),
        description="Server port",
    )

    # Template Configuration
    templates_path: Path = Field(
        default=DEFAULT_TEMPLATES_PATH, description="Directory holding layout templates"
    )
    template_suffix: str = Field(default=".html", description="Layout template file suffix")
    cache_templates: bool = Field(default=True, description="Cache templates once loaded")
    default_layout_style: Optional[str] = Field(
        default="centered", description="Layout style for carousel slides without one"
    )

    # Rendering Configuration
    slide_width: int = Field(default=1080, gt=0, description="Slide viewport width")
    slide_height: int = Field(default=1350, gt=0, description="Slide viewport height")
    device_scale_factor: float = Field(default=2.0, gt=0, le=4.0, description="Device pixel ratio")
    render_timeout: float = Field(default=15.0, gt=0, description="Content load timeout in seconds")

    # Browser Configuration
    browser_headless: bool = Field(default=True, description="Run browser in headless mode")
    browser_executable_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "browser_executable_path",
            "CAROUSEL_BROWSER_EXECUTABLE_PATH",
            "BROWSER_EXECUTABLE_PATH",
            "PUPPETEER_EXECUTABLE_PATH",
        ),
        description="Override path to the Chromium executable",
    )
    browser_args: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_BROWSER_ARGS), description="Chromium launch flags"
    )
    browser_warmup: bool = Field(
        default=False, description="Launch the browser at start-up instead of on first render"
    )

    # Security Configuration
    allowed_hosts: Annotated[List[str], NoDecode] = Field(
        default=["*"], description="Allowed hosts for CORS"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=False, description="Also write rotating log files")
    log_path: Path = Field(default=Path("./logs"), description="Log file directory")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("allowed_hosts", "browser_args", mode="before")
    @classmethod
    def parse_string_list(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse a list from a JSON array or a comma-separated string."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("[") and v.endswith("]"):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @property
    def render_geometry(self) -> RenderGeometry:
        """Fixed viewport applied to every render."""
        return RenderGeometry(
            width=self.slide_width,
            height=self.slide_height,
            device_scale_factor=self.device_scale_factor,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CAROUSEL_",
        populate_by_name=True,
        extra="ignore",
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
