"""Configuration management for the Webflow MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import StartupError

_REPO_ROOT = Path(__file__).resolve().parents[2]
# Later files override earlier ones: a .env in the working directory wins.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    ".env",
)

_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=_ENV_FILE_CANDIDATES,
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class RuntimeSettings(BaseSettings):
    """Process settings that never depend on the Webflow credential."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; logs always go to stderr as well",
    )

    mcp_transport: Literal["stdio", "http", "sse"] = Field(
        "stdio", description="Transport used to serve MCP requests"
    )
    mcp_host: str = Field("127.0.0.1", description="Bind host for HTTP/SSE transports")
    mcp_port: int = Field(8000, description="Bind port for HTTP/SSE transports")

    model_config = _SETTINGS_CONFIG


class WebflowSettings(RuntimeSettings):
    """Full server configuration, including the Webflow API credential."""

    webflow_api_token: SecretStr = Field(
        ...,
        description="Webflow Data API access token",
        validation_alias=AliasChoices("WEBFLOW_API_TOKEN", "WEBFLOW_API_KEY"),
    )
    webflow_api_base: AnyHttpUrl = Field(
        "https://api.webflow.com/v2/", description="Webflow Data API root"
    )
    webflow_http_timeout: float = Field(
        15.0, gt=0, description="Per-request timeout in seconds"
    )

    model_config = _SETTINGS_CONFIG


@lru_cache
def get_runtime_settings() -> RuntimeSettings:
    """Return cached runtime settings (logging, transport)."""

    return RuntimeSettings()


def load_settings() -> WebflowSettings:
    """Build WebflowSettings, failing with StartupError when the token is unusable."""

    try:
        settings = WebflowSettings()  # type: ignore[call-arg]
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise StartupError(
            f"Invalid configuration ({', '.join(fields) or 'unknown field'}); "
            "WEBFLOW_API_TOKEN must be defined"
        ) from exc

    if not settings.webflow_api_token.get_secret_value().strip():
        raise StartupError("WEBFLOW_API_TOKEN is not defined")
    return settings


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
