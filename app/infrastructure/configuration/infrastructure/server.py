"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        APP_NAME: Application name reported in logs (default: lingua-render)
        ALLOWED_ORIGINS: JSON list of CORS origins
            (default: local development origins)

    Example:
        ```python
        from infrastructure.services import get_settings

        origins = get_settings().server.ALLOWED_ORIGINS
        ```
    """

    APP_NAME: str = Field(default="lingua-render", alias="APP_NAME")
    ALLOWED_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="ALLOWED_ORIGINS",
    )
