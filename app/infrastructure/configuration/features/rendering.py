"""Template rendering and static asset settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings

# app/content: bundled templates, locales and assets
DEFAULT_CONTENT_ROOT = str(Path(__file__).resolve().parents[3] / "content")


class RenderingSettings(FeatureSettings):
    """Template lookup and asset fingerprinting configuration.

    Environment Variables:
        CONTENT_ROOT: Root directory of the file-system content store
            (default: the bundled app/content directory)
        TEMPLATES_DIR: Templates directory inside the content store
            (default: templates)
        ASSETS_DIR: Assets directory inside the content store (default: assets)
        ASSET_MANIFEST: Manifest file name inside ASSETS_DIR, empty string
            disables fingerprinting (default: manifest.json)
        ASSET_PREFIX: Public mount prefix for asset URLs (default: /assets/)
        PARTIAL_EXTENSION: Extension assumed for partial references given
            without one (default: .html)
    """

    CONTENT_ROOT: str = Field(default=DEFAULT_CONTENT_ROOT, alias="CONTENT_ROOT")
    TEMPLATES_DIR: str = Field(default="templates", alias="TEMPLATES_DIR")
    ASSETS_DIR: str = Field(default="assets", alias="ASSETS_DIR")
    ASSET_MANIFEST: Optional[str] = Field(default="manifest.json", alias="ASSET_MANIFEST")
    ASSET_PREFIX: str = Field(default="/assets/", alias="ASSET_PREFIX")
    PARTIAL_EXTENSION: str = Field(default=".html", alias="PARTIAL_EXTENSION")

    @field_validator("ASSET_MANIFEST", mode="before")
    @classmethod
    def empty_manifest_disables(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty manifest name as "no manifest configured"."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("ASSET_PREFIX", mode="before")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure the asset prefix is wrapped in slashes."""
        if not isinstance(v, str):
            return v
        return "/" + v.strip("/") + "/" if v.strip("/") else "/"

    @property
    def manifest_path(self) -> Optional[str]:
        """Manifest location relative to the content store root."""
        if not self.ASSET_MANIFEST:
            return None
        return f"{self.ASSETS_DIR.strip('/')}/{self.ASSET_MANIFEST}"
