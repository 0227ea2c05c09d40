"""
Configuration settings for Wikilinker
"""
from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'  # Ignore extra fields in .env
    )

    # Entity catalogue and site registry
    catalogue_path: Optional[Path] = Field(
        default=None,
        description="JSON array of linkable entity titles (defaults to data/entities.json)"
    )
    sites_path: Optional[Path] = Field(
        default=None,
        description="JSON object of per-site article selectors (defaults to data/sites.json)"
    )

    # Link output
    wiki_base_url: str = Field(default="https://en.wikipedia.org/wiki/", description="Base URL for entity links")
    link_class: str = Field(default="wikilink", description="CSS class on injected links")

    # Linking behaviour
    default_article_selector: str = Field(
        default="article, main, body",
        description="Comma-separated article-body selectors, tried in order"
    )
    min_text_length: int = Field(default=3, description="Text leaves shorter than this (stripped) are ignored")
    readerable_min_length: int = Field(
        default=140,
        description="Minimum extracted article length for two-phase linking"
    )
    max_html_chars: int = Field(default=2_000_000, description="Largest HTML document accepted by the API")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_reload: bool = Field(default=False, description="Enable auto-reload for development")

    # CORS Settings
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        description="Allowed CORS origins (comma-separated)"
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated origins into a list"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # Rate Limiting
    rate_limit_per_minute: int = Field(default=60, description="Rate limit per minute per IP")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Development
    debug: bool = Field(default=False, description="Debug mode")

    # Paths
    @property
    def project_root(self) -> Path:
        """Get project root directory"""
        return Path(__file__).parent.parent.parent

    @property
    def data_dir(self) -> Path:
        """Get data directory path"""
        return self.project_root / "data"

    @property
    def entities_file(self) -> Path:
        """Resolved catalogue file"""
        return self.catalogue_path or self.data_dir / "entities.json"

    @property
    def sites_file(self) -> Path:
        """Resolved site registry file"""
        return self.sites_path or self.data_dir / "sites.json"


# Create singleton instance
settings = Settings()
