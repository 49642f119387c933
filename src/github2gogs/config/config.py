"""Configuration management for github2gogs."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, validator

GITHUB_MAX_PER_PAGE = 100


def _validate_http_url(v: str) -> str:
    if not v.startswith(('http://', 'https://')):
        raise ValueError('URL must start with http:// or https://')
    return v.rstrip('/')


class SourceConfig(BaseModel):
    """Configuration for the GitHub source."""

    username: Optional[str] = Field(
        default=None, description='GitHub user whose repositories are migrated'
    )
    api_url: str = Field(
        default='https://api.github.com', description='GitHub API root URL'
    )
    per_page: int = Field(default=50, description='Repositories per listing page')

    @validator('api_url')
    def validate_api_url(cls, v):
        """Validate GitHub API URL format."""
        return _validate_http_url(v)

    @validator('per_page')
    def validate_per_page(cls, v):
        """GitHub never returns more than 100 items per page."""
        if not 0 < v <= GITHUB_MAX_PER_PAGE:
            raise ValueError(
                f'per_page must be between 1 and {GITHUB_MAX_PER_PAGE}'
            )
        return v


class DestinationConfig(BaseModel):
    """Configuration for the Gogs destination."""

    url: Optional[str] = Field(default=None, description='Gogs instance URL')
    token: str = Field(default='', description='Personal access token')
    insecure: bool = Field(
        default=False, description='Skip TLS certificate verification'
    )

    @validator('url')
    def validate_url(cls, v):
        """Validate Gogs URL format."""
        if v is None:
            return v
        return _validate_http_url(v)

    @validator('token', pre=True)
    def empty_token(cls, v):
        """Treat a missing token as empty."""
        return v or ''


class MigrationConfig(BaseModel):
    """Migration-specific configuration."""

    dry_run: bool = Field(default=False, description='Perform dry run without changes')


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default='INFO', description='Log level')
    file: Optional[str] = Field(default=None, description='Log file path')
    format: Optional[str] = Field(default=None, description='Log format')

    @validator('level')
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f'Log level must be one of: {valid_levels}')
        return v.upper()


class Config(BaseModel):
    """Main configuration class for github2gogs."""

    source: SourceConfig = Field(
        default_factory=SourceConfig, description='GitHub source'
    )
    destination: DestinationConfig = Field(
        default_factory=DestinationConfig, description='Gogs destination'
    )
    migration: MigrationConfig = Field(
        default_factory=MigrationConfig, description='Migration settings'
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description='Logging settings'
    )

    class Config:
        """Pydantic configuration."""

        extra = 'forbid'  # Don't allow extra fields

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """Load configuration from YAML file."""
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)
