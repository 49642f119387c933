"""Configuration models."""

from .config import (
    Config,
    DestinationConfig,
    LoggingConfig,
    MigrationConfig,
    SourceConfig,
)

__all__ = [
    'Config',
    'SourceConfig',
    'DestinationConfig',
    'MigrationConfig',
    'LoggingConfig',
]
