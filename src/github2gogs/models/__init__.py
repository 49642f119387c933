"""Data models for source and destination repositories."""

from .repository import DestinationRepository, MigrateRequest, SourceRepository

__all__ = [
    'SourceRepository',
    'DestinationRepository',
    'MigrateRequest',
]
