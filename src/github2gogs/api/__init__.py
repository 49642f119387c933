"""HTTP clients for the source and destination services."""

from .client import APIClient
from .exceptions import APIError, DecodeError, FetchError, MigrateError
from .github import GitHubClient
from .gogs import GogsClient

__all__ = [
    'APIClient',
    'APIError',
    'DecodeError',
    'FetchError',
    'MigrateError',
    'GitHubClient',
    'GogsClient',
]
