"""Gogs API client used as the migration destination."""

from typing import List, Optional

from pydantic import ValidationError

from ..models.repository import DestinationRepository, MigrateRequest, SourceRepository
from .client import APIClient
from .exceptions import DecodeError, MigrateError


class GogsClient(APIClient):
    """Gogs client bound to the user that owns the access token."""

    def __init__(self, url: str, token: Optional[str] = None, verify_ssl: bool = True):
        """Initialize Gogs client.

        Args:
            url: Gogs instance URL
            token: Personal access token; no Authorization header when empty
            verify_ssl: Whether to validate TLS certificates
        """
        super().__init__(url.rstrip('/') + '/api/v1', token=token, verify_ssl=verify_ssl)
        self.url = url.rstrip('/')
        self.user_id: Optional[int] = None
        self.user_id_fetched = False

        if not verify_ssl:
            self.logger.warning(
                f'TLS certificate verification is disabled for {self.url}'
            )

    def fetch_all(self) -> List[DestinationRepository]:
        """Fetch repositories of the authenticated user.

        Raises:
            FetchError: On non-200 response or network error
            DecodeError: If the response is not a list of repositories
        """
        items = self.get('/user/repos')
        if not isinstance(items, list):
            raise DecodeError('Expected a list of repositories')

        try:
            repos = [DestinationRepository(**item) for item in items]
        except (TypeError, ValidationError) as e:
            raise DecodeError(f'Invalid repository data: {e}')

        self.logger.info(f'Retrieved {len(repos)} repositories from {self.url}')
        return repos

    def resolve_user_id(self) -> int:
        """Return the authenticated user's ID, fetching it on first use only."""
        if self.user_id_fetched:
            return self.user_id

        data = self.get('/user')
        try:
            user_id = int(data['id'])
        except (KeyError, TypeError, ValueError):
            raise DecodeError('User profile has no numeric id')

        self.user_id = user_id
        self.user_id_fetched = True
        self.logger.debug(f'Resolved user id {user_id}')
        return user_id

    def migrate(self, repo: SourceRepository) -> None:
        """Create a mirror of a source repository on the Gogs instance.

        Args:
            repo: Repository to mirror

        Raises:
            FetchError: If the user id cannot be resolved
            MigrateError: If Gogs does not answer 201 Created
        """
        uid = self.resolve_user_id()
        payload = MigrateRequest.from_source(repo, uid)

        self._request(
            'POST',
            '/repos/migrate',
            expected_status=201,
            error_class=MigrateError,
            json=payload.dict(),
            headers={'Content-Type': 'application/json'},
        )
        self.logger.info(f'Migrated {repo.name} from {repo.url}')
