"""GitHub public repository listing."""

from typing import List

from pydantic import ValidationError

from ..models.repository import SourceRepository
from .client import APIClient
from .exceptions import DecodeError

GITHUB_API_URL = 'https://api.github.com'


class GitHubClient(APIClient):
    """Unauthenticated client for GitHub's public repository listing."""

    def __init__(self, api_url: str = GITHUB_API_URL, per_page: int = 50):
        """Initialize GitHub client.

        Args:
            api_url: GitHub API root
            per_page: Page size; a shorter page ends pagination
        """
        super().__init__(api_url)
        self.per_page = per_page

    def fetch_all(self, username: str) -> List[SourceRepository]:
        """Fetch every public repository of a user, page by page.

        Args:
            username: GitHub user name

        Returns:
            All repositories, in the order GitHub listed them

        Raises:
            FetchError: On any non-200 page or network error
            DecodeError: If a page is not a list of repositories
        """
        repos: List[SourceRepository] = []
        page = 1

        while True:
            items = self.get(
                f'/users/{username}/repos',
                params={'page': page, 'per_page': self.per_page},
            )
            if not isinstance(items, list):
                raise DecodeError(f'Expected a list of repositories on page {page}')

            try:
                repos.extend(SourceRepository(**item) for item in items)
            except (TypeError, ValidationError) as e:
                raise DecodeError(f'Invalid repository data on page {page}: {e}')

            if len(items) < self.per_page:
                break

            page += 1

        self.logger.info(f'Retrieved {len(repos)} repositories for {username}')
        return repos
