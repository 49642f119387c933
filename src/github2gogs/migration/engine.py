"""Migration engine - main entry point for migration operations."""

from typing import Optional

from loguru import logger
from rich.console import Console

from ..api.github import GitHubClient
from ..api.gogs import GogsClient
from ..config.config import Config
from .orchestrator import MigrationOrchestrator, MigrationSummary


class MigrationEngine:
    """Builds the clients from configuration and runs one migration."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize migration engine.

        Args:
            config: Migration configuration
            console: Console receiving progress lines
        """
        if not config.source.username:
            raise ValueError('Source username is required')
        if not config.destination.url:
            raise ValueError('Destination URL is required')

        self.config = config
        self.logger = logger.bind(component='MigrationEngine')

        self.source_client = GitHubClient(
            api_url=config.source.api_url, per_page=config.source.per_page
        )
        self.destination_client = GogsClient(
            config.destination.url,
            token=config.destination.token,
            verify_ssl=not config.destination.insecure,
        )

        self.orchestrator = MigrationOrchestrator(
            self.source_client,
            self.destination_client,
            console=console,
            dry_run=config.migration.dry_run,
        )

    def migrate(self) -> MigrationSummary:
        """Execute the migration.

        Returns:
            Migration summary
        """
        username = self.config.source.username
        self.logger.info(
            f'Migrating repositories of {username} to {self.config.destination.url}'
        )

        try:
            return self.orchestrator.run(username)
        except Exception as e:
            self.logger.error(f'Migration failed: {e}')
            raise
        finally:
            self.source_client.close()
            self.destination_client.close()
