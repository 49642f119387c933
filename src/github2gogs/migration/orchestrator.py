"""Migration orchestrator for the fetch, reconcile and migrate pipeline."""

from datetime import datetime
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from ..api.github import GitHubClient
from ..api.gogs import GogsClient
from .reconciler import reconcile


class MigrationSummary(BaseModel):
    """Summary of a migration run."""

    source_total: int = Field(..., description='Repositories listed on the source')
    to_migrate: int = Field(..., description='Repositories selected for migration')
    conflict_count: int = Field(..., description='Repositories skipped on conflict')
    already_migrated_count: int = Field(
        ..., description='Repositories already mirrored'
    )
    migrated: List[str] = Field(
        default_factory=list, description='Repositories migrated in this run'
    )
    dry_run: bool = Field(default=False, description='No migrations were issued')

    started_at: datetime = Field(..., description='Run start time')
    completed_at: Optional[datetime] = Field(
        default=None, description='Run completion time'
    )


class MigrationOrchestrator:
    """Runs the migration pipeline strictly in order, stopping at the first error."""

    def __init__(
        self,
        source_client: GitHubClient,
        destination_client: GogsClient,
        console: Optional[Console] = None,
        dry_run: bool = False,
    ):
        """Initialize migration orchestrator.

        Args:
            source_client: Client listing source repositories
            destination_client: Client for the destination instance
            console: Console receiving progress lines
            dry_run: Report what would be migrated without migrating
        """
        self.source_client = source_client
        self.destination_client = destination_client
        self.console = console or Console(soft_wrap=True)
        self.dry_run = dry_run
        self.logger = logger.bind(component='MigrationOrchestrator')

    def run(self, username: str) -> MigrationSummary:
        """Mirror every missing repository of ``username`` to the destination.

        Args:
            username: Source user whose repositories are migrated

        Returns:
            Migration summary

        Raises:
            APIError: The first failure; earlier migrations are not rolled back
        """
        started_at = datetime.now()

        source_repos = self.source_client.fetch_all(username)
        destination_repos = self.destination_client.fetch_all()

        result = reconcile(source_repos, destination_repos)
        self.console.print(
            f'{len(result.to_migrate)} repos need to migrate, '
            f'{result.conflict_count} conflict repos ignored, '
            f'{result.already_migrated_count} repos already exist',
            soft_wrap=True,
        )
        for name in result.conflicts:
            self.logger.warning(f'Skipping {name}: a non-mirror repository exists')

        summary = MigrationSummary(
            source_total=len(source_repos),
            to_migrate=len(result.to_migrate),
            conflict_count=result.conflict_count,
            already_migrated_count=result.already_migrated_count,
            dry_run=self.dry_run,
            started_at=started_at,
        )

        for repo in result.to_migrate:
            if self.dry_run:
                self.console.print(
                    f'would migrate {escape(repo.name)}', soft_wrap=True
                )
                continue

            self.console.print(f'migrating {escape(repo.name)}', soft_wrap=True)
            self.destination_client.migrate(repo)
            summary.migrated.append(repo.name)

        summary.completed_at = datetime.now()
        self.logger.info(
            f'Run finished: {len(summary.migrated)} migrated, '
            f'{summary.conflict_count} conflicts, '
            f'{summary.already_migrated_count} already migrated'
        )
        return summary
