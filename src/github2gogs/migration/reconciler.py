"""Decide which source repositories still need a mirror."""

from typing import Dict, List, Sequence

from pydantic import BaseModel, Field

from ..models.repository import DestinationRepository, SourceRepository


class ReconcileResult(BaseModel):
    """Partition of source repositories against the destination."""

    to_migrate: List[SourceRepository] = Field(
        default_factory=list, description='Repositories to migrate, in source order'
    )
    conflicts: List[str] = Field(
        default_factory=list, description='Names taken by non-mirror repositories'
    )
    already_migrated: List[str] = Field(
        default_factory=list, description='Names already mirrored'
    )

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)

    @property
    def already_migrated_count(self) -> int:
        return len(self.already_migrated)


def reconcile(
    source_repos: Sequence[SourceRepository],
    destination_repos: Sequence[DestinationRepository],
) -> ReconcileResult:
    """Split source repositories into migrate, conflict and already migrated.

    A name match against a mirror means the repository was migrated on an
    earlier run. A name match against anything else is a conflict and is
    never overwritten.

    Args:
        source_repos: Repositories listed on the source
        destination_repos: Repositories owned by the destination user

    Returns:
        Reconciliation result
    """
    by_name: Dict[str, DestinationRepository] = {
        repo.name: repo for repo in destination_repos
    }
    result = ReconcileResult()

    for repo in source_repos:
        existing = by_name.get(repo.name)
        if existing is None:
            result.to_migrate.append(repo)
        elif existing.is_mirror:
            result.already_migrated.append(repo.name)
        else:
            result.conflicts.append(repo.name)

    return result
