"""Migration pipeline."""

from .engine import MigrationEngine
from .orchestrator import MigrationOrchestrator, MigrationSummary
from .reconciler import ReconcileResult, reconcile

__all__ = [
    'MigrationEngine',
    'MigrationOrchestrator',
    'MigrationSummary',
    'ReconcileResult',
    'reconcile',
]
