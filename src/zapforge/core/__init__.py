"""Scaffolding pipeline components."""

from zapforge.core.config import load_config
from zapforge.core.extract import ArchiveExtractor
from zapforge.core.fetch import ArchiveFetcher
from zapforge.core.guard import PathGuard
from zapforge.core.manifest import ManifestPatcher
from zapforge.core.naming import resolve_target, validate_project_name
from zapforge.core.orchestrator import ScaffoldOrchestrator
from zapforge.core.progress import NullScaffoldProgress, ScaffoldProgress
from zapforge.core.reconcile import TreeReconciler

__all__ = [
    "ArchiveExtractor",
    "ArchiveFetcher",
    "ManifestPatcher",
    "NullScaffoldProgress",
    "PathGuard",
    "ScaffoldOrchestrator",
    "ScaffoldProgress",
    "TreeReconciler",
    "load_config",
    "resolve_target",
    "validate_project_name",
]
