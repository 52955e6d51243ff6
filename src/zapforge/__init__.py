"""Public API surface for zapforge."""

__version__ = "0.1.0"

import logging

from zapforge.contracts import (
    ErrorKind,
    GuardOutcome,
    PackageManager,
    PackageManagerPrompt,
    PromptOutcome,
    ReconciliationPlan,
    ScaffoldConfig,
    ScaffoldError,
    ScaffoldFailure,
    ScaffoldResult,
    ScaffoldStage,
    ScaffoldState,
    TargetState,
)
from zapforge.core import (
    ArchiveExtractor,
    ArchiveFetcher,
    ManifestPatcher,
    PathGuard,
    ScaffoldOrchestrator,
    ScaffoldProgress,
    TreeReconciler,
    load_config,
    resolve_target,
    validate_project_name,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArchiveExtractor",
    "ArchiveFetcher",
    "ErrorKind",
    "GuardOutcome",
    "ManifestPatcher",
    "PackageManager",
    "PackageManagerPrompt",
    "PathGuard",
    "PromptOutcome",
    "ReconciliationPlan",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldFailure",
    "ScaffoldOrchestrator",
    "ScaffoldProgress",
    "ScaffoldResult",
    "ScaffoldStage",
    "ScaffoldState",
    "TargetState",
    "__version__",
    "load_config",
    "resolve_target",
    "validate_project_name",
]
