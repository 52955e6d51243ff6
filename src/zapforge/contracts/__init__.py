"""Typed contracts shared by the pipeline core and the CLI."""

from zapforge.contracts.config import DEFAULT_TEMPLATE_URL, ScaffoldConfig
from zapforge.contracts.errors import ErrorKind, ScaffoldError, ScaffoldFailure
from zapforge.contracts.package_manager import LOCK_FILES, TEMPLATE_MANIFEST_FIELDS, PackageManager
from zapforge.contracts.prompt import PackageManagerPrompt
from zapforge.contracts.results import (
    GuardOutcome,
    PromptOutcome,
    PromptStatus,
    ReconcileMove,
    ReconciliationPlan,
    ScaffoldResult,
)
from zapforge.contracts.state import ScaffoldStage, ScaffoldState, TargetState

__all__ = [
    "DEFAULT_TEMPLATE_URL",
    "ErrorKind",
    "GuardOutcome",
    "LOCK_FILES",
    "PackageManager",
    "PackageManagerPrompt",
    "PromptOutcome",
    "PromptStatus",
    "ReconcileMove",
    "ReconciliationPlan",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldFailure",
    "ScaffoldResult",
    "ScaffoldStage",
    "ScaffoldState",
    "TEMPLATE_MANIFEST_FIELDS",
    "TargetState",
]
