"""Result contracts returned to callers of the pipeline."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

from zapforge.contracts.errors import ScaffoldFailure
from zapforge.contracts.package_manager import PackageManager
from zapforge.contracts.state import ScaffoldState, TargetState


class GuardOutcome(BaseModel):
    state: TargetState
    failure: ScaffoldFailure | None = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.failure is None


class PromptStatus(StrEnum):
    SELECTED = "selected"
    CANCELLED = "cancelled"
    ERROR = "error"


class PromptOutcome(BaseModel):
    status: PromptStatus
    package_manager: PackageManager | None = None
    message: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def selected(cls, package_manager: PackageManager | str) -> PromptOutcome:
        return cls(status=PromptStatus.SELECTED, package_manager=PackageManager(package_manager))

    @classmethod
    def cancelled(cls) -> PromptOutcome:
        return cls(status=PromptStatus.CANCELLED)

    @classmethod
    def error(cls, message: str) -> PromptOutcome:
        return cls(status=PromptStatus.ERROR, message=message)


class ReconcileMove(BaseModel):
    source: str
    destination: str

    model_config = {"frozen": True}


class ReconciliationPlan(BaseModel):
    """Ordered moves and removals performed while flattening the template."""

    moves: list[ReconcileMove] = Field(default_factory=list)
    discarded: list[str] = Field(default_factory=list)
    lock_files_removed: list[str] = Field(default_factory=list)
    nested_found: bool = False


class ScaffoldResult(BaseModel):
    state: ScaffoldState
    project_path: Path
    files_written: list[str] = Field(default_factory=list)
    package_manager: PackageManager | None = None
    failure: ScaffoldFailure | None = None
    created_target: bool = False
    rolled_back: bool = False

    @property
    def ok(self) -> bool:
        return self.state == ScaffoldState.DONE

    @property
    def cancelled(self) -> bool:
        return self.state == ScaffoldState.CANCELLED
