"""Failure taxonomy for the scaffolding pipeline.

Every failure is a single :class:`ScaffoldError` carrying a
:class:`ScaffoldFailure` value. Callers branch on ``failure.kind`` instead of
catching a hierarchy of subclasses.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from zapforge.contracts.state import ScaffoldStage


class ErrorKind(StrEnum):
    ALREADY_SCAFFOLDED = "already_scaffolded"
    PERMISSION = "permission"
    NETWORK = "network"
    EXTRACTION = "extraction"
    RECONCILIATION = "reconciliation"
    MANIFEST = "manifest"
    VALIDATION = "validation"
    PROMPT = "prompt"
    CONFIG = "config"
    TARGET_OCCUPIED = "target_occupied"


class ScaffoldFailure(BaseModel):
    """Tagged description of why a step failed."""

    kind: ErrorKind
    message: str
    stage: ScaffoldStage | None = None
    path: str | None = None

    model_config = {"frozen": True}

    def describe(self) -> str:
        prefix = f"[{self.stage.value}] " if self.stage is not None else ""
        return f"{prefix}{self.message}"


class ScaffoldError(Exception):
    """Raised by pipeline components; carries a :class:`ScaffoldFailure`."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        stage: ScaffoldStage | None = None,
        path: object | None = None,
    ) -> None:
        super().__init__(message)
        self.failure = ScaffoldFailure(
            kind=kind,
            message=message,
            stage=stage,
            path=str(path) if path is not None else None,
        )

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    def with_stage(self, stage: ScaffoldStage) -> ScaffoldError:
        """Return a copy of this error tagged with *stage* (keeps an existing tag)."""
        if self.failure.stage is not None:
            return self
        tagged = ScaffoldError(self.failure.kind, self.failure.message, stage=stage, path=self.failure.path)
        tagged.__cause__ = self.__cause__
        return tagged
