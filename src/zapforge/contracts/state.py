"""Pipeline states and stages shared by results, errors and progress reporting."""

from __future__ import annotations

from enum import StrEnum


class ScaffoldState(StrEnum):
    INIT = "init"
    GUARDED = "guarded"
    FETCHED = "fetched"
    EXTRACTED = "extracted"
    RECONCILED = "reconciled"
    PATCHED = "patched"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ScaffoldStage(StrEnum):
    PROMPT = "prompt"
    GUARD = "guard"
    CREATE = "create"
    FETCH = "fetch"
    EXTRACT = "extract"
    RECONCILE = "reconcile"
    PATCH = "patch"


class TargetState(StrEnum):
    ABSENT = "absent"
    EMPTY = "empty"
    OCCUPIED_FOREIGN = "occupied_foreign"
    OCCUPIED_SCAFFOLD = "occupied_scaffold"
