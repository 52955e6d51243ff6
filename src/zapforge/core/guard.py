"""Read-only precondition checks on the target directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from zapforge.contracts.errors import ErrorKind, ScaffoldFailure
from zapforge.contracts.results import GuardOutcome
from zapforge.contracts.state import ScaffoldStage, TargetState

logger = logging.getLogger(__name__)

_WRITABLE = os.W_OK | os.X_OK


class PathGuard:
    """Classify a target directory and refuse double provisioning.

    The check performs no locking: two processes may both pass it before
    either writes a marker file. Callers serialize invocations per path.
    """

    def __init__(self, *, marker_files: Iterable[str]) -> None:
        self._marker_files = tuple(marker_files)

    def check(self, target: Path) -> GuardOutcome:
        target = Path(target)

        if not target.exists():
            parent = target.parent
            if not parent.is_dir():
                return self._fail(
                    TargetState.ABSENT,
                    ErrorKind.PERMISSION,
                    f"cannot create {target}: parent directory {parent} does not exist",
                    target,
                )
            if not os.access(parent, _WRITABLE):
                return self._fail(
                    TargetState.ABSENT,
                    ErrorKind.PERMISSION,
                    f"cannot create {target}: parent directory {parent} is not writable",
                    target,
                )
            logger.debug("target %s is absent and creatable", target)
            return GuardOutcome(state=TargetState.ABSENT)

        if not target.is_dir():
            return self._fail(
                TargetState.OCCUPIED_FOREIGN,
                ErrorKind.PERMISSION,
                f"{target} exists and is not a directory",
                target,
            )

        markers = [name for name in self._marker_files if (target / name).exists()]
        if markers:
            return self._fail(
                TargetState.OCCUPIED_SCAFFOLD,
                ErrorKind.ALREADY_SCAFFOLDED,
                f"{target} is already a scaffolded project (found {', '.join(markers)})",
                target,
            )

        try:
            occupied = any(target.iterdir())
        except OSError as exc:
            return self._fail(
                TargetState.OCCUPIED_FOREIGN, ErrorKind.PERMISSION, f"cannot read {target}: {exc}", target
            )
        state = TargetState.OCCUPIED_FOREIGN if occupied else TargetState.EMPTY
        if not os.access(target, _WRITABLE):
            return self._fail(state, ErrorKind.PERMISSION, f"{target} is not writable", target)

        logger.debug("target %s classified as %s", target, state.value)
        return GuardOutcome(state=state)

    @staticmethod
    def _fail(state: TargetState, kind: ErrorKind, message: str, target: Path) -> GuardOutcome:
        failure = ScaffoldFailure(kind=kind, message=message, stage=ScaffoldStage.GUARD, path=str(target))
        return GuardOutcome(state=state, failure=failure)
