"""Flatten a two-level template layout into a single project root."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.contracts.package_manager import LOCK_FILES
from zapforge.contracts.results import ReconcileMove, ReconciliationPlan

logger = logging.getLogger(__name__)


class TreeReconciler:
    """Promote the nested subtree to the target root and discard the rest.

    Steps, in order:

    1. create the staging folder under the target;
    2. move every entry of the nested subtree into staging, replacing by name;
    3. delete every other top-level entry of the target;
    4. move every staged entry back to the target root, replacing by name;
    5. delete the staging folder;
    6. remove enumerated lock files from the target root.

    Replacement is last-writer-wins on whole entries; file contents are never
    merged. When the nested subtree is missing only step 6 runs.
    """

    def __init__(
        self,
        *,
        nested_dir: str = "core",
        staging_dir: str = "temp",
        lock_files: Iterable[str] = LOCK_FILES,
    ) -> None:
        self._nested_dir = nested_dir
        self._staging_dir = staging_dir
        self._lock_files = tuple(lock_files)

    def plan(self, target: Path) -> ReconciliationPlan:
        """List the moves that promote the nested subtree, without touching the tree."""
        nested = Path(target) / self._nested_dir
        if not nested.is_dir():
            return ReconciliationPlan()
        moves = [
            ReconcileMove(source=f"{self._nested_dir}/{entry.name}", destination=entry.name)
            for entry in sorted(nested.iterdir(), key=lambda p: p.name)
        ]
        return ReconciliationPlan(moves=moves, nested_found=True)

    def reconcile(self, target: Path) -> ReconciliationPlan:
        target = Path(target)
        staging = target / self._staging_dir
        try:
            plan = self.plan(target)
            if plan.nested_found:
                self._promote_nested(target, staging, plan)
            else:
                logger.debug("no %s/ folder under %s; skipping promotion", self._nested_dir, target)
            plan.lock_files_removed = self._remove_lock_files(target)
        except ScaffoldError:
            shutil.rmtree(staging, ignore_errors=True)
            raise
        except OSError as exc:
            shutil.rmtree(staging, ignore_errors=True)
            raise ScaffoldError(
                ErrorKind.RECONCILIATION, f"cannot reorganize template files: {exc}", path=exc.filename or target
            ) from exc
        return plan

    def _promote_nested(self, target: Path, staging: Path, plan: ReconciliationPlan) -> None:
        nested = target / self._nested_dir
        if any(move.destination == self._staging_dir for move in plan.moves):
            raise ScaffoldError(
                ErrorKind.RECONCILIATION,
                f"{self._nested_dir}/{self._staging_dir} collides with the staging folder",
                path=nested / self._staging_dir,
            )

        staging.mkdir(exist_ok=True)
        for move in plan.moves:
            _replace(nested / move.destination, staging / move.destination)

        for entry in sorted(target.iterdir(), key=lambda p: p.name):
            if entry.name == self._staging_dir:
                continue
            _remove(entry)
            plan.discarded.append(entry.name)

        for entry in sorted(staging.iterdir(), key=lambda p: p.name):
            _replace(entry, target / entry.name)

        _remove(staging)
        logger.debug(
            "promoted %d entries from %s/, discarded %d top-level entries",
            len(plan.moves),
            self._nested_dir,
            len(plan.discarded),
        )

    def _remove_lock_files(self, target: Path) -> list[str]:
        removed: list[str] = []
        for name in self._lock_files:
            path = target / name
            if path.exists() or path.is_symlink():
                _remove(path)
                removed.append(name)
        if removed:
            logger.debug("removed lock files: %s", ", ".join(removed))
        return removed


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _replace(source: Path, destination: Path) -> None:
    if destination.exists() or destination.is_symlink():
        _remove(destination)
    source.replace(destination)
