"""Sequential scaffolding pipeline with rollback.

State machine::

    init -> guarded -> fetched -> extracted -> reconciled -> patched -> done
       \\________\\_________\\__________\\____________\\__________> failed | cancelled

Each transition performs exactly one component call. The orchestrator is the
only component that deletes the target directory, and only when it created
the directory during this run.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from zapforge.contracts.config import ScaffoldConfig
from zapforge.contracts.errors import ErrorKind, ScaffoldError, ScaffoldFailure
from zapforge.contracts.package_manager import PackageManager
from zapforge.contracts.prompt import PackageManagerPrompt
from zapforge.contracts.results import PromptStatus, ScaffoldResult
from zapforge.contracts.state import ScaffoldStage, ScaffoldState, TargetState
from zapforge.core.extract import ArchiveExtractor
from zapforge.core.fetch import ArchiveFetcher
from zapforge.core.guard import PathGuard
from zapforge.core.manifest import ManifestPatcher
from zapforge.core.progress import NullScaffoldProgress, ScaffoldProgress
from zapforge.core.reconcile import TreeReconciler

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Unexpected errors inside a stage are reported with the stage's kind.
_STAGE_KINDS: dict[ScaffoldStage, ErrorKind] = {
    ScaffoldStage.CREATE: ErrorKind.PERMISSION,
    ScaffoldStage.FETCH: ErrorKind.NETWORK,
    ScaffoldStage.EXTRACT: ErrorKind.EXTRACTION,
    ScaffoldStage.RECONCILE: ErrorKind.RECONCILIATION,
    ScaffoldStage.PATCH: ErrorKind.MANIFEST,
}

_PHASE_LABELS: dict[ScaffoldStage, str] = {
    ScaffoldStage.GUARD: "Guard",
    ScaffoldStage.CREATE: "Create",
    ScaffoldStage.FETCH: "Fetch",
    ScaffoldStage.EXTRACT: "Extract",
    ScaffoldStage.RECONCILE: "Reconcile",
    ScaffoldStage.PATCH: "Patch",
}


class _CancelRequested(Exception):
    """Raised internally when the cancel hook fires between stages."""


class ScaffoldOrchestrator:
    """Drive the pipeline and turn every outcome into a :class:`ScaffoldResult`.

    Pipeline failures are never raised to the caller; they come back as a
    ``failed`` or ``cancelled`` result carrying a :class:`ScaffoldFailure`.

    Concurrent runs against the same target are not supported: the guard does
    no locking, so callers must serialize invocations per path.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        *,
        guard: PathGuard | None = None,
        fetcher: ArchiveFetcher | None = None,
        extractor: ArchiveExtractor | None = None,
        reconciler: TreeReconciler | None = None,
        patcher: ManifestPatcher | None = None,
        prompt: PackageManagerPrompt | None = None,
        progress: ScaffoldProgress | None = None,
        cancel_requested: Callable[[], bool] | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self._guard = guard or PathGuard(marker_files=self.config.marker_files)
        self._fetcher = fetcher or ArchiveFetcher(archive_name=self.config.archive_name, timeout=self.config.timeout)
        self._extractor = extractor or ArchiveExtractor()
        self._reconciler = reconciler or TreeReconciler(
            nested_dir=self.config.nested_dir,
            staging_dir=self.config.staging_dir,
            lock_files=self.config.lock_files,
        )
        self._patcher = patcher or ManifestPatcher(
            manifest_name=self.config.manifest_name,
            strip_fields=self.config.manifest_strip_fields,
        )
        self._prompt = prompt
        self._progress = progress or NullScaffoldProgress()
        self._cancel_requested = cancel_requested or (lambda: False)
        self.state = ScaffoldState.INIT

    def run(self, target: str | Path, *, package_manager: PackageManager | str | None = None) -> ScaffoldResult:
        target = Path(target).expanduser().resolve()
        self.state = ScaffoldState.INIT

        try:
            resolved_pm = self._resolve_package_manager(package_manager)
        except ScaffoldError as exc:
            return self._fail(target, exc.with_stage(ScaffoldStage.PROMPT), created=False)
        if resolved_pm is None:
            logger.info("scaffolding cancelled before start")
            return self._finish(ScaffoldState.CANCELLED, target, created=False, rolled_back=False)

        self._progress.phase_start(_PHASE_LABELS[ScaffoldStage.GUARD])
        outcome = self._guard.check(target)
        if outcome.ok and outcome.state == TargetState.OCCUPIED_FOREIGN:
            outcome = outcome.model_copy(
                update={
                    "failure": ScaffoldFailure(
                        kind=ErrorKind.TARGET_OCCUPIED,
                        message=f"{target} is not empty; choose a new or empty directory",
                        stage=ScaffoldStage.GUARD,
                        path=str(target),
                    )
                }
            )
        if outcome.failure is not None:
            error = ScaffoldError(
                outcome.failure.kind, outcome.failure.message, stage=ScaffoldStage.GUARD, path=outcome.failure.path
            )
            self._progress.phase_error(_PHASE_LABELS[ScaffoldStage.GUARD], error)
            return self._fail(target, error, created=False, package_manager=resolved_pm)
        self._progress.phase_done(_PHASE_LABELS[ScaffoldStage.GUARD])
        self.state = ScaffoldState.GUARDED

        created = False
        try:
            if outcome.state == TargetState.ABSENT:
                self._stage(ScaffoldStage.CREATE, lambda: target.mkdir())
                created = True

            archive = self._stage(ScaffoldStage.FETCH, lambda: self._fetcher.fetch(self.config.template_url, target))
            self.state = ScaffoldState.FETCHED

            self._stage(ScaffoldStage.EXTRACT, lambda: self._extractor.extract(archive, target))
            self.state = ScaffoldState.EXTRACTED

            self._stage(ScaffoldStage.RECONCILE, lambda: self._reconciler.reconcile(target))
            self.state = ScaffoldState.RECONCILED

            self._stage(ScaffoldStage.PATCH, lambda: self._patcher.patch(target))
            self.state = ScaffoldState.PATCHED
        except ScaffoldError as exc:
            return self._fail(target, exc, created=created, package_manager=resolved_pm)
        except (KeyboardInterrupt, _CancelRequested):
            logger.info("scaffolding cancelled in state %s", self.state.value)
            rolled_back = self._rollback(target, created)
            return self._finish(
                ScaffoldState.CANCELLED, target, created=created, rolled_back=rolled_back, package_manager=resolved_pm
            )

        files = _list_files(target)
        logger.debug("scaffolded %s with %d files", target, len(files))
        return self._finish(
            ScaffoldState.DONE,
            target,
            created=created,
            rolled_back=False,
            package_manager=resolved_pm,
            files_written=files,
        )

    def _resolve_package_manager(self, preference: PackageManager | str | None) -> PackageManager | None:
        if preference is not None:
            try:
                return PackageManager(preference)
            except ValueError as exc:
                choices = ", ".join(pm.value for pm in PackageManager)
                raise ScaffoldError(
                    ErrorKind.VALIDATION, f"unsupported package manager {preference!r} (choose from {choices})"
                ) from exc
        if self._prompt is None:
            return PackageManager.NPM

        try:
            outcome = self._prompt.select()
        except KeyboardInterrupt:
            return None
        if outcome.status == PromptStatus.CANCELLED:
            return None
        if outcome.status == PromptStatus.ERROR or outcome.package_manager is None:
            raise ScaffoldError(ErrorKind.PROMPT, outcome.message or "package manager selection failed")
        return outcome.package_manager

    def _stage(self, stage: ScaffoldStage, step: Callable[[], T]) -> T:
        if self._cancel_requested():
            raise _CancelRequested
        phase = _PHASE_LABELS[stage]
        self._progress.phase_start(phase)
        try:
            result = step()
        except ScaffoldError as exc:
            self._progress.phase_error(phase, exc)
            raise exc.with_stage(stage) from exc.__cause__
        except KeyboardInterrupt as exc:
            self._progress.phase_error(phase, exc)
            raise
        except OSError as exc:
            self._progress.phase_error(phase, exc)
            raise ScaffoldError(_STAGE_KINDS[stage], str(exc), stage=stage, path=exc.filename) from exc
        except Exception as exc:
            self._progress.phase_error(phase, exc)
            raise ScaffoldError(
                _STAGE_KINDS[stage], f"unexpected {type(exc).__name__}: {exc}", stage=stage
            ) from exc
        self._progress.phase_done(phase)
        return result

    def _fail(
        self,
        target: Path,
        error: ScaffoldError,
        *,
        created: bool,
        package_manager: PackageManager | None = None,
    ) -> ScaffoldResult:
        failure = error.failure
        logger.error("scaffolding failed: %s", failure.describe())
        rolled_back = self._rollback(target, created)
        return self._finish(
            ScaffoldState.FAILED,
            target,
            created=created,
            rolled_back=rolled_back,
            package_manager=package_manager,
            failure=failure,
        )

    def _rollback(self, target: Path, created: bool) -> bool:
        if not created:
            if target.exists():
                logger.debug("leaving %s in place; it existed before this run", target)
            return False
        try:
            shutil.rmtree(target)
        except FileNotFoundError:
            return True
        except OSError as exc:
            logger.warning("rollback could not remove %s: %s", target, exc)
            return False
        logger.debug("rolled back %s", target)
        return True

    def _finish(
        self,
        state: ScaffoldState,
        target: Path,
        *,
        created: bool,
        rolled_back: bool,
        package_manager: PackageManager | None = None,
        failure: ScaffoldFailure | None = None,
        files_written: list[str] | None = None,
    ) -> ScaffoldResult:
        self.state = state
        return ScaffoldResult(
            state=state,
            project_path=target,
            files_written=files_written or [],
            package_manager=package_manager,
            failure=failure,
            created_target=created,
            rolled_back=rolled_back,
        )


def _list_files(root: Path) -> list[str]:
    return sorted(path.relative_to(root).as_posix() for path in root.rglob("*") if path.is_file())
