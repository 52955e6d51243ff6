"""Rich-based scaffolding progress display."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from zapforge.core.progress import ScaffoldProgress


class RichScaffoldProgress(ScaffoldProgress):
    """Live terminal spinners powered by Rich.

    The live display starts on the first phase so that interactive prompts
    asked before the pipeline begins are not drawn over::

        with RichScaffoldProgress() as progress:
            result = ScaffoldOrchestrator(config, progress=progress).run(target)
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Guard": "[cyan]Check target[/]",
        "Create": "[cyan]Create directory[/]",
        "Fetch": "[blue]Download template[/]",
        "Extract": "[blue]Extract template[/]",
        "Reconcile": "[magenta]Organize files[/]",
        "Patch": "[green]Patch package.json[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_ids: dict[str, RichTaskID] = {}
        self._started = False

    def __enter__(self) -> RichScaffoldProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._started:
            self._progress.stop()
            self._started = False

    def phase_start(self, phase: str) -> None:
        if not self._started:
            self._progress.start()
            self._started = True
        label = self._PHASE_LABELS.get(phase, phase)
        self._task_ids[phase] = self._progress.add_task(label, total=None)

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, total=1, completed=1)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        label = self._PHASE_LABELS.get(phase, phase)
        self._progress.update(task_id, description=f"[red]✗[/red] {label}")
        self._progress.stop_task(task_id)
