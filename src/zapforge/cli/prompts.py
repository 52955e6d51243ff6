"""Questionary-backed interactive prompts."""

from __future__ import annotations

from pathlib import Path

import questionary

from zapforge.contracts.errors import ScaffoldError
from zapforge.contracts.package_manager import PackageManager
from zapforge.contracts.results import PromptOutcome
from zapforge.core.naming import DEFAULT_PROJECT_NAME, resolve_target, validate_project_name


class QuestionaryPackageManagerPrompt:
    """Ask which package manager to use; never raises."""

    def __init__(self, message: str = "Which package manager do you want to use?") -> None:
        self._message = message

    def select(self) -> PromptOutcome:
        try:
            answer = questionary.select(
                self._message,
                choices=[pm.value for pm in PackageManager],
                default=PackageManager.NPM.value,
            ).ask()
        except KeyboardInterrupt:
            return PromptOutcome.cancelled()
        except Exception as exc:  # prompt_toolkit raises assorted errors without a usable terminal
            return PromptOutcome.error(f"package manager prompt failed: {exc}")
        if answer is None:
            return PromptOutcome.cancelled()
        return PromptOutcome.selected(answer)


def validate_name_answer(value: str, directory: str | Path | None = None) -> bool | str:
    try:
        name = validate_project_name(value)
    except ScaffoldError:
        return "Project name can only contain letters, numbers, hyphens, and underscores."
    if resolve_target(name, directory).exists():
        return f"Directory '{name}' already exists. Please choose a different name."
    return True


def ask_project_name(directory: str | Path | None = None) -> str | None:
    """Prompt for a project name; ``None`` means the user cancelled."""
    try:
        answer = questionary.text(
            "What's the name of your project?",
            default=DEFAULT_PROJECT_NAME,
            validate=lambda value: validate_name_answer(value, directory),
        ).ask()
    except KeyboardInterrupt:
        return None
    return answer.strip() if answer is not None else None
