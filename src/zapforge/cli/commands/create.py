"""Create command handler."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from zapforge.cli.common import EXIT_CANCELLED, EXIT_OK, exit_code_for, format_create_summary, format_rollback_note
from zapforge.cli.progress.rich import RichScaffoldProgress
from zapforge.cli.prompts import QuestionaryPackageManagerPrompt, ask_project_name
from zapforge.contracts.config import ScaffoldConfig
from zapforge.contracts.errors import ErrorKind, ScaffoldError
from zapforge.contracts.results import ScaffoldResult
from zapforge.core.config import load_config
from zapforge.core.naming import resolve_target, validate_project_name
from zapforge.core.orchestrator import ScaffoldOrchestrator


def resolve_config(args: argparse.Namespace) -> ScaffoldConfig:
    config = load_config(args.config) if args.config else ScaffoldConfig()
    if args.template_url:
        try:
            config = ScaffoldConfig.model_validate({**config.model_dump(), "template_url": args.template_url})
        except ValidationError as exc:
            raise ScaffoldError(ErrorKind.CONFIG, f"invalid --template-url: {exc}") from exc
    return config


def run_create(args: argparse.Namespace) -> int:
    """Resolve inputs, run the pipeline, and report the outcome."""
    try:
        config = resolve_config(args)
        name = args.name if args.name is not None else ask_project_name(args.directory)
        if name is None:
            print("\nAborted.")
            return EXIT_CANCELLED
        name = validate_project_name(name)
    except ScaffoldError as exc:
        print(f"error: {exc.failure.describe()}", file=sys.stderr)
        return exit_code_for(exc.failure)

    target = resolve_target(name, args.directory)
    prompt = None if args.package_manager else QuestionaryPackageManagerPrompt()

    if sys.stderr.isatty():
        with RichScaffoldProgress() as progress:
            result = ScaffoldOrchestrator(config, prompt=prompt, progress=progress).run(
                target, package_manager=args.package_manager
            )
    else:
        result = ScaffoldOrchestrator(config, prompt=prompt).run(target, package_manager=args.package_manager)

    return report_result(result)


def report_result(result: ScaffoldResult) -> int:
    if result.ok:
        print(format_create_summary(result))
        return EXIT_OK

    note = format_rollback_note(result)
    if result.cancelled:
        print("\nAborted.")
        if note:
            print(note)
        return EXIT_CANCELLED

    assert result.failure is not None
    print(f"error: {result.failure.describe()}", file=sys.stderr)
    if note:
        print(note, file=sys.stderr)
    return exit_code_for(result.failure)


__all__ = ["report_result", "resolve_config", "run_create"]
