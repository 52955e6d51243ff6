"""Command-line interface for zapforge."""

from __future__ import annotations

from zapforge.cli.app import main as main
from zapforge.cli.commands.create import report_result as report_result
from zapforge.cli.commands.create import run_create as run_create
from zapforge.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main", "report_result", "run_create"]
