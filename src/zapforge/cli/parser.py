"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from zapforge.contracts.package_manager import PackageManager


def _package_version() -> str:
    try:
        return version("zapforge")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zapforge")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="Scaffold a new project from the template archive")
    create_parser.add_argument("name", nargs="?", default=None, help="Project name (prompted when omitted)")
    create_parser.add_argument(
        "--directory",
        "-d",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    create_parser.add_argument(
        "--package-manager",
        "-p",
        choices=[pm.value for pm in PackageManager],
        default=None,
        help="Package manager to use (prompted when omitted)",
    )
    create_parser.add_argument("--template-url", default=None, help="Override the template tarball URL")
    create_parser.add_argument("--config", default=None, help="Path to a zapforge JSON config file")
    create_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
