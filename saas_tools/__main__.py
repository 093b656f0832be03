#!/usr/bin/env python3
"""
Unified CLI for the saas code generators.

Usage:
    saas <command> [options]
    python -m saas_tools <command> [options]

Commands:
    gen         Generate Flutter/Dart boilerplate (drift, riverpod, freezed, ...)
    supabase    Generate Supabase table migrations and RLS policies

Examples:
    saas gen drift table Items --columns "id:int:pk:autoincrement,title:text"
    saas gen riverpod async-notifier TodoList --state "List<Todo>"
    saas gen powersync rules todos --user-column owner_id
    saas supabase create-table recipes --columns "id:uuid:pk,title:text"
    saas supabase rls recipes --policy user-owned --column user_id
"""

from __future__ import annotations

import argparse
import importlib
import sys
from typing import Callable

from saas_tools import __version__
from saas_tools.shared import ExitCode

# Generator name -> (subpackage, description)
GENERATORS: dict[str, tuple[str, str]] = {
    "riverpod": ("riverpod_codegen", "Generate Riverpod providers"),
    "drift": ("drift_codegen", "Generate Drift tables, DAOs and migrations"),
    "gorouter": ("gorouter_codegen", "Generate GoRouter routes"),
    "powersync": ("powersync_codegen", "Generate PowerSync sync rules and schemas"),
    "freezed": ("freezed_codegen", "Generate Freezed models"),
    "repository": ("repository_codegen", "Generate repository pattern"),
}


def _run(main_fn: Callable[[list[str]], None], args: list[str]) -> int:
    try:
        main_fn(args)
        return ExitCode.SUCCESS
    except SystemExit as e:
        if e.code is None:
            return ExitCode.SUCCESS
        return e.code if isinstance(e.code, int) else ExitCode.GENERAL_ERROR


def cmd_gen(args: list[str]) -> int:
    """Run one of the boilerplate generators."""
    parser = argparse.ArgumentParser(
        prog="saas gen",
        description="Generate boilerplate code for Flutter/Dart patterns",
        epilog="\n".join(f"  {name:12} {desc}" for name, (_, desc) in GENERATORS.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "generator",
        choices=list(GENERATORS),
        help="Which generator to run",
    )
    parser.add_argument(
        "extra_args",
        nargs=argparse.REMAINDER,
        help="Arguments for the generator",
    )

    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else ExitCode.USAGE_ERROR

    package, _ = GENERATORS[parsed.generator]
    module = importlib.import_module(f"saas_tools.{package}")
    return _run(module.main, parsed.extra_args)


def cmd_supabase(args: list[str]) -> int:
    """Generate Supabase SQL."""
    from saas_tools import supabase_codegen
    return _run(supabase_codegen.main, args)


COMMANDS = {
    "gen": (cmd_gen, "Generate Flutter/Dart boilerplate code"),
    "supabase": (cmd_supabase, "Generate Supabase table migrations and RLS policies"),
}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if not argv or argv[0] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:12} {desc}")
        print("\nUse '<command> --help' for command-specific options.")
        return ExitCode.SUCCESS

    if argv[0] in ("-V", "--version"):
        print(__version__)
        return ExitCode.SUCCESS

    command, args = argv[0], argv[1:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(f"Available commands: {', '.join(COMMANDS)}", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    handler, _ = COMMANDS[command]
    return handler(args)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
