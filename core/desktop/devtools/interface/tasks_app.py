#!/usr/bin/env python3
"""
taskdash: personal task dashboard (CLI + TUI) against a remote task API.

This is a thin facade: parsing lives in cli_parser, behaviour in cli_commands
and tui_app, wiring in services.
"""

import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version

from prompt_toolkit import prompt

from config import get_data_dir
from core.desktop.devtools.interface import cli_commands
from core.desktop.devtools.interface.cli_commands import CliDeps
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.services import build_services
from core.desktop.devtools.interface.tui_app import cmd_tui as _run_tui
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES
from logging_setup import setup_logging


def _read_password(message: str) -> str:
    return prompt(message, is_password=True)


def build_deps(args) -> CliDeps:
    api_url = getattr(args, "api_url_override", None)
    # CLI invocations exit right after the mutation; the refetch would be wasted.
    return CliDeps(
        services_factory=lambda: build_services(api_url, refetch_after_mutation=False),
        translate=translate,
        read_password=_read_password,
    )


def cmd_tui(args) -> int:
    services = build_services(getattr(args, "api_url_override", None))
    try:
        return _run_tui(args, services)
    finally:
        services.close()


def cmd_login(args) -> int:
    return cli_commands.cmd_login(args, build_deps(args))


def cmd_register(args) -> int:
    return cli_commands.cmd_register(args, build_deps(args))


def cmd_logout(args) -> int:
    return cli_commands.cmd_logout(args, build_deps(args))


def cmd_whoami(args) -> int:
    return cli_commands.cmd_whoami(args, build_deps(args))


def cmd_list(args) -> int:
    return cli_commands.cmd_list(args, build_deps(args))


def cmd_create(args) -> int:
    return cli_commands.cmd_create(args, build_deps(args))


def cmd_done(args) -> int:
    return cli_commands.cmd_done(args, build_deps(args))


def cmd_update(args) -> int:
    return cli_commands.cmd_update(args, build_deps(args))


def cmd_delete(args) -> int:
    return cli_commands.cmd_delete(args, build_deps(args))


def cmd_config(args) -> int:
    return cli_commands.cmd_config(args, build_deps(args))


def build_parser():
    """Build CLI argument parser."""
    return build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=DEFAULT_THEME)


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("taskdash"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None) or args.command == "help":
        parser.print_help()
        return 0 if getattr(args, "command", None) == "help" else 1
    setup_logging(log_dir=get_data_dir(), console=args.command != "tui")
    return args.func(args)


__all__ = [
    "main",
    "build_parser",
    "build_deps",
    "cmd_tui",
    "cmd_login",
    "cmd_register",
    "cmd_logout",
    "cmd_whoami",
    "cmd_list",
    "cmd_create",
    "cmd_done",
    "cmd_update",
    "cmd_delete",
    "cmd_config",
]


if __name__ == "__main__":
    sys.exit(main())
