"""CLI parser construction for taskdash CLI/TUI."""

import argparse
from typing import Any, Mapping


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskdash",
        description="taskdash: personal tasks against a remote task API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.add_argument("--api-url", dest="api_url_override", help="API base URL for this run")

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Start the dashboard TUI")
    tui_p.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="color palette")
    tui_p.set_defaults(func=commands.cmd_tui)

    # auth
    lp = sub.add_parser("login", help="Sign in and store the session")
    lp.add_argument("email")
    lp.add_argument("--password", "-p", help="prompted when omitted")
    lp.set_defaults(func=commands.cmd_login)

    rp = sub.add_parser("register", help="Create an account and store the session")
    rp.add_argument("name")
    rp.add_argument("email")
    rp.add_argument("--password", "-p", help="prompted when omitted")
    rp.set_defaults(func=commands.cmd_register)

    sub.add_parser("logout", help="Forget the stored session").set_defaults(func=commands.cmd_logout)
    sub.add_parser("whoami", help="Show the signed-in user").set_defaults(func=commands.cmd_whoami)

    # list
    ls = sub.add_parser("list", help="List tasks (paginated)")
    ls.add_argument("--page", type=int, default=1)
    ls.add_argument("--search", "-s", default="")
    ls.set_defaults(func=commands.cmd_list)

    # create
    cp = sub.add_parser("create", help="Create a task")
    cp.add_argument("title")
    cp.add_argument("--description", "-d")
    cp.set_defaults(func=commands.cmd_create)

    # done
    dp = sub.add_parser("done", help="Mark a task completed")
    dp.add_argument("task_id")
    dp.add_argument("--undo", action="store_true", help="mark as not completed")
    dp.set_defaults(func=commands.cmd_done)

    # update
    up = sub.add_parser("update", help="Edit task fields")
    up.add_argument("task_id")
    up.add_argument("--title")
    up.add_argument("--description", "-d")
    up.add_argument("--completed", choices=["yes", "no"])
    up.set_defaults(func=commands.cmd_update)

    # delete
    xp = sub.add_parser("delete", help="Delete a task")
    xp.add_argument("task_id")
    xp.set_defaults(func=commands.cmd_delete)

    # config
    cfg = sub.add_parser("config", help="Show or change client settings")
    cfg.add_argument("--api-url")
    cfg.add_argument("--page-size", type=int)
    cfg.add_argument("--lang", choices=["en", "ru"])
    cfg.set_defaults(func=commands.cmd_config)

    sub.add_parser("help", help="Show help")
    return parser
