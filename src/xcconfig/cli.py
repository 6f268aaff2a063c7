"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from xcconfig import __version__
from xcconfig.config import OUTPUT_FORMATS, find_project_root, load_config


def setup_logging(verbose: bool = False, quiet: bool = False, project_root: Path | None = None) -> None:
    """
    Configure the "xcconfig" logger: level from --verbose/--quiet or config,
    console handler on stderr, optional file handler from config.
    """
    config = load_config(project_root)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("xcconfig")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xcconfig",
        description="Inspect, resolve and rewrite .xcconfig build configuration files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    # Global flags (before or after subcommand)
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when an included file cannot be loaded instead of skipping it.",
    )

    # Same flags on subparsers so "xcconfig flatten App.xcconfig -v" works.
    # SUPPRESS defaults keep a flag given before the subcommand from being reset.
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    global_flags.add_argument("--strict", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_show = subparsers.add_parser("show", help="Show a file's include tree and own settings.", parents=[global_flags])
    p_show.add_argument("path", type=Path, help="The .xcconfig file.")
    p_show.set_defaults(run="show")

    p_flatten = subparsers.add_parser(
        "flatten",
        help="Print the effective settings with all includes resolved.",
        parents=[global_flags],
    )
    p_flatten.add_argument("path", type=Path, help="The .xcconfig file.")
    p_flatten.add_argument("--format", "-f", choices=OUTPUT_FORMATS, help="Output format (default from config: json).")
    p_flatten.set_defaults(run="flatten")

    p_format = subparsers.add_parser(
        "format",
        help="Rewrite a file in canonical form (includes, blank line, settings).",
        parents=[global_flags],
    )
    p_format.add_argument("path", type=Path, help="The .xcconfig file.")
    p_format.add_argument("--output", "-o", type=Path, help="Write here instead of rewriting PATH.")
    p_format.add_argument("--force", action="store_true", help="Overwrite --output if it exists.")
    p_format.add_argument(
        "--drop-unresolved",
        action="store_true",
        help="Write even if some includes cannot be resolved (their lines are dropped).",
    )
    p_format.set_defaults(run="format")

    p_scan = subparsers.add_parser("scan", help="Find .xcconfig files and report their includes.", parents=[global_flags])
    p_scan.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory to scan (default: .).")
    p_scan.add_argument("--check", action="store_true", help="Exit with status 1 if any include is unresolved.")
    p_scan.set_defaults(run="scan")

    p_config = subparsers.add_parser("config", help="Show or edit tool configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Project path for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value.")
    p_config.add_argument("--add", dest="add_key", metavar=("KEY", "VALUE"), nargs=2, help="Append VALUE to list KEY (e.g. ignore.additional_patterns PATTERN).")
    p_config.add_argument("--remove", dest="remove_key", metavar=("KEY", "VALUE"), nargs=2, help="Remove VALUE from list KEY.")
    p_config.add_argument("--global", dest="global_", action="store_true", help="With --set/--add/--remove: write to global config even when inside a project.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.path = args.path.resolve()
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
        project_root=find_project_root(args.path),
    )

    run = getattr(args, "run", None)
    if run == "show":
        from xcconfig.commands.show import run as cmd_run
    elif run == "flatten":
        from xcconfig.commands.flatten import run as cmd_run
    elif run == "format":
        from xcconfig.commands.format_cmd import run as cmd_run
    elif run == "scan":
        from xcconfig.commands.scan import run as cmd_run
    elif run == "config":
        from xcconfig.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
