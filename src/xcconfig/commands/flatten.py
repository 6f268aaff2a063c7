"""Print the effective build settings of a file with all includes resolved."""

from __future__ import annotations

import csv
import json
import sys
from argparse import Namespace
from pathlib import Path

from xcconfig.commands import command_config, load_or_exit, strict_mode
from xcconfig.flatten import flatten
from xcconfig.model import construct
from xcconfig.writer import render


def _export_json(settings: dict[str, str], out: object) -> None:
    json.dump(settings, out, indent=2, sort_keys=True)
    out.write("\n")


def _export_csv(settings: dict[str, str], out: object) -> None:
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(["key", "value"])
    for key in sorted(settings):
        writer.writerow([key, settings[key]])


def _export_xcconfig(settings: dict[str, str], out: object) -> None:
    out.write(render(construct([], dict(sorted(settings.items())))))


def run(args: Namespace) -> None:
    """Run the flatten command."""
    path: Path = args.path
    config = command_config(path)
    fmt = getattr(args, "format", None) or (config.get("output") or {}).get("format", "json")

    settings = flatten(load_or_exit(path, strict_mode(args, config)))
    if fmt == "json":
        _export_json(settings, sys.stdout)
    elif fmt == "csv":
        _export_csv(settings, sys.stdout)
    elif fmt == "xcconfig":
        _export_xcconfig(settings, sys.stdout)
    else:
        print(f"Error: unknown output format {fmt!r}.", file=sys.stderr)
        sys.exit(1)
