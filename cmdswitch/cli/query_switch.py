#!/usr/bin/env python3
"""Queries switches in a list of command-line arguments.

Examples
--------
    query-switch --name port --type int --default 8080 -- --port=9000 --verbose
    query-switch --name verbose --check -- --port=9000 --verbose
    query-switch --list -- --port=9000 --verbose
    query-switch --as-kwargs --save-dir runs/ -- --batch-size=16 --use-cache
"""
from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from cmdswitch._io import load_kwargs
from cmdswitch.command_line import CommandLine
from cmdswitch.converters import identity, infer_type, to_bool, to_float, to_int, to_path

from ._utils import cmd_line_args_to_kwargs, kwargs_to_cmd_line_args

CONVERTERS = {
    "str": identity,
    "int": to_int,
    "float": to_float,
    "bool": to_bool,
    "path": to_path,
    "auto": infer_type,
}


def setup_arg_parser() -> ArgumentParser:
    # Init parser
    parser = ArgumentParser(description="Query switches in a list of command-line arguments.")

    parser.add_argument(
        "--name",
        type=str,
        help="[str] Name of the switch to query, without the leading dashes",
        required=False,
    )

    parser.add_argument(
        "--default",
        type=str,
        help="[str] Value to print when the switch is not supplied",
        required=False,
        default="",
    )

    parser.add_argument(
        "--type",
        type=str,
        help="[str] How to convert the switch's value before printing it",
        choices=list(CONVERTERS.keys()),
        required=False,
        default="str",
    )

    # Add special arguments (e.g., boolean flags)
    parser.add_argument(
        "--check",
        help="[bool] Only check whether the bare switch is present (exit code 1 if absent)",
        action="store_true",
        default=False,
    )

    parser.add_argument(
        "--list",
        help="[bool] Print the names of all supplied switches, one per line",
        action="store_true",
        default=False,
    )

    parser.add_argument(
        "--as-kwargs",
        help="[bool] Print all supplied switches as a JSON object of keyword arguments",
        action="store_true",
        default=False,
    )

    # Alternative sources of arguments to inspect
    parser.add_argument(
        "--args-json",
        type=str,
        help="[str] Path to a JSON file with saved arguments to inspect instead of the trailing ones",
        required=False,
    )

    parser.add_argument(
        "--kwargs-json",
        type=str,
        help="[str] Path to a JSON object of keyword arguments to turn into switches and inspect",
        required=False,
    )

    parser.add_argument(
        "--save-dir",
        type=str,
        help="[str] Directory under which to save the inspected arguments as '<hash>.json'",
        required=False,
    )

    parser.add_argument(
        "--logger-level",
        type=str,
        help="[str] The logging level to use",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        required=False,
        default="WARNING",
    )

    parser.add_argument(
        "args",
        nargs="*",
        help="Arguments to inspect (place them after '--')",
    )

    return parser


def load_command_line(args, parser: ArgumentParser) -> CommandLine:
    """Build the command line to inspect from exactly one source of arguments."""
    sources = [bool(args.args), bool(args.args_json), bool(args.kwargs_json)]
    if sum(sources) > 1:
        parser.error("use only one of: trailing arguments, --args-json, --kwargs-json")

    if args.args_json:
        cmd_line = CommandLine.load(args.args_json)
        logging.info(f"Loaded {len(cmd_line.args)} argument(s) from '{args.args_json}'")
    elif args.kwargs_json:
        cmd_line = CommandLine(kwargs_to_cmd_line_args(load_kwargs(args.kwargs_json)))
        logging.info(f"Built arguments {list(cmd_line.args)} from '{args.kwargs_json}'")
    else:
        cmd_line = CommandLine(args.args)

    return cmd_line


def main(argv: list[str] | None = None) -> int:
    """Run the switch query and return the process exit code."""

    # Setup parser and process cmd-line args
    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logging.getLogger().setLevel(level=args.logger_level)

    if args.name is None and not (args.list or args.as_kwargs):
        parser.error("--name is required unless --list or --as-kwargs is given")

    cmd_line = load_command_line(args, parser)

    # Save inspected arguments, named after their content
    if args.save_dir:
        save_dir = Path(args.save_dir)
        save_dir.mkdir(parents=True, exist_ok=True)
        cmd_line.save(save_dir / f"{cmd_line.hash()}.json")

    # Listing queries
    if args.list:
        for name in cmd_line.switch_names():
            print(name)
        return 0

    if args.as_kwargs:
        print(json.dumps(cmd_line_args_to_kwargs(list(cmd_line.args)), indent=4, sort_keys=True))
        return 0

    # Boolean query
    if args.check:
        found = cmd_line.has_switch(args.name)
        print("true" if found else "false")
        return 0 if found else 1

    # Key-value query
    try:
        value = cmd_line.get_switch_value(args.name, args.default, CONVERTERS[args.type])
    except ValueError as err:
        parser.error(f"could not convert value of '--{args.name}' to {args.type}: {err}")

    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
