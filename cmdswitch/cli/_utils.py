"""Utils for the cmdswitch cmd-line interface.
"""
from __future__ import annotations

from cmdswitch.command_line import SWITCH_PREFIX
from cmdswitch.converters import infer_type


def cmd_line_args_to_kwargs(cmdline_args: list) -> dict:
    """Converts a list of command-line switches to a dictionary of keyword arguments.

    Tokens that are not switches are ignored, and the first occurrence of each
    switch takes precedence over later ones.
    """
    kwargs_dict = {}
    for arg in cmdline_args:
        if not arg.startswith(SWITCH_PREFIX):
            continue

        parsed_arg = arg[len(SWITCH_PREFIX):]
        if "=" in parsed_arg:
            split_idx = parsed_arg.index("=")
            key = parsed_arg[:split_idx].replace("-", "_")
            val = infer_type(parsed_arg[split_idx + 1:])
        else:
            key = parsed_arg.replace("-", "_")
            val = True

        if key and key not in kwargs_dict:
            kwargs_dict[key] = val

    return kwargs_dict


def kwargs_to_cmd_line_args(kwargs: dict) -> list[str]:
    """Converts a dictionary of keyword arguments to command-line switches.

    `True` values become bare flags, while `False` and `None` values are omitted.
    Passing the result back through `cmd_line_args_to_kwargs` is lossy: values
    are re-typed with `infer_type`, so the string "5" comes back as the int 5
    and omitted `False` / `None` entries do not come back at all.
    """
    cmdline_args = []
    for key, value in kwargs.items():
        switch = f"{SWITCH_PREFIX}{key.replace('_', '-')}"
        if value is True:
            cmdline_args.append(switch)
        elif value is False or value is None:
            continue
        else:
            cmdline_args.append(f"{switch}={value}")

    return cmdline_args
