from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

ARGS_KEY = "args"


def save_json(obj: dict, path: str | Path, overwrite: bool = True):
    """Saves a JSON-serializable dictionary to disk."""
    logging.info(f"Saving JSON file to '{str(path)}'")
    with open(path, "w" if overwrite else "x") as f_out:
        json.dump(obj, f_out, indent=4, sort_keys=True)


def load_json(path: str | Path) -> object:
    """Loads a JSON file from disk and returns the deserialized object."""
    with open(path, "r") as f_in:
        return json.load(f_in)


def save_cmd_line_args(args: Sequence[str], path: str | Path, overwrite: bool = True):
    """Saves a list of command-line arguments as ``{"args": [...]}``."""
    save_json({ARGS_KEY: list(args)}, path, overwrite=overwrite)


def load_cmd_line_args(path: str | Path) -> list[str]:
    """Loads a list of command-line arguments saved with `save_cmd_line_args`.

    Raises
    ------
    ValueError
        If the file is not an object with an ``args`` list of strings.
    """
    data = load_json(path)
    if not isinstance(data, dict) or not isinstance(data.get(ARGS_KEY), list):
        raise ValueError(f"Expected a JSON object with an '{ARGS_KEY}' list at '{str(path)}'.")

    args = data[ARGS_KEY]
    bad_args = [arg for arg in args if not isinstance(arg, str)]
    if bad_args:
        raise ValueError(f"Found non-string arguments {bad_args} at '{str(path)}'.")

    return args


def load_kwargs(path: str | Path) -> dict:
    """Loads a JSON object of keyword arguments (e.g., a saved experiment config)."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object of keyword arguments at '{str(path)}'.")
    return data
