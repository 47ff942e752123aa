"""Queries over a process's command-line invocation arguments.

A switch is either a bare boolean flag (``--name``) or a key-value flag
(``--name=value``).
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TypeVar

from ._io import load_cmd_line_args, save_cmd_line_args
from ._utils import hash_cmd_line_args
from .converters import identity

T = TypeVar("T")

SWITCH_PREFIX = "--"


@dataclass(frozen=True)
class CommandLine:
    """An immutable snapshot of the invocation arguments."""

    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # A lone string would otherwise be split into single characters
        if isinstance(self.args, str):
            raise TypeError(
                f"Expected a sequence of arguments, got the string '{self.args}'.")

        # Accept any iterable of strings, but always store a tuple
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_argv(cls, argv: Iterable[str] | None = None) -> CommandLine:
        """Capture the given arguments, or ``sys.argv[1:]`` if omitted."""
        return cls(sys.argv[1:] if argv is None else argv)

    def has_switch(self, name: str) -> bool:
        """Whether the exact token ``--<name>`` was supplied."""
        return f"{SWITCH_PREFIX}{name}" in self.args

    def get_switch_value(
        self,
        name: str,
        default: T,
        converter: Callable[[str], T] = identity,
    ) -> T:
        """Return the value of the first ``--<name>=<value>`` argument.

        Parameters
        ----------
        name : str
            The switch name, without the leading dashes.
        default : T
            Returned as-is when no argument carries the switch.
        converter : Callable[[str], T], optional
            Applied to the raw value of the matching argument; by default the
            raw string is returned. Errors raised by the converter propagate.

        Returns
        -------
        value : T
            The converted value, or `default` if the switch is absent.
        """
        prefix = f"{SWITCH_PREFIX}{name}="
        for arg in self.args:
            if arg.startswith(prefix):
                raw_value = arg.split("=", 1)[1]
                logging.debug(f"Found switch '{name}' with raw value '{raw_value}'")
                return converter(raw_value)

        return default

    def switch_names(self) -> list[str]:
        """Names of all switches supplied, in order of first appearance."""
        names = []
        for arg in self.args:
            if not arg.startswith(SWITCH_PREFIX):
                continue

            name = arg[len(SWITCH_PREFIX):].split("=", 1)[0]
            if name and name not in names:
                names.append(name)

        return names

    def hash(self) -> str:
        """Hexadecimal hash that identifies this argument sequence."""
        return hash_cmd_line_args(self.args)

    def save(self, path: str | Path, overwrite: bool = True):
        """Save the argument sequence to a JSON file."""
        save_cmd_line_args(self.args, path, overwrite=overwrite)

    @classmethod
    def load(cls, path: str | Path) -> CommandLine:
        """Load an argument sequence previously saved with `save`."""
        return cls(load_cmd_line_args(path))


def has_switch(name: str, argv: Sequence[str] | None = None) -> bool:
    """Whether ``--<name>`` is in `argv` (defaults to ``sys.argv[1:]``)."""
    return CommandLine.from_argv(argv).has_switch(name)


def get_switch_value(
    name: str,
    default: T,
    converter: Callable[[str], T] = identity,
    argv: Sequence[str] | None = None,
) -> T:
    """Value of the first ``--<name>=<value>`` in `argv` (defaults to ``sys.argv[1:]``)."""
    return CommandLine.from_argv(argv).get_switch_value(name, default, converter)
