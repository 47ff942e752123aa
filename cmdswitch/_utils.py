"""Common set of utility functions used across the project."""
from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence


def hash_cmd_line_args(args: Sequence[str], length: int = 8) -> str:
    """Hashes a sequence of arguments using SHAKE-256 and returns the hexdigest.

    Arguments are encoded as a JSON list, so ``["a b"]`` and ``["a", "b"]``
    hash differently.

    Parameters
    ----------
    args : Sequence[str]
        The command-line arguments to hash; order matters.
    length : int, optional
        The length of the hexdigest in number of text characters, by default 8.

    Returns
    -------
    hexdigest : str
        A string representing the hash in hexadecimal format.
    """
    args_enc = json.dumps(list(args)).encode()
    return hashlib.shake_256(args_enc).hexdigest(length // 2)
