"""Pytest fixtures.
"""
from __future__ import annotations

import numpy as np
import pytest

SWITCH_NAMES = ["port", "ports", "verbose", "kv", "log-level", "n"]


@pytest.fixture(params=[42, 1234])
def random_seed(request) -> int:
    return request.param


@pytest.fixture
def rng(random_seed: int) -> np.random.Generator:
    return np.random.default_rng(random_seed)


@pytest.fixture
def random_argv(rng: np.random.Generator) -> list[str]:
    """A random sequence of bare switches, key-value switches and positional tokens."""
    argv = []
    for _ in range(rng.integers(0, 12)):
        name = SWITCH_NAMES[rng.integers(len(SWITCH_NAMES))]
        kind = rng.integers(3)
        if kind == 0:
            argv.append(f"--{name}")
        elif kind == 1:
            argv.append(f"--{name}={rng.integers(100)}")
        else:
            argv.append(name)
    return argv


@pytest.fixture(params=SWITCH_NAMES)
def switch_name(request) -> str:
    return request.param
