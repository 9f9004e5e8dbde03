"""Shared fixtures for block parsing tests."""

import random

import pytest

from tbp.common.utils import config as config_module

INTERFACE_TABLE = [
    "Interface   Status   Protocol",
    "Gi0/1       up       up",
    "Gi0/2       down     down",
    "Interface   Status   Protocol",
    "Gi1/1       up       up",
]


@pytest.fixture
def interface_table() -> list[str]:
    return list(INTERFACE_TABLE)


@pytest.fixture
def restore_config():
    """Put the loaded configuration back after a test swaps it."""
    original = config_module.get_config()
    yield original
    config_module.set_config(original)


def synthetic_tables(rng: random.Random, preamble: bool = False, blanks: bool = False) -> list[str]:
    """Repeated interface tables, each closed by a dashed footer line."""
    lines: list[str] = []
    if preamble:
        lines.append("router# show interfaces brief")
    for t in range(rng.randint(0, 6)):
        lines.append(f"Interface {t}   Status   Protocol")
        for r in range(rng.randint(0, 4)):
            lines.append(f"Gi{t}/{r}   {rng.choice(['up', 'down'])}   up")
            if blanks and rng.random() < 0.3:
                lines.append(rng.choice(["", "   "]))
        lines.append("----")
    return lines


def is_subsequence(items: list[str], source: list[str]) -> bool:
    it = iter(source)
    return all(any(item == candidate for candidate in it) for item in items)


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """Keep CLI log files out of the working tree."""
    monkeypatch.setenv("TBP_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path / "logs"
