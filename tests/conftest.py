"""Shared pytest fixtures for arith tests."""

from pathlib import Path

import pytest

WELL_FORMED_SOURCES = [
    "1",
    "2 + 3",
    "2+3*4",
    "(2+3)*4",
    "10-3-2",
    "20/4/5",
    "1 + 2 * 3 - 4 / 2",
    "((7))",
    "(1 + (2 * (3 + 4))) / 5",
]


@pytest.fixture(params=WELL_FORMED_SOURCES)
def well_formed_source(request: pytest.FixtureRequest) -> str:
    """Each well-formed expression in turn."""
    return request.param


@pytest.fixture
def quiet_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory with an arith.toml that disables the REPL prompt."""
    (tmp_path / "arith.toml").write_text('[repl]\nprompt = ""\n')
    monkeypatch.chdir(tmp_path)
    return tmp_path
