"""Pytest configuration and fixtures for taskbind tests."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


def pytest_sessionfinish(session, exitstatus):
    """Fail the run when --cov was requested but no coverage data was collected."""
    cov_enabled = any("--cov" in str(arg) for arg in session.config.args)
    if not cov_enabled:
        return

    if not list(Path.cwd().glob(".coverage*")):
        pytest.exit(
            "Coverage was enabled but no data was collected. "
            "Check that tests import from 'taskbind' (the package) not 'src/taskbind'.",
            returncode=1,
        )


@pytest.fixture
def write_doc(tmp_path: Path):
    """Write a dedented document under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
