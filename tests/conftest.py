"""
Pytest fixtures and configuration.
"""
import os
from pathlib import Path
import sys
from typing import Callable

import pytest

# Ensure the project root is first on sys.path so the local packages win.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep MDLINKS_* variables and stray .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("MDLINKS_") or key in {"LOG_LEVEL", "LOG_FILE", "LOG_FORMAT", "FORCE_COLOR"}:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def docs_dir(tmp_path) -> Path:
    """An empty docs/ directory inside the test sandbox."""
    path = tmp_path / "docs"
    path.mkdir()
    return path


@pytest.fixture
def write_doc() -> Callable[..., Path]:
    """Write a Markdown document, creating parent directories."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
