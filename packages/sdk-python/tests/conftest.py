"""Pytest configuration and fixtures for sdk tests."""

import os
from pathlib import Path

import pytest

from bxkit_sdk.context import Context

FIXTURES_DIR = Path(__file__).parent / "fixtures"

RUN_URL = "https://github.com/docker/actions-toolkit/actions/runs/2188748038/attempts/2"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding static test data."""
    return FIXTURES_DIR


@pytest.fixture
def github_env(monkeypatch):
    """Environment of a GitHub workflow run; returns its run URL."""
    monkeypatch.setenv("GITHUB_SERVER_URL", "https://github.com")
    monkeypatch.setenv("GITHUB_REPOSITORY", "docker/actions-toolkit")
    monkeypatch.setenv("GITHUB_RUN_ID", "2188748038")
    monkeypatch.setenv("GITHUB_RUN_ATTEMPT", "2")
    return RUN_URL


@pytest.fixture
def tmp_context(tmp_path, monkeypatch):
    """Point the bxkit temp dir at a per-test directory."""
    tmp_dir = tmp_path / "bxkit-tmp"
    tmp_dir.mkdir()
    monkeypatch.setattr(Context, "_tmp_dir", str(tmp_dir))
    return tmp_dir


@pytest.fixture
def clean_inputs(monkeypatch):
    """Remove every INPUT_* variable inherited from the outer environment."""
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key)
