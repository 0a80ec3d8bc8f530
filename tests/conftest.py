"""Pytest configuration file."""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from lms_assistant.api.main import create_app
from lms_assistant.config import settings


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> FastAPI:
    """Create a test FastAPI application that logs under a temp directory."""
    monkeypatch.setattr(settings, "log_dir", str(tmp_path / "logs"))
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create a test client with startup events run."""
    with TestClient(app) as test_client:
        yield test_client
