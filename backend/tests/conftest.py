"""
Pytest fixtures and configuration for Course Catalog tests.

Provides:
- Workbook bytes built with the Excel generator
- A public directory patched into the global settings
- Test client for the FastAPI app
"""
import pytest
from pathlib import Path
from typing import Callable, Generator

from fastapi.testclient import TestClient

from coursecatalog.core.config import settings
from coursecatalog.main import app
from tests.factories.excel_generator import ExcelGenerator


# ==========================================
# WORKBOOK FIXTURES
# ==========================================

@pytest.fixture
def acme_courses() -> list[tuple[str, str, str, str]]:
    """Two courses offered by a single institution."""
    return [
        ("00123", "Acme Uni", "CS101", "Intro CS"),
        ("00123", "Acme Uni", "CS102", "Data Structures"),
    ]


@pytest.fixture
def acme_workbook(acme_courses) -> bytes:
    """Course spreadsheet with two header rows and the Acme courses."""
    return ExcelGenerator.create_course_workbook(acme_courses)


@pytest.fixture
def headers_only_workbook() -> bytes:
    """Course spreadsheet with header rows but no data."""
    return ExcelGenerator.create_headers_only()


# ==========================================
# PUBLIC DIRECTORY
# ==========================================

@pytest.fixture
def public_dir(tmp_path, monkeypatch) -> Path:
    """Point the global settings at an empty temporary public directory."""
    monkeypatch.setattr(settings, "public_dir", tmp_path)
    monkeypatch.setattr(settings, "workbook_base_url", None)
    return tmp_path


@pytest.fixture
def publish_workbook(public_dir) -> Callable[[bytes], Path]:
    """Write workbook bytes to the well-known path in the public directory."""

    def _publish(data: bytes) -> Path:
        path = public_dir / settings.workbook_filename
        path.write_bytes(data)
        return path

    return _publish


# ==========================================
# CLIENT
# ==========================================

@pytest.fixture(scope="function")
def client(public_dir) -> Generator[TestClient, None, None]:
    """Create a test client serving from the temporary public directory."""
    with TestClient(app) as test_client:
        yield test_client
