"""
Pytest configuration and shared fixtures for the test suite.
Ensures proper Python path and provides common fixtures for unit and integration tests.
"""
import os
import sys
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add project root and src to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
src_path = project_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Settings are read once at import of portal.config; point them away from real files first.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "portal-test-logs"))
os.environ.setdefault("DAY_BOUNDARY_TZ", "UTC")


class FakeNow:
    """Settable clock source: `now()` returns whatever was last set."""

    def __init__(self, start: datetime):
        self.value = start

    def __call__(self) -> datetime:
        return self.value

    def advance(self, days: int = 0, hours: int = 0) -> None:
        self.value = self.value + timedelta(days=days, hours=hours)


@pytest.fixture
def fake_now():
    return FakeNow(datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def clock(fake_now):
    from learning.clock import Clock
    return Clock("UTC", now=fake_now)


@pytest.fixture
def memory_store():
    from learning.store import InMemoryProgressStore
    return InMemoryProgressStore()


@pytest.fixture
def progress_service(memory_store, clock):
    from learning.service import ProgressService
    return ProgressService(memory_store, clock)


@pytest.fixture
def catalog():
    from learning.models import ModuleCatalogEntry
    return [
        ModuleCatalogEntry("tech-101", "HTML Basics", "Structure of web pages.", 20, "Technology"),
        ModuleCatalogEntry("sci-101", "Biology: The Cell", "Building block of life.", 20, "Science"),
        ModuleCatalogEntry("tech-102", "CSS Fundamentals", "Style your pages.", 25, "Technology"),
        ModuleCatalogEntry("art-101", "Digital Painting", "Brushes and layers.", 20, "Art"),
        ModuleCatalogEntry("sci-102", "Chemistry: The Atom", "Matter at its core.", 25, "Science"),
        ModuleCatalogEntry("tech-103", "JavaScript Essentials", "Interactivity.", 30, "Technology"),
    ]
