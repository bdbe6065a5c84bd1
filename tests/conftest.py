"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, in-memory store)
    └── integration/       # SQLAlchemy repositories and HTTP endpoints
                           # against in-memory SQLite (aiosqlite)

Environment Variables:
    RUN_SLOW=1           Run @pytest.mark.slow tests (production Argon2 costs)

Pytest Options:
    --run-slow           Run slow tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from fedid_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a database (SQLite in-memory)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip slow tests unless explicitly enabled."""
    run_slow = config.getoption("--run-slow") or os.environ.get(
        "RUN_SLOW",
        "",
    ).lower() in ("1", "true", "yes")

    if run_slow:
        return

    skip_slow = pytest.mark.skip(reason="Slow test - run with --run-slow or RUN_SLOW=1")
    for item in items:
        if "slow" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_slow)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
