"""Root pytest configuration.

Test Structure:
    tests/
    ├── keyforge_auth/         # Credential provider and its collaborators
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # SQLAlchemy repositories on in-memory SQLite
    ├── keyforge/              # HTTP API and CLI
    ├── cross_domain/          # Full password reset journey
    └── shared/                # Shared fixtures, fakes and utilities

Settings are pinned through environment variables before any keyforge
module is imported, so tests never depend on a developer's .env file.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tests.shared.keys import generate_private_key_pem

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional overrides for local runs (e.g. LOG_LEVEL=DEBUG)
if (PROJECT_ROOT / "config" / ".env.test").exists():
    load_dotenv(PROJECT_ROOT / "config" / ".env.test")

os.environ.setdefault("JWT_PRIVATE_KEY", generate_private_key_pem())
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SMTP_ENABLED"] = "false"

from keyforge_config import clear_settings_cache  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
