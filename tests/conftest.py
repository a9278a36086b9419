"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
fop-console test suite.
"""

import logging
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fop_console.core import config as config_module
from fop_console.core.config import AppConfig, DatabaseConfig, LoggingConfig
from fop_console.core.database import create_tables, drop_tables, close_connections, get_db_session
from fop_console.storage.models import Configuration


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration."""
    return AppConfig(
        name="Test fop-console",
        version="test",
        debug=True,
        database=DatabaseConfig(
            url=f"sqlite:///{temp_dir}/test.db",
            echo=False
        ),
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "test.log")
        ),
    )


@pytest.fixture
def test_db(test_config, monkeypatch):
    """Provide a fresh database with the configuration table created."""
    monkeypatch.setattr(config_module, "_config", test_config)
    close_connections()
    create_tables()

    try:
        yield test_config
    finally:
        drop_tables()
        close_connections()


@pytest.fixture
def sample_configurations():
    """Provide sample global configuration values."""
    return {
        "PS_LANG_DEFAULT": "1",
        "PS_COUNTRY_DEFAULT": "8",
        "PS_SHOP_NAME": "My shop",
        "BLOCKSOCIAL_FACEBOOK": "https://facebook.com/prestashop",
        "BLOCKSOCIAL_TWITTER": "https://twitter.com/prestashop",
        "PS_EMPTY_VALUE": None,
    }


@pytest.fixture
def populated_db(test_db, sample_configurations):
    """Database holding the sample values plus one shop-specific row."""
    with get_db_session() as session:
        for name, value in sample_configurations.items():
            session.add(Configuration(name=name, value=value))
        # multishop value, never exported
        session.add(Configuration(name="PS_SHOP_NAME", value="Second shop", id_shop_group=1, id_shop=2))

    return test_db


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep the developer's environment out of configuration loading."""
    for env_var in ("DATABASE_URL", "LOG_LEVEL", "DEBUG", "ENVIRONMENT", "FOP_EXPORT_FILE"):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging once a test is done."""
    yield
    logging.getLogger().handlers.clear()


# Pytest markers for test categorization

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that use a database"
    )
