"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from decimal import Decimal
from typing import Dict

import pytest

from pint_invoice.config import InvoiceSettings, reload_config
from pint_invoice.config.logging_config import reset_logging
from pint_invoice.models.invoice import InvoiceConfig


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'DEFAULT_GST_RATE': '0.1',
        'SORT_PROJECTS': 'true',
        'CSV_ENCODING': 'utf-8',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import pint_invoice.config.settings
    pint_invoice.config.settings._config = None

    yield test_env_vars

    pint_invoice.config.settings._config = None


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no invoice settings in the environment and no .env file."""
    for key in ('ENVIRONMENT', 'DEBUG', 'LOG_LEVEL', 'LOG_FORMAT',
                'DEFAULT_GST_RATE', 'SORT_PROJECTS', 'CSV_ENCODING'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    import pint_invoice.config.settings
    pint_invoice.config.settings._config = None

    yield

    pint_invoice.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> InvoiceSettings:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def invoice_config() -> InvoiceConfig:
    """Pay rate 25/h with 8% GST."""
    return InvoiceConfig(pay_rate=Decimal("25"), tax_rate=Decimal("0.08"))


@pytest.fixture
def sample_entries():
    """(project, duration) pairs for two projects."""
    return [
        ("test_project_1", dt.timedelta(hours=13)),
        ("test_project_2", dt.timedelta(hours=6)),
    ]


@pytest.fixture
def sample_csv() -> str:
    """A small time-tracking export with a header row."""
    return (
        "Project,Client,Description,Duration\n"
        "Website,Acme,Layout,10:05:16\n"
        "Mobile,Acme,Login screen,2:30:00\n"
        "Website,Acme,Review,0:30:00\n"
    )


@pytest.fixture
def sample_csv_file(tmp_path, sample_csv):
    """The sample export written to a temporary file."""
    path = tmp_path / "timesheet.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Reset root logging after each test."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
