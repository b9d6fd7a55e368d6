"""Pytest configuration and shared fixtures for the celldiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

from celldiff.logging_utils import PACKAGE_LOGGER_NAME, remove_installed_handlers
from celldiff.options import DiffConfig

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture(autouse=True)
def reset_package_logging() -> Generator[None, None, None]:
    """Remove the handlers the CLI installs on the celldiff logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = package_logger.level
    yield
    remove_installed_handlers(package_logger)
    package_logger.setLevel(level)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def text_config() -> DiffConfig:
    """Default text mode config."""
    return DiffConfig()


@pytest.fixture
def csv_config() -> DiffConfig:
    """Default csv mode config."""
    return DiffConfig(mode="csv")


@pytest.fixture
def sample_csv_pair() -> tuple[str, str]:
    """Provide a before/after CSV pair with a header row and one changed cell.

    Returns
    -------
    tuple[str, str]
        Before and after CSV text

    """
    before = "Name,Value,Note\nalpha,1,first\nbeta,2,second\ngamma,3,third"
    after = "Name,Value,Note\nalpha,1,first\nbeta,20,second\ngamma,3,third"
    return before, after
