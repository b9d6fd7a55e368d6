"""Import smoke tests for every celldiff module."""

import doctest
import importlib
import pkgutil

import pytest

import celldiff
from celldiff.diff import parsing

MODULE_NAMES = sorted(info.name for info in pkgutil.walk_packages(celldiff.__path__, prefix="celldiff."))


@pytest.mark.unit
class TestPackageImports:
    """Tests that the package and all of its modules import cleanly."""

    def test_version(self):
        """Test that the package exposes a version string."""
        assert isinstance(celldiff.__version__, str)
        assert celldiff.__version__

    def test_modules_are_found(self):
        """Test that module discovery sees the core modules."""
        assert "celldiff.diff.parsing" in MODULE_NAMES
        assert "celldiff.cli.config" in MODULE_NAMES

    @pytest.mark.parametrize("module_name", MODULE_NAMES)
    def test_module_imports(self, module_name):
        """Test that each module imports without errors."""
        assert importlib.import_module(module_name).__name__ == module_name

    def test_parsing_examples(self):
        """Test the usage examples in the parsing docstrings."""
        result = doctest.testmod(parsing, optionflags=doctest.NORMALIZE_WHITESPACE)
        assert result.failed == 0
        assert result.attempted > 0
