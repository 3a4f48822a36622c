"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_glyphs.catalog import VariantCatalog, default_catalog
from chuk_mcp_glyphs.constants import VariantCode
from chuk_mcp_glyphs.core.transcoder import Transcoder


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def catalog() -> VariantCatalog:
    """The shipped catalog."""
    return default_catalog()


@pytest.fixture
def small_catalog(catalog: VariantCatalog) -> VariantCatalog:
    """A reduced catalog with just bold and italic."""
    return catalog.subset([VariantCode.BOLD, VariantCode.ITALIC])


@pytest.fixture
def transcoder(catalog: VariantCatalog) -> Transcoder:
    """Transcoder over the shipped catalog."""
    return Transcoder(catalog)
