"""
Catalog loader - reads variant definitions from YAML.

Definitions can come from:
1. Built-in library (shipped with package)
2. Project catalog (an optional directory of overrides)

A project definition replaces the library definition with the same
code and keeps its position in the display order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_glyphs.catalog.catalog import CatalogError, VariantCatalog
from chuk_mcp_glyphs.constants import SCHEMA_CATALOG_V1, VariantCode
from chuk_mcp_glyphs.models.variant import GlyphRun, VariantDefinition

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Discovers and loads variant definitions.

    Every `*.yaml` file in a directory is read in name order. Each file
    holds a `variants` list.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project overrides directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path

    def load(self) -> VariantCatalog:
        """
        Load library definitions, apply project overrides, build the catalog.

        Raises:
            CatalogError: If no definitions are found or a file is malformed
        """
        definitions: dict[VariantCode, VariantDefinition] = {}

        for definition in self._load_directory(self.library_path):
            definitions[definition.code] = definition

        if self.project_path and self.project_path.exists():
            for definition in self._load_directory(self.project_path):
                if definition.code in definitions:
                    logger.info(f"Project catalog overrides variant '{definition.code.value}'")
                definitions[definition.code] = definition

        if not definitions:
            raise CatalogError(f"No variant definitions found in {self.library_path}")

        try:
            return VariantCatalog(definitions.values())
        except CatalogError:
            raise
        except ValueError as e:
            raise CatalogError(f"Cannot build catalog: {e}") from e

    def load_file(self, path: Path) -> list[VariantDefinition]:
        """
        Load the definitions in one YAML file.

        Raises:
            CatalogError: If the file cannot be read or parsed
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"Cannot read catalog file {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog file {path} must contain a mapping")

        schema = data.get("schema", SCHEMA_CATALOG_V1)
        if schema != SCHEMA_CATALOG_V1:
            raise CatalogError(f"Unsupported catalog schema in {path}: {schema}")

        entries = data.get("variants") or []
        if not isinstance(entries, list):
            raise CatalogError(f"'variants' in {path} must be a list")

        result: list[VariantDefinition] = []
        for entry in entries:
            definition = self._parse_definition(entry, path)
            if definition is not None:
                result.append(definition)
        return result

    def _load_directory(self, directory: Path) -> list[VariantDefinition]:
        """Load every catalog file in a directory."""
        if not directory.exists():
            return []
        result: list[VariantDefinition] = []
        for path in sorted(directory.glob("*.yaml")):
            result.extend(self.load_file(path))
        return result

    def _parse_definition(self, data: Any, path: Path) -> VariantDefinition | None:
        """Parse one definition from YAML data. Unknown codes are skipped."""
        if not isinstance(data, dict):
            raise CatalogError(f"Variant entry in {path} must be a mapping")

        code = str(data.get("code", ""))
        try:
            variant_code = VariantCode(code)
        except ValueError:
            logger.warning(f"Skipping unknown variant code '{code}' in {path}")
            return None

        try:
            return VariantDefinition(
                code=variant_code,
                label=data.get("label", ""),
                description=data.get("description", ""),
                upper=self._parse_run(data.get("upper")),
                lower=self._parse_run(data.get("lower")),
                digits=self._parse_run(data.get("digits")) if data.get("digits") is not None else None,
                exceptions=data.get("exceptions") or {},
            )
        except (ValidationError, TypeError) as e:
            raise CatalogError(f"Invalid variant '{code}' in {path}: {e}") from e

    def _parse_run(self, data: Any) -> GlyphRun:
        """A run is either a bare start code point or a mapping with `start`."""
        if isinstance(data, dict):
            return GlyphRun(start=data.get("start"))
        return GlyphRun(start=data)
