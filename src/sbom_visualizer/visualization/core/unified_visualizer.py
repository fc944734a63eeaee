"""
Visualization orchestrator for SBOM dependency trees.

This class coordinates the full pipeline: loading component lists, merging
them into a canonical set, filtering, building and positioning the tree
forest, and exporting the result.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ...pipeline.sbom.filtering import ComponentFilter
from ...pipeline.sbom.merging import merge_sboms
from ...pipeline.sbom.parsing import load_component_list
from ...shared.exceptions import ExportError, create_error_context
from ...shared.models import ComponentModel, ExportOptions, FilterState, LayoutConfig
from ..engines import HierarchicalEngine, TreeLayoutEngine
from ..exporter import TreeExporter


class UnifiedVisualizer:
    """Main orchestrator for dependency tree rendering and export."""

    def __init__(self, config: LayoutConfig | None = None, max_nodes: int | None = None):
        """Initialize the visualizer.

        Args:
            config: Layout geometry shared by the layout engine and exporter
            max_nodes: Optional cap on tree node instances per build
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or LayoutConfig()
        self.hierarchical_engine = HierarchicalEngine(max_nodes=max_nodes)
        self.layout_engine = TreeLayoutEngine(self.config)
        self.exporter = TreeExporter(self.config)
        self.component_filter = ComponentFilter()

    def load_sources(self, sbom_paths: Sequence[Path]) -> list[ComponentModel]:
        """Load and merge component lists from files, in the given order.

        Args:
            sbom_paths: CycloneDX or component-array JSON files

        Returns:
            Canonical component list
        """
        sources = []
        for sbom_path in sbom_paths:
            components = load_component_list(Path(sbom_path))
            self.logger.info(f"Loaded {len(components)} components from {sbom_path}")
            sources.append(components)

        canonical = merge_sboms(sources)
        self.logger.info(f"Canonical set has {len(canonical)} components")
        return canonical

    def render(
        self,
        components: Sequence[ComponentModel],
        options: ExportOptions | None = None,
        filters: FilterState | None = None,
        root_id: str | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """Render a canonical component list as an export document.

        The tree is built from the full canonical set; components outside the
        filter are drawn dimmed rather than removed.

        Args:
            components: Canonical component list
            options: Export flags
            filters: Active filters (None = everything visible)
            root_id: Optional single designated root
            generated_at: Timestamp for the metadata block

        Returns:
            HTML document text
        """
        visible_ids = None
        if filters is not None and not filters.is_empty:
            visible_ids = {c.id for c in self.component_filter.apply(components, filters)}

        forest = self.hierarchical_engine.build_forest(components, root_id=root_id)
        self.layout_engine.layout(forest)

        return self.exporter.export_document(
            forest, components, options, visible_ids=visible_ids, generated_at=generated_at
        )

    def create_export(
        self,
        sbom_paths: Sequence[Path],
        output_path: Path,
        options: ExportOptions | None = None,
        filters: FilterState | None = None,
        root_id: str | None = None,
    ) -> Path:
        """Load, merge and render SBOM files into an HTML file.

        Args:
            sbom_paths: Input files, merged in order
            output_path: Output HTML file path
            options: Export flags
            filters: Active filters
            root_id: Optional single designated root

        Returns:
            Path to the generated HTML file
        """
        components = self.load_sources(sbom_paths)
        html = self.render(components, options, filters=filters, root_id=root_id)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
        except OSError as e:
            raise ExportError(
                f"Failed to write export: {e}", create_error_context(path=str(output_path))
            ) from e

        self.logger.info(f"Dependency tree export created: {output_path}")
        return output_path
