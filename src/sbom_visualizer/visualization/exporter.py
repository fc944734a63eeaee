"""
Standalone HTML export of SBOM dependency trees.

The exporter reads node geometry straight from a positioned forest and wraps
a single SVG graphic in a self-contained HTML page, optionally followed by a
statistics panel and a legend. Apart from the optional export timestamp the
output is fully determined by its inputs.
"""

import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Collection, Sequence
from datetime import datetime
from html import escape
from pathlib import Path

from ..shared.exceptions import ExportError, create_error_context
from ..shared.models import (
    ComponentModel,
    ComponentStatistics,
    ComponentType,
    ExportOptions,
    LayoutConfig,
    RiskLevel,
    TreeNode,
)
from .builders.template_builder import TemplateBuilder
from .engines.layout_engine import collect_edges, forest_bounds, iter_nodes, matrix_layout

logger = logging.getLogger(__name__)

TYPE_RGB: dict[ComponentType, tuple[int, int, int]] = {
    ComponentType.APPLICATION: (16, 185, 129),
    ComponentType.LIBRARY: (59, 130, 246),
    ComponentType.DEPENDENCY: (249, 115, 22),
}

RISK_COLORS: dict[str, str] = {
    RiskLevel.HIGH.value: "#EF4444",
    RiskLevel.MEDIUM.value: "#F59E0B",
}
DEFAULT_RISK_COLOR = "#10B981"

DIMMED_OPACITY = 0.6
MAX_LABEL_LENGTH = 18
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_type_color(component_type: ComponentType | str, opacity: float = 1.0) -> str:
    """Return the rgba() fill used for a component type.

    Unknown types are drawn with the dependency color.
    """
    red, green, blue = TYPE_RGB[ComponentType.parse(component_type)]
    return f"rgba({red}, {green}, {blue}, {opacity:g})"


def get_risk_color(risk_level: RiskLevel | str) -> str:
    """Return the hex color for a risk level; unrecognized values map to the low-risk color."""
    value = risk_level.value if isinstance(risk_level, RiskLevel) else str(risk_level).lower()
    return RISK_COLORS.get(value, DEFAULT_RISK_COLOR)


def calculate_statistics(
    components: Sequence[ComponentModel], visible_ids: Collection[str] | None = None
) -> ComponentStatistics:
    """Count components by type and risk level in a single pass.

    Args:
        components: Canonical (or filtered) component list
        visible_ids: Ids passing the active filter (None = all visible)

    Returns:
        ComponentStatistics for the given components
    """
    stats = ComponentStatistics()
    type_fields = {
        ComponentType.APPLICATION: "applications",
        ComponentType.LIBRARY: "libraries",
        ComponentType.DEPENDENCY: "dependencies",
    }
    risk_fields = {
        RiskLevel.HIGH: "high_risk",
        RiskLevel.MEDIUM: "medium_risk",
        RiskLevel.LOW: "low_risk",
    }

    for component in components:
        stats.total += 1
        if visible_ids is None or component.id in visible_ids:
            stats.visible += 1
        type_field = type_fields[component.type]
        setattr(stats, type_field, getattr(stats, type_field) + 1)
        risk_field = risk_fields[component.risk_level]
        setattr(stats, risk_field, getattr(stats, risk_field) + 1)

    return stats


def _fmt(value: float) -> str:
    """Format a coordinate without float noise."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _truncate(name: str) -> str:
    return f"{name[:MAX_LABEL_LENGTH]}..." if len(name) > MAX_LABEL_LENGTH else name


class TreeExporter:
    """Renders positioned forests into standalone HTML documents."""

    def __init__(
        self,
        config: LayoutConfig | None = None,
        template_builder: TemplateBuilder | None = None,
    ):
        """Initialize the exporter.

        Args:
            config: Geometry the forest was laid out with
            template_builder: Page template builder
        """
        self.config = config or LayoutConfig()
        self.template_builder = template_builder or TemplateBuilder()

    def export_document(
        self,
        forest: Sequence[TreeNode],
        components: Sequence[ComponentModel],
        options: ExportOptions | None = None,
        visible_ids: Collection[str] | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """Export a positioned forest as an HTML document.

        Args:
            forest: Forest positioned by the layout engine
            components: Canonical component list (statistics, matrix rendering)
            options: Export flags (defaults to ExportOptions())
            visible_ids: Ids passing the active filter; others are drawn dimmed
            generated_at: Timestamp for the metadata block (default: now)

        Returns:
            Complete HTML document containing a single SVG graphic
        """
        options = options or ExportOptions()
        visible = set(visible_ids) if visible_ids is not None else None

        has_edges = any(component.dependencies for component in components)
        use_matrix = options.matrix_mode or (bool(components) and not has_edges)
        if use_matrix:
            svg = self.render_matrix_svg(components, visible)
        else:
            svg = self.render_tree_svg(forest, visible)

        exported_at = None
        if options.include_metadata:
            exported_at = (generated_at or datetime.now()).strftime(TIMESTAMP_FORMAT)

        template_data = {
            "title": options.title,
            "description": options.description,
            "svg": svg,
            "statistics_html": (
                self.render_statistics(calculate_statistics(components, visible))
                if options.include_statistics
                else ""
            ),
            "legend_html": self.render_legend() if options.include_legend else "",
            "exported_at": exported_at,
        }

        logger.debug(
            f"Exporting {'matrix' if use_matrix else 'tree'} view of "
            f"{len(components)} components"
        )
        return self.template_builder.build_document(template_data)

    def render_tree_svg(
        self, forest: Sequence[TreeNode], visible: set[str] | None = None
    ) -> str:
        """Render the forest as an SVG tree with curved parent→child edges."""
        cfg = self.config
        width, height = forest_bounds(forest, cfg)
        box_width = cfg.node_width - 10
        box_height = cfg.node_height - 20

        parts = [
            f'<svg width="{_fmt(width)}" height="{_fmt(height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "<defs>",
            '<marker id="arrow-default" viewBox="0 0 10 10" refX="9" refY="3" '
            'markerWidth="6" markerHeight="6" orient="auto">',
            '<path d="M0,0 L0,6 L9,3 z" fill="#6B7280" />',
            "</marker>",
            "</defs>",
            '<rect width="100%" height="100%" fill="#111827" />',
        ]

        for edge in collect_edges(forest, cfg):
            mid_x = (edge.source_x + edge.target_x) / 2
            path = (
                f"M {_fmt(edge.source_x)} {_fmt(edge.source_y)} "
                f"C {_fmt(mid_x)} {_fmt(edge.source_y)}, {_fmt(mid_x)} {_fmt(edge.target_y)}, "
                f"{_fmt(edge.target_x)} {_fmt(edge.target_y)}"
            )
            parts.append(
                f'<path d="{path}" stroke="#6B7280" stroke-width="1" fill="none" '
                f'marker-end="url(#arrow-default)" opacity="0.5" />'
            )

        node_count = 0
        for node in iter_nodes(forest):
            node_count += 1
            is_visible = visible is None or node.id in visible
            fill = get_type_color(node.type, 1.0 if is_visible else DIMMED_OPACITY)
            risk_color = get_risk_color(node.risk_level)
            text_opacity = "1" if is_visible else "0.7"
            parts.append(
                f'<g class="tree-node" data-id="{escape(node.id)}" '
                f'transform="translate({_fmt(node.x)}, {_fmt(node.y - box_height / 2)})">'
                f'<rect width="{_fmt(box_width)}" height="{_fmt(box_height)}" rx="8" '
                f'fill="{fill}" stroke="{risk_color}" stroke-width="2" '
                f'opacity="{"0.9" if is_visible else "0.5"}" '
                f'stroke-dasharray="{"none" if is_visible else "5,5"}" />'
                f'<circle r="6" cx="{_fmt(box_width - 15)}" cy="10" fill="{risk_color}" '
                f'stroke="#1F2937" stroke-width="1" />'
                f'<text x="{_fmt(box_width / 2)}" y="25" text-anchor="middle" fill="white" '
                f'font-size="13px" font-weight="bold" opacity="{text_opacity}">'
                f"{escape(_truncate(node.name))}</text>"
                f'<text x="{_fmt(box_width / 2)}" y="42" text-anchor="middle" fill="#E5E7EB" '
                f'font-size="10px" opacity="{text_opacity}">{node.type.value}</text>'
                "</g>"
            )

        if node_count == 0:
            parts.append(
                f'<text x="{_fmt(width / 2)}" y="{_fmt(height / 2)}" text-anchor="middle" '
                f'fill="#9CA3AF" font-size="14px">No components to display</text>'
            )

        parts.append("</svg>")
        return "\n".join(parts)

    def render_matrix_svg(
        self, components: Sequence[ComponentModel], visible: set[str] | None = None
    ) -> str:
        """Render the components as an adjacency matrix (row depends on column)."""
        matrix = matrix_layout(components)
        cell = matrix.cell_size
        by_id = {component.id: component for component in components}

        width = max(matrix.width, 2 * matrix.origin_x)
        height = max(matrix.height, matrix.origin_y + cell)
        parts = [
            f'<svg width="{_fmt(width)}" height="{_fmt(height)}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            '<rect width="100%" height="100%" fill="#111827" />',
        ]

        for index, component_id in enumerate(matrix.ids):
            component = by_id[component_id]
            is_visible = visible is None or component_id in visible
            color = get_type_color(component.type, 1.0 if is_visible else DIMMED_OPACITY)
            label = escape(_truncate(matrix.labels[index]))
            offset = index * cell + cell / 2

            parts.append(
                f'<text x="{_fmt(matrix.origin_x - 8)}" y="{_fmt(matrix.origin_y + offset + 4)}" '
                f'text-anchor="end" fill="{color}" font-size="11px">{label}</text>'
            )
            column_x = matrix.origin_x + offset
            column_y = matrix.origin_y - 8
            parts.append(
                f'<text x="{_fmt(column_x)}" y="{_fmt(column_y)}" text-anchor="start" '
                f'transform="rotate(-60 {_fmt(column_x)} {_fmt(column_y)})" '
                f'fill="{color}" font-size="11px">{label}</text>'
            )

        for row, row_id in enumerate(matrix.ids):
            row_component = by_id[row_id]
            for column in range(len(matrix.ids)):
                linked = (row, column) in matrix.edges
                fill = get_type_color(row_component.type) if linked else "#1F2937"
                stroke = get_risk_color(row_component.risk_level) if linked else "#374151"
                parts.append(
                    f'<rect x="{_fmt(matrix.origin_x + column * cell)}" '
                    f'y="{_fmt(matrix.origin_y + row * cell)}" '
                    f'width="{_fmt(cell)}" height="{_fmt(cell)}" '
                    f'fill="{fill}" stroke="{stroke}" stroke-width="1" />'
                )

        if not matrix.ids:
            parts.append(
                f'<text x="{_fmt(width / 2)}" y="{_fmt(height / 2)}" text-anchor="middle" '
                f'fill="#9CA3AF" font-size="14px">No components to display</text>'
            )

        parts.append("</svg>")
        return "\n".join(parts)

    def render_statistics(self, stats: ComponentStatistics) -> str:
        """Render the statistics panel."""
        rows = [
            ("Total components", stats.total, ""),
            ("Visible", stats.visible, ""),
            ("Applications", stats.applications, ""),
            ("Libraries", stats.libraries, ""),
            ("Dependencies", stats.dependencies, ""),
            ("High risk", stats.high_risk, " high-risk"),
            ("Medium risk", stats.medium_risk, " medium-risk"),
            ("Low risk", stats.low_risk, " low-risk"),
        ]
        items = "\n".join(
            f'<div class="stat-item"><span class="stat-label">{label}:</span> '
            f'<span class="stat-value{css_class}">{value}</span></div>'
            for label, value, css_class in rows
        )
        return (
            '<div class="statistics">\n<h3>Component Statistics</h3>\n'
            f'<div class="stats-grid">\n{items}\n</div>\n</div>'
        )

    def render_legend(self) -> str:
        """Render the static legend describing colors and visibility states."""
        library = get_type_color(ComponentType.LIBRARY)
        dimmed_library = get_type_color(ComponentType.LIBRARY, DIMMED_OPACITY)
        sections = [
            (
                "Component Types",
                [
                    (f"background-color: {get_type_color(ctype)};", ctype.value.title())
                    for ctype in ComponentType
                ],
            ),
            (
                "Risk Levels",
                [
                    (
                        f"background-color: {get_risk_color(level)}; border-radius: 50%;",
                        level.value.title(),
                    )
                    for level in RiskLevel
                ],
            ),
            (
                "Visibility",
                [
                    (f"background-color: {library};", "Matches filter"),
                    (
                        f"background-color: {dimmed_library}; border: 1px dashed #6B7280;",
                        "Hidden by filter",
                    ),
                ],
            ),
        ]

        body = "\n".join(
            f'<div class="legend-section"><h4>{title}</h4><div class="legend-items">'
            + "".join(
                f'<div class="legend-item"><div class="legend-color" style="{style}"></div>'
                f"<span>{label}</span></div>"
                for style, label in entries
            )
            + "</div></div>"
            for title, entries in sections
        )
        return f'<div class="legend">\n<h3>Legend</h3>\n{body}\n</div>'


def export_document(
    forest: Sequence[TreeNode],
    components: Sequence[ComponentModel],
    options: ExportOptions | None = None,
    visible_ids: Collection[str] | None = None,
    generated_at: datetime | None = None,
    config: LayoutConfig | None = None,
) -> str:
    """Export a positioned forest as an HTML document.

    See TreeExporter.export_document.
    """
    return TreeExporter(config).export_document(
        forest, components, options, visible_ids=visible_ids, generated_at=generated_at
    )


class TransientDocument:
    """Temporary on-disk copy of an exported document.

    Used as a context manager; the file is closed and removed when the
    block exits, whether or not it raised.
    """

    def __init__(self, content: str, suffix: str = ".html"):
        self.content = content
        self.suffix = suffix
        self.path: Path | None = None
        self._released = False

    def __enter__(self) -> "TransientDocument":
        fd, name = tempfile.mkstemp(prefix="sbom-export-", suffix=self.suffix)
        self.path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self.content)
        except BaseException:
            self.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Remove the temporary file. Later calls do nothing."""
        if self._released:
            return
        self._released = True
        if self.path is not None:
            self.path.unlink(missing_ok=True)


def default_filename(today: datetime | None = None) -> str:
    """File name used for downloads, e.g. ``dependency-tree-2024-05-01.html``."""
    return f"dependency-tree-{(today or datetime.now()).strftime('%Y-%m-%d')}.html"


def save_to_directory(output_dir: Path, filename: str | None = None) -> Callable[[Path], Path]:
    """Build a save action that copies the document into output_dir."""

    def save(source: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        destination = output_dir / (filename or default_filename())
        shutil.copyfile(source, destination)
        return destination

    return save


def download_html(
    forest: Sequence[TreeNode],
    components: Sequence[ComponentModel],
    options: ExportOptions | None = None,
    save_action: Callable[[Path], Path | None] | None = None,
    output_dir: Path | str = ".",
    visible_ids: Collection[str] | None = None,
    config: LayoutConfig | None = None,
) -> Path | None:
    """Export a document and hand it to a save action.

    The document is written to a transient file, the save action is invoked
    with its path, and the transient file is released on every exit path.

    Args:
        forest: Positioned forest
        components: Canonical component list
        options: Export flags
        save_action: Receives the transient file path (default: copy into output_dir)
        output_dir: Target directory for the default save action
        visible_ids: Ids passing the active filter
        config: Geometry the forest was laid out with

    Returns:
        Whatever the save action returns (the saved path by default)

    Raises:
        ExportError: If the save action fails
    """
    html = export_document(forest, components, options, visible_ids=visible_ids, config=config)
    action = save_action or save_to_directory(Path(output_dir))

    with TransientDocument(html) as document:
        try:
            saved = action(document.path)
        except OSError as e:
            raise ExportError(
                f"Failed to save exported document: {e}",
                create_error_context(output_dir=str(output_dir)),
            ) from e

    if saved is not None:
        logger.info(f"Exported dependency tree to {saved}")
    return saved
