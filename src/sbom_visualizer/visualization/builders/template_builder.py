"""
Template builder for standalone SBOM export documents.

The page shell lives here as a placeholder template; stylesheet content is
loaded from the package assets and inlined so the document has no external
references.
"""

import logging
import re
from html import escape
from pathlib import Path
from typing import Any

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{TITLE}}</title>
    <style>
{{CSS}}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{{TITLE}}</h1>
            <p>{{DESCRIPTION}}</p>
{{EXPORTED_AT}}
        </div>

        <div class="diagram-container">
{{SVG}}
        </div>
{{CONTENT_GRID}}
        <div class="footer">
            <p>{{FOOTER}}</p>
        </div>
    </div>
</body>
</html>
"""

GENERATOR_NAME = "SBOM Visualizer"
PLACEHOLDER_PATTERN = re.compile(r"\{\{[A-Z_]+\}\}")


class TemplateBuilder:
    """Builds the export page around a rendered SVG graphic."""

    def __init__(self):
        """Initialize template builder."""
        self.logger = logging.getLogger(__name__)
        self.assets_dir = Path(__file__).parent.parent / "assets"
        self.css_files = ["css/export.css"]
        self._css_cache: str | None = None

    def _load_css_files(self) -> str:
        """Load and combine CSS files."""
        if self._css_cache is not None:
            return self._css_cache

        css_content = []
        for css_file in self.css_files:
            css_path = self.assets_dir / css_file
            if css_path.exists():
                with open(css_path, encoding="utf-8") as f:
                    css_content.append(f.read())
            else:
                self.logger.warning(f"CSS file not found: {css_path}")

        self._css_cache = "\n\n".join(css_content)
        return self._css_cache

    def build_document(self, template_data: dict[str, Any]) -> str:
        """Build a complete HTML document.

        Args:
            template_data: Keys ``title``, ``description``, ``svg`` and the
                optional ``statistics_html``, ``legend_html`` and ``exported_at``

        Returns:
            Complete HTML document string
        """
        title = escape(template_data.get("title", ""))
        exported_at = template_data.get("exported_at")

        panels = [
            template_data.get("statistics_html") or "",
            template_data.get("legend_html") or "",
        ]
        panels = [panel for panel in panels if panel]
        content_grid = ""
        if panels:
            content_grid = (
                '\n        <div class="content-grid">\n'
                + "\n".join(panels)
                + "\n        </div>\n"
            )

        footer = f"Generated by {GENERATOR_NAME}"
        if exported_at:
            footer += f" &#8226; {escape(exported_at)}"

        replacements = {
            "{{CSS}}": self._load_css_files(),
            "{{TITLE}}": title,
            "{{DESCRIPTION}}": escape(template_data.get("description", "")),
            "{{EXPORTED_AT}}": (
                f"            <p>Exported: {escape(exported_at)}</p>" if exported_at else ""
            ),
            "{{SVG}}": template_data.get("svg", ""),
            "{{CONTENT_GRID}}": content_grid,
            "{{FOOTER}}": footer,
        }

        # Single pass; inserted values are never rescanned
        return PLACEHOLDER_PATTERN.sub(lambda match: replacements[match.group(0)], PAGE_TEMPLATE)
