"""
Tests for the export page template builder.
"""

from sbom_visualizer.visualization.builders.template_builder import TemplateBuilder


class TestTemplateBuilder:
    """Tests for TemplateBuilder.build_document."""

    def test_inlines_css(self) -> None:
        html = TemplateBuilder().build_document({"title": "T", "svg": "<svg></svg>"})

        assert ".content-grid" in html
        assert "{{" not in html

    def test_inserted_values_not_rescanned(self) -> None:
        """Test placeholder text inside values is left alone."""
        html = TemplateBuilder().build_document(
            {"title": "T", "svg": "<svg><text>{{TITLE}}</text></svg>"}
        )
        assert "<text>{{TITLE}}</text>" in html

    def test_footer_without_timestamp(self) -> None:
        html = TemplateBuilder().build_document({"title": "T", "svg": ""})

        assert "<p>Generated by SBOM Visualizer</p>" in html
        assert "Exported:" not in html

    def test_footer_with_timestamp(self) -> None:
        html = TemplateBuilder().build_document(
            {"title": "T", "svg": "", "exported_at": "2024-05-01 12:30:00"}
        )
        assert "Generated by SBOM Visualizer &#8226; 2024-05-01 12:30:00" in html
        assert "<p>Exported: 2024-05-01 12:30:00</p>" in html

    def test_panels_grouped(self) -> None:
        html = TemplateBuilder().build_document(
            {"title": "T", "svg": "", "statistics_html": "<div>stats</div>", "legend_html": ""}
        )
        assert 'class="content-grid"' in html
        assert "<div>stats</div>" in html

    def test_css_cached(self) -> None:
        builder = TemplateBuilder()
        assert builder._load_css_files() is builder._load_css_files()
