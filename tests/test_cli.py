"""
Tests for the command-line interface.
"""

import json
from pathlib import Path

from click.testing import CliRunner

from sbom_visualizer.cli.main import cli


class TestCLI:
    """Tests for the click command group."""

    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("merge", "export", "stats", "validate"):
            assert command in result.output

    def test_merge_to_stdout(self, sample_sbom_file: Path, sample_component_file: Path) -> None:
        result = CliRunner().invoke(
            cli, ["-q", "merge", str(sample_sbom_file), str(sample_component_file)], obj={}
        )

        assert result.exit_code == 0
        merged = json.loads(result.stdout)
        assert len(merged) == 7

    def test_merge_to_file(self, temp_dir: Path, sample_sbom_file: Path) -> None:
        output = temp_dir / "merged.json"
        result = CliRunner().invoke(
            cli, ["merge", str(sample_sbom_file), str(sample_sbom_file), "-o", str(output)], obj={}
        )

        assert result.exit_code == 0
        assert len(json.loads(output.read_text())) == 3

    def test_export(self, temp_dir: Path, sample_component_file: Path) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "export",
                str(sample_component_file),
                "--output-dir",
                str(temp_dir),
                "--output-name",
                "tree",
                "--title",
                "My Tree",
                "--risk",
                "high",
            ],
            obj={},
        )

        assert result.exit_code == 0, result.output
        html = (temp_dir / "tree.html").read_text(encoding="utf-8")
        assert "<title>My Tree</title>" in html
        assert 'stroke-dasharray="5,5"' in html

    def test_export_invalid_input_exits_nonzero(self, temp_dir: Path) -> None:
        bad = temp_dir / "bad.json"
        bad.write_text("{")

        result = CliRunner().invoke(
            cli, ["export", str(bad), "--output-dir", str(temp_dir)], obj={}
        )
        assert result.exit_code == 1

    def test_validate(self, temp_dir: Path, sample_sbom_file: Path) -> None:
        runner = CliRunner()
        assert runner.invoke(cli, ["validate", str(sample_sbom_file)], obj={}).exit_code == 0

        bad = temp_dir / "bad.json"
        bad.write_text(json.dumps({"components": []}))
        assert runner.invoke(cli, ["validate", str(bad)], obj={}).exit_code == 1

    def test_stats(self, sample_component_file: Path) -> None:
        result = CliRunner().invoke(cli, ["stats", str(sample_component_file)], obj={})

        assert result.exit_code == 0
        assert "Applications" in result.output
        assert "High risk" in result.output
