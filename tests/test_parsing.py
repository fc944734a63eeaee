"""
Tests for reading and validating SBOM documents.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from sbom_visualizer.pipeline.sbom.parsing import (
    assess_risk,
    load_component_list,
    parse_component_list,
    parse_sbom_document,
    validate_sbom_document,
    write_component_list,
)
from sbom_visualizer.shared.exceptions import SBOMParseError, SBOMValidationError
from sbom_visualizer.shared.models import ComponentType, RiskLevel


class TestValidateSbomDocument:
    """Tests for validate_sbom_document."""

    def test_valid_document(self, sample_sbom_data: dict[str, Any]) -> None:
        """Test a well-formed CycloneDX document passes."""
        result = validate_sbom_document(sample_sbom_data)
        assert result.valid
        assert result.errors == []

    def test_not_an_object(self) -> None:
        """Test non-object documents fail."""
        result = validate_sbom_document("nope")
        assert not result.valid

    def test_reports_every_problem(self) -> None:
        """Test all structural problems are listed."""
        result = validate_sbom_document(
            {
                "components": [{"version": "1"}, "b", {"name": "c", "version": 1, "licenses": {}}],
                "dependencies": [{"dependsOn": []}],
            }
        )

        assert not result.valid
        assert "Missing 'bomFormat'" in result.errors
        assert "components[0] missing string 'name'" in result.errors
        assert "components[1] must be an object" in result.errors
        assert "components[2] 'version' must be a string" in result.errors
        assert "components[2].licenses must be a list" in result.errors
        assert "dependencies[0] missing string 'ref'" in result.errors

    def test_missing_components(self) -> None:
        """Test a document without components fails."""
        result = validate_sbom_document({"bomFormat": "CycloneDX"})
        assert result.errors == ["Missing 'components'"]


class TestParseSbomDocument:
    """Tests for parse_sbom_document."""

    def test_components_and_edges(self, sample_sbom_data: dict[str, Any]) -> None:
        """Test components carry their dependency edges."""
        components = parse_sbom_document(sample_sbom_data)

        assert [c.name for c in components] == ["requests", "urllib3", "certifi"]
        requests = components[0]
        assert requests.id == "pkg:pypi/requests@2.31.0"
        assert requests.type == ComponentType.LIBRARY
        assert requests.license == "Apache-2.0"
        assert requests.dependencies == [
            "pkg:pypi/urllib3@2.0.0",
            "pkg:pypi/certifi@2023.7.22",
        ]
        assert requests.metadata["purl"] == "pkg:pypi/requests@2.31.0"

    def test_missing_license_is_unknown(self, sample_sbom_data: dict[str, Any]) -> None:
        """Test components without a license get 'Unknown' and medium risk."""
        certifi = parse_sbom_document(sample_sbom_data)[2]
        assert certifi.license == "Unknown"
        assert certifi.risk_level == RiskLevel.MEDIUM

    def test_generic_description(self, sample_sbom_data: dict[str, Any]) -> None:
        """Test a missing description becomes '<type> component'."""
        assert parse_sbom_document(sample_sbom_data)[0].description == "library component"

    def test_cve_count_from_vulnerabilities(self) -> None:
        """Test CVE count equals the number of listed vulnerabilities."""
        data = {
            "bomFormat": "CycloneDX",
            "components": [
                {
                    "name": "vuln-lib",
                    "version": "1.0.0",
                    "vulnerabilities": [{"id": "V-1"}, {"id": "V-2"}],
                }
            ],
        }
        component = parse_sbom_document(data)[0]
        assert component.cve_count == 2
        assert component.id == "vuln-lib"

    def test_unversioned_component(self) -> None:
        """Test components without a version are accepted with an empty version."""
        data = {
            "bomFormat": "CycloneDX",
            "components": [{"type": "file", "name": "LICENSE.txt"}],
        }
        assert validate_sbom_document(data).valid

        component = parse_sbom_document(data)[0]
        assert component.id == "LICENSE.txt"
        assert component.version == ""
        assert component.type == ComponentType.DEPENDENCY

    def test_invalid_document_raises(self) -> None:
        """Test invalid documents raise with the problem list."""
        with pytest.raises(SBOMValidationError) as exc_info:
            parse_sbom_document({"components": []})
        assert "Missing 'bomFormat'" in exc_info.value.errors


class TestAssessRisk:
    """Tests for the risk heuristic."""

    def test_permissive_license_is_low(self) -> None:
        assert assess_risk("requests", "2.31.0", "Apache-2.0") == RiskLevel.LOW

    def test_copyleft_or_unknown_is_medium(self) -> None:
        assert assess_risk("readline", "8.0", "GPL-3.0") == RiskLevel.MEDIUM
        assert assess_risk("mystery", "1.0", "Unknown") == RiskLevel.MEDIUM

    def test_prerelease_or_deprecated_is_high(self) -> None:
        assert assess_risk("parser", "2.0.0-beta", "MIT") == RiskLevel.HIGH
        assert assess_risk("deprecated-utils", "1.0", "GPL-2.0") == RiskLevel.HIGH


class TestParseComponentList:
    """Tests for parse_component_list."""

    def test_plain_array(self) -> None:
        """Test a plain component array is accepted."""
        components = parse_component_list(
            [{"id": "a", "name": "a", "version": "1", "dependencies": ["b"]}]
        )
        assert components[0].dependencies == ["b"]

    def test_plain_array_rejects_bad_items(self) -> None:
        """Test array items need an id or name."""
        with pytest.raises(SBOMValidationError) as exc_info:
            parse_component_list([{"version": "1"}, 3])
        assert len(exc_info.value.errors) == 2


class TestFileIO:
    """Tests for loading and writing component lists."""

    def test_load_cyclonedx_file(self, sample_sbom_file: Path) -> None:
        """Test loading a CycloneDX file."""
        assert len(load_component_list(sample_sbom_file)) == 3

    def test_load_missing_file(self, temp_dir: Path) -> None:
        """Test a missing file raises SBOMParseError with the path."""
        missing = temp_dir / "missing.json"
        with pytest.raises(SBOMParseError) as exc_info:
            load_component_list(missing)
        assert exc_info.value.context["path"] == str(missing)

    def test_load_invalid_json(self, temp_dir: Path) -> None:
        """Test undecodable JSON raises SBOMParseError."""
        broken = temp_dir / "broken.json"
        broken.write_text("{not json")
        with pytest.raises(SBOMParseError):
            load_component_list(broken)

    def test_load_directory(self, temp_dir: Path) -> None:
        """Test a directory path raises SBOMParseError."""
        with pytest.raises(SBOMParseError) as exc_info:
            load_component_list(temp_dir)
        assert exc_info.value.context["path"] == str(temp_dir)

    def test_load_invalid_shape_adds_path(self, temp_dir: Path) -> None:
        """Test shape errors carry the file path."""
        bad = temp_dir / "bad.json"
        bad.write_text(json.dumps({"components": []}))
        with pytest.raises(SBOMValidationError) as exc_info:
            load_component_list(bad)
        assert exc_info.value.context["path"] == str(bad)

    def test_write_then_load(self, temp_dir: Path, sample_components) -> None:
        """Test a written list loads back to the same components."""
        path = write_component_list(sample_components, temp_dir / "out" / "list.json")
        assert load_component_list(path) == sample_components
