"""
Pytest configuration and shared fixtures for SBOM Visualizer tests.
"""

import json
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from sbom_visualizer.shared.models import ComponentModel, ComponentType, RiskLevel


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_components() -> list[ComponentModel]:
    """Return a small canonical set: one app, two libraries, one dependency."""
    return [
        ComponentModel(
            id="app-1",
            name="web-app",
            version="1.0.0",
            type=ComponentType.APPLICATION,
            license="MIT",
            risk_level=RiskLevel.LOW,
            dependencies=["lib-1", "lib-2"],
        ),
        ComponentModel(
            id="lib-1",
            name="http-client",
            version="2.3.1",
            type=ComponentType.LIBRARY,
            license="GPL-3.0",
            risk_level=RiskLevel.MEDIUM,
            dependencies=["dep-1"],
        ),
        ComponentModel(
            id="lib-2",
            name="legacy-parser",
            version="0.9.0-beta",
            type=ComponentType.LIBRARY,
            license="Apache-2.0",
            risk_level=RiskLevel.HIGH,
            cve_count=2,
        ),
        ComponentModel(
            id="dep-1",
            name="tls-helper",
            version="1.1.0",
            type=ComponentType.DEPENDENCY,
            license="MIT",
            risk_level=RiskLevel.LOW,
        ),
    ]


@pytest.fixture
def sample_sbom_data() -> dict[str, Any]:
    """Return sample SBOM data in CycloneDX format."""
    return {
        "bomFormat": "CycloneDX",
        "specVersion": "1.4",
        "serialNumber": "urn:uuid:test-1234",
        "version": 1,
        "metadata": {
            "timestamp": "2024-01-01T00:00:00Z",
            "tools": [{"name": "test-tool", "version": "1.0.0"}],
        },
        "components": [
            {
                "bom-ref": "pkg:pypi/requests@2.31.0",
                "type": "library",
                "name": "requests",
                "version": "2.31.0",
                "purl": "pkg:pypi/requests@2.31.0",
                "licenses": [{"license": {"id": "Apache-2.0"}}],
            },
            {
                "bom-ref": "pkg:pypi/urllib3@2.0.0",
                "type": "library",
                "name": "urllib3",
                "version": "2.0.0",
                "purl": "pkg:pypi/urllib3@2.0.0",
                "licenses": [{"license": {"id": "MIT"}}],
            },
            {
                "bom-ref": "pkg:pypi/certifi@2023.7.22",
                "type": "library",
                "name": "certifi",
                "version": "2023.7.22",
                "purl": "pkg:pypi/certifi@2023.7.22",
            },
        ],
        "dependencies": [
            {
                "ref": "pkg:pypi/requests@2.31.0",
                "dependsOn": ["pkg:pypi/urllib3@2.0.0", "pkg:pypi/certifi@2023.7.22"],
            }
        ],
    }


@pytest.fixture
def sample_sbom_file(temp_dir: Path, sample_sbom_data: dict[str, Any]) -> Path:
    """Create a sample SBOM file and return its path."""
    sbom_path = temp_dir / "test_sbom.json"
    with open(sbom_path, "w") as f:
        json.dump(sample_sbom_data, f)
    return sbom_path


@pytest.fixture
def sample_component_file(temp_dir: Path, sample_components: list[ComponentModel]) -> Path:
    """Write the sample components as a plain JSON array and return its path."""
    list_path = temp_dir / "components.json"
    with open(list_path, "w") as f:
        json.dump([component.to_dict() for component in sample_components], f)
    return list_path
