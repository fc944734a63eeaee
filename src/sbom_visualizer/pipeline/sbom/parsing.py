"""
Reading SBOM documents into component lists.

Two input shapes are accepted: a CycloneDX JSON document, or a plain JSON
array of components in the visualizer's own camelCase format.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ...shared.exceptions import (
    SBOMValidationError,
    create_error_context,
    wrap_external_error,
)
from ...shared.models import (
    ComponentModel,
    ComponentType,
    RiskLevel,
    ValidationResult,
    VulnerabilityModel,
)
from .merging import UNKNOWN_LICENSE

logger = logging.getLogger(__name__)

REQUIRED_COMPONENT_FIELDS = ("name",)


def validate_sbom_document(data: Any) -> ValidationResult:
    """Check that data is a structurally valid CycloneDX document.

    Args:
        data: Decoded JSON value

    Returns:
        ValidationResult listing every problem found
    """
    if not isinstance(data, dict):
        return ValidationResult(False, ["Document must be a JSON object"])

    errors: list[str] = []
    if not isinstance(data.get("bomFormat"), str) or not data.get("bomFormat"):
        errors.append("Missing 'bomFormat'")

    components = data.get("components")
    if components is None:
        errors.append("Missing 'components'")
    elif not isinstance(components, list):
        errors.append("'components' must be a list")
    else:
        for index, component in enumerate(components):
            if not isinstance(component, dict):
                errors.append(f"components[{index}] must be an object")
                continue
            for field_name in REQUIRED_COMPONENT_FIELDS:
                if not isinstance(component.get(field_name), str):
                    errors.append(f"components[{index}] missing string '{field_name}'")
            if "version" in component and not isinstance(component["version"], str):
                errors.append(f"components[{index}] 'version' must be a string")
            licenses = component.get("licenses")
            if licenses is not None and not isinstance(licenses, list):
                errors.append(f"components[{index}].licenses must be a list")

    dependencies = data.get("dependencies")
    if dependencies is not None:
        if not isinstance(dependencies, list):
            errors.append("'dependencies' must be a list")
        else:
            for index, entry in enumerate(dependencies):
                if not isinstance(entry, dict) or not isinstance(entry.get("ref"), str):
                    errors.append(f"dependencies[{index}] missing string 'ref'")
                elif not isinstance(entry.get("dependsOn", []), list):
                    errors.append(f"dependencies[{index}].dependsOn must be a list")

    return ValidationResult(not errors, errors)


def _first_license(component: dict[str, Any]) -> str:
    for entry in component.get("licenses") or []:
        if not isinstance(entry, dict):
            continue
        license_info = entry.get("license")
        if isinstance(license_info, dict):
            name = license_info.get("id") or license_info.get("name")
            if name:
                return str(name)
        if entry.get("expression"):
            return str(entry["expression"])
    return UNKNOWN_LICENSE


def assess_risk(name: str, version: str, license_name: str) -> RiskLevel:
    """Heuristic risk level from license and release maturity.

    GPL-family or unknown licenses are medium risk; deprecated packages and
    alpha/beta releases are high risk.
    """
    risk = RiskLevel.LOW
    if "GPL" in license_name or license_name == UNKNOWN_LICENSE:
        risk = RiskLevel.MEDIUM
    if "deprecated" in name.lower() or "alpha" in version or "beta" in version:
        risk = RiskLevel.HIGH
    return risk


def _component_metadata(component: dict[str, Any]) -> dict[str, Any]:
    metadata: dict[str, Any] = {"source": "cyclonedx"}
    if component.get("purl"):
        metadata["purl"] = component["purl"]
    if component.get("group"):
        metadata["groupId"] = component["group"]
    for reference in component.get("externalReferences") or []:
        if not isinstance(reference, dict):
            continue
        ref_type = reference.get("type")
        if ref_type == "website" and "homepage" not in metadata:
            metadata["homepage"] = reference.get("url")
        elif ref_type == "vcs" and "repository" not in metadata:
            metadata["repository"] = reference.get("url")
    return metadata


def parse_sbom_document(data: dict[str, Any]) -> list[ComponentModel]:
    """Convert a CycloneDX document into components.

    Args:
        data: Decoded CycloneDX JSON document

    Returns:
        Components in document order

    Raises:
        SBOMValidationError: If the document fails the schema check
    """
    result = validate_sbom_document(data)
    if not result.valid:
        raise SBOMValidationError("Invalid SBOM document", errors=result.errors)

    dependency_map: dict[str, list[str]] = {}
    for entry in data.get("dependencies") or []:
        dependency_map[entry["ref"]] = [str(dep) for dep in entry.get("dependsOn") or []]

    components: list[ComponentModel] = []
    for raw in data["components"]:
        name = raw["name"]
        version = raw.get("version", "")
        component_id = str(raw.get("bom-ref") or name)
        component_type = ComponentType.parse(raw.get("type"))
        license_name = _first_license(raw)
        vulnerabilities = [
            VulnerabilityModel.from_dict(vuln)
            for vuln in raw.get("vulnerabilities") or []
            if isinstance(vuln, dict)
        ]

        components.append(
            ComponentModel(
                id=component_id,
                name=name,
                version=version,
                type=component_type,
                license=license_name,
                description=raw.get("description") or f"{component_type.value} component",
                publisher=raw.get("publisher") or raw.get("author") or "",
                risk_level=assess_risk(name, version, license_name),
                cve_count=len(vulnerabilities),
                dependencies=dependency_map.get(component_id, []),
                vulnerabilities=vulnerabilities,
                metadata=_component_metadata(raw),
            )
        )

    logger.debug(f"Parsed {len(components)} components from CycloneDX document")
    return components


def parse_component_list(data: Any) -> list[ComponentModel]:
    """Convert either a CycloneDX document or a plain component array.

    Args:
        data: Decoded JSON value

    Returns:
        Components in input order

    Raises:
        SBOMValidationError: If the value is neither shape
    """
    if isinstance(data, list):
        errors = [
            f"[{index}] must be an object with an 'id' or 'name'"
            for index, item in enumerate(data)
            if not isinstance(item, dict) or not (item.get("id") or item.get("name"))
        ]
        if errors:
            raise SBOMValidationError("Invalid component list", errors=errors)
        return [ComponentModel.from_dict(item) for item in data]

    return parse_sbom_document(data)


def load_component_list(path: Path) -> list[ComponentModel]:
    """Read a component list from a JSON file.

    Args:
        path: CycloneDX or component-array JSON file

    Returns:
        Components in file order

    Raises:
        SBOMParseError: If the file cannot be read or decoded
        SBOMValidationError: If the content has the wrong shape
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise wrap_external_error(e, create_error_context(path=str(path))) from e

    try:
        return parse_component_list(data)
    except SBOMValidationError as e:
        e.context.setdefault("path", str(path))
        raise


def write_component_list(components: list[ComponentModel], path: Path) -> Path:
    """Write components as a JSON array.

    Args:
        components: Components to serialize
        path: Destination file

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([component.to_dict() for component in components], f, indent=2)
    return path

