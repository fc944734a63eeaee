"""
Core data models for SBOM visualizer using simple dataclasses.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ComponentType(str, Enum):
    """Component roles within an SBOM."""

    APPLICATION = "application"
    LIBRARY = "library"
    DEPENDENCY = "dependency"

    @classmethod
    def parse(cls, value: Any) -> "ComponentType":
        """Map a raw type string onto a known component type.

        Anything that is neither an application nor a library is treated as
        a plain dependency.
        """
        if isinstance(value, ComponentType):
            return value
        text = str(value or "").strip().lower()
        if text == cls.APPLICATION.value:
            return cls.APPLICATION
        if text == cls.LIBRARY.value:
            return cls.LIBRARY
        return cls.DEPENDENCY


class RiskLevel(str, Enum):
    """Ordered risk levels (low < medium < high)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

    @classmethod
    def parse(cls, value: Any) -> "RiskLevel":
        """Map a raw risk string onto a risk level, defaulting to low."""
        if isinstance(value, RiskLevel):
            return value
        text = str(value or "").strip().lower()
        for level in cls:
            if level.value == text:
                return level
        return cls.LOW

    @classmethod
    def highest(cls, first: "RiskLevel", second: "RiskLevel") -> "RiskLevel":
        return first if first.rank >= second.rank else second


_RISK_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


@dataclass
class VulnerabilityModel:
    """Vulnerability already attached to a component."""

    id: str
    severity: str = "low"
    description: str = ""
    cve_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VulnerabilityModel":
        return cls(
            id=str(data.get("id", "")),
            severity=str(data.get("severity") or "low"),
            description=str(data.get("description") or ""),
            cve_id=data.get("cveId") or data.get("cve_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "severity": self.severity,
            "description": self.description,
        }
        if self.cve_id:
            data["cveId"] = self.cve_id
        return data


@dataclass
class ComponentModel:
    """A single SBOM component and its outgoing dependency edges."""

    id: str
    name: str = ""
    version: str = ""
    type: ComponentType = ComponentType.LIBRARY
    license: str = ""
    description: str = ""
    publisher: str = ""
    risk_level: RiskLevel = RiskLevel.LOW
    cve_count: int = 0
    dependencies: list[str] = field(default_factory=list)
    vulnerabilities: list[VulnerabilityModel] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """Deduplication key shared by every occurrence of this component."""
        return f"{self.name}@{self.version}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComponentModel":
        """Build a component from its camelCase JSON representation."""
        name = str(data.get("name") or "")
        return cls(
            id=str(data.get("id") or name),
            name=name,
            version=str(data.get("version") or ""),
            type=ComponentType.parse(data.get("type")),
            license=str(data.get("license") or ""),
            description=str(data.get("description") or ""),
            publisher=str(data.get("publisher") or ""),
            risk_level=RiskLevel.parse(data.get("riskLevel", data.get("risk_level"))),
            cve_count=max(0, int(data.get("cveCount", data.get("cve_count")) or 0)),
            dependencies=[str(dep) for dep in data.get("dependencies") or []],
            vulnerabilities=[
                VulnerabilityModel.from_dict(vuln)
                for vuln in data.get("vulnerabilities") or []
                if isinstance(vuln, dict)
            ],
            metadata=dict(data.get("metadata") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON representation."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "type": self.type.value,
            "license": self.license,
            "description": self.description,
            "riskLevel": self.risk_level.value,
            "cveCount": self.cve_count,
            "dependencies": list(self.dependencies),
        }
        if self.publisher:
            data["publisher"] = self.publisher
        if self.vulnerabilities:
            data["vulnerabilities"] = [vuln.to_dict() for vuln in self.vulnerabilities]
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data


@dataclass(eq=False)
class TreeNode:
    """One occurrence of a component at a specific position in a tree path.

    Nodes compare by identity: a component reached through two paths yields
    two distinct nodes.
    """

    id: str
    name: str
    type: ComponentType
    risk_level: RiskLevel
    level: int = 0
    x: float = 0.0
    y: float = 0.0
    children: list["TreeNode"] = field(default_factory=list)
    _parent: "weakref.ReferenceType[TreeNode] | None" = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def from_component(cls, component: ComponentModel, level: int) -> "TreeNode":
        return cls(
            id=component.id,
            name=component.name,
            type=component.type,
            risk_level=component.risk_level,
            level=level,
        )

    @property
    def parent(self) -> "TreeNode | None":
        return self._parent() if self._parent is not None else None

    def add_child(self, child: "TreeNode") -> None:
        child._parent = weakref.ref(self)
        self.children.append(child)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self):
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass
class TreeEdge:
    """A drawn parent→child connection with endpoint coordinates."""

    source: str
    target: str
    source_x: float
    source_y: float
    target_x: float
    target_y: float


@dataclass
class LayoutConfig:
    """Geometry used by the tree layout and the exported drawing."""

    base_offset: float = 100.0
    level_gap: float = 250.0
    node_width: float = 180.0
    node_height: float = 80.0
    sibling_gap: float = 20.0
    tree_gap: float = 50.0
    canvas_margin: float = 100.0

    @property
    def row_height(self) -> float:
        return self.node_height + self.sibling_gap


@dataclass
class ExportOptions:
    """Flags controlling the exported document."""

    title: str = "Dependency Tree Export"
    description: str = "SBOM dependency tree export"
    include_metadata: bool = True
    include_legend: bool = True
    include_statistics: bool = True
    matrix_mode: bool = False


@dataclass
class FilterState:
    """Active component filters; empty selections match everything."""

    types: list[str] = field(default_factory=list)
    licenses: list[str] = field(default_factory=list)
    risk_levels: list[str] = field(default_factory=list)
    search_term: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.types or self.licenses or self.risk_levels or self.search_term)


@dataclass
class ComponentStatistics:
    """Counts reported in the statistics block of an export."""

    total: int = 0
    visible: int = 0
    applications: int = 0
    libraries: int = 0
    dependencies: int = 0
    high_risk: int = 0
    medium_risk: int = 0
    low_risk: int = 0


@dataclass
class ValidationResult:
    """Outcome of a strict SBOM schema check."""

    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class GenerationOptions:
    """Options handed to an upstream SBOM generator."""

    project_type: str = ""
    include_dev_dependencies: bool = True
    include_optional_dependencies: bool = True
    output_format: str = "json"
    include_metadata: bool = True


@dataclass
class GenerationResult:
    """Result of an upstream generation: components on success, a message otherwise."""

    success: bool
    components: list[ComponentModel] = field(default_factory=list)
    error: str | None = None
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
