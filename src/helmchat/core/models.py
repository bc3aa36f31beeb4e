#!/usr/bin/env python3
"""
HELMCHAT CORE MODELS
--------------------
Defines the fundamental data structures shared by the parser, the
dispatch engine, the chart scaffolder and the helm invoker.

Author: HelmChat Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Intent(str, Enum):
    """The symbolic action a command is classified as requesting."""
    CREATE_CHART = "CREATE_CHART"
    UPDATE_CHART = "UPDATE_CHART"
    SCAN_CHART = "SCAN_CHART"
    INSTALL_CHART = "INSTALL_CHART"
    UNINSTALL_CHART = "UNINSTALL_CHART"
    LIST_RELEASES = "LIST_RELEASES"
    GET_STATUS = "GET_STATUS"
    UNKNOWN = "UNKNOWN"


class ResourceType(str, Enum):
    """Kubernetes kinds a generated chart can carry."""
    DEPLOYMENT = "Deployment"
    SERVICE = "Service"
    INGRESS = "Ingress"
    CONFIG_MAP = "ConfigMap"
    SECRET = "Secret"
    PERSISTENT_VOLUME_CLAIM = "PersistentVolumeClaim"
    HORIZONTAL_POD_AUTOSCALER = "HorizontalPodAutoscaler"


class ServiceType(str, Enum):
    CLUSTER_IP = "ClusterIP"
    LOAD_BALANCER = "LoadBalancer"
    NODE_PORT = "NodePort"


class ChartType(str, Enum):
    APPLICATION = "application"
    LIBRARY = "library"


@dataclass(frozen=True)
class ServiceValues:
    """The `service:` block of a values override."""
    type: Optional[ServiceType] = None
    port: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.type is not None:
            out["type"] = self.type.value
        if self.port is not None:
            out["port"] = self.port
        return out


@dataclass(frozen=True)
class ResourceRequirements:
    """
    Reserved slot for cpu/memory requests and limits.

    Quantities mentioned in a command are recognised but never converted,
    so both mappings stay empty.
    """
    requests: Dict[str, str] = field(default_factory=dict)
    limits: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"requests": dict(self.requests), "limits": dict(self.limits)}


@dataclass(frozen=True)
class ChartValues:
    """Configuration-value overrides pulled out of a command."""
    replica_count: Optional[int] = None
    service: Optional[ServiceValues] = None
    resources: Optional[ResourceRequirements] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.replica_count is not None:
            out["replicaCount"] = self.replica_count
        if self.service is not None:
            out["service"] = self.service.to_dict()
        if self.resources is not None:
            out["resources"] = self.resources.to_dict()
        return out


@dataclass(frozen=True)
class ParameterBag:
    """
    Sparse set of fields extracted from a command.

    Every field is optional: ``None`` means the command never mentioned it,
    which is different from an explicitly empty value.
    """
    chart_name: Optional[str] = None
    release_name: Optional[str] = None
    namespace: Optional[str] = None
    version: Optional[str] = None
    resources: Optional[Tuple[ResourceType, ...]] = None
    values: Optional[ChartValues] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> Dict[str, Any]:
        """Renders the bag with camelCase keys, omitting absent fields."""
        out: Dict[str, Any] = {}
        if self.chart_name is not None:
            out["chartName"] = self.chart_name
        if self.release_name is not None:
            out["releaseName"] = self.release_name
        if self.namespace is not None:
            out["namespace"] = self.namespace
        if self.version is not None:
            out["version"] = self.version
        if self.resources is not None:
            out["resources"] = [r.value for r in self.resources]
        if self.values is not None:
            out["values"] = self.values.to_dict()
        return out


@dataclass(frozen=True)
class ParsedCommand:
    """One classified command: its intent, parameters and the raw input."""
    intent: Intent
    params: ParameterBag
    original_command: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.intent.value,
            "params": self.params.to_dict(),
            "originalCommand": self.original_command,
        }


@dataclass
class ChartConfig:
    """Everything the scaffolder needs to emit a chart."""
    name: str = "my-app"
    version: str = "0.1.0"
    description: str = "A Helm chart for Kubernetes"
    app_version: str = "1.0.0"
    type: ChartType = ChartType.APPLICATION
    service_type: ServiceType = ServiceType.CLUSTER_IP
    replicas: int = 1
    port: int = 80


@dataclass
class ChartValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class HelmResult:
    """Outcome of one helm invocation. Success means exit status 0."""
    success: bool
    output: str = ""
    error: Optional[str] = None
