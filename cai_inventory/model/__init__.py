"""Data models for cai-inventory."""

from .inventory import (
    ContentType,
    ExportRequest,
    InventoryConfig,
    new_inventory,
    resolve_destination_uri,
    resolve_parent_path,
)
from .result import ExportJobResult, ExportSummary, JobStatus
from .sql_instance import SQLInstanceManifest, load_manifest

__all__ = [
    "ContentType",
    "ExportRequest",
    "InventoryConfig",
    "new_inventory",
    "resolve_destination_uri",
    "resolve_parent_path",
    "ExportJobResult",
    "ExportSummary",
    "JobStatus",
    "SQLInstanceManifest",
    "load_manifest",
]
