"""Inventory export models."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from ..exceptions import ConstructionError


class ContentType(str, Enum):
    """Exportable inventory content types."""

    RESOURCE = "RESOURCE"
    IAM_POLICY = "IAM_POLICY"


# Export order is fixed: resources first, then IAM policies
EXPORT_ORDER = (ContentType.RESOURCE, ContentType.IAM_POLICY)

DESTINATION_OBJECT_NAMES: Dict[ContentType, str] = {
    ContentType.RESOURCE: "resource_inventory.json",
    ContentType.IAM_POLICY: "iam_inventory.json",
}

GCS_SCHEME = "gs"


class InventoryConfig(BaseModel):
    """Scope and destination of one inventory export run."""

    project_id: Optional[str] = None
    organization_id: Optional[str] = None
    control_project_id: str
    bucket: str

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _default_target_project(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if not data.get("project_id") and not data.get("organization_id"):
                data = {**data, "project_id": data.get("control_project_id")}
        return data

    @field_validator("bucket")
    @classmethod
    def _check_bucket(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("destination bucket must not be empty")
        if value.startswith(f"{GCS_SCHEME}://") or "/" in value:
            raise ValueError(f"expected a bare bucket name, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_scope(self) -> "InventoryConfig":
        if not self.project_id and not self.organization_id:
            raise ValueError("either a project or an organization must be set")
        return self

    @property
    def parent(self) -> str:
        """Parent path of the export scope."""
        return resolve_parent_path(self)

    def destination_uri(self, content_type: ContentType) -> str:
        """GCS URI the given content type is exported to."""
        return resolve_destination_uri(self, content_type)


class ExportRequest(BaseModel):
    """A single export submission."""

    parent: str
    content_type: ContentType
    destination_uri: str

    @classmethod
    def for_content_type(
        cls, config: InventoryConfig, content_type: ContentType
    ) -> "ExportRequest":
        """Build the request for one content type of a config."""
        return cls(
            parent=resolve_parent_path(config),
            content_type=content_type,
            destination_uri=resolve_destination_uri(config, content_type),
        )


def new_inventory(
    control_project_id: str,
    bucket: str,
    project_id: Optional[str] = None,
    organization_id: Optional[str] = None,
) -> InventoryConfig:
    """Create an inventory config, raising ConstructionError on invalid input."""
    try:
        return InventoryConfig(
            project_id=project_id,
            organization_id=organization_id,
            control_project_id=control_project_id,
            bucket=bucket,
        )
    except ValidationError as e:
        reasons = "; ".join(error["msg"] for error in e.errors())
        raise ConstructionError(f"invalid inventory configuration ({reasons})", cause=e)


def resolve_parent_path(config: InventoryConfig) -> str:
    """Return the parent path; an organization takes precedence over a project."""
    if config.organization_id:
        return f"organizations/{config.organization_id}"
    return f"projects/{config.project_id}"


def resolve_destination_uri(config: InventoryConfig, content_type: ContentType) -> str:
    """Return the GCS URI for a content type's export file."""
    object_name = DESTINATION_OBJECT_NAMES[content_type]
    return f"{GCS_SCHEME}://{config.bucket}/{object_name}"
