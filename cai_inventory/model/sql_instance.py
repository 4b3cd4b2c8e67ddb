"""Config Connector SQLInstance manifest models."""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..exceptions import ManifestError


class AuthorizedNetwork(BaseModel):
    """A CIDR allowed to reach the instance."""

    name: Optional[str] = None
    value: str


class IpConfiguration(BaseModel):
    """Network accessibility settings."""

    ipv4_enabled: bool = Field(False, alias="ipv4Enabled")
    require_ssl: bool = Field(False, alias="requireSsl")
    authorized_networks: List[AuthorizedNetwork] = Field([], alias="authorizedNetworks")

    class Config:
        populate_by_name = True


class BackupConfiguration(BaseModel):
    enabled: bool = False


class LocationPreference(BaseModel):
    zone: Optional[str] = None


class MaintenanceWindow(BaseModel):
    """Weekly maintenance window."""

    day: int = Field(..., ge=1, le=7)
    hour: int = Field(..., ge=0, le=23)
    update_track: Optional[str] = Field(None, alias="updateTrack")

    class Config:
        populate_by_name = True


class SQLInstanceSettings(BaseModel):
    """Instance settings block."""

    tier: str
    activation_policy: Optional[str] = Field(None, alias="activationPolicy")
    disk_autoresize: bool = Field(False, alias="diskAutoresize")
    disk_size: Optional[int] = Field(None, alias="diskSize")
    disk_type: Optional[str] = Field(None, alias="diskType")
    pricing_plan: Optional[str] = Field(None, alias="pricingPlan")
    replication_type: Optional[str] = Field(None, alias="replicationType")
    backup_configuration: BackupConfiguration = Field(
        default_factory=BackupConfiguration, alias="backupConfiguration"
    )
    ip_configuration: IpConfiguration = Field(
        default_factory=IpConfiguration, alias="ipConfiguration"
    )
    location_preference: Optional[LocationPreference] = Field(None, alias="locationPreference")
    maintenance_window: Optional[MaintenanceWindow] = Field(None, alias="maintenanceWindow")

    class Config:
        populate_by_name = True


class SQLInstanceSpec(BaseModel):
    database_version: str = Field(..., alias="databaseVersion")
    region: str
    settings: SQLInstanceSettings

    class Config:
        populate_by_name = True


class SQLInstanceManifest(BaseModel):
    """A sql.cnrm.cloud.google.com SQLInstance resource."""

    api_version: str = Field(..., alias="apiVersion")
    kind: str
    metadata: dict
    spec: SQLInstanceSpec

    class Config:
        populate_by_name = True

    @property
    def name(self) -> str:
        """Get instance name."""
        return self.metadata.get("name", "")


def load_manifest(path: Union[str, Path]) -> SQLInstanceManifest:
    """Load a SQLInstance manifest from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ManifestError(f"manifest not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"invalid YAML in {path}", cause=e)

    if not isinstance(data, dict) or data.get("kind") != "SQLInstance":
        raise ManifestError(f"{path} is not a SQLInstance manifest")

    try:
        return SQLInstanceManifest(**data)
    except ValidationError as e:
        raise ManifestError(f"invalid SQLInstance manifest {path}", cause=e)
