"""Test configuration and fixtures."""

import pytest
from unittest.mock import MagicMock, Mock

from cai_inventory.gcp.client import AssetClient
from cai_inventory.model.inventory import InventoryConfig


@pytest.fixture
def project_config():
    """Inventory config scoped to a single project."""
    return InventoryConfig(project_id="proj-1", control_project_id="ctrl-1", bucket="bkt-1")


@pytest.fixture
def org_config():
    """Inventory config scoped to an organization."""
    return InventoryConfig(organization_id="123", control_project_id="ctrl-1", bucket="bkt-2")


@pytest.fixture
def mock_operation():
    """Mock long-running operation that completes immediately."""
    operation = MagicMock()
    operation.done.return_value = True
    operation.result.return_value = MagicMock()
    return operation


@pytest.fixture
def mock_asset_client(mock_operation):
    """Mock asset client whose submissions all succeed."""
    client = Mock(spec=AssetClient)
    client.submit = Mock(return_value=mock_operation)
    client.wait = Mock(return_value=None)
    return client


@pytest.fixture
def sample_manifest_data():
    """Sample SQLInstance manifest contents."""
    return {
        "apiVersion": "sql.cnrm.cloud.google.com/v1beta1",
        "kind": "SQLInstance",
        "metadata": {"name": "mysql-test"},
        "spec": {
            "databaseVersion": "MYSQL_5_7",
            "region": "europe-west1",
            "settings": {
                "tier": "db-f1-micro",
                "diskSize": 20,
                "diskType": "PD_HDD",
                "backupConfiguration": {"enabled": True},
                "ipConfiguration": {
                    "ipv4Enabled": False,
                    "requireSsl": True,
                    "authorizedNetworks": [],
                },
                "maintenanceWindow": {"day": 7, "hour": 3, "updateTrack": "stable"},
            },
        },
    }
