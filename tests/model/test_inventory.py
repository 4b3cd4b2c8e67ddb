"""Test inventory configuration models."""

import pytest
from pydantic import ValidationError

from cai_inventory.exceptions import ConstructionError
from cai_inventory.model.inventory import (
    ContentType,
    ExportRequest,
    InventoryConfig,
    new_inventory,
    resolve_destination_uri,
    resolve_parent_path,
)


@pytest.mark.unit
class TestParentPath:
    def test_project_scope(self, project_config):
        """Test project-only config resolves to a project path."""
        assert resolve_parent_path(project_config) == "projects/proj-1"

    def test_organization_scope(self, org_config):
        """Test organization config resolves to an organization path."""
        assert resolve_parent_path(org_config) == "organizations/123"

    def test_organization_takes_precedence(self):
        """Test organization wins when both project and organization are set."""
        config = new_inventory("ctrl", "bkt", project_id="proj-1", organization_id="456")
        assert resolve_parent_path(config) == "organizations/456"
        assert config.parent == "organizations/456"

    def test_defaults_to_control_project(self):
        """Test the control project is the target when no scope is given."""
        config = new_inventory("ctrl-9", "bkt")
        assert config.project_id == "ctrl-9"
        assert resolve_parent_path(config) == "projects/ctrl-9"

    def test_idempotent(self, org_config):
        """Test repeated resolution yields identical strings."""
        assert resolve_parent_path(org_config) == resolve_parent_path(org_config)


@pytest.mark.unit
class TestDestinationUri:
    def test_resource_uri(self, project_config):
        """Test resource inventory destination."""
        uri = resolve_destination_uri(project_config, ContentType.RESOURCE)
        assert uri == "gs://bkt-1/resource_inventory.json"

    def test_iam_policy_uri(self, org_config):
        """Test IAM policy inventory destination."""
        uri = resolve_destination_uri(org_config, ContentType.IAM_POLICY)
        assert uri == "gs://bkt-2/iam_inventory.json"

    def test_uris_prefixed_with_bucket(self, project_config):
        """Test every destination lives in the configured bucket."""
        for content_type in ContentType:
            uri = project_config.destination_uri(content_type)
            assert uri.startswith("gs://bkt-1/")

    def test_idempotent(self, project_config):
        """Test repeated resolution yields identical strings."""
        first = resolve_destination_uri(project_config, ContentType.IAM_POLICY)
        second = resolve_destination_uri(project_config, ContentType.IAM_POLICY)
        assert first == second

    def test_unknown_content_type(self, project_config):
        """Test content types outside the fixed table are rejected."""
        with pytest.raises(KeyError):
            resolve_destination_uri(project_config, "ACCESS_POLICY")


@pytest.mark.unit
class TestConstruction:
    def test_empty_bucket_rejected(self):
        """Test an empty bucket fails construction."""
        with pytest.raises(ConstructionError, match="bucket"):
            new_inventory("ctrl", "", project_id="proj-1")

    def test_blank_bucket_rejected(self):
        """Test a whitespace-only bucket fails construction."""
        with pytest.raises(ConstructionError):
            new_inventory("ctrl", "   ", project_id="proj-1")

    def test_bucket_uri_rejected(self):
        """Test a full gs:// URI is not accepted as a bucket name."""
        with pytest.raises(ConstructionError, match="bare bucket name"):
            new_inventory("ctrl", "gs://bkt-1", project_id="proj-1")

    def test_missing_scope_rejected(self):
        """Test construction fails when no scope can be resolved."""
        with pytest.raises(ConstructionError):
            new_inventory("", "bkt")

    def test_config_is_immutable(self, project_config):
        """Test config cannot be mutated after construction."""
        with pytest.raises(ValidationError):
            project_config.bucket = "other"

    def test_construction_error_keeps_cause(self):
        """Test the validation error is attached as the cause."""
        with pytest.raises(ConstructionError) as exc_info:
            new_inventory("ctrl", "", project_id="proj-1")
        assert exc_info.value.cause is not None


@pytest.mark.unit
class TestExportRequest:
    def test_for_content_type(self, org_config):
        """Test request carries parent, content type and destination."""
        request = ExportRequest.for_content_type(org_config, ContentType.RESOURCE)
        assert request.parent == "organizations/123"
        assert request.content_type == ContentType.RESOURCE
        assert request.destination_uri == "gs://bkt-2/resource_inventory.json"

    def test_direct_config_construction(self):
        """Test InventoryConfig can be built directly."""
        config = InventoryConfig(project_id="p", control_project_id="c", bucket="b")
        request = ExportRequest.for_content_type(config, ContentType.IAM_POLICY)
        assert request.destination_uri == "gs://b/iam_inventory.json"
