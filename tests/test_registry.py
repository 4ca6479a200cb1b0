"""
Tests for schema registry adapters.

The Confluent adapter is tested against a mocked SchemaRegistryClient,
so no registry service is required.
"""
import json

import pytest
from unittest.mock import MagicMock, patch
from confluent_kafka.schema_registry.error import SchemaRegistryError

from avro_wire.config import RegistryConfig
from avro_wire.registry import ConfluentSchemaRegistry, InMemorySchemaRegistry


# =============================================================================
# In-Memory Registry Tests
# =============================================================================


class TestInMemorySchemaRegistry:
    """Tests for InMemorySchemaRegistry."""

    def test_versions_start_at_one(self, order_schema):
        """Test first registration gets version 1."""
        registry = InMemorySchemaRegistry()

        assert registry.register_new_schema("orders-value", order_schema) == 1

    def test_versions_are_per_subject(self, order_schema, trade_schema):
        """Test each subject numbers its own versions."""
        registry = InMemorySchemaRegistry()

        registry.register_new_schema("orders-value", order_schema)

        assert registry.register_new_schema("trades-value", trade_schema) == 1

    def test_reregistering_returns_existing_version(self, memory_registry, order_schema):
        """Test identical schema is not registered twice."""
        assert memory_registry.register_new_schema("orders-value", order_schema) == 3
        assert memory_registry.get_schema_for("orders-value", 3) == order_schema

    def test_whitespace_does_not_matter(self, memory_registry, order_schema):
        """Test schema identity ignores JSON formatting."""
        reformatted = json.dumps(json.loads(order_schema), indent=4)

        assert memory_registry.get_version_for("orders-value", reformatted) == 3

    def test_is_registered(self, memory_registry, order_schema, trade_schema):
        """Test registration check returns version."""
        assert memory_registry.is_registered("orders-value", order_schema) == (True, 3)
        assert memory_registry.is_registered("orders-value", trade_schema) == (False, None)
        assert memory_registry.is_registered("missing", order_schema) == (False, None)

    def test_get_version_unknown_subject(self, memory_registry, order_schema):
        """Test lookup on unknown subject raises registry error."""
        with pytest.raises(SchemaRegistryError) as exc_info:
            memory_registry.get_version_for("missing-value", order_schema)

        assert exc_info.value.http_status_code == 404
        assert exc_info.value.error_code == 40401

    def test_get_version_unknown_schema(self, memory_registry, trade_schema):
        """Test lookup of unregistered schema raises registry error."""
        with pytest.raises(SchemaRegistryError) as exc_info:
            memory_registry.get_version_for("orders-value", trade_schema)

        assert exc_info.value.error_code == 40403

    def test_get_schema_unknown_version(self, memory_registry):
        """Test fetching a missing version raises registry error."""
        with pytest.raises(SchemaRegistryError) as exc_info:
            memory_registry.get_schema_for("orders-value", 4)

        assert exc_info.value.error_code == 40402

    def test_subjects(self, memory_registry):
        """Test subject listing."""
        assert memory_registry.subjects() == ["orders-key", "orders-value", "trades-value"]


# =============================================================================
# Confluent Adapter Tests
# =============================================================================


@pytest.fixture
def mock_sr_client():
    """Mock confluent SchemaRegistryClient."""
    return MagicMock()


class TestConfluentSchemaRegistry:
    """Tests for ConfluentSchemaRegistry."""

    @patch("avro_wire.registry.confluent.SchemaRegistryClient")
    def test_client_built_from_config(self, mock_client_class):
        """Test client is created with configured URL."""
        config = RegistryConfig(url="http://registry:8081", timeout=5)

        ConfluentSchemaRegistry(config=config)

        conf = mock_client_class.call_args[0][0]
        assert conf["url"] == "http://registry:8081"
        assert conf["timeout"] == 5

    def test_is_registered(self, mock_sr_client, order_schema):
        """Test registered schema returns its version."""
        mock_sr_client.lookup_schema.return_value.version = 3
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        assert registry.is_registered("orders-value", order_schema) == (True, 3)

        subject, schema = mock_sr_client.lookup_schema.call_args[0]
        assert subject == "orders-value"
        assert schema.schema_str == order_schema
        assert schema.schema_type == "AVRO"

    def test_is_registered_not_found(self, mock_sr_client, order_schema):
        """Test 404 from lookup means not registered."""
        mock_sr_client.lookup_schema.side_effect = SchemaRegistryError(
            404, 40403, "Schema not found"
        )
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        assert registry.is_registered("orders-value", order_schema) == (False, None)

    def test_is_registered_server_error_propagates(self, mock_sr_client, order_schema):
        """Test non-404 errors are not hidden."""
        mock_sr_client.lookup_schema.side_effect = SchemaRegistryError(
            500, 50001, "Internal error"
        )
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        with pytest.raises(SchemaRegistryError):
            registry.is_registered("orders-value", order_schema)

    def test_register_returns_version(self, mock_sr_client, order_schema):
        """Test registration returns subject version, not schema id."""
        mock_sr_client.register_schema.return_value = 101
        mock_sr_client.lookup_schema.return_value.version = 4
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        assert registry.register_new_schema("orders-value", order_schema) == 4
        mock_sr_client.register_schema.assert_called_once()

    def test_get_version_for(self, mock_sr_client, order_schema):
        """Test version lookup."""
        mock_sr_client.lookup_schema.return_value.version = 2
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        assert registry.get_version_for("orders-value", order_schema) == 2

    def test_get_version_for_not_found_propagates(self, mock_sr_client, order_schema):
        """Test missing registration raises registry error."""
        mock_sr_client.lookup_schema.side_effect = SchemaRegistryError(
            404, 40403, "Schema not found"
        )
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        with pytest.raises(SchemaRegistryError):
            registry.get_version_for("orders-value", order_schema)

    def test_get_schema_for(self, mock_sr_client, order_schema):
        """Test schema text is fetched by subject and version."""
        mock_sr_client.get_version.return_value.schema.schema_str = order_schema
        registry = ConfluentSchemaRegistry(client=mock_sr_client)

        assert registry.get_schema_for("orders-value", 3) == order_schema
        mock_sr_client.get_version.assert_called_once_with("orders-value", 3)
