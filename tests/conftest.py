"""
Pytest configuration and shared fixtures.

This module provides common fixtures used across all test modules.
Fixtures are organized by category for easy discovery.
"""
import json

import pytest
from unittest.mock import Mock, MagicMock

from avro_wire.registry import InMemorySchemaRegistry


# =============================================================================
# Schema Fixtures
# =============================================================================


ORDER_SCHEMA = json.dumps({
    "type": "record",
    "name": "Order",
    "namespace": "shop",
    "fields": [{"name": "id", "type": "int"}],
})

ORDER_SCHEMA_V1 = json.dumps({
    "type": "record",
    "name": "Order",
    "namespace": "shop",
    "fields": [{"name": "ref", "type": "string"}],
})

ORDER_SCHEMA_V2 = json.dumps({
    "type": "record",
    "name": "Order",
    "namespace": "shop",
    "fields": [{"name": "ref", "type": "long"}],
})

TRADE_SCHEMA = json.dumps({
    "type": "record",
    "name": "Trade",
    "fields": [
        {"name": "market", "type": "string"},
        {"name": "price", "type": "double"},
        {"name": "volume", "type": "double"},
        {"name": "side", "type": {"type": "enum", "name": "Side", "symbols": ["ASK", "BID"]}},
        {"name": "note", "type": ["null", "string"], "default": None},
    ],
})

KEY_SCHEMA = json.dumps("string")


@pytest.fixture
def order_schema() -> str:
    """Order schema registered as version 3 of `orders-value`."""
    return ORDER_SCHEMA


@pytest.fixture
def trade_schema() -> str:
    """Trade schema with enum and optional field."""
    return TRADE_SCHEMA


@pytest.fixture
def key_schema() -> str:
    """Primitive string schema for record keys."""
    return KEY_SCHEMA


@pytest.fixture
def sample_trade():
    """Trade value matching TRADE_SCHEMA."""
    return {
        "market": "KRW-BTC",
        "price": 50000000.0,
        "volume": 0.1,
        "side": "BID",
        "note": None,
    }


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def memory_registry(order_schema, trade_schema, key_schema) -> InMemorySchemaRegistry:
    """
    Registry pre-populated with test schemas.

    `orders-value` holds three versions with ORDER_SCHEMA as version 3.
    """
    registry = InMemorySchemaRegistry()
    registry.register_new_schema("orders-value", ORDER_SCHEMA_V1)
    registry.register_new_schema("orders-value", ORDER_SCHEMA_V2)
    registry.register_new_schema("orders-value", order_schema)
    registry.register_new_schema("orders-key", key_schema)
    registry.register_new_schema("trades-value", trade_schema)
    return registry


@pytest.fixture
def counting_registry(memory_registry) -> Mock:
    """In-memory registry wrapped in a Mock to count calls."""
    return Mock(wraps=memory_registry)


# =============================================================================
# Kafka Mock Fixtures
# =============================================================================


def make_message(topic="orders", value=None, key=None, partition=0, offset=0, error=None):
    """Build a mock confluent_kafka.Message."""
    msg = MagicMock()
    msg.topic.return_value = topic
    msg.partition.return_value = partition
    msg.offset.return_value = offset
    msg.key.return_value = key
    msg.value.return_value = value
    msg.error.return_value = error
    return msg


@pytest.fixture
def message_factory():
    """Factory for mock Kafka messages."""
    return make_message


@pytest.fixture
def mock_kafka_consumer():
    """Mock Kafka consumer."""
    consumer = MagicMock()
    consumer.poll = MagicMock(return_value=None)
    return consumer


@pytest.fixture
def mock_kafka_producer():
    """Mock Kafka producer."""
    producer = MagicMock()
    producer.produce = MagicMock()
    producer.poll = MagicMock(return_value=0)
    producer.flush = MagicMock(return_value=0)
    return producer


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def test_kafka_config():
    """Test Kafka configuration."""
    from avro_wire.config import KafkaConfig

    return KafkaConfig(
        bootstrap_servers="localhost:9092",
        group_id="test-group",
        topics="orders,trades",
        poll_timeout=0.1,
    )
