"""
Schema registry clients.
"""
from .base import SchemaRegistry
from .confluent import ConfluentSchemaRegistry
from .memory import InMemorySchemaRegistry

__all__ = [
    "SchemaRegistry",
    "ConfluentSchemaRegistry",
    "InMemorySchemaRegistry",
]
