"""
Schema registry client interface consumed by the codec.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple


class SchemaRegistry(ABC):
    """Abstract base class for schema registry clients."""

    @abstractmethod
    def is_registered(self, subject: str, schema_str: str) -> Tuple[bool, Optional[int]]:
        """Return whether schema is registered under subject, and its version."""
        pass

    @abstractmethod
    def register_new_schema(self, subject: str, schema_str: str) -> int:
        """Register schema under subject and return the assigned version."""
        pass

    @abstractmethod
    def get_version_for(self, subject: str, schema_str: str) -> int:
        """Return the version of an already registered schema."""
        pass

    @abstractmethod
    def get_schema_for(self, subject: str, version: int) -> str:
        """Return the schema text registered under subject and version."""
        pass
