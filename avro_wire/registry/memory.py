"""
In-process schema registry.

Mirrors the versioning rules of the registry service for local runs and
tests: versions start at 1 per subject, and re-registering an identical
schema returns the existing version. Misses raise the same
SchemaRegistryError the network client raises.
"""
import json
from threading import Lock
from typing import Dict, List, Optional, Tuple

from confluent_kafka.schema_registry.error import SchemaRegistryError

from avro_wire.registry.base import SchemaRegistry

SUBJECT_NOT_FOUND = 40401
VERSION_NOT_FOUND = 40402
SCHEMA_NOT_FOUND = 40403


def _normalize(schema_str: str) -> str:
    """Canonical JSON text, so formatting differences do not matter."""
    try:
        return json.dumps(json.loads(schema_str), sort_keys=True, separators=(",", ":"))
    except ValueError:
        return schema_str


class InMemorySchemaRegistry(SchemaRegistry):
    """Thread-safe SchemaRegistry holding schemas in a dict."""

    def __init__(self):
        self._subjects: Dict[str, List[str]] = {}
        self._lock = Lock()

    def _find(self, subject: str, schema_str: str) -> Optional[int]:
        versions = self._subjects.get(subject, [])
        normalized = _normalize(schema_str)
        for index, registered in enumerate(versions):
            if _normalize(registered) == normalized:
                return index + 1
        return None

    def is_registered(self, subject: str, schema_str: str) -> Tuple[bool, Optional[int]]:
        with self._lock:
            version = self._find(subject, schema_str)
        return version is not None, version

    def register_new_schema(self, subject: str, schema_str: str) -> int:
        with self._lock:
            version = self._find(subject, schema_str)
            if version is not None:
                return version
            versions = self._subjects.setdefault(subject, [])
            versions.append(schema_str)
            return len(versions)

    def get_version_for(self, subject: str, schema_str: str) -> int:
        with self._lock:
            if subject not in self._subjects:
                raise SchemaRegistryError(
                    404, SUBJECT_NOT_FOUND, f"Subject '{subject}' not found."
                )
            version = self._find(subject, schema_str)
        if version is None:
            raise SchemaRegistryError(404, SCHEMA_NOT_FOUND, "Schema not found")
        return version

    def get_schema_for(self, subject: str, version: int) -> str:
        with self._lock:
            versions = self._subjects.get(subject)
            if versions is None:
                raise SchemaRegistryError(
                    404, SUBJECT_NOT_FOUND, f"Subject '{subject}' not found."
                )
            if not 1 <= version <= len(versions):
                raise SchemaRegistryError(
                    404, VERSION_NOT_FOUND, f"Version {version} not found."
                )
            return versions[version - 1]

    def subjects(self) -> List[str]:
        """List registered subjects."""
        with self._lock:
            return sorted(self._subjects)
