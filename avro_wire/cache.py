"""
Codec resolution cache.

Maps a (subject, version) pair to a compiled codec so the registry is
asked for each schema at most once per cache.
"""
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional

from avro_wire.avro import AvroCodec, AvroCodecProvider
from avro_wire.exceptions import SchemaCompileError, SchemaResolutionError
from avro_wire.registry import SchemaRegistry


@dataclass(frozen=True)
class SubjectVersionKey:
    """Cache key identifying one schema version of a subject."""
    subject: str
    version: int


class CodecCache:
    """
    Thread-safe, lazily populated codec cache.

    Entries are never evicted. Registry fetch and compilation run outside
    the lock; the result is stored with insert-if-absent, so concurrent
    misses on one key may compile twice but all callers get the same codec.
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        provider: Optional[AvroCodecProvider] = None,
    ):
        """
        Initialize cache.

        Args:
            registry: Registry used to fetch schema text on a miss
            provider: Codec provider used to compile fetched schemas
        """
        self._registry = registry
        self._provider = provider or AvroCodecProvider()
        self._codecs: Dict[SubjectVersionKey, AvroCodec] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def resolve(self, key: SubjectVersionKey) -> AvroCodec:
        """
        Return the codec for key, fetching and compiling it on first use.

        Raises:
            SchemaResolutionError: If the registry lookup fails
            SchemaCompileError: If the fetched schema does not compile
        """
        with self._lock:
            codec = self._codecs.get(key)
            if codec is not None:
                self._hits += 1
                return codec
            self._misses += 1

        try:
            schema_str = self._registry.get_schema_for(key.subject, key.version)
        except Exception as e:
            raise SchemaResolutionError(
                key.subject, version=key.version, reason=str(e)
            ) from e

        try:
            codec = self._provider.compile(schema_str)
        except Exception as e:
            raise SchemaCompileError(str(e), subject=key.subject, version=key.version) from e

        with self._lock:
            return self._codecs.setdefault(key, codec)

    def __contains__(self, key: SubjectVersionKey) -> bool:
        with self._lock:
            return key in self._codecs

    def __len__(self) -> int:
        with self._lock:
            return len(self._codecs)

    def clear(self) -> None:
        """Drop all compiled codecs."""
        with self._lock:
            self._codecs.clear()

    @property
    def stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "entries": len(self._codecs),
            }
