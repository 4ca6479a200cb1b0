"""
Avro codec provider backed by fastavro.

Compiles schema text once into a reusable codec that translates between
Python values and schemaless Avro binary.
"""
import io
import json
from typing import Any, Tuple

import fastavro
from fastavro.validation import validate


class AvroCodec:
    """
    Compiled Avro schema.

    Immutable after construction and safe to share between threads.
    """

    __slots__ = ("_schema_str", "_parsed")

    def __init__(self, schema_str: str, parsed_schema: Any):
        self._schema_str = schema_str
        self._parsed = parsed_schema

    @property
    def schema_str(self) -> str:
        return self._schema_str

    @property
    def parsed_schema(self) -> Any:
        return self._parsed

    def encode(self, value: Any) -> bytes:
        """
        Serialize a value to Avro binary.

        Raises:
            fastavro.validation.ValidationError: If value does not match the schema
        """
        validate(value, self._parsed, raise_errors=True)
        buffer = io.BytesIO()
        fastavro.schemaless_writer(buffer, self._parsed, value)
        return buffer.getvalue()

    def decode(self, payload: bytes) -> Tuple[Any, int]:
        """
        Deserialize Avro binary.

        Returns:
            Tuple of decoded value and number of bytes consumed
        """
        buffer = io.BytesIO(payload)
        value = fastavro.schemaless_reader(buffer, self._parsed)
        return value, buffer.tell()

    def __repr__(self) -> str:
        return f"AvroCodec({self._schema_str[:60]!r})"


class AvroCodecProvider:
    """Compiles Avro schema text into AvroCodec instances."""

    def compile(self, schema_str: str) -> AvroCodec:
        """
        Parse schema text.

        Raises:
            ValueError: If schema text is not valid JSON
            fastavro.schema.SchemaParseException: If the schema is invalid
        """
        parsed = fastavro.parse_schema(json.loads(schema_str))
        return AvroCodec(schema_str, parsed)
