"""
Utility functions and classes for the Avro wire codec.
"""
from .logging import setup_logger, get_logger
from .serialization import (
    AvroWireSerializer,
    AvroWireDeserializer,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "AvroWireSerializer",
    "AvroWireDeserializer",
]
