"""
Custom exceptions for the Avro wire-format codec.

Every error carries the subject, version and schema it concerns as
separate attributes so callers can inspect failures programmatically
instead of parsing messages.
"""
from typing import Any, Dict, Optional


class CodecError(Exception):
    """Base exception for all codec errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


def _key_details(subject: Optional[str], version: Optional[int]) -> Dict[str, Any]:
    details: Dict[str, Any] = {}
    if subject is not None:
        details["subject"] = subject
    if version is not None:
        details["version"] = version
    return details


# =============================================================================
# Framing Errors
# =============================================================================


class InvalidWireFormatError(CodecError):
    """Raised when a frame does not follow the wire layout."""

    def __init__(
        self,
        message: str,
        magic_byte: Optional[int] = None,
        length: Optional[int] = None,
    ):
        details: Dict[str, Any] = {}
        if magic_byte is not None:
            details["magic_byte"] = magic_byte
        if length is not None:
            details["length"] = length
        super().__init__(message, details)
        self.magic_byte = magic_byte
        self.length = length


class FrameTooShortError(InvalidWireFormatError):
    """Raised when data is too short to hold the frame header."""

    def __init__(self, length: int, required: int):
        message = f"Frame is {length} bytes, at least {required} required"
        super().__init__(message, length=length)
        self.required = required


# =============================================================================
# Schema Errors
# =============================================================================


class SchemaResolutionError(CodecError):
    """Raised when the registry cannot resolve a schema or version."""

    def __init__(
        self,
        subject: str,
        version: Optional[int] = None,
        schema: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        if version is not None:
            message = f"Could not resolve schema for subject '{subject}' version {version}"
        else:
            message = f"Could not resolve version for schema on subject '{subject}'"
        details = _key_details(subject, version)
        if schema is not None:
            details["schema"] = schema[:100]
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.subject = subject
        self.version = version
        self.schema = schema
        self.reason = reason


class SchemaNotRegisteredError(CodecError):
    """Raised when a schema is not registered and auto-registration is off."""

    def __init__(self, subject: str, schema: str):
        message = f"There is no registration on subject '{subject}' for schema"
        super().__init__(message, {"subject": subject, "schema": schema[:100]})
        self.subject = subject
        self.schema = schema


class SchemaCompileError(CodecError):
    """Raised when schema text cannot be compiled into a codec."""

    def __init__(
        self,
        reason: str,
        subject: Optional[str] = None,
        version: Optional[int] = None,
    ):
        message = f"Failed to compile schema: {reason}"
        super().__init__(message, _key_details(subject, version))
        self.reason = reason
        self.subject = subject
        self.version = version


# =============================================================================
# Payload Errors
# =============================================================================


class PayloadError(CodecError):
    """Base class for payload-level errors."""

    action = "process"

    def __init__(self, subject: str, version: int, reason: str):
        message = f"Failed to {self.action} payload: {reason}"
        super().__init__(message, _key_details(subject, version))
        self.subject = subject
        self.version = version
        self.reason = reason


class DecodeError(PayloadError):
    """Raised when a payload does not match the resolved schema."""

    action = "decode"


class EncodeError(PayloadError):
    """Raised when a value does not conform to the resolved schema."""

    action = "encode"


# =============================================================================
# Application Errors
# =============================================================================


class ConsumerError(CodecError):
    """Raised when the Kafka consumer reports a fatal error."""

    def __init__(self, message: str, topic: Optional[str] = None):
        details = {}
        if topic:
            details["topic"] = topic
        super().__init__(message, details)
        self.topic = topic


class ConfigurationError(CodecError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key
