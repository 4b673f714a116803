"""Observability – structured logging helpers."""
from mp_passwords.observability.logging.factory import JsonLoggerFactory
from mp_passwords.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mp_passwords.observability.logging.processors import get_logger
from mp_passwords.observability.logging.protocol import Logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
