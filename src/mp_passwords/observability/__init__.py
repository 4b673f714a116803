"""Observability – structured logging and configuration diagnostics."""

from mp_passwords.observability.diagnostics import (
    CollectingDiagnosticSink,
    Diagnostic,
    DiagnosticSink,
    LoggingDiagnosticSink,
    Severity,
)
from mp_passwords.observability.logging import JsonLoggerFactory, Logger, SensitiveFieldsFilter, get_logger

__all__ = [
    "CollectingDiagnosticSink",
    "Diagnostic",
    "DiagnosticSink",
    "JsonLoggerFactory",
    "Logger",
    "LoggingDiagnosticSink",
    "SensitiveFieldsFilter",
    "Severity",
    "get_logger",
]
