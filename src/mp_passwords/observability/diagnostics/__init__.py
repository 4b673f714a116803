"""Observability – non-fatal configuration diagnostics."""
from mp_passwords.observability.diagnostics.sink import (
    CollectingDiagnosticSink,
    Diagnostic,
    DiagnosticSink,
    LoggingDiagnosticSink,
    Severity,
)

__all__ = [
    "CollectingDiagnosticSink",
    "Diagnostic",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "Severity",
]
