"""Observability – non-fatal configuration diagnostics.

Fatal configuration problems are raised as :class:`ConfigError`. Everything
that should *not* abort startup (an option that is ignored, say) is reported
as a :class:`Diagnostic` to a :class:`DiagnosticSink` instead.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Protocol

from mp_passwords.observability.logging import Logger, get_logger

__all__ = [
    "CollectingDiagnosticSink",
    "Diagnostic",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "Severity",
]


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"


@dataclasses.dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    severity: Severity = Severity.WARNING
    detail: dict[str, Any] = dataclasses.field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            **self.detail,
        }


class DiagnosticSink(Protocol):
    """Receives non-fatal diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None: ...


class LoggingDiagnosticSink:
    """Writes each diagnostic as a structlog event at its own severity."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or get_logger("mp_passwords.diagnostics")

    def report(self, diagnostic: Diagnostic) -> None:
        log = getattr(self._logger, diagnostic.severity.value)
        log(
            diagnostic.message,
            code=diagnostic.code,
            **diagnostic.detail,
        )


class CollectingDiagnosticSink:
    """Buffers diagnostics and optionally forwards them to *delegate*."""

    def __init__(self, delegate: DiagnosticSink | None = None) -> None:
        self._delegate = delegate
        self._buffer: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self._buffer.append(diagnostic)
        if self._delegate is not None:
            self._delegate.report(diagnostic)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()
