"""Testing fakes – in-memory doubles for resolver collaborators."""
from mp_passwords.testing.fakes.diagnostics import InMemoryDiagnosticSink
from mp_passwords.testing.fakes.salt import RecordingSaltSourceResolver

__all__ = ["InMemoryDiagnosticSink", "RecordingSaltSourceResolver"]
