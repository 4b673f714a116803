"""Testing helpers – fakes, pytest fixtures and Hypothesis strategies."""
from mp_passwords.testing.fakes import InMemoryDiagnosticSink, RecordingSaltSourceResolver

__all__ = ["InMemoryDiagnosticSink", "RecordingSaltSourceResolver"]
