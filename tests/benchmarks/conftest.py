"""conftest.py for benchmarks.

Resolvers here write diagnostics to an in-memory sink so that timing never
includes structlog rendering.
"""

from __future__ import annotations

import pytest

from mp_passwords.security.encoding import EncoderResolver
from mp_passwords.testing.fakes import InMemoryDiagnosticSink


@pytest.fixture
def bench_sink() -> InMemoryDiagnosticSink:
    return InMemoryDiagnosticSink()


@pytest.fixture
def bench_resolver(bench_sink: InMemoryDiagnosticSink) -> EncoderResolver:
    """Resolver wired to ``bench_sink`` and the default salt resolver."""
    return EncoderResolver(diagnostics=bench_sink)
