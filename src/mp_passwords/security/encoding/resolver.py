"""Encoder resolver – turns raw ``<password-encoder>`` values into descriptors.

Decision order:

1. A non-blank ``ref`` wins outright. The referenced encoder is trusted as-is:
   no catalog lookup, no option checks, and ``hash`` is ignored silently.
2. Otherwise ``hash`` must name a catalogued algorithm, or resolution fails
   with :class:`UnknownAlgorithmError`.
3. The catalog supplies any constructor arguments (``sha-256`` → ``256``).
4. ``base64=True`` is honoured for digest-based kinds only. For anything else
   an ``incompatible_option`` diagnostic is reported and the flag is dropped.
5. A salt fragment, when present, is handed to the salt-source resolver and
   its result attached unchanged. Its errors propagate.
"""
from __future__ import annotations

from typing import Any

from mp_passwords.config.validation import ConfigError
from mp_passwords.kernel.types import Err, Ok, Result
from mp_passwords.observability.diagnostics import Diagnostic, DiagnosticSink, LoggingDiagnosticSink
from mp_passwords.observability.logging import get_logger
from mp_passwords.security.encoding import catalog
from mp_passwords.security.encoding.raw import ATT_BASE64, RawEncoderConfig, has_text
from mp_passwords.security.encoding.salt import DefaultSaltSourceResolver, SaltSourceResolver
from mp_passwords.security.encoding.descriptors import (
    ConstructedEncoder,
    EncoderReference,
    EncoderSpec,
    ResolutionResult,
)

__all__ = ["INCOMPATIBLE_OPTION", "EncoderResolver", "resolve_encoder"]

INCOMPATIBLE_OPTION = "incompatible_option"

_log = get_logger(__name__)


class EncoderResolver:
    """Stateless apart from its collaborators; safe to share between threads."""

    def __init__(
        self,
        diagnostics: DiagnosticSink | None = None,
        salt_resolver: SaltSourceResolver | None = None,
    ) -> None:
        self._diagnostics = diagnostics if diagnostics is not None else LoggingDiagnosticSink()
        self._salt_resolver = salt_resolver if salt_resolver is not None else DefaultSaltSourceResolver()

    def resolve(self, config: RawEncoderConfig) -> ResolutionResult:
        """Resolve *config*, raising :class:`ConfigError` on fatal problems."""
        if has_text(config.ref):
            encoder: EncoderSpec = EncoderReference(config.ref)  # type: ignore[arg-type]
        else:
            encoder = self._construct(config)

        salt_source = None
        if config.salt_fragment is not None:
            salt_source = self._salt_resolver.resolve(config.salt_fragment)

        result = ResolutionResult(encoder=encoder, salt_source=salt_source)
        _log.debug(
            "password_encoder.resolved",
            algorithm=None if result.is_reference else config.algorithm,
            reference=encoder.name if isinstance(encoder, EncoderReference) else None,
            kind=encoder.kind.value if isinstance(encoder, ConstructedEncoder) else None,
            base64_encoded=isinstance(encoder, ConstructedEncoder) and encoder.base64_encoded,
            salt_source=type(salt_source).__name__ if salt_source is not None else None,
        )
        return result

    def try_resolve(self, config: RawEncoderConfig) -> Result[ResolutionResult, ConfigError]:
        """Like :meth:`resolve` but returns ``Err`` instead of raising."""
        try:
            return Ok(self.resolve(config))
        except ConfigError as exc:
            return Err(exc)

    def _construct(self, config: RawEncoderConfig) -> ConstructedEncoder:
        kind = catalog.require(config.algorithm)
        algorithm: str = config.algorithm  # type: ignore[assignment]

        base64_encoded = False
        if config.base64:
            if catalog.is_digest_based(kind):
                base64_encoded = True
            else:
                self._report_incompatible(config, ATT_BASE64)

        return ConstructedEncoder(
            kind=kind,
            constructor_args=catalog.constructor_args(algorithm),
            base64_encoded=base64_encoded,
            source=config.source,
        )

    def _report_incompatible(self, config: RawEncoderConfig, option: str) -> None:
        detail: dict[str, Any] = {"option": option, "algorithm": config.algorithm}
        if config.source is not None:
            detail["source"] = config.source
        self._diagnostics.report(
            Diagnostic(
                code=INCOMPATIBLE_OPTION,
                message=f"{option} isn't compatible with {config.algorithm} and will be ignored",
                detail=detail,
            )
        )


def resolve_encoder(
    config: RawEncoderConfig,
    *,
    diagnostics: DiagnosticSink | None = None,
    salt_resolver: SaltSourceResolver | None = None,
) -> ResolutionResult:
    """One-shot convenience wrapper around :class:`EncoderResolver`."""
    return EncoderResolver(diagnostics=diagnostics, salt_resolver=salt_resolver).resolve(config)
