"""Encoder catalog – the closed table of supported hash algorithm identifiers.

Identifiers map onto an :class:`EncoderKind`; the kind decides whether the
encoder produces a raw digest (and can therefore base64-encode its output).
Identifiers that share a kind but need a different construction, like the
256-bit variant of SHA, carry their arguments in a separate table.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final

from mp_passwords.security.encoding.descriptors import ConstructorArg
from mp_passwords.security.encoding.errors import UnknownAlgorithmError

__all__ = [
    "ALGORITHM_LDAP_SHA",
    "ALGORITHM_MD4",
    "ALGORITHM_MD5",
    "ALGORITHM_PLAINTEXT",
    "ALGORITHM_SHA",
    "ALGORITHM_SHA256",
    "EncoderKind",
    "constructor_args",
    "is_digest_based",
    "lookup",
    "require",
    "supported_algorithms",
]

ALGORITHM_PLAINTEXT: Final = "plaintext"
ALGORITHM_SHA: Final = "sha"
ALGORITHM_SHA256: Final = "sha-256"
ALGORITHM_MD4: Final = "md4"
ALGORITHM_MD5: Final = "md5"
ALGORITHM_LDAP_SHA: Final = "{sha}"


class EncoderKind(str, Enum):
    """Encoder implementations a container knows how to build."""

    PLAINTEXT = "plaintext"
    SHA = "sha"
    MD4 = "md4"
    MD5 = "md5"
    LDAP_SHA = "ldap-sha"

    @property
    def digest_based(self) -> bool:
        return self in _DIGEST_KINDS


# Kinds that emit a raw digest. Directory-service {SHA} formats its own output.
_DIGEST_KINDS: Final = frozenset({EncoderKind.SHA, EncoderKind.MD4, EncoderKind.MD5})


_KINDS: Final = MappingProxyType({
    ALGORITHM_PLAINTEXT: EncoderKind.PLAINTEXT,
    ALGORITHM_SHA: EncoderKind.SHA,
    ALGORITHM_SHA256: EncoderKind.SHA,
    ALGORITHM_MD4: EncoderKind.MD4,
    ALGORITHM_MD5: EncoderKind.MD5,
    ALGORITHM_LDAP_SHA: EncoderKind.LDAP_SHA,
})

_CONSTRUCTOR_ARGS: Final = MappingProxyType({
    ALGORITHM_SHA256: (ConstructorArg(0, 256),),
})


def lookup(algorithm: str | None) -> EncoderKind | None:
    """Return the kind for *algorithm*, or ``None`` when it is not catalogued."""
    if algorithm is None:
        return None
    return _KINDS.get(algorithm)


def require(algorithm: str | None) -> EncoderKind:
    kind = lookup(algorithm)
    if kind is None:
        raise UnknownAlgorithmError(algorithm, supported_algorithms())
    return kind


def constructor_args(algorithm: str) -> tuple[ConstructorArg, ...]:
    """Ordered construction arguments for *algorithm*; ``()`` when it needs none."""
    return _CONSTRUCTOR_ARGS.get(algorithm, ())


def is_digest_based(kind: EncoderKind) -> bool:
    return kind.digest_based


def supported_algorithms() -> tuple[str, ...]:
    return tuple(_KINDS)
