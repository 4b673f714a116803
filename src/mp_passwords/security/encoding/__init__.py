"""Security – password-encoder configuration resolution.

Usage::

    from mp_passwords.security.encoding import EncoderResolver, RawEncoderConfig

    result = EncoderResolver().resolve(RawEncoderConfig(algorithm="sha-256", base64=True))
    result.encoder.constructor_values  # (256,)
"""
from mp_passwords.security.encoding.catalog import (
    EncoderKind,
    constructor_args,
    is_digest_based,
    lookup,
    supported_algorithms,
)
from mp_passwords.security.encoding.errors import MalformedSaltSourceError, UnknownAlgorithmError
from mp_passwords.security.encoding.raw import RawEncoderConfig, SaltFragment
from mp_passwords.security.encoding.resolver import INCOMPATIBLE_OPTION, EncoderResolver, resolve_encoder
from mp_passwords.security.encoding.salt import DefaultSaltSourceResolver, SaltSourceResolver
from mp_passwords.security.encoding.settings import PasswordEncoderSettings
from mp_passwords.security.encoding.descriptors import (
    ConstructedEncoder,
    ConstructorArg,
    EncoderReference,
    EncoderSpec,
    ReflectionSaltSource,
    ResolutionResult,
    SaltSourceReference,
    SaltSourceSpec,
    SystemWideSaltSource,
)

__all__ = [
    "INCOMPATIBLE_OPTION",
    "ConstructedEncoder",
    "ConstructorArg",
    "DefaultSaltSourceResolver",
    "EncoderKind",
    "EncoderReference",
    "EncoderResolver",
    "EncoderSpec",
    "MalformedSaltSourceError",
    "PasswordEncoderSettings",
    "RawEncoderConfig",
    "ReflectionSaltSource",
    "ResolutionResult",
    "SaltFragment",
    "SaltSourceReference",
    "SaltSourceResolver",
    "SaltSourceSpec",
    "SystemWideSaltSource",
    "UnknownAlgorithmError",
    "constructor_args",
    "is_digest_based",
    "lookup",
    "resolve_encoder",
    "supported_algorithms",
]
