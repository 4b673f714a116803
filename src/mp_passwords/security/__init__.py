"""Security – password-encoder configuration."""
from mp_passwords.security.encoding import (
    EncoderResolver,
    PasswordEncoderSettings,
    RawEncoderConfig,
    ResolutionResult,
    resolve_encoder,
)

__all__ = [
    "EncoderResolver",
    "PasswordEncoderSettings",
    "RawEncoderConfig",
    "ResolutionResult",
    "resolve_encoder",
]
