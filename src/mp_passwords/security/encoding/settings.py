"""Env-backed ``<password-encoder>`` settings.

Example environment::

    PASSWORD_ENCODER_HASH=sha-256
    PASSWORD_ENCODER_BASE64=true
    PASSWORD_ENCODER_SALT_USER_PROPERTY=username
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_passwords.config.settings import Settings
from mp_passwords.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from mp_passwords.security.encoding import catalog
from mp_passwords.security.encoding.raw import RawEncoderConfig, SaltFragment, has_text

__all__ = ["PasswordEncoderSettings"]


@dataclasses.dataclass(frozen=True)
class PasswordEncoderSettings(Settings):
    _prefix: ClassVar[str] = "PASSWORD_ENCODER"

    hash: str | None = None
    ref: str | None = None
    base64: bool | None = None
    salt_user_property: str | None = None
    salt_system_wide: str | None = dataclasses.field(default=None, repr=False)
    salt_ref: str | None = None

    def _validate(self) -> None:
        if has_text(self.ref):
            return
        if not has_text(self.hash):
            raise MissingRequiredSettingError(f"{self._prefix}_HASH")
        if catalog.lookup(self.hash) is None:
            raise InvalidSettingValueError(
                "hash",
                self.hash,
                f"expected one of: {', '.join(catalog.supported_algorithms())}",
            )

    def to_raw_config(self) -> RawEncoderConfig:
        salt_fragment = None
        if any(has_text(v) for v in (self.salt_user_property, self.salt_system_wide, self.salt_ref)):
            salt_fragment = SaltFragment(
                user_property=self.salt_user_property,
                system_wide=self.salt_system_wide,
                ref=self.salt_ref,
                source=self._prefix,
            )
        return RawEncoderConfig(
            algorithm=self.hash,
            ref=self.ref,
            base64=self.base64,
            salt_fragment=salt_fragment,
            source=self._prefix,
        )
