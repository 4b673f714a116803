"""Salt-source resolution for the nested ``<salt-source>`` fragment."""
from __future__ import annotations

from typing import Protocol

from mp_passwords.security.encoding.errors import MalformedSaltSourceError
from mp_passwords.security.encoding.raw import (
    ATT_REF,
    ATT_SYSTEM_WIDE,
    ATT_USER_PROPERTY,
    SaltFragment,
    has_text,
)
from mp_passwords.security.encoding.descriptors import (
    ReflectionSaltSource,
    SaltSourceReference,
    SaltSourceSpec,
    SystemWideSaltSource,
)

__all__ = ["DefaultSaltSourceResolver", "SaltSourceResolver"]


class SaltSourceResolver(Protocol):
    """Turns an optional salt fragment into a descriptor.

    Must return ``None`` for ``None`` and raise :class:`MalformedSaltSourceError`
    (or another ``ConfigError``) for a fragment it cannot use.
    """

    def resolve(self, fragment: SaltFragment | None) -> SaltSourceSpec | None: ...


class DefaultSaltSourceResolver:
    """First non-blank of ``ref``, ``user-property``, ``system-wide`` wins."""

    def resolve(self, fragment: SaltFragment | None) -> SaltSourceSpec | None:
        if fragment is None:
            return None
        if has_text(fragment.ref):
            return SaltSourceReference(fragment.ref)  # type: ignore[arg-type]
        if has_text(fragment.user_property):
            return ReflectionSaltSource(fragment.user_property, source=fragment.source)  # type: ignore[arg-type]
        if has_text(fragment.system_wide):
            return SystemWideSaltSource(fragment.system_wide, source=fragment.source)  # type: ignore[arg-type]
        raise MalformedSaltSourceError(
            f"one of '{ATT_REF}', '{ATT_USER_PROPERTY}' or '{ATT_SYSTEM_WIDE}' must be set",
            fragment.as_attributes(),
        )
