"""Raw, already-parsed ``<password-encoder>`` configuration values."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

__all__ = [
    "ATT_BASE64",
    "ATT_HASH",
    "ATT_REF",
    "ATT_SYSTEM_WIDE",
    "ATT_USER_PROPERTY",
    "RawEncoderConfig",
    "SaltFragment",
    "has_text",
    "parse_base64_flag",
]

ATT_HASH = "hash"
ATT_REF = "ref"
ATT_BASE64 = "base64"
ATT_USER_PROPERTY = "user-property"
ATT_SYSTEM_WIDE = "system-wide"


def has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def parse_base64_flag(value: str | None) -> bool | None:
    """``None`` for a blank attribute, else ``True`` only for ``"true"`` (any case)."""
    if not has_text(value):
        return None
    return value.strip().lower() == "true"  # type: ignore[union-attr]


def _text(attributes: Mapping[str, str | None], name: str) -> str | None:
    value = attributes.get(name)
    return value if has_text(value) else None


@dataclasses.dataclass(frozen=True)
class SaltFragment:
    """Attributes of a nested ``<salt-source>`` element."""

    user_property: str | None = None
    system_wide: str | None = dataclasses.field(default=None, repr=False)
    ref: str | None = None
    source: Any = dataclasses.field(default=None, compare=False)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str | None], source: Any = None) -> "SaltFragment":
        return cls(
            user_property=_text(attributes, ATT_USER_PROPERTY),
            system_wide=_text(attributes, ATT_SYSTEM_WIDE),
            ref=_text(attributes, ATT_REF),
            source=source,
        )

    def as_attributes(self) -> dict[str, str | None]:
        return {
            ATT_USER_PROPERTY: self.user_property,
            ATT_SYSTEM_WIDE: self.system_wide,
            ATT_REF: self.ref,
        }


@dataclasses.dataclass(frozen=True)
class RawEncoderConfig:
    """Inputs to :meth:`EncoderResolver.resolve`.

    ``base64`` is tri-state: ``None`` means the option was never set, which
    behaves exactly like ``False``.
    """

    algorithm: str | None = None
    ref: str | None = None
    base64: bool | None = None
    salt_fragment: SaltFragment | None = None
    source: Any = dataclasses.field(default=None, compare=False)

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, str | None],
        salt_attributes: Mapping[str, str | None] | None = None,
        source: Any = None,
    ) -> "RawEncoderConfig":
        """Build from element-style attributes, where blank means absent."""
        salt_fragment = None
        if salt_attributes is not None:
            salt_fragment = SaltFragment.from_attributes(salt_attributes, source=source)
        return cls(
            algorithm=_text(attributes, ATT_HASH),
            ref=_text(attributes, ATT_REF),
            base64=parse_base64_flag(attributes.get(ATT_BASE64)),
            salt_fragment=salt_fragment,
            source=source,
        )
