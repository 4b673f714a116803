"""Resolved descriptors handed to the container.

Everything here is an immutable value: two resolutions of the same input
compare equal, which keeps configuration reproducible and easy to assert on.
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mp_passwords.security.encoding.catalog import EncoderKind

__all__ = [
    "ConstructedEncoder",
    "ConstructorArg",
    "EncoderReference",
    "EncoderSpec",
    "ReflectionSaltSource",
    "ResolutionResult",
    "SaltSourceReference",
    "SaltSourceSpec",
    "SystemWideSaltSource",
]


@dataclasses.dataclass(frozen=True)
class ConstructorArg:
    """Positional constructor argument for an encoder."""

    index: int
    value: int | str


@dataclasses.dataclass(frozen=True)
class EncoderReference:
    """Name of an encoder the container already owns. Not validated here."""

    name: str


@dataclasses.dataclass(frozen=True)
class ConstructedEncoder:
    """Everything the container needs to build a catalogued encoder."""

    kind: EncoderKind
    constructor_args: tuple[ConstructorArg, ...] = ()
    base64_encoded: bool = False
    # Where the configuration came from (element, file position...), for error reporting.
    source: Any = dataclasses.field(default=None, compare=False)

    @property
    def constructor_values(self) -> tuple[int | str, ...]:
        return tuple(arg.value for arg in sorted(self.constructor_args, key=lambda a: a.index))


type EncoderSpec = EncoderReference | ConstructedEncoder


@dataclasses.dataclass(frozen=True)
class ReflectionSaltSource:
    """Salt read from a property of the user being authenticated."""

    user_property: str
    source: Any = dataclasses.field(default=None, compare=False)


@dataclasses.dataclass(frozen=True)
class SystemWideSaltSource:
    """One fixed salt shared by every credential."""

    salt: str = dataclasses.field(repr=False)
    source: Any = dataclasses.field(default=None, compare=False)


@dataclasses.dataclass(frozen=True)
class SaltSourceReference:
    """Name of a salt source the container already owns."""

    name: str


type SaltSourceSpec = ReflectionSaltSource | SystemWideSaltSource | SaltSourceReference


@dataclasses.dataclass(frozen=True)
class ResolutionResult:
    encoder: EncoderSpec
    salt_source: SaltSourceSpec | None = None

    @property
    def is_reference(self) -> bool:
        return isinstance(self.encoder, EncoderReference)
