"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from mp_passwords.config.settings.base import Settings
from mp_passwords.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``<PREFIX>_<FIELD>``.

    ``environ`` defaults to :data:`os.environ`; tests pass a plain dict.
    Optional fields (``X | None``) treat a blank value as unset.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)
            type_hint = hints.get(field.name, str)
            optional = _is_optional(type_hint)

            if raw is None or (optional and not raw.strip()):
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(env_key, raw, _unwrap_optional(type_hint))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = typing.get_origin(type_hint)
        if type_hint is bool:
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidSettingValueError(key, value, "expected a boolean")
        try:
            if type_hint is int:
                return int(value)
            if type_hint is float:
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, str(exc)) from exc
        if origin is list:
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def _is_optional(type_hint: Any) -> bool:
    return type(None) in typing.get_args(type_hint)


def _unwrap_optional(type_hint: Any) -> Any:
    if not _is_optional(type_hint):
        return type_hint
    args = [a for a in typing.get_args(type_hint) if a is not type(None)]
    return args[0] if len(args) == 1 else type_hint


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
