"""Unit tests for Settings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

import pytest

from mp_passwords.config.settings import EnvSettingsLoader, Settings
from mp_passwords.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclasses.dataclass(frozen=True)
class _AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    name: str
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    strict: bool | None = None
    tags: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass(frozen=True)
class _RejectingSettings(Settings):
    _prefix: ClassVar[str] = "REJ"

    value: str = "x"

    def _validate(self) -> None:
        raise ValueError("always invalid")


class TestEnvSettingsLoader:
    def test_loads_and_coerces(self) -> None:
        env = {
            "APP_NAME": "svc",
            "APP_PORT": "9000",
            "APP_RATIO": "0.25",
            "APP_DEBUG": "yes",
            "APP_TAGS": "a, b,,c",
        }
        settings = EnvSettingsLoader(env).load(_AppSettings)
        assert settings.name == "svc"
        assert settings.port == 9000
        assert settings.ratio == 0.25
        assert settings.debug is True
        assert settings.tags == ["a", "b", "c"]

    def test_defaults_used_when_absent(self) -> None:
        settings = EnvSettingsLoader({"APP_NAME": "svc"}).load(_AppSettings)
        assert settings.port == 8080
        assert settings.strict is None

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_AppSettings)
        assert exc_info.value.setting_name == "APP_NAME"

    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("OFF", False), ("0", False)])
    def test_optional_bool(self, raw: str, expected: bool) -> None:
        settings = EnvSettingsLoader({"APP_NAME": "svc", "APP_STRICT": raw}).load(_AppSettings)
        assert settings.strict is expected

    def test_blank_optional_is_unset(self) -> None:
        settings = EnvSettingsLoader({"APP_NAME": "svc", "APP_STRICT": "  "}).load(_AppSettings)
        assert settings.strict is None

    def test_invalid_bool_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"APP_NAME": "svc", "APP_DEBUG": "maybe"}).load(_AppSettings)
        assert exc_info.value.setting_name == "APP_DEBUG"

    def test_invalid_int_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_NAME": "svc", "APP_PORT": "eighty"}).load(_AppSettings)

    def test_validation_failure_wrapped_in_config_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({}).load(_RejectingSettings)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "from-env")
        assert EnvSettingsLoader().load(_AppSettings).name == "from-env"


class TestSettingsBase:
    def test_prefix_is_not_a_field(self) -> None:
        assert "_prefix" not in {f.name for f in dataclasses.fields(Settings)}
        assert [f.name for f in dataclasses.fields(_AppSettings)][0] == "name"

    def test_instance_sees_subclass_prefix(self) -> None:
        assert _AppSettings(name="svc")._prefix == "APP"
