"""Tests for build-mode configuration.

Tests that:
- An explicit mode wins over the environment
- MULI_BUILD_MODE is honoured and normalized
- Without either, the interpreter's __debug__ flag decides
- The resolved configuration is immutable
"""

import pytest
from pydantic import ValidationError

from muli.schemas import BuildConfig, BUILD_MODE_ENV, resolve_build_config
from muli.schemas.build import default_build_mode

pytestmark = pytest.mark.unit


class TestBuildConfig:

    def test_default_is_checked(self):
        config = BuildConfig()
        assert config.mode == "checked"
        assert config.checked
        assert config.capture_location
        assert config.assertions_enabled

    def test_release(self):
        config = BuildConfig(mode="release")
        assert not config.checked
        assert not config.capture_location
        assert not config.assertions_enabled

    def test_mode_normalized(self):
        assert BuildConfig(mode="  RELEASE ").mode == "release"

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfig(mode="debug")

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            BuildConfig(mode="checked", verbose=True)

    def test_frozen(self):
        config = BuildConfig(mode="checked")
        with pytest.raises(ValidationError):
            config.mode = "release"


class TestResolveBuildConfig:

    def test_explicit_mode_wins(self):
        config = resolve_build_config("release", environ={BUILD_MODE_ENV: "checked"})
        assert config.mode == "release"

    def test_environment_used_without_explicit_mode(self):
        config = resolve_build_config(environ={BUILD_MODE_ENV: "Release"})
        assert config.mode == "release"

    def test_empty_environment_value_ignored(self):
        config = resolve_build_config(environ={BUILD_MODE_ENV: ""})
        assert config.mode == default_build_mode()

    def test_falls_back_to_interpreter_flag(self):
        config = resolve_build_config(environ={})
        assert config.mode == ("checked" if __debug__ else "release")

    def test_invalid_environment_value(self):
        with pytest.raises(ValidationError):
            resolve_build_config(environ={BUILD_MODE_ENV: "fast"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv(BUILD_MODE_ENV, "release")
        assert resolve_build_config().mode == "release"
