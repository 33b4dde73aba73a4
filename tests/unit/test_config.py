import pytest

from proctime.config import HarnessConfig
from proctime.config.compat import env_bool, env_int


class TestEnvBool:
    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("PROCTIME_TEST_FLAG", raw)
        assert env_bool("PROCTIME_TEST_FLAG", default=False) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_falsy(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("PROCTIME_TEST_FLAG", raw)
        assert env_bool("PROCTIME_TEST_FLAG", default=True) is False

    def test_unset_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROCTIME_TEST_FLAG", raising=False)
        assert env_bool("PROCTIME_TEST_FLAG", default=True) is True

    def test_garbage_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_TEST_FLAG", "maybe")
        assert env_bool("PROCTIME_TEST_FLAG", default=False) is False


class TestEnvInt:
    def test_parses(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_TEST_INT", "42")
        assert env_int("PROCTIME_TEST_INT", default=0) == 42

    def test_invalid_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_TEST_INT", "forty")
        with pytest.raises(RuntimeError, match="must be an integer"):
            env_int("PROCTIME_TEST_INT", default=0)


class TestHarnessConfigFromEnv:
    def test_defaults(self, clean_env: None) -> None:
        config = HarnessConfig.from_env()
        assert config == HarnessConfig(log_level="WARNING", capture_stdout=True, stderr_max_chars=0)

    def test_reads_environment(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_LOG_LEVEL", "debug")
        monkeypatch.setenv("PROCTIME_CAPTURE_STDOUT", "false")
        monkeypatch.setenv("PROCTIME_STDERR_MAX_CHARS", "120")
        config = HarnessConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.capture_stdout is False
        assert config.stderr_max_chars == 120

    def test_invalid_log_level(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="PROCTIME_LOG_LEVEL"):
            HarnessConfig.from_env()

    def test_negative_stderr_limit(self, clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCTIME_STDERR_MAX_CHARS", "-5")
        with pytest.raises(RuntimeError, match=">= 0"):
            HarnessConfig.from_env()


class TestHarnessConfigFrozen:
    def test_config_is_frozen(self) -> None:
        config = HarnessConfig()
        with pytest.raises(AttributeError):
            config.capture_stdout = False  # type: ignore[misc]


class TestSettingsDefaults:
    def test_module_defaults_ignore_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import proctime.config.settings as settings_mod

        monkeypatch.setenv("PROCTIME_STDERR_MAX_CHARS", "abc")
        assert settings_mod.STDERR_MAX_CHARS == 0
        assert settings_mod.CAPTURE_STDOUT is True
        with pytest.raises(RuntimeError, match="must be an integer"):
            HarnessConfig.from_env()
