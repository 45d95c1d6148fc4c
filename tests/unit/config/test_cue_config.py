"""Unit tests for CUE compiler configuration."""

import pytest

from src.config.cue_config import (
    DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS,
    DEFAULT_CUE_COMPILER_CONFIG,
    MAX_CUE_COMPILE_TIMEOUT_SECONDS,
    MIN_CUE_COMPILE_TIMEOUT_SECONDS,
    TEST_CUE_COMPILER_CONFIG,
    CueCompilerConfig,
)


class TestCueCompilerConfig:
    """Tests for CueCompilerConfig validation."""

    def test_defaults(self) -> None:
        config = CueCompilerConfig()

        assert config.cue_binary == "cue"
        assert config.timeout_seconds == DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS

    def test_presets(self) -> None:
        assert DEFAULT_CUE_COMPILER_CONFIG == CueCompilerConfig()
        assert TEST_CUE_COMPILER_CONFIG.timeout_seconds == MIN_CUE_COMPILE_TIMEOUT_SECONDS

    @pytest.mark.parametrize(
        "timeout",
        [MIN_CUE_COMPILE_TIMEOUT_SECONDS - 1, MAX_CUE_COMPILE_TIMEOUT_SECONDS + 1],
    )
    def test_rejects_out_of_range_timeout(self, timeout: int) -> None:
        with pytest.raises(ValueError, match="timeout_seconds must be between"):
            CueCompilerConfig(timeout_seconds=timeout)

    def test_rejects_empty_binary(self) -> None:
        with pytest.raises(ValueError, match="cue_binary"):
            CueCompilerConfig(cue_binary="")

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            CueCompilerConfig().timeout_seconds = 5  # type: ignore[misc]


class TestFromEnvironment:
    """Tests for CueCompilerConfig.from_environment."""

    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CUE_BINARY", raising=False)
        monkeypatch.delenv("CUE_COMPILE_TIMEOUT_SECONDS", raising=False)

        assert CueCompilerConfig.from_environment() == CueCompilerConfig()

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CUE_BINARY", "/usr/local/bin/cue")
        monkeypatch.setenv("CUE_COMPILE_TIMEOUT_SECONDS", "45")

        config = CueCompilerConfig.from_environment()

        assert config.cue_binary == "/usr/local/bin/cue"
        assert config.timeout_seconds == 45

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("0", MIN_CUE_COMPILE_TIMEOUT_SECONDS),
            ("9999", MAX_CUE_COMPILE_TIMEOUT_SECONDS),
            ("soon", DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS),
        ],
    )
    def test_clamps_and_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
    ) -> None:
        monkeypatch.setenv("CUE_COMPILE_TIMEOUT_SECONDS", raw)

        assert CueCompilerConfig.from_environment().timeout_seconds == expected
