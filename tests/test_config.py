from __future__ import annotations

from pathlib import Path

import pytest

from biodownload import config


@pytest.fixture(autouse=True)
def _restore_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "_CONFIG", config.Config())


def test_defaults() -> None:
    cfg = config.get_config()
    assert cfg.chunk_size == 2048
    assert cfg.timeout_seconds > 0
    assert cfg.user_agent.startswith("biodownload/")


def test_configure_replaces_global() -> None:
    updated = config.configure(chunk_size=4096, timeout_seconds=5.0)
    assert updated.chunk_size == 4096
    assert config.get_config() is updated
    assert config.get_config().timeout_seconds == 5.0


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_configure_rejects_bad_chunk_size(chunk_size: int) -> None:
    with pytest.raises(ValueError, match="chunk_size"):
        config.configure(chunk_size=chunk_size)
    assert config.get_config().chunk_size == 2048


def test_configure_unknown_field() -> None:
    with pytest.raises(TypeError):
        config.configure(retries=3)


def test_download_dir_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BIODOWNLOAD_DIR", str(tmp_path))
    assert config.get_download_dir() == tmp_path


def test_download_dir_from_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("BIODOWNLOAD_DIR", raising=False)
    config.configure(download_dir=tmp_path / "downloads")
    assert config.get_download_dir() == tmp_path / "downloads"


@pytest.mark.parametrize("chunk_size", [0, -1, True, 2.5])
def test_config_rejects_bad_chunk_size(chunk_size: object) -> None:
    with pytest.raises(ValueError, match="chunk_size must be a positive integer"):
        config.Config(chunk_size=chunk_size)  # type: ignore[arg-type]
