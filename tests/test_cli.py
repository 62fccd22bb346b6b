from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from biodownload import cli
from biodownload.errors import ConnectError
from biodownload.resources import Resource


def test_list_prints_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "hp.obo\thttps://raw.githubusercontent.com/" in out
    assert "prosite.dat\tftp://ftp.expasy.org/databases/prosite/prosite.dat" in out


def test_url_command_transfers_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "source.txt"
    source.write_bytes(b"hello")
    dest = tmp_path / "dest.txt"

    assert cli.main(["url", source.as_uri(), str(dest)]) == 0
    assert dest.read_bytes() == b"hello"
    assert str(dest) in capsys.readouterr().out


def test_url_command_reports_failure(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["url", "not a url", str(tmp_path / "dest.txt")]) == 1
    assert "FAILED\tnot a url" in capsys.readouterr().err


def test_fetch_continues_past_failures(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    calls: list[str] = []

    def fake_download(resource: Resource, dest_dir: Any) -> Path:
        calls.append(resource.name)
        if resource.name == "go.obo":
            raise ConnectError("Problem connecting", url=resource.url)
        return Path(dest_dir) / resource.name

    monkeypatch.setattr(cli, "download", fake_download)

    code = cli.main(["fetch", "go.obo", "unknown.obo", "hp.obo", "--out", str(tmp_path)])

    captured = capsys.readouterr()
    assert code == 1
    assert calls == ["go.obo", "hp.obo"]
    assert "FAILED\tgo.obo" in captured.err
    assert "FAILED\tunknown.obo" in captured.err
    assert f"hp.obo\t{tmp_path / 'hp.obo'}" in captured.out


def test_fetch_uses_download_dir_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    seen: list[Path] = []

    def fake_download(resource: Resource, dest_dir: Any) -> Path:
        seen.append(Path(dest_dir))
        return Path(dest_dir) / resource.name

    monkeypatch.setattr(cli, "download", fake_download)
    monkeypatch.setenv("BIODOWNLOAD_DIR", str(tmp_path / "env"))

    assert cli.main(["fetch", "maxo.obo"]) == 0
    assert seen == [tmp_path / "env"]


def test_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.main([])
