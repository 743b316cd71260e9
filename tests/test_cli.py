"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from potenad.cli import EXIT_OK, EXIT_OPEN_FAILED, EXIT_SAVE_FAILED, run_cli
from potenad.state import SessionState


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "cli-config"


def _state_file(config_dir: Path) -> Path:
    return config_dir / "potenad" / "config.toml"


class TestOpen:
    """Test the open command."""

    def test_open_prints_and_remembers(
        self, config_dir: Path, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run_cli(["--config-dir", str(config_dir), "open", str(document)])

        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "hello" in out
        assert "world" in out
        assert SessionState.load(_state_file(config_dir)).path == document

    def test_open_missing_file(
        self, config_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run_cli(["--config-dir", str(config_dir), "open", str(tmp_path / "nope.txt")])

        assert code == EXIT_OPEN_FAILED
        assert "Cannot open" in capsys.readouterr().err
        assert not _state_file(config_dir).exists()

    def test_open_records_absolute_path(
        self, config_dir: Path, document: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(document.parent)

        assert run_cli(["--config-dir", str(config_dir), "open", document.name]) == EXIT_OK

        remembered = SessionState.load(_state_file(config_dir)).path
        assert remembered is not None
        assert remembered.is_absolute()
        assert remembered == document.resolve()

    def test_open_nul_path(self, config_dir: Path) -> None:
        assert run_cli(["--config-dir", str(config_dir), "open", "a\x00b"]) == EXIT_OPEN_FAILED

    def test_open_with_unwritable_state(self, tmp_path: Path, document: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("in the way")

        code = run_cli(["--config-dir", str(blocker), "open", str(document)])

        assert code == EXIT_SAVE_FAILED

    def test_default_config_dir_from_env(
        self, isolated_config_dir: Path, document: Path
    ) -> None:
        assert run_cli(["open", str(document)]) == EXIT_OK
        assert _state_file(isolated_config_dir).is_file()


class TestOtherCommands:
    """Test last, state and forget."""

    def test_last_reopens(
        self, config_dir: Path, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(["--config-dir", str(config_dir), "open", str(document)])
        capsys.readouterr()

        code = run_cli(["--config-dir", str(config_dir), "last"])

        assert code == EXIT_OK
        assert "world" in capsys.readouterr().out

    def test_last_with_nul_path_in_state(self, config_dir: Path) -> None:
        state_file = _state_file(config_dir)
        state_file.parent.mkdir(parents=True)
        state_file.write_text('path = "a\\u0000b"\n', encoding="utf-8")

        assert run_cli(["--config-dir", str(config_dir), "last"]) == EXIT_OPEN_FAILED

    def test_last_without_history(self, config_dir: Path) -> None:
        assert run_cli(["--config-dir", str(config_dir), "last"]) == EXIT_OPEN_FAILED

    def test_state(
        self, config_dir: Path, document: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(["--config-dir", str(config_dir), "open", str(document)])
        capsys.readouterr()

        code = run_cli(["--config-dir", str(config_dir), "state"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "config.toml" in out
        assert document.name in out

    def test_forget(self, config_dir: Path, document: Path) -> None:
        run_cli(["--config-dir", str(config_dir), "open", str(document)])

        assert run_cli(["--config-dir", str(config_dir), "forget"]) == EXIT_OK
        assert SessionState.load(_state_file(config_dir)).path is None

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli([]) == EXIT_OPEN_FAILED
        assert "usage" in capsys.readouterr().out
