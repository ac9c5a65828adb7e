"""Tests for the record CLI commands against a temporary SQLite database."""

from pathlib import Path

import pytest

from iprecord.cli import console as console_module
from iprecord.cli.commands import events, init, record
from iprecord.cli.util import parse_timestamp


@pytest.fixture(autouse=True)
def database(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    db_path = tmp_path / "iprecord.db"
    monkeypatch.setenv("IPRECORD_DATABASE__URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("IPRECORD_LOG_FILE", str(tmp_path / "iprecord.log"))
    monkeypatch.delenv("IPRECORD_CONFIG_FILE", raising=False)
    # Fresh wide console so tables are not wrapped
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setattr(console_module, "_default", None)
    return db_path


def _register(**overrides: str) -> None:
    options = {
        "title": "Sunrise",
        "creator_name": "Alice",
        "holder": "addrA",
        "category": "image",
        "description": "a painting",
        "at": "2024-05-01 12:30:00",
    }
    options.update(overrides)
    record.register("C1", **options)


class TestRecordCommands:
    def test_register_and_show(self, capsys: pytest.CaptureFixture[str]) -> None:
        _register()
        record.show("C1")

        out = capsys.readouterr().out
        assert "Record C1 registered successfully" in out
        assert "Sunrise" in out
        assert "Registered on 2024-05-01 12:30:00 by addrA" in out

    def test_duplicate_register_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        _register()
        with pytest.raises(SystemExit) as exc_info:
            _register(title="Other")
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().err

    def test_transfer_then_delete(self, capsys: pytest.CaptureFixture[str]) -> None:
        _register()
        record.transfer("C1", to="addrB", caller="addrA")
        record.delete("C1", caller="addrB")

        out = capsys.readouterr().out
        assert "Record C1 transferred to addrB" in out
        assert "Record C1 marked as deleted" in out

        with pytest.raises(SystemExit):
            record.show("C1")
        assert "deleted" in capsys.readouterr().err

    def test_describe(self, capsys: pytest.CaptureFixture[str]) -> None:
        _register()
        record.describe("C1", description="an oil painting")
        assert "Description for record C1 updated" in capsys.readouterr().out

    def test_show_missing(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            record.show("nope")
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err


class TestInitAndEvents:
    def test_init(self, capsys: pytest.CaptureFixture[str]) -> None:
        init.init(creator="deployer")
        assert "Initialized successfully by deployer" in capsys.readouterr().out

    def test_events_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        events.events()
        assert "No events found" in capsys.readouterr().out

    def test_events_lists_emitted(self, capsys: pytest.CaptureFixture[str]) -> None:
        _register()
        capsys.readouterr()
        events.events(names=["RecordRegistered"])
        assert "RecordRegistered" in capsys.readouterr().out


class TestParseTimestamp:
    def test_none(self) -> None:
        assert parse_timestamp(None) is None

    def test_valid(self) -> None:
        assert parse_timestamp("2024-05-01 12:30:00").hour == 12

    def test_invalid_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_timestamp("yesterday")
        assert exc_info.value.code == 2
