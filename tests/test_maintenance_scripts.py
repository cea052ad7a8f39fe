"""Tests for the maintenance scripts when storage cannot be reached."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from srs.item_store import ItemStore
from scripts.maintenance import deck_report, reset_deck


@pytest.fixture
def unreachable_store():
    """Store with no tables whose schema setup also fails."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    failure = OperationalError("CREATE TABLE item_state", {}, Exception("disk I/O error"))
    with patch("srs.ItemStore", return_value=ItemStore(engine)), \
            patch("srs.init_db", side_effect=failure):
        yield
    engine.dispose()


def test_deck_report_falls_back_to_memory(unreachable_store, monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["deck_report", "hiragana"])

    deck_report.main()

    out = capsys.readouterr().out
    assert "Could not initialize database" in out
    assert "(storage unavailable)" in out
    assert "New:      104" in out
    assert "Last" not in out


def test_reset_deck_reports_failure(unreachable_store, monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["reset_deck", "hiragana"])
    monkeypatch.setattr("builtins.input", lambda prompt: "yes")

    with pytest.raises(SystemExit) as exc_info:
        reset_deck.main()

    assert exc_info.value.code == 1
    assert "Reset failed" in capsys.readouterr().out


def test_reset_deck_cancelled(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["reset_deck", "katakana"])
    monkeypatch.setattr("builtins.input", lambda prompt: "no")

    with patch("srs.ItemStore") as store_cls:
        reset_deck.main()

    store_cls.assert_not_called()
    assert "Cancelled" in capsys.readouterr().out
