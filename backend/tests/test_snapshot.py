import json
import logging
import os
import stat
from pathlib import Path

import pytest

from payledger.schemas.ledger import DayRow, Ledger, RateRow
from payledger.services import snapshot
from payledger.services.ledger import recalculate
from payledger.services.snapshot import SnapshotError, backup_path, load_snapshot, save_snapshot


@pytest.fixture()
def ledger() -> Ledger:
    lg = Ledger(
        days=[DayRow(date="2024-03-01", hours=5.0), DayRow(date="2024-07-01", hours=2.0, paid=True)],
        rates=[RateRow(effective_date="2024-01-01", rate=10.0), RateRow(effective_date="2024-06-01", rate=20.0)],
    )
    recalculate(lg)
    return lg


def test_missing_file_loads_as_none(tmp_path):
    assert load_snapshot(tmp_path / "nope.json") is None


def test_save_then_load_keeps_rows_ids_and_totals(tmp_path, ledger):
    path = tmp_path / "ledger.json"
    save_snapshot(path, ledger)

    loaded = load_snapshot(path)
    assert loaded == ledger
    assert loaded.days_total.pay == 90.0


def test_second_save_keeps_previous_file_as_backup(tmp_path, ledger):
    path = tmp_path / "ledger.json"
    save_snapshot(path, ledger)
    first = path.read_text()

    ledger.days.pop()
    recalculate(ledger)
    save_snapshot(path, ledger)

    assert backup_path(path).read_text() == first
    assert len(json.loads(path.read_text())["days"]) == 1


def test_save_leaves_no_temp_files(tmp_path, ledger):
    path = tmp_path / "ledger.json"
    save_snapshot(path, ledger)
    save_snapshot(path, ledger)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["ledger.json", "ledger.json.bak"]


def test_rows_without_ids_get_fresh_ids(tmp_path):
    path = tmp_path / "ledger.json"
    path.write_text(
        json.dumps(
            {
                "days": [{"date": "2024-03-01", "hours": 1, "paid": False}],
                "rates": [{"effective_date": "2024-01-01", "rate": 10}],
            }
        )
    )

    loaded = load_snapshot(path)
    assert len(loaded.days[0].id) == 32
    assert len(loaded.rates[0].id) == 32


@pytest.mark.parametrize("content", ["", "{not json", '{"days": "nope"}'])
def test_corrupt_file_is_an_error(tmp_path, content):
    path = tmp_path / "ledger.json"
    path.write_text(content)

    with pytest.raises(SnapshotError):
        load_snapshot(path)


def test_save_into_missing_directory_raises(tmp_path, ledger):
    with pytest.raises(SnapshotError):
        save_snapshot(tmp_path / "missing" / "ledger.json", ledger)


def test_failed_backup_rename_still_saves(tmp_path, ledger, monkeypatch, caplog):
    path = tmp_path / "ledger.json"
    save_snapshot(path, ledger)

    real_replace = os.replace

    def replace(src, dst):
        if str(dst).endswith(".bak"):
            raise OSError("read-only")
        return real_replace(src, dst)

    monkeypatch.setattr(snapshot.os, "replace", replace)
    ledger.days.pop()
    recalculate(ledger)

    with caplog.at_level(logging.WARNING, logger="payledger.services.snapshot"):
        save_snapshot(path, ledger)

    assert len(json.loads(path.read_text())["days"]) == 1
    assert "could not back up" in caplog.text
    assert not list(tmp_path.glob("*.tmp"))


def test_failed_final_replace_raises_and_cleans_up(tmp_path, ledger, monkeypatch):
    path = tmp_path / "ledger.json"
    real_replace = os.replace

    def replace(src, dst):
        if Path(dst) == path:
            raise OSError("disk gone")
        return real_replace(src, dst)

    monkeypatch.setattr(snapshot.os, "replace", replace)

    with pytest.raises(SnapshotError):
        save_snapshot(path, ledger)

    assert not path.exists()
    assert not list(tmp_path.glob("*.tmp"))


@pytest.mark.skipif(os.name != "posix", reason="posix file modes")
def test_saved_file_is_not_owner_only(tmp_path, ledger):
    path = tmp_path / "ledger.json"
    umask = os.umask(0o022)
    try:
        save_snapshot(path, ledger)
    finally:
        os.umask(umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644

    path.chmod(0o640)
    save_snapshot(path, ledger)
    assert stat.S_IMODE(path.stat().st_mode) == 0o640
