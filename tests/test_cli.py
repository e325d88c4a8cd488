from pim_app.__main__ import main, parse_args
from pim_app.persistence import PartsRepository
from pim_app.storage import SqliteKeyValueStore


def test_parse_args_defaults():
    args = parse_args([])
    assert args.storage_path is None
    assert not args.no_ui
    assert not args.reset


def test_no_ui_prints_summary_and_exports(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    storage = tmp_path / "inventory.db"
    export = tmp_path / "export" / "inventory.xlsx"
    exit_code = main(["--storage-path", str(storage), "--no-ui", "--export", str(export)])
    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Parts: 2, total value: $1,787.00" in out
    assert export.exists()
    assert (tmp_path / "appdata" / "PIM" / "settings.json").exists()


def test_reset_removes_saved_inventory(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    storage = tmp_path / "inventory.db"
    repo = PartsRepository(SqliteKeyValueStore(storage))
    repo.save([])
    assert SqliteKeyValueStore(storage).get_item(repo.key) is not None
    assert main(["--storage-path", str(storage), "--no-ui", "--reset"]) == 0
    assert SqliteKeyValueStore(storage).get_item(repo.key) is None
    assert "Parts: 2" in capsys.readouterr().out
