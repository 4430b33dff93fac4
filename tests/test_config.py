import pytest
import yaml

from expense_tracker import config as config_module
from expense_tracker.config import DEFAULT_CONFIG, build_ledger, load_config
from expense_tracker.storage.sqlite_store import SqliteStore


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("EXPENSE_LEDGER_CONFIG", raising=False)
    monkeypatch.delenv("EXPENSE_LEDGER_STORAGE_PATH", raising=False)
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg["storage"] == "json"
    assert cfg["storage_key"] == "expenses"
    assert cfg["currency_symbol"] == "$"


def test_file_values_merge_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"storage": "sqlite", "storage_backends": {"extra": "x.y.Z"}}))
    cfg = load_config(path)
    assert cfg["storage"] == "sqlite"
    assert cfg["storage_backends"]["extra"] == "x.y.Z"
    assert cfg["storage_backends"]["json"] == DEFAULT_CONFIG["storage_backends"]["json"]


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"storage_path": "from-file.json"}))
    monkeypatch.setenv("EXPENSE_LEDGER_CONFIG", str(path))
    monkeypatch.setenv("EXPENSE_LEDGER_STORAGE_PATH", str(tmp_path / "from-env.json"))
    cfg = load_config()
    assert cfg["storage_path"] == str(tmp_path / "from-env.json")


def test_default_path_is_cwd_config(tmp_path, monkeypatch):
    monkeypatch.delenv("EXPENSE_LEDGER_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("currency_symbol: '€'\n")
    assert load_config()["currency_symbol"] == "€"
    assert config_module.CONFIG_PATH.name == "config.yaml"


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_build_ledger_uses_configured_backend(tmp_path):
    cfg = dict(DEFAULT_CONFIG, storage="sqlite", storage_path=str(tmp_path / "l.db"))
    ledger = build_ledger(cfg)
    assert isinstance(ledger.persistence.store, SqliteStore)
    ledger.add_expense("Coffee", "4.50")
    assert len(build_ledger(cfg)) == 1


def test_build_ledger_rejects_unknown_backend():
    with pytest.raises(ValueError, match="Unknown storage backend"):
        build_ledger(dict(DEFAULT_CONFIG, storage="redis"))
