import json

from expense_tracker.core.models import ExpenseRecord
from expense_tracker.persistence import LedgerPersistence
from expense_tracker.storage.json_store import JsonFileStore
from expense_tracker.storage.memory_store import MemoryStore


def _records():
    return [
        ExpenseRecord(id="2", description="Bus", amount=2.0, category="Transport", date="2025-05-04"),
        ExpenseRecord(id="1", description="Coffee", amount=4.5, category="Food", date="2025-05-03"),
    ]


def test_load_missing_key_is_empty():
    assert LedgerPersistence(MemoryStore()).load() == []


def test_save_then_load_preserves_order_and_fields(tmp_path):
    persistence = LedgerPersistence(JsonFileStore(path=tmp_path / "s.json"))
    persistence.save(_records())
    assert persistence.load() == _records()


def test_saved_value_uses_plain_field_names():
    store = MemoryStore()
    LedgerPersistence(store).save(_records()[:1])
    assert json.loads(store.get("expenses")) == [
        {"id": "2", "description": "Bus", "amount": 2.0, "category": "Transport", "date": "2025-05-04"}
    ]


def test_empty_sequence_is_written():
    store = MemoryStore(data={"expenses": json.dumps([_records()[0].to_dict()])})
    persistence = LedgerPersistence(store)
    persistence.save([])
    assert store.get("expenses") == "[]"
    assert persistence.load() == []


def test_custom_key():
    store = MemoryStore()
    LedgerPersistence(store, key="household").save(_records())
    assert store.get("expenses") is None
    assert len(LedgerPersistence(store, key="household").load()) == 2


def test_malformed_values_fall_back_to_empty(caplog):
    bad_values = [
        "{not json",
        json.dumps({"id": "1"}),
        json.dumps([{"id": "1", "description": "x"}]),
        json.dumps([dict(_records()[0].to_dict(), amount=-3)]),
        json.dumps([_records()[0].to_dict(), _records()[0].to_dict()]),
    ]
    for raw in bad_values:
        persistence = LedgerPersistence(MemoryStore(data={"expenses": raw}))
        assert persistence.load() == []
    assert "Discarding malformed data" in caplog.text
