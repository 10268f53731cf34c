import json
from dataclasses import replace

import pytest

from contractor_registry.app.core.config import Settings
from contractor_registry.app.core.storage import (
    JsonFileSlotStorage,
    MemorySlotStorage,
    SQLiteSlotStorage,
    build_storage,
)
from contractor_registry.app.services.contractor_service import ContractorStore


def test_sqlite_slot_round_trip(tmp_path):
    storage = SQLiteSlotStorage("contractors", tmp_path / "registry.db")

    assert storage.load() is None
    storage.save("[1]")
    storage.save("[1, 2]")

    assert SQLiteSlotStorage("contractors", tmp_path / "registry.db").load() == "[1, 2]"
    assert SQLiteSlotStorage("other", tmp_path / "registry.db").load() is None


def test_sqlite_migrations_apply_once(tmp_path):
    db_path = tmp_path / "registry.db"
    SQLiteSlotStorage("contractors", db_path).init_db()
    storage = SQLiteSlotStorage("contractors", db_path)
    storage.init_db()

    conn = storage.get_connection()
    try:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == [1]


def test_json_file_slot_round_trip(tmp_path):
    storage = JsonFileSlotStorage("contractors", tmp_path / "data")

    assert storage.load() is None
    storage.save('[{"id": 1}]')

    assert (tmp_path / "data" / "contractors.json").read_text(encoding="utf-8") == '[{"id": 1}]'
    assert storage.load() == '[{"id": 1}]'
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["contractors.json"]


def test_memory_slot_is_isolated_per_instance():
    first = MemorySlotStorage("contractors")
    first.save("[]")
    assert MemorySlotStorage("contractors").load() is None


@pytest.mark.parametrize(
    "backend, expected",
    [("sqlite", SQLiteSlotStorage), ("file", JsonFileSlotStorage), ("MEMORY", MemorySlotStorage)],
)
def test_build_storage_selects_backend(tmp_path, backend, expected):
    settings = replace(
        Settings(),
        storage_backend=backend,
        database_url=str(tmp_path / "c.db"),
        data_dir=str(tmp_path / "data"),
        storage_key="slot",
    )
    storage = build_storage(settings)
    assert isinstance(storage, expected)
    assert storage.key == "slot"


def test_build_storage_rejects_unknown_backend():
    with pytest.raises(ValueError):
        build_storage(replace(Settings(), storage_backend="redis"))


def test_store_persists_through_sqlite(tmp_path):
    db_path = tmp_path / "registry.db"
    store = ContractorStore(SQLiteSlotStorage("contractors", db_path))
    store.load()
    store.remove(1)

    reloaded = ContractorStore(SQLiteSlotStorage("contractors", db_path)).load()

    assert len(reloaded) == 23
    assert reloaded[0].name == "Pintu Contactor"
    assert reloaded[0].serial == 1


def test_store_reads_browser_format(tmp_path):
    browser_payload = [
        {"id": 4, "sNo": 1, "name": "Eng Hanif", "contactNo": "+880 17 1478 9240", "address": "", "remarks": ""}
    ]
    storage = JsonFileSlotStorage("contractors", tmp_path)
    storage.save(json.dumps(browser_payload))

    records = ContractorStore(storage).load()

    assert records[0].contact_number == "+880 17 1478 9240"
    assert records[0].serial == 1
