import sqlite3

import pytest

from fismed.database import Database
from fismed.payload import ApiError
from fismed.warehouse import gudang_list, hapus_gudang, tambah_gudang


def _db(tmp_path, rows=(), create=True):
    path = str(tmp_path / "data.db")
    if create:
        with sqlite3.connect(path) as conn:
            conn.execute(
                "CREATE TABLE gudang (id INTEGER PRIMARY KEY, nama_gudang TEXT, lokasi TEXT)"
            )
            conn.executemany("INSERT INTO gudang VALUES (?, ?, ?)", rows)
        conn.close()
    return Database(lambda: sqlite3.connect(path))


def test_list_returns_rows_in_id_order(tmp_path):
    db = _db(tmp_path, rows=[(2, "Timur", "Bekasi"), (1, "Pusat", "Jakarta")])
    reply = gudang_list(db)
    assert reply.status == 200
    assert reply.body["data"] == [
        {"id": 1, "nama_gudang": "Pusat", "alamat_gudang": "Jakarta"},
        {"id": 2, "nama_gudang": "Timur", "alamat_gudang": "Bekasi"},
    ]


def test_list_empty(tmp_path):
    reply = gudang_list(_db(tmp_path))
    assert reply.body == {"message": "Data Tidak Ditemukan !", "data": [], "status": True}


def test_list_null_name_is_scan_error(tmp_path):
    reply = gudang_list(_db(tmp_path, rows=[(1, None, "Jakarta")]))
    assert reply.status == 500
    assert reply.body == {"error": "Failed to scan Data", "status": False}


def test_list_missing_table(tmp_path):
    reply = gudang_list(_db(tmp_path, create=False))
    assert reply.status == 500
    assert reply.body["error"] == "Failed to execute query"


def test_add_then_list(tmp_path):
    db = _db(tmp_path)
    reply = tambah_gudang(db, {"nama_gudang": "Pusat", "alamat_gudang": "Jakarta"})
    assert reply.status == 200
    assert reply.body == {"message": "Data Berhasil Ditambahkan !", "status": True}
    listed = gudang_list(db).body["data"]
    assert [(w["nama_gudang"], w["alamat_gudang"]) for w in listed] == [
        ("Pusat", "Jakarta")
    ]


def test_add_without_table_fails(tmp_path):
    reply = tambah_gudang(_db(tmp_path, create=False), {"nama_gudang": "Pusat"})
    assert reply.status == 400
    assert "gudang" in reply.body["message"]


def test_delete_removes_only_that_row(tmp_path):
    db = _db(tmp_path, rows=[(1, "Pusat", "Jakarta"), (2, "Timur", "Bekasi")])
    reply = hapus_gudang(db, {"id": 1})
    assert reply.status == 200
    assert reply.body == {"message": "Data Berhasil Dihapus!", "status": True}
    assert [w["id"] for w in gudang_list(db).body["data"]] == [2]


def test_delete_without_table_fails(tmp_path):
    reply = hapus_gudang(_db(tmp_path, create=False), {"id": 1})
    assert reply.status == 400
    assert "gudang" in reply.body["message"]


def test_bad_id_type_rejected(tmp_path):
    with pytest.raises(ApiError):
        hapus_gudang(_db(tmp_path), {"id": "one"})