import sqlite3

import pytest

from fismed.database import Database
from fismed.payload import ApiError
from fismed.price_list import list_by_customer, price_list


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "fismed.db"
    conn = sqlite3.connect(path)
    conn.execute(
        "CREATE TABLE price_list (id INTEGER PRIMARY KEY, nama_rumah_sakit TEXT, "
        "kode TEXT, variable TEXT, nama TEXT, diskon INTEGER, price TEXT, added TEXT)"
    )
    conn.execute(
        "CREATE TABLE stock (id INTEGER PRIMARY KEY, variable TEXT, nama TEXT, "
        "qty INTEGER, price, gudang_id INTEGER, kode TEXT)"
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def db(db_path):
    return Database(lambda: sqlite3.connect(db_path))


def _run(path, sql, *rows):
    conn = sqlite3.connect(path)
    conn.executemany(sql, rows)
    conn.commit()
    conn.close()


def _add_prices(path, *rows):
    _run(
        path,
        "INSERT INTO price_list (nama_rumah_sakit, kode, variable, nama, diskon, price, added) "
        "VALUES (?, ?, ?, ?, ?, ?, ?)",
        *rows,
    )


def _add_stock(path, *rows):
    _run(
        path,
        "INSERT INTO stock (variable, nama, qty, price, gudang_id, kode) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        *rows,
    )


def test_price_list_empty(db):
    reply = price_list(db)
    assert reply.status == 200
    assert reply.body == {"message": "Data Tidak Ditemukan !", "data": [], "status": True}


def test_price_list_returns_rows(db, db_path):
    _add_prices(
        db_path,
        ("RS Alpha", "K1", "Screw", "Screw 3mm", 5, "1000", "1"),
        ("RS Beta", "K2", "Plate", "Plate L", 0, "2500", "1"),
    )
    reply = price_list(db)
    assert reply.body["message"] == "Data Ditemukan !"
    data = sorted(reply.body["data"], key=lambda entry: entry["kode"])
    assert [entry["nama_Rumah_Sakit"] for entry in data] == ["RS Alpha", "RS Beta"]
    assert data[0]["diskon"] == 5
    assert data[1]["price"] == "2500"
    assert all(entry["id"] == 0 for entry in data)


def test_price_list_scan_failure(db, db_path):
    _add_prices(db_path, ("RS Alpha", "K1", "Screw", "Screw 3mm", 5, None, "1"))
    reply = price_list(db)
    assert reply.status == 500
    assert reply.body == {"error": "Failed to scan Stock Barang  123", "status": False}


def test_new_customer_gets_stock_prices(db, db_path):
    _add_stock(
        db_path,
        ("Plate", "Plate L", 3, 2500, 1, "P1"),
        ("Screw", "Screw 3mm", 10, 1000, 1, "S1"),
        ("Screw", "Screw 3mm", 4, 1000, 2, "S1"),
    )
    reply = list_by_customer(db, {"nama": "RS Gamma"})
    data = reply.body["data"]
    assert reply.status == 200
    assert [entry["nama"] for entry in data] == ["Plate L", "Screw 3mm"]
    assert [entry["id"] for entry in data] == [1, 2]
    assert all(entry["nama_Rumah_Sakit"] == "RS Gamma" for entry in data)
    assert all(entry["added"] == "0" and entry["diskon"] == 0 for entry in data)
    assert all(entry["name"] == entry["nama"] for entry in data)
    assert data[0]["price"] == "2500"


def test_existing_customer_gets_own_prices(db, db_path):
    _add_stock(db_path, ("Plate", "Plate L", 3, 2500, 1, "P1"))
    _add_prices(
        db_path,
        ("RS Alpha", "K1", "Screw", "Screw 3mm", 5, "1000", "1"),
        ("RS Alpha", "K2", "Nail", "Nail 2mm", 0, "700", "1"),
        ("RS Beta", "K3", "Plate", "Plate L", 0, "2500", "1"),
    )
    reply = list_by_customer(db, {"nama": "RS Alpha"})
    data = reply.body["data"]
    assert sorted(entry["nama"] for entry in data) == ["Nail 2mm", "Screw 3mm"]
    assert sorted(entry["id"] for entry in data) == [1, 2]
    assert all(entry["nama_Rumah_Sakit"] == "RS Alpha" for entry in data)
    assert all(entry["name"] == entry["nama"] for entry in data)


def test_new_customer_without_stock(db):
    reply = list_by_customer(db, {"nama": "RS Gamma"})
    assert reply.body == {"message": "Data Tidak Ditemukan !", "data": [], "status": True}


def test_missing_tables_fail_query(tmp_path):
    empty = Database(lambda: sqlite3.connect(tmp_path / "empty.db"))
    reply = list_by_customer(empty, {"nama": "RS Gamma"})
    assert reply.status == 500
    assert reply.body == {"error": "Failed to execute query", "status": False}


def test_bad_payload_is_rejected(db):
    with pytest.raises(ApiError):
        list_by_customer(db, "{not json")