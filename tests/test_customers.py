import sqlite3

import pytest

from fismed.customers import dokter_list, dokter_list_by_name, get_by_search, get_tax_code
from fismed.database import Database

SCHEMA = """
CREATE TABLE customer (
    id INTEGER PRIMARY KEY,
    nama_perusahaan TEXT, address_perusahaan TEXT, npwp_address_perusahaan TEXT,
    npwp_perusahaan TEXT, ipak_number_perusahaan TEXT,
    alamat_pengirim_facture_perusahaan TEXT, kota_perusahaan TEXT,
    kode_pos_perusahaan TEXT, telpon_perusahaan TEXT, email_perusahaan TEXT,
    pic_perusahaan TEXT, alamat_pengirim_dokter TEXT, kota_dokter TEXT,
    kode_pos_dokter TEXT, telpon_dokter TEXT, email_dokter TEXT, pic_dokter TEXT,
    cp_dokter TEXT, tax_code INTEGER, term_of_payment TEXT, nama_dokter TEXT,
    kategori_divisi TEXT
);
CREATE TABLE performance_invoice (id INTEGER PRIMARY KEY, customer TEXT);
"""


@pytest.fixture
def path(tmp_path):
    p = tmp_path / "customers.db"
    conn = sqlite3.connect(p)
    conn.executescript(SCHEMA)
    conn.close()
    return p


def _db(path):
    return Database(lambda: sqlite3.connect(path))


def _run(path, sql, rows):
    conn = sqlite3.connect(path)
    conn.executemany(sql, rows)
    conn.commit()
    conn.close()


def _add_customers(path, rows):
    _run(
        path,
        "INSERT INTO customer (nama_perusahaan, address_perusahaan, tax_code, "
        "nama_dokter, kategori_divisi) VALUES (?, ?, ?, ?, ?)",
        rows,
    )


def test_tax_code_missing_table(path):
    reply = get_tax_code(_db(path))
    assert reply.status == 500
    assert reply.body["error"] == "Failed to execute tax code query"


def test_tax_code_empty_and_filled(path):
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE tax_code (id INTEGER PRIMARY KEY, tax TEXT)")
    conn.commit()
    conn.close()
    assert get_tax_code(_db(path)).body["tax_codes"] == "No tax codes available"
    _run(path, "INSERT INTO tax_code (id, tax) VALUES (?, ?)", [(1, "010"), (2, "070")])
    reply = get_tax_code(_db(path))
    assert reply.body["tax_codes"] == [
        {"id": 1, "tax_code": "010"},
        {"id": 2, "tax_code": "070"},
    ]


def test_dokter_list_by_name_distinct_sorted(path):
    _add_customers(
        path,
        [
            ("RS B", "", None, "DR ZAKI", "1"),
            ("RS A", "", None, "DR ANI", "1"),
            ("RS C", "", None, "DR ANI", "1"),
            ("RS D", "", None, "", "1"),
            ("RS E", "", None, None, "1"),
        ],
    )
    reply = dokter_list_by_name(_db(path))
    assert reply.body["data"] == [{"namaDokter": "DR ANI"}, {"namaDokter": "DR ZAKI"}]


def test_dokter_list_for_company(path):
    _add_customers(
        path,
        [
            ("RS A", "", None, None, "1"),
            ("RS A", "", None, "DR BUDI", "1"),
            ("RS B", "", None, "DR ANI", "1"),
        ],
    )
    reply = dokter_list(_db(path), {"nama": "RS A"})
    assert reply.body["data"] == [
        {"namaDokter": "DR BUDI"},
        {"namaDokter": "default_name"},
    ]


def test_dokter_list_not_found(path):
    reply = dokter_list(_db(path), {"nama": "RS X"})
    assert reply.body == {"message": "Data Tidak Ditemukan !", "data": [], "status": True}


def test_get_by_search_found(path):
    _add_customers(
        path,
        [
            ("RS A", "Jl. Satu", 5, "DR BUDI", "1"),
            ("RS A", "Jl. Dua", None, None, "1"),
            ("RS B", "Jl. Tiga", None, None, "2"),
        ],
    )
    _run(path, "INSERT INTO performance_invoice (customer) VALUES (?)", [("RS A",), ("RS A",)])
    reply = get_by_search(_db(path), {"name": "RS A"})
    body = reply.body
    assert body["message"] == "Data Ditemukan !"
    assert body["jumlah_pi"] == 2 * len(body["customer"])
    by_address = {c["address_company"]: c for c in body["customer"]}
    assert set(by_address) == {"Jl. Satu", "Jl. Dua"}
    assert by_address["Jl. Satu"]["tax_code_id"] == "5"
    assert by_address["Jl. Dua"]["tax_code_id"] == "0"
    assert by_address["Jl. Dua"]["docktor_name"] == ""
    assert by_address["Jl. Satu"]["name"] == "RS A"


def test_get_by_search_not_found(path):
    reply = get_by_search(_db(path), {"name": "RS X"})
    assert reply.body == {"message": "Data Tidak Ditemukan !", "Data": [], "status": True}


def test_get_by_search_null_category_fails_scan(path):
    _add_customers(path, [("RS A", "Jl. Satu", None, None, None)])
    reply = get_by_search(_db(path), {"name": "RS A"})
    assert reply.status == 500
    assert reply.body == {"error": "Failed to scan Data", "status": False}