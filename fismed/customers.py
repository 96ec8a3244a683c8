"""Customer profiling lookups: tax codes, doctors and search by company name."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .database import Database
from .models import Customer, DoctorName, RequestID
from .payload import Reply, bind_input

log = logging.getLogger(__name__)

_SEARCH_FIELDS = (
    "id",
    "name",
    "address_company",
    "npwp_address",
    "npwp",
    "ipak_number",
    "facture_address",
    "city_facture",
    "zip_code_facture",
    "number_phone_facture",
    "email_facture",
    "pic_facture",
    "item_address",
    "city_item",
    "zip_code_item",
    "number_phone_item",
    "email_item",
    "pic_item",
    "contact_person",
    "tax_code_id",
    "top",
    "docktor_name",
    "kategori_divisi",
)

_SEARCH_QUERY = """
    SELECT
        id,
        COALESCE(nama_perusahaan, '') AS nama_company,
        COALESCE(address_perusahaan, '') AS address_company,
        COALESCE(npwp_address_perusahaan, '') AS npwp_address,
        COALESCE(npwp_perusahaan, '') AS npwp,
        COALESCE(ipak_number_perusahaan, '') AS ipak_number,
        COALESCE(alamat_pengirim_facture_perusahaan, '') AS facture_address,
        COALESCE(kota_perusahaan, '') AS city_facture,
        COALESCE(kode_pos_perusahaan, '') AS zip_code_facture,
        COALESCE(telpon_perusahaan, '') AS number_phone_facture,
        COALESCE(email_perusahaan, '') AS email_facture,
        COALESCE(pic_perusahaan, '') AS pic_facture,
        COALESCE(alamat_pengirim_dokter, '') AS item_address,
        COALESCE(kota_dokter, '') AS city_item,
        COALESCE(kode_pos_dokter, '') AS zip_code_item,
        COALESCE(telpon_dokter, '') AS number_phone_item,
        COALESCE(email_dokter, '') AS email_item,
        COALESCE(pic_dokter, '') AS pic_item,
        COALESCE(cp_dokter, '') AS contact_person,
        COALESCE(CAST(tax_code AS TEXT), '0') AS tax_code_id,
        COALESCE(term_of_payment, '') AS top,
        COALESCE(nama_dokter, '') AS nama_dokter,
        kategori_divisi
    FROM customer
    WHERE nama_perusahaan = $1;
"""


def _scan(row: Sequence[Any], kinds: Sequence[type]) -> Sequence[Any]:
    """Check a row against the expected column types, as a strict scan would."""
    if len(row) != len(kinds):
        raise TypeError(f"expected {len(kinds)} columns, got {len(row)}")
    for value, kind in zip(row, kinds):
        if value is None:
            raise TypeError(f"cannot scan NULL into {kind.__name__}")
        if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise TypeError(f"cannot scan {value!r} into int")
        if kind is str and not isinstance(value, str):
            raise TypeError(f"cannot scan {value!r} into str")
    return row


def get_tax_code(db: Database) -> Reply:
    """List all tax codes."""
    with db.transaction() as tx:
        try:
            rows = tx.query("select id, tax from tax_code tc")
        except Exception:
            return Reply(
                500, {"error": "Failed to execute tax code query", "status": False}
            )
        try:
            tax_codes = [
                {"id": tax_id, "tax_code": tax}
                for tax_id, tax in (_scan(row, (int, str)) for row in rows)
            ]
        except TypeError:
            return Reply(500, {"error": "Failed to scan tax code", "status": False})

    if tax_codes:
        return Reply(
            200, {"message": "Data Ditemukan !", "tax_codes": tax_codes, "status": True}
        )
    return Reply(
        200,
        {
            "message": "Data Tidak Ditemukan !",
            "tax_codes": "No tax codes available",
            "status": True,
        },
    )


def _doctor_reply(db: Database, sql: str, *args: Any) -> Reply:
    with db.transaction() as tx:
        try:
            rows = tx.query(sql, *args)
        except Exception:
            return Reply(500, {"error": "Failed to execute query", "status": False})
        try:
            doctors = [DoctorName(nama=_scan(row, (str,))[0]) for row in rows]
        except TypeError as exc:
            return Reply(500, {"error": str(exc), "status": False})

    if doctors:
        return Reply(
            200,
            {
                "message": "Data Ditemukan !",
                "data": [doctor.to_dict() for doctor in doctors],
                "status": True,
            },
        )
    return Reply(200, {"message": "Data Tidak Ditemukan !", "data": [], "status": True})


def dokter_list_by_name(db: Database) -> Reply:
    """List every distinct, non-empty doctor name in alphabetical order."""
    log.info("Get doctor names")
    return _doctor_reply(
        db,
        """
        SELECT COALESCE(nama_dokter, 'default_name') AS name
        FROM customer
        WHERE nama_dokter IS NOT NULL AND nama_dokter <> ''
        GROUP BY nama_dokter
        ORDER BY nama_dokter ASC;
        """,
    )


def dokter_list(db: Database, payload: Any) -> Reply:
    """List the distinct doctors recorded for one company, missing names last."""
    request = bind_input(RequestID, None, payload)
    log.info("Get doctors of %s", request.nama)
    return _doctor_reply(
        db,
        """
        SELECT COALESCE(nama_dokter, 'default_name') AS name
        FROM customer
        WHERE nama_perusahaan = $1
        GROUP BY nama_dokter
        ORDER BY nama_dokter IS NULL, nama_dokter ASC;
        """,
        request.nama,
    )


def get_by_search(db: Database, payload: Any) -> Reply:
    """Find customers by company name and count their proforma invoices."""
    request = bind_input(Customer, None, payload)
    log.info("Data Input : %s", request)

    with db.transaction() as tx:
        try:
            rows = tx.query(_SEARCH_QUERY, request.name)
        except Exception as exc:
            return Reply(500, {"error": str(exc), "status": False})

        kinds = (int,) + (str,) * (len(_SEARCH_FIELDS) - 1)
        try:
            customers = [
                Customer(**dict(zip(_SEARCH_FIELDS, _scan(row, kinds)))) for row in rows
            ]
        except TypeError as exc:
            log.error("Error Scan Data : %s", exc)
            return Reply(500, {"error": "Failed to scan Data", "status": False})

        invoice_count = 0
        for customer in customers:
            log.info("Customer : %s", customer)
            try:
                (count,) = tx.query_row(
                    "SELECT COUNT(*) AS total_invoices FROM performance_invoice "
                    "WHERE customer = $1;",
                    request.name,
                )
            except Exception as exc:
                return Reply(500, {"error": str(exc), "status": False})
            invoice_count += count

    if customers:
        return Reply(
            200,
            {
                "message": "Data Ditemukan !",
                "jumlah_pi": invoice_count,
                "customer": [customer.to_dict() for customer in customers],
                "status": True,
            },
        )
    return Reply(200, {"message": "Data Tidak Ditemukan !", "Data": [], "status": True})