"""Company lists: hospitals, suppliers and customers, one entry per company name."""

from __future__ import annotations

import logging

from .customers import _scan
from .database import Database
from .models import Customer
from .payload import Reply

log = logging.getLogger(__name__)

_ALL = ""
_SUPPLIERS = "WHERE kategori_divisi = '3'"
_NON_SUPPLIERS = "WHERE kategori_divisi != '3'"


def _list_query(condition: str) -> str:
    # One row per company name: the one with the lowest id, names in order, missing name last.
    return f"""
        SELECT id, name, address_company FROM (
            SELECT
                id,
                COALESCE(nama_perusahaan, 'default_name') AS name,
                COALESCE(address_perusahaan, 'default_address') AS address_company,
                nama_perusahaan,
                ROW_NUMBER() OVER (
                    PARTITION BY nama_perusahaan ORDER BY id ASC
                ) AS position
            FROM customer
            {condition}
        ) ranked
        WHERE position = 1
        ORDER BY nama_perusahaan IS NULL, nama_perusahaan ASC;
    """


def _company_reply(db: Database, condition: str) -> Reply:
    log.info("Get Rumah Sakit !")
    with db.transaction() as tx:
        try:
            rows = tx.query(_list_query(condition))
        except Exception:
            return Reply(500, {"error": "Failed to execute query", "status": False})
        try:
            companies = [
                Customer(id=row_id, name=name, address_company=address)
                for row_id, name, address in (
                    _scan(row, (int, str, str)) for row in rows
                )
            ]
        except TypeError as exc:
            return Reply(500, {"error": str(exc), "status": False})

    if companies:
        return Reply(
            200,
            {
                "message": "Data Ditemukan !",
                "data": [company.to_dict() for company in companies],
                "status": True,
            },
        )
    return Reply(200, {"message": "Data Tidak Ditemukan !", "data": [], "status": True})


def rumah_sakit_list(db: Database) -> Reply:
    """List every company once, with its lowest id and its address."""
    return _company_reply(db, _ALL)


def supplier_list(db: Database) -> Reply:
    """List the companies registered as suppliers."""
    return _company_reply(db, _SUPPLIERS)


def rumah_sakit_list_s(db: Database) -> Reply:
    """List the companies registered as suppliers (same as supplier_list)."""
    return _company_reply(db, _SUPPLIERS)


def rumah_sakit_list_c(db: Database) -> Reply:
    """List the companies that are not suppliers."""
    return _company_reply(db, _NON_SUPPLIERS)