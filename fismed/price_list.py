"""Price lists: all agreed prices, and the prices offered to one customer."""

from __future__ import annotations

import logging
from typing import Any

from .customers import _scan
from .database import Database
from .models import Price, RequestID
from .payload import Reply, bind_input

log = logging.getLogger(__name__)

_QUERY_FAILED = {"error": "Failed to execute query", "status": False}
_PRICE_SCAN_FAILED = {"error": "Failed to scan Stock Barang  123", "status": False}


def _prices_reply(prices: list[Price]) -> Reply:
    if prices:
        return Reply(
            200,
            {
                "message": "Data Ditemukan !",
                "data": [price.to_dict() for price in prices],
                "status": True,
            },
        )
    return Reply(200, {"message": "Data Tidak Ditemukan !", "data": [], "status": True})


def price_list(db: Database) -> Reply:
    """List every price list entry."""
    with db.transaction() as tx:
        try:
            rows = tx.query(
                "SELECT nama_rumah_sakit, kode, variable, nama, price, diskon "
                "FROM price_list pl"
            )
        except Exception:
            return Reply(500, dict(_QUERY_FAILED))
        try:
            prices = [
                Price(
                    nama_rumah_sakit=hospital,
                    kode=kode,
                    variable=variable,
                    nama=nama,
                    price=price,
                    diskon=diskon,
                )
                for hospital, kode, variable, nama, price, diskon in (
                    _scan(row, (str, str, str, str, str, int)) for row in rows
                )
            ]
        except TypeError:
            return Reply(500, dict(_PRICE_SCAN_FAILED))
    return _prices_reply(prices)


def _stock_prices(tx: Any, hospital: str) -> list[Price] | Reply:
    try:
        rows = tx.query(
            """
            SELECT a.variable, a.nama, a.kode, CAST(a.price AS VARCHAR) AS price
            FROM stock a
            GROUP BY a.variable, a.nama, a.kode, a.price
            ORDER BY a.nama;
            """
        )
    except Exception:
        return Reply(500, dict(_QUERY_FAILED))
    try:
        return [
            Price(
                id=position,
                nama_rumah_sakit=hospital,
                kode=kode,
                variable=variable,
                nama=nama,
                name=nama,
                diskon=0,
                price=price,
                added="0",
            )
            for position, (variable, nama, kode, price) in enumerate(
                (_scan(row, (str, str, str, str)) for row in rows), start=1
            )
        ]
    except TypeError:
        return Reply(500, {"error": "Failed to scan Data", "status": False})


def _customer_prices(tx: Any, hospital: str) -> list[Price] | Reply:
    try:
        rows = tx.query(
            "SELECT nama_rumah_sakit, kode, variable, nama, price, diskon, added "
            "FROM price_list pl WHERE nama_rumah_sakit = $1",
            hospital,
        )
    except Exception:
        return Reply(500, dict(_QUERY_FAILED))
    try:
        return [
            Price(
                id=position,
                nama_rumah_sakit=name,
                kode=kode,
                variable=variable,
                nama=nama,
                name=nama,
                diskon=diskon,
                price=price,
                added=added,
            )
            for position, (name, kode, variable, nama, price, diskon, added) in enumerate(
                (_scan(row, (str, str, str, str, str, int, str)) for row in rows),
                start=1,
            )
        ]
    except TypeError:
        return Reply(500, dict(_PRICE_SCAN_FAILED))


def list_by_customer(db: Database, payload: Any) -> Reply:
    """List a customer's prices, or the stock prices when none are set for it yet."""
    request = bind_input(RequestID, None, payload)
    with db.transaction() as tx:
        try:
            (count,) = tx.query_row(
                "SELECT count(nama_rumah_sakit) FROM price_list pl "
                "WHERE nama_rumah_sakit = $1;",
                request.nama,
            )
        except Exception:
            count = 0

        if count == 0:
            log.info("Customer Baru, Harganya belum di set !")
            result = _stock_prices(tx, request.nama)
        else:
            log.info("Customer Lama, Sudah Set Harga !")
            result = _customer_prices(tx, request.nama)

    if isinstance(result, Reply):
        return result
    return _prices_reply(result)