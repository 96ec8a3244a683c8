"""Purchase order listings, for live orders and for accepted (copied) orders."""

from __future__ import annotations

from .customers import _scan
from .database import Database
from .models import PurchaseOrder
from .payload import Reply

_FIELDS = (
    "id",
    "nama_suplier",
    "nomor_po",
    "tanggal",
    "catatan_po",
    "prepared_by",
    "prepared_jabatan",
    "approved_by",
    "approved_jabatan",
    "status",
    "sub_total",
    "pajak",
    "total",
)

_KINDS = (int,) + (str,) * (len(_FIELDS) - 1)


def _select_orders(table: str) -> str:
    """Build the listing statement; missing values come back as 0 or ''."""
    columns = ",\n    ".join(
        f"COALESCE({name}, {0 if kind is int else repr('')}) AS {name}"
        for name, kind in zip(_FIELDS, _KINDS)
    )
    return f"SELECT\n    {columns}\nFROM {table} ORDER BY id ASC;"


def _orders_reply(db: Database, table: str) -> Reply:
    with db.transaction() as tx:
        try:
            rows = tx.query(_select_orders(table))
        except Exception:
            return Reply(500, {"error": "Failed to execute query", "status": False})
        try:
            orders = [
                PurchaseOrder(**dict(zip(_FIELDS, _scan(row, _KINDS)))) for row in rows
            ]
        except TypeError as exc:
            return Reply(500, {"error": str(exc), "status": False})

    if not orders:
        return Reply(200, {"message": "Data Tidak Ditemukan !", "data": [], "status": True})
    return Reply(
        200,
        {
            "message": "Data Ditemukan !",
            "data": [order.to_dict() for order in orders],
            "status": True,
        },
    )


def list_po(db: Database) -> Reply:
    """List all purchase orders by id."""
    return _orders_reply(db, "purchase_order")


def list_po_so(db: Database) -> Reply:
    """List the accepted purchase orders kept in the copy table, by id."""
    return _orders_reply(db, "purchase_order_copy")