"""Warehouse (gudang) listing, creation and removal."""

from __future__ import annotations

import logging
from typing import Any

from .customers import _scan
from .database import Database
from .models import Gudang
from .payload import Reply, bind_input

log = logging.getLogger(__name__)


def gudang_list(db: Database) -> Reply:
    """List all warehouses ordered by id."""
    with db.transaction() as tx:
        try:
            rows = tx.query("SELECT id, nama_gudang, lokasi FROM gudang ORDER BY id")
        except Exception:
            return Reply(500, {"error": "Failed to execute query", "status": False})
        try:
            warehouses = [
                Gudang(id=row_id, nama=name, lokasi=location)
                for row_id, name, location in (
                    _scan(row, (int, str, str)) for row in rows
                )
            ]
        except TypeError:
            return Reply(500, {"error": "Failed to scan Data", "status": False})

    if warehouses:
        return Reply(
            200,
            {
                "message": "Data Ditemukan !",
                "data": [warehouse.to_dict() for warehouse in warehouses],
                "status": True,
            },
        )
    return Reply(200, {"message": "Data Tidak Ditemukan !", "data": [], "status": True})


def tambah_gudang(db: Database, payload: Any) -> Reply:
    """Add a warehouse with the given name and location."""
    warehouse = bind_input(Gudang, None, payload)
    with db.transaction() as tx:
        try:
            tx.execute(
                "INSERT INTO gudang (nama_gudang, lokasi) VALUES ($1, $2)",
                warehouse.nama,
                warehouse.lokasi,
            )
        except Exception as exc:
            tx.rollback()
            log.error("Insert failed: %s", exc)
            return Reply(400, {"message": str(exc)})
        try:
            tx.commit()
        except Exception as exc:
            log.error("Failed to commit transaction: %s", exc)
            return Reply(400, {"message": str(exc)})
    return Reply(200, {"message": "Data Berhasil Ditambahkan !", "status": True})


def hapus_gudang(db: Database, payload: Any) -> Reply:
    """Delete the warehouse with the given id."""
    warehouse = bind_input(Gudang, None, payload)
    with db.transaction() as tx:
        try:
            tx.execute("DELETE FROM gudang WHERE id = $1", warehouse.id)
        except Exception as exc:
            tx.rollback()
            log.error("Delete failed: %s", exc)
            return Reply(400, {"message": str(exc)})
        try:
            tx.commit()
        except Exception as exc:
            log.error("Failed to commit transaction: %s", exc)
            return Reply(400, {"message": str(exc)})
    return Reply(200, {"message": "Data Berhasil Dihapus!", "status": True})