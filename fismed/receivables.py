"""Settling receivables and payables by changing the status of income and expense rows."""

from __future__ import annotations

import logging
from typing import Any

from .database import Database
from .models import Pengeluaran
from .payload import Reply, bind_input

log = logging.getLogger(__name__)

_SETTLED_MESSAGE = "Data Berhasil Jadi Pengeluaran !"


def _settle(db: Database, table: str, payload: Any) -> Reply:
    record = bind_input(Pengeluaran, None, payload)
    with db.transaction() as tx:
        # Database failures are not answered here: they propagate to the caller.
        tx.execute(f"UPDATE {table} SET status = $2 WHERE id = $1", record.id, record.status)
        tx.commit()
    log.info("Status of %s row %s set to %s", table, record.id, record.status)
    return Reply(200, {"message": _SETTLED_MESSAGE, "data": [], "status": True})


def lunas(db: Database, payload: Any) -> Reply:
    """Set the status of an expense (payable) row."""
    return _settle(db, "pengeluaran", payload)


def lunas_piutang(db: Database, payload: Any) -> Reply:
    """Set the status of an income (receivable) row."""
    return _settle(db, "pemasukan", payload)