"""URL routing: binds each API path to its handler."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from flask import Flask, Response, request

from . import auth, customers, hospitals, price_list, purchase_orders, receivables, warehouse
from .database import Database
from .payload import FORM_CONTENT_TYPES, ApiError, Reply

log = logging.getLogger(__name__)

# (method, path, handler, whether the handler takes the request body)
_ROUTES: tuple[tuple[str, str, Callable[..., Reply], bool], ...] = (
    ("POST", "/api/token-validate", auth.token_validate, True),
    ("POST", "/api/gudang/list", warehouse.gudang_list, False),
    ("POST", "/api/gudang/tambah", warehouse.tambah_gudang, True),
    ("POST", "/api/gudang/delete", warehouse.hapus_gudang, True),
    ("POST", "/api/price/list", price_list.price_list, False),
    ("POST", "/api/price/ListByCustomer", price_list.list_by_customer, True),
    ("POST", "/api/customer-profilling/get-tax-code", customers.get_tax_code, False),
    ("POST", "/api/customer-profilling/get-by-search", customers.get_by_search, True),
    ("POST", "/api/proforma-invoice/rs-list", hospitals.rumah_sakit_list, False),
    ("POST", "/api/proforma-invoice/supplier", hospitals.supplier_list, False),
    ("POST", "/api/proforma-invoice/dr-list", customers.dokter_list, True),
    ("POST", "/api/proforma-invoice/dr-listn", customers.dokter_list_by_name, False),
    ("POST", "/api/proforma-invoice/rs-lists", hospitals.rumah_sakit_list_s, False),
    ("POST", "/api/proforma-invoice/rs-listc", hospitals.rumah_sakit_list_c, False),
    ("POST", "/api/purchase-order/list", purchase_orders.list_po, False),
    ("POST", "/api/purchase-order/list-so", purchase_orders.list_po_so, False),
    ("POST", "/api/piutang/lunas", receivables.lunas_piutang, True),
    ("POST", "/api/hutang/lunas", receivables.lunas, True),
    ("GET", "/api/check", auth.health_check, False),
)


def _request_payload() -> Any:
    if request.headers.get("Content-Type") in FORM_CONTENT_TYPES:
        return request.form.to_dict()
    return request.get_data()


def _respond(reply: Reply) -> Response:
    if reply.body is None:
        return Response(status=reply.status)
    return Response(
        json.dumps(reply.body), status=reply.status, mimetype="application/json"
    )


def _view(handler: Callable[..., Reply], db: Database, takes_payload: bool) -> Callable[[], Response]:
    def view() -> Response:
        log.info("Handler hit: %s %s", request.method, request.path)
        try:
            reply = handler(db, _request_payload()) if takes_payload else handler(db)
        except ApiError as exc:
            reply = Reply(exc.status, exc.body)
        return _respond(reply)

    return view


def register_routes(app: Flask, db: Database) -> None:
    """Attach every API endpoint to the application, served from the given database."""
    log.info("Setting up routes")
    for method, path, handler, takes_payload in _ROUTES:
        app.add_url_rule(
            path,
            endpoint=path,
            view_func=_view(handler, db, takes_payload),
            methods=[method],
        )
    log.info("Routes setup completed")