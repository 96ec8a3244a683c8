# fismed

A JSON-over-HTTP back end for a medical-supply distributor. It serves the
records a small trading office looks up every day:

- customers (hospitals, non-hospital buyers and suppliers) and their doctors,
- tax codes,
- warehouses (*gudang*),
- per-customer price lists,
- purchase orders and their accepted copies,
- payables (*hutang*) and receivables (*piutang*), whose status can be changed.

## Installing

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Running the server

```
fismed
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--database` | `fismed.db` | SQLite database file to serve from |
| `--host` | `0.0.0.0` | address to listen on |
| `--port` | `8080` | port to listen on |

Every response carries permissive CORS headers
(`Access-Control-Allow-Origin: *`, methods `POST, GET`), and `OPTIONS`
requests are answered with `204 No Content`.

The server does not create the database schema. The tables it reads and
writes (`users`, `customer`, `tax_code`, `gudang`, `price_list`, `stock`,
`purchase_order`, `purchase_order_copy`, `performance_invoice`, `pemasukan`,
`pengeluaran`) must already exist.

## Using it from Python

`fismed.database.Database` wraps any DB-API connect function. Statements are
written with `$1, $2, …` placeholders and rewritten for the driver's
`paramstyle` (`"qmark"`, `"format"` or `"numeric"`; default `"qmark"`).
Each `Database.transaction()` opens a connection and yields a `Transaction`
with `query`, `query_row`, `execute`, `commit` and `rollback`; it is rolled
back on exit unless committed. `Database.ping()` checks that the database
answers.

```python
import sqlite3

from fismed.app import create_app
from fismed.database import Database

db = Database(lambda: sqlite3.connect("fismed.db"))
app = create_app(db)
app.run(port=8080)
```

`create_app` registers every endpoint through
`fismed.routes.register_routes`. The handlers are plain functions that take
the database (and, where they need one, the request payload: a mapping, JSON
bytes or text) and return a `fismed.payload.Reply` holding the HTTP status and
the JSON body:

```python
from fismed.price_list import list_by_customer
from fismed.warehouse import gudang_list, tambah_gudang

tambah_gudang(db, {"nama_gudang": "Gudang Utama", "alamat_gudang": "Jakarta"})
reply = gudang_list(db)
print(reply.status, reply.body)
print(list_by_customer(db, {"nama": "RS EXAMPLE"}).body)
```

A payload that cannot be decoded raises `fismed.payload.ApiError`; the HTTP
layer answers it with status 400 and an empty body. Over HTTP, request bodies
may be sent as JSON or as `application/x-www-form-urlencoded`.

The records exchanged are dataclasses in `fismed.models`, each with
`to_dict()` and `from_dict()` that use the JSON field names and leave out
empty fields where the API omits them.

## Endpoints

All endpoints are `POST` unless noted.

| Path | Handler | Purpose |
| --- | --- | --- |
| `/api/token-validate` | `auth.token_validate` | check a stored session token's expiry; an expired token is cleared |
| `/api/check` (GET) | `auth.health_check` | database health check |
| `/api/customer-profilling/get-tax-code` | `customers.get_tax_code` | list tax codes |
| `/api/customer-profilling/get-by-search` | `customers.get_by_search` | customer details and invoice count by company name |
| `/api/proforma-invoice/dr-list` | `customers.dokter_list` | doctors of one company |
| `/api/proforma-invoice/dr-listn` | `customers.dokter_list_by_name` | all doctor names |
| `/api/proforma-invoice/rs-list` | `hospitals.rumah_sakit_list` | all companies |
| `/api/proforma-invoice/supplier` | `hospitals.supplier_list` | suppliers only |
| `/api/proforma-invoice/rs-lists` | `hospitals.rumah_sakit_list_s` | suppliers only |
| `/api/proforma-invoice/rs-listc` | `hospitals.rumah_sakit_list_c` | companies that are not suppliers |
| `/api/gudang/list` | `warehouse.gudang_list` | list warehouses |
| `/api/gudang/tambah` | `warehouse.tambah_gudang` | add a warehouse |
| `/api/gudang/delete` | `warehouse.hapus_gudang` | remove a warehouse by id |
| `/api/price/list` | `price_list.price_list` | full price list |
| `/api/price/ListByCustomer` | `price_list.list_by_customer` | a customer's prices, or stock prices when none are set yet |
| `/api/purchase-order/list` | `purchase_orders.list_po` | purchase orders |
| `/api/purchase-order/list-so` | `purchase_orders.list_po_so` | accepted purchase orders |
| `/api/hutang/lunas` | `receivables.lunas` | set the status of a payable |
| `/api/piutang/lunas` | `receivables.lunas_piutang` | set the status of a receivable |

A successful listing looks like

```json
{"message": "Data Ditemukan !", "data": [...], "status": true}
```

and a failed request carries `"status": false` with an `error` or `message`
field.

## What it does not do

- There is no login endpoint: it only validates tokens that are already
  stored in the `users` table; issuing them is left to another service.
- Records are read, not created, for customers, stock, prices and purchase
  orders: there are no endpoints to add customers, set prices, post, edit or
  approve purchase orders, or manage stock levels.
- There are no proforma-invoice endpoints beyond the company and doctor
  lookups above, and no listings of income or expense records; only their
  status can be changed.

## Running the tests

```
pytest
```