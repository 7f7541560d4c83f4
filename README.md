# cursoapps

A collection of small, self-contained applications: command-line programs
and JSON web services built with Flask and SQLite.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Applications

### Inventory (`cursoapps.estoque`)

`Estoque` keeps `Item`s in memory, keyed by id. `add_item` merges the
quantity with an item of the same id and rejects zero or negative
quantities. `delete_item` removes a quantity and drops the item when none
is left. Both write a `LogEntry` to the audit log (`view_audit_log`).
`calculate_total_cost` gives the value of the stock. Errors are raised as
`InventoryError`, or as `NotFoundError` for unknown items. `find_by` filters
any iterable with a predicate and raises `NotFoundError` when nothing
matches. `Fornecedor` describes a supplier (`get_info`) and checks
availability (`verificar_disponibilidade`).

```
cursoapps-estoque
```

This runs a fixed demonstration: it fills a stock, removes part of it and
prints the items, the total value, the audit log, a search result and a
supplier.

### Bank accounts (`cursoapps.contas`)

`ContaCorrente` and `ContaPoupanca` are owned by a `Titular`. Both have
`depositar`, `sacar` and `obter_saldo`. `ContaCorrente` also has
`transferir`. The operations return messages or flags and do not raise.
`pagar_boleto` pays a bill from any account that has `sacar`.

```
cursoapps-contas
```

### Price fetcher (`cursoapps.buscador`)

Four simulated stores deliver `PriceDetail` quotes concurrently onto a
queue (`fetch_prices`). `show_price_avg` prints each price with the running
average.

```
cursoapps-buscador [--time-scale SECONDS]
```

`--time-scale` sets the seconds per unit of simulated latency. The default
is 1.

### Site monitor (`cursoapps.monitor`)

An interactive menu. It reads sites from a text file (`read_sites`) and
checks whether each one answers with HTTP 200 (`check_site`). Each result
is appended to a log file (`register_log`), and the menu can print that log
(`read_logs`).

```
cursoapps-monitor [--sites docs/sites.txt] [--log docs/log.txt]
```

### Pizzeria API (`cursoapps.pizzaria`)

A JSON API for `Pizza` and `Review` records. `PizzaStore` keeps them in a
JSON file. Prices may not be negative, and ratings must lie between 0 and 5
(`validate_pizza_price`, `validate_review_rating`). Routes:

- `GET /pizzas`
- `POST /pizzas`
- `GET`, `PUT` and `DELETE` on `/pizzas/<id>`
- `POST /pizzas/<id>/reviews`

```
cursoapps-pizzaria [--data dados/pizzas.json] [--host HOST] [--port PORT]
```

### Shop (`cursoapps.loja`)

HTML pages that list, create, edit and delete `Produto` records. The
records are stored in SQLite through `ProdutoRepository`. The server listens
on port 8080.

```
cursoapps-loja [--database alura_loja.db]
```

### Personalities API (`cursoapps.personalidades`)

A REST API over `Personalidade` records, stored in SQLite by
`PersonalidadeRepository`. Routed responses carry
`Content-Type: application/json`, and requests with an `Origin` header are
answered with `Access-Control-Allow-Origin: *`. Routes:

- `GET /api/personalidades`
- `POST /api/personalidades`
- `GET /api/personalidades/<id>`
- `DELETE /api/personalidades/<id>`

`PUT /api/personalidades/<id>` also deletes the record.

```
cursoapps-personalidades [--database personalidades.db] [--host HOST] [--port PORT]
```

### Students API (`cursoapps.alunos`)

A REST API for `Aluno` records. `validate_aluno` requires a name, an
11-digit CPF and a 9-digit RG. `AlunoRepository` stores the records in
SQLite, and deleting a record only marks it as deleted. Routes:

- `/alunos` and `/alunos/<id>` for the records (GET, POST, PATCH, DELETE)
- `/alunos/cpf/<cpf>` for lookup by CPF
- `/index` for an HTML listing
- `/<nome>` for a greeting
- `/assets` for static files from `./assets`

```
cursoapps-alunos [--database alunos.db] [--host HOST] [--port PORT]
```

### Items API (`cursoapps.itens`)

A REST API for `Item` records. `validate_item` requires a positive price, a
non-negative quantity and a six-character code. `decode_and_validate_item`
decodes a JSON body and raises `ItemError`. `ItemRepository` stores items in
SQLite, and `connect_database` opens the file named by `--dsn` or by the
`DB_DSN` environment variable. Routes:

- `GET` and `POST` on `/api/itens`
- `PUT /api/itens`
- `GET` and `DELETE` on `/api/itens/<id>`
- `GET /api/itens/codigo/<codigo>`

```
DB_DSN=itens.db cursoapps-itens [--host HOST] [--port 8080]
```

## Using the web applications from code

Each web application module exposes `create_app(...)`. It takes the store
or repository to use and returns a Flask application, which can be served
by any WSGI server or exercised with Flask's test client.

## What the package does not do

All storage is either a local SQLite file or a JSON file. The package does
not connect to a database server. The web applications run on Flask's
built-in server.