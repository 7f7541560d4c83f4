import io
import queue
import statistics
from datetime import datetime

import pytest

from cursoapps.buscador.prices import (
    PriceDetail,
    fetch_and_send_multiple_prices,
    fetch_price_from_site01,
    fetch_price_from_site02,
    fetch_price_from_site03,
    fetch_prices,
    main,
    show_price_avg,
)


def drain(q):
    items = []
    while not q.empty():
        items.append(q.get_nowait())
    return items


@pytest.mark.parametrize(
    "fetch, store",
    [
        (fetch_price_from_site01, "A"),
        (fetch_price_from_site02, "B"),
        (fetch_price_from_site03, "C"),
    ],
)
def test_single_site_fetch(fetch, store):
    price = fetch(0)
    assert price.store_name == store
    assert 0 <= price.value < 100


def test_multiple_prices_from_store_d():
    q = queue.Queue()
    fetch_and_send_multiple_prices(q, 0)
    items = drain(q)
    assert [p.store_name for p in items] == ["D", "D", "D"]
    assert all(0 <= p.value < 100 for p in items)


def test_fetch_prices_sends_all_then_none():
    q = queue.Queue()
    fetch_prices(q, 0)
    items = drain(q)
    assert items[-1] is None
    assert sorted(p.store_name for p in items[:-1]) == ["A", "B", "C", "D", "D", "D"]


def test_fetch_prices_order_follows_latency():
    q = queue.Queue()
    fetch_prices(q, 0.1)
    items = drain(q)
    assert [p.store_name for p in items[:-1]] == ["B", "C", "A", "D", "D", "D"]


def test_show_price_avg_returns_mean_and_prints_lines():
    moment = datetime(2024, 1, 2, 3, 4, 5)
    values = [10.0, 30.0, 35.5]
    q = queue.Queue()
    for value in values:
        q.put(PriceDetail("X", value, moment))
    q.put(None)
    out = io.StringIO()
    result = show_price_avg(q, out)
    assert result == pytest.approx(statistics.mean(values))
    lines = out.getvalue().splitlines()
    assert len(lines) == len(values)
    assert lines[0] == (
        "[02-Jan-2024 03:04:05] | Store: X | R$ 10.00 | Preço médio até agr: R$ 10.00"
    )


def test_show_price_avg_with_no_prices():
    q = queue.Queue()
    q.put(None)
    out = io.StringIO()
    assert show_price_avg(q, out) is None
    assert out.getvalue() == ""


def test_main_runs_end_to_end(capsys):
    assert main(["--time-scale", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum("| Store: " in line for line in lines) == 6
    assert lines[-1].startswith("Tempo total: ")


def test_main_rejects_negative_scale():
    with pytest.raises(SystemExit):
        main(["--time-scale", "-1"])