"""Concurrent price fetching from several stores with a running average."""

from __future__ import annotations

import argparse
import queue
import random
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, TextIO


@dataclass(frozen=True)
class PriceDetail:
    """A price quoted by a store at a moment."""

    store_name: str
    value: float
    timestamp: datetime


def _quote(store_name: str, delay: float) -> PriceDetail:
    time.sleep(delay)
    return PriceDetail(store_name, random.random() * 100, datetime.now())


def fetch_price_from_site01(time_scale: float = 1.0) -> PriceDetail:
    """Fetch a price from store A, which takes three time units."""
    return _quote("A", 3 * time_scale)


def fetch_price_from_site02(time_scale: float = 1.0) -> PriceDetail:
    """Fetch a price from store B, which takes one time unit."""
    return _quote("B", 1 * time_scale)


def fetch_price_from_site03(time_scale: float = 1.0) -> PriceDetail:
    """Fetch a price from store C, which takes two time units."""
    return _quote("C", 2 * time_scale)


def fetch_and_send_multiple_prices(price_queue: queue.Queue, time_scale: float = 1.0) -> None:
    """After six time units, put three prices from store D on the queue."""
    time.sleep(6 * time_scale)
    prices = [random.random() * 100 for _ in range(3)]
    for price in prices:
        price_queue.put(PriceDetail("D", price, datetime.now()))


def _send(
    price_queue: queue.Queue,
    fetch: Callable[[float], PriceDetail],
    time_scale: float,
) -> None:
    price_queue.put(fetch(time_scale))


def fetch_prices(price_queue: queue.Queue, time_scale: float = 1.0) -> None:
    """Fetch from every store at once, then put ``None`` to mark the end."""
    try:
        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [
                pool.submit(_send, price_queue, fetch, time_scale)
                for fetch in (
                    fetch_price_from_site01,
                    fetch_price_from_site02,
                    fetch_price_from_site03,
                )
            ]
            futures.append(
                pool.submit(fetch_and_send_multiple_prices, price_queue, time_scale)
            )
        for future in futures:
            future.result()
    finally:
        price_queue.put(None)


def show_price_avg(price_queue: queue.Queue, out: TextIO | None = None) -> float | None:
    """Print each price with the running average until ``None`` arrives.

    Returns the final average, or ``None`` when no price was received.
    """
    stream = sys.stdout if out is None else out
    total = 0.0
    count = 0
    average: float | None = None
    while (price := price_queue.get()) is not None:
        total += price.value
        count += 1
        average = total / count
        print(
            f"[{price.timestamp:%d-%b-%Y %H:%M:%S}] | Store: {price.store_name} "
            f"| R$ {price.value:.2f} | Preço médio até agr: R$ {average:.2f}",
            file=stream,
        )
    return average


def main(argv: list[str] | None = None) -> int:
    """Fetch prices concurrently, print them and the total time taken."""
    parser = argparse.ArgumentParser(description="Busca de preços concorrente")
    parser.add_argument(
        "--time-scale",
        type=float,
        default=1.0,
        help="seconds per time unit of simulated latency (default: 1)",
    )
    args = parser.parse_args(argv)
    if args.time_scale < 0:
        parser.error("--time-scale must not be negative")

    start = time.monotonic()
    price_queue: queue.Queue = queue.Queue(maxsize=4)
    fetcher = threading.Thread(target=fetch_prices, args=(price_queue, args.time_scale))
    fetcher.start()
    show_price_avg(price_queue)
    fetcher.join()
    print(f"Tempo total: {time.monotonic() - start:.3f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())