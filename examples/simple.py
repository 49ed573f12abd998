from __future__ import annotations

import asyncio
import logging

from eventual import Env, Future, LoggingSink, Optional, Some, sequence, traverse

logging.basicConfig(level=logging.INFO)

PRICES = {"apple": 1.25, "pear": 0.8, "plum": 2.0}


async def fetch_price(item: str) -> float:
    await asyncio.sleep(0.01)
    if item not in PRICES:
        raise KeyError(item)
    return PRICES[item]


def price_or_zero(error: BaseException) -> Optional[float]:
    return Some(0.0) if isinstance(error, KeyError) else Optional.of(None)


async def main() -> None:
    env = Env(sink=LoggingSink(level=logging.WARNING))

    basket = traverse(["apple", "pear", "kiwi"], lambda item: Future.of(fetch_price(item)).recover(price_or_zero))
    total = basket.map(sum).and_then(lambda t: print(f"basket settled: {t}"), env=env)

    quotes = sequence([Future.of(fetch_price("apple")), Future.of(fetch_price("plum"))])
    cheapest = quotes.map(min).filter(lambda price: price < 1.0).recover(lambda _: Some(-1.0))

    report = total.chain(cheapest).run(lambda t, c: f"total={t:.2f} cheapest_under_1={c:.2f}")
    print(await report)


if __name__ == "__main__":
    asyncio.run(main())
