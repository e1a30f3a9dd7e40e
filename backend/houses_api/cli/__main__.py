# backend/houses_api/cli/__main__.py
from __future__ import annotations

import argparse
import asyncio

from ..db import dispose_engine
from .seed_demo import DEMO_HOUSES, seed_demo


async def _run_seed(args: argparse.Namespace):
    try:
        return await seed_demo(count=args.count, reset=args.reset, with_bid=(not args.no_bid))
    finally:
        await dispose_engine()


def main() -> None:
    p = argparse.ArgumentParser(prog="houses_api.cli")
    sub = p.add_subparsers(dest="command", required=True)

    seed = sub.add_parser("seed", help="insert demo houses and a demo bid")
    seed.add_argument("--count", type=int, default=len(DEMO_HOUSES))
    seed.add_argument("--reset", action="store_true", help="delete all houses and bids first")
    seed.add_argument("--no-bid", action="store_true")

    args = p.parse_args()

    if args.command == "seed":
        out = asyncio.run(_run_seed(args))
        print(
            {
                "ok": True,
                "house_ids": out.house_ids,
                "bid_id": out.bid_id,
            }
        )


if __name__ == "__main__":
    main()
